"""Internal utilities and helper functions."""

from tankoid.utils.helpers import (
    normalize_angle_deg,
    corrected_speed,
    inverse_corrected_speed,
    duration_ms,
    format_decimal,
)
from tankoid.utils.geometry import distance_to_point, bearing_deg

__all__ = [
    "normalize_angle_deg",
    "corrected_speed",
    "inverse_corrected_speed",
    "duration_ms",
    "format_decimal",
    "distance_to_point",
    "bearing_deg",
]
