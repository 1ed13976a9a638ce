"""Shared helper functions for tankoid."""

from decimal import Decimal, ROUND_HALF_EVEN
from typing import Optional

import numpy as np

MS_PER_SECOND = 1000
NO_CORRECTION = 100.0
HALF_TURN_DEG = 180.0
FULL_TURN_DEG = 360.0


def normalize_angle_deg(angle: float) -> float:
    """Normalize angle to [-180, 180] degrees."""
    if not np.isfinite(angle) or -HALF_TURN_DEG <= angle <= HALF_TURN_DEG:
        return angle
    wrapped = float(np.remainder(angle + HALF_TURN_DEG, FULL_TURN_DEG) - HALF_TURN_DEG)
    # positive half turns stay at +180
    if wrapped == -HALF_TURN_DEG and angle > 0:
        wrapped = HALF_TURN_DEG
    return wrapped


def corrected_speed(speed: float, speed_correction: Optional[float] = None) -> float:
    """
    Apply a percentual speed correction.

    Args:
        speed: Nominal speed (units/s or deg/s)
        speed_correction: Percentage of the nominal speed, 100 is no correction.
            None leaves the speed untouched.

    Returns:
        Effective speed
    """
    if speed_correction is None:
        return speed
    return (speed * speed_correction) / NO_CORRECTION


def inverse_corrected_speed(speed: float, speed_correction: Optional[float] = None) -> float:
    """
    Apply a percentual speed correction as ``speed * 100 / correction``.

    Agrees with `corrected_speed` only at 100: a correction below 100 makes
    the result faster, above 100 slower. Used for tank rotation.
    A zero correction gives inf instead of raising.
    """
    if speed_correction is None:
        return speed
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(speed) * NO_CORRECTION, np.float64(speed_correction)))


def duration_ms(amount: float, speed: float) -> float:
    """
    Time in milliseconds needed to cover `amount` at `speed`.

    A zero speed gives inf (nan for a zero amount) instead of raising.
    The sign follows amount / speed.

    Args:
        amount: Distance (units) or rotation (degrees)
        speed: Rate in amount per second

    Returns:
        Duration in milliseconds
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        seconds = np.divide(np.float64(amount), np.float64(speed))
    return float(seconds * MS_PER_SECOND)


def format_decimal(value: float, places: int = 2) -> str:
    """
    Format a number like the ``#.##`` decimal pattern.

    Rounds the exact binary value half-even to `places` decimals and drops
    trailing zeros, so 5.0 -> "5" and 2.50 -> "2.5".
    """
    if not np.isfinite(value):
        return str(value)
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_EVEN)
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
