"""
Geometric utilities for movement path computations.

Coordinates are screen coordinates: X grows to the right, Y grows downward.
Angles are in degrees, counter-clockwise, 0 pointing along +X.
"""

import numpy as np


def distance_to_point(
    p1_x: float,
    p1_y: float,
    p2_x: float,
    p2_y: float
) -> float:
    """
    Compute Euclidean distance between two points.

    Args:
        p1_x, p1_y: First point
        p2_x, p2_y: Second point

    Returns:
        Euclidean distance
    """
    dx = np.abs(np.float64(p2_x) - np.float64(p1_x))
    dy = np.abs(np.float64(p2_y) - np.float64(p1_y))
    return float(np.sqrt(dx * dx + dy * dy))


def bearing_deg(
    p1_x: float,
    p1_y: float,
    p2_x: float,
    p2_y: float
) -> float:
    """
    Compute the heading from point 1 towards point 2.

    The Y difference is inverted so a destination lower on screen gives a
    negative (clockwise) bearing.

    Args:
        p1_x, p1_y: Origin point
        p2_x, p2_y: Target point

    Returns:
        Bearing in degrees, in [-180, 180]
    """
    dx = np.float64(p2_x) - np.float64(p1_x)
    dy = -(np.float64(p2_y) - np.float64(p1_y))
    return float(np.degrees(np.arctan2(dy, dx)))
