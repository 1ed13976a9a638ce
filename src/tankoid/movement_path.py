"""
Movement path for a tank travelling from one place to another.

Derives the distance, required rotation and the time needed to turn and
drive, optionally with a percentual speed correction.
"""

import logging
from typing import Optional

from tankoid.utils.geometry import bearing_deg, distance_to_point
from tankoid.utils.helpers import (
    HALF_TURN_DEG,
    corrected_speed,
    duration_ms,
    format_decimal,
    inverse_corrected_speed,
    normalize_angle_deg,
)

logger = logging.getLogger(__name__)


class MovementPath:
    """
    Route a tank takes from a starting place to a destination place.

    The path is read-only: every query recomputes from the values given at
    construction. Places are referenced, never copied or modified.
    """

    def __init__(
        self,
        starting_place,
        destination_place,
        starting_angle: float,
        movement_speed: float,
        rotation_speed: float
    ):
        """
        Args:
            starting_place: Place (any object with x, y) the tank starts at
            destination_place: Place the tank drives to
            starting_angle: Current facing of the tank (degrees)
            movement_speed: Driving speed (units/s), expected > 0
            rotation_speed: Turning speed (degrees/s), expected > 0
        """
        self._starting_place = starting_place
        self._destination_place = destination_place
        self._starting_angle = starting_angle
        self._movement_speed = movement_speed
        self._rotation_speed = rotation_speed
        logger.debug("created %r", self)

    @property
    def starting_place(self):
        return self._starting_place

    @property
    def destination_place(self):
        return self._destination_place

    @property
    def starting_angle(self) -> float:
        return self._starting_angle

    @property
    def movement_speed(self) -> float:
        return self._movement_speed

    @property
    def rotation_speed(self) -> float:
        return self._rotation_speed

    def distance(self) -> float:
        """
        Straight-line distance between the starting and destination place.

        The route the tank actually drives may be longer.
        """
        return distance_to_point(
            self._starting_place.x, self._starting_place.y,
            self._destination_place.x, self._destination_place.y
        )

    def rotation_angle(self) -> float:
        """
        Rotation relative to the starting angle needed to face the destination.

        Returns:
            Signed angle in degrees within [-180, 180], positive is
            counter-clockwise on screen
        """
        target = bearing_deg(
            self._starting_place.x, self._starting_place.y,
            self._destination_place.x, self._destination_place.y
        )
        rotation = normalize_angle_deg(target - self._starting_angle)

        assert -HALF_TURN_DEG <= rotation <= HALF_TURN_DEG

        return rotation

    def movement_duration(self, speed_correction: Optional[float] = None) -> float:
        """
        Time needed to drive the path.

        Args:
            speed_correction: Percentage applied to the movement speed,
                100 (or None) is no correction

        Returns:
            Duration in milliseconds
        """
        speed = corrected_speed(self._movement_speed, speed_correction)
        return duration_ms(self.distance(), speed)

    def rotation_duration(self, speed_correction: Optional[float] = None) -> float:
        """
        Time needed to turn from the starting angle towards the destination.

        Args:
            speed_correction: Correction applied as rotation_speed * 100 / correction,
                100 (or None) is no correction. Unlike the movement correction,
                values below 100 shorten the turn

        Returns:
            Duration in milliseconds, never negative
        """
        speed = inverse_corrected_speed(self._rotation_speed, speed_correction)
        return abs(duration_ms(self.rotation_angle(), speed))

    def total_duration(
        self,
        movement_correction: Optional[float] = None,
        rotation_correction: Optional[float] = None
    ) -> float:
        """Time to turn towards the destination and then drive there (ms)."""
        return (
            self.rotation_duration(rotation_correction)
            + self.movement_duration(movement_correction)
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._starting_place!r}, "
            f"{self._destination_place!r}, starting_angle={self._starting_angle!r}, "
            f"movement_speed={self._movement_speed!r}, "
            f"rotation_speed={self._rotation_speed!r})"
        )

    def __str__(self) -> str:
        return (
            f"From: ({self._starting_place}), to: ({self._destination_place}), "
            f"distance: {format_decimal(self.distance())}, "
            f"rotation angle: {format_decimal(self.rotation_angle())}"
        )
