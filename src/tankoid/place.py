"""
2D place on the playing field.
"""

from typing import NamedTuple

from tankoid.utils.helpers import format_decimal


class Place(NamedTuple):
    """
    Immutable point in screen coordinates.

    Any object exposing numeric `x` and `y` attributes can be used where a
    Place is expected; this is the package's own implementation.
    """

    x: float
    y: float

    def __str__(self) -> str:
        return f"{format_decimal(self.x)}, {format_decimal(self.y)}"
