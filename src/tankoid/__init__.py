"""
Movement kinematics for Tankoid tanks: distance, rotation and the time
needed to turn towards and drive to a destination.
"""

from tankoid.__about__ import __version__
from tankoid.place import Place
from tankoid.movement_path import MovementPath

__all__ = [
    "__version__",
    "Place",
    "MovementPath",
]
