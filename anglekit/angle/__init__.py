"""Angle value types and the operations defined on them.

Modules:
    - basic_angle: BasicAngle and the built-in Degree, Radian, Gradian
    - normalization: pure range reduction of magnitudes
    - cast: angle_cast, the explicit conversion between angle types
    - rounding: ceil, floor and round preserving the angle type
"""

from .basic_angle import BasicAngle, Degree, Gradian, Radian
from .cast import angle_cast
from .normalization import normalize_positive, normalize_symmetric
from .rounding import ceil, floor, round  # noqa: A004

__all__ = [
    "BasicAngle",
    "Degree",
    "Radian",
    "Gradian",
    "angle_cast",
    "normalize_symmetric",
    "normalize_positive",
    "ceil",
    "floor",
    "round",
]
