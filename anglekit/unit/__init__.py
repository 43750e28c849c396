"""Angular unit descriptors.

A unit descriptor is a stateless class whose only job is to state the
semicircle of its unit: the magnitude of half a turn. Angle types are
specialized with a descriptor, and every conversion and trigonometric
function reads the descriptor's SEMICIRCLE and nothing else.

Built-in Units:
    - DegreeUnit: 180 per semicircle
    - RadianUnit: pi per semicircle
    - GradianUnit: 200 per semicircle

Custom Units:
    >>> from anglekit.unit import AngleUnit
    >>> class BinaryDegreeUnit(AngleUnit):
    ...     SEMICIRCLE = 128  # 256 steps per turn
    ...     SYMBOL = "brad"
"""

from .unit_angle import DegreeUnit, GradianUnit, RadianUnit
from .unit_base import AngleUnit, SemicircleUnit, check_unit

__all__ = [
    "AngleUnit",
    "SemicircleUnit",
    "check_unit",
    "DegreeUnit",
    "RadianUnit",
    "GradianUnit",
]
