"""Unit-safe angles with explicit conversion and unit-aware trigonometry.

anglekit wraps a numeric magnitude in a type that records, in the class
itself, which angular unit the magnitude is expressed in. Angles of the same
type add, subtract, scale, compare and normalize like numbers; angles of
different types never mix without an explicit angle_cast, and mixing them
raises UnitMismatchError.

Package Layout:
    - anglekit.unit: unit descriptors (DegreeUnit, RadianUnit, GradianUnit, AngleUnit)
    - anglekit.angle: BasicAngle, Degree, Radian, Gradian, angle_cast, rounding
    - anglekit.trig: sin, cos, tan, asin, acos, atan, atan2
    - anglekit.literals: deg, rad, grad, parse_angle
    - anglekit.cli: the ``anglekit`` command

Example:
    >>> from anglekit import Degree, Gradian, Radian, angle_cast, asin, sin
    >>>
    >>> heading = Degree(45.0)
    >>> heading *= 10
    >>> heading.normalized()  # Degree(90.0)
    >>>
    >>> angle_cast(Radian, Degree(180))  # Radian(3.141592653589793)
    >>> angle_cast(Gradian, Degree(90))  # Gradian(100.0), up to rounding
    >>>
    >>> sin(Degree(150))  # ~0.5
    >>> asin(0.5, Degree)  # ~Degree(30.0)
    >>>
    >>> # heading + Radian(1.0)  # UnitMismatchError: convert with angle_cast
    >>>
    >>> from anglekit import BasicAngle, DegreeUnit
    >>> IntDegree = BasicAngle[int, DegreeUnit]
    >>> IntDegree(42) / 5  # BasicAngle[int, DegreeUnit](8)
"""

from .angle import (
    BasicAngle,
    Degree,
    Gradian,
    Radian,
    angle_cast,
    ceil,
    floor,
    normalize_positive,
    normalize_symmetric,
    round,  # noqa: A004
)
from .exceptions import AngleError, AngleParseError, InvalidUnitError, UnitMismatchError
from .literals import deg, grad, parse_angle, rad
from .trig import acos, asin, atan, atan2, cos, sin, tan
from .unit import AngleUnit, DegreeUnit, GradianUnit, RadianUnit, SemicircleUnit

__all__ = [
    # Unit descriptors
    "AngleUnit",
    "SemicircleUnit",
    "DegreeUnit",
    "RadianUnit",
    "GradianUnit",
    # Angle types
    "BasicAngle",
    "Degree",
    "Radian",
    "Gradian",
    # Operations
    "angle_cast",
    "normalize_symmetric",
    "normalize_positive",
    "ceil",
    "floor",
    "round",
    # Trigonometry
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "atan2",
    # Literals
    "deg",
    "rad",
    "grad",
    "parse_angle",
    # Errors
    "AngleError",
    "UnitMismatchError",
    "InvalidUnitError",
    "AngleParseError",
]
