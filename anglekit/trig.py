"""Unit-aware trigonometric functions.

Every function converts through radians, the single pivot unit, using only
the semicircle of the angle's unit descriptor. Adding a new unit therefore
never requires new trigonometric overloads.

The underlying primitives are NumPy ufuncs, so domain errors follow IEEE
semantics: ``asin(2.0)`` is nan (with a NumPy RuntimeWarning), never an
exception. Storing nan in an angle type with integral storage does raise,
see :func:`anglekit.numeric.narrow`.

Functions:
    sin, cos, tan: Angle -> ratio.
    asin, acos, atan: ratio -> angle of the requested type (Radian by default).
    atan2: (y, x) -> angle of the requested type (Radian by default).

Example:
    >>> sin(Degree(150))  # 0.5
    >>> asin(0.5, Degree)  # ~Degree(30.0)
    >>> atan2(1, 1, Gradian)  # Gradian(50.0)
"""

from __future__ import annotations

from typing import TypeVar

import numpy as np

from .angle.basic_angle import BasicAngle, Radian
from .angle.cast import require_angle_type
from .config import PI, Number

A = TypeVar("A", bound=BasicAngle)


def _to_radians(x: BasicAngle) -> Number:
    if not isinstance(x, BasicAngle):
        msg = f"expected an angle value, got {type(x).__name__}"
        raise TypeError(msg)
    return PI * x.magnitude / type(x).conversion.SEMICIRCLE


def _from_radians(radians: Number, to: type[A]) -> A:
    require_angle_type(to)
    return to(to.conversion.SEMICIRCLE * radians / PI)


def sin(x: BasicAngle) -> Number:
    """Compute the sine of an angle of any unit."""
    return np.sin(_to_radians(x))


def cos(x: BasicAngle) -> Number:
    """Compute the cosine of an angle of any unit."""
    return np.cos(_to_radians(x))


def tan(x: BasicAngle) -> Number:
    """Compute the tangent of an angle of any unit."""
    return np.tan(_to_radians(x))


def asin(x: Number, to: type[A] = Radian) -> A:
    """Compute the arc sine of ``x``.

    Args:
        x: Ratio in [-1, 1]; values outside yield nan.
        to: Angle type of the result.

    Returns:
        The arc sine of ``x`` as ``to``.
    """
    return _from_radians(np.arcsin(x), to)


def acos(x: Number, to: type[A] = Radian) -> A:
    """Compute the arc cosine of ``x``.

    Args:
        x: Ratio in [-1, 1]; values outside yield nan.
        to: Angle type of the result.

    Returns:
        The arc cosine of ``x`` as ``to``.
    """
    return _from_radians(np.arccos(x), to)


def atan(x: Number, to: type[A] = Radian) -> A:
    """Compute the arc tangent of ``x``.

    Args:
        x: Any ratio.
        to: Angle type of the result.

    Returns:
        The arc tangent of ``x`` as ``to``, inside (-quarter turn, +quarter turn).
    """
    return _from_radians(np.arctan(x), to)


def atan2(y: Number, x: Number, to: type[A] = Radian) -> A:
    """Compute the arc tangent of ``y / x`` using the signs of both to pick the quadrant.

    Args:
        y: Ordinate.
        x: Abscissa.
        to: Angle type of the result.

    Returns:
        The angle of the point ``(x, y)`` as ``to``, inside (-semicircle, +semicircle].
    """
    return _from_radians(np.arctan2(y, x), to)
