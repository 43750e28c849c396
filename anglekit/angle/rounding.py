"""Rounding of angle magnitudes.

Each function returns a new angle of the same type as its argument with the
magnitude rounded to a whole number. Angles with an integral storage type are
already whole and are returned unchanged (as a copy).

Functions:
    ceil: Smallest whole magnitude not less than the angle.
    floor: Largest whole magnitude not greater than the angle.
    round: Nearest whole magnitude, halves rounded away from zero.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

import numpy as np

from ..config import Number
from ..numeric import is_integral

if TYPE_CHECKING:
    from .basic_angle import BasicAngle

A = TypeVar("A", bound="BasicAngle")


def _round_half_away(value: Number) -> Number:
    # numpy.round rounds halves to even
    magnitude = np.abs(value)
    rounded = np.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return np.copysign(rounded, value)


def _apply(angle: A, func: Callable[[Number], Number]) -> A:
    angle_type = type(angle)
    if is_integral(angle_type.value_type):
        return angle_type(angle.magnitude)
    return angle_type(func(angle.magnitude))


def ceil(angle: A) -> A:
    """Return an angle whose magnitude is the nearest whole number not less than ``angle``'s.

    Args:
        angle: The angle from which the new angle is derived.

    Returns:
        An angle of the same type.
    """
    return _apply(angle, np.ceil)


def floor(angle: A) -> A:
    """Return an angle whose magnitude is the largest whole number not greater than ``angle``'s.

    Args:
        angle: The angle from which the new angle is derived.

    Returns:
        An angle of the same type.
    """
    return _apply(angle, np.floor)


def round(angle: A) -> A:  # noqa: A001
    """Return an angle whose magnitude is the nearest whole number to ``angle``'s.

    Halfway cases round away from zero (24.5 becomes 25, -24.5 becomes -25).

    Args:
        angle: The angle from which the new angle is derived.

    Returns:
        An angle of the same type.
    """
    return _apply(angle, _round_half_away)
