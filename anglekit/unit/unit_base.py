"""Base unit descriptor foundation for type-safe angle values.

This module provides the AngleUnit class that serves as the base for every
angular unit descriptor. A unit descriptor is a stateless class, never
instantiated, that carries a single invariant constant: the semicircle, the
magnitude representing half of one full turn in that unit. Every conversion
and trigonometric operation in the package is derived from that one number.

The descriptor system is designed around duck typing: any class exposing a
positive, finite numeric SEMICIRCLE qualifies (see SemicircleUnit), while
subclassing AngleUnit additionally validates the constant at class creation
time so a broken descriptor fails where it is defined rather than where it is
first used.

Key Concepts:
- SEMICIRCLE: Half a turn in the unit (180 for degrees, pi for radians)
- SYMBOL: Display symbol, informational only
- Validation: SEMICIRCLE is checked when a subclass defines it

Classes:
    SemicircleUnit: Protocol describing any usable unit descriptor.
    AngleUnit: Base class for unit descriptors with definition-time checks.

Functions:
    check_unit: Validate a descriptor and return it.

Example:
    >>> class Turn(AngleUnit):
    ...     SEMICIRCLE = 0.5  # one full turn == 1.0
    ...     SYMBOL = "tr"
    >>> class Broken(AngleUnit):
    ...     SEMICIRCLE = -1  # raises InvalidUnitError
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import ClassVar, Protocol, runtime_checkable

from ..exceptions import InvalidUnitError

logger = logging.getLogger(__name__)


@runtime_checkable
class SemicircleUnit(Protocol):
    """Protocol for classes usable as an angle unit descriptor.

    Only the presence of the attribute is checked by isinstance(); use
    check_unit() to also verify that the value is a positive finite number.
    """

    SEMICIRCLE: ClassVar[Real]


def check_unit(unit: type) -> type:
    """Verify that ``unit`` carries a usable semicircle constant.

    Args:
        unit: Candidate unit descriptor class.

    Returns:
        type: ``unit`` itself, so the call can be used inline.

    Raises:
        InvalidUnitError: If SEMICIRCLE is missing, not a real number,
            not finite or not greater than zero.
    """
    name = getattr(unit, "__name__", repr(unit))
    semicircle = getattr(unit, "SEMICIRCLE", None)

    if semicircle is None:
        msg = f"{name} does not define SEMICIRCLE"
        raise InvalidUnitError(msg)
    if isinstance(semicircle, bool) or not isinstance(semicircle, Real):
        msg = f"{name}.SEMICIRCLE must be a real number, got {semicircle!r}"
        raise InvalidUnitError(msg)
    if not math.isfinite(semicircle) or semicircle <= 0:
        msg = f"{name}.SEMICIRCLE must be finite and positive, got {semicircle!r}"
        raise InvalidUnitError(msg)
    return unit


class AngleUnit:
    """Base class for angular unit descriptors.

    Subclasses define SEMICIRCLE (and optionally SYMBOL). The class is a pure
    tag: it has no instances and no per-value state, so the unit of an angle
    lives in the angle's type alone.

    Attributes:
        SEMICIRCLE (ClassVar[Real]): Magnitude of half a turn in this unit.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
    """

    __slots__ = ()

    SEMICIRCLE: ClassVar[Real]
    SYMBOL: ClassVar[str] = ""

    def __new__(cls, *args, **kwargs):
        msg = f"{cls.__name__} is a unit descriptor and cannot be instantiated"
        raise TypeError(msg)

    def __init_subclass__(cls, **kwargs):
        """Validate SEMICIRCLE on every subclass that defines it.

        Intermediate bases that leave SEMICIRCLE undefined are allowed; they
        simply cannot be used to specialize an angle type.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        if "SEMICIRCLE" in cls.__dict__:
            check_unit(cls)
            logger.debug("Defined angle unit %s (semicircle=%r)", cls.__name__, cls.SEMICIRCLE)
