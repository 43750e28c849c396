"""Generic angle value with the unit carried by its type.

This module provides the BasicAngle class, the foundation of every angle type
in the package. It pairs a single stored magnitude with two class-level
parameters: the storage type of the magnitude and the unit descriptor that
gives the magnitude its meaning. The unit is never stored per instance, so two
angles can only be combined when their classes agree on both parameters.

Key Features:
- Specialization by subscription (BasicAngle[int, DegreeUnit]) or subclassing
- Type-safe operations between angles of the same unit and storage type
- Scaling, division and remainder by plain numbers
- In-place compound operators mutating the receiver
- Range normalization into the symmetric or the non-negative range
- Formatting identical to the bare magnitude

Classes:
    BasicAngle: Base class of all angle types.
    Degree: Float angle in degrees.
    Radian: Float angle in radians.
    Gradian: Float angle in gradians.

Example:
    >>> heading = Degree(45.0)
    >>> heading *= 10
    >>> print(heading - Degree(90))  # "360.0"
    >>> IntDegree = BasicAngle[int, DegreeUnit]
    >>> IntDegree(42) / 5  # BasicAngle[int, DegreeUnit](8)
    >>> heading + Radian(1.0)  # raises UnitMismatchError
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable
from types import new_class
from typing import Any, ClassVar, Self

from ..config import DEFAULT_VALUE_TYPE, SCALAR_TYPES, Number
from ..exceptions import UnitMismatchError
from ..numeric import fmod, narrow
from ..unit import DegreeUnit, GradianUnit, RadianUnit
from ..unit.unit_base import check_unit
from .normalization import normalize_positive, normalize_symmetric
from .rounding import ceil, floor
from .rounding import round as round_angle

logger = logging.getLogger(__name__)

_SPECIALIZATIONS: dict[tuple[type, type], type[BasicAngle]] = {}


class BasicAngle:
    """Base class for type-safe angle values.

    A usable angle type fixes two class attributes, either through
    ``BasicAngle[value_type, conversion]`` or through class keywords::

        class Turn(BasicAngle, conversion=TurnUnit, value_type=float): ...

    Subscription returns the same class for the same pair of parameters, and
    the built-in Degree, Radian and Gradian are what
    ``BasicAngle[float, DegreeUnit]`` and friends return.

    Attributes:
        value_type (ClassVar[type]): Storage type of the magnitude.
        conversion (ClassVar[type]): Unit descriptor providing SEMICIRCLE.
    """

    __slots__ = ("_value",)

    value_type: ClassVar[type]
    conversion: ClassVar[type]

    def __init_subclass__(
        cls,
        conversion: type | None = None,
        value_type: type | None = None,
        **kwargs,
    ):
        """Bind the storage type and unit descriptor of a new angle type.

        Subclasses created without keywords inherit both parameters from
        their parent.

        Args:
            conversion: Unit descriptor class with a positive SEMICIRCLE.
            value_type: Storage type, defaults to the inherited one or float.
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.

        Raises:
            InvalidUnitError: If the unit descriptor is unusable.
            TypeError: If no unit descriptor is available or value_type is
                not a numeric type.
        """
        super().__init_subclass__(**kwargs)
        if conversion is None and value_type is None:
            return

        if conversion is None:
            conversion = getattr(cls, "conversion", None)
            if conversion is None:
                msg = f"{cls.__name__} needs a unit descriptor (conversion=...)"
                raise TypeError(msg)
        if value_type is None:
            value_type = getattr(cls, "value_type", DEFAULT_VALUE_TYPE)
        if not isinstance(value_type, type) or not issubclass(value_type, Number):
            msg = f"{cls.__name__} storage type must be numeric, got {value_type!r}"
            raise TypeError(msg)

        cls.conversion = check_unit(conversion)
        cls.value_type = value_type
        _SPECIALIZATIONS.setdefault((value_type, conversion), cls)
        logger.debug(
            "Specialized angle type %s (value_type=%s, unit=%s)",
            cls.__name__,
            value_type.__name__,
            conversion.__name__,
        )

    def __class_getitem__(cls, params: tuple[type, type]) -> type[BasicAngle]:
        """Return the angle type for a storage type and unit descriptor.

        Args:
            params: ``(value_type, conversion)`` pair.

        Returns:
            type[BasicAngle]: The cached or newly created specialization.
        """
        if cls._is_specialized():
            msg = f"{cls.__name__} is already specialized"
            raise TypeError(msg)
        try:
            value_type, conversion = params
        except (TypeError, ValueError):
            msg = "BasicAngle[...] takes a storage type and a unit descriptor"
            raise TypeError(msg) from None

        key = (value_type, conversion)
        if key not in _SPECIALIZATIONS:
            name = (
                f"BasicAngle[{getattr(value_type, '__name__', value_type)}, "
                f"{getattr(conversion, '__name__', conversion)}]"
            )
            namespace = {"__slots__": (), "__module__": __name__, "__qualname__": name}
            new_class(
                name,
                (cls,),
                {"conversion": conversion, "value_type": value_type},
                lambda ns: ns.update(namespace),
            )
        return _SPECIALIZATIONS[key]

    @classmethod
    def _is_specialized(cls) -> bool:
        return getattr(cls, "conversion", None) is not None

    def __init__(self, value: Number | BasicAngle = 0):
        """Create an angle from a raw magnitude or from an angle of the same type.

        Args:
            value: Magnitude in this type's unit, narrowed to value_type.

        Raises:
            TypeError: If the class is the unspecialized BasicAngle.
            UnitMismatchError: If value is an angle of a different type.
        """
        cls = type(self)
        if not cls._is_specialized():
            msg = (
                "BasicAngle must be specialized with a storage type and a unit, "
                "e.g. BasicAngle[float, DegreeUnit]"
            )
            raise TypeError(msg)
        if isinstance(value, BasicAngle):
            self._check_same_unit(value)
            value = value._value
        elif not isinstance(value, SCALAR_TYPES):
            msg = f"{cls.__name__} magnitude must be a number, got {type(value).__name__}"
            raise TypeError(msg)
        self._value = narrow(cls.value_type, value)

    @classmethod
    def _wrap(cls, value: Number) -> Self:
        """Create an instance from a computed magnitude without re-checking the class."""
        angle = object.__new__(cls)
        angle._value = narrow(cls.value_type, value)
        return angle

    def _check_same_unit(self, other: BasicAngle):
        """Check that another angle has the same unit and storage type.

        Args:
            other: The other angle value.

        Raises:
            UnitMismatchError: If either class parameter differs.
        """
        cls, other_cls = type(self), type(other)
        if cls.conversion is not other_cls.conversion or cls.value_type is not other_cls.value_type:
            msg = (
                f"cannot combine {cls.__name__} with {other_cls.__name__}; "
                "convert explicitly with angle_cast"
            )
            raise UnitMismatchError(msg)

    @property
    def magnitude(self) -> Number:
        """Stored magnitude in this angle's unit."""
        return self._value

    # -------------------------------- Arithmetic Operations --------------------------------
    def __neg__(self) -> Self:
        return self._wrap(-self._value)

    def __add__(self, other: BasicAngle) -> Self:
        """Add two angles of the same type.

        Args:
            other: Angle to add.

        Returns:
            BasicAngle: Sum as a new angle of this type.

        Raises:
            UnitMismatchError: If the angles differ in unit or storage type.
        """
        if not isinstance(other, BasicAngle):
            return NotImplemented
        self._check_same_unit(other)
        return self._wrap(self._value + other._value)

    def __sub__(self, other: BasicAngle) -> Self:
        """Subtract an angle of the same type.

        Args:
            other: Angle to subtract from this angle.

        Returns:
            BasicAngle: Difference as a new angle of this type.

        Raises:
            UnitMismatchError: If the angles differ in unit or storage type.
        """
        if not isinstance(other, BasicAngle):
            return NotImplemented
        self._check_same_unit(other)
        return self._wrap(self._value - other._value)

    def __mul__(self, k: Number) -> Self:
        """Scale the angle by a plain number.

        Args:
            k: Numeric factor of any numeric type.

        Returns:
            BasicAngle: Scaled angle, narrowed to the storage type.
        """
        if not isinstance(k, SCALAR_TYPES):
            return NotImplemented
        return self._wrap(self._value * k)

    def __rmul__(self, k: Number) -> Self:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> Self:
        """Divide the angle by a plain number.

        Division by zero behaves as it does for the storage type.

        Args:
            k: Numeric divisor of any numeric type.

        Returns:
            BasicAngle: Divided angle, narrowed to the storage type.
        """
        if not isinstance(k, SCALAR_TYPES):
            return NotImplemented
        return self._wrap(self._value / k)

    def __mod__(self, k: Number) -> Self:
        """Floating remainder of the magnitude divided by a plain number.

        The result has the sign of the magnitude.

        Args:
            k: Numeric divisor of any numeric type.

        Returns:
            BasicAngle: Remainder, narrowed to the storage type.
        """
        if not isinstance(k, SCALAR_TYPES):
            return NotImplemented
        return self._wrap(fmod(self._value, k))

    def __iadd__(self, other: BasicAngle) -> Self:
        if not isinstance(other, BasicAngle):
            return NotImplemented
        self._check_same_unit(other)
        self._value = narrow(type(self).value_type, self._value + other._value)
        return self

    def __isub__(self, other: BasicAngle) -> Self:
        if not isinstance(other, BasicAngle):
            return NotImplemented
        self._check_same_unit(other)
        self._value = narrow(type(self).value_type, self._value - other._value)
        return self

    def __imul__(self, k: Number) -> Self:
        if not isinstance(k, SCALAR_TYPES):
            return NotImplemented
        self._value = narrow(type(self).value_type, self._value * k)
        return self

    def __itruediv__(self, k: Number) -> Self:
        if not isinstance(k, SCALAR_TYPES):
            return NotImplemented
        self._value = narrow(type(self).value_type, self._value / k)
        return self

    def __imod__(self, k: Number) -> Self:
        if not isinstance(k, SCALAR_TYPES):
            return NotImplemented
        self._value = narrow(type(self).value_type, fmod(self._value, k))
        return self

    # -------------------------------- Comparison Operations --------------------------------
    def _compare(self, other: Any, op: Callable[[Any, Any], Any]) -> bool:
        if not isinstance(other, BasicAngle):
            return NotImplemented
        self._check_same_unit(other)
        return bool(op(self._value, other._value))

    def __lt__(self, other: BasicAngle) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: BasicAngle) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: BasicAngle) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: BasicAngle) -> bool:
        return self._compare(other, operator.ge)

    def __eq__(self, other: object) -> bool:
        """Exact equality of magnitudes between two angles of the same type.

        Raises:
            UnitMismatchError: If other is an angle of a different type.
        """
        return self._compare(other, operator.eq)

    def __ne__(self, other: object) -> bool:
        return self._compare(other, operator.ne)

    # compound operators mutate the magnitude
    __hash__ = None

    # -------------------------------- Normalization --------------------------------
    def normalize(self):
        """Normalize in place to (-semicircle, +semicircle]."""
        semicircle = type(self).conversion.SEMICIRCLE
        self._value = narrow(type(self).value_type, normalize_symmetric(self._value, semicircle))

    def normalized(self) -> Self:
        """Return a copy normalized to (-semicircle, +semicircle].

        The angle itself is left unchanged.
        """
        return self._wrap(normalize_symmetric(self._value, type(self).conversion.SEMICIRCLE))

    def normalize_abs(self):
        """Normalize in place to [0, 2 * semicircle)."""
        semicircle = type(self).conversion.SEMICIRCLE
        self._value = narrow(type(self).value_type, normalize_positive(self._value, semicircle))

    def normalized_abs(self) -> Self:
        """Return a copy normalized to [0, 2 * semicircle).

        The angle itself is left unchanged.
        """
        return self._wrap(normalize_positive(self._value, type(self).conversion.SEMICIRCLE))

    # -------------------------------- Python Protocols --------------------------------
    def __ceil__(self) -> Self:
        return ceil(self)

    def __floor__(self) -> Self:
        return floor(self)

    def __round__(self, ndigits: int | None = None) -> Self:
        """Round to a whole magnitude, halves away from zero.

        Raises:
            TypeError: If ndigits is given.
        """
        if ndigits is not None:
            msg = f"{type(self).__name__} only rounds to a whole magnitude"
            raise TypeError(msg)
        return round_angle(self)

    def __copy__(self) -> Self:
        return self._wrap(self._value)

    def __deepcopy__(self, memo: dict) -> Self:
        return self._wrap(self._value)

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    def __str__(self) -> str:
        """Return the bare magnitude as text; the unit is not printed."""
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class Degree(BasicAngle, conversion=DegreeUnit, value_type=DEFAULT_VALUE_TYPE):
    """Angle in degrees with float storage.

    Example:
        >>> bearing = Degree(450)
        >>> bearing.normalized_abs()  # Degree(90.0)
    """

    __slots__ = ()


class Radian(BasicAngle, conversion=RadianUnit, value_type=DEFAULT_VALUE_TYPE):
    """Angle in radians with float storage, the default result of inverse trigonometry."""

    __slots__ = ()


class Gradian(BasicAngle, conversion=GradianUnit, value_type=DEFAULT_VALUE_TYPE):
    """Angle in gradians with float storage."""

    __slots__ = ()
