"""Explicit conversion between angle types.

Angles of different units never mix implicitly; angle_cast is the one way to
move a magnitude from one angle type to another. The rescale factor is the
ratio of the two units' semicircles, so any pair of unit descriptors,
built-in or custom, converts without a dedicated conversion table.
"""

from __future__ import annotations

from typing import TypeVar

from .basic_angle import BasicAngle

A = TypeVar("A", bound=BasicAngle)


def require_angle_type(angle_type: type) -> type[BasicAngle]:
    """Check that ``angle_type`` is a specialized angle class.

    Raises:
        TypeError: For anything that cannot be instantiated as an angle.
    """
    if (
        not isinstance(angle_type, type)
        or not issubclass(angle_type, BasicAngle)
        or getattr(angle_type, "conversion", None) is None
    ):
        msg = f"expected a specialized angle type such as Degree, got {angle_type!r}"
        raise TypeError(msg)
    return angle_type


def angle_cast(to: type[A], angle: BasicAngle) -> A:
    """Return an angle of type ``to`` derived from another angle.

    The magnitude is rescaled by ``to.SEMICIRCLE / from.SEMICIRCLE`` and
    narrowed to ``to``'s storage type. No normalization is applied.

    Args:
        to: Target angle type, e.g. Radian or BasicAngle[int, DegreeUnit].
        angle: Angle to convert.

    Returns:
        A new angle of type ``to``.

    Example:
        >>> angle_cast(Radian, Degree(180))  # Radian(3.141592653589793)
        >>> angle_cast(Gradian, Degree(90))  # Gradian(100.0)
    """
    require_angle_type(to)
    if not isinstance(angle, BasicAngle):
        msg = f"angle_cast expects an angle value, got {type(angle).__name__}"
        raise TypeError(msg)

    ratio = to.conversion.SEMICIRCLE / type(angle).conversion.SEMICIRCLE
    return to(angle.magnitude * ratio)
