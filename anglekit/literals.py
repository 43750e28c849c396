"""Literal factories and text parsing for the built-in angle types.

The factories are the Python counterpart of unit-suffixed numeric literals:
``deg(42)`` reads like ``42 deg``. ``parse_angle`` accepts the same notation
as text, e.g. ``"24.42deg"``, ``"-42_rad"``, ``"90 °"`` or ``"400grad"``. No
range restriction and no normalization is applied.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from .angle.basic_angle import BasicAngle, Degree, Gradian, Radian
from .config import Number
from .exceptions import AngleParseError

logger = logging.getLogger(__name__)

SUFFIXES: Mapping[str, type[BasicAngle]] = {
    "deg": Degree,
    "°": Degree,
    "rad": Radian,
    "grad": Gradian,
}

_LITERAL = re.compile(
    r"""
    ^\s*
    (?P<number>[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)
    \s*_?\s*
    (?P<suffix>°|[A-Za-z]+)
    \s*$
    """,
    re.VERBOSE,
)


def deg(value: Number) -> Degree:
    return Degree(value)


def rad(value: Number) -> Radian:
    return Radian(value)


def grad(value: Number) -> Gradian:
    return Gradian(value)


def parse_angle(text: str, suffixes: Mapping[str, type[BasicAngle]] | None = None) -> BasicAngle:
    """Parse a unit-suffixed number into an angle.

    Args:
        text: Literal such as ``"24.42deg"``.
        suffixes: Suffix to angle type mapping replacing the built-in one,
            for custom units.

    Returns:
        BasicAngle: Angle of the type the suffix selects.

    Raises:
        AngleParseError: If the text is not a number followed by a known suffix.
    """
    suffixes = SUFFIXES if suffixes is None else suffixes

    match = _LITERAL.match(text)
    if match is None:
        logger.debug("Rejected angle literal %r", text)
        msg = f"not an angle literal: {text!r}"
        raise AngleParseError(msg)

    suffix = match["suffix"]
    angle_type = suffixes.get(suffix)
    if angle_type is None:
        logger.debug("Unknown unit suffix %r in %r", suffix, text)
        known = ", ".join(sorted(suffixes))
        msg = f"unknown unit suffix {suffix!r} in {text!r} (expected one of: {known})"
        raise AngleParseError(msg)

    return angle_type(float(match["number"]))
