"""Storage-type aware numeric helpers.

Every computed angle magnitude passes through :func:`narrow` before it is
stored, so converting a floating result into an integral storage type is
always an explicit truncation toward zero and never a silent reinterpretation.
A nan or infinite result cannot be represented by an integer and raises
instead.

Functions:
    is_integral: Whether a storage type holds whole numbers only.
    narrow: Convert a computed value to a storage type.
    fmod: Floating remainder using NumPy semantics for NumPy scalars.
"""

from __future__ import annotations

import logging
import math
from numbers import Integral

import numpy as np

from .config import Number

logger = logging.getLogger(__name__)


def is_integral(value_type: type) -> bool:
    """Return True for Python and NumPy integer storage types."""
    return issubclass(value_type, (Integral, np.integer))


def narrow(value_type: type, value: Number) -> Number:
    """Convert ``value`` to ``value_type``.

    Integral targets truncate toward zero, matching a C-style cast, and
    reject values that have no integer representation.

    Args:
        value_type: Storage type of the destination angle.
        value: Computed magnitude.

    Returns:
        The value as an instance of ``value_type``.

    Raises:
        ValueError: If ``value`` is nan and ``value_type`` is integral.
        OverflowError: If ``value`` is infinite and ``value_type`` is integral,
            or does not fit a fixed-width NumPy integer.
    """
    if not is_integral(value_type) or isinstance(value, (Integral, np.integer)):
        return value_type(value)

    truncated = math.trunc(float(value))
    if truncated != value and logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Narrowing %r to %s discards its fractional part",
            value,
            value_type.__name__,
        )
    return value_type(truncated)


def fmod(value: Number, divisor: Number) -> Number:
    """Remainder of ``value / divisor`` with the sign of ``value``.

    NumPy scalars keep NumPy semantics (nan on a zero divisor); Python
    numbers use :func:`math.fmod`, which raises ``ValueError`` instead.
    """
    if isinstance(value, np.generic) or isinstance(divisor, np.generic):
        return np.fmod(value, divisor)
    return math.fmod(value, divisor)
