"""Range normalization of angle magnitudes.

Both functions are pure: they take a raw magnitude and the semicircle of its
unit and return the equivalent magnitude inside a canonical range. Angle
values expose them as normalize()/normalized() and
normalize_abs()/normalized_abs().

Ranges:
    symmetric: (-semicircle, +semicircle]
    positive:  [0, 2 * semicircle)

Example:
    >>> normalize_symmetric(270.0, 180.0)
    -90.0
    >>> normalize_positive(-90.0, 180.0)
    270.0
"""

from __future__ import annotations

from ..config import Number
from ..numeric import fmod


def normalize_symmetric(value: Number, semicircle: Number) -> Number:
    """Reduce ``value`` into ``(-semicircle, semicircle]``.

    A value wrapping to exactly ``-semicircle`` is mapped to ``+semicircle``.
    Both bounds are the semicircle as the magnitude's own type represents
    it, so a float32 result may sit just above the float64 value of pi.

    Args:
        value: Magnitude to reduce.
        semicircle: Half a turn in the magnitude's unit, positive.

    Returns:
        Number: Equivalent magnitude inside the half-open range.
    """
    full_circle = semicircle * 2.0

    normalized = fmod(value, full_circle)
    if normalized > semicircle:
        normalized -= full_circle
    if normalized <= -semicircle:
        normalized += full_circle

    return normalized


def normalize_positive(value: Number, semicircle: Number) -> Number:
    """Reduce ``value`` into ``[0, 2 * semicircle)``.

    Args:
        value: Magnitude to reduce.
        semicircle: Half a turn in the magnitude's unit, positive.

    Returns:
        Number: Equivalent non-negative magnitude below a full turn.
    """
    full_circle = semicircle * 2.0

    normalized = fmod(value, full_circle)
    if normalized < 0:
        normalized += full_circle
        # a tiny negative remainder rounds up to exactly one full turn
        if normalized >= full_circle:
            normalized -= full_circle

    return normalized
