"""Built-in angular unit descriptors.

This module provides the three standard angular units. Each descriptor only
states how large half a turn is in its unit; conversion between any two units
is the ratio of their semicircles, so no pairwise conversion table exists.

Classes:
    DegreeUnit: 180 per semicircle (360 per turn).
    RadianUnit: pi per semicircle, the pivot unit for trigonometry.
    GradianUnit: 200 per semicircle (400 per turn).

Example:
    >>> DegreeUnit.SEMICIRCLE / RadianUnit.SEMICIRCLE  # degrees per radian
    57.29577951308232
"""

from __future__ import annotations

from ..config import PI
from .unit_base import AngleUnit


class DegreeUnit(AngleUnit):
    """Angular unit: Degree (1/360 of a full rotation).

    Attributes:
        SEMICIRCLE (float): 180.0
        SYMBOL (str): "°"
    """

    SEMICIRCLE = 180.0
    SYMBOL = "°"


class RadianUnit(AngleUnit):
    """Angular unit: Radian (SI unit for angles).

    One radian is the angle subtended by an arc equal in length to the
    radius. All trigonometric functions convert through this unit.

    Attributes:
        SEMICIRCLE (float): pi
        SYMBOL (str): "rad"
    """

    SEMICIRCLE = PI
    SYMBOL = "rad"


class GradianUnit(AngleUnit):
    """Angular unit: Gradian (1/400 of a full rotation), also called gon.

    Attributes:
        SEMICIRCLE (float): 200.0
        SYMBOL (str): "grad"
    """

    SEMICIRCLE = 200.0
    SYMBOL = "grad"
