"""Global configuration and type definitions for the angle library.

This module provides the package-wide constants and type aliases shared by
every other module. It establishes which numeric types may serve as angle
magnitudes and scalar operands, the single value of pi used for every
conversion through radians, and the defaults used by the command line front
end.

Type Definitions:
    Number: Union type of accepted scalar operands. Supports Python native
            types (int, float) and NumPy scalar types (numpy.float32,
            numpy.int64, ...).
    SCALAR_TYPES: Runtime check for magnitudes and scalar operands. Any
            numbers.Real (including fractions.Fraction) or NumPy scalar.

Constants:
    PI: The only process-wide numeric state. Every trigonometric function
        and the radian unit descriptor read it; nothing writes it.
    DEFAULT_VALUE_TYPE: Storage type of the built-in Degree, Radian and
        Gradian angle types and of the literal factories.
    LOG_LEVEL_ENV: Environment variable consulted by the command line front
        end for its log level.

Example:
    >>> from anglekit.config import Number, PI
    >>> import numpy as np
    >>> scalar_int: Number = 42
    >>> scalar_float: Number = 3.14159
    >>> scalar_np: Number = np.float32(2.5)
"""

from math import pi
from numbers import Real

from numpy import number

Number = int | float | number
SCALAR_TYPES = (Real, number)

PI: float = pi

DEFAULT_VALUE_TYPE: type = float

LOG_LEVEL_ENV = "ANGLEKIT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
