class AngleError(Exception):
    """
    Base exception for all anglekit errors.
    """


class UnitMismatchError(AngleError, TypeError):
    """
    Raised when two angle values of different units or storage types are
    combined or compared without an explicit angle_cast.
    """


class InvalidUnitError(AngleError, ValueError):
    """
    Raised when a unit descriptor has no usable SEMICIRCLE constant.
    The semicircle must be a finite number greater than zero.
    """


class AngleParseError(AngleError, ValueError):
    """
    Raised when text cannot be parsed as an angle literal,
    e.g. a malformed number or an unknown unit suffix.
    """
