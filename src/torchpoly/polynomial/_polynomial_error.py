import enum
from typing import Optional


class ErrorKind(enum.Enum):
    """Failure kinds reported by polynomial construction and arithmetic."""

    INVALID_CAPACITY = "invalid_capacity"
    EXPONENT_OUT_OF_RANGE = "exponent_out_of_range"
    NULL_OPERAND = "null_operand"
    POWER_NOT_ALLOWED = "power_not_allowed"
    DIVISION_BY_ZERO = "division_by_zero"


class PolynomialError(Exception):
    """Base exception for polynomial operations.

    Every subclass carries an :class:`ErrorKind` in ``kind`` so callers
    can branch on the failure without matching on the class.
    """

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str = "", kind: Optional[ErrorKind] = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind
