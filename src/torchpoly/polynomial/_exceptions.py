"""Exception hierarchy for polynomial operations."""

from torchpoly.polynomial._polynomial_error import ErrorKind, PolynomialError


class InvalidCapacityError(PolynomialError):
    """Polynomial constructed with a capacity below 1."""

    kind = ErrorKind.INVALID_CAPACITY


class ExponentOutOfRangeError(PolynomialError):
    """Coefficient access outside ``[0, capacity - 1]``.

    Also raised by the editing session when an exponent falls outside
    ``[0, MAX_EXPONENT]``.
    """

    kind = ErrorKind.EXPONENT_OUT_OF_RANGE


class NullOperandError(PolynomialError):
    """A required polynomial argument is missing."""

    kind = ErrorKind.NULL_OPERAND


class PowerNotAllowedError(PolynomialError):
    """Negative power, or a power whose result would exceed the
    ``MAX_EXPONENT`` ceiling.

    Check with :func:`polynomial_is_power_allowed` before raising a
    polynomial to a power.
    """

    kind = ErrorKind.POWER_NOT_ALLOWED


class DivisionByZeroError(PolynomialError):
    """Divisor is the zero polynomial."""

    kind = ErrorKind.DIVISION_BY_ZERO
