from ._constants import (
    DEFAULT_CAPACITY,
    MAX_EXPONENT,
    SAMPLE_START,
    SAMPLE_STOP,
)
from ._exceptions import (
    DivisionByZeroError,
    ExponentOutOfRangeError,
    InvalidCapacityError,
    NullOperandError,
    PowerNotAllowedError,
)
from ._polynomial import Polynomial, polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_compare import polynomial_compare
from ._polynomial_derivative import polynomial_derivative
from ._polynomial_divmod import polynomial_divmod
from ._polynomial_error import ErrorKind, PolynomialError
from ._polynomial_evaluate import polynomial_evaluate, polynomial_sample
from ._polynomial_format import polynomial_format
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_operations import PolynomialOperations
from ._polynomial_pow import polynomial_is_power_allowed, polynomial_pow
from ._polynomial_subtract import polynomial_negate, polynomial_subtract
from ._polynomial_trim import polynomial_trim

__all__ = [
    "DEFAULT_CAPACITY",
    "DivisionByZeroError",
    "ErrorKind",
    "ExponentOutOfRangeError",
    "InvalidCapacityError",
    "MAX_EXPONENT",
    "NullOperandError",
    "Polynomial",
    "PolynomialError",
    "PolynomialOperations",
    "PowerNotAllowedError",
    "SAMPLE_START",
    "SAMPLE_STOP",
    "polynomial",
    "polynomial_add",
    "polynomial_compare",
    "polynomial_derivative",
    "polynomial_divmod",
    "polynomial_evaluate",
    "polynomial_format",
    "polynomial_is_power_allowed",
    "polynomial_multiply",
    "polynomial_negate",
    "polynomial_pow",
    "polynomial_sample",
    "polynomial_subtract",
    "polynomial_trim",
]
