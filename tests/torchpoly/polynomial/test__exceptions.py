"""Tests for polynomial exception hierarchy."""

import pytest

from torchpoly.polynomial import (
    DivisionByZeroError,
    ErrorKind,
    ExponentOutOfRangeError,
    InvalidCapacityError,
    NullOperandError,
    PolynomialError,
    PowerNotAllowedError,
)

EXCEPTIONS = [
    (InvalidCapacityError, ErrorKind.INVALID_CAPACITY),
    (ExponentOutOfRangeError, ErrorKind.EXPONENT_OUT_OF_RANGE),
    (NullOperandError, ErrorKind.NULL_OPERAND),
    (PowerNotAllowedError, ErrorKind.POWER_NOT_ALLOWED),
    (DivisionByZeroError, ErrorKind.DIVISION_BY_ZERO),
]


class TestExceptionHierarchy:
    """Test that all exceptions inherit from PolynomialError."""

    @pytest.mark.parametrize("exception, kind", EXCEPTIONS)
    def test_is_polynomial_error(self, exception, kind):
        with pytest.raises(PolynomialError):
            raise exception("test")

    @pytest.mark.parametrize("exception, kind", EXCEPTIONS)
    def test_kind(self, exception, kind):
        assert exception("test").kind is kind

    def test_every_kind_has_an_exception(self):
        assert {kind for _, kind in EXCEPTIONS} == set(ErrorKind)

    def test_base_error_kind(self):
        error = PolynomialError("test", ErrorKind.NULL_OPERAND)
        assert error.kind is ErrorKind.NULL_OPERAND
        assert PolynomialError("test").kind is None


class TestExceptionMessages:
    """Test that exceptions preserve their messages."""

    def test_division_by_zero_message(self):
        with pytest.raises(DivisionByZeroError, match="zero polynomial"):
            raise DivisionByZeroError("Cannot divide by zero polynomial")

    def test_branch_on_kind(self):
        try:
            raise PowerNotAllowedError("too large")
        except PolynomialError as error:
            assert error.kind is ErrorKind.POWER_NOT_ALLOWED
            assert str(error) == "too large"
