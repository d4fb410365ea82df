"""Tests for the canonical text rendering."""

import pytest

from torchpoly.polynomial import (
    NullOperandError,
    Polynomial,
    polynomial,
    polynomial_format,
)


class TestPolynomialFormat:
    """Tests for polynomial_format and str()."""

    def test_zero(self):
        assert str(Polynomial(1000)) == "P(x) = 0"

    def test_linear(self):
        """x - 1: unit leading coefficient and constant -1."""
        assert str(polynomial([-1.0, 1.0])) == "P(x) = x^1 - 1"

    def test_quadratic(self):
        assert str(polynomial([1.0, 2.0, 3.0])) == "P(x) = 3x^2 + 2x^1 + 1"

    def test_skips_zero_terms(self):
        assert str(polynomial([1.0, 0.0, 0.0, 3.0])) == "P(x) = 3x^3 + 1"

    def test_negative_unit_terms(self):
        assert str(polynomial([0.0, -1.0, 0.0, -1.0])) == "P(x) = - x^3 - x^1"

    def test_negative_leading_coefficient(self):
        assert str(polynomial([0.5, 0.0, -2.25])) == "P(x) = - 2.25x^2 + 0.5"

    def test_unit_constant_after_terms(self):
        assert str(polynomial([1.0, 0.0, 1.0])) == "P(x) = x^2 + 1"

    def test_fraction_digits(self):
        """At most three fractional digits."""
        assert str(polynomial([1.0 / 3.0])) == "P(x) = 0.333"
        assert str(polynomial([0.0, 2.0 / 3.0])) == "P(x) = 0.667x^1"

    def test_trailing_zeros_stripped(self):
        assert str(polynomial([2.0, 1.5])) == "P(x) = 1.5x^1 + 2"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.0, "P(x) = 1"),
            (-1.0, "P(x) = - 1"),
            (5.0, "P(x) = 5"),
            (-5.0, "P(x) = - 5"),
        ],
    )
    def test_constant(self, value, expected):
        assert str(polynomial([value], capacity=10)) == expected

    def test_ignores_capacity(self):
        p = polynomial([-1.0, 1.0], capacity=1000)
        assert polynomial_format(p) == "P(x) = x^1 - 1"

    def test_none_raises(self):
        with pytest.raises(NullOperandError):
            polynomial_format(None)
