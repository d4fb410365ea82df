"""Tests for polynomial exponentiation."""

import math
import time

import pytest
import torch

from torchpoly.polynomial import (
    ErrorKind,
    NullOperandError,
    Polynomial,
    PowerNotAllowedError,
    polynomial,
    polynomial_compare,
    polynomial_is_power_allowed,
    polynomial_pow,
)


class TestPolynomialIsPowerAllowed:
    """Tests for polynomial_is_power_allowed."""

    def test_boundary_leading_exponent_998(self):
        p = polynomial({998: 1.0})
        assert polynomial_is_power_allowed(p, 1)
        assert not polynomial_is_power_allowed(p, 2)

    def test_boundary_constant(self):
        p = polynomial([2.0])
        assert polynomial_is_power_allowed(p, 999)
        assert not polynomial_is_power_allowed(p, 1000)

    def test_boundary_linear(self):
        """(1 + 1) * 499 = 998 allowed, (1 + 1) * 500 = 1000 not."""
        p = polynomial([1.0, 1.0])
        assert polynomial_is_power_allowed(p, 499)
        assert not polynomial_is_power_allowed(p, 500)

    def test_negative_power(self):
        assert not polynomial_is_power_allowed(polynomial([1.0]), -1)

    def test_zero_power(self):
        assert polynomial_is_power_allowed(polynomial({998: 1.0}), 0)

    def test_none_raises(self):
        with pytest.raises(NullOperandError):
            polynomial_is_power_allowed(None, 1)


class TestPolynomialPow:
    """Tests for polynomial_pow."""

    def test_power_zero(self):
        """Anything to the power 0 is the constant 1."""
        p = polynomial([3.0, 0.0, 2.0], capacity=1000)
        assert polynomial_pow(p, 0) == polynomial([1.0])

    def test_power_zero_of_zero(self):
        assert polynomial_pow(Polynomial(10), 0) == polynomial([1.0])

    def test_power_one_is_trimmed_copy(self):
        p = polynomial([1.0, 1.0], capacity=10)
        r = polynomial_pow(p, 1)
        assert r == polynomial([1.0, 1.0])
        assert polynomial_compare(r, p) == 0
        r[0] = 5.0
        assert p[0] == 1.0

    def test_cube(self):
        """(1 + x)^3 = 1 + 3x + 3x^2 + x^3."""
        r = polynomial_pow(polynomial([1.0, 1.0]), 3)
        assert r == polynomial([1.0, 3.0, 3.0, 1.0])

    def test_binomial_coefficients(self):
        r = polynomial_pow(polynomial([1.0, 1.0]), 10)
        expected = torch.tensor(
            [float(math.comb(10, k)) for k in range(11)], dtype=torch.float64
        )
        torch.testing.assert_close(r.coefficients, expected)

    def test_constant(self):
        r = polynomial_pow(polynomial([2.0], capacity=100), 10)
        assert r == polynomial([1024.0])

    def test_zero_polynomial(self):
        assert polynomial_pow(Polynomial(5), 3).is_zero()

    def test_operator(self):
        assert polynomial([0.0, 2.0]) ** 2 == polynomial([0.0, 0.0, 4.0])

    def test_largest_allowed_power(self):
        r = polynomial_pow(polynomial([0.0, 1.0]), 499)
        assert r.leading_exponent == 499
        assert r.leading_coefficient == 1.0

    def test_operand_unchanged(self):
        p = polynomial([1.0, 2.0], capacity=5)
        polynomial_pow(p, 4)
        assert p == polynomial([1.0, 2.0], capacity=5)

    @pytest.mark.parametrize("power", [-1, 500])
    def test_not_allowed_raises(self, power):
        with pytest.raises(PowerNotAllowedError) as info:
            polynomial_pow(polynomial([1.0, 1.0]), power)
        assert info.value.kind is ErrorKind.POWER_NOT_ALLOWED

    def test_none_raises(self):
        with pytest.raises(NullOperandError):
            polynomial_pow(None, 2)

    def test_largest_allowed_binomial_power(self):
        """(1 + x)^499 stays within a tight time limit."""
        start = time.perf_counter()
        r = polynomial_pow(polynomial([1.0, 1.0]), 499)
        elapsed = time.perf_counter() - start

        assert r.capacity == 500
        assert r.leading_coefficient == 1.0
        assert r[0] == 1.0
        assert elapsed < 2.0
