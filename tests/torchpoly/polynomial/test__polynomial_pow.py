"""Tests for polynomial exponentiation."""

import pytest

from torchpoly.polynomial import (
    polynomial,
    polynomial_multiply,
    polynomial_pow,
    polynomial_zero,
)
from torchpoly.ring import IntegerRing, ModularIntegerRing, RealRing


class TestPolynomialPow:
    """Tests for polynomial_pow."""

    def test_binomial_expansion(self):
        """(x - 1)^5 = x^5 - 5x^4 + 10x^3 - 10x^2 + 5x - 1."""
        p = polynomial([-1, 1])
        assert polynomial_pow(p, 5).coeffs == (-1, 5, -10, 10, -5, 1)

    def test_cube(self):
        """(1 + x)^3 = 1 + 3x + 3x^2 + x^3."""
        p = polynomial([1.0, 1.0])
        assert polynomial_pow(p, 3).coeffs == (1.0, 3.0, 3.0, 1.0)

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 8, 11])
    def test_matches_repeated_multiply(self, n):
        p = polynomial([2, -1, 3])

        expected = p
        for _ in range(n - 1):
            expected = polynomial_multiply(expected, p)

        assert polynomial_pow(p, n) == expected

    def test_power_one_is_identity(self):
        p = polynomial([4, 0, 1])
        assert polynomial_pow(p, 1) is p

    def test_power_zero_is_one(self):
        """p^0 = 1 by convention."""
        assert polynomial_pow(polynomial([3, 2, 1]), 0).coeffs == (1,)
        assert polynomial_pow(polynomial([3.0, 2.0]), 0).coeffs == (1.0,)

    def test_zero_to_power_zero_is_one(self):
        p = polynomial_zero(IntegerRing())
        assert polynomial_pow(p, 0).coeffs == (1,)

    def test_zero_to_positive_power(self):
        p = polynomial_zero(RealRing())
        assert polynomial_pow(p, 7).coeffs == (0.0,)

    def test_negative_exponent_raises(self):
        with pytest.raises(ValueError):
            polynomial_pow(polynomial([1, 1]), -1)

    def test_frobenius_modular(self):
        """(1 + x)^5 = 1 + x^5 over Z/5."""
        ring = ModularIntegerRing(5)
        p = polynomial([1, 1], ring=ring)
        assert polynomial_pow(p, 5).coeffs == (1, 0, 0, 0, 0, 1)
