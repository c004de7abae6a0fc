"""Tests for FFT-based polynomial multiplication."""

import threading
import warnings
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import numpy as np
import pytest
import torch
from numpy.polynomial import polynomial as npp

from torchpoly.polynomial import (
    FFT_THRESHOLD,
    PrecisionWarning,
    RingMismatchError,
    polynomial,
    polynomial_degree,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_multiply,
    polynomial_multiply_auto,
    polynomial_multiply_fft,
    polynomial_multiply_fft_threaded,
    polynomial_pow,
    polynomial_value_representation,
    polynomial_zero,
)
from torchpoly.ring import RealRing
from torchpoly.transform import fourier_transform

_MODULE = "torchpoly.polynomial._polynomial._polynomial_multiply_fft"


def _round(p, decimal_places):
    return [round(c, decimal_places) for c in p.coeffs]


class TestPolynomialMultiplyFFT:
    """Tests for FFT-based polynomial multiplication."""

    def test_simple_multiply(self):
        """(1 + 2x) * (3 + 4x) = 3 + 10x + 8x^2."""
        p = polynomial([1.0, 2.0])
        q = polynomial([3.0, 4.0])
        result = polynomial_multiply_fft(p, q, 8)

        expected = polynomial([3.0, 10.0, 8.0])
        assert polynomial_equal(result, expected, tol=1e-7)

    def test_binomial_power(self):
        """(x - 1)^4 * (x - 1) matches both multiply and pow."""
        x_minus_1 = polynomial([-1.0, 1.0])
        p = polynomial_pow(x_minus_1, 4)

        result = polynomial_multiply_fft(p, x_minus_1, 10)

        assert polynomial_degree(result) == 5
        assert result == polynomial_multiply(p, x_minus_1)
        assert result == polynomial_pow(x_minus_1, 5)

    def test_matches_direct_multiply(self):
        """FFT multiply should match direct multiply after rounding."""
        p = polynomial([1.5, -2.25, 3.0, 0.5])
        q = polynomial([4.0, 5.0, -6.0, 7.0, 0.125])

        result_fft = polynomial_multiply_fft(p, q, 8)
        result_direct = polynomial_multiply(p, q)

        np.testing.assert_allclose(
            _round(result_fft, 6), _round(result_direct, 6), atol=1e-6
        )

    def test_high_degree(self):
        """Test with high-degree polynomials where FFT shines."""
        generator = torch.Generator().manual_seed(0)
        degree = 200
        p_coeffs = torch.randn(degree + 1, generator=generator).tolist()
        q_coeffs = torch.randn(degree + 1, generator=generator).tolist()

        result = polynomial_multiply_fft(
            polynomial(p_coeffs), polynomial(q_coeffs), 12
        )

        np.testing.assert_allclose(
            result.coeffs, npp.polymul(p_coeffs, q_coeffs), atol=1e-9
        )

    def test_evaluation_consistency(self):
        """Result should evaluate correctly at test points."""
        p = polynomial([1.0, 2.0, 3.0])
        q = polynomial([4.0, -1.0, 2.0])

        result = polynomial_multiply_fft(p, q, 10)

        for x in [0.0, 1.0, -1.0, 2.0, 0.5]:
            assert polynomial_evaluate(result, x) == pytest.approx(
                polynomial_evaluate(p, x) * polynomial_evaluate(q, x),
                abs=1e-8,
            )

    def test_noise_truncated_to_zero(self):
        """Coefficients that are exactly zero do not survive as noise."""
        p = polynomial([1.0, 0.0, 0.0, 1.0])  # 1 + x^3
        q = polynomial([1.0, 0.0, 0.0, -1.0])  # 1 - x^3

        result = polynomial_multiply_fft(p, q, 6)

        assert polynomial_degree(result) == 6
        np.testing.assert_allclose(
            result.coeffs, [1.0, 0.0, 0.0, 0.0, 0.0, 0.0, -1.0], atol=1e-6
        )

    def test_truncates_toward_zero(self):
        """Truncation keeps at most decimal_places digits."""
        p = polynomial([0.123456789, 1.0])
        q = polynomial([1.0, 1.0])

        result = polynomial_multiply_fft(p, q, 3)

        for c in result.coeffs:
            assert c == pytest.approx(round(c, 3), abs=1e-12)
        assert result.coeffs[0] in (0.123, 0.122)

    def test_multiply_by_constant_falls_back(self):
        """Degree-0 operands use direct multiplication."""
        p = polynomial([1.0, 2.0, 3.0])
        const = polynomial([2.5])

        with patch(f"{_MODULE}.fourier_transform") as mock_transform:
            result = polynomial_multiply_fft(p, const, 10)
            mock_transform.assert_not_called()

        assert result.coeffs == (2.5, 5.0, 7.5)

    def test_multiply_by_zero(self):
        """Multiplying by 0 should return zero polynomial."""
        p = polynomial([1.0, 2.0, 3.0])
        result = polynomial_multiply_fft(p, polynomial_zero(RealRing()), 10)
        assert result.coeffs == (0.0,)

    def test_result_is_normalized(self):
        p = polynomial([1.0, 1.0])
        q = polynomial([1.0, 1.0])

        result = polynomial_multiply_fft(p, q, 10)

        # deg 2 product padded to length 4; the padding is trimmed
        assert len(result.coeffs) == 3

    def test_commutative(self):
        p = polynomial([1.0, -3.0, 2.0, 5.0])
        q = polynomial([4.0, 0.0, -1.0])

        assert polynomial_equal(
            polynomial_multiply_fft(p, q, 10),
            polynomial_multiply_fft(q, p, 10),
            tol=1e-9,
        )

    def test_integer_ring_rejected(self):
        with pytest.raises(RingMismatchError):
            polynomial_multiply_fft(polynomial([1, 2]), polynomial([3, 4]), 5)

    def test_negative_decimal_places_rejected(self):
        p = polynomial([1.0, 2.0])
        with pytest.raises(ValueError):
            polynomial_multiply_fft(p, p, -1)

    def test_excessive_precision_warns(self):
        p = polynomial([1.0, 2.0])
        with pytest.warns(PrecisionWarning):
            polynomial_multiply_fft(p, p, 20)

    def test_precision_beyond_float64_is_not_truncated(self):
        """Past 15 digits the transform output is kept as is."""
        p = polynomial([1.0, 2.0])

        with pytest.warns(PrecisionWarning):
            result = polynomial_multiply_fft(p, p, 400)

        expected = polynomial([1.0, 4.0, 4.0])
        assert polynomial_equal(result, expected, tol=1e-12)

    def test_reasonable_precision_does_not_warn(self):
        p = polynomial([1.0, 2.0])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            polynomial_multiply_fft(p, p, 10)


class TestPolynomialMultiplyFFTThreaded:
    """Tests for the two-task concurrent variant."""

    def test_bit_identical_to_sequential(self):
        generator = torch.Generator().manual_seed(1)
        p = polynomial(torch.randn(97, generator=generator).tolist())
        q = polynomial(torch.randn(130, generator=generator).tolist())

        sequential = polynomial_multiply_fft(p, q, 10)
        threaded = polynomial_multiply_fft_threaded(p, q, 10)

        assert threaded.coeffs == sequential.coeffs

    def test_forward_transforms_run_in_worker_threads(self):
        p = polynomial([1.0, -3.0, 2.0, 5.0])
        q = polynomial([4.0, 0.0, -1.0])
        thread_ids = []

        def recording_transform(input):
            thread_ids.append(threading.get_ident())
            return fourier_transform(input)

        with patch(
            f"{_MODULE}.fourier_transform", side_effect=recording_transform
        ):
            result = polynomial_multiply_fft_threaded(p, q, 10)

        assert len(thread_ids) == 2
        assert threading.get_ident() not in thread_ids
        assert polynomial_equal(result, polynomial_multiply(p, q), tol=1e-9)

    def test_uses_two_workers(self):
        p = polynomial([1.0, 2.0, 3.0])

        with patch(
            f"{_MODULE}.ThreadPoolExecutor", wraps=ThreadPoolExecutor
        ) as mock_executor:
            polynomial_multiply_fft_threaded(p, p, 10)

        mock_executor.assert_called_once_with(max_workers=2)

    def test_binomial_power(self):
        x_minus_1 = polynomial([-1.0, 1.0])
        p = polynomial_pow(x_minus_1, 4)

        result = polynomial_multiply_fft_threaded(p, x_minus_1, 10)

        assert result == polynomial_pow(x_minus_1, 5)

    def test_constant_falls_back(self):
        p = polynomial([1.0, 2.0])
        result = polynomial_multiply_fft_threaded(p, polynomial([3.0]), 10)
        assert result.coeffs == (3.0, 6.0)

    def test_integer_ring_rejected(self):
        with pytest.raises(RingMismatchError):
            polynomial_multiply_fft_threaded(
                polynomial([1, 2]), polynomial([3, 4]), 5
            )


class TestPolynomialMultiplyAuto:
    """Tests for adaptive multiplication dispatch."""

    def test_low_degree_uses_direct(self):
        p = polynomial([1.0] * 10)

        with patch(f"{_MODULE}.polynomial_multiply_fft") as mock_fft:
            polynomial_multiply_auto(p, p)
            mock_fft.assert_not_called()

    def test_high_degree_uses_fft(self):
        p = polynomial([1.0] * (FFT_THRESHOLD + 1))

        with patch(f"{_MODULE}.polynomial_multiply_fft") as mock_fft:
            mock_fft.return_value = p
            polynomial_multiply_auto(p, p)
            mock_fft.assert_called_once()

    def test_integer_ring_never_uses_fft(self):
        p = polynomial([1] * (FFT_THRESHOLD + 1))

        result = polynomial_multiply_auto(p, p)

        assert result == polynomial_multiply(p, p)

    def test_correctness_across_threshold(self):
        generator = torch.Generator().manual_seed(42)
        for degree in [10, 50, 100]:
            p_coeffs = torch.randn(degree + 1, generator=generator).tolist()
            q_coeffs = torch.randn(degree + 1, generator=generator).tolist()

            result = polynomial_multiply_auto(
                polynomial(p_coeffs), polynomial(q_coeffs)
            )

            np.testing.assert_allclose(
                result.coeffs, npp.polymul(p_coeffs, q_coeffs), atol=1e-8
            )


class TestPolynomialValueRepresentation:
    """Tests for evaluation at the roots of unity."""

    def test_values_at_roots_of_unity(self):
        p = polynomial([1.0, 2.0, 3.0])

        values = polynomial_value_representation(p)

        assert values.shape == (4,)
        assert values.dtype == torch.complex128

        k = torch.arange(4, dtype=torch.float64)
        roots = torch.exp(2j * torch.pi * k / 4)
        expected = 1.0 + 2.0 * roots + 3.0 * roots**2
        torch.testing.assert_close(values, expected)

    def test_constant(self):
        values = polynomial_value_representation(polynomial([5.0]))
        torch.testing.assert_close(
            values, torch.tensor([5.0 + 0.0j], dtype=torch.complex128)
        )

    def test_integer_ring_rejected(self):
        with pytest.raises(RingMismatchError):
            polynomial_value_representation(polynomial([1, 2]))
