"""FFT-based polynomial multiplication for high-degree real polynomials.

For high-degree polynomials, FFT-based multiplication has complexity
O(n log n) compared to O(n^2) for direct convolution, making it
significantly faster for large polynomials.
"""

import warnings
from concurrent.futures import ThreadPoolExecutor

import torch
from torch import Tensor

from torchpoly.polynomial._precision_warning import PrecisionWarning
from torchpoly.polynomial._ring_mismatch_error import RingMismatchError
from torchpoly.ring import RealRing, Ring
from torchpoly.transform import fourier_transform, inverse_fourier_transform

from ._common_ring import common_ring
from ._polynomial import Polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_trim import trim_coefficients

# Threshold for switching to FFT-based multiplication
# Below this degree, direct convolution is typically faster
FFT_THRESHOLD = 64

# Decimal places kept by polynomial_multiply_auto
DEFAULT_DECIMAL_PLACES = 10

# Significant decimal digits a binary64 float carries
FLOAT64_DECIMAL_DIGITS = 15


def _next_power_of_2(n: int) -> int:
    """Return the smallest power of 2 >= n."""
    if n <= 0:
        return 1
    return 1 << (n - 1).bit_length()


def _with_trailing_zeros(p: Polynomial, target_len: int) -> Tensor:
    padded = torch.zeros(target_len, dtype=torch.float64)
    padded[: len(p.coeffs)] = torch.tensor(p.coeffs, dtype=torch.float64)
    return padded


def _check_real(ring: Ring) -> None:
    if ring != RealRing():
        raise RingMismatchError(
            f"FFT multiplication requires RealRing coefficients, got {ring!r}"
        )


def _check_decimal_places(decimal_places: int) -> None:
    if (
        isinstance(decimal_places, bool)
        or not isinstance(decimal_places, int)
        or decimal_places < 0
    ):
        raise ValueError(
            f"decimal_places must be a non-negative integer, "
            f"got {decimal_places!r}"
        )

    if decimal_places > FLOAT64_DECIMAL_DIGITS:
        warnings.warn(
            f"decimal_places={decimal_places} exceeds the "
            f"{FLOAT64_DECIMAL_DIGITS} significant digits of a float64; "
            f"coefficients are returned untruncated.",
            PrecisionWarning,
            stacklevel=3,
        )


def _to_polynomial(values: Tensor, decimal_places: int) -> Polynomial:
    if decimal_places > FLOAT64_DECIMAL_DIGITS:
        # No digits left to cut
        coeffs = values.real.tolist()
    else:
        # Truncate toward zero, not round-to-nearest
        scale = 10.0**decimal_places
        coeffs = (torch.trunc(values.real * scale) / scale).tolist()

    ring = RealRing()
    return Polynomial(coeffs=trim_coefficients(coeffs, ring), ring=ring)


def _fft_length(p: Polynomial, q: Polynomial) -> int:
    # deg(p) + deg(q) + 1 = length of the product
    return _next_power_of_2(polynomial_degree(p) + polynomial_degree(q) + 1)


def polynomial_multiply_fft(
    p: Polynomial, q: Polynomial, decimal_places: int
) -> Polynomial:
    """Multiply two real polynomials using FFT-based convolution.

    Uses the Fast Fourier Transform to compute the convolution of polynomial
    coefficients in O(n log n) time, compared to O(n^2) for direct
    convolution.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials over ``RealRing`` to multiply.
    decimal_places : int
        Number of decimal places kept in each output coefficient. The
        transform leaves small floating-point noise (often 1e-13 where the
        exact answer is 0); coefficients are truncated toward zero to this
        many decimals before normalization.

    Returns
    -------
    Polynomial
        Product p * q.

    Raises
    ------
    RingMismatchError
        If p or q is not over ``RealRing``.
    ValueError
        If decimal_places is negative.

    Warns
    -----
    PrecisionWarning
        If decimal_places exceeds the precision of a float64. The
        coefficients are then returned without truncation.

    Notes
    -----
    The algorithm works by:

    1. Falling back to :func:`polynomial_multiply` if either factor is
       constant
    2. Zero-padding both polynomials to n, the smallest power of two
       >= deg(p) + deg(q) + 1
    3. Computing the forward transform of both padded sequences
    4. Multiplying element-wise in frequency domain
    5. Computing the inverse transform
    6. Truncating the real parts to ``decimal_places`` and normalizing

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> q = polynomial([4.0, 5.0])  # 4 + 5x
    >>> polynomial_multiply_fft(p, q, 10).coeffs  # 4 + 13x + 22x^2 + 15x^3
    (4.0, 13.0, 22.0, 15.0)
    """
    _check_real(common_ring(p, q))
    _check_decimal_places(decimal_places)

    if polynomial_degree(p) == 0 or polynomial_degree(q) == 0:
        return polynomial_multiply(p, q)

    n_fft = _fft_length(p, q)

    p_fft = fourier_transform(_with_trailing_zeros(p, n_fft))
    q_fft = fourier_transform(_with_trailing_zeros(q, n_fft))

    result = inverse_fourier_transform(p_fft * q_fft)

    return _to_polynomial(result, decimal_places)


def polynomial_multiply_fft_threaded(
    p: Polynomial, q: Polynomial, decimal_places: int
) -> Polynomial:
    """Multiply two real polynomials using FFT, transforming both in parallel.

    Identical to :func:`polynomial_multiply_fft` except that the forward
    transforms of the two padded operands run as two concurrent tasks,
    joined before the pointwise product. The tasks share no mutable state
    and the result is bit-identical to the sequential version.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials over ``RealRing`` to multiply.
    decimal_places : int
        Number of decimal places kept in each output coefficient.

    Returns
    -------
    Polynomial
        Product p * q.

    Raises
    ------
    RingMismatchError
        If p or q is not over ``RealRing``.
    ValueError
        If decimal_places is negative.
    """
    _check_real(common_ring(p, q))
    _check_decimal_places(decimal_places)

    if polynomial_degree(p) == 0 or polynomial_degree(q) == 0:
        return polynomial_multiply(p, q)

    n_fft = _fft_length(p, q)

    with ThreadPoolExecutor(max_workers=2) as executor:
        p_future = executor.submit(
            fourier_transform, _with_trailing_zeros(p, n_fft)
        )
        q_future = executor.submit(
            fourier_transform, _with_trailing_zeros(q, n_fft)
        )

        p_fft = p_future.result()
        q_fft = q_future.result()

    result = inverse_fourier_transform(p_fft * q_fft)

    return _to_polynomial(result, decimal_places)


def polynomial_multiply_auto(
    p: Polynomial,
    q: Polynomial,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
) -> Polynomial:
    """Multiply two polynomials, automatically selecting the best algorithm.

    Uses FFT-based multiplication for high-degree real polynomials and
    direct convolution otherwise.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.
    decimal_places : int
        Decimal places kept when the FFT path is taken.

    Returns
    -------
    Polynomial
        Product p * q.

    Notes
    -----
    The threshold for switching to FFT is currently set to degree 64.
    This is a heuristic based on typical performance characteristics, and
    the optimal threshold may vary by hardware.
    """
    ring = common_ring(p, q)
    max_degree = max(polynomial_degree(p), polynomial_degree(q))

    if ring == RealRing() and max_degree >= FFT_THRESHOLD:
        return polynomial_multiply_fft(p, q, decimal_places)

    return polynomial_multiply(p, q)


def polynomial_value_representation(p: Polynomial) -> Tensor:
    """Return the values of a real polynomial at the roots of unity.

    The coefficients are zero-padded to the next power of two n and
    transformed, giving ``p(w^k)`` for ``w = e^{2 pi i / n}`` and
    ``k = 0, ..., n - 1``.

    Parameters
    ----------
    p : Polynomial
        Polynomial over ``RealRing``.

    Returns
    -------
    Tensor
        ``complex128`` tensor of length n.

    Raises
    ------
    RingMismatchError
        If p is not over ``RealRing``.
    """
    _check_real(p.ring)

    return fourier_transform(
        _with_trailing_zeros(p, _next_power_of_2(len(p.coeffs)))
    )

