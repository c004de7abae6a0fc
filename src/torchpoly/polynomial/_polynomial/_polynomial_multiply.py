from ._common_ring import common_ring
from ._polynomial import Polynomial
from ._polynomial_trim import trim_coefficients


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials.

    Computes the discrete convolution of the coefficients in
    O(len(p) * len(q)) ring operations. Result degree is deg(p) + deg(q)
    unless either factor is zero.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply, over the same ring.

    Returns
    -------
    Polynomial
        Product p * q.

    Raises
    ------
    RingMismatchError
        If p and q are over different rings.

    See Also
    --------
    polynomial_multiply_fft : O(n log n) multiplication for real
        polynomials of high degree.

    Examples
    --------
    >>> polynomial_multiply(polynomial([-1, 1]), polynomial([1, 1, 1])).coeffs
    (-1, 0, 0, 1)
    """
    ring = common_ring(p, q)

    n_out = len(p.coeffs) + len(q.coeffs) - 1
    result = [ring.zero()] * n_out

    for i, a in enumerate(p.coeffs):
        for j, b in enumerate(q.coeffs):
            result[i + j] = ring.add(result[i + j], ring.multiply(a, b))

    return Polynomial(coeffs=trim_coefficients(result, ring), ring=ring)
