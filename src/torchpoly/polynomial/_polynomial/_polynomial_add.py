from ._common_ring import common_ring
from ._polynomial import Polynomial
from ._polynomial_trim import trim_coefficients


def polynomial_add(p: Polynomial, q: Polynomial) -> Polynomial:
    """Add two polynomials.

    Computes element-wise sum of coefficients. The tail of the longer
    operand is copied unchanged.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to add, over the same ring.

    Returns
    -------
    Polynomial
        Sum p + q, normalized since leading terms may cancel.

    Raises
    ------
    RingMismatchError
        If p and q are over different rings.
    """
    ring = common_ring(p, q)

    n_p = len(p.coeffs)
    n_q = len(q.coeffs)

    result = [
        ring.add(p.coeffs[i], q.coeffs[i]) for i in range(min(n_p, n_q))
    ]

    if n_p > n_q:
        result.extend(p.coeffs[n_q:])
    else:
        result.extend(q.coeffs[n_p:])

    return Polynomial(coeffs=trim_coefficients(result, ring), ring=ring)
