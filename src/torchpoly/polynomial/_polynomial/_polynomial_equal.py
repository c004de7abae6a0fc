from ._polynomial import Polynomial
from ._polynomial_coefficient import polynomial_coefficient


def polynomial_equal(
    p: Polynomial,
    q: Polynomial,
    tol: float = 0.0,
) -> bool:
    """Check polynomial equality, optionally within tolerance.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare.
    tol : float
        Absolute tolerance for coefficient comparison. With the default of
        0 coefficients are compared with the ring's equality; otherwise the
        ring elements must support ``abs`` of their difference.

    Returns
    -------
    bool
        True if the polynomials are over the same ring and every
        coefficient matches. Missing high-order coefficients count as zero,
        so unnormalized polynomials compare equal to their trimmed form.
    """
    if p.ring != q.ring:
        return False

    ring = p.ring

    for i in range(max(len(p.coeffs), len(q.coeffs))):
        a = polynomial_coefficient(p, i)
        b = polynomial_coefficient(q, i)

        if tol == 0.0:
            if not ring.equal(a, b):
                return False
        elif abs(ring.subtract(a, b)) > tol:
            return False

    return True
