from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return degree of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    int
        Number of coefficients minus 1. Constant polynomials, including
        the zero polynomial, have degree 0.

    Notes
    -----
    This is the formal degree of the stored coefficients. Polynomials built
    with :func:`polynomial` are normalized, so it is also the actual degree.
    """
    return max(len(p.coeffs) - 1, 0)
