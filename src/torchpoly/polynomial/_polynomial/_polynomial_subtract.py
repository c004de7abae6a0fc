from ._polynomial import Polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_negate import polynomial_negate


def polynomial_subtract(p: Polynomial, q: Polynomial) -> Polynomial:
    """Subtract two polynomials.

    Negates q and delegates to :func:`polynomial_add`.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to subtract, over the same ring.

    Returns
    -------
    Polynomial
        Difference p - q.

    Raises
    ------
    RingMismatchError
        If p and q are over different rings.
    """
    return polynomial_add(p, polynomial_negate(q))
