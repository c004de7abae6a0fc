from ._polynomial import Polynomial
from ._polynomial_divmod import polynomial_divmod


def polynomial_mod(p: Polynomial, q: Polynomial) -> Polynomial:
    """Return remainder of polynomial division.

    Convenience wrapper around polynomial_divmod returning the remainder.

    Parameters
    ----------
    p : Polynomial
        Dividend polynomial.
    q : Polynomial
        Divisor polynomial.

    Returns
    -------
    Polynomial
        Remainder of p / q.

    Examples
    --------
    >>> p = polynomial([1.0, 0.0, 1.0])  # x^2 + 1
    >>> q = polynomial([-1.0, 1.0])  # x - 1
    >>> polynomial_mod(p, q).coeffs  # remainder is 2
    (2.0,)
    """
    _, remainder = polynomial_divmod(p, q)
    return remainder
