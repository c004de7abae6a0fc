from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._polynomial import Polynomial


def polynomial_div(p: "Polynomial", q: "Polynomial") -> "Polynomial":
    """Return quotient of polynomial division.

    Convenience wrapper around polynomial_divmod returning the quotient.

    Parameters
    ----------
    p : Polynomial
        Dividend polynomial.
    q : Polynomial
        Divisor polynomial.

    Returns
    -------
    Polynomial
        Quotient of p / q.

    Examples
    --------
    >>> p = polynomial([-1, 0, 0, 0, 0, 0, 0, 1])  # x^7 - 1
    >>> q = polynomial([-1, 1])  # x - 1
    >>> polynomial_div(p, q).coeffs
    (1, 1, 1, 1, 1, 1, 1)
    """
    from ._polynomial_divmod import polynomial_divmod

    quotient, _ = polynomial_divmod(p, q)
    return quotient
