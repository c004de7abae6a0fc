from typing import Any

from torchpoly.polynomial._division_by_zero_error import DivisionByZeroError
from torchpoly.ring import Ring

from ._common_ring import common_ring
from ._polynomial import Polynomial
from ._polynomial_coefficient import polynomial_is_zero
from ._polynomial_degree import polynomial_degree
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_trim import polynomial_trim, trim_coefficients


def polynomial_divmod(
    p: Polynomial, q: Polynomial
) -> tuple[Polynomial, Polynomial]:
    """Divide polynomial p by q, returning quotient and remainder.

    Euclidean long division: the leading term of the running dividend is
    divided by the leading term of q with the ring's own division, the
    matching multiple of q is subtracted, and the process repeats until the
    running dividend has lower degree than q.

    Over rings whose division is inexact (e.g. integers), a step may fail
    to lower the degree. The reduction stops as soon as the next quotient
    term is zero, cannot be formed because the ring raises
    ``ZeroDivisionError`` (e.g. a non-unit leading coefficient modulo a
    composite), or lands on a power of x that already has a nonzero
    quotient coefficient. The running dividend is returned as the
    remainder. ``p == quotient * q + remainder`` still holds, but the
    remainder's degree need not be below deg(q).

    Parameters
    ----------
    p : Polynomial
        Dividend polynomial.
    q : Polynomial
        Divisor polynomial.

    Returns
    -------
    quotient : Polynomial
        Quotient of division.
    remainder : Polynomial
        Remainder of division.

    Raises
    ------
    DivisionByZeroError
        If q is the zero polynomial.
    RingMismatchError
        If p and q are over different rings.

    Examples
    --------
    >>> p = polynomial([-1.0, 0.0, 0.0, 1.0])  # x^3 - 1
    >>> q = polynomial([-1.0, 1.0])  # x - 1
    >>> quotient, remainder = polynomial_divmod(p, q)
    >>> quotient.coeffs  # x^2 + x + 1
    (1.0, 1.0, 1.0)
    >>> remainder.coeffs
    (0.0,)

    Integer coefficients, where 3 / 2 truncates to 1:

    >>> quotient, remainder = polynomial_divmod(
    ...     polynomial([1, 2, 3]), polynomial([0, 0, 2])
    ... )
    >>> quotient.coeffs, remainder.coeffs
    ((1,), (1, 2, 1))
    """
    ring = common_ring(p, q)

    p = polynomial_trim(p)
    q = polynomial_trim(q)

    if polynomial_is_zero(q):
        raise DivisionByZeroError("Cannot divide by zero polynomial")

    deg_p = polynomial_degree(p)
    deg_q = polynomial_degree(q)

    # If dividend degree < divisor degree, quotient is 0, remainder is dividend
    if deg_p < deg_q:
        return Polynomial(coeffs=(ring.zero(),), ring=ring), p

    quotient = [ring.zero()] * (deg_p - deg_q + 1)
    leading_q = q.coeffs[-1]
    remainder = p

    while polynomial_degree(remainder) >= deg_q:
        term_degree = polynomial_degree(remainder) - deg_q

        try:
            term_coeff = ring.divide(remainder.coeffs[-1], leading_q)
        except ZeroDivisionError:
            # Leading coefficient of q is not a unit
            break

        if ring.is_zero(term_coeff):
            break

        # Degree did not drop on the previous step
        if not ring.is_zero(quotient[term_degree]):
            break

        quotient[term_degree] = term_coeff
        remainder = polynomial_subtract(
            remainder, _shifted_multiple(q, term_coeff, term_degree, ring)
        )

    return (
        Polynomial(coeffs=trim_coefficients(quotient, ring), ring=ring),
        remainder,
    )


def _shifted_multiple(
    q: Polynomial, c: Any, degree: int, ring: Ring
) -> Polynomial:
    # c * x^degree * q
    coeffs = [ring.zero()] * degree + [ring.multiply(c, b) for b in q.coeffs]

    return Polynomial(coeffs=coeffs, ring=ring)
