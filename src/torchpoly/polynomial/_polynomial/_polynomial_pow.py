from ._polynomial import Polynomial
from ._polynomial_multiply import polynomial_multiply


def polynomial_pow(p: Polynomial, n: int) -> Polynomial:
    """Raise polynomial to non-negative integer power.

    Uses exponentiation by squaring: p is squared, the square is raised to
    n // 2, and for odd n the result is multiplied once more by p. This
    needs O(log n) polynomial multiplications.

    Parameters
    ----------
    p : Polynomial
        Base polynomial.
    n : int
        Non-negative integer exponent.

    Returns
    -------
    Polynomial
        p raised to power n. By convention ``p ** 0`` is the constant
        polynomial 1 for every p, including the zero polynomial.

    Raises
    ------
    ValueError
        If n is negative.

    Examples
    --------
    >>> p = polynomial([-1, 1])  # x - 1
    >>> polynomial_pow(p, 5).coeffs
    (-1, 5, -10, 10, -5, 1)
    """
    if n < 0:
        raise ValueError(f"Exponent must be non-negative, got {n}")

    if n == 0:
        return Polynomial(coeffs=(p.ring.one(),), ring=p.ring)

    if n == 1:
        return p

    squared = polynomial_multiply(p, p)

    if n & 1:
        return polynomial_multiply(polynomial_pow(squared, n >> 1), p)

    return polynomial_pow(squared, n >> 1)
