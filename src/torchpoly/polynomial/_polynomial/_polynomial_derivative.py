from torchpoly.ring import ring_multiply_integer

from ._polynomial import Polynomial
from ._polynomial_trim import trim_coefficients


def polynomial_derivative(p: Polynomial, order: int = 1) -> Polynomial:
    """Compute formal derivative of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    order : int
        Derivative order (default 1).

    Returns
    -------
    Polynomial
        Derivative d^n p / dx^n. Constant polynomial returns the zero
        polynomial.

    Raises
    ------
    ValueError
        If order is negative.

    Notes
    -----
    The factor ``i + 1`` multiplying each coefficient is applied with
    :func:`~torchpoly.ring.ring_multiply_integer`, so the derivative is
    defined for any ring, including rings that cannot multiply their
    elements by Python integers.

    Examples
    --------
    >>> p = polynomial([1, 2, 3, 4, 5])  # 1 + 2x + 3x^2 + 4x^3 + 5x^4
    >>> polynomial_derivative(p).coeffs  # 2 + 6x + 12x^2 + 20x^3
    (2, 6, 12, 20)
    """
    if order < 0:
        raise ValueError(f"Derivative order must be non-negative, got {order}")

    ring = p.ring
    coeffs = p.coeffs

    for _ in range(order):
        n = len(coeffs)
        if n <= 1:
            # Derivative of constant is zero
            return Polynomial(coeffs=(ring.zero(),), ring=ring)

        # d/dx (a_0 + a_1*x + a_2*x^2 + ... + a_n*x^n)
        # = a_1 + 2*a_2*x + 3*a_3*x^2 + ... + n*a_n*x^(n-1)
        coeffs = trim_coefficients(
            [
                ring_multiply_integer(ring, coeffs[i], i)
                for i in range(1, n)
            ],
            ring,
        )

    return Polynomial(coeffs=coeffs, ring=ring)
