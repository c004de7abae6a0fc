from typing import Any

from ._polynomial import Polynomial
from ._polynomial_trim import trim_coefficients


def polynomial_scale(p: Polynomial, c: Any) -> Polynomial:
    """Multiply polynomial by a scalar.

    Parameters
    ----------
    p : Polynomial
        Polynomial to scale.
    c : Any
        Scalar, converted into the ring of p.

    Returns
    -------
    Polynomial
        Scaled polynomial c * p. Scaling by zero gives the zero
        polynomial.
    """
    ring = p.ring
    c = ring.coerce(c)

    result = [ring.multiply(c, coeff) for coeff in p.coeffs]

    return Polynomial(coeffs=trim_coefficients(result, ring), ring=ring)
