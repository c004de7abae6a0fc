from torchpoly.ring import Ring

from ._polynomial import Polynomial


def polynomial_zero(ring: Ring) -> Polynomial:
    """Return the zero polynomial over ``ring``.

    The zero polynomial is represented by a single zero coefficient and has
    degree 0.

    Examples
    --------
    >>> polynomial_zero(IntegerRing()).coeffs
    (0,)
    """
    return Polynomial(coeffs=(ring.zero(),), ring=ring)
