from torchpoly.ring import Ring

from ._polynomial import Polynomial


def polynomial_one(ring: Ring) -> Polynomial:
    """Return the constant polynomial 1 over ``ring``."""
    return Polynomial(coeffs=(ring.one(),), ring=ring)
