from ._polynomial import Polynomial


def polynomial_negate(p: Polynomial) -> Polynomial:
    """Negate polynomial.

    Each coefficient c is replaced by ``zero - c`` in the ring.

    Parameters
    ----------
    p : Polynomial
        Polynomial to negate.

    Returns
    -------
    Polynomial
        Negated polynomial -p.
    """
    ring = p.ring

    return Polynomial(
        coeffs=tuple(ring.negate(c) for c in p.coeffs),
        ring=ring,
    )
