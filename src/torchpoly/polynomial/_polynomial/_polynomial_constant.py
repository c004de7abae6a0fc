from typing import Any, Optional

from torchpoly.ring import Ring, ring_of

from ._polynomial import Polynomial


def polynomial_constant(
    value: Any, ring: Optional[Ring] = None
) -> Polynomial:
    """Return the degree-0 polynomial ``value``.

    Parameters
    ----------
    value : Any
        Constant term.
    ring : Ring, optional
        Coefficient ring, inferred from ``value`` when omitted.
    """
    if ring is None:
        ring = ring_of([value])

    return Polynomial(coeffs=(ring.coerce(value),), ring=ring)
