from typing import Any, Optional

from torchpoly.polynomial._degree_error import DegreeError
from torchpoly.ring import Ring, ring_of

from ._polynomial import Polynomial


def polynomial_full(
    value: Any, degree: int, ring: Optional[Ring] = None
) -> Polynomial:
    """Create a polynomial with ``degree + 1`` coefficients equal to value.

    Parameters
    ----------
    value : Any
        Coefficient repeated at every power.
    degree : int
        Degree of the result, non-negative.
    ring : Ring, optional
        Coefficient ring, inferred from ``value`` when omitted.

    Returns
    -------
    Polynomial
        ``value * (1 + x + ... + x^degree)``, or the zero polynomial if
        ``value`` is zero.

    Raises
    ------
    DegreeError
        If degree is negative.

    Examples
    --------
    >>> polynomial_full(1, 3).coeffs  # 1 + x + x^2 + x^3
    (1, 1, 1, 1)
    """
    if degree < 0:
        raise DegreeError(f"Degree must be non-negative, got {degree}")

    if ring is None:
        ring = ring_of([value])

    value = ring.coerce(value)

    if ring.is_zero(value):
        return Polynomial(coeffs=(ring.zero(),), ring=ring)

    return Polynomial(coeffs=(value,) * (degree + 1), ring=ring)
