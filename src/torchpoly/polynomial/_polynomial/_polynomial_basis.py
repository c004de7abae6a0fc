from typing import Any, Optional

from torchpoly.polynomial._degree_error import DegreeError
from torchpoly.ring import Ring, ring_of

from ._polynomial import Polynomial


def polynomial_basis(
    value: Any, degree: int, ring: Optional[Ring] = None
) -> Polynomial:
    """Create the monomial ``value * x^degree``.

    All coefficients below the top one are zero.

    Parameters
    ----------
    value : Any
        Leading coefficient.
    degree : int
        Degree of the monomial, non-negative.
    ring : Ring, optional
        Coefficient ring, inferred from ``value`` when omitted.

    Returns
    -------
    Polynomial
        The monomial. If ``value`` is zero the zero polynomial is returned
        regardless of ``degree``.

    Raises
    ------
    DegreeError
        If degree is negative.

    Examples
    --------
    >>> polynomial_basis(1, 0).coeffs  # 1
    (1,)
    >>> polynomial_basis(2, 2).coeffs  # 2x^2
    (0, 0, 2)
    """
    if degree < 0:
        raise DegreeError(f"Degree must be non-negative, got {degree}")

    if ring is None:
        ring = ring_of([value])

    value = ring.coerce(value)

    if ring.is_zero(value):
        return Polynomial(coeffs=(ring.zero(),), ring=ring)

    return Polynomial(coeffs=(ring.zero(),) * degree + (value,), ring=ring)
