from typing import Any, List, Sequence

from torchpoly.polynomial._polynomial_error import PolynomialError
from torchpoly.ring import Ring

from ._polynomial import Polynomial


def polynomial_trim(p: Polynomial) -> Polynomial:
    """Remove trailing zero coefficients.

    Parameters
    ----------
    p : Polynomial
        Input polynomial, possibly built without normalization.

    Returns
    -------
    Polynomial
        Normalized polynomial with at least one coefficient. Only the zero
        polynomial keeps a zero as its last coefficient.

    Notes
    -----
    Trimming is idempotent: trimming a normalized polynomial returns an
    equal polynomial.
    """
    return Polynomial(coeffs=trim_coefficients(p.coeffs, p.ring), ring=p.ring)


def trim_coefficients(coeffs: Sequence[Any], ring: Ring) -> tuple[Any, ...]:
    """Normalize a raw coefficient sequence.

    Drops the last coefficient while more than one remains and it equals
    the ring's zero.

    Raises
    ------
    PolynomialError
        If coeffs is empty.
    """
    values: List[Any] = list(coeffs)

    if len(values) == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    while len(values) > 1 and ring.is_zero(values[-1]):
        values.pop()

    return tuple(values)
