from typing import Any

from ._polynomial import Polynomial


def polynomial_coefficient(p: Polynomial, index: int) -> Any:
    """Return the coefficient of ``x^index``.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    index : int
        Power of x, non-negative.

    Returns
    -------
    Any
        The coefficient, or the ring's zero when ``index`` exceeds the
        degree.

    Raises
    ------
    IndexError
        If index is negative.
    """
    if index < 0:
        raise IndexError(
            f"Coefficient index must be non-negative, got {index}"
        )

    if index >= len(p.coeffs):
        return p.ring.zero()

    return p.coeffs[index]


def polynomial_leading_coefficient(p: Polynomial) -> Any:
    """Return the highest-degree coefficient."""
    return p.coeffs[-1]


def polynomial_is_zero(p: Polynomial) -> bool:
    """Return True if ``p`` is the zero polynomial."""
    return len(p.coeffs) == 1 and p.ring.is_zero(p.coeffs[0])


def polynomial_is_one(p: Polynomial) -> bool:
    """Return True if ``p`` is the constant polynomial 1."""
    return len(p.coeffs) == 1 and p.ring.is_one(p.coeffs[0])
