from typing import Any

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x: Any) -> Any:
    """Evaluate polynomial at a point using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial to evaluate.
    x : Any
        Evaluation point, converted into the ring of p.

    Returns
    -------
    Any
        Value p(x) in the ring of p.

    Examples
    --------
    >>> p = polynomial([1, 2, 3])  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, 2)
    17
    """
    ring = p.ring
    x = ring.coerce(x)

    result = ring.zero()
    for c in reversed(p.coeffs):
        result = ring.add(ring.multiply(result, x), c)

    return result
