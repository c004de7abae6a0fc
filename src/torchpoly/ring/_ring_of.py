import numbers
from typing import Iterable

from ._integer_ring import IntegerRing
from ._real_ring import RealRing
from ._ring import Ring


def ring_of(values: Iterable) -> Ring:
    """Infer the coefficient ring of a sequence of Python numbers.

    Parameters
    ----------
    values : Iterable
        Coefficients.

    Returns
    -------
    Ring
        ``IntegerRing()`` if every value is an integer, ``RealRing()`` if
        at least one value is a float and the rest are real numbers.

    Raises
    ------
    TypeError
        If a value is neither an integer nor a real number. Booleans are
        rejected.

    Examples
    --------
    >>> ring_of([1, 2, 3])
    IntegerRing()
    >>> ring_of([1, 2.5])
    RealRing()
    """
    integral = True

    for value in values:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(
                f"Cannot infer a coefficient ring for {type(value).__name__}; "
                f"pass ring= explicitly"
            )

        if not isinstance(value, numbers.Integral):
            integral = False

    if integral:
        return IntegerRing()

    return RealRing()
