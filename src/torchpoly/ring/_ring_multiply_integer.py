from typing import Any

from ._ring import Ring


def ring_multiply_integer(ring: Ring, value: Any, times: int) -> Any:
    """Multiply a ring element by a non-negative integer.

    Computes ``value + value + ... + value`` (``times`` terms) with
    repeated doubling, so only ``O(log times)`` ring additions are needed
    and the ring does not have to support multiplication by Python
    integers.

    Parameters
    ----------
    ring : Ring
        Ring of ``value``.
    value : Any
        Ring element.
    times : int
        Non-negative multiplier.

    Returns
    -------
    Any
        ``times * value`` in the ring.

    Raises
    ------
    ValueError
        If ``times`` is negative.

    Examples
    --------
    >>> ring_multiply_integer(IntegerRing(), 1, 6)
    6
    >>> ring_multiply_integer(ModularIntegerRing(5), 3, 4)
    2
    """
    if times < 0:
        raise ValueError(f"times must be non-negative, got {times}")

    if times == 0:
        return ring.zero()

    return _double_and_add(ring, value, times)


def _double_and_add(ring: Ring, value: Any, times: int) -> Any:
    if ring.is_zero(value) or times == 1:
        return value

    doubled = _double_and_add(ring, ring.add(value, value), times >> 1)

    if times & 1:
        return ring.add(doubled, value)

    return doubled
