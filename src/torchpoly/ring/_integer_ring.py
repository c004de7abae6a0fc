import numbers
from dataclasses import dataclass

from ._ring import Ring


@dataclass(frozen=True)
class IntegerRing(Ring):
    """Ring of Python integers.

    Division truncates toward zero, so ``divide(3, 2) == 1`` and
    ``divide(-3, 2) == -1``. It is not exact: polynomial division over this
    ring may stop early and return a remainder whose degree is not below
    the divisor's.
    """

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def add(self, a: int, b: int) -> int:
        return a + b

    def subtract(self, a: int, b: int) -> int:
        return a - b

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def divide(self, a: int, b: int) -> int:
        if b == 0:
            raise ZeroDivisionError("integer division by zero")

        quotient = abs(a) // abs(b)

        if (a < 0) != (b < 0):
            return -quotient

        return quotient

    def coerce(self, value) -> int:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(
                f"IntegerRing coefficients must be integers, got "
                f"{type(value).__name__}"
            )

        return int(value)
