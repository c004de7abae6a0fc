import numbers
from dataclasses import dataclass

from ._ring import Ring


@dataclass(frozen=True)
class RealRing(Ring):
    """Ring of IEEE 754 binary64 floats.

    This is the only ring supported by transform-based multiplication.
    Division is true division and therefore exact up to rounding.
    """

    def zero(self) -> float:
        return 0.0

    def one(self) -> float:
        return 1.0

    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        return a - b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def divide(self, a: float, b: float) -> float:
        return a / b

    def coerce(self, value) -> float:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(
                f"RealRing coefficients must be real numbers, got "
                f"{type(value).__name__}"
            )

        return float(value)
