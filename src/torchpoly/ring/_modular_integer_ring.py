import numbers
from dataclasses import dataclass

from ._ring import Ring


@dataclass(frozen=True)
class ModularIntegerRing(Ring):
    """Integers modulo ``modulus``.

    Elements are stored as canonical residues in ``[0, modulus)``. For a
    prime modulus the ring is a field and polynomial division is exact.

    Parameters
    ----------
    modulus : int
        Modulus, at least 2.

    Examples
    --------
    >>> ring = ModularIntegerRing(7)
    >>> ring.divide(1, 3)
    5
    """

    modulus: int

    def __post_init__(self):
        if isinstance(self.modulus, bool) or not isinstance(
            self.modulus, numbers.Integral
        ):
            raise TypeError(
                "modulus must be an integer, "
                f"got {type(self.modulus).__name__}"
            )

        if self.modulus < 2:
            raise ValueError(f"modulus must be at least 2, got {self.modulus}")

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.modulus

    def subtract(self, a: int, b: int) -> int:
        return (a - b) % self.modulus

    def multiply(self, a: int, b: int) -> int:
        return (a * b) % self.modulus

    def divide(self, a: int, b: int) -> int:
        try:
            inverse = pow(b, -1, self.modulus)
        except ValueError:
            raise ZeroDivisionError(
                f"{b} is not invertible modulo {self.modulus}"
            ) from None

        return (a * inverse) % self.modulus

    def coerce(self, value) -> int:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(
                f"ModularIntegerRing coefficients must be integers, got "
                f"{type(value).__name__}"
            )

        return int(value) % self.modulus
