"""Coefficient ring contract."""

from abc import ABC, abstractmethod
from typing import Any


class Ring(ABC):
    """Algebraic capabilities a coefficient type must provide.

    A :class:`~torchpoly.polynomial.Polynomial` stores plain Python values
    as coefficients and delegates every coefficient-level operation to the
    ring it is bound to. Subclasses must implement the additive and
    multiplicative identities, addition, subtraction and multiplication.
    Equality defaults to ``==`` on the elements.

    Rings are compared by value, so two polynomials built over
    ``IntegerRing()`` in different places are bound to the same ring.

    Examples
    --------
    >>> ring = IntegerRing()
    >>> ring.add(ring.one(), ring.one())
    2
    >>> ring.negate(3)
    -3
    """

    @abstractmethod
    def zero(self) -> Any:
        """Additive identity."""

    @abstractmethod
    def one(self) -> Any:
        """Multiplicative identity."""

    @abstractmethod
    def add(self, a: Any, b: Any) -> Any:
        pass

    @abstractmethod
    def subtract(self, a: Any, b: Any) -> Any:
        pass

    @abstractmethod
    def multiply(self, a: Any, b: Any) -> Any:
        pass

    def divide(self, a: Any, b: Any) -> Any:
        """Ring-native division of ``a`` by ``b``.

        Only needed by polynomial division. Rings that are not fields may
        return an inexact result (e.g. truncating integer division).

        Raises
        ------
        NotImplementedError
            If the ring has no division operator.
        """
        raise NotImplementedError(
            f"{type(self).__name__} does not support division"
        )

    def equal(self, a: Any, b: Any) -> bool:
        return a == b

    def negate(self, a: Any) -> Any:
        return self.subtract(self.zero(), a)

    def is_zero(self, a: Any) -> bool:
        return self.equal(a, self.zero())

    def is_one(self, a: Any) -> bool:
        return self.equal(a, self.one())

    def coerce(self, value: Any) -> Any:
        """Convert ``value`` into an element of this ring.

        Raises
        ------
        TypeError
            If ``value`` cannot be represented in the ring.
        """
        return value
