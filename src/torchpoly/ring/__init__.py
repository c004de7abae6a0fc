"""Coefficient rings for polynomial arithmetic.

Rings
-----
Ring
    Abstract contract: zero, one, add, subtract, multiply, equality.
IntegerRing
    Python integers with truncating division.
RealRing
    Binary64 floats.
ModularIntegerRing
    Integers modulo n.

Utilities
---------
ring_of
    Infer the ring of a coefficient sequence.
ring_multiply_integer
    Multiply a ring element by a non-negative integer by repeated doubling.
"""

from ._integer_ring import IntegerRing
from ._modular_integer_ring import ModularIntegerRing
from ._real_ring import RealRing
from ._ring import Ring
from ._ring_multiply_integer import ring_multiply_integer
from ._ring_of import ring_of

__all__ = [
    "IntegerRing",
    "ModularIntegerRing",
    "RealRing",
    "Ring",
    "ring_multiply_integer",
    "ring_of",
]
