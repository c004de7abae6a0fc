"""Fourier transforms used for fast polynomial multiplication.

Transforms
----------
fourier_transform, inverse_fourier_transform
    Recursive radix-2 Cooley-Tukey transform of power-of-two length.
"""

from ._fourier_transform import fourier_transform
from ._inverse_fourier_transform import inverse_fourier_transform

__all__ = [
    "fourier_transform",
    "inverse_fourier_transform",
]
