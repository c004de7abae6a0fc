"""torchpoly: polynomial arithmetic over generic rings, backed by PyTorch."""

from . import (
    polynomial,
    ring,
    transform,
)

__all__ = [
    "polynomial",
    "ring",
    "transform",
]

__version__ = "0.1.0"
