"""Univariate polynomials over generic coefficient rings.

Construction
------------
polynomial, Polynomial
    Normalizing factory and the immutable polynomial type.
polynomial_zero, polynomial_one, polynomial_constant, polynomial_basis,
polynomial_full
    Named factories.

Arithmetic
----------
polynomial_add, polynomial_subtract, polynomial_negate, polynomial_scale,
polynomial_multiply, polynomial_divmod, polynomial_div, polynomial_mod,
polynomial_pow, polynomial_derivative, polynomial_evaluate

Transform-based multiplication
------------------------------
polynomial_multiply_fft, polynomial_multiply_fft_threaded,
polynomial_multiply_auto, polynomial_value_representation
    Real polynomials only.
"""

from ._degree_error import DegreeError
from ._division_by_zero_error import DivisionByZeroError
from ._polynomial import (
    DEFAULT_DECIMAL_PLACES,
    FFT_THRESHOLD,
    Polynomial,
    polynomial,
    polynomial_add,
    polynomial_basis,
    polynomial_coefficient,
    polynomial_constant,
    polynomial_degree,
    polynomial_derivative,
    polynomial_div,
    polynomial_divmod,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_full,
    polynomial_is_one,
    polynomial_is_zero,
    polynomial_leading_coefficient,
    polynomial_mod,
    polynomial_multiply,
    polynomial_multiply_auto,
    polynomial_multiply_fft,
    polynomial_multiply_fft_threaded,
    polynomial_negate,
    polynomial_one,
    polynomial_pow,
    polynomial_scale,
    polynomial_subtract,
    polynomial_trim,
    polynomial_value_representation,
    polynomial_zero,
)
from ._polynomial_error import PolynomialError
from ._precision_warning import PrecisionWarning
from ._ring_mismatch_error import RingMismatchError

__all__ = [
    # Exceptions
    "DegreeError",
    "DivisionByZeroError",
    "PolynomialError",
    "PrecisionWarning",
    "RingMismatchError",
    # Configuration
    "DEFAULT_DECIMAL_PLACES",
    "FFT_THRESHOLD",
    # Polynomial
    "Polynomial",
    "polynomial",
    "polynomial_add",
    "polynomial_basis",
    "polynomial_coefficient",
    "polynomial_constant",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_div",
    "polynomial_divmod",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_full",
    "polynomial_is_one",
    "polynomial_is_zero",
    "polynomial_leading_coefficient",
    "polynomial_mod",
    "polynomial_multiply",
    "polynomial_multiply_auto",
    "polynomial_multiply_fft",
    "polynomial_multiply_fft_threaded",
    "polynomial_negate",
    "polynomial_one",
    "polynomial_pow",
    "polynomial_scale",
    "polynomial_subtract",
    "polynomial_trim",
    "polynomial_value_representation",
    "polynomial_zero",
]
