from ._polynomial import Polynomial, polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_basis import polynomial_basis
from ._polynomial_coefficient import (
    polynomial_coefficient,
    polynomial_is_one,
    polynomial_is_zero,
    polynomial_leading_coefficient,
)
from ._polynomial_constant import polynomial_constant
from ._polynomial_degree import polynomial_degree
from ._polynomial_derivative import polynomial_derivative
from ._polynomial_div import polynomial_div
from ._polynomial_divmod import polynomial_divmod
from ._polynomial_equal import polynomial_equal
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_full import polynomial_full
from ._polynomial_mod import polynomial_mod
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_multiply_fft import (
    DEFAULT_DECIMAL_PLACES,
    FFT_THRESHOLD,
    polynomial_multiply_auto,
    polynomial_multiply_fft,
    polynomial_multiply_fft_threaded,
    polynomial_value_representation,
)
from ._polynomial_negate import polynomial_negate
from ._polynomial_one import polynomial_one
from ._polynomial_pow import polynomial_pow
from ._polynomial_scale import polynomial_scale
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_trim import polynomial_trim
from ._polynomial_zero import polynomial_zero

__all__ = [
    "DEFAULT_DECIMAL_PLACES",
    "FFT_THRESHOLD",
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
