from torchpoly.polynomial._polynomial_error import PolynomialError


class DivisionByZeroError(PolynomialError, ZeroDivisionError):
    """Division by the zero polynomial.

    Also a ``ZeroDivisionError`` so callers can handle polynomial and
    scalar division by zero in one ``except`` clause.
    """

    pass
