from torchpoly.polynomial._polynomial_error import PolynomialError


class RingMismatchError(PolynomialError):
    """Arithmetic between polynomials over incompatible rings.

    Raised when a binary operation receives polynomials bound to different
    coefficient rings, or when an operation restricted to one ring (e.g.
    transform-based multiplication over ``RealRing``) receives another.
    """

    pass
