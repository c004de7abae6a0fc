from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from torchpoly.polynomial._polynomial_error import PolynomialError
from torchpoly.ring import Ring, ring_of


@dataclass(frozen=True)
class Polynomial:
    """Univariate polynomial over a coefficient ring, ascending coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    Instances are immutable. Every operation returns a new polynomial and
    coefficient storage is never shared with a mutable sequence.

    Calling ``Polynomial(coeffs=..., ring=...)`` directly does not normalize
    the coefficients; trailing zeros are kept at the caller's risk. Use
    :func:`polynomial` to build a normalized polynomial.

    Attributes
    ----------
    coeffs : tuple
        Coefficients in ascending order. coeffs[i] is the coefficient of
        x^i. Never empty.
    ring : Ring
        Ring the coefficients belong to.

    Examples
    --------
    1 + 2x + 3x^2 over the integers:
        polynomial([1, 2, 3])

    Operator overloading:
        p + q    # polynomial_add(p, q)
        p - q    # polynomial_subtract(p, q)
        p * q    # polynomial_multiply(p, q)
        p * c    # polynomial_scale(p, c)
        -p       # polynomial_negate(p)
        p ** n   # polynomial_pow(p, n)
        p // q   # polynomial_div(p, q)
        p % q    # polynomial_mod(p, q)
        p(x)     # polynomial_evaluate(p, x)
    """

    coeffs: tuple[Any, ...]
    ring: Ring

    def __post_init__(self):
        coeffs = tuple(self.coeffs)

        if len(coeffs) == 0:
            raise PolynomialError(
                "Polynomial must have at least one coefficient"
            )

        object.__setattr__(self, "coeffs", coeffs)

    def __len__(self) -> int:
        return len(self.coeffs)

    def __getitem__(self, index):
        return self.coeffs[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.coeffs)

    def __add__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add

        if not isinstance(other, Polynomial):
            return NotImplemented

        return polynomial_add(self, other)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        if not isinstance(other, Polynomial):
            return NotImplemented

        return polynomial_subtract(self, other)

    def __mul__(self, other: Any) -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return polynomial_multiply(self, other)

        if not self._is_scalar(other):
            return NotImplemented

        return polynomial_scale(self, other)

    def __rmul__(self, other: Any) -> "Polynomial":
        from ._polynomial_scale import polynomial_scale

        if not self._is_scalar(other):
            return NotImplemented

        return polynomial_scale(self, other)

    def _is_scalar(self, value: Any) -> bool:
        # Scalars are values the ring can coerce
        try:
            self.ring.coerce(value)
        except TypeError:
            return False

        return True

    def __neg__(self) -> "Polynomial":
        from ._polynomial_negate import polynomial_negate

        return polynomial_negate(self)

    def __call__(self, x: Any) -> Any:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)

    def __pow__(self, n: int) -> "Polynomial":
        from ._polynomial_pow import polynomial_pow

        return polynomial_pow(self, n)

    def __floordiv__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_div import polynomial_div

        if not isinstance(other, Polynomial):
            return NotImplemented

        return polynomial_div(self, other)

    def __mod__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_mod import polynomial_mod

        if not isinstance(other, Polynomial):
            return NotImplemented

        return polynomial_mod(self, other)

    def __divmod__(
        self, other: "Polynomial"
    ) -> tuple["Polynomial", "Polynomial"]:
        from ._polynomial_divmod import polynomial_divmod

        if not isinstance(other, Polynomial):
            return NotImplemented

        return polynomial_divmod(self, other)


def polynomial(coeffs: Iterable, ring: Optional[Ring] = None) -> Polynomial:
    """Create a normalized polynomial from a coefficient sequence.

    Parameters
    ----------
    coeffs : Iterable
        Coefficients in ascending order. Must have at least one
        coefficient.
    ring : Ring, optional
        Coefficient ring. Inferred with :func:`~torchpoly.ring.ring_of`
        when omitted.

    Returns
    -------
    Polynomial
        Polynomial with trailing zero coefficients removed. The zero
        polynomial is represented by a single zero coefficient.

    Raises
    ------
    PolynomialError
        If coeffs is empty.
    TypeError
        If a coefficient cannot be converted into the ring.

    Examples
    --------
    >>> p = polynomial([1, 2, 3, 0, 0])  # 1 + 2x + 3x^2
    >>> p.coeffs
    (1, 2, 3)
    >>> polynomial([0, 0]).coeffs
    (0,)
    """
    from ._polynomial_trim import trim_coefficients

    values = list(coeffs)

    if len(values) == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    if ring is None:
        ring = ring_of(values)

    values = [ring.coerce(value) for value in values]

    return Polynomial(coeffs=trim_coefficients(values, ring), ring=ring)
