"""Recursive radix-2 Fourier transform."""

import math

import torch
from torch import Tensor


def fourier_transform(input: Tensor) -> Tensor:
    r"""Compute the discrete Fourier transform of a signal.

    The transform evaluates the polynomial with coefficients ``input`` at
    the n-th roots of unity:

    .. math::
        X[k] = \sum_{j=0}^{n-1} x[j] \cdot e^{2\pi i k j / n}

    Parameters
    ----------
    input : Tensor
        One-dimensional real or complex tensor whose length is a power of
        two.

    Returns
    -------
    Tensor
        ``complex128`` tensor of the same length.

    Raises
    ------
    ValueError
        If input is not one-dimensional or its length is not a power of
        two.

    Examples
    --------
    >>> X = fourier_transform(torch.tensor([1.0, 2.0, 3.0, 4.0]))
    >>> X.dtype
    torch.complex128

    Notes
    -----
    **Sign convention:**

    The exponent is positive, so this is ``n * torch.fft.ifft(input)``,
    the evaluation map used for polynomial multiplication. The inverse in
    :func:`inverse_fourier_transform` uses the negative exponent and
    divides by n.

    **Implementation:**

    Recursive Cooley-Tukey. Each level transforms the even- and odd-indexed
    halves as strided views of its input, so no coefficients are copied on
    the way down. Twiddle factors ``w^j`` are accumulated multiplicatively
    from ``w = e^{2 pi i / n}`` across the n/2 butterflies.

    See Also
    --------
    inverse_fourier_transform : The inverse Fourier transform.
    """
    _check_radix2_input(input)

    return radix2_transform(input.to(torch.complex128), 1.0)


def radix2_transform(x: Tensor, sign: float) -> Tensor:
    """Unnormalized radix-2 recursion with twiddle ``e^{sign 2 pi i / n}``."""
    n = x.shape[-1]

    if n == 1:
        return x.clone()

    angle = sign * 2.0 * math.pi / n
    w_n = complex(math.cos(angle), math.sin(angle))

    y_even = radix2_transform(x[0::2], sign)
    y_odd = radix2_transform(x[1::2], sign)

    half = n // 2

    # w^0, w^1, ..., w^(half - 1)
    twiddle = torch.full((half,), w_n, dtype=x.dtype, device=x.device)
    twiddle[0] = 1.0
    twiddle = torch.cumprod(twiddle, dim=0)

    odd_term = twiddle * y_odd

    return torch.cat([y_even + odd_term, y_even - odd_term])


def _check_radix2_input(input: Tensor) -> None:
    if input.dim() != 1:
        raise ValueError(
            f"Expected a one-dimensional tensor, got {input.dim()} dimensions"
        )

    n = input.shape[0]

    if n == 0 or n & (n - 1) != 0:
        raise ValueError(f"Length must be a power of two, got {n}")
