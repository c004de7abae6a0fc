"""Inverse of the recursive radix-2 Fourier transform."""

import torch
from torch import Tensor

from ._fourier_transform import _check_radix2_input, radix2_transform


def inverse_fourier_transform(input: Tensor) -> Tensor:
    r"""Compute the inverse discrete Fourier transform.

    .. math::
        x[j] = \frac{1}{n} \sum_{k=0}^{n-1} X[k] \cdot e^{-2\pi i k j / n}

    Parameters
    ----------
    input : Tensor
        One-dimensional tensor whose length is a power of two, typically the
        output of :func:`fourier_transform`.

    Returns
    -------
    Tensor
        ``complex128`` tensor of the same length. Normalization is
        "backward": the forward transform is unnormalized and this one
        divides by n.

    Raises
    ------
    ValueError
        If input is not one-dimensional or its length is not a power of
        two.

    Examples
    --------
    >>> x = torch.tensor([1.0, 2.0, 3.0, 4.0], dtype=torch.float64)
    >>> torch.allclose(
    ...     inverse_fourier_transform(fourier_transform(x)).real, x
    ... )
    True
    """
    _check_radix2_input(input)

    n = input.shape[0]

    return radix2_transform(input.to(torch.complex128), -1.0) / n
