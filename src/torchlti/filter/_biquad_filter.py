"""Biquad (single second-order section) filter representation."""

from typing import Any, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._dtypes import as_coefficients, promote_dtypes
from ._exceptions import InvalidFilterError


@tensorclass
class BiquadFilter:
    """Second-order transfer function section with normalized denominator.

    Represents

    .. math::
        H(z) = \\frac{b_0 + b_1 z^{-1} + b_2 z^{-2}}{1 + a_1 z^{-1} + a_2 z^{-2}}

    Attributes
    ----------
    b0, b1, b2 : Tensor
        Numerator coefficients, 0-d.
    a1, a2 : Tensor
        Denominator coefficients, 0-d. The a0 coefficient is always 1.

    Notes
    -----
    Multiplying a biquad by a scalar scales the numerator only:
    ``biquad * 2.0`` doubles b0, b1 and b2 and leaves a1, a2 unchanged.
    """

    b0: Tensor
    b1: Tensor
    b2: Tensor
    a1: Tensor
    a2: Tensor

    def __mul__(self, other: Union[Tensor, float, complex]) -> "BiquadFilter":
        return biquad_scale(self, other)

    def __rmul__(self, other: Union[Tensor, float, complex]) -> "BiquadFilter":
        return biquad_scale(self, other)


def biquad_filter(
    b0: Any,
    b1: Any,
    b2: Any,
    a0: Any,
    a1: Any,
    a2: Any,
    gain: Any = 1.0,
) -> BiquadFilter:
    """Create a biquad from raw coefficients, normalizing by a0.

    Parameters
    ----------
    b0, b1, b2 : scalar or Tensor
        Numerator coefficients.
    a0, a1, a2 : scalar or Tensor
        Denominator coefficients. ``a0`` must be non-zero.
    gain : scalar or Tensor, default 1.0
        Extra factor applied to the numerator.

    Returns
    -------
    BiquadFilter
        Biquad with coefficients ``gain * b / a0`` and ``a / a0``.

    Raises
    ------
    InvalidFilterError
        If a0 is zero or a coefficient is not a scalar.

    Examples
    --------
    >>> f = biquad_filter(1.0, 2.0, 1.0, 2.0, -0.5, 0.25, gain=4.0)
    >>> f.b0.item(), f.a1.item()
    (2.0, -0.25)
    """
    values = [_scalar(c) for c in (b0, b1, b2, a0, a1, a2, gain)]
    dtype = promote_dtypes(*(v.dtype for v in values))
    b0, b1, b2, a0, a1, a2, gain = (v.to(dtype) for v in values)

    if a0 == 0:
        raise InvalidFilterError("biquad a0 coefficient must be non-zero")

    return BiquadFilter(
        b0=gain * b0 / a0,
        b1=gain * b1 / a0,
        b2=gain * b2 / a0,
        a1=a1 / a0,
        a2=a2 / a0,
    )


def _scalar(x: Any) -> Tensor:
    x = as_coefficients(x)

    if x.numel() != 1:
        raise InvalidFilterError(
            f"biquad coefficients must be scalars, got shape {tuple(x.shape)}"
        )

    return x.reshape(())


def biquad_scale(
    f: BiquadFilter, c: Union[Tensor, float, complex]
) -> BiquadFilter:
    """Scale the numerator of a biquad by a scalar.

    Parameters
    ----------
    f : BiquadFilter
        Input section.
    c : Tensor or scalar
        Scale factor.

    Returns
    -------
    BiquadFilter
        Section with b0, b1, b2 multiplied by ``c``; a1 and a2 unchanged.
    """
    return BiquadFilter(
        b0=f.b0 * c,
        b1=f.b1 * c,
        b2=f.b2 * c,
        a1=f.a1,
        a2=f.a2,
    )
