"""Conversion from transfer function to zeros-poles-gain."""

import torch
from torch import Tensor

from torchlti.polynomial import Polynomial, polynomial_roots, polynomial_scale

from ._dtypes import complex_dtype, real_dtype
from ._tf_filter import TFFilter
from ._zpk_filter import ZPKFilter


def tf_to_zpk(f: TFFilter) -> ZPKFilter:
    """Convert a transfer function filter to zeros, poles and gain.

    Parameters
    ----------
    f : TFFilter
        Transfer function filter.

    Returns
    -------
    ZPKFilter
        Equivalent filter. Zeros and poles are complex with the precision
        of the transfer function coefficients; coincident zero/pole pairs
        are cancelled.

    Notes
    -----
    The gain is the real part of the leading numerator coefficient. The
    zeros are the roots of the numerator divided by that gain and the
    poles are the roots of the (monic) denominator:

    .. math::
        \\frac{B(z)}{A(z)} = k \\frac{\\prod (z - z_i)}{\\prod (z - p_j)}

    Root-finding failures propagate from ``polynomial_roots``.

    Examples
    --------
    >>> f = tf_filter([0.25, 0.25], [1.0, -0.5])
    >>> zpk = tf_to_zpk(f)
    >>> zpk.zeros, zpk.poles, zpk.gain
    (tensor([-1.+0.j], dtype=torch.complex128), tensor([0.5000+0.j], dtype=torch.complex128), tensor(0.2500, dtype=torch.float64))
    """
    numerator = f.numerator
    denominator = f.denominator

    dtype = complex_dtype(real_dtype(numerator.coeffs.dtype))

    gain = numerator.coeffs[-1].real.clone()
    numerator = polynomial_scale(numerator, 1 / gain)

    return ZPKFilter(
        zeros=_roots(numerator, dtype),
        poles=_roots(denominator, dtype),
        gain=gain,
    )


def _roots(p: Polynomial, dtype: torch.dtype) -> Tensor:
    if p.coeffs.shape[-1] < 2:
        return torch.zeros(0, dtype=dtype, device=p.coeffs.device)

    return polynomial_roots(p).to(dtype)
