"""Frequency response of a filter in any representation."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from torchlti.polynomial import polynomial_evaluate

from ._biquad_filter import BiquadFilter
from ._constants import DEFAULT_FREQUENCY_POINTS
from ._sos_filter import SOSFilter
from ._tf_filter import TFFilter
from ._zpk_filter import ZPKFilter


def frequency_response(
    f,
    frequencies: Optional[Tensor] = None,
) -> Tuple[Tensor, Tensor]:
    """Compute the frequency response H(e^{jw}) of a digital filter.

    Parameters
    ----------
    f : ZPKFilter, TFFilter, BiquadFilter or SOSFilter
        Filter to evaluate. Each representation is evaluated directly,
        without converting it first.
    frequencies : Tensor, optional
        Normalized angular frequencies in radians per sample. Default is
        ``DEFAULT_FREQUENCY_POINTS`` equally spaced points in [0, pi).

    Returns
    -------
    frequencies : Tensor
        Frequencies at which the response was computed.
    response : Tensor
        Complex response, same shape as ``frequencies``.

    Raises
    ------
    TypeError
        If ``f`` is not a filter representation.

    Examples
    --------
    >>> f = tf_filter([0.5, 0.5], [1.0, 0.0])
    >>> w, h = frequency_response(f, torch.tensor([0.0, math.pi]))
    >>> h.abs()
    tensor([1.0000e+00, 3.0616e-17], dtype=torch.float64)
    """
    if frequencies is None:
        frequencies = (
            torch.arange(DEFAULT_FREQUENCY_POINTS, dtype=torch.float64)
            * math.pi
            / DEFAULT_FREQUENCY_POINTS
        )

    z = torch.exp(1j * frequencies.to(torch.float64))

    if isinstance(f, ZPKFilter):
        response = _zpk_response(f, z)
    elif isinstance(f, TFFilter):
        response = polynomial_evaluate(f.numerator, z) / polynomial_evaluate(
            f.denominator, z
        )
    elif isinstance(f, BiquadFilter):
        response = _biquad_response(f, z)
    elif isinstance(f, SOSFilter):
        response = f.gain * torch.ones_like(z)
        for section in f.sections:
            response = response * _biquad_response(section, z)
    else:
        raise TypeError(
            f"cannot compute the frequency response of {type(f).__name__}"
        )

    return frequencies, response


def _zpk_response(f: ZPKFilter, z: Tensor) -> Tensor:
    numerator = (z.unsqueeze(-1) - f.zeros).prod(dim=-1)
    denominator = (z.unsqueeze(-1) - f.poles).prod(dim=-1)

    return f.gain * numerator / denominator


def _biquad_response(f: BiquadFilter, z: Tensor) -> Tensor:
    z1 = 1 / z
    z2 = z1 * z1

    return (f.b0 + f.b1 * z1 + f.b2 * z2) / (1 + f.a1 * z1 + f.a2 * z2)
