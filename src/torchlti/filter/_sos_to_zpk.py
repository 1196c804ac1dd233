"""Conversion from second-order sections to zeros-poles-gain."""

import torch

from ._biquad_to_tf import biquad_to_tf
from ._dtypes import complex_dtype
from ._sos_filter import SOSFilter
from ._tf_to_zpk import tf_to_zpk
from ._zpk_filter import ZPKFilter


def sos_to_zpk(f: SOSFilter) -> ZPKFilter:
    """Convert second-order sections to zeros, poles and gain.

    Parameters
    ----------
    f : SOSFilter
        Cascade filter.

    Returns
    -------
    ZPKFilter
        Filter whose zeros and poles are those of every section, in section
        order, and whose gain is the cascade gain times the gain of every
        section.

    Notes
    -----
    Each section is converted through its transfer function:

    .. math::
        H(z) = g \\prod_{k=0}^{n-1} H_k(z) = g \\prod_k k_k
        \\frac{\\prod (z - z_{k,i})}{\\prod (z - p_{k,j})}

    Examples
    --------
    >>> sos = sos_filter([[1.0, 2.0, 1.0, -1.0, 0.5]], gain=0.25)
    >>> zpk = sos_to_zpk(sos)
    >>> zpk.gain
    tensor(0.2500, dtype=torch.float64)
    """
    dtype = complex_dtype(f.coefficients.dtype)
    device = f.coefficients.device

    zeros = [torch.zeros(0, dtype=dtype, device=device)]
    poles = [torch.zeros(0, dtype=dtype, device=device)]
    gain = f.gain.clone()

    for section in f.sections:
        section = tf_to_zpk(biquad_to_tf(section))

        zeros.append(section.zeros.to(dtype))
        poles.append(section.poles.to(dtype))
        gain = gain * section.gain

    return ZPKFilter(zeros=torch.cat(zeros), poles=torch.cat(poles), gain=gain)
