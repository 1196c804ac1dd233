"""Conversion from biquad to transfer function."""

import torch

from ._biquad_filter import BiquadFilter
from ._dtypes import promote_dtypes
from ._tf_filter import TFFilter, tf_filter


def biquad_to_tf(f: BiquadFilter) -> TFFilter:
    """Convert a biquad to a transfer function filter.

    Vanishing second-order (b2 = a2 = 0) and first-order (b1 = a1 = 0)
    terms are dropped so a lower-order section yields a lower-order
    transfer function instead of one padded with zero coefficients.

    Raises
    ------
    InvalidFilterError
        If b0, b1 and b2 are all zero.
    """
    dtype = promote_dtypes(
        f.b0.dtype, f.b1.dtype, f.b2.dtype, f.a1.dtype, f.a2.dtype
    )
    one = torch.ones((), dtype=dtype, device=f.a1.device)

    if f.b2 != 0 or f.a2 != 0:
        b = [f.b0, f.b1, f.b2]
        a = [one, f.a1, f.a2]
    elif f.b1 != 0 or f.a1 != 0:
        b = [f.b0, f.b1]
        a = [one, f.a1]
    else:
        b = [f.b0]
        a = [one]

    return tf_filter(
        torch.stack([c.to(dtype) for c in b]),
        torch.stack([c.to(dtype) for c in a]),
    )
