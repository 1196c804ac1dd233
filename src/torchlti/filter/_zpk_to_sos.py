"""Conversion from zeros-poles-gain to second-order sections."""

import math

import torch
from torch import Tensor

from ._dtypes import promote_dtypes, real_dtype
from ._exceptions import DimensionMismatchError
from ._sos_filter import SOSFilter, sos_filter
from ._tf_to_biquad import tf_to_biquad
from ._zpk_filter import ZPKFilter
from ._zpk_to_tf import zpk_to_tf


def zpk_to_sos(f: ZPKFilter) -> SOSFilter:
    """Convert zeros, poles and gain to second-order sections.

    Parameters
    ----------
    f : ZPKFilter
        Filter with no more zeros than poles.

    Returns
    -------
    SOSFilter
        Cascade of ``ceil(n_poles / 2)`` biquads. Each section has unit
        gain; the filter gain is stored once as the cascade gain.

    Raises
    ------
    DimensionMismatchError
        If the filter has more zeros than poles.

    Notes
    -----
    Poles are ordered before pairing:

    1. Lexicographically by real then imaginary part, so that conjugate
       pairs are adjacent.
    2. By distance of ``|p|`` from the unit circle, farthest first. The
       sort is stable, so ties keep the order from step 1.
    3. Complex poles first, then real poles, each group keeping its order.

    Each zero, in its original order, is then assigned to the nearest pole
    not yet claimed by an earlier zero. Poles ``2i`` and ``2i + 1`` form
    section ``i`` together with the zeros assigned to either of them. For
    an odd number of poles the last section holds the final lone pole.

    The greedy assignment is O(n_zeros * n_poles) and is not a minimum
    weight matching. It also does not keep conjugate zeros together: when
    zeros are listed so that a pair claims poles of different sections,
    each of those sections gets a complex numerator. Its imaginary part is
    dropped with a ``ComplexCoefficientWarning`` and the cascade no longer
    matches ``f``. Real zeros
    always give real sections.

    Examples
    --------
    >>> f = zpk_filter([-1.0, -1.0], [0.5 + 0.5j, 0.5 - 0.5j], 0.25)
    >>> sos = zpk_to_sos(f)
    >>> sos.coefficients
    tensor([[ 1.0000,  2.0000,  1.0000, -1.0000,  0.5000]], dtype=torch.float64)
    >>> sos.gain
    tensor(0.2500, dtype=torch.float64)
    """
    zeros = f.zeros
    poles = f.poles

    if zeros.numel() > poles.numel():
        raise DimensionMismatchError(
            f"filter must not have more zeros than poles, got "
            f"{zeros.numel()} zeros and {poles.numel()} poles"
        )

    n = poles.numel()

    poles = _order_poles(poles)
    assignment = _assign_zeros_to_poles(zeros, poles)

    dtype = promote_dtypes(real_dtype(zeros.dtype), real_dtype(poles.dtype))
    one = torch.ones((), dtype=dtype, device=poles.device)

    sections = []
    for i in range((n + 1) // 2):
        section = ZPKFilter(
            zeros=zeros[assignment // 2 == i],
            poles=poles[2 * i : 2 * i + 2],
            gain=one,
        )

        sections.append(tf_to_biquad(zpk_to_tf(section)))

    return sos_filter(sections, f.gain.clone())


def _imag(x: Tensor) -> Tensor:
    if x.is_complex():
        return x.imag

    return torch.zeros_like(x)


def _order_poles(poles: Tensor) -> Tensor:
    # Lexicographic: stable sort on the secondary key, then the primary key
    order = torch.argsort(_imag(poles), stable=True)
    order = order[torch.argsort(poles.real[order], stable=True)]
    poles = poles[order]

    # Farthest from the unit circle first; negated key keeps ties stable
    distance = (poles.abs() - 1).abs()
    poles = poles[torch.argsort(-distance, stable=True)]

    is_complex = _imag(poles) != 0

    return torch.cat([poles[is_complex], poles[~is_complex]])


def _assign_zeros_to_poles(zeros: Tensor, poles: Tensor) -> Tensor:
    assignment = torch.zeros(
        zeros.numel(), dtype=torch.long, device=zeros.device
    )
    claimed = torch.zeros(poles.numel(), dtype=torch.bool, device=poles.device)

    for i, zero in enumerate(zeros):
        distance = (zero - poles).abs().masked_fill(claimed, math.inf)
        nearest = torch.argmin(distance)

        claimed[nearest] = True
        assignment[i] = nearest

    return assignment
