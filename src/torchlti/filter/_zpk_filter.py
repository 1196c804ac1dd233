"""Zeros-poles-gain filter representation."""

from collections import Counter
from typing import Any, Tuple

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._dtypes import as_coefficients
from ._exceptions import InvalidFilterError


@tensorclass
class ZPKFilter:
    """Filter in zeros-poles-gain form.

    Represents H(z) = gain * prod(z - zeros[i]) / prod(z - poles[j]).

    Attributes
    ----------
    zeros : Tensor
        Zeros of the transfer function, shape (n_zeros,). Real or complex.
    poles : Tensor
        Poles of the transfer function, shape (n_poles,). Real or complex.
    gain : Tensor
        System gain, 0-d.

    Notes
    -----
    Zeros and poles that are exactly equal cancel on construction, one
    unit of multiplicity at a time: ``zeros=[2, 2]`` with ``poles=[2]``
    keeps a single zero at 2 and no poles. Equality is exact; no tolerance
    is applied. When nothing cancels the input tensors are kept as given.

    Cancellation runs once, at construction. Assigning ``zeros`` or
    ``poles`` afterwards bypasses it; build a new filter instead.

    Examples
    --------
    >>> f = zpk_filter([2.0, 2.0], [2.0, 0.5], 3.0)
    >>> f.zeros, f.poles
    (tensor([2.], dtype=torch.float64), tensor([0.5000], dtype=torch.float64))
    """

    zeros: Tensor
    poles: Tensor
    gain: Tensor

    def __post_init__(self):
        original = self.zeros
        zeros, poles = _cancel_common_roots(original, self.poles)

        if zeros is not original:
            self.zeros = zeros
            self.poles = poles


def _cancel_common_roots(
    zeros: Tensor, poles: Tensor
) -> Tuple[Tensor, Tensor]:
    if zeros.numel() == 0 or poles.numel() == 0:
        return zeros, poles

    multiplicity = Counter(zeros.tolist())

    keep = []
    for pole in poles.tolist():
        if multiplicity[pole] > 0:
            multiplicity[pole] -= 1
            keep.append(False)
        else:
            keep.append(True)

    if all(keep):
        return zeros, poles

    remaining = torch.tensor(
        list(multiplicity.elements()), dtype=zeros.dtype, device=zeros.device
    )
    keep = torch.tensor(keep, dtype=torch.bool, device=poles.device)

    return remaining, poles[keep]


def zpk_filter(zeros: Any, poles: Any, gain: Any = 1.0) -> ZPKFilter:
    """Create a zeros-poles-gain filter from array-likes.

    Parameters
    ----------
    zeros : array_like
        Zeros of the filter. May be empty.
    poles : array_like
        Poles of the filter. May be empty.
    gain : scalar or Tensor, default 1.0
        System gain.

    Returns
    -------
    ZPKFilter
        Filter with coincident zero/pole pairs cancelled.

    Raises
    ------
    InvalidFilterError
        If zeros or poles are not one-dimensional or gain is not a scalar.

    Examples
    --------
    >>> f = zpk_filter([2.0], [2.0], 0.5)
    >>> f.zeros.numel(), f.poles.numel(), f.gain.item()
    (0, 0, 0.5)
    """
    zeros = _roots(zeros, "zeros")
    poles = _roots(poles, "poles")
    gain = as_coefficients(gain)

    if gain.numel() != 1:
        raise InvalidFilterError(
            f"Filter gain must be a scalar, got shape {tuple(gain.shape)}"
        )

    return ZPKFilter(zeros=zeros, poles=poles, gain=gain.reshape(()))


def _roots(x: Any, name: str) -> Tensor:
    x = as_coefficients(x)

    if x.dim() > 1:
        raise InvalidFilterError(
            f"filter {name} must be one-dimensional, got shape "
            f"{tuple(x.shape)}"
        )

    return x.reshape(-1)
