"""Second-order sections filter representation."""

from typing import Any, List

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._biquad_filter import BiquadFilter
from ._dtypes import as_coefficients, promote_dtypes
from ._exceptions import InvalidFilterError


@tensorclass
class SOSFilter:
    """Filter as an ordered cascade of biquads with an overall gain.

    Represents H(z) = gain * prod_k H_k(z), where H_k is the biquad in row
    k of ``coefficients``.

    Attributes
    ----------
    coefficients : Tensor
        Section coefficients, shape (n_sections, 5). Each row is
        [b0, b1, b2, a1, a2] of a biquad with a0 = 1. Row order is the
        cascade order and is preserved by every conversion.
    gain : Tensor
        Overall gain applied once to the cascade, 0-d. It is kept separate
        from the section numerators.
    """

    coefficients: Tensor
    gain: Tensor

    @property
    def sections(self) -> List[BiquadFilter]:
        """Sections in cascade order, as copies of the coefficient rows."""
        return [
            BiquadFilter(b0=b0, b1=b1, b2=b2, a1=a1, a2=a2)
            for b0, b1, b2, a1, a2 in self.coefficients.clone()
        ]

    def to_tensor(self) -> Tensor:
        """Sections as rows [b0, b1, b2, a0, a1, a2], shape (n_sections, 6).

        The a0 column is all ones. The overall gain is not folded in.
        """
        b = self.coefficients[:, :3]
        a = self.coefficients[:, 3:]
        a0 = torch.ones_like(b[:, :1])

        return torch.cat([b, a0, a], dim=1)


def sos_filter(sections: Any, gain: Any = 1.0) -> SOSFilter:
    """Create a second-order sections filter.

    Parameters
    ----------
    sections : sequence of BiquadFilter or array_like
        Either biquads in cascade order, or a coefficient array of shape
        (n_sections, 5) with rows [b0, b1, b2, a1, a2], or of shape
        (n_sections, 6) with rows [b0, b1, b2, a0, a1, a2]. Six-column rows
        are normalized by their a0.
    gain : scalar or Tensor, default 1.0
        Overall gain of the cascade.

    Returns
    -------
    SOSFilter
        Cascade filter.

    Raises
    ------
    InvalidFilterError
        If the coefficient array has the wrong shape, a row has a zero a0,
        or gain is not a scalar.

    Examples
    --------
    >>> sos = sos_filter([[1.0, 2.0, 1.0, 2.0, -0.5, 0.1]], gain=0.5)
    >>> sos.coefficients
    tensor([[ 0.5000,  1.0000,  0.5000, -0.2500,  0.0500]], dtype=torch.float64)
    """
    gain = as_coefficients(gain)
    if gain.numel() != 1:
        raise InvalidFilterError(
            f"Filter gain must be a scalar, got shape {tuple(gain.shape)}"
        )

    gain = gain.reshape(())

    if isinstance(sections, BiquadFilter):
        sections = [sections]

    if isinstance(sections, (list, tuple)) and all(
        isinstance(section, BiquadFilter) for section in sections
    ):
        coefficients = _stack_biquads(sections, gain)
    else:
        coefficients = _section_rows(as_coefficients(sections))

    return SOSFilter(coefficients=coefficients, gain=gain)


def _stack_biquads(sections: List[BiquadFilter], gain: Tensor) -> Tensor:
    if len(sections) == 0:
        return torch.zeros(0, 5, dtype=gain.dtype, device=gain.device)

    rows = [[s.b0, s.b1, s.b2, s.a1, s.a2] for s in sections]
    dtype = promote_dtypes(*(c.dtype for row in rows for c in row))

    return torch.stack(
        [torch.stack([c.to(dtype) for c in row]) for row in rows]
    )


def _section_rows(coefficients: Tensor) -> Tensor:
    if coefficients.numel() == 0:
        return torch.zeros(
            0, 5, dtype=coefficients.dtype, device=coefficients.device
        )

    if coefficients.dim() == 1:
        coefficients = coefficients.unsqueeze(0)

    if coefficients.dim() != 2 or coefficients.shape[-1] not in (5, 6):
        raise InvalidFilterError(
            f"Second-order sections must have shape (n_sections, 5) or "
            f"(n_sections, 6), got {tuple(coefficients.shape)}"
        )

    if coefficients.shape[-1] == 5:
        return coefficients

    a0 = coefficients[:, 3:4]
    if (a0 == 0).any():
        raise InvalidFilterError(
            f"Second-order sections must have non-zero a0, got a0 values: "
            f"{a0.flatten().tolist()}"
        )

    normalized = coefficients / a0

    return torch.cat([normalized[:, :3], normalized[:, 4:]], dim=1)
