import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_coefficient(p: Polynomial, i: int) -> Tensor:
    """Coefficient of x^i, zero beyond the stored degree.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    i : int
        Non-negative power of x.

    Returns
    -------
    Tensor
        0-d tensor with the dtype of ``p.coeffs``.
    """
    if i < 0:
        raise IndexError(f"Coefficient index must be non-negative, got {i}")

    coeffs = p.coeffs
    if i < coeffs.shape[-1]:
        return coeffs[i]

    return torch.zeros((), dtype=coeffs.dtype, device=coeffs.device)
