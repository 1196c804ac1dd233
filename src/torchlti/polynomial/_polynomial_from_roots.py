import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_from_roots(roots: Tensor) -> Polynomial:
    """Expand a set of roots into the monic polynomial prod (x - r).

    Each root multiplies the running product by ``(x - r)``: the
    coefficients shift up one power and the unshifted coefficients scaled
    by ``-r`` are added in.

    Parameters
    ----------
    roots : Tensor
        Roots, shape (N,). Real or complex. May be empty.

    Returns
    -------
    Polynomial
        Monic polynomial of degree N in the dtype of ``roots``. No roots
        give the constant 1.

    Examples
    --------
    >>> polynomial_from_roots(torch.tensor([0.5, -1.0])).coeffs
    tensor([-0.5000,  0.5000,  1.0000])
    """
    coeffs = torch.ones(1, dtype=roots.dtype, device=roots.device)

    for root in roots:
        raised = torch.nn.functional.pad(coeffs, (1, 0))
        kept = torch.nn.functional.pad(coeffs, (0, 1))

        coeffs = raised - root * kept

    return Polynomial(coeffs=coeffs)
