import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x: Tensor) -> Tensor:
    """Evaluate ``p`` at every point of ``x`` by Horner's rule.

    The result has the shape of ``x`` and the promoted dtype of ``x`` and
    the coefficients, so evaluating a real polynomial on the unit circle
    gives a complex result.

    >>> p = polynomial(torch.tensor([0.5, -1.0, 1.0]))
    >>> polynomial_evaluate(p, torch.tensor([0.0, 2.0]))
    tensor([0.5000, 2.5000])
    """
    coeffs = p.coeffs
    dtype = torch.promote_types(coeffs.dtype, x.dtype)

    x = x.to(dtype)
    value = torch.zeros_like(x)

    for c in reversed(coeffs.to(dtype)):
        value = value * x + c

    return value
