from typing import Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._polynomial_error import PolynomialError


@tensorclass
class Polynomial:
    """Power-basis polynomial, lowest power first.

    ``coeffs[i]`` is the coefficient of x^i, so ``coeffs`` of shape (N,)
    describes a polynomial of stored degree N - 1. Coefficients may be real
    or complex.

    Multiplying by a scalar scales every coefficient and calling the
    polynomial evaluates it:

    >>> p = Polynomial(coeffs=torch.tensor([0.5, -1.0, 1.0]))
    >>> (2 * p).coeffs
    tensor([ 1., -2.,  2.])
    >>> p(torch.tensor([1.0]))
    tensor([0.5000])
    """

    coeffs: Tensor

    def __mul__(self, other: Union[Tensor, float, complex]) -> "Polynomial":
        from ._polynomial_scale import polynomial_scale

        return polynomial_scale(self, other)

    def __rmul__(self, other: Union[Tensor, float, complex]) -> "Polynomial":
        from ._polynomial_scale import polynomial_scale

        return polynomial_scale(self, other)

    def __call__(self, x: Tensor) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def polynomial(coeffs: Tensor) -> Polynomial:
    """Wrap a coefficient vector, lowest power first, as a ``Polynomial``.

    Raises
    ------
    PolynomialError
        If ``coeffs`` is not one-dimensional or is empty.
    """
    if coeffs.dim() != 1:
        raise PolynomialError(
            f"Polynomial coefficients must be one-dimensional, got shape "
            f"{tuple(coeffs.shape)}"
        )

    if coeffs.numel() == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    return Polynomial(coeffs=coeffs)
