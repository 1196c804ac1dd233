from typing import Union

from torch import Tensor

from ._polynomial import Polynomial


def polynomial_scale(
    p: Polynomial, c: Union[Tensor, float, complex]
) -> Polynomial:
    """Multiply every coefficient of a polynomial by a scalar.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    c : Tensor or scalar
        Scale factor. A complex factor promotes the coefficients to complex.

    Returns
    -------
    Polynomial
        c * p(x).
    """
    return Polynomial(coeffs=p.coeffs * c)
