"""Transfer function filter representation."""

from typing import Any

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchlti.polynomial import Polynomial, polynomial_trim

from ._dtypes import as_coefficients, promote_dtypes
from ._exceptions import InvalidFilterError


@tensorclass
class TFFilter:
    """Filter in transfer function form.

    Represents H(z) = B(z) / A(z) with B and A polynomials in z stored
    lowest power first.

    Attributes
    ----------
    numerator : Polynomial
        Numerator polynomial B(z).
    denominator : Polynomial
        Denominator polynomial A(z), monic after construction.

    Notes
    -----
    Construction trims exact-zero highest-degree coefficients from both
    polynomials, casts them to a common inexact dtype and divides both by
    the leading denominator coefficient, so that ``denominator.coeffs[-1]``
    is always 1.

    Normalization runs once, at construction. Assigning ``numerator`` or
    ``denominator`` afterwards bypasses it; build a new filter instead.

    Raises
    ------
    InvalidFilterError
        If the denominator is identically zero.
    """

    numerator: Polynomial
    denominator: Polynomial

    def __post_init__(self):
        numerator = polynomial_trim(self.numerator).coeffs
        denominator = polynomial_trim(self.denominator).coeffs

        leading = denominator[-1]
        if leading == 0:
            raise InvalidFilterError(
                "filter denominator must not be identically zero"
            )

        dtype = promote_dtypes(numerator.dtype, denominator.dtype)
        leading = leading.to(dtype)

        self.numerator = Polynomial(coeffs=numerator.to(dtype) / leading)
        self.denominator = Polynomial(coeffs=denominator.to(dtype) / leading)


def tf_filter(numerator: Any, denominator: Any) -> TFFilter:
    """Create a transfer function filter.

    Parameters
    ----------
    numerator : Polynomial or array_like
        Numerator. A ``Polynomial`` is used as is (lowest power first);
        any other value is read as coefficients in descending order,
        highest power first, as in the usual DSP convention.
    denominator : Polynomial or array_like
        Denominator, interpreted like ``numerator``.

    Returns
    -------
    TFFilter
        Filter with a monic denominator.

    Raises
    ------
    InvalidFilterError
        If a coefficient vector is not one-dimensional or has no non-zero
        entry.

    Examples
    --------
    >>> f = tf_filter([2.0, 1.0], [4.0, 2.0, 1.0])
    >>> numerator_coefficients(f)
    tensor([0.5000, 0.2500], dtype=torch.float64)
    >>> denominator_coefficients(f)
    tensor([1.0000, 0.5000, 0.2500], dtype=torch.float64)
    """
    b = _descending_to_polynomial(numerator)
    a = _descending_to_polynomial(denominator)

    return TFFilter(numerator=b, denominator=a)


def _descending_to_polynomial(coefficients: Any) -> Polynomial:
    if isinstance(coefficients, Polynomial):
        return coefficients

    coefficients = as_coefficients(coefficients)
    if coefficients.dim() > 1:
        raise InvalidFilterError(
            f"filter coefficients must be one-dimensional, got shape "
            f"{tuple(coefficients.shape)}"
        )

    coefficients = coefficients.reshape(-1)

    nonzero = torch.nonzero(coefficients != 0)
    if nonzero.numel() == 0:
        raise InvalidFilterError(
            "filter must have non-zero numerator and denominator"
        )

    first = nonzero[0, 0].item()

    return Polynomial(coeffs=coefficients[first:].flip(0))


def numerator_coefficients(f: TFFilter) -> Tensor:
    """Numerator coefficients of a transfer function, highest power first."""
    return f.numerator.coeffs.flip(0)


def denominator_coefficients(f: TFFilter) -> Tensor:
    """Denominator coefficients of a transfer function, highest power first."""
    return f.denominator.coeffs.flip(0)
