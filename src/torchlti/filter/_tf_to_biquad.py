"""Conversion from transfer function to biquad."""

from torch import Tensor

from torchlti.polynomial import Polynomial, polynomial_coefficient

from ._biquad_filter import BiquadFilter
from ._exceptions import UnsupportedConversionError
from ._tf_filter import TFFilter


def tf_to_biquad(f: TFFilter) -> BiquadFilter:
    """Convert a transfer function of order at most two to a biquad.

    Parameters
    ----------
    f : TFFilter
        Transfer function filter with at most three coefficients in its
        numerator and denominator.

    Returns
    -------
    BiquadFilter
        Equivalent section. Lower-order transfer functions leave the
        unused high-order biquad coefficients at zero.

    Raises
    ------
    UnsupportedConversionError
        If the transfer function is empty or has more than three
        coefficients.

    Notes
    -----
    With ``n = max(len(B), len(A))`` the polynomials in z are read as
    coefficients of z^{-k} after dividing through by z^{n-1}:

    - n = 3: b = [B_2, B_1, B_0], a = [A_1, A_0]
    - n = 2: b = [B_1, B_0, 0], a = [A_0, 0]
    - n = 1: b = [B_0, 0, 0], a = [0, 0]
    """
    b = f.numerator
    a = f.denominator
    n = max(b.coeffs.shape[-1], a.coeffs.shape[-1])

    if n == 3:
        return BiquadFilter(
            b0=_coefficient(b, 2),
            b1=_coefficient(b, 1),
            b2=_coefficient(b, 0),
            a1=_coefficient(a, 1),
            a2=_coefficient(a, 0),
        )
    elif n == 2:
        return BiquadFilter(
            b0=_coefficient(b, 1),
            b1=_coefficient(b, 0),
            b2=b.coeffs.new_zeros(()),
            a1=_coefficient(a, 0),
            a2=b.coeffs.new_zeros(()),
        )
    elif n == 1:
        return BiquadFilter(
            b0=_coefficient(b, 0),
            b1=b.coeffs.new_zeros(()),
            b2=b.coeffs.new_zeros(()),
            a1=b.coeffs.new_zeros(()),
            a2=b.coeffs.new_zeros(()),
        )
    elif n == 0:
        raise UnsupportedConversionError(
            "cannot convert an empty transfer function to a biquad"
        )
    else:
        raise UnsupportedConversionError(
            f"cannot convert a transfer function with {n} coefficients to a "
            f"biquad; a biquad represents at most a second-order system"
        )


def _coefficient(p: Polynomial, i: int) -> Tensor:
    return polynomial_coefficient(p, i).clone()
