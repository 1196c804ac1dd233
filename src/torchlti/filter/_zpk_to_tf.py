"""Conversion from zeros-poles-gain to transfer function."""

import warnings

from torch import Tensor

from torchlti.polynomial import Polynomial, polynomial_from_roots

from ._constants import IMAGINARY_PART_TOLERANCE
from ._exceptions import ComplexCoefficientWarning
from ._tf_filter import TFFilter
from ._zpk_filter import ZPKFilter


def zpk_to_tf(f: ZPKFilter) -> TFFilter:
    """Convert zeros, poles and gain to a transfer function filter.

    Parameters
    ----------
    f : ZPKFilter
        Zeros-poles-gain filter.

    Returns
    -------
    TFFilter
        Filter with numerator ``gain * prod(z - zeros)`` and denominator
        ``prod(z - poles)``, both real.

    Warns
    -----
    ComplexCoefficientWarning
        If the discarded imaginary parts are not negligible, which means the
        zeros or poles are not closed under complex conjugation.

    Notes
    -----
    Only the real part of each expanded coefficient is kept. For roots
    that come in conjugate pairs the imaginary parts are rounding noise.

    Examples
    --------
    >>> f = zpk_filter([-1.0], [0.5], 0.25)
    >>> tf = zpk_to_tf(f)
    >>> numerator_coefficients(tf), denominator_coefficients(tf)
    (tensor([0.2500, 0.2500], dtype=torch.float64), tensor([ 1.0000, -0.5000], dtype=torch.float64))
    """
    numerator = polynomial_from_roots(f.zeros).coeffs * f.gain
    denominator = polynomial_from_roots(f.poles).coeffs

    return TFFilter(
        numerator=Polynomial(coeffs=_real_part(numerator, "numerator")),
        denominator=Polynomial(coeffs=_real_part(denominator, "denominator")),
    )


def _real_part(coeffs: Tensor, name: str) -> Tensor:
    if not coeffs.is_complex():
        return coeffs

    scale = coeffs.abs().max().item()
    imaginary = coeffs.imag.abs().max().item()

    if imaginary > IMAGINARY_PART_TOLERANCE * scale:
        warnings.warn(
            f"Discarding imaginary parts up to {imaginary:.2e} from the "
            f"{name} coefficients (largest magnitude {scale:.2e}). "
            f"Zeros and poles should be closed under complex conjugation.",
            ComplexCoefficientWarning,
            stacklevel=3,
        )

    return coeffs.real
