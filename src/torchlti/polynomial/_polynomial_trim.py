import torch

from ._polynomial import Polynomial


def polynomial_trim(p: Polynomial, tol: float = 0.0) -> Polynomial:
    """Drop highest-degree coefficients whose magnitude is at most ``tol``.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float, default 0.0
        Magnitude at or below which a top coefficient is dropped. The
        default drops exact zeros only.

    Returns
    -------
    Polynomial
        ``p`` itself if its leading coefficient is kept, otherwise a
        shorter polynomial. The zero polynomial trims to ``[0]``.
    """
    coeffs = p.coeffs

    significant = torch.nonzero(coeffs.abs() > tol)
    if significant.numel() == 0:
        return Polynomial(coeffs=coeffs[:1].new_zeros(1))

    length = significant[-1, 0].item() + 1
    if length == coeffs.shape[-1]:
        return p

    return Polynomial(coeffs=coeffs[:length])
