import torch
from torch import Tensor

from ._degree_error import DegreeError
from ._polynomial import Polynomial

_ROOT_DTYPES = {
    torch.float64: torch.complex128,
    torch.complex128: torch.complex128,
}


def polynomial_roots(p: Polynomial) -> Tensor:
    """Roots of a polynomial as eigenvalues of its companion matrix.

    Parameters
    ----------
    p : Polynomial
        Polynomial of degree at least one with a non-zero leading
        coefficient.

    Returns
    -------
    Tensor
        Roots, shape (degree,). Complex128 for double precision
        coefficients, complex64 otherwise.

    Raises
    ------
    DegreeError
        If ``p`` is constant or its leading coefficient is zero.

    Notes
    -----
    With ``p`` divided through by its leading coefficient to
    ``a_0 + a_1 x + ... + a_{n-1} x^{n-1} + x^n``, the roots are the
    eigenvalues of the n x n matrix with ones on the subdiagonal and
    ``-a_0, ..., -a_{n-1}`` down the last column. Failures of
    ``torch.linalg.eigvals`` propagate unchanged.

    Examples
    --------
    >>> polynomial_roots(polynomial(torch.tensor([0.5, -1.0, 1.0])))
    tensor([0.5000+0.5000j, 0.5000-0.5000j], dtype=torch.complex128)
    """
    coeffs = p.coeffs
    degree = coeffs.shape[-1] - 1

    if degree < 1:
        raise DegreeError(
            f"polynomial must have degree at least 1 to have roots, got "
            f"{coeffs.shape[-1]} coefficient(s)"
        )

    if coeffs[-1] == 0:
        raise DegreeError(
            "polynomial leading coefficient is zero; trim it with "
            "polynomial_trim before finding roots"
        )

    dtype = _ROOT_DTYPES.get(coeffs.dtype, torch.complex64)
    coeffs = coeffs.to(dtype)

    companion = torch.diag(
        torch.ones(degree - 1, dtype=dtype, device=coeffs.device), -1
    )
    companion[:, -1] = -coeffs[:-1] / coeffs[-1]

    return torch.linalg.eigvals(companion)
