from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return the stored degree of a polynomial.

    The stored degree is the number of coefficients minus one. Trailing
    zero coefficients are counted; use ``polynomial_trim`` first to obtain
    the true degree.
    """
    return p.coeffs.shape[-1] - 1
