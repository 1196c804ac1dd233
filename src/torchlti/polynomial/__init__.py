"""Power-basis polynomials over real and complex tensors."""

from ._degree_error import DegreeError
from ._polynomial import Polynomial, polynomial
from ._polynomial_coefficient import polynomial_coefficient
from ._polynomial_degree import polynomial_degree
from ._polynomial_error import PolynomialError
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_from_roots import polynomial_from_roots
from ._polynomial_roots import polynomial_roots
from ._polynomial_scale import polynomial_scale
from ._polynomial_trim import polynomial_trim

__all__ = [
    "DegreeError",
    "Polynomial",
    "PolynomialError",
    "polynomial",
    "polynomial_coefficient",
    "polynomial_degree",
    "polynomial_evaluate",
    "polynomial_from_roots",
    "polynomial_roots",
    "polynomial_scale",
    "polynomial_trim",
]
