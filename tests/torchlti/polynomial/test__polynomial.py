"""Tests for the power-basis polynomial engine."""

import numpy as np
import pytest
import torch

from torchlti.polynomial import (
    DegreeError,
    Polynomial,
    PolynomialError,
    polynomial,
    polynomial_coefficient,
    polynomial_degree,
    polynomial_evaluate,
    polynomial_from_roots,
    polynomial_roots,
    polynomial_scale,
    polynomial_trim,
)


def _sorted(roots: torch.Tensor) -> torch.Tensor:
    return torch.from_numpy(np.sort_complex(roots.numpy()))


def _assert_same_roots(actual, expected, atol):
    """Every root in each set has a counterpart in the other within atol."""
    distance = (actual.unsqueeze(-1) - expected.unsqueeze(0)).abs()
    assert distance.min(dim=1).values.max().item() < atol
    assert distance.min(dim=0).values.max().item() < atol


class TestPolynomialConstruction:
    """Tests for the polynomial factory."""

    def test_coefficients_are_ascending(self):
        """coeffs[i] is the coefficient of x^i."""
        p = polynomial(torch.tensor([1.0, 2.0, 3.0]))
        torch.testing.assert_close(p.coeffs, torch.tensor([1.0, 2.0, 3.0]))

    def test_empty_raises(self):
        """A polynomial needs at least one coefficient."""
        with pytest.raises(PolynomialError, match="at least one"):
            polynomial(torch.tensor([]))

    def test_two_dimensional_raises(self):
        """Only single polynomials are supported."""
        with pytest.raises(PolynomialError, match="one-dimensional"):
            polynomial(torch.ones(2, 3))

    def test_degree_error_is_polynomial_error(self):
        with pytest.raises(PolynomialError):
            raise DegreeError("test")


class TestPolynomialTrim:
    """Tests for polynomial_trim."""

    def test_removes_trailing_zeros(self):
        p = polynomial(torch.tensor([1.0, 2.0, 0.0, 0.0]))
        torch.testing.assert_close(
            polynomial_trim(p).coeffs, torch.tensor([1.0, 2.0])
        )

    def test_all_zeros_keeps_one_coefficient(self):
        p = polynomial(torch.zeros(3))
        torch.testing.assert_close(polynomial_trim(p).coeffs, torch.zeros(1))

    def test_keeps_interior_zeros(self):
        p = polynomial(torch.tensor([0.0, 0.0, 1.0]))
        torch.testing.assert_close(
            polynomial_trim(p).coeffs, torch.tensor([0.0, 0.0, 1.0])
        )

    def test_tolerance(self):
        """Coefficients with magnitude at most tol are treated as zero."""
        p = polynomial(torch.tensor([1.0, 2.0, 1e-12]))
        assert polynomial_trim(p).coeffs.numel() == 3
        assert polynomial_trim(p, tol=1e-10).coeffs.numel() == 2


class TestPolynomialCoefficient:
    """Tests for polynomial_degree and polynomial_coefficient."""

    def test_degree(self):
        assert polynomial_degree(polynomial(torch.tensor([1.0]))) == 0
        assert polynomial_degree(polynomial(torch.ones(4))) == 3

    def test_stored_coefficient(self):
        p = polynomial(torch.tensor([1.0, 2.0, 3.0]))
        assert polynomial_coefficient(p, 1).item() == 2.0

    def test_beyond_degree_is_zero(self):
        """Coefficients beyond the stored degree read as zero."""
        p = polynomial(torch.tensor([1.0, 2.0], dtype=torch.float64))
        c = polynomial_coefficient(p, 5)
        assert c.item() == 0.0
        assert c.dtype == torch.float64

    def test_negative_index_raises(self):
        with pytest.raises(IndexError):
            polynomial_coefficient(polynomial(torch.ones(2)), -1)


class TestPolynomialFromRoots:
    """Tests for polynomial_from_roots."""

    def test_real_roots(self):
        """(x - 1)(x - 2) = 2 - 3x + x^2."""
        p = polynomial_from_roots(torch.tensor([1.0, 2.0]))
        torch.testing.assert_close(p.coeffs, torch.tensor([2.0, -3.0, 1.0]))

    def test_empty_roots(self):
        """No roots gives the constant polynomial 1."""
        p = polynomial_from_roots(torch.zeros(0, dtype=torch.complex128))
        torch.testing.assert_close(
            p.coeffs, torch.ones(1, dtype=torch.complex128)
        )

    def test_conjugate_pair_has_real_coefficients(self):
        """(x - (1+2j))(x - (1-2j)) = 5 - 2x + x^2."""
        roots = torch.tensor([1.0 + 2.0j, 1.0 - 2.0j], dtype=torch.complex128)
        p = polynomial_from_roots(roots)
        torch.testing.assert_close(
            p.coeffs,
            torch.tensor([5.0, -2.0, 1.0], dtype=torch.complex128),
        )

    def test_matches_numpy_poly(self):
        roots = torch.tensor([0.5, -0.25, 2.0, 3.0], dtype=torch.float64)
        p = polynomial_from_roots(roots)
        expected = np.poly(roots.numpy())[::-1].copy()
        torch.testing.assert_close(p.coeffs, torch.from_numpy(expected))


class TestPolynomialRoots:
    """Tests for polynomial_roots."""

    def test_quadratic(self):
        p = polynomial(torch.tensor([2.0, -3.0, 1.0], dtype=torch.float64))
        torch.testing.assert_close(
            _sorted(polynomial_roots(p)),
            torch.tensor([1.0, 2.0], dtype=torch.complex128),
        )

    def test_linear(self):
        p = polynomial(torch.tensor([-3.0, 2.0], dtype=torch.float64))
        torch.testing.assert_close(
            polynomial_roots(p),
            torch.tensor([1.5], dtype=torch.complex128),
        )

    def test_complex_roots(self):
        """x^2 + 1 has roots +-j."""
        p = polynomial(torch.tensor([1.0, 0.0, 1.0], dtype=torch.float64))
        _assert_same_roots(
            polynomial_roots(p),
            torch.tensor([-1.0j, 1.0j], dtype=torch.complex128),
            atol=1e-12,
        )

    def test_matches_numpy_roots(self):
        coeffs = torch.tensor(
            [0.1, -0.3, 0.25, 1.2, -0.7, 1.0], dtype=torch.float64
        )
        roots = polynomial_roots(polynomial(coeffs))
        expected = np.roots(coeffs.numpy()[::-1].copy())
        _assert_same_roots(roots, torch.from_numpy(expected), atol=1e-10)

    def test_single_precision(self):
        p = polynomial(torch.tensor([2.0, -3.0, 1.0], dtype=torch.float32))
        assert polynomial_roots(p).dtype == torch.complex64

    def test_non_monic(self):
        """Leading coefficient is divided out."""
        p = polynomial(torch.tensor([4.0, -6.0, 2.0], dtype=torch.float64))
        torch.testing.assert_close(
            _sorted(polynomial_roots(p)),
            torch.tensor([1.0, 2.0], dtype=torch.complex128),
        )

    def test_constant_raises(self):
        with pytest.raises(DegreeError, match="degree at least 1"):
            polynomial_roots(polynomial(torch.tensor([3.0])))

    def test_zero_leading_coefficient_raises(self):
        with pytest.raises(DegreeError, match="leading coefficient is zero"):
            polynomial_roots(polynomial(torch.tensor([1.0, 2.0, 0.0])))


class TestPolynomialEvaluate:
    """Tests for polynomial_evaluate and scaling."""

    def test_horner(self):
        p = polynomial(torch.tensor([1.0, 2.0, 3.0]))
        torch.testing.assert_close(
            polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0])),
            torch.tensor([1.0, 6.0, 17.0]),
        )

    def test_call_operator(self):
        p = polynomial(torch.tensor([1.0, 2.0, 3.0]))
        torch.testing.assert_close(
            p(torch.tensor([2.0])), torch.tensor([17.0])
        )

    def test_complex_points(self):
        """x^2 + 1 vanishes at j."""
        p = polynomial(torch.tensor([1.0, 0.0, 1.0], dtype=torch.float64))
        value = polynomial_evaluate(
            p, torch.tensor([1.0j], dtype=torch.complex128)
        )
        assert value.dtype == torch.complex128
        assert value.abs().item() < 1e-15

    def test_scale(self):
        p = polynomial(torch.tensor([1.0, -2.0]))
        torch.testing.assert_close(
            polynomial_scale(p, 3.0).coeffs, torch.tensor([3.0, -6.0])
        )

    def test_scale_operators(self):
        p = polynomial(torch.tensor([1.0, -2.0]))
        assert isinstance(p * 2.0, Polynomial)
        torch.testing.assert_close((p * 2.0).coeffs, torch.tensor([2.0, -4.0]))
        torch.testing.assert_close((2.0 * p).coeffs, torch.tensor([2.0, -4.0]))
