"""Exceptions and warnings for filter representations."""


class FilterError(Exception):
    """Base exception for filter representation errors."""

    pass


class InvalidFilterError(FilterError):
    """Raised when filter coefficients do not describe a filter.

    This occurs when:
    - A numerator or denominator coefficient vector is entirely zero
    - A denominator polynomial is identically zero
    - A biquad or section has a zero a0 coefficient
    - Second-order section coefficients have the wrong shape
    """

    pass


class DimensionMismatchError(FilterError):
    """Raised when zero and pole counts are incompatible with a conversion.

    This occurs when a zeros-poles-gain filter with more zeros than poles
    is converted to second-order sections.
    """

    pass


class UnsupportedConversionError(FilterError):
    """Raised when a filter cannot be represented in the target form.

    This occurs when a transfer function that is empty or of order higher
    than two is converted to a biquad.
    """

    pass


class ComplexCoefficientWarning(UserWarning):
    """Warning for non-negligible imaginary parts discarded from coefficients.

    Emitted when zeros or poles are not closed under complex conjugation,
    so the expanded transfer function polynomials are genuinely complex.
    """

    pass
