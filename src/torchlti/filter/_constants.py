"""Numerical constants for filter representations."""

# Largest imaginary part, relative to the largest coefficient magnitude,
# that is dropped silently when expanding roots into real polynomials.
IMAGINARY_PART_TOLERANCE = 1e-8

# Number of frequency points used by frequency_response when none are given.
DEFAULT_FREQUENCY_POINTS = 512
