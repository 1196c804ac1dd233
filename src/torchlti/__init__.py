"""torchlti: PyTorch representations of linear time-invariant digital filters."""

from . import (
    filter,
    polynomial,
)

__all__ = [
    "filter",
    "polynomial",
]

__version__ = "0.1.0"
