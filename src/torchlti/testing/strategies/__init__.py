"""Hypothesis strategies for filter representations."""

from ._conjugate_roots import conjugate_roots
from ._zpk_filters import zpk_filters

__all__ = [
    "conjugate_roots",
    "zpk_filters",
]
