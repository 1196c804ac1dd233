"""Hypothesis strategies for testing filter representations."""

from . import strategies

__all__ = [
    "strategies",
]
