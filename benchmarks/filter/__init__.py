"""Benchmarks for filter representation conversions.

This module provides benchmark classes for comparing torchlti filter
conversions against scipy baselines.
"""

from .bench_conversions import BenchConversions

__all__ = [
    "BenchConversions",
]
