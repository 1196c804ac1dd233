"""Benchmarks for filter representation conversions.

Each conversion is timed against its scipy.signal counterpart on
Butterworth designs of increasing order.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch
from scipy import signal as scipy_signal

from torchlti.filter import (
    SOSFilter,
    frequency_response,
    sos_to_zpk,
    tf_filter,
    tf_to_zpk,
    zpk_filter,
    zpk_to_sos,
    zpk_to_tf,
)


def measure(
    func: Callable, *args: Any, warmup: int = 3, iterations: int = 10
) -> tuple[float, float]:
    """Mean and standard deviation of the wall time of ``func(*args)``."""
    for _ in range(warmup):
        func(*args)

    times = np.empty(iterations)
    for i in range(iterations):
        start = time.perf_counter()
        func(*args)
        times[i] = time.perf_counter() - start

    return float(times.mean()), float(times.std())


def scipy_sos(f: SOSFilter) -> np.ndarray:
    """scipy's (n, 6) section array, with the gain folded into row 0."""
    sos = f.to_tensor().numpy().copy()
    sos[0, :3] *= f.gain.item()

    return sos


class BenchConversions:
    """Timings of torchlti conversions next to scipy.signal."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def cases(self, order: int) -> dict[str, tuple[tuple, tuple]]:
        z, p, k = scipy_signal.butter(order, 0.3, output="zpk")
        b, a = scipy_signal.zpk2tf(z, p, k)

        zpk = zpk_filter(z, p, k)
        sos = zpk_to_sos(zpk)
        w = torch.linspace(0.0, np.pi, 512, dtype=torch.float64)

        return {
            "zpk_to_tf": (
                (zpk_to_tf, zpk),
                (scipy_signal.zpk2tf, z, p, k),
            ),
            "tf_to_zpk": (
                (tf_to_zpk, tf_filter(b, a)),
                (scipy_signal.tf2zpk, b, a),
            ),
            "zpk_to_sos": (
                (zpk_to_sos, zpk),
                (scipy_signal.zpk2sos, z, p, k),
            ),
            "sos_to_zpk": (
                (sos_to_zpk, sos),
                (scipy_signal.sos2zpk, scipy_sos(sos)),
            ),
            "frequency_response": (
                (frequency_response, sos, w),
                (scipy_signal.sosfreqz, scipy_sos(sos), w.numpy()),
            ),
        }

    def run(self, orders: tuple[int, ...] = (2, 4, 8, 16)) -> None:
        print(
            f"{'conversion':<20} {'order':>5} {'torchlti':>12} "
            f"{'scipy':>12} {'ratio':>8}"
        )
        print("-" * 61)

        for order in orders:
            for name, (ours, theirs) in self.cases(order).items():
                ours_mean, _ = measure(
                    *ours, warmup=self.warmup, iterations=self.iterations
                )
                theirs_mean, _ = measure(
                    *theirs, warmup=self.warmup, iterations=self.iterations
                )

                print(
                    f"{name:<20} {order:>5} {ours_mean * 1e6:>10.1f}us "
                    f"{theirs_mean * 1e6:>10.1f}us "
                    f"{ours_mean / theirs_mean:>7.2f}x"
                )


if __name__ == "__main__":
    BenchConversions(warmup=5, iterations=20).run()
