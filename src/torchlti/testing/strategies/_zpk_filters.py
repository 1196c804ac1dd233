from typing import Optional

import hypothesis.strategies

from torchlti.filter import ZPKFilter, zpk_filter

from ._conjugate_roots import conjugate_roots


@hypothesis.strategies.composite
def zpk_filters(
    draw: hypothesis.strategies.DrawFn,
    max_pairs: int = 2,
    max_real: int = 2,
    max_zero_pairs: Optional[int] = None,
) -> ZPKFilter:
    """Strategy for real filters with no more zeros than poles.

    Zeros and poles sit on interleaved grids, so no zero cancels a pole.
    ``max_zero_pairs`` bounds the complex zero pairs separately from the
    pole pairs; 0 gives filters with real zeros only.
    """
    if max_zero_pairs is None:
        max_zero_pairs = max_pairs

    poles = draw(conjugate_roots(max_pairs, max_real, offset=0.05))
    zeros = draw(
        conjugate_roots(max_zero_pairs, max_real, max_roots=len(poles))
    )
    gain = draw(
        hypothesis.strategies.floats(
            min_value=0.1,
            max_value=10.0,
            allow_nan=False,
            allow_infinity=False,
        )
    )
    sign = draw(hypothesis.strategies.sampled_from([-1, 1]))

    return zpk_filter(zeros, poles, sign * gain)
