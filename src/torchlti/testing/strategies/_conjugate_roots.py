from typing import List, Optional

import hypothesis.strategies


@hypothesis.strategies.composite
def conjugate_roots(
    draw: hypothesis.strategies.DrawFn,
    max_pairs: int = 2,
    max_real: int = 2,
    max_roots: Optional[int] = None,
    offset: float = 0.0,
) -> List[complex]:
    """Strategy for root sets closed under complex conjugation.

    Roots lie on a grid of spacing 0.1 inside the square
    [-1, 1] x [-1, 1], shifted by ``offset`` along the real axis, so any two
    distinct roots are at least 0.1 apart. Two strategies with offsets that
    differ by half a grid step never share a root.
    """
    grid = hypothesis.strategies.integers(min_value=-9, max_value=9)
    imag_grid = hypothesis.strategies.integers(min_value=1, max_value=9)

    if max_roots is None:
        max_roots = 2 * max_pairs + max_real

    pairs = draw(
        hypothesis.strategies.lists(
            hypothesis.strategies.tuples(grid, imag_grid),
            max_size=min(max_pairs, max_roots // 2),
            unique=True,
        )
    )
    reals = draw(
        hypothesis.strategies.lists(
            grid,
            max_size=min(max_real, max_roots - 2 * len(pairs)),
            unique=True,
        )
    )

    roots = []
    for k, m in pairs:
        root = complex(k / 10 + offset, m / 10)
        roots.append(root)
        roots.append(root.conjugate())

    roots.extend(complex(k / 10 + offset, 0.0) for k in reals)

    return roots
