"""Binomial coefficients C(i, j) for orders up to 50, read from a precomputed table."""

from __future__ import annotations

import math
import operator

MAX_ORDER = 50
"""The largest order ``i`` for which a binomial coefficient can be looked up."""

# Row ``i`` holds C(i, 0) ... C(i, i) as floats; every entry is exact in double precision.
_TABLE: tuple[tuple[float, ...], ...] = tuple(
    tuple(float(math.comb(i, j)) for j in range(i + 1)) for i in range(MAX_ORDER + 1)
)


def binomial_coefficient(i: int, j: int) -> float:
    """Return the binomial coefficient C(i, j) as a float.

    Raises ValueError unless ``0 <= j <= i <= MAX_ORDER``, and TypeError when
    either argument is not an integer.
    """
    i = operator.index(i)
    j = operator.index(j)
    if i < 0 or j < 0:
        raise ValueError(f"binomial coefficient indices must be non-negative, got C({i}, {j})")
    if i > MAX_ORDER:
        raise ValueError(f"order {i} exceeds the maximum supported order {MAX_ORDER}")
    if j > i:
        raise ValueError(f"C({i}, {j}) requires j <= i")
    return _TABLE[i][j]