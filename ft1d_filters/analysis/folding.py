"""Folded frequency axis of a length-N DFT.

For a real signal of length ``N`` the DFT bin ``i`` and the bin ``N - i``
describe the same physical frequency. Filters are therefore defined on the
*folded* frequency ``f(i) = min(i, N - i)``:

    N = 8  ->  0 1 2 3 4 3 2 1
    N = 7  ->  0 1 2 3 3 2 1

Every kernel in :mod:`ft1d_filters.analysis.kernels` is evaluated over the
axis produced here; there is no other implementation of the walk.
"""

from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

from ft1d_filters.models.specs import check_length


def max_frequency(original_length: int) -> int:
    """Highest folded frequency of a length-N signal (``N // 2``)."""
    return check_length(original_length) // 2


def iter_folded_frequencies(original_length: int) -> Iterator[Tuple[int, int]]:
    """Yield ``(bin, folded_frequency)`` for every bin of a length-N signal.

    The counter ascends with the bin index up to ``N // 2``. For odd ``N``
    the next bin repeats the peak once, then the counter descends by one per
    bin back toward zero.
    """
    n = check_length(original_length)
    peak = n // 2
    odd = n % 2 == 1
    f = 0
    for i in range(n):
        yield i, f
        if i < peak:
            f += 1
        elif i == peak and odd:
            continue  # hold the peak for the extra odd-length bin
        else:
            f -= 1


def folded_frequency_axis(original_length: int) -> np.ndarray:
    """Folded frequency per bin as a float64 array of length ``N``."""
    n = check_length(original_length)
    return np.fromiter(
        (f for _, f in iter_folded_frequencies(n)),
        dtype=np.float64,
        count=n,
    )
