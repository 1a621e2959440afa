# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
In-place k-th order statistic selection (quickselect).

Two entry points share one partitioning loop:
1. select_by_channel: reorders (N, 3) samples keyed by one channel
2. select_value: reorders a 1-D scalar buffer

After a call the buffer is partially ordered: the element at ``rank`` is
the rank-th smallest, everything before it is <= and everything after it
is >=. Callers must treat the buffer as reordered.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from palettecut.quantize.stats import Channel


def select_by_channel(
    samples: NDArray[np.uint8],
    rank: int,
    channel: Channel | int,
) -> int:
    """
    Move the sample with the rank-th smallest channel value to ``rank``.

    Whole samples (rows) move together; only the keyed channel decides
    the order.

    Args:
        samples: Array of shape (N, 3), reordered in place
        rank: 0-based target rank, 0 <= rank < N
        channel: Channel to order by

    Returns:
        The channel value now at ``rank``.
    """
    _check_rank(len(samples), rank)
    _quickselect(samples, samples[:, int(channel)], rank)
    return int(samples[rank, int(channel)])


def select_value(values: NDArray, rank: int) -> int:
    """
    Move the rank-th smallest value of a 1-D buffer to ``rank``.

    Args:
        values: 1-D array, reordered in place
        rank: 0-based target rank, 0 <= rank < len(values)

    Returns:
        The selected value.
    """
    if values.ndim != 1:
        raise ValueError(f"Expected 1-D buffer, got shape {values.shape}")
    _check_rank(len(values), rank)
    _quickselect(values, values, rank)
    return int(values[rank])


def _check_rank(n: int, rank: int) -> None:
    if not 0 <= rank < n:
        raise ValueError(f"Rank must be in [0, {n}), got {rank}")


def _quickselect(buffer: NDArray, keys: NDArray, rank: int) -> None:
    """
    Three-way quickselect over ``buffer`` ordered by ``keys``.

    ``keys`` is a view into ``buffer`` (a column, or the buffer itself),
    so rows written back into ``buffer`` move their keys along with them.

    The pivot is the middle element of the active range. Each round
    splits the range into less / equal / greater blocks and keeps
    only the block holding ``rank``; the equal block is never empty,
    so every round shrinks the range or finishes.
    """
    lo, hi = 0, len(buffer)  # active range [lo, hi)
    while hi - lo > 1:
        segment = keys[lo:hi]
        pivot = segment[(hi - lo - 1) // 2]

        less = segment < pivot
        greater = segment > pivot
        equal = ~(less | greater)

        order = np.concatenate((
            np.flatnonzero(less),
            np.flatnonzero(equal),
            np.flatnonzero(greater),
        ))
        buffer[lo:hi] = buffer[lo:hi][order]

        n_less = int(np.count_nonzero(less))
        n_equal = int(np.count_nonzero(equal))
        if rank < lo + n_less:
            hi = lo + n_less
        elif rank < lo + n_less + n_equal:
            return
        else:
            lo = lo + n_less + n_equal
