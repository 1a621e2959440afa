# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
Per-channel statistics over a sample set.

Used by the box splitter to pick the axis a box is cut along, and by
the palette builder to rank boxes by spread.
"""

from __future__ import annotations

from enum import IntEnum

import numpy as np
from numpy.typing import NDArray


class Channel(IntEnum):
    """Color channel, valued as the column index in a (N, 3) sample array."""
    R = 0
    G = 1
    B = 2


def channel_range(samples: NDArray[np.uint8], channel: Channel | int) -> int:
    """
    Return max - min of one channel, or 0 for an empty set.

    Args:
        samples: Array of shape (N, 3)
        channel: Channel to measure
    """
    if len(samples) == 0:
        return 0
    column = samples[:, int(channel)]
    return int(column.max()) - int(column.min())


def channel_ranges(samples: NDArray[np.uint8]) -> tuple[int, int, int]:
    """Return (R, G, B) ranges in one pass; all zero for an empty set."""
    if len(samples) == 0:
        return (0, 0, 0)
    spread = samples.max(axis=0).astype(np.int64) - samples.min(axis=0)
    r, g, b = (int(v) for v in spread)
    return (r, g, b)


def dominant_channel(ranges: tuple[int, int, int]) -> Channel:
    """
    Channel with the greatest range.

    Ties go to the earlier channel (R before G before B).
    """
    best = Channel.R
    for ch in (Channel.G, Channel.B):
        if ranges[ch] > ranges[best]:
            best = ch
    return best
