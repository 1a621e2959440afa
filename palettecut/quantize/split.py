# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
Color boxes and the median cut of a single box.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from palettecut.quantize.select import select_by_channel
from palettecut.quantize.stats import channel_ranges, dominant_channel


@dataclass(slots=True)
class ColorBox:
    """
    A region of the sample buffer considered for further splitting.

    ``samples`` is usually a view into the builder's buffer. Boxes never
    overlap, and the boxes alive at any time cover every sample once.

    Attributes:
        samples: Array of shape (N, 3)
        ranges: Cached (R, G, B) channel ranges of ``samples``
    """
    samples: NDArray[np.uint8]
    ranges: tuple[int, int, int] = field(init=False)

    def __post_init__(self) -> None:
        self.ranges = channel_ranges(self.samples)

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def spread(self) -> int:
        """Largest channel range in the box."""
        return max(self.ranges)

    @property
    def can_split(self) -> bool:
        """A box needs two samples and some spread to be worth cutting."""
        return len(self.samples) >= 2 and self.spread > 0


def split_box(box: ColorBox) -> tuple[ColorBox, ColorBox]:
    """
    Cut a box at the median of its dominant channel.

    The samples are partitioned in place so that the lower ``n // 2``
    values of the dominant channel come first. For n=4 both halves get
    2 samples; for n=5 the left gets 2 and the right 3.

    Args:
        box: Box with at least 2 samples; its buffer is reordered

    Returns:
        (left, right) boxes over samples[:mid] and samples[mid:]
    """
    n = len(box.samples)
    if n < 2:
        raise ValueError(f"Cannot split a box with {n} sample(s)")

    channel = dominant_channel(box.ranges)
    mid = n // 2
    select_by_channel(box.samples, mid, channel)

    return ColorBox(box.samples[:mid]), ColorBox(box.samples[mid:])
