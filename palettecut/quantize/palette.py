# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
Palette construction by median cut.

The sample set starts as a single box. The box with the widest channel
spread is repeatedly cut at its median until there are k boxes or no
box can be cut any further. Each box is then reduced to its per-channel
median, and the palette is padded with its last color up to length k.

The median (not the mean) is used for reduction so that a box with a
skewed distribution is represented by a color that actually dominates
it rather than an average of its tails.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from palettecut.schema import BLACK, RGBColor
from palettecut.quantize.samples import SampleInput, as_sample_array, colors_from_array
from palettecut.quantize.select import select_value
from palettecut.quantize.split import ColorBox, split_box

logger = logging.getLogger(__name__)


def build_palette(samples: SampleInput, k: int) -> tuple[RGBColor, ...]:
    """
    Build a palette of exactly k colors from RGB samples.

    Degenerate cases:
    - k <= 0: empty palette
    - k == 1: the rounded mean of all samples
    - len(samples) <= k: every sample in input order, padded

    The caller's samples are copied before partitioning; they are never
    reordered.

    Args:
        samples: (N, 3) uint8 array or sequence of colors
        k: Number of palette entries

    Returns:
        Tuple of k RGBColor (empty when k <= 0).
    """
    if k <= 0:
        return ()

    buffer = as_sample_array(samples, copy=True)
    n = len(buffer)

    if k == 1:
        return (mean_color(buffer),)

    if n <= k:
        return _pad(list(colors_from_array(buffer)), k)

    boxes = _cut_boxes(buffer, k)
    logger.debug("median cut: %d samples -> %d boxes (k=%d)", n, len(boxes), k)

    palette = []
    for box in boxes:
        assert len(box) > 0, "empty box reached reduction"
        palette.append(median_color(box.samples))
    return _pad(palette, k)


def _cut_boxes(buffer: NDArray[np.uint8], k: int) -> list[ColorBox]:
    """Split boxes until there are k of them or none can be split."""
    boxes = [ColorBox(buffer)]

    while len(boxes) < k:
        widest = _widest_box(boxes)
        if widest is None:
            logger.debug("median cut stopped early at %d of %d boxes", len(boxes), k)
            break
        left, right = split_box(boxes[widest])
        boxes[widest] = left
        boxes.append(right)

    return boxes


def _widest_box(boxes: list[ColorBox]) -> Optional[int]:
    """Index of the splittable box with the greatest spread (first wins ties)."""
    widest_idx: Optional[int] = None
    widest_spread = 0
    for i, box in enumerate(boxes):
        if not box.can_split:
            continue
        if box.spread > widest_spread:
            widest_spread = box.spread
            widest_idx = i
    return widest_idx


def _pad(palette: list[RGBColor], k: int) -> tuple[RGBColor, ...]:
    """Repeat the last color (black for an empty list) up to k entries."""
    fill = palette[-1] if palette else BLACK
    palette.extend([fill] * (k - len(palette)))
    return tuple(palette)


def mean_color(samples: NDArray[np.uint8]) -> RGBColor:
    """
    Per-channel mean, rounded half away from zero.

    Returns black for an empty set.
    """
    n = len(samples)
    if n == 0:
        return BLACK
    sums = samples.sum(axis=0, dtype=np.int64)
    # floor(sum / n + 0.5) in integers; channels are non-negative
    r, g, b = ((2 * int(s) + n) // (2 * n) for s in sums)
    return RGBColor(r, g, b)


def median_color(samples: NDArray[np.uint8]) -> RGBColor:
    """
    Per-channel median of a box.

    Each channel is selected independently from its own scratch buffer,
    so the result need not be one of the samples. For an even count the
    two middle values are averaged and rounded half up.

    Returns black for an empty set.
    """
    n = len(samples)
    if n == 0:
        return BLACK

    mid = n // 2
    channels = []
    for ch in range(3):
        values = samples[:, ch].astype(np.int64)
        upper = select_value(values, mid)
        if n % 2 == 1:
            channels.append(upper)
        else:
            # After selection everything left of mid is <= upper, so the
            # lower middle value is the largest of them.
            lower = int(values[:mid].max())
            channels.append((lower + upper + 1) // 2)
    return RGBColor(*channels)
