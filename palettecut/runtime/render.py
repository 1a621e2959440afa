# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
Raster renderings of ranked palette entries.

Two outputs:
1. Preview: a standalone bar with one horizontal band per color, widths
   proportional to counts
2. Composite: the source image with a vertical strip appended on the
   right, block heights proportional to shares

Both are drawn in numpy and handed to Pillow for encoding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from palettecut.runtime.serializers.base import EntriesInput, entries_of
from palettecut.quantize.extract import ImageInput, load_image

PREVIEW_WIDTH = 600
PREVIEW_HEIGHT = 60
DEFAULT_STRIP_WIDTH = 80


def render_preview(
    source: EntriesInput,
    width: int = PREVIEW_WIDTH,
    height: int = PREVIEW_HEIGHT,
) -> Image.Image:
    """
    Draw ranked entries as side-by-side bands.

    Each band is ``width * count / total`` pixels wide, rounded half up.
    Zero-width bands are skipped and anything past the right edge is
    clipped. Pixels not covered by a band stay black.

    Args:
        source: A PaletteResult or its ranked entries
        width: Canvas width in pixels
        height: Canvas height in pixels

    Returns:
        RGB PIL image of size (width, height).
    """
    entries = entries_of(source)
    canvas = np.zeros((height, width, 3), dtype=np.uint8)

    total = sum(e.count for e in entries) or 1
    x = 0
    for e in entries:
        w = _round_half_up(width * e.count / total)
        if w <= 0:
            continue
        canvas[:, x:min(x + w, width)] = e.color.to_tuple()
        x += w

    return Image.fromarray(canvas)


def compose_with_strip(
    image: ImageInput,
    source: EntriesInput,
    strip_width: int = DEFAULT_STRIP_WIDTH,
) -> Image.Image:
    """
    Append a vertical palette strip to the right of an image.

    Blocks are stacked top to bottom in ranking order. A block is
    ``h * share`` rows tall (rounded half up), at least one row for a
    color with any samples, and the last block extends to the bottom
    edge. Rows left over after rounding take the last color.

    Args:
        image: Source image (path, PIL image or (H, W, 3|4) array)
        source: A PaletteResult or its ranked entries
        strip_width: Strip width in pixels (values <= 0 become 1)

    Returns:
        RGB PIL image of size (W + strip_width, H).
    """
    pixels = load_image(image)
    h, w = pixels.shape[:2]
    strip_width = max(1, strip_width)

    out = np.zeros((h, w + strip_width, 3), dtype=np.uint8)
    out[:, :w] = pixels
    _draw_strip(out[:, w:], entries_of(source))

    return Image.fromarray(out)


def _draw_strip(strip: NDArray[np.uint8], entries) -> None:
    """Fill a (H, strip_width, 3) view with stacked share blocks."""
    h = strip.shape[0]
    y = 0
    for i, e in enumerate(entries):
        block = _round_half_up(h * e.share)
        if e.count > 0 and block == 0:
            block = 1
        if i == len(entries) - 1 and y + block < h:
            block = h - y
        strip[y:min(y + block, h)] = e.color.to_tuple()
        y += block
        if y >= h:
            break

    if y < h and entries:
        strip[y:] = entries[-1].color.to_tuple()


def save_preview(
    path: Union[str, Path],
    source: EntriesInput,
    width: int = PREVIEW_WIDTH,
    height: int = PREVIEW_HEIGHT,
) -> Path:
    """Render the preview bar and write it as PNG. Returns the path written."""
    path = Path(path)
    render_preview(source, width=width, height=height).save(path, format="PNG")
    return path


def save_composite(
    path: Union[str, Path],
    image: ImageInput,
    source: EntriesInput,
    strip_width: int = DEFAULT_STRIP_WIDTH,
) -> Path:
    """Compose image + strip and write it as PNG. Returns the path written."""
    path = Path(path)
    compose_with_strip(image, source, strip_width=strip_width).save(path, format="PNG")
    return path


def _round_half_up(x: float) -> int:
    """Round a non-negative float, halves away from zero."""
    return int(x + 0.5)
