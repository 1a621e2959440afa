# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
Palettecut -- Median-cut color quantization.

Reduces the pixels of an image to a fixed-size palette of representative
colors and counts how many pixels each palette color stands for.

Quick start::

    from palettecut import quantize

    result = quantize("image.png", 8)
    result.to_text()   # One line per color, most frequent first
    result.to_json()   # Full result as JSON

Working on raw samples::

    from palettecut import build_palette, classify_samples

    palette = build_palette(samples, 8)      # samples: (N, 3) uint8
    histogram = classify_samples(samples, palette)
"""

from __future__ import annotations

__version__ = "1.0.0"

from palettecut.quantize import (
    ClassifierConfig,
    QuantizeConfig,
    build_palette,
    classify_samples,
    quantize,
    rank_entries,
)
from palettecut.schema import (
    PaletteResult,
    RankedEntry,
    RGBColor,
)

__all__ = [
    # Core API
    "quantize",
    "build_palette",
    "classify_samples",
    "rank_entries",
    # Configuration
    "QuantizeConfig",
    "ClassifierConfig",
    # Types
    "RGBColor",
    "RankedEntry",
    "PaletteResult",
    # Version
    "__version__",
]
