# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
Quantization core for palettecut.

This module provides deterministic median-cut palettes and
nearest-color histograms over raw RGB samples.
"""

from palettecut.quantize.classify import (
    ClassifierConfig,
    classify_samples,
    default_workers,
    nearest_indices,
)
from palettecut.quantize.extract import (
    SUPPORTED_EXTENSIONS,
    QuantizeConfig,
    is_supported_image,
    load_image,
    load_samples,
    quantize,
)
from palettecut.quantize.palette import build_palette, mean_color, median_color
from palettecut.quantize.ranking import rank_entries
from palettecut.quantize.samples import as_sample_array

__all__ = [
    "quantize",
    "QuantizeConfig",
    "build_palette",
    "classify_samples",
    "ClassifierConfig",
    "rank_entries",
    "nearest_indices",
    "default_workers",
    "mean_color",
    "median_color",
    "as_sample_array",
    "load_image",
    "load_samples",
    "is_supported_image",
    "SUPPORTED_EXTENSIONS",
]
