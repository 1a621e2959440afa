# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
Schema definitions for quantization results.

All types in this module are immutable (frozen dataclasses).
Once a palette is built, it is handed to consumers read-only.
"""

from palettecut.schema.palette_result import (
    BLACK,
    SCHEMA_VERSION,
    PaletteResult,
    RankedEntry,
    RGBColor,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Core types
    "RGBColor",
    "BLACK",
    "RankedEntry",
    # Top-level container
    "PaletteResult",
]
