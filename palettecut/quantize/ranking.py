# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""Ranking of palette colors by how many samples they represent."""

from __future__ import annotations

from typing import Sequence

from palettecut.schema import RankedEntry, RGBColor


def rank_entries(
    palette: Sequence[RGBColor],
    histogram: Sequence[int],
) -> tuple[RankedEntry, ...]:
    """
    Pair each palette color with its count and share, most frequent first.

    Entries with equal counts keep their palette order.

    Args:
        palette: Palette colors
        histogram: Counts, index-aligned with palette

    Returns:
        Tuple of RankedEntry ordered by count descending. Shares sum to
        1.0 when there is at least one sample, and are all 0.0 otherwise.
    """
    if len(palette) != len(histogram):
        raise ValueError(
            f"Palette has {len(palette)} colors but histogram has {len(histogram)} counts"
        )

    total = sum(histogram)
    entries = [
        RankedEntry(
            color=color,
            count=int(count),
            share=count / total if total > 0 else 0.0,
            index=i,
        )
        for i, (color, count) in enumerate(zip(palette, histogram))
    ]
    # sorted() is stable, so ties stay in palette order
    return tuple(sorted(entries, key=lambda e: -e.count))
