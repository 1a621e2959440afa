# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
Nearest-palette classification of samples.

Every sample is assigned to the palette entry at the smallest squared
RGB distance; equal distances go to the lowest palette index. The
result is a histogram of assignments, index-aligned with the palette.

Large inputs are cut into contiguous chunks counted on a thread pool
and merged by element-wise addition, so the histogram does not depend
on how many workers were used.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from palettecut.quantize.samples import SampleInput, as_sample_array

logger = logging.getLogger(__name__)


def default_workers() -> int:
    """Host-reported parallelism (at least 1)."""
    return max(1, os.cpu_count() or 1)


@dataclass(frozen=True)
class ClassifierConfig:
    """Execution policy for classification."""

    # Thread count; None means default_workers()
    workers: Optional[int] = None

    # Inputs smaller than this are always counted on the calling thread
    parallel_threshold: int = 5000

    # Distance entries (rows * k) per vectorized block; the block row count
    # is block_size // k, at least one row
    block_size: int = 1 << 20

    def __post_init__(self) -> None:
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.block_size < 1:
            raise ValueError(f"block_size must be >= 1, got {self.block_size}")

    @property
    def resolved_workers(self) -> int:
        return self.workers if self.workers is not None else default_workers()


def classify_samples(
    samples: SampleInput,
    palette: SampleInput,
    config: Optional[ClassifierConfig] = None,
) -> tuple[int, ...]:
    """
    Count how many samples fall nearest to each palette entry.

    Args:
        samples: (N, 3) uint8 array or sequence of colors
        palette: Palette colors (RGBColor sequence or (K, 3) array)
        config: Execution policy (uses defaults if None)

    Returns:
        Tuple of K counts. Empty when the palette is empty; all zeros
        when there are no samples.
    """
    cfg = config or ClassifierConfig()
    pal = as_sample_array(palette)
    k = len(pal)
    if k == 0:
        return ()

    pixels = as_sample_array(samples)
    n = len(pixels)
    if n == 0:
        return (0,) * k

    workers = cfg.resolved_workers
    if workers < 2 or n < cfg.parallel_threshold:
        counts = _count_chunk(pixels, pal, cfg.block_size)
    else:
        counts = _count_parallel(pixels, pal, workers, cfg.block_size)

    assert int(counts.sum()) == n, "histogram does not cover every sample"
    return tuple(int(c) for c in counts)


def nearest_indices(
    samples: SampleInput,
    palette: SampleInput,
    block_size: int = 1 << 20,
) -> NDArray[np.int64]:
    """
    Index of the nearest palette entry for every sample.

    Args:
        samples: (N, 3) samples
        palette: Non-empty palette
        block_size: Distance entries (rows * palette size) per block

    Returns:
        Array of shape (N,) with palette indices.
    """
    pal = as_sample_array(palette)
    if len(pal) == 0:
        raise ValueError("Cannot classify against an empty palette")
    pixels = as_sample_array(samples)
    pal_i = pal.astype(np.int32)
    rows = max(1, block_size // len(pal))

    labels = np.empty(len(pixels), dtype=np.int64)
    for start in range(0, len(pixels), rows):
        block = pixels[start:start + rows].astype(np.int32)
        diff = block[:, np.newaxis, :] - pal_i[np.newaxis, :, :]
        dists = np.einsum("nkc,nkc->nk", diff, diff)
        # argmin returns the first minimum, i.e. the lowest palette index
        labels[start:start + rows] = np.argmin(dists, axis=1)
    return labels


def _count_chunk(
    pixels: NDArray[np.uint8],
    palette: NDArray[np.uint8],
    block_size: int,
) -> NDArray[np.int64]:
    """Histogram of one contiguous run of samples."""
    labels = nearest_indices(pixels, palette, block_size=block_size)
    return np.bincount(labels, minlength=len(palette)).astype(np.int64)


def _chunk_bounds(n: int, workers: int) -> list[tuple[int, int]]:
    """
    Split [0, n) into ``workers`` contiguous ranges.

    Each range holds n // workers samples; the last one also takes the
    remainder.
    """
    step = n // workers
    bounds = [(i * step, (i + 1) * step) for i in range(workers - 1)]
    bounds.append(((workers - 1) * step, n))
    return bounds


def _count_parallel(
    pixels: NDArray[np.uint8],
    palette: NDArray[np.uint8],
    workers: int,
    block_size: int,
) -> NDArray[np.int64]:
    """Count chunks on a thread pool and merge the partial histograms."""
    bounds = _chunk_bounds(len(pixels), workers)
    logger.debug(
        "classifying %d samples against %d colors in %d chunks",
        len(pixels), len(palette), len(bounds),
    )

    with ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [
            ex.submit(_count_chunk, pixels[lo:hi], palette, block_size)
            for lo, hi in bounds
        ]
        # result() re-raises a worker's exception; nothing partial escapes
        partials = [f.result() for f in futures]

    counts = np.zeros(len(palette), dtype=np.int64)
    for part in partials:
        counts += part
    return counts
