# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""Normalization of caller-supplied samples and palettes to (N, 3) uint8 arrays."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

import numpy as np
from numpy.typing import NDArray

from palettecut.schema import RGBColor

SampleInput = Union[NDArray, Sequence[RGBColor], Sequence[Sequence[int]]]


def as_sample_array(samples: SampleInput, *, copy: bool = False) -> NDArray[np.uint8]:
    """
    Convert samples to a C-contiguous uint8 array of shape (N, 3).

    Accepts:
        - NumPy arrays of shape (..., 3) or (..., 4); alpha is dropped
        - Sequences of RGBColor
        - Sequences of (r, g, b) triples

    Args:
        samples: Input samples
        copy: Always return a fresh buffer the caller may reorder

    Raises:
        ValueError: Wrong shape or channel values outside 0-255
        TypeError: Input is not an array or sequence
    """
    if isinstance(samples, np.ndarray):
        arr = samples
    elif isinstance(samples, Sequence) and not isinstance(samples, (str, bytes)):
        if len(samples) == 0:
            return np.empty((0, 3), dtype=np.uint8)
        rows = [c.to_tuple() if isinstance(c, RGBColor) else tuple(c) for c in samples]
        arr = np.asarray(rows)
    else:
        raise TypeError(
            f"Expected numpy array or sequence of colors, got {type(samples)}"
        )

    if arr.size == 0:
        return np.empty((0, 3), dtype=np.uint8)

    if arr.ndim < 2 or arr.shape[-1] not in (3, 4):
        raise ValueError(f"Expected (..., 3) or (..., 4) samples, got shape {arr.shape}")

    arr = arr.reshape(-1, arr.shape[-1])[:, :3]

    if arr.dtype != np.uint8:
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"Expected integer channel values, got {arr.dtype}")
        if arr.min() < 0 or arr.max() > 255:
            raise ValueError("Channel values must be 0-255")
        arr = arr.astype(np.uint8)
        copy = False  # astype already made a fresh buffer

    if copy:
        return np.array(arr, dtype=np.uint8, order="C", copy=True)
    return np.ascontiguousarray(arr)


def colors_from_array(arr: NDArray[np.uint8]) -> tuple[RGBColor, ...]:
    """Convert an (N, 3) array back to RGBColor values."""
    return tuple(RGBColor(int(r), int(g), int(b)) for r, g, b in arr.tolist())
