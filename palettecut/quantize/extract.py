# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
Main quantization API.

This is the primary entry point for palettecut: load an image, build a
median-cut palette, classify every pixel and rank the palette.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageCms

from palettecut.schema import PaletteResult
from palettecut.quantize.classify import ClassifierConfig, classify_samples
from palettecut.quantize.palette import build_palette
from palettecut.quantize.ranking import rank_entries

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif"})

ImageInput = Union[str, Path, NDArray[np.uint8], Image.Image]


@dataclass(frozen=True)
class QuantizeConfig:
    """Settings for the quantize() pipeline."""

    # Palette size (k)
    n_colors: int = 8

    # How classification is executed
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)


def is_supported_image(path: Union[str, Path]) -> bool:
    """True if the file extension is one palettecut decodes (png/jpg/jpeg/gif)."""
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS


def quantize(
    image: ImageInput,
    n_colors: Optional[int] = None,
    *,
    config: Optional[QuantizeConfig] = None,
) -> PaletteResult:
    """
    Quantize an image to a palette of ``n_colors`` colors.

    Args:
        image: One of:
            - Path to an image file (str or Path). Decoded with Pillow;
              an embedded ICC profile is converted to sRGB.
            - PIL Image
            - NumPy array of shape (H, W, 3) or (H, W, 4), uint8
        n_colors: Palette size; overrides ``config.n_colors`` when given
        config: Pipeline settings (uses defaults if None)

    Returns:
        PaletteResult with the palette, histogram and ranked entries.

    Example:
        >>> from palettecut import quantize
        >>> result = quantize("photo.jpg", 5)
        >>> print(result.to_text())
        #2B3A55	count=48211	share=38.57%
        ...
    """
    cfg = config or QuantizeConfig()
    k = cfg.n_colors if n_colors is None else n_colors

    samples, width, height = load_samples(image)
    logger.debug("loaded %dx%d image (%d samples)", width, height, len(samples))

    palette = build_palette(samples, k)
    histogram = classify_samples(samples, palette, cfg.classifier)
    entries = rank_entries(palette, histogram)

    source = str(image) if isinstance(image, (str, Path)) else None
    return PaletteResult(
        palette=palette,
        histogram=histogram,
        entries=entries,
        n_colors=k,
        source=source,
        image_size=(width, height),
    )


def load_samples(image: ImageInput) -> tuple[NDArray[np.uint8], int, int]:
    """
    Decode an image into a flat sample array.

    Returns:
        (samples, width, height) where samples has shape (H*W, 3)
    """
    pixels = load_image(image)
    height, width = pixels.shape[:2]
    return pixels.reshape(-1, 3), width, height


def load_image(image: ImageInput) -> NDArray[np.uint8]:
    """
    Load image from file or validate array.

    Applies ICC profile conversion to sRGB if the image has an embedded
    color profile. This ensures colors match what color pickers show.

    Returns:
        Array of shape (H, W, 3)
    """
    if isinstance(image, (str, Path)):
        with Image.open(image) as img:
            return _to_rgb_array(img)

    if isinstance(image, Image.Image):
        return _to_rgb_array(image)

    if isinstance(image, np.ndarray):
        if image.ndim != 3 or image.shape[2] not in (3, 4):
            raise ValueError(
                f"Expected (H, W, 3) or (H, W, 4) array, got shape {image.shape}"
            )
        if image.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {image.dtype}")
        return np.ascontiguousarray(image[:, :, :3])

    raise TypeError(
        f"Expected file path, PIL image or numpy array, got {type(image)}"
    )


def _to_rgb_array(img: Image.Image) -> NDArray[np.uint8]:
    """Convert a decoded PIL image to an sRGB (H, W, 3) uint8 array."""
    icc = img.info.get("icc_profile")
    if img.mode != "RGB":
        img = img.convert("RGB")

    if icc:
        try:
            embedded_profile = ImageCms.ImageCmsProfile(io.BytesIO(icc))
            srgb_profile = ImageCms.createProfile("sRGB")
            img = ImageCms.profileToProfile(img, embedded_profile, srgb_profile)
        except (ImageCms.PyCMSError, OSError) as e:
            # Unusable profile: keep the plain RGB conversion
            logger.debug("ignoring embedded ICC profile: %s", e)

    return np.array(img, dtype=np.uint8)
