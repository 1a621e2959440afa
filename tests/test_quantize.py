# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""Integration tests for the quantize() entry point."""

import numpy as np
import pytest
from PIL import Image, ImageCms

from palettecut import (
    ClassifierConfig,
    PaletteResult,
    QuantizeConfig,
    RGBColor,
    quantize,
)
from palettecut.quantize import is_supported_image, load_image, load_samples


def _solid_image(r, g, b, height=20, width=20):
    """Create a solid-color image."""
    return np.full((height, width, 3), [r, g, b], dtype=np.uint8)


def _three_color_image(height=30, width=90):
    """Red / green / blue vertical stripes, red twice as wide."""
    img = np.zeros((height, width, 3), dtype=np.uint8)
    img[:, :45] = [255, 0, 0]
    img[:, 45:68] = [0, 255, 0]
    img[:, 68:] = [0, 0, 255]
    return img


class TestQuantizeBasic:

    def test_returns_result(self):
        result = quantize(_solid_image(10, 20, 30), 3)
        assert isinstance(result, PaletteResult)
        assert result.n_colors == 3
        assert len(result.palette) == 3
        assert result.image_size == (20, 20)

    def test_solid_image(self):
        result = quantize(_solid_image(10, 20, 30), 4)
        assert result.palette == (RGBColor(10, 20, 30),) * 4
        assert result.histogram == (400, 0, 0, 0)
        assert result.dominant == RGBColor(10, 20, 30)

    def test_three_stripes(self):
        result = quantize(_three_color_image(), 3)
        assert set(result.palette) == {
            RGBColor(255, 0, 0), RGBColor(0, 255, 0), RGBColor(0, 0, 255)
        }
        assert result.entries[0].color == RGBColor(255, 0, 0)
        assert result.entries[0].count == 30 * 45
        assert result.total == 30 * 90

    def test_shares_sum_to_one(self):
        result = quantize(_three_color_image(), 5)
        assert sum(e.share for e in result.entries) == pytest.approx(1.0)

    def test_config_n_colors(self):
        result = quantize(_three_color_image(), config=QuantizeConfig(n_colors=2))
        assert len(result.palette) == 2

    def test_argument_overrides_config(self):
        result = quantize(
            _three_color_image(), 6, config=QuantizeConfig(n_colors=2)
        )
        assert len(result.palette) == 6

    def test_zero_colors(self):
        result = quantize(_solid_image(1, 2, 3), 0)
        assert result.palette == ()
        assert result.histogram == ()
        assert result.entries == ()


class TestQuantizeDeterminism:

    def test_same_input_same_output(self):
        rng = np.random.default_rng(42)
        img = rng.integers(0, 256, size=(120, 100, 3), dtype=np.uint8)
        one = quantize(img, 8, config=QuantizeConfig(classifier=ClassifierConfig(workers=1)))
        many = quantize(img, 8, config=QuantizeConfig(classifier=ClassifierConfig(workers=6)))
        assert one.palette == many.palette
        assert one.histogram == many.histogram
        assert one.entries == many.entries

    def test_input_not_mutated(self):
        rng = np.random.default_rng(1)
        img = rng.integers(0, 256, size=(50, 50, 3), dtype=np.uint8)
        before = img.copy()
        quantize(img, 8)
        np.testing.assert_array_equal(img, before)


class TestImageFiles:

    def test_png_path(self, tmp_path):
        path = tmp_path / "stripes.png"
        Image.fromarray(_three_color_image()).save(path)
        result = quantize(path, 3)
        assert result.source == str(path)
        assert result.image_size == (90, 30)
        assert result.total == 30 * 90

    def test_palette_mode_gif(self, tmp_path):
        path = tmp_path / "stripes.gif"
        Image.fromarray(_three_color_image()).convert("P").save(path)
        result = quantize(str(path), 3)
        assert result.total == 30 * 90
        assert len(result.palette) == 3

    def test_rgba_png(self, tmp_path):
        path = tmp_path / "alpha.png"
        rgba = np.zeros((8, 8, 4), dtype=np.uint8)
        rgba[..., 0] = 200
        rgba[..., 3] = 128
        Image.fromarray(rgba).save(path)
        samples, width, height = load_samples(path)
        assert samples.shape == (64, 3)
        assert (width, height) == (8, 8)

    def test_pil_image(self):
        img = Image.fromarray(_solid_image(5, 6, 7))
        result = quantize(img, 1)
        assert result.palette == (RGBColor(5, 6, 7),)
        assert result.source is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            quantize(tmp_path / "nope.png", 3)

    def test_srgb_profile_keeps_pixels(self, tmp_path):
        path = tmp_path / "tagged.png"
        srgb = ImageCms.ImageCmsProfile(ImageCms.createProfile("sRGB")).tobytes()
        Image.fromarray(_solid_image(200, 30, 40, 4, 4)).save(path, icc_profile=srgb)
        pixels = load_image(path)
        assert pixels.shape == (4, 4, 3)
        assert (pixels == [200, 30, 40]).all()

    def test_srgb_profile_on_rgba(self, tmp_path):
        path = tmp_path / "tagged_alpha.png"
        rgba = np.zeros((4, 4, 4), dtype=np.uint8)
        rgba[...] = [200, 30, 40, 255]
        srgb = ImageCms.ImageCmsProfile(ImageCms.createProfile("sRGB")).tobytes()
        Image.fromarray(rgba).save(path, icc_profile=srgb)
        pixels = load_image(path)
        assert pixels.shape == (4, 4, 3)
        assert (pixels == [200, 30, 40]).all()

    def test_unusable_profile_falls_back_to_rgb(self, tmp_path):
        path = tmp_path / "junk_profile.png"
        Image.fromarray(_solid_image(200, 30, 40, 4, 4)).save(
            path, icc_profile=b"not a color profile"
        )
        pixels = load_image(path)
        assert pixels.shape == (4, 4, 3)
        assert (pixels == [200, 30, 40]).all()

    @pytest.mark.parametrize(
        "name,expected",
        [("a.png", True), ("b.JPG", True), ("c.jpeg", True), ("d.gif", True),
         ("e.webp", False), ("f", False)],
    )
    def test_supported_extensions(self, name, expected):
        assert is_supported_image(name) is expected


class TestInputValidation:

    def test_invalid_shape_raises(self):
        with pytest.raises(ValueError, match="Expected.*H, W, 3"):
            quantize(np.zeros((10, 10), dtype=np.uint8), 2)

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Expected uint8"):
            quantize(np.zeros((10, 10, 3), dtype=np.float32), 2)

    def test_invalid_type_raises(self):
        with pytest.raises(TypeError, match="Expected file path"):
            quantize(42, 2)
