# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""Tests for the runtime serializers (text, JSON)."""

import json

import numpy as np
import pytest

from palettecut import RGBColor, quantize, rank_entries
from palettecut.runtime import (
    SerializerFormat,
    serialize,
    to_json_document,
    to_text,
)


def _two_tone_image(rgb1, rgb2, height=10, width=20):
    img = np.zeros((height, width, 3), dtype=np.uint8)
    img[:, : width // 2] = rgb1
    img[:, width // 2 :] = rgb2
    return img


@pytest.fixture
def entries():
    palette = (RGBColor(250, 10, 10), RGBColor(10, 10, 250), RGBColor(0, 0, 0))
    return rank_entries(palette, (400, 600, 0))


@pytest.fixture
def two_tone_result():
    return quantize(_two_tone_image([255, 0, 0], [0, 0, 255]), 2)


# ---------------------------------------------------------------------------
# to_text
# ---------------------------------------------------------------------------

class TestText:

    def test_one_line_per_entry(self, entries):
        assert to_text(entries).splitlines() == [
            "#0A0AFA\tcount=600\tshare=60.00%",
            "#FA0A0A\tcount=400\tshare=40.00%",
            "#000000\tcount=0\tshare=0.00%",
        ]

    def test_empty(self):
        assert to_text(()) == ""

    def test_accepts_result(self, two_tone_result):
        lines = to_text(two_tone_result).splitlines()
        assert len(lines) == 2
        assert {line.split("\t")[0] for line in lines} == {"#FF0000", "#0000FF"}
        assert all(line.endswith("share=50.00%") for line in lines)


# ---------------------------------------------------------------------------
# to_json_document
# ---------------------------------------------------------------------------

class TestJsonDocument:

    def test_parses_as_list(self, entries):
        data = json.loads(to_json_document(entries))
        assert isinstance(data, list)
        assert len(data) == 3

    def test_entry_layout(self, entries):
        first = json.loads(to_json_document(entries))[0]
        assert first == {
            "color": {"r": 10, "g": 10, "b": 250},
            "count": 600,
            "share": 0.6,
            "hex": "#0A0AFA",
        }

    def test_pretty_is_indented(self, entries):
        assert "\n  {" in to_json_document(entries)

    def test_compact_has_no_whitespace(self, entries):
        text = to_json_document(entries, format=SerializerFormat.JSON)
        assert "\n" not in text
        assert ", " not in text

    def test_text_format_rejected(self, entries):
        with pytest.raises(ValueError, match="Unsupported"):
            to_json_document(entries, format=SerializerFormat.TEXT)

    def test_shares_sum_to_one(self, two_tone_result):
        data = json.loads(to_json_document(two_tone_result))
        assert sum(e["share"] for e in data) == pytest.approx(1.0)


class TestSerializeDispatch:

    def test_text(self, entries):
        assert serialize(entries) == to_text(entries)

    def test_json(self, entries):
        assert serialize(entries, SerializerFormat.JSON_PRETTY) == to_json_document(entries)
