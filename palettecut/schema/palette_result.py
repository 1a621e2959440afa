# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
PaletteResult v1.0 — Schema for quantization results.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same samples and k → same result
- Index-aligned: palette[i] and histogram[i] always describe the same entry
- Serializable: JSON-ready for text/JSON/preview collaborators

Colors are plain 8-bit sRGB triples. No perceptual color space is used
anywhere in palettecut; distances are squared Euclidean in RGB.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    A single 8-bit RGB color.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channel values are 8-bit unsigned."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Channel {name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")

    @property
    def hex(self) -> str:
        """Uppercase hex string like "#F6C767"."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])

    @classmethod
    def from_hex(cls, value: str) -> RGBColor:
        """Parse "#RRGGBB" (case-insensitive, leading '#' optional)."""
        digits = value[1:] if value.startswith("#") else value
        if len(digits) != 6:
            raise ValueError(f"Expected #RRGGBB, got {value!r}")
        try:
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError as e:
            raise ValueError(f"Expected #RRGGBB, got {value!r}") from e
        return cls(r=r, g=g, b=b)


BLACK = RGBColor(0, 0, 0)


# =============================================================================
# Ranked Entries
# =============================================================================


@dataclass(frozen=True, slots=True)
class RankedEntry:
    """
    A palette color paired with how many samples it represents.

    Attributes:
        color: The palette color
        count: Number of samples classified to this palette entry
        share: count / total samples (0.0 when there are no samples)
        index: Position of the color in the palette it was ranked from
    """
    color: RGBColor
    count: int
    share: float
    index: int = 0

    def __post_init__(self) -> None:
        """Validate count and share."""
        if self.count < 0:
            raise ValueError(f"Count must be >= 0, got {self.count}")
        if not 0.0 <= self.share <= 1.0:
            raise ValueError(f"Share must be 0-1, got {self.share}")

    @property
    def hex(self) -> str:
        return self.color.hex

    def to_dict(self) -> dict:
        """Serialize to dictionary (the layout of the JSON output)."""
        return {
            "color": self.color.to_dict(),
            "count": self.count,
            "share": self.share,
            "hex": self.hex,
        }

    @classmethod
    def from_dict(cls, data: dict, index: int = 0) -> RankedEntry:
        """Deserialize from dictionary."""
        if "color" in data:
            color = RGBColor.from_dict(data["color"])
        else:
            color = RGBColor.from_hex(data["hex"])
        return cls(
            color=color,
            count=data["count"],
            share=data.get("share", 0.0),
            index=data.get("index", index),
        )


# =============================================================================
# Top-Level Result Container
# =============================================================================


@dataclass(frozen=True, slots=True)
class PaletteResult:
    """
    Complete quantization result for one set of samples.

    Required fields:
        - palette: Exactly n_colors colors, in build order
        - histogram: Sample counts, index-aligned with palette
        - entries: Palette ranked by count (most frequent first)

    Optional fields:
        - source: Where the samples came from (file path)
        - image_size: (width, height) of the decoded source image

    Usage:
        result = PaletteResult(
            palette=(RGBColor(250, 10, 10), RGBColor(10, 10, 250)),
            histogram=(600, 400),
            entries=rank_entries(palette, histogram),
            n_colors=2,
        )
    """
    palette: tuple[RGBColor, ...]
    histogram: tuple[int, ...]
    entries: tuple[RankedEntry, ...]
    n_colors: int
    version: str = field(default=SCHEMA_VERSION)
    source: Optional[str] = None
    image_size: Optional[tuple[int, int]] = None

    def __post_init__(self) -> None:
        """Validate index alignment."""
        if len(self.histogram) != len(self.palette):
            raise ValueError(
                f"Histogram length {len(self.histogram)} does not match "
                f"palette length {len(self.palette)}"
            )
        if len(self.entries) != len(self.palette):
            raise ValueError(
                f"Expected {len(self.palette)} ranked entries, got {len(self.entries)}"
            )

    @property
    def total(self) -> int:
        """Number of samples that were classified."""
        return sum(self.histogram)

    @property
    def dominant(self) -> Optional[RGBColor]:
        """The most frequent palette color (None for an empty palette)."""
        return self.entries[0].color if self.entries else None

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        result = {
            "version": self.version,
            "n_colors": self.n_colors,
            "palette": [c.to_dict() for c in self.palette],
            "histogram": list(self.histogram),
            "entries": [e.to_dict() for e in self.entries],
        }
        if self.source is not None:
            result["source"] = self.source
        if self.image_size is not None:
            result["image_size"] = list(self.image_size)
        return result

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def to_text(self) -> str:
        """
        Serialize to the plain-text listing, one ranked entry per line.

        Example output:
            #FA0A0A	count=600	share=60.00%
            #0A0AFA	count=400	share=40.00%
        """
        # Import here to avoid circular imports
        from palettecut.runtime.serializers.text import to_text
        return to_text(self.entries)

    @classmethod
    def from_dict(cls, data: dict) -> PaletteResult:
        """Deserialize from dictionary."""
        palette = tuple(RGBColor.from_dict(c) for c in data["palette"])
        histogram = tuple(int(c) for c in data["histogram"])
        # Ranked entries carry no index in their JSON layout; recover it
        # from the first unused palette slot holding the same color.
        entries = []
        used: set[int] = set()
        for e in data["entries"]:
            entry = RankedEntry.from_dict(e)
            for i, c in enumerate(palette):
                if i not in used and c == entry.color and histogram[i] == entry.count:
                    used.add(i)
                    entry = RankedEntry(entry.color, entry.count, entry.share, i)
                    break
            entries.append(entry)
        size = data.get("image_size")
        return cls(
            palette=palette,
            histogram=histogram,
            entries=tuple(entries),
            n_colors=data.get("n_colors", len(palette)),
            version=data.get("version", SCHEMA_VERSION),
            source=data.get("source"),
            image_size=tuple(size) if size is not None else None,
        )

    @classmethod
    def from_json(cls, json_str: str) -> PaletteResult:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
