# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
JSON serializer.

Formats ranked entries as a JSON array that downstream tools can parse:
each element carries the color channels, the sample count, the share of
all samples and the hex string.
"""

from __future__ import annotations

import json

from palettecut.runtime.serializers.base import (
    EntriesInput,
    SerializerFormat,
    entries_of,
)


def to_json_document(
    source: EntriesInput,
    *,
    format: SerializerFormat = SerializerFormat.JSON_PRETTY,
) -> str:
    """Serialize ranked entries as a JSON array.

    Args:
        source: A PaletteResult or its ranked entries.
        format: JSON_PRETTY (2-space indent) or JSON (compact).

    Returns:
        JSON string.

    Example (JSON_PRETTY)::

        [
          {
            "color": {"r": 250, "g": 10, "b": 10},
            "count": 600,
            "share": 0.6,
            "hex": "#FA0A0A"
          }
        ]
    """
    data = [e.to_dict() for e in entries_of(source)]
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    elif format == SerializerFormat.JSON:
        return json.dumps(data, separators=(",", ":"))
    raise ValueError(f"Unsupported JSON format: {format}")
