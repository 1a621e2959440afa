# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
Output runtime for palettecut.

Turns ranked palette entries into something a person or another tool
can consume:

1. Text -- One tab-separated line per color
2. JSON -- An array of color/count/share/hex records
3. Preview -- A PNG bar of proportional color bands
4. Composite -- The source image with a palette strip on the right

The runtime never modifies the entries it is given.
"""

from palettecut.runtime.render import (
    compose_with_strip,
    render_preview,
    save_composite,
    save_preview,
)
from palettecut.runtime.serializers import (
    SerializerFormat,
    serialize,
    to_json_document,
    to_text,
)

__all__ = [
    "to_text",
    "to_json_document",
    "serialize",
    "SerializerFormat",
    "render_preview",
    "compose_with_strip",
    "save_preview",
    "save_composite",
]
