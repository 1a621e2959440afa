# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
Serializers for quantization results.

Each serializer formats ranked palette entries for one output channel.
All serializers preserve the entries exactly -- same order, same counts.
"""

from palettecut.runtime.serializers.base import SerializerFormat
from palettecut.runtime.serializers.document import to_json_document
from palettecut.runtime.serializers.text import to_text


def serialize(source, format: SerializerFormat = SerializerFormat.TEXT) -> str:
    """Serialize a PaletteResult (or its entries) in the given format."""
    if format == SerializerFormat.TEXT:
        return to_text(source)
    return to_json_document(source, format=format)


__all__ = [
    "SerializerFormat",
    "serialize",
    "to_text",
    "to_json_document",
]
