# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Union

from palettecut.schema import PaletteResult, RankedEntry

EntriesInput = Union[PaletteResult, Sequence[RankedEntry]]


class SerializerFormat(Enum):
    """Output format for serializers."""

    TEXT = "text"
    JSON = "json"
    JSON_PRETTY = "json_pretty"


def entries_of(source: EntriesInput) -> tuple[RankedEntry, ...]:
    """Ranked entries of a PaletteResult, or the entries themselves."""
    if isinstance(source, PaletteResult):
        return source.entries
    return tuple(source)
