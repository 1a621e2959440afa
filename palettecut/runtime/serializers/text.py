# Copyright (c) 2026 Palettecut
# SPDX-License-Identifier: MIT

"""
Plain-text serializer.

One line per ranked entry, tab-separated, most frequent color first.
"""

from __future__ import annotations

from palettecut.runtime.serializers.base import EntriesInput, entries_of


def to_text(source: EntriesInput) -> str:
    """Serialize ranked entries as text lines.

    Args:
        source: A PaletteResult or its ranked entries.

    Returns:
        Newline-joined listing (no trailing newline), empty for no entries.

    Example::

        #FA0A0A	count=600	share=60.00%
        #0A0AFA	count=400	share=40.00%
    """
    return "\n".join(
        f"{e.hex}\tcount={e.count}\tshare={e.share * 100:.2f}%"
        for e in entries_of(source)
    )
