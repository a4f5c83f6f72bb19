"""ID3v2 tag store adapter exports."""

from __future__ import annotations

from .tag_store import OFFSET_UNUSED, MutagenTagStore

__all__ = ["MutagenTagStore", "OFFSET_UNUSED"]
