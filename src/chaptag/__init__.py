"""chaptag: edit MP3 ID3v2 metadata and chapters as YAML."""

from __future__ import annotations

from typing import Final

__version__: Final[str] = "0.1.0"

__all__ = ["__version__"]
