"""Summary: Ports defining metadata use case dependencies.
Why: Decouple pipelines from mutagen, the MP3 decoder, and HTTP so tests and swaps stay simple."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Protocol, runtime_checkable

from chaptag.features.metadata.domain import Chapter


@dataclass(frozen=True, slots=True)
class EmbeddedPicture:
    """Attached picture bytes plus their MIME type."""

    mime: str
    data: bytes


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Body and ``Content-Type`` header of a downloaded artwork URL."""

    data: bytes
    content_type: str | None


@runtime_checkable
class TagStore(Protocol):
    """Port over an opened ID3v2 tag held in memory until ``save``."""

    def get_text_frame(self, frame_id: str) -> str | None:
        """Text of the last frame with ``frame_id``, or ``None`` when absent."""
        ...

    def add_text_frame(self, frame_id: str, value: str) -> None:
        """Add a UTF-8 text frame."""
        ...

    def delete_frames(self, frame_id: str) -> None:
        """Remove every frame with ``frame_id``."""
        ...

    def get_user_text(self, description: str) -> str | None:
        """Value of the TXXX frame with ``description``."""
        ...

    def set_user_text(self, description: str, value: str) -> None:
        """Replace the TXXX frames with ``description`` by a single one."""
        ...

    def delete_user_text(self, description: str) -> None:
        """Remove the TXXX frames with ``description``; others stay untouched."""
        ...

    def get_picture(self) -> EmbeddedPicture | None:
        """First attached picture carrying data."""
        ...

    def set_picture(self, mime: str, data: bytes) -> None:
        """Replace every attached picture with one front cover."""
        ...

    def get_comment(self) -> str | None:
        ...

    def add_comment(self, text: str) -> None:
        ...

    def get_lyrics(self) -> str | None:
        ...

    def add_lyrics(self, text: str) -> None:
        ...

    def get_chapters(self) -> list[Chapter]:
        """Chapters in stored frame order."""
        ...

    def add_chapter_frame(
        self, element_id: str, start: timedelta, end: timedelta, title: str
    ) -> None:
        ...

    def add_table_of_contents(self, element_id: str, child_ids: Sequence[str]) -> None:
        ...

    def save(self) -> None:
        """Persist the tag to disk as ID3v2.4."""
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class DurationProvider(Protocol):
    """Port computing the playing time of an audio file."""

    def duration(self, path: Path) -> timedelta:
        ...


@runtime_checkable
class ArtworkFetcher(Protocol):
    """Port downloading artwork over HTTP(S)."""

    def get(self, url: str) -> FetchResult:
        ...


__all__ = [
    "ArtworkFetcher",
    "DurationProvider",
    "EmbeddedPicture",
    "FetchResult",
    "TagStore",
]
