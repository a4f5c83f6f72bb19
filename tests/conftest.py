"""Shared pytest fixtures: synthetic MP3 files and an in-memory tag store."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import timedelta
from pathlib import Path

import pytest

from chaptag.features.metadata.domain import Chapter
from chaptag.features.metadata.usecases.ports import EmbeddedPicture

# MPEG-1 Layer III, 128 kbit/s, 44.1 kHz, no padding, no CRC: 417-byte frames.
MPEG_FRAME_HEADER = b"\xff\xfb\x90\x00"
MPEG_FRAME_SIZE = 417

JPEG_BYTES = bytes(
    [
        0xFF, 0xD8, 0xFF, 0xE0, 0x00, 0x10, 0x4A, 0x46, 0x49, 0x46, 0x00, 0x01,
        0x01, 0x01, 0x00, 0x48, 0x00, 0x48, 0x00, 0x00,
        0xFF, 0xD9,
    ]
)


def write_mpeg_frames(path: Path, count: int = 200) -> Path:
    """Write ``count`` silent MPEG frames (no ID3 tag) to ``path``."""
    frame = MPEG_FRAME_HEADER + bytes(MPEG_FRAME_SIZE - len(MPEG_FRAME_HEADER))
    _ = path.write_bytes(frame * count)
    return path


@pytest.fixture
def mp3_factory(tmp_path: Path) -> Callable[..., Path]:
    """Create tag-less MP3 files under ``tmp_path``."""

    def _make(name: str = "episode.mp3", frames: int = 200) -> Path:
        return write_mpeg_frames(tmp_path / name, frames)

    return _make


@pytest.fixture
def mp3_file(mp3_factory: Callable[..., Path]) -> Path:
    return mp3_factory()


@pytest.fixture
def jpeg_bytes() -> bytes:
    return JPEG_BYTES


class InMemoryTagStore:
    """Dict-backed ``TagStore`` double recording every call."""

    def __init__(self) -> None:
        self.text: dict[str, list[str]] = {}
        self.user_text: list[tuple[str, str]] = []
        self.pictures: list[EmbeddedPicture] = []
        self.comments: list[str] = []
        self.lyrics: list[str] = []
        self.chapter_frames: list[tuple[str, timedelta, timedelta, str]] = []
        self.tocs: list[tuple[str, list[str]]] = []
        self.saved = 0
        self.closed = False

    def get_text_frame(self, frame_id: str) -> str | None:
        values = self.text.get(frame_id)
        return values[-1] if values else None

    def add_text_frame(self, frame_id: str, value: str) -> None:
        self.text.setdefault(frame_id, []).append(value)

    def delete_frames(self, frame_id: str) -> None:
        _ = self.text.pop(frame_id, None)
        if frame_id == "COMM":
            self.comments.clear()
        elif frame_id == "USLT":
            self.lyrics.clear()
        elif frame_id == "CHAP":
            self.chapter_frames.clear()
        elif frame_id == "CTOC":
            self.tocs.clear()

    def get_user_text(self, description: str) -> str | None:
        for desc, value in self.user_text:
            if desc == description:
                return value
        return None

    def set_user_text(self, description: str, value: str) -> None:
        self.delete_user_text(description)
        self.user_text.append((description, value))

    def delete_user_text(self, description: str) -> None:
        self.user_text = [entry for entry in self.user_text if entry[0] != description]

    def get_picture(self) -> EmbeddedPicture | None:
        return self.pictures[0] if self.pictures else None

    def set_picture(self, mime: str, data: bytes) -> None:
        self.pictures = [EmbeddedPicture(mime=mime, data=data)]

    def get_comment(self) -> str | None:
        return self.comments[0] if self.comments else None

    def add_comment(self, text: str) -> None:
        self.comments.append(text)

    def get_lyrics(self) -> str | None:
        return self.lyrics[0] if self.lyrics else None

    def add_lyrics(self, text: str) -> None:
        self.lyrics.append(text)

    def get_chapters(self) -> list[Chapter]:
        return [Chapter(start=start, title=title) for _, start, _, title in self.chapter_frames]

    def add_chapter_frame(
        self, element_id: str, start: timedelta, end: timedelta, title: str
    ) -> None:
        self.chapter_frames.append((element_id, start, end, title))

    def add_table_of_contents(self, element_id: str, child_ids: Sequence[str]) -> None:
        self.tocs.append((element_id, list(child_ids)))

    def save(self) -> None:
        self.saved += 1

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def memory_store() -> InMemoryTagStore:
    return InMemoryTagStore()
