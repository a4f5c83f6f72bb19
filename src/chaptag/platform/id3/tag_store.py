"""Where: src/chaptag/platform/id3/tag_store.py
What: mutagen-backed implementation of the ``TagStore`` port.
Why: Keep every mutagen frame class and quirk out of the metadata pipelines.

Read passes load frames untranslated so a legacy TYER frame stays visible to
the date fallback; write passes let mutagen upgrade the tag and always save
ID3v2.4.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import timedelta
from pathlib import Path
from types import TracebackType
from typing import Final, Self

from mutagen import MutagenError
from mutagen.id3 import (
    APIC,
    CHAP,
    COMM,
    CTOC,
    ID3,
    TIT2,
    TXXX,
    USLT,
    CTOCFlags,
    Encoding,
    Frames,
    ID3NoHeaderError,
    ID3TimeStamp,
    PictureType,
)

from chaptag.features.metadata.domain import Chapter
from chaptag.features.metadata.usecases.ports import EmbeddedPicture
from chaptag.platform.logging import logger
from chaptag.shared.errors import MetadataIOError

# If these bytes are all set to 0xFF the offset is ignored and the time is used.
# cf. https://id3.org/id3v2-chapters-1.0
OFFSET_UNUSED: Final[int] = 0xFFFFFFFF

_DEFAULT_LANG: Final[str] = "eng"
_MULTI_VALUE_SEP: Final[str] = "/"


def _to_ms(value: timedelta) -> int:
    return value // timedelta(milliseconds=1)


def _value_text(value: object) -> str:
    if isinstance(value, ID3TimeStamp):
        # mutagen separates date and time with a space; keep the ISO 8601 "T".
        return value.text.replace(" ", "T")
    return str(value)


class MutagenTagStore:
    """An ID3 tag loaded from ``path`` and kept in memory until ``save``."""

    path: Path
    _tags: ID3

    def __init__(self, path: Path, tags: ID3) -> None:
        self.path = path
        self._tags = tags

    @classmethod
    def open(cls, path: Path, *, for_write: bool = False) -> Self:
        """Load the tag of ``path``; a file without a tag yields an empty one.

        Raises:
            MetadataIOError: The file is missing or its tag cannot be parsed.
        """
        if not path.is_file():
            raise MetadataIOError(f"failed to open file: {path}")
        try:
            tags = ID3(path, translate=for_write)
        except ID3NoHeaderError:
            logger.debug("No ID3 tag in %s; starting from an empty tag", path)
            tags = ID3()
        except (MutagenError, OSError) as exc:
            raise MetadataIOError(f"failed to read ID3 tag from {path}: {exc}") from exc
        if not for_write and tags.version < (2, 3, 0):
            # Three-letter v2.2 frame IDs are invisible to the mapping table.
            tags.update_to_v23()
        return cls(path, tags)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # Text frames -------------------------------------------------------------

    def get_text_frame(self, frame_id: str) -> str | None:
        frames = self._tags.getall(frame_id)
        if not frames:
            return None
        return _MULTI_VALUE_SEP.join(_value_text(value) for value in frames[-1].text)

    def add_text_frame(self, frame_id: str, value: str) -> None:
        frame_class = Frames[frame_id]
        self._tags.add(frame_class(encoding=Encoding.UTF8, text=[value]))

    def delete_frames(self, frame_id: str) -> None:
        self._tags.delall(frame_id)

    # User-defined text (TXXX) ------------------------------------------------

    def get_user_text(self, description: str) -> str | None:
        for frame in self._tags.getall("TXXX"):
            if frame.desc == description:
                return _MULTI_VALUE_SEP.join(str(value) for value in frame.text)
        return None

    def set_user_text(self, description: str, value: str) -> None:
        self.delete_user_text(description)
        self._tags.add(TXXX(encoding=Encoding.UTF8, desc=description, text=[value]))

    def delete_user_text(self, description: str) -> None:
        self._tags.delall(f"TXXX:{description}")

    # Pictures, comments, lyrics ----------------------------------------------

    def get_picture(self) -> EmbeddedPicture | None:
        for frame in self._tags.getall("APIC"):
            if frame.data:
                return EmbeddedPicture(mime=frame.mime, data=bytes(frame.data))
        return None

    def set_picture(self, mime: str, data: bytes) -> None:
        self._tags.delall("APIC")
        self._tags.add(
            APIC(
                encoding=Encoding.UTF8,
                mime=mime,
                type=PictureType.COVER_FRONT,
                desc="",
                data=data,
            )
        )

    def get_comment(self) -> str | None:
        frames = self._tags.getall("COMM")
        if not frames:
            return None
        # Prefer the plain comment over application-specific ones (iTunNORM, ...).
        plain = [frame for frame in frames if not frame.desc]
        frame = (plain or frames)[0]
        return _MULTI_VALUE_SEP.join(str(value) for value in frame.text)

    def add_comment(self, text: str) -> None:
        self._tags.add(COMM(encoding=Encoding.UTF8, lang=_DEFAULT_LANG, desc="", text=[text]))

    def get_lyrics(self) -> str | None:
        frames = self._tags.getall("USLT")
        if not frames:
            return None
        return str(frames[0].text)

    def add_lyrics(self, text: str) -> None:
        self._tags.add(USLT(encoding=Encoding.UTF8, lang=_DEFAULT_LANG, desc="", text=text))

    # Chapters ----------------------------------------------------------------

    def get_chapters(self) -> list[Chapter]:
        chapters: list[Chapter] = []
        for frame in self._tags.getall("CHAP"):
            title_frame = frame.sub_frames.get("TIT2")
            title = str(title_frame.text[0]) if title_frame is not None and title_frame.text else ""
            chapters.append(Chapter(start=timedelta(milliseconds=frame.start_time), title=title))
        return chapters

    def add_chapter_frame(
        self, element_id: str, start: timedelta, end: timedelta, title: str
    ) -> None:
        sub_frames = [TIT2(encoding=Encoding.UTF8, text=[title])] if title else []
        self._tags.add(
            CHAP(
                element_id=element_id,
                start_time=_to_ms(start),
                end_time=_to_ms(end),
                start_offset=OFFSET_UNUSED,
                end_offset=OFFSET_UNUSED,
                sub_frames=sub_frames,
            )
        )

    def add_table_of_contents(self, element_id: str, child_ids: Sequence[str]) -> None:
        self._tags.add(
            CTOC(
                element_id=element_id,
                flags=CTOCFlags.TOP_LEVEL | CTOCFlags.ORDERED,
                child_element_ids=list(child_ids),
                sub_frames=[],
            )
        )

    # Persistence -------------------------------------------------------------

    def save(self) -> None:
        try:
            self._tags.save(self.path, v2_version=4)
        except (MutagenError, OSError) as exc:
            raise MetadataIOError(f"failed to save metadata to {self.path}: {exc}") from exc
        logger.debug("Saved ID3v2.4 tag to %s", self.path)

    def close(self) -> None:
        """Drop the in-memory tag; mutagen holds no open handle between calls."""
        self._tags = ID3()


__all__ = ["MutagenTagStore", "OFFSET_UNUSED"]
