"""Where: src/chaptag/features/metadata/usecases/injection.py
What: Write a ``Metadata`` record into an opened tag store, in memory only.
Why: Callers resolve artwork and the audio duration up front, so nothing in
     here can fail halfway after the first frame was touched.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Final

from chaptag.config.settings import SOURCE_FRAME_DESC
from chaptag.features.metadata.domain import (
    Chapter,
    Metadata,
    chapter_end_times,
    format_timestamp,
    sort_chapters,
)
from chaptag.platform.logging import logger

from .artwork import ResolvedArtwork
from .frame_mapping import apply_text_frames
from .ports import TagStore

TOC_ELEMENT_ID: Final[str] = "toc"


def chapter_element_id(index: int) -> str:
    return f"chp{index}"


def write_date(store: TagStore, metadata: Metadata) -> None:
    store.delete_frames("TDRC")
    store.delete_frames("TYER")
    if metadata.date is None:
        return
    # TYER first so v2.3 readers see the year even if TDRC is dropped on downgrade.
    store.add_text_frame("TYER", metadata.date.year_text)
    store.add_text_frame("TDRC", format_timestamp(metadata.date))


def write_comment_and_lyrics(store: TagStore, metadata: Metadata) -> None:
    store.delete_frames("COMM")
    if metadata.comment:
        store.add_comment(metadata.comment)

    store.delete_frames("USLT")
    if metadata.lyrics:
        store.add_lyrics(metadata.lyrics)


def write_artwork(store: TagStore, artwork: ResolvedArtwork | None) -> None:
    """Replace the embedded picture and record where it came from.

    ``None`` leaves picture and source frames untouched.
    """
    if artwork is None:
        return
    store.set_picture(artwork.mime, artwork.data)
    if artwork.is_tracked:
        store.set_user_text(SOURCE_FRAME_DESC, artwork.source)
    else:
        store.delete_user_text(SOURCE_FRAME_DESC)


def write_chapters(store: TagStore, chapters: list[Chapter], duration: timedelta | None) -> None:
    """Replace every CHAP/CTOC frame with ``chapters``.

    Raises:
        ValueError: ``chapters`` is non-empty but no ``duration`` was given.
    """
    store.delete_frames("CHAP")
    store.delete_frames("CTOC")
    if not chapters:
        return
    if duration is None:
        raise ValueError("audio duration is required to write chapters")

    ordered = sort_chapters(chapters)
    element_ids: list[str] = []
    for index, (chapter, end) in enumerate(zip(ordered, chapter_end_times(ordered, duration))):
        element_id = chapter_element_id(index)
        store.add_chapter_frame(element_id, chapter.start, end, chapter.title)
        element_ids.append(element_id)
    store.add_table_of_contents(TOC_ELEMENT_ID, element_ids)
    logger.debug("Wrote %d chapter frames", len(element_ids))


def inject_metadata(
    store: TagStore,
    metadata: Metadata,
    *,
    artwork: ResolvedArtwork | None,
    duration: timedelta | None,
) -> None:
    """Mutate ``store`` so it holds exactly ``metadata``; the caller saves.

    Args:
        store: Tag store opened for writing.
        metadata: Record to write.
        artwork: Pre-resolved artwork, or ``None`` to keep the current one.
        duration: Audio duration, required when ``metadata`` has chapters.
    """
    apply_text_frames(store, metadata)
    write_date(store, metadata)
    write_comment_and_lyrics(store, metadata)
    write_artwork(store, artwork)
    write_chapters(store, metadata.chapters, duration)


__all__ = [
    "TOC_ELEMENT_ID",
    "chapter_element_id",
    "inject_metadata",
    "write_artwork",
    "write_chapters",
    "write_comment_and_lyrics",
    "write_date",
]
