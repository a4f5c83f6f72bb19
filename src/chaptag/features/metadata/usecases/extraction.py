"""Where: src/chaptag/features/metadata/usecases/extraction.py
What: Read an opened tag store into a ``Metadata`` record.
Why: Fields outside the frame mapping table (date, comment, lyrics, artwork,
     chapters) each need their own fallback or ordering rules.
"""

from __future__ import annotations

from chaptag.config.settings import SOURCE_FRAME_DESC
from chaptag.features.metadata.domain import (
    Metadata,
    Precision,
    Timestamp,
    parse_timestamp,
    sort_chapters,
)
from chaptag.platform.logging import logger
from chaptag.shared.errors import FormatError

from .artwork import build_data_uri, reconcile_artwork
from .frame_mapping import read_text_frames
from .ports import TagStore


def _parse_stored_date(text: str, frame_id: str) -> Timestamp | None:
    try:
        return parse_timestamp(text)
    except FormatError as exc:
        logger.warning("Ignoring unparseable %s frame: %s", frame_id, exc)
        return None


def read_date(store: TagStore) -> Timestamp | None:
    """TDRC when present, else the legacy TYER year."""
    recording_time = store.get_text_frame("TDRC")
    if recording_time:
        return _parse_stored_date(recording_time, "TDRC")

    year = store.get_text_frame("TYER")
    if not year:
        return None
    date = _parse_stored_date(year.strip()[:4], "TYER")
    if date is None:
        return None
    return Timestamp(value=date.value, precision=Precision.YEAR)


def read_artwork(store: TagStore, override: str | None = None) -> str:
    """Artwork value in priority order: override, tracked source, data URI."""
    if override:
        return override

    picture = store.get_picture()
    if picture is None:
        return ""
    source = store.get_user_text(SOURCE_FRAME_DESC)
    if source:
        return source
    return build_data_uri(picture)


def extract_metadata(store: TagStore, artwork_override: str | None = None) -> Metadata:
    """Build the metadata record for the tag held by ``store``.

    Side effect: a local artwork path that no longer exists is recreated from
    the embedded picture (see ``reconcile_artwork``).
    """
    metadata = Metadata()
    read_text_frames(store, metadata)

    metadata.date = read_date(store)
    metadata.comment = store.get_comment() or ""
    metadata.lyrics = store.get_lyrics() or ""
    metadata.chapters = sort_chapters(store.get_chapters())

    metadata.artwork = read_artwork(store, artwork_override)
    if metadata.artwork:
        _ = reconcile_artwork(metadata.artwork, store.get_picture())

    return metadata


__all__ = ["extract_metadata", "read_artwork", "read_date"]
