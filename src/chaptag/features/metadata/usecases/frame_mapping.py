"""Where: src/chaptag/features/metadata/usecases/frame_mapping.py
What: Declarative table pairing ID3 text frame IDs with Metadata fields.
Why: Extraction and injection walk the same table, so a field can never be
     read under one frame ID and written under another.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from chaptag.features.metadata.domain import (
    ALBUM,
    ALBUM_ARTIST,
    ARTIST,
    COMPOSER,
    COPYRIGHT,
    GENRE,
    GROUPING,
    PUBLISHER,
    SUBTITLE,
    TITLE,
    Metadata,
    NumberInSet,
    TextField,
    format_number_in_set,
    normalize_language_code,
    parse_number_in_set,
)
from chaptag.platform.logging import logger

from .ports import TagStore


@dataclass(frozen=True, slots=True)
class GenericMapping:
    """A plain string field stored verbatim in one text frame."""

    frame_id: str
    getter: Callable[[Metadata], str]
    setter: Callable[[Metadata, str], None]


@dataclass(frozen=True, slots=True)
class CustomMapping:
    """A field converted to and from frame text.

    ``to_text`` returning ``""`` means nothing is written; ``from_text`` is
    only called with non-empty frame text.
    """

    frame_id: str
    to_text: Callable[[Metadata], str]
    from_text: Callable[[Metadata, str], None]


FrameMapping = GenericMapping | CustomMapping


def _generic(frame_id: str, text_field: TextField) -> GenericMapping:
    return GenericMapping(frame_id=frame_id, getter=text_field.getter, setter=text_field.setter)


# Custom converters ------------------------------------------------------------


def _language_to_text(metadata: Metadata) -> str:
    return normalize_language_code(metadata.language)


def _language_from_text(metadata: Metadata, text: str) -> None:
    metadata.language = text


def _bpm_to_text(metadata: Metadata) -> str:
    if not metadata.bpm:
        return ""
    return str(metadata.bpm)


def _bpm_from_text(metadata: Metadata, text: str) -> None:
    # Some taggers store fractional BPM ("120.5"); keep the integral part.
    head = text.strip().split(".", 1)[0]
    try:
        metadata.bpm = int(head)
    except ValueError:
        logger.warning("Ignoring unparseable TBPM value: %r", text)


def _set_number_to_text(number: NumberInSet | None) -> str:
    if number is None or not number.is_present:
        return ""
    return format_number_in_set(number)


def _track_to_text(metadata: Metadata) -> str:
    return _set_number_to_text(metadata.track)


def _track_from_text(metadata: Metadata, text: str) -> None:
    number = parse_number_in_set(text)
    if number.is_present:
        metadata.track = number


def _disc_to_text(metadata: Metadata) -> str:
    return _set_number_to_text(metadata.disc)


def _disc_from_text(metadata: Metadata, text: str) -> None:
    number = parse_number_in_set(text)
    if number.is_present:
        metadata.disc = number


TEXT_FRAME_MAPPINGS: Final[tuple[FrameMapping, ...]] = (
    _generic("TIT2", TITLE),
    _generic("TIT3", SUBTITLE),
    _generic("TPE1", ARTIST),
    _generic("TALB", ALBUM),
    _generic("TPE2", ALBUM_ARTIST),
    _generic("TIT1", GROUPING),
    _generic("TCON", GENRE),
    _generic("TCOM", COMPOSER),
    _generic("TPUB", PUBLISHER),
    _generic("TCOP", COPYRIGHT),
    CustomMapping("TLAN", _language_to_text, _language_from_text),
    CustomMapping("TBPM", _bpm_to_text, _bpm_from_text),
    CustomMapping("TRCK", _track_to_text, _track_from_text),
    CustomMapping("TPOS", _disc_to_text, _disc_from_text),
)


def _frame_text(mapping: FrameMapping, metadata: Metadata) -> str:
    match mapping:
        case GenericMapping(getter=getter):
            return getter(metadata)
        case CustomMapping(to_text=to_text):
            return to_text(metadata)


def _assign(mapping: FrameMapping, metadata: Metadata, text: str) -> None:
    match mapping:
        case GenericMapping(setter=setter):
            setter(metadata, text)
        case CustomMapping(from_text=from_text):
            from_text(metadata, text)


def apply_text_frames(store: TagStore, metadata: Metadata) -> None:
    """Replace every mapped frame in ``store`` with the value from ``metadata``.

    Frames are always deleted first; only non-empty values are re-added.
    """
    for mapping in TEXT_FRAME_MAPPINGS:
        store.delete_frames(mapping.frame_id)
        text = _frame_text(mapping, metadata)
        if text:
            store.add_text_frame(mapping.frame_id, text)


def read_text_frames(store: TagStore, metadata: Metadata) -> None:
    """Populate ``metadata`` from the last frame of each mapped ID."""
    for mapping in TEXT_FRAME_MAPPINGS:
        text = store.get_text_frame(mapping.frame_id)
        if text:
            _assign(mapping, metadata, text)


__all__ = [
    "CustomMapping",
    "FrameMapping",
    "GenericMapping",
    "TEXT_FRAME_MAPPINGS",
    "apply_text_frames",
    "read_text_frames",
]
