"""Tests for the text frame mapping table."""

from __future__ import annotations

from typing import Any

from chaptag.features.metadata.domain import Metadata, NumberInSet
from chaptag.features.metadata.usecases.frame_mapping import (
    TEXT_FRAME_MAPPINGS,
    CustomMapping,
    GenericMapping,
    apply_text_frames,
    read_text_frames,
)


def test_table_covers_each_frame_once() -> None:
    frame_ids = [mapping.frame_id for mapping in TEXT_FRAME_MAPPINGS]

    assert len(frame_ids) == len(set(frame_ids))
    assert set(frame_ids) == {
        "TIT2", "TIT3", "TPE1", "TALB", "TPE2", "TIT1", "TCON",
        "TCOM", "TPUB", "TCOP", "TLAN", "TBPM", "TRCK", "TPOS",
    }
    custom = {m.frame_id for m in TEXT_FRAME_MAPPINGS if isinstance(m, CustomMapping)}
    assert custom == {"TLAN", "TBPM", "TRCK", "TPOS"}
    assert all(isinstance(m, GenericMapping | CustomMapping) for m in TEXT_FRAME_MAPPINGS)


def test_apply_writes_only_non_empty_values(memory_store: Any) -> None:
    metadata = Metadata(
        title="Episode 1",
        artist="Host",
        language="en",
        bpm=0,
        track=NumberInSet(3, 10),
        disc=NumberInSet(0, 2),
    )

    apply_text_frames(memory_store, metadata)

    assert memory_store.text == {
        "TIT2": ["Episode 1"],
        "TPE1": ["Host"],
        "TLAN": ["eng"],
        "TRCK": ["3/10"],
    }


def test_apply_replaces_stale_and_duplicate_frames(memory_store: Any) -> None:
    memory_store.text = {"TIT2": ["old", "older"], "TALB": ["gone"], "TBPM": ["99"]}

    apply_text_frames(memory_store, Metadata(title="new", bpm=120))

    assert memory_store.text == {"TIT2": ["new"], "TBPM": ["120"]}


def test_read_uses_last_frame_and_reverse_converters(memory_store: Any) -> None:
    memory_store.text = {
        "TIT2": ["first", "last"],
        "TPE2": ["Band"],
        "TBPM": ["128.6"],
        "TRCK": ["7"],
        "TPOS": ["0/3"],
        "TLAN": ["jpn"],
    }
    metadata = Metadata()

    read_text_frames(memory_store, metadata)

    assert metadata.title == "last"
    assert metadata.album_artist == "Band"
    assert metadata.bpm == 128
    assert metadata.track == NumberInSet(7, 0)
    assert metadata.disc is None
    assert metadata.language == "jpn"


def test_read_ignores_unparseable_bpm(memory_store: Any) -> None:
    memory_store.text = {"TBPM": ["fast"]}
    metadata = Metadata()

    read_text_frames(memory_store, metadata)

    assert metadata.bpm is None
