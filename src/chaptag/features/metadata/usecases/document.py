"""Where: src/chaptag/features/metadata/usecases/document.py
What: YAML document codec for ``Metadata`` and its canonical form.
Why: Apply compares canonical dumps, so the emitted text must be stable and
     must read back to the same record.

All scalars are loaded as strings (``BaseLoader``) so ``2024`` or ``1:30``
are never coerced; the dumper has no implicit resolvers and therefore quotes
only where YAML syntax requires it.
"""

from __future__ import annotations

from typing import Any, Final

import yaml

from chaptag.features.metadata.domain import (
    Chapter,
    TEXT_FIELDS,
    Metadata,
    TextField,
    format_chapter,
    format_number_in_set,
    format_timestamp,
    parse_chapter,
    parse_number_in_set,
    parse_timestamp,
    sort_chapters,
)
from chaptag.platform.logging import logger
from chaptag.shared.errors import FormatError

_TEXT_FIELDS_BY_KEY: Final[dict[str, TextField]] = {field.key: field for field in TEXT_FIELDS}

DOCUMENT_KEYS: Final[tuple[str, ...]] = (
    "title",
    "subtitle",
    "artist",
    "album",
    "albumArtist",
    "grouping",
    "date",
    "track",
    "disc",
    "genre",
    "comment",
    "composer",
    "publisher",
    "copyright",
    "language",
    "bpm",
    "chapters",
    "artwork",
    "lyrics",
)

# Emitted even when empty so a fresh dump shows what to fill in.
_ALWAYS_EMITTED: Final[frozenset[str]] = frozenset({"title", "artist", "album"})


class _DocumentDumper(yaml.SafeDumper):
    """Safe dumper that never needs quotes to protect a scalar's type."""

    yaml_implicit_resolvers: dict[Any, Any] = {}


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if not data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style='"')
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_DocumentDumper.add_representer(str, _represent_str)


# Dumping ----------------------------------------------------------------------


def document_fields(metadata: Metadata) -> dict[str, str | list[str]]:
    """Canonical key/value pairs of ``metadata``, in document order."""
    values: dict[str, str | list[str]] = {
        field.key: field.getter(metadata) for field in TEXT_FIELDS
    }
    values["date"] = format_timestamp(metadata.date)
    values["track"] = (
        format_number_in_set(metadata.track) if metadata.track and metadata.track.is_present else ""
    )
    values["disc"] = (
        format_number_in_set(metadata.disc) if metadata.disc and metadata.disc.is_present else ""
    )
    values["bpm"] = str(metadata.bpm) if metadata.bpm else ""
    values["chapters"] = [format_chapter(chapter) for chapter in metadata.chapters]

    fields: dict[str, str | list[str]] = {}
    for key in DOCUMENT_KEYS:
        value = values[key]
        if value or key in _ALWAYS_EMITTED:
            fields[key] = value
    return fields


def dump_document(metadata: Metadata) -> str:
    """Serialize ``metadata`` to its canonical YAML text."""
    return yaml.dump(
        document_fields(metadata),
        Dumper=_DocumentDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=float("inf"),
    )


# Loading ----------------------------------------------------------------------


def _expect_str(key: str, value: object) -> str:
    if not isinstance(value, str):
        raise FormatError(f"{key} must be a string", repr(value))
    return value


def _parse_bpm(text: str) -> int | None:
    s = text.strip()
    if not s:
        return None
    if not s.isascii() or not s.isdigit():
        raise FormatError("invalid bpm", s)
    return int(s) or None


def _parse_chapters(value: object) -> list[Chapter]:
    if value == "":
        return []
    if not isinstance(value, list):
        raise FormatError("chapters must be a list", repr(value))
    return sort_chapters([parse_chapter(_expect_str("chapter", item)) for item in value])


def _apply_field(metadata: Metadata, key: str, value: object) -> None:
    text_field = _TEXT_FIELDS_BY_KEY.get(key)
    if text_field is not None:
        text_field.setter(metadata, _expect_str(key, value))
        return
    match key:
        case "date":
            metadata.date = parse_timestamp(_expect_str(key, value))
        case "track":
            text = _expect_str(key, value)
            metadata.track = parse_number_in_set(text) if text.strip() else None
        case "disc":
            text = _expect_str(key, value)
            metadata.disc = parse_number_in_set(text) if text.strip() else None
        case "bpm":
            metadata.bpm = _parse_bpm(_expect_str(key, value))
        case "chapters":
            metadata.chapters = _parse_chapters(value)
        case _:
            logger.warning("Ignoring unknown key in metadata document: %s", key)


def load_document(text: str) -> Metadata:
    """Parse a YAML metadata document.

    Raises:
        FormatError: Invalid YAML, a non-mapping document, a wrongly typed
            value, or a malformed date, bpm, or chapter.
    """
    try:
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise FormatError("invalid YAML document", str(exc)) from exc

    if data is None:
        raise FormatError("empty metadata document", text)
    if not isinstance(data, dict):
        raise FormatError("metadata document must be a mapping", repr(data)[:80])

    metadata = Metadata()
    for key, value in data.items():
        _apply_field(metadata, str(key), value)
    return metadata


def canonicalize(text: str) -> str:
    """Round-trip ``text`` through the codec into canonical form."""
    return dump_document(load_document(text))


__all__ = [
    "DOCUMENT_KEYS",
    "canonicalize",
    "document_fields",
    "dump_document",
    "load_document",
]
