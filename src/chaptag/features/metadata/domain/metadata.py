# Where: chaptag.features.metadata.domain.metadata
# What: Canonical Metadata dataclass for one MP3 file and accessor pairs for
#       its free-text fields.
# Why: Both pipelines and the YAML document codec share one record type.

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final

from .chapter import Chapter
from .number_in_set import NumberInSet
from .timestamp import Timestamp


@dataclass
class Metadata:
    """Metadata of an MP3 file.

    Free-text fields use ``""`` for absent; ``bpm`` of ``None`` or ``0`` is
    absent; ``track``/``disc`` are only written when ``current > 0``.
    """

    title: str = ""  # TIT2
    subtitle: str = ""  # TIT3
    artist: str = ""  # TPE1
    album: str = ""  # TALB
    album_artist: str = ""  # TPE2
    grouping: str = ""  # TIT1
    date: Timestamp | None = None  # TDRC, TYER fallback
    track: NumberInSet | None = None  # TRCK
    disc: NumberInSet | None = None  # TPOS
    genre: str = ""  # TCON
    comment: str = ""  # COMM
    composer: str = ""  # TCOM
    publisher: str = ""  # TPUB
    copyright: str = ""  # TCOP
    language: str = ""  # TLAN
    bpm: int | None = None  # TBPM
    chapters: list[Chapter] = field(default_factory=list)  # CHAP
    artwork: str = ""  # APIC, source in TXXX
    lyrics: str = ""  # USLT


@dataclass(frozen=True, slots=True)
class TextField:
    """A free-text field of ``Metadata`` with its YAML key and accessors."""

    key: str
    getter: Callable[[Metadata], str]
    setter: Callable[[Metadata, str], None]


def _set_title(metadata: Metadata, value: str) -> None:
    metadata.title = value


def _set_subtitle(metadata: Metadata, value: str) -> None:
    metadata.subtitle = value


def _set_artist(metadata: Metadata, value: str) -> None:
    metadata.artist = value


def _set_album(metadata: Metadata, value: str) -> None:
    metadata.album = value


def _set_album_artist(metadata: Metadata, value: str) -> None:
    metadata.album_artist = value


def _set_grouping(metadata: Metadata, value: str) -> None:
    metadata.grouping = value


def _set_genre(metadata: Metadata, value: str) -> None:
    metadata.genre = value


def _set_comment(metadata: Metadata, value: str) -> None:
    metadata.comment = value


def _set_composer(metadata: Metadata, value: str) -> None:
    metadata.composer = value


def _set_publisher(metadata: Metadata, value: str) -> None:
    metadata.publisher = value


def _set_copyright(metadata: Metadata, value: str) -> None:
    metadata.copyright = value


def _set_language(metadata: Metadata, value: str) -> None:
    metadata.language = value


def _set_artwork(metadata: Metadata, value: str) -> None:
    metadata.artwork = value


def _set_lyrics(metadata: Metadata, value: str) -> None:
    metadata.lyrics = value


TITLE: Final = TextField("title", lambda m: m.title, _set_title)
SUBTITLE: Final = TextField("subtitle", lambda m: m.subtitle, _set_subtitle)
ARTIST: Final = TextField("artist", lambda m: m.artist, _set_artist)
ALBUM: Final = TextField("album", lambda m: m.album, _set_album)
ALBUM_ARTIST: Final = TextField("albumArtist", lambda m: m.album_artist, _set_album_artist)
GROUPING: Final = TextField("grouping", lambda m: m.grouping, _set_grouping)
GENRE: Final = TextField("genre", lambda m: m.genre, _set_genre)
COMMENT: Final = TextField("comment", lambda m: m.comment, _set_comment)
COMPOSER: Final = TextField("composer", lambda m: m.composer, _set_composer)
PUBLISHER: Final = TextField("publisher", lambda m: m.publisher, _set_publisher)
COPYRIGHT: Final = TextField("copyright", lambda m: m.copyright, _set_copyright)
LANGUAGE: Final = TextField("language", lambda m: m.language, _set_language)
ARTWORK: Final = TextField("artwork", lambda m: m.artwork, _set_artwork)
LYRICS: Final = TextField("lyrics", lambda m: m.lyrics, _set_lyrics)

TEXT_FIELDS: Final[tuple[TextField, ...]] = (
    TITLE,
    SUBTITLE,
    ARTIST,
    ALBUM,
    ALBUM_ARTIST,
    GROUPING,
    GENRE,
    COMMENT,
    COMPOSER,
    PUBLISHER,
    COPYRIGHT,
    LANGUAGE,
    ARTWORK,
    LYRICS,
)


__all__ = [
    "ALBUM",
    "ALBUM_ARTIST",
    "ARTIST",
    "ARTWORK",
    "COMMENT",
    "COMPOSER",
    "COPYRIGHT",
    "GENRE",
    "GROUPING",
    "LANGUAGE",
    "LYRICS",
    "Metadata",
    "PUBLISHER",
    "SUBTITLE",
    "TEXT_FIELDS",
    "TITLE",
    "TextField",
]
