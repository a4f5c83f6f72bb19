# Where: chaptag.features.metadata.domain.__init__
# What: Expose metadata value types and their text codecs.
# Why: Pipelines and tests import codecs from one place.

from .chapter import Chapter, chapter_end_times, format_chapter, parse_chapter, sort_chapters
from .language import normalize_language_code
from .metadata import (
    ALBUM,
    ALBUM_ARTIST,
    ARTIST,
    COMPOSER,
    COPYRIGHT,
    GENRE,
    GROUPING,
    PUBLISHER,
    SUBTITLE,
    TEXT_FIELDS,
    TITLE,
    Metadata,
    TextField,
)
from .number_in_set import NumberInSet, format_number_in_set, parse_number_in_set
from .quoting import unquote
from .timestamp import Precision, Timestamp, format_timestamp, parse_timestamp

__all__ = [
    "ALBUM",
    "ALBUM_ARTIST",
    "ARTIST",
    "COMPOSER",
    "COPYRIGHT",
    "Chapter",
    "GENRE",
    "GROUPING",
    "PUBLISHER",
    "SUBTITLE",
    "TEXT_FIELDS",
    "TITLE",
    "TextField",
    "Metadata",
    "NumberInSet",
    "Precision",
    "Timestamp",
    "chapter_end_times",
    "format_chapter",
    "format_number_in_set",
    "format_timestamp",
    "normalize_language_code",
    "parse_chapter",
    "parse_number_in_set",
    "parse_timestamp",
    "sort_chapters",
    "unquote",
]
