"""Where: src/chaptag/features/metadata/domain/chapter.py
What: Chapter marker value type and its ``[H:]M:SS[.mmm] Title`` codec.
Why: Chapters are edited as one line each; start times keep millisecond
     resolution and end times are derived, never edited.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import timedelta

from chaptag.shared.errors import FormatError

from .quoting import unquote

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class Chapter:
    """A chapter starting at ``start`` (millisecond resolution)."""

    start: timedelta
    title: str

    @property
    def start_ms(self) -> int:
        return self.start // timedelta(milliseconds=1)

    def __str__(self) -> str:
        return format_chapter(self)


def format_chapter(chapter: Chapter) -> str:
    """Render a chapter as ``[H:]M:SS[.mmm] Title``.

    Hours appear only when non-zero and milliseconds only when non-zero.
    """
    ms = chapter.start_ms
    hours, ms = divmod(ms, _MS_PER_HOUR)
    minutes, ms = divmod(ms, _MS_PER_MINUTE)
    seconds, millis = divmod(ms, _MS_PER_SECOND)

    if hours > 0:
        time_text = f"{hours}:{minutes:02d}:{seconds:02d}"
    else:
        time_text = f"{minutes}:{seconds:02d}"
    if millis:
        time_text += f".{millis:03d}"
    return f"{time_text} {chapter.title}"


def _parse_component(token: str, name: str) -> int:
    if not _DIGITS.fullmatch(token):
        raise FormatError(f"invalid {name}", token)
    return int(token)


def parse_chapter(text: str) -> Chapter:
    """Parse one ``[H:]M:SS[.fraction] Title`` line.

    The fraction is right-padded or truncated to three digits, never rounded.
    Everything after the first space is the title, verbatim; it may be empty.

    Raises:
        FormatError: Missing title, wrong number of time segments, or a
            non-numeric component.
    """
    s = unquote(text)
    time_text, sep, title = s.partition(" ")
    if not sep:
        raise FormatError("invalid chapter format", s)

    segments = time_text.split(":")
    if len(segments) == 3:
        hours = _parse_component(segments[0], "hours")
        minutes = _parse_component(segments[1], "minutes")
    elif len(segments) == 2:
        hours = 0
        minutes = _parse_component(segments[0], "minutes")
    else:
        raise FormatError("invalid time format", time_text)

    seconds_text, _, fraction = segments[-1].partition(".")
    seconds = _parse_component(seconds_text, "seconds")
    millis = 0
    if fraction:
        _ = _parse_component(fraction, "milliseconds")
        millis = int(fraction[:3].ljust(3, "0"))

    total_ms = (
        hours * _MS_PER_HOUR
        + minutes * _MS_PER_MINUTE
        + seconds * _MS_PER_SECOND
        + millis
    )
    return Chapter(start=timedelta(milliseconds=total_ms), title=title)


def sort_chapters(chapters: Sequence[Chapter]) -> list[Chapter]:
    """Order chapters by start time, keeping ties in their given order."""
    return sorted(chapters, key=lambda chapter: chapter.start)


def chapter_end_times(chapters: Sequence[Chapter], duration: timedelta) -> list[timedelta]:
    """End of each chapter: the next chapter's start, or ``duration`` for the last."""
    ends = [chapter.start for chapter in chapters[1:]]
    if chapters:
        ends.append(duration)
    return ends


__all__ = [
    "Chapter",
    "chapter_end_times",
    "format_chapter",
    "parse_chapter",
    "sort_chapters",
]
