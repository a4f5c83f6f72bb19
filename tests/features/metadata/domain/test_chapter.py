"""Tests for the chapter line codec and chapter ordering helpers."""

from __future__ import annotations

from datetime import timedelta

import pytest

from chaptag.features.metadata.domain import (
    Chapter,
    chapter_end_times,
    format_chapter,
    parse_chapter,
    sort_chapters,
)
from chaptag.shared.errors import FormatError


def _ms(value: int) -> timedelta:
    return timedelta(milliseconds=value)


@pytest.mark.parametrize(
    ("text", "start_ms", "title"),
    [
        ("0:00 Intro", 0, "Intro"),
        ("1:30.5 Body", 90_500, "Body"),
        ("1:30.12 Body", 90_120, "Body"),
        ("1:30.1234 Body", 90_123, "Body"),
        ("1:02:03 Late", 3_723_000, "Late"),
        ("75:00 Long minutes", 4_500_000, "Long minutes"),
        ("0:05 Title: With Colon", 5_000, "Title: With Colon"),
        ("'0:05 Quoted'", 5_000, "Quoted"),
        ("0:01 ", 1_000, ""),
        ("0:00 Intro ", 0, "Intro "),
        ("0:00  Indented", 0, " Indented"),
    ],
)
def test_parse_chapter(text: str, start_ms: int, title: str) -> None:
    chapter = parse_chapter(text)

    assert chapter.start_ms == start_ms
    assert chapter.title == title


@pytest.mark.parametrize(
    ("chapter", "expected"),
    [
        (Chapter(_ms(0), "Intro"), "0:00 Intro"),
        (Chapter(_ms(90_500), "Body"), "1:30.500 Body"),
        (Chapter(_ms(3_723_004), "Late"), "1:02:03.004 Late"),
        (Chapter(_ms(600_000), "Ten"), "10:00 Ten"),
    ],
)
def test_format_chapter(chapter: Chapter, expected: str) -> None:
    assert format_chapter(chapter) == expected
    assert parse_chapter(expected) == chapter


@pytest.mark.parametrize(
    ("text", "token"),
    [
        ("0:00", "0:00"),
        ("5 Intro", "5"),
        ("1:2:3:4 Intro", "1:2:3:4"),
        ("a:00 Intro", "a"),
        ("0:0x Intro", "0x"),
        ("0:00.5a Intro", "5a"),
        ("-1:00 Intro", "-1"),
    ],
)
def test_parse_rejects_malformed_lines(text: str, token: str) -> None:
    with pytest.raises(FormatError) as excinfo:
        _ = parse_chapter(text)

    assert excinfo.value.token == token


def test_sort_is_stable_for_equal_starts() -> None:
    chapters = [
        Chapter(_ms(2_000), "b"),
        Chapter(_ms(1_000), "a1"),
        Chapter(_ms(1_000), "a2"),
    ]

    assert [c.title for c in sort_chapters(chapters)] == ["a1", "a2", "b"]


def test_end_times_use_next_start_then_duration() -> None:
    chapters = [
        Chapter(_ms(0), "Intro"),
        Chapter(_ms(90_500), "Body"),
        Chapter(_ms(180_000), "Outro"),
    ]

    ends = chapter_end_times(chapters, _ms(240_000))

    assert ends == [_ms(90_500), _ms(180_000), _ms(240_000)]
    assert chapter_end_times([], _ms(1)) == []
