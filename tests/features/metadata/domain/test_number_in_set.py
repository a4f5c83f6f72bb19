"""Tests for the lenient track/disc number codec."""

from __future__ import annotations

import pytest

from chaptag.features.metadata.domain import NumberInSet, format_number_in_set, parse_number_in_set


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("3", NumberInSet(3, 0)),
        ("3/10", NumberInSet(3, 10)),
        ("'3/10'", NumberInSet(3, 10)),
        ("x/10", NumberInSet(0, 10)),
        ("3/x", NumberInSet(3, 0)),
        ("", NumberInSet(0, 0)),
        ("/", NumberInSet(0, 0)),
        ("1/2/3", NumberInSet(1, 0)),
    ],
)
def test_parse_never_raises(text: str, expected: NumberInSet) -> None:
    assert parse_number_in_set(text) == expected


def test_format_omits_unknown_total() -> None:
    assert format_number_in_set(NumberInSet(3)) == "3"
    assert format_number_in_set(NumberInSet(3, 10)) == "3/10"
    assert str(NumberInSet(1, 2)) == "1/2"


def test_presence_requires_positive_current() -> None:
    assert NumberInSet(1).is_present
    assert not NumberInSet(0, 10).is_present
