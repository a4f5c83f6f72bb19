"""Tests for the precision-preserving timestamp codec."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from chaptag.features.metadata.domain import Precision, Timestamp, format_timestamp, parse_timestamp
from chaptag.shared.errors import FormatError


@pytest.mark.parametrize(
    ("text", "precision"),
    [
        ("2024", Precision.YEAR),
        ("2024-05", Precision.MONTH),
        ("2024-05-17", Precision.DAY),
        ("2024-05-17T09", Precision.HOUR),
        ("2024-05-17T09:30", Precision.MINUTE),
        ("2024-05-17T09:30:15", Precision.SECOND),
    ],
)
def test_parse_detects_precision_and_formats_back(text: str, precision: Precision) -> None:
    timestamp = parse_timestamp(text)

    assert timestamp is not None
    assert timestamp.precision is precision
    assert timestamp.value.tzinfo == timezone.utc
    assert format_timestamp(timestamp) == text


def test_parse_fills_missing_components_with_start_of_period() -> None:
    timestamp = parse_timestamp("2024-05")

    assert timestamp == Timestamp(datetime(2024, 5, 1, tzinfo=timezone.utc), Precision.MONTH)


def test_empty_input_is_absent() -> None:
    assert parse_timestamp("") is None
    assert parse_timestamp("   ") is None
    assert format_timestamp(None) == ""


@pytest.mark.parametrize("text", ["'2024-05-17'", '"2024-05-17"', "  2024-05-17 "])
def test_parse_strips_quotes_and_whitespace(text: str) -> None:
    timestamp = parse_timestamp(text)

    assert timestamp is not None
    assert str(timestamp) == "2024-05-17"


@pytest.mark.parametrize(
    "text",
    ["24", "2024-5", "2024/05/17", "2024-05-17 09:30", "2024-13", "2024-02-30", "May 2024", "２０２４"],
)
def test_parse_rejects_other_layouts(text: str) -> None:
    with pytest.raises(FormatError) as excinfo:
        _ = parse_timestamp(text)

    assert excinfo.value.token == text.strip()


def test_year_text_for_legacy_frame() -> None:
    timestamp = parse_timestamp("0999-01-02")

    assert timestamp is not None
    assert timestamp.year_text == "0999"
