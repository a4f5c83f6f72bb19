"""Tests for the metadata document diff."""

from __future__ import annotations

from chaptag.features.metadata.usecases.diff import diff_documents


def test_diff_marks_changed_lines() -> None:
    diff = diff_documents("title: Old\nartist: Host\n", "title: New\nartist: Host\n", label="ep.mp3")

    assert "--- ep.mp3 (current)" in diff
    assert "+++ ep.mp3 (new)" in diff
    assert "-title: Old\n" in diff
    assert "+title: New\n" in diff
    assert " artist: Host\n" in diff


def test_equal_documents_have_empty_diff() -> None:
    assert diff_documents("title: x\n", "title: x\n") == ""


def test_missing_trailing_newline_still_ends_lines() -> None:
    diff = diff_documents("a: 1", "a: 2")

    assert diff.endswith("+a: 2\n")
