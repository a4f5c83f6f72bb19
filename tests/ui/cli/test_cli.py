"""Tests for CLI command dispatch and exit codes."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from chaptag.shared.errors import FormatError
from chaptag.ui.cli import CommandProcessor, process_command


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, mocker: MockerFixture) -> None:
    monkeypatch.setenv("CHAPTAG_CONFIG", str(tmp_path / "config.toml"))
    _ = mocker.patch("chaptag.ui.cli.args.parser.setup_logger")


def test_dump_writes_yaml_to_stdout(mp3_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    process_command(["dump", str(mp3_file)])

    assert capsys.readouterr().out == 'title: ""\nartist: ""\nalbum: ""\n'


def test_apply_reads_stdin(mp3_file: Path, mocker: MockerFixture, capsys: pytest.CaptureFixture[str]) -> None:
    _ = mocker.patch("sys.stdin", io.StringIO("title: From stdin\n"))

    process_command(["apply", "-y", str(mp3_file)])
    process_command(["dump", str(mp3_file)])

    assert "title: From stdin\n" in capsys.readouterr().out


def test_default_command_runs_editor_workflow(mp3_file: Path, mocker: MockerFixture) -> None:
    mock_edit = mocker.patch("chaptag.ui.cli.cli.edit_metadata")

    process_command(["-y", str(mp3_file)])

    mock_edit.assert_called_once()
    assert mock_edit.call_args.kwargs["yes"] is True


def test_service_gets_artwork_override(mp3_file: Path, mocker: MockerFixture) -> None:
    mock_service = mocker.patch("chaptag.ui.cli.cli.MetadataService")

    process_command(["dump", "--artwork", "cover.jpg", str(mp3_file)])

    _, kwargs = mock_service.call_args
    assert kwargs["artwork"] == "cover.jpg"
    mock_service.return_value.dump.assert_called_once()


def test_missing_file_exits_with_error(tmp_path: Path, mocker: MockerFixture) -> None:
    mock_logger = mocker.patch("chaptag.ui.cli.cli.logger")

    with pytest.raises(SystemExit) as excinfo:
        process_command(["dump", str(tmp_path / "missing.mp3")])

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once()


def test_format_error_exits_with_error(mp3_file: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch("sys.stdin", io.StringIO("chapters:\n- bad\n"))
    mock_logger = mocker.patch("chaptag.ui.cli.cli.logger")

    with pytest.raises(SystemExit) as excinfo:
        process_command(["apply", "-y", str(mp3_file)])

    assert excinfo.value.code == 1
    assert isinstance(mock_logger.error.call_args.args[1], FormatError)


def test_keyboard_interrupt_exits_130(mp3_file: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch.object(CommandProcessor, "build_service", side_effect=KeyboardInterrupt)

    with pytest.raises(SystemExit) as excinfo:
        process_command(["dump", str(mp3_file)])

    assert excinfo.value.code == 130
