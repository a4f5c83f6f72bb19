"""Tests for configuration path resolution helpers."""

from pathlib import Path

from pytest_mock import MockerFixture

from chaptag.config.paths import default_config_path, resolve_overridable_path


def test_environment_override(tmp_path: Path) -> None:
    target = tmp_path / "custom.toml"

    assert default_config_path({"CHAPTAG_CONFIG": str(target)}) == target.resolve()


def test_platform_default(tmp_path: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch("chaptag.config.paths.user_config_path", return_value=tmp_path / "chaptag")

    assert default_config_path({}) == (tmp_path / "chaptag" / "config.toml").resolve()


def test_blank_environment_value_falls_back(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"VAR": "   "},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "default.toml").resolve()


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit.toml",
        env={"VAR": str(tmp_path / "env.toml")},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "explicit.toml").resolve()
