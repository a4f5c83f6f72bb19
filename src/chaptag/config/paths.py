"""Shared path utilities for configuration locations.

Policy: ``$CHAPTAG_CONFIG`` when set, else ``<user config dir>/config.toml``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

from platformdirs import user_config_path

APP_DIR_NAME: Final[str] = "chaptag"
_ENV_CONFIG_FILE: Final[str] = "CHAPTAG_CONFIG"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path of the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: user_config_path(APP_DIR_NAME) / "config.toml",
    )


__all__ = [
    "APP_DIR_NAME",
    "default_config_path",
    "resolve_overridable_path",
]
