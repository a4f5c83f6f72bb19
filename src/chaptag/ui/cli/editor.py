"""Where: src/chaptag/ui/cli/editor.py
What: Dump metadata to a temporary YAML file, open it in the user's editor,
      then apply the edited document.
Why: Editing in place is the default workflow of ``chaptag FILE.mp3``.
"""

from __future__ import annotations

import os
import shlex
import subprocess
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from chaptag.application.services import ApplyOutcome, MetadataService
from chaptag.config.settings import EDITOR
from chaptag.platform.logging import logger
from chaptag.shared.errors import ChaptagError

_EDITOR_ENV_VARS: Final[tuple[str, ...]] = ("CHAPTAG_EDITOR", "EDITOR", "VISUAL")


class EditorError(ChaptagError):
    """The editor could not be started or exited with a failure status."""


def resolve_editor(
    env: Mapping[str, str] | None = None,
    configured: str | None = EDITOR,
) -> str:
    """Editor command: environment first, then configuration, then a platform default."""
    environment = os.environ if env is None else env
    for name in _EDITOR_ENV_VARS:
        value = environment.get(name, "").strip()
        if value:
            return value
    if configured and configured.strip():
        return configured.strip()
    return "notepad" if os.name == "nt" else "vi"


def editor_argv(command: str, path: Path) -> list[str]:
    """Split ``command`` shell-style and append ``path``."""
    argv = shlex.split(command, posix=os.name != "nt")
    if not argv:
        raise EditorError("editor command is empty")
    return [*argv, str(path)]


def run_editor(path: Path, command: str | None = None) -> None:
    argv = editor_argv(command or resolve_editor(), path)
    logger.debug("Launching editor: %s", argv)
    try:
        result = subprocess.run(argv, check=False)
    except OSError as exc:
        raise EditorError(f"failed to start editor {argv[0]!r}: {exc}") from exc
    if result.returncode != 0:
        raise EditorError(f"editor command failed with exit status {result.returncode}")


def edit_metadata(
    service: MetadataService,
    *,
    yes: bool = False,
    command: str | None = None,
) -> ApplyOutcome:
    """Run the dump, edit, apply cycle; the temporary file is always removed."""
    fd, name = tempfile.mkstemp(prefix="chaptag-", suffix=".yaml")
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            service.dump(handle)
        run_editor(path, command)
        edited = path.read_text(encoding="utf-8")
        return service.apply(edited, yes=yes)
    finally:
        path.unlink(missing_ok=True)


__all__ = ["EditorError", "edit_metadata", "editor_argv", "resolve_editor", "run_editor"]
