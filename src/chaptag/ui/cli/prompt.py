"""Where: src/chaptag/ui/cli/prompt.py
What: Show a metadata diff and ask whether to apply it.
Why: ``apply`` reads YAML from a pipe, so the answer must come from the
     controlling terminal rather than standard input.
"""

from __future__ import annotations

import os
import sys
from typing import Final, TextIO

from rich.console import Console
from rich.prompt import Confirm
from rich.syntax import Syntax

_CONSOLE_DEVICE: Final[str] = "CON" if os.name == "nt" else "/dev/tty"


def render_diff(diff: str, console: Console) -> None:
    console.print("The following changes will be applied:")
    console.print(Syntax(diff, "diff", theme="ansi_dark", background_color="default"))


def _ask(console: Console, stream: TextIO | None) -> bool:
    return Confirm.ask("Apply these changes?", default=True, console=console, stream=stream)


def confirm_changes(diff: str, *, console: Console | None = None) -> bool:
    """Print ``diff`` and ask for confirmation, reading from the terminal.

    Raises:
        OSError: Standard input is redirected and no terminal can be opened.
    """
    out = console or Console(stderr=True, soft_wrap=True)
    render_diff(diff, out)

    if sys.stdin.isatty():
        return _ask(out, None)
    with open(_CONSOLE_DEVICE, encoding="utf-8") as tty:
        return _ask(out, tty)


__all__ = ["confirm_changes", "render_diff"]
