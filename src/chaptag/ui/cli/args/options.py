"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class DumpArgs:
    """Command line arguments for the ``dump`` subcommand."""

    command: Literal["dump"]
    audio_path: Path
    artwork: str | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ApplyArgs:
    """Command line arguments for the ``apply`` subcommand (YAML on stdin)."""

    command: Literal["apply"]
    audio_path: Path
    artwork: str | None
    yes: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class EditArgs:
    """Command line arguments for the editor workflow (``chaptag FILE``)."""

    command: Literal["edit"]
    audio_path: Path
    artwork: str | None
    yes: bool
    verbose: bool
    quiet: bool


CLIArgs = DumpArgs | ApplyArgs | EditArgs

__all__ = ["ApplyArgs", "CLIArgs", "DumpArgs", "EditArgs"]
