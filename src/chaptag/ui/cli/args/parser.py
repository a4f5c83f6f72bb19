"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Final, final

from chaptag import __version__
from chaptag.config.config import Config
from chaptag.platform.logging import logger, setup_logger
from chaptag.ui.cli.args.options import ApplyArgs, CLIArgs, DumpArgs, EditArgs

EDIT_COMMAND: Final[str] = "edit"
_COMMANDS: Final[frozenset[str]] = frozenset({"dump", "apply", EDIT_COMMAND})
# Options of the editor workflow that consume the following token.
_VALUE_OPTIONS: Final[frozenset[str]] = frozenset({"--artwork"})


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="chaptag",
            description="chaptag - edit MP3 tags and chapters as YAML.",
            epilog="Running 'chaptag FILE.mp3' opens the metadata in your editor.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        dump_parser = subparsers.add_parser(
            "dump",
            help="Print the metadata of an MP3 file as YAML",
        )
        ArgumentParser._configure_common(dump_parser, confirmable=False)

        apply_parser = subparsers.add_parser(
            "apply",
            help="Apply YAML metadata read from standard input",
        )
        ArgumentParser._configure_common(apply_parser, confirmable=True)

        edit_parser = subparsers.add_parser(
            EDIT_COMMAND,
            help="Edit the metadata in $EDITOR, then apply it (default command)",
        )
        ArgumentParser._configure_common(edit_parser, confirmable=True)

        return parser

    @staticmethod
    def _configure_common(parser: argparse.ArgumentParser, *, confirmable: bool) -> None:
        """Apply the options every subcommand shares."""

        _ = parser.add_argument(
            "audio_path",
            type=str,
            help="Path to the MP3 file",
            metavar="FILE",
        )
        _ = parser.add_argument(
            "--artwork",
            type=str,
            help="Artwork path, URL, or data URI overriding the one recorded in the file",
            metavar="SRC",
        )
        if confirmable:
            _ = parser.add_argument(
                "-y",
                "--yes",
                action="store_true",
                help="Apply changes without asking for confirmation",
            )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def normalize_argv(args_list: Sequence[str]) -> list[str]:
        """Insert the ``edit`` command when the first operand is not a command.

        ``chaptag -y song.mp3`` becomes ``chaptag edit -y song.mp3``.
        """
        argv = list(args_list)
        skip_next = False
        for token in argv:
            if skip_next:
                skip_next = False
                continue
            if token in _VALUE_OPTIONS:
                skip_next = True
                continue
            if token.startswith("-"):
                continue
            if token not in _COMMANDS:
                return [EDIT_COMMAND, *argv]
            break
        return argv

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            Args: Processed command line arguments.

        Raises:
            SystemExit: On ``--help``, ``--version``, or invalid arguments.
        """
        parser = ArgumentParser.create_parser()
        argv = ArgumentParser.normalize_argv(sys.argv[1:] if args_list is None else args_list)
        parsed_args = parser.parse_args(argv)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command
        audio_path = Path(parsed_args.audio_path).expanduser()
        artwork: str | None = parsed_args.artwork or None

        if command == "dump":
            return DumpArgs(
                command="dump",
                audio_path=audio_path,
                artwork=artwork,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "apply":
            return ApplyArgs(
                command="apply",
                audio_path=audio_path,
                artwork=artwork,
                yes=bool(parsed_args.yes),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == EDIT_COMMAND:
            return EditArgs(
                command="edit",
                audio_path=audio_path,
                artwork=artwork,
                yes=bool(parsed_args.yes),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
