"""Command line interface for chaptag."""

import sys
from typing import final

from chaptag.application.services import MetadataService
from chaptag.shared.errors import ChaptagError
from chaptag.platform.logging import logger
from chaptag.ui.cli.args import ArgumentParser
from chaptag.ui.cli.args.options import ApplyArgs, CLIArgs, DumpArgs, EditArgs
from chaptag.ui.cli.editor import edit_metadata
from chaptag.ui.cli.prompt import confirm_changes


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_service(args: CLIArgs) -> MetadataService:
        """Create the metadata service for the parsed arguments."""
        return MetadataService(
            args.audio_path,
            artwork=args.artwork,
            confirm=confirm_changes,
        )

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            service = CommandProcessor.build_service(args)

            if isinstance(args, DumpArgs):
                service.dump(sys.stdout)
                return

            if isinstance(args, ApplyArgs):
                _ = service.apply(sys.stdin.read(), yes=args.yes)
                return

            assert isinstance(args, EditArgs)
            _ = edit_metadata(service, yes=args.yes)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except ChaptagError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor.process_command``.
    """
    CommandProcessor.process_command()
    return 0
