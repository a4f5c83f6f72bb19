"""Command line interface package."""

from chaptag.ui.cli.cli import CommandProcessor, main

process_command = CommandProcessor.process_command

__all__ = ["CommandProcessor", "main", "process_command"]
