"""Command line argument handling package."""

from chaptag.ui.cli.args.parser import ArgumentParser
from chaptag.ui.cli.args.options import ApplyArgs, CLIArgs, DumpArgs, EditArgs

__all__ = ["ApplyArgs", "ArgumentParser", "CLIArgs", "DumpArgs", "EditArgs"]
