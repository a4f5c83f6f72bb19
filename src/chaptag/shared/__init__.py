# Where: chaptag.shared.__init__
# What: Re-export the shared error hierarchy.
# Why: Give every layer one import path for failure types.

from .errors import (
    ChaptagError,
    FormatError,
    MetadataIOError,
    NetworkError,
    UnsupportedFormatError,
)

__all__ = [
    "ChaptagError",
    "FormatError",
    "MetadataIOError",
    "NetworkError",
    "UnsupportedFormatError",
]
