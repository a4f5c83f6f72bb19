"""Where: src/chaptag/shared/errors.py
What: Exception hierarchy shared by codecs, pipelines, and adapters.
Why: Let the CLI report failures uniformly while callers can still catch by kind.
"""

from __future__ import annotations


class ChaptagError(Exception):
    """Base class for every error raised deliberately by chaptag."""


class FormatError(ChaptagError, ValueError):
    """Malformed timestamp, chapter, number, or data URI text.

    Attributes:
        token: The offending substring.
    """

    token: str

    def __init__(self, message: str, token: str) -> None:
        super().__init__(f"{message}: {token!r}")
        self.token = token


class MetadataIOError(ChaptagError, OSError):
    """File open/read/write failure, including a missing input file."""


class NetworkError(ChaptagError):
    """Artwork download failed (timeout, transport error, non-2xx status)."""


class UnsupportedFormatError(ChaptagError):
    """Image type cannot be determined or is not in the allow-list."""


__all__ = [
    "ChaptagError",
    "FormatError",
    "MetadataIOError",
    "NetworkError",
    "UnsupportedFormatError",
]
