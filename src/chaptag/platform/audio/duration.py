"""Summary: Compute MP3 playing time with mutagen's MPEG stream reader.
Why: The last chapter ends where the audio ends, which no tag frame records.
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

from mutagen import MutagenError
from mutagen.mp3 import MP3

from chaptag.platform.logging import logger
from chaptag.shared.errors import MetadataIOError


class MutagenDurationProvider:
    """``DurationProvider`` reading the MPEG frames of an MP3 file."""

    def duration(self, path: Path) -> timedelta:
        """Return the playing time of ``path``.

        Raises:
            MetadataIOError: The file cannot be read or holds no MPEG frames.
        """
        try:
            audio = MP3(path)
        except (MutagenError, OSError) as exc:
            raise MetadataIOError(f"failed to get audio duration of {path}: {exc}") from exc
        length = timedelta(seconds=audio.info.length)
        logger.debug("Audio duration of %s: %s", path, length)
        return length


DEFAULT_DURATION_PROVIDER = MutagenDurationProvider()


__all__ = ["DEFAULT_DURATION_PROVIDER", "MutagenDurationProvider"]
