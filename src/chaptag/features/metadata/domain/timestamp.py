"""Where: src/chaptag/features/metadata/domain/timestamp.py
What: Timestamp value type with year-to-second precision and its text codec.
Why: ID3v2.4 TDRC dates carry only as many components as were known, and a
     round trip must never add or drop a component.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from chaptag.shared.errors import FormatError

from .quoting import unquote


class Precision(Enum):
    """Granularity at which a timestamp was specified."""

    YEAR = 1
    MONTH = 2
    DAY = 3
    HOUR = 4
    MINUTE = 5
    SECOND = 6


# Most precise first: the first layout that matches fixes the precision.
_LAYOUTS: tuple[tuple[Precision, re.Pattern[str]], ...] = (
    (Precision.SECOND, re.compile(r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})", re.ASCII)),
    (Precision.MINUTE, re.compile(r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2})", re.ASCII)),
    (Precision.HOUR, re.compile(r"(\d{4})-(\d{2})-(\d{2})T(\d{2})", re.ASCII)),
    (Precision.DAY, re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)),
    (Precision.MONTH, re.compile(r"(\d{4})-(\d{2})", re.ASCII)),
    (Precision.YEAR, re.compile(r"(\d{4})", re.ASCII)),
)

_FORMATS: dict[Precision, str] = {
    Precision.YEAR: "{:04d}",
    Precision.MONTH: "{:04d}-{:02d}",
    Precision.DAY: "{:04d}-{:02d}-{:02d}",
    Precision.HOUR: "{:04d}-{:02d}-{:02d}T{:02d}",
    Precision.MINUTE: "{:04d}-{:02d}-{:02d}T{:02d}:{:02d}",
    Precision.SECOND: "{:04d}-{:02d}-{:02d}T{:02d}:{:02d}:{:02d}",
}


@dataclass(frozen=True, slots=True)
class Timestamp:
    """A UTC point in time plus the precision it was written with."""

    value: datetime
    precision: Precision

    @property
    def year_text(self) -> str:
        """Four-digit year, as stored in the legacy TYER frame."""
        return f"{self.value.year:04d}"

    def __str__(self) -> str:
        return format_timestamp(self)


def parse_timestamp(text: str) -> Timestamp | None:
    """Parse ``YYYY[-MM[-DD[THH[:MM[:SS]]]]]`` into a timestamp.

    Returns:
        The parsed timestamp, or ``None`` for empty input.

    Raises:
        FormatError: No layout matches ``text``.
    """
    s = unquote(text.strip())
    if not s:
        return None

    for precision, pattern in _LAYOUTS:
        match = pattern.fullmatch(s)
        if match is None:
            continue
        parts = [int(group) for group in match.groups()]
        parts.extend([1] * (3 - len(parts)))
        try:
            value = datetime(*parts, tzinfo=timezone.utc)
        except ValueError:
            continue
        return Timestamp(value=value, precision=precision)

    raise FormatError("invalid timestamp format", s)


def format_timestamp(timestamp: Timestamp | None) -> str:
    """Render ``timestamp`` with exactly the components its precision implies."""
    if timestamp is None:
        return ""
    v = timestamp.value
    components = (v.year, v.month, v.day, v.hour, v.minute, v.second)
    return _FORMATS[timestamp.precision].format(*components[: timestamp.precision.value])


__all__ = ["Precision", "Timestamp", "format_timestamp", "parse_timestamp"]
