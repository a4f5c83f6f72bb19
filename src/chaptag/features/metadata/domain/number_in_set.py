"""Summary: Position-in-set value (track 3 of 10) and its lenient text codec.
Why: TRCK/TPOS are hand-edited often; a typo must not abort a whole document.
"""

from __future__ import annotations

from dataclasses import dataclass

from .quoting import unquote


@dataclass(frozen=True, slots=True)
class NumberInSet:
    """A ``current/total`` pair; ``total == 0`` means the total is unknown."""

    current: int
    total: int = 0

    @property
    def is_present(self) -> bool:
        return self.current > 0

    def __str__(self) -> str:
        return format_number_in_set(self)


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def parse_number_in_set(text: str) -> NumberInSet:
    """Parse ``"3"`` or ``"3/10"``; malformed parts degrade to 0."""
    current_text, _, total_text = unquote(text.strip()).partition("/")
    return NumberInSet(
        current=_to_int(current_text) if current_text else 0,
        total=_to_int(total_text) if total_text else 0,
    )


def format_number_in_set(number: NumberInSet) -> str:
    if number.total > 0:
        return f"{number.current}/{number.total}"
    return f"{number.current}"


__all__ = ["NumberInSet", "format_number_in_set", "parse_number_in_set"]
