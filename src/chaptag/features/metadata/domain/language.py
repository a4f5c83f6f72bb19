"""Summary: Canonicalise free-text language values for the TLAN frame.
Why: ID3v2 expects ISO 639-2 codes while users tend to type ``en`` or ``EN``.
"""

from __future__ import annotations

import re
from typing import Final

# ISO 639-1 -> ISO 639-2/B for languages commonly found in podcast and music tags.
_ISO_639_1_TO_2: Final[dict[str, str]] = {
    "ar": "ara",
    "cs": "cze",
    "da": "dan",
    "de": "ger",
    "el": "gre",
    "en": "eng",
    "es": "spa",
    "fa": "per",
    "fi": "fin",
    "fr": "fre",
    "he": "heb",
    "hi": "hin",
    "hu": "hun",
    "id": "ind",
    "it": "ita",
    "ja": "jpn",
    "ko": "kor",
    "nl": "dut",
    "no": "nor",
    "pl": "pol",
    "pt": "por",
    "ro": "rum",
    "ru": "rus",
    "sv": "swe",
    "th": "tha",
    "tr": "tur",
    "uk": "ukr",
    "vi": "vie",
    "zh": "chi",
}

_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z]{2,3}")


def normalize_language_code(value: str) -> str:
    """Return the ISO 639-2 form of ``value`` when it looks like a language code.

    Two-letter codes in the table map to their three-letter form, other
    two- or three-letter codes are lowercased, and anything else (for example
    ``"English"``) is only trimmed.
    """
    stripped = value.strip()
    if not _CODE_PATTERN.fullmatch(stripped):
        return stripped
    lowered = stripped.lower()
    return _ISO_639_1_TO_2.get(lowered, lowered)


__all__ = ["normalize_language_code"]
