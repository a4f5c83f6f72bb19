"""Summary: Strip one layer of quoting from hand-edited scalar text.
Why: Codecs accept values that users quoted themselves inside the YAML scalar.
"""

from __future__ import annotations

import json


def unquote(text: str) -> str:
    """Remove one matching pair of surrounding quotes from ``text``.

    Whitespace is kept: YAML has already decoded the scalar, so any spaces
    left in it are part of the value. Single quotes are stripped verbatim.
    Double-quoted text is unescaped with JSON string rules; when that fails
    the text is returned unchanged.
    """
    if len(text) <= 1:
        return text
    if text[0] == "'" and text[-1] == "'":
        return text[1:-1]
    if text[0] == '"' and text[-1] == '"':
        try:
            value = json.loads(text)
        except ValueError:
            return text
        if isinstance(value, str):
            return value
    return text


__all__ = ["unquote"]
