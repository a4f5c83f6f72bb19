"""Where: src/chaptag/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
"""

from __future__ import annotations

from chaptag import __version__
from chaptag.config.config import HTTP_TIMEOUT_DEFAULT, config as app_config

# Application identity -------------------------------------------------------

APP_NAME: str = "chaptag"
APP_VERSION: str = __version__
CONTACT: str = app_config.user_agent_contact or ""

# Artwork --------------------------------------------------------------------

# Description of the TXXX frame that records where embedded artwork came from.
SOURCE_FRAME_DESC: str = "CHAPTAG_SOURCE"

_timeout = app_config.http_timeout
HTTP_TIMEOUT: float = (
    float(_timeout)
    if isinstance(_timeout, (int, float)) and not isinstance(_timeout, bool) and _timeout > 0
    else HTTP_TIMEOUT_DEFAULT
)

# Editing --------------------------------------------------------------------

EDITOR: str | None = app_config.editor or None


__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "CONTACT",
    "EDITOR",
    "HTTP_TIMEOUT",
    "SOURCE_FRAME_DESC",
]
