"""Where: src/chaptag/platform/http/user_agent.py
What: Build the User-Agent string sent with artwork downloads.
Why: Image hosts throttle anonymous clients; identify the tool consistently.
"""

from __future__ import annotations

import os

from chaptag.config.settings import APP_NAME, APP_VERSION, CONTACT


def format_user_agent(app_name: str, app_version: str, contact: str) -> str:
    """Return ``App/Version (+contact)`` when contact information is available."""

    stripped = contact.strip()
    if stripped:
        return f"{app_name}/{app_version} (+{stripped})"
    return f"{app_name}/{app_version}"


def resolve_user_agent() -> str:
    """Provide the user agent that outbound HTTP calls should send."""

    env = os.getenv("CHAPTAG_USER_AGENT")
    if env:
        return env
    return format_user_agent(APP_NAME, APP_VERSION, CONTACT)


__all__ = ["format_user_agent", "resolve_user_agent"]
