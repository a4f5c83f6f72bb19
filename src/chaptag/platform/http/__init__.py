"""HTTP adapter exports."""

from __future__ import annotations

from .client import DEFAULT_ARTWORK_FETCHER, RequestsArtworkFetcher
from .user_agent import format_user_agent, resolve_user_agent

__all__ = [
    "DEFAULT_ARTWORK_FETCHER",
    "RequestsArtworkFetcher",
    "format_user_agent",
    "resolve_user_agent",
]
