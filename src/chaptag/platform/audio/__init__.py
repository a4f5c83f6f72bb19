"""Audio stream helpers."""

from __future__ import annotations

from .duration import DEFAULT_DURATION_PROVIDER, MutagenDurationProvider

__all__ = ["DEFAULT_DURATION_PROVIDER", "MutagenDurationProvider"]
