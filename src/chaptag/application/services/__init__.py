"""Application services."""

from __future__ import annotations

from .metadata_service import ApplyOutcome, ConfirmProvider, MetadataService

__all__ = ["ApplyOutcome", "ConfirmProvider", "MetadataService"]
