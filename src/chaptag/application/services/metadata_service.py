"""Application service for dumping and applying MP3 metadata.

This layer wires the tag store, duration provider, and artwork fetcher into
the extraction/injection pipelines so the CLI only deals with text and
confirmation.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import TextIO, final

from chaptag.features.metadata.domain import Metadata
from chaptag.features.metadata.usecases import (
    ArtworkFetcher,
    DurationProvider,
    ResolvedArtwork,
    TagStore,
    diff_documents,
    dump_document,
    extract_metadata,
    inject_metadata,
    load_document,
    resolve_artwork,
)
from chaptag.platform.audio import DEFAULT_DURATION_PROVIDER
from chaptag.platform.http import DEFAULT_ARTWORK_FETCHER
from chaptag.platform.id3 import MutagenTagStore
from chaptag.platform.logging import logger

ConfirmProvider = Callable[[str], bool]


class ApplyOutcome(Enum):
    """How an apply request ended."""

    UNCHANGED = "unchanged"
    DECLINED = "declined"
    APPLIED = "applied"


def _open_mutagen_store(path: Path, for_write: bool) -> TagStore:
    return MutagenTagStore.open(path, for_write=for_write)


def _always_confirm(_diff: str) -> bool:
    return True


@final
class MetadataService:
    """Round-trip the metadata of one MP3 file through YAML documents."""

    def __init__(
        self,
        audio: Path,
        *,
        artwork: str | None = None,
        store_factory: Callable[[Path, bool], TagStore] | None = None,
        duration_provider: DurationProvider | None = None,
        fetcher: ArtworkFetcher | None = None,
        confirm: ConfirmProvider | None = None,
    ) -> None:
        """Create a service for ``audio``.

        Args:
            audio: MP3 file to read and update.
            artwork: Artwork value overriding whatever the file records.
            store_factory: ``(path, for_write) -> TagStore``; mutagen by default.
            duration_provider: Audio length source for chapter end times.
            fetcher: Artwork downloader for ``http(s)`` sources.
            confirm: Called with the diff before writing; ``True`` proceeds.
        """
        self.audio = audio
        self.artwork = artwork
        self._store_factory = store_factory or _open_mutagen_store
        self._duration_provider = duration_provider or DEFAULT_DURATION_PROVIDER
        self._fetcher = fetcher or DEFAULT_ARTWORK_FETCHER
        self._confirm = confirm or _always_confirm

    # Reading -----------------------------------------------------------------

    def read(self) -> Metadata:
        """Extract the current metadata; the tag store is closed afterwards."""
        store = self._store_factory(self.audio, False)
        try:
            return extract_metadata(store, self.artwork)
        finally:
            store.close()

    def render(self) -> str:
        """Canonical YAML of the current metadata."""
        return dump_document(self.read())

    def dump(self, stream: TextIO) -> None:
        _ = stream.write(self.render())

    # Writing -----------------------------------------------------------------

    def apply(self, text: str, *, yes: bool = False) -> ApplyOutcome:
        """Apply a YAML document to the file.

        Args:
            text: YAML metadata document.
            yes: Skip the confirmation provider.

        Returns:
            ApplyOutcome: ``UNCHANGED`` when canonical forms match (the file
            is never opened for writing), ``DECLINED`` when confirmation was
            refused, else ``APPLIED``.
        """
        new_metadata = load_document(text)
        new_yaml = dump_document(new_metadata)
        current_yaml = self.render()

        if new_yaml == current_yaml:
            logger.info("No changes to apply.")
            return ApplyOutcome.UNCHANGED

        if not yes:
            diff = diff_documents(current_yaml, new_yaml, label=self.audio.name)
            if not self._confirm(diff):
                logger.info("Changes not applied.")
                return ApplyOutcome.DECLINED

        self.write(new_metadata)
        logger.info("Metadata updated successfully.")
        return ApplyOutcome.APPLIED

    def write(self, metadata: Metadata) -> None:
        """Write ``metadata`` to the file with a single save.

        Duration and artwork are resolved before the tag is opened, so their
        failures leave the file untouched.
        """
        duration = self._duration_provider.duration(self.audio) if metadata.chapters else None
        artwork: ResolvedArtwork | None = (
            resolve_artwork(metadata.artwork, self._fetcher) if metadata.artwork else None
        )

        store = self._store_factory(self.audio, True)
        try:
            inject_metadata(store, metadata, artwork=artwork, duration=duration)
            store.save()
        finally:
            store.close()
        logger.debug("Wrote metadata to %s", self.audio)


__all__ = ["ApplyOutcome", "ConfirmProvider", "MetadataService"]
