"""Metadata use cases: frame mapping, extraction, injection, artwork, documents."""

from __future__ import annotations

from .artwork import ResolvedArtwork, parse_data_uri, reconcile_artwork, resolve_artwork
from .diff import diff_documents
from .document import DOCUMENT_KEYS, canonicalize, dump_document, load_document
from .extraction import extract_metadata
from .frame_mapping import TEXT_FRAME_MAPPINGS, apply_text_frames, read_text_frames
from .injection import inject_metadata
from .ports import ArtworkFetcher, DurationProvider, EmbeddedPicture, FetchResult, TagStore

__all__ = [
    "ArtworkFetcher",
    "DOCUMENT_KEYS",
    "DurationProvider",
    "EmbeddedPicture",
    "FetchResult",
    "ResolvedArtwork",
    "TEXT_FRAME_MAPPINGS",
    "TagStore",
    "apply_text_frames",
    "canonicalize",
    "diff_documents",
    "dump_document",
    "extract_metadata",
    "inject_metadata",
    "load_document",
    "parse_data_uri",
    "read_text_frames",
    "reconcile_artwork",
    "resolve_artwork",
]
