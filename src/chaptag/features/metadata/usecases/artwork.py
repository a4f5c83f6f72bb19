"""Where: src/chaptag/features/metadata/usecases/artwork.py
What: Resolve artwork values (data URI, URL, local path) into image bytes,
      and recreate missing side-car images from the embedded picture.
Why: The artwork field names where the picture came from, while the tag only
     stores bytes; these helpers bridge the two directions.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Final
from urllib.parse import urlsplit

from chaptag.platform.logging import logger
from chaptag.shared.errors import FormatError, MetadataIOError, UnsupportedFormatError

from .ports import ArtworkFetcher, EmbeddedPicture

DATA_URI_PREFIX: Final[str] = "data:"
_HTTP_PREFIXES: Final[tuple[str, ...]] = ("http://", "https://")

_MIME_BY_EXTENSION: Final[dict[str, str]] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".webp": "image/webp",
}

_EXTENSION_BY_MIME: Final[dict[str, str]] = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/bmp": ".bmp",
    "image/webp": ".webp",
}


@dataclass(frozen=True, slots=True)
class ResolvedArtwork:
    """Image bytes ready to embed, plus the value they were resolved from."""

    source: str
    mime: str
    data: bytes

    @property
    def is_tracked(self) -> bool:
        """Whether the source should be remembered next to the picture."""
        return not is_data_uri(self.source)


def is_data_uri(value: str) -> bool:
    return value.startswith(DATA_URI_PREFIX)


def is_http_url(value: str) -> bool:
    return value.startswith(_HTTP_PREFIXES)


def is_local_path(value: str) -> bool:
    """Whether ``value`` names a filesystem path rather than a URI."""
    return bool(value) and not is_data_uri(value) and not is_http_url(value)


def mime_from_extension(name: str) -> str | None:
    """MIME type for an allow-listed image extension, case-insensitively."""
    return _MIME_BY_EXTENSION.get(PurePosixPath(name).suffix.lower())


def extension_from_mime(mime: str) -> str | None:
    return _EXTENSION_BY_MIME.get(mime.lower())


def build_data_uri(picture: EmbeddedPicture) -> str:
    """Encode an embedded picture as ``data:<mime>;base64,<payload>``."""
    payload = base64.b64encode(picture.data).decode("ascii")
    return f"{DATA_URI_PREFIX}{picture.mime};base64,{payload}"


def parse_data_uri(uri: str) -> EmbeddedPicture:
    """Decode a base64 data URI.

    Raises:
        FormatError: Missing comma, bad header, non-base64 encoding, or an
            undecodable payload.
    """
    header, sep, payload = uri.partition(",")
    if not sep:
        raise FormatError("invalid data URI format", uri[:64])
    if not header.startswith(DATA_URI_PREFIX):
        raise FormatError("invalid data URI header", header)

    params = header[len(DATA_URI_PREFIX) :].split(";")
    if len(params) < 2 or params[1] != "base64":
        raise FormatError("only base64 data URIs are supported", header)

    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise FormatError("failed to decode base64 data", payload[:64]) from exc
    return EmbeddedPicture(mime=params[0], data=data)


def _mime_from_content_type(content_type: str | None) -> str:
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def _fetch(url: str, fetcher: ArtworkFetcher) -> EmbeddedPicture:
    result = fetcher.get(url)
    mime = _mime_from_content_type(result.content_type) or mime_from_extension(urlsplit(url).path)
    if not mime:
        raise UnsupportedFormatError(f"unable to determine MIME type for {url}")
    return EmbeddedPicture(mime=mime, data=result.data)


def _read_file(value: str) -> EmbeddedPicture:
    path = Path(value).expanduser()
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise MetadataIOError(f"failed to read file {value}: {exc}") from exc

    mime = mime_from_extension(path.name)
    if mime is None:
        raise UnsupportedFormatError(f"unsupported image format: {path.suffix or value}")
    return EmbeddedPicture(mime=mime, data=data)


def resolve_artwork(value: str, fetcher: ArtworkFetcher) -> ResolvedArtwork:
    """Load the image that ``value`` points at.

    Args:
        value: A ``data:`` URI, an ``http(s)`` URL, or a local file path.
        fetcher: Used for URLs only.

    Raises:
        FormatError: Malformed data URI.
        NetworkError: The download failed.
        MetadataIOError: The local file cannot be read.
        UnsupportedFormatError: The image type is unknown.
    """
    if is_data_uri(value):
        picture = parse_data_uri(value)
    elif is_http_url(value):
        picture = _fetch(value, fetcher)
    else:
        picture = _read_file(value)
    logger.debug("Resolved artwork %s (%s, %d bytes)", value[:80], picture.mime, len(picture.data))
    return ResolvedArtwork(source=value, mime=picture.mime, data=picture.data)


def reconcile_artwork(value: str, picture: EmbeddedPicture | None) -> Path | None:
    """Recreate a missing local artwork file from the embedded picture.

    When ``value`` has no extension, one derived from the picture's MIME type
    is appended. Existing files are never touched.

    Returns:
        The path written, or ``None`` when nothing needed writing.

    Raises:
        MetadataIOError: The file cannot be written.
    """
    if picture is None or not is_local_path(value):
        return None

    path = Path(value).expanduser()
    if path.exists():
        return None
    if not path.suffix:
        extension = extension_from_mime(picture.mime)
        if extension:
            path = path.with_name(path.name + extension)
            if path.exists():
                return None

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(picture.data)
    except OSError as exc:
        raise MetadataIOError(f"failed to extract artwork to {path}: {exc}") from exc
    logger.info("Recreated missing artwork file %s from the embedded picture", path)
    return path


__all__ = [
    "DATA_URI_PREFIX",
    "ResolvedArtwork",
    "build_data_uri",
    "extension_from_mime",
    "is_data_uri",
    "is_http_url",
    "is_local_path",
    "mime_from_extension",
    "parse_data_uri",
    "reconcile_artwork",
    "resolve_artwork",
]
