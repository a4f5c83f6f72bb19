"""Where: src/chaptag/platform/http/client.py
What: ``requests``-based artwork downloader implementing ``ArtworkFetcher``.
Why: Decouple network concerns from artwork resolution.
"""

from __future__ import annotations

import requests

from chaptag.config.settings import HTTP_TIMEOUT
from chaptag.features.metadata.usecases.ports import FetchResult
from chaptag.platform.logging import logger
from chaptag.shared.errors import NetworkError

from .user_agent import resolve_user_agent


class RequestsArtworkFetcher:
    """Perform bounded GET requests for artwork images."""

    timeout: float

    def __init__(self, timeout: float = HTTP_TIMEOUT) -> None:
        self.timeout = timeout

    def get(self, url: str) -> FetchResult:
        """Download ``url``.

        Raises:
            NetworkError: Timeout, transport failure, or a non-2xx status.
        """
        headers = {"User-Agent": resolve_user_agent()}
        logger.debug("Downloading artwork from %s", url)
        try:
            response = requests.get(url, headers=headers, timeout=(min(5.0, self.timeout), self.timeout))
        except requests.RequestException as exc:
            raise NetworkError(f"failed to download image from {url}: {exc}") from exc

        status = int(response.status_code)
        if not 200 <= status < 300:
            raise NetworkError(f"failed to download image from {url}: HTTP {status}")

        return FetchResult(data=response.content, content_type=response.headers.get("Content-Type"))


DEFAULT_ARTWORK_FETCHER = RequestsArtworkFetcher()


__all__ = ["DEFAULT_ARTWORK_FETCHER", "RequestsArtworkFetcher"]
