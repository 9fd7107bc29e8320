"""Blocking HTTP transport used to fetch manifests and archives."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import httpx

from .config import HttpSettings, load_http_settings

log = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class HttpTransport:
    """
    Thin wrapper around a synchronous httpx client.

    Responses are opened in streaming mode so archive bodies are never held in
    memory as a whole. Callers decide what a given status code means.
    """

    def __init__(
        self,
        settings: Optional[HttpSettings] = None,
        client: Optional[httpx.Client] = None,
    ):
        self._settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            timeout=self._settings.timeout_seconds,
            follow_redirects=self._settings.follow_redirects,
            headers={"User-Agent": self._settings.user_agent},
        )

    @contextmanager
    def get(self, url: str) -> Iterator[httpx.Response]:
        """Issue a GET for *url* and yield the unread, streaming response."""
        log.debug("GET %s", url)
        with self._client.stream("GET", url) as response:
            log.debug("GET %s -> %d", url, response.status_code)
            yield response

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
