"""HTTP byte source for log exports published on a web server.

The response body is streamed; nothing beyond the chunk in flight is held in
memory. Connection and HTTP status failures surface as
``ResourceUnavailable`` when the source is opened. Failures while reading the
body are re-raised as ``OSError`` so the line reader treats them as the end of
input.
"""

import logging
from contextlib import contextmanager
from posixpath import basename
from typing import Dict, Iterator, Optional
from urllib.parse import unquote, urlsplit

import requests

from hobbs_time.config import DEFAULT_CHUNK_SIZE
from hobbs_time.errors import ResourceUnavailable
from hobbs_time.sources.local import SourceOpener

LOGGER = logging.getLogger(__name__)

HEADERS = {"accept": "text/csv, text/plain;q=0.9, */*;q=0.1"}


def url_display_name(url: str) -> str:
    """Return the last path segment of ``url``, or the host if there is none."""
    parts = urlsplit(url)
    name = basename(unquote(parts.path.rstrip("/")))
    return name or parts.netloc or url


class ResponseStream:
    """Minimal ``read()`` adapter over a streamed ``requests`` response."""

    def __init__(self, response: requests.Response, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._chunks = response.iter_content(chunk_size=chunk_size)

    def read(self, size: int = -1) -> bytes:
        # ``size`` is advisory; chunks arrive as the transport delivers them
        try:
            return next(self._chunks, b"")
        except requests.RequestException as exc:
            raise OSError(str(exc)) from exc


class LogDownloadClient:
    """Open log exports over HTTP(S) with a shared ``requests`` session."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        """Initialize the download client.

        Args:
            session: Optional pre-configured Requests session.
            timeout: Connect/read timeout in seconds.
            chunk_size: Body chunk size requested from the transport.
            headers: Extra request headers merged over ``HEADERS``.
        """
        self._session = session or requests.Session()
        self._timeout = timeout
        self._chunk_size = chunk_size
        self._headers = {**HEADERS, **(headers or {})}

    @contextmanager
    def open(self, url: str) -> Iterator[ResponseStream]:
        """Yield a readable stream over the body of ``url``."""
        if not url:
            raise ValueError("url must be provided")

        LOGGER.debug("Downloading %s", url)
        try:
            response = self._session.get(
                url,
                headers=self._headers,
                timeout=self._timeout,
                stream=True,
            )
        except requests.RequestException as exc:
            raise ResourceUnavailable(url, str(exc)) from exc

        try:
            try:
                response.raise_for_status()
            except requests.HTTPError as exc:
                raise ResourceUnavailable(url, str(exc)) from exc
            yield ResponseStream(response, self._chunk_size)
        finally:
            response.close()

    def opener(self, url: str) -> SourceOpener:
        """Return a zero-argument opener for ``url`` usable with ``extract``."""

        def open_url():
            return self.open(url)

        return open_url

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "LogDownloadClient":
        return self

    def __exit__(self, exc_type, exc, exc_tb) -> None:
        self.close()


__all__ = ["HEADERS", "LogDownloadClient", "ResponseStream", "url_display_name"]
