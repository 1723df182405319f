"""HTTP(S) transport backed by httpx."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

import httpx

from mvnfetch.constants import DOWNLOAD_CHUNK_SIZE

from .base import FetchResult
from ..util.exceptions import FetchError


class HttpTransport:
    """Issue one streamed GET per artifact, with optional basic auth."""

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        *,
        timeout: Optional[float] = None,
        chunk_size: int = DOWNLOAD_CHUNK_SIZE,
    ) -> None:
        self.log = logging.getLogger(self.__class__.__name__)
        self.chunk_size = chunk_size
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def fetch(self, url: str, user: Optional[str] = None, password: Optional[str] = None) -> FetchResult:
        auth = None
        if user and password:
            auth = (user, password)
        self.log.debug("GET %s auth=%s", url, "basic" if auth else "none")
        try:
            request = self._client.build_request("GET", url)
            response = self._client.send(request, auth=auth, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(url, exc) from exc

        content_length = None
        # httpx decodes content-encoding, so the header no longer matches the bytes we write.
        if not response.headers.get("content-encoding"):
            header = response.headers.get("content-length")
            if header and header.isdigit():
                content_length = int(header)

        return FetchResult(
            url,
            self._iter_body(response, url),
            content_length=content_length,
            closer=response.close,
        )

    def _iter_body(self, response: httpx.Response, url: str) -> Iterator[bytes]:
        if response.is_error:
            raise FetchError(url, message=f"unexpected status {response.status_code} {response.reason_phrase}")
        try:
            for chunk in response.iter_bytes(self.chunk_size):
                if chunk:
                    yield chunk
        except httpx.HTTPError as exc:
            raise FetchError(url, exc) from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
