"""Transport interface shared by the HTTP and S3 fetchers."""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Protocol


class FetchResult:
    """Open response body of a single artifact fetch.

    Must be closed once consumed; use it as a context manager.
    """

    def __init__(
        self,
        url: str,
        chunks: Iterator[bytes],
        content_length: Optional[int] = None,
        closer: Optional[Callable[[], None]] = None,
    ) -> None:
        self.url = url
        self.content_length = content_length
        self._chunks = chunks
        self._closer = closer
        self._closed = False

    def iter_bytes(self) -> Iterator[bytes]:
        return self._chunks

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._closer:
            self._closer()

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "FetchResult":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Transport(Protocol):
    """Retrieves the bytes behind a resolved artifact URL."""

    def fetch(self, url: str, user: Optional[str] = None, password: Optional[str] = None) -> FetchResult:  # pragma: no cover - interface
        ...

    def close(self) -> None:  # pragma: no cover - interface
        ...
