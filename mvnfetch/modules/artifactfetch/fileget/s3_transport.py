"""S3 transport: resolve a region, then GET the object."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional
from urllib.parse import urlsplit

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from botocore.utils import InstanceMetadataRegionFetcher

from mvnfetch.constants import DOWNLOAD_CHUNK_SIZE, S3_DEFAULT_REGION, S3_SCHEME

from .base import FetchResult
from ..util.exceptions import FetchError


def split_s3_url(url: str) -> tuple[str, str]:
    """Return ``(bucket, key)`` for ``s3://bucket/key``."""
    parts = urlsplit(url)
    if parts.scheme.lower() != S3_SCHEME:
        raise FetchError(url, message="not a s3 url")
    key = parts.path[1:] if parts.path.startswith("/") else parts.path
    if not parts.netloc or not key:
        raise FetchError(url, message="s3 url needs both bucket and key")
    return parts.netloc, key


class S3Transport:
    """Fetch artifacts stored in an S3 bucket laid out like a Maven repository.

    The region comes from, in order: the explicit ``region`` argument, the EC2
    instance metadata service, then ``default_region``. It is resolved on the
    first fetch and reused for the rest of the run.
    """

    def __init__(
        self,
        *,
        region: Optional[str] = None,
        default_region: str = S3_DEFAULT_REGION,
        session: Optional[boto3.session.Session] = None,
        region_fetcher: Optional[Any] = None,
        chunk_size: int = DOWNLOAD_CHUNK_SIZE,
    ) -> None:
        self.log = logging.getLogger(self.__class__.__name__)
        self.default_region = default_region
        self.chunk_size = chunk_size
        self._region = region
        self._session = session
        self._region_fetcher = region_fetcher
        self._client = None

    def resolve_region(self) -> str:
        if self._region:
            return self._region
        fetcher = self._region_fetcher or InstanceMetadataRegionFetcher(timeout=1, num_attempts=1)
        region = None
        try:
            region = fetcher.retrieve_region()
        except Exception as exc:  # noqa: BLE001
            self.log.warning("Instance metadata region lookup failed: %s", exc)
        if not region:
            self.log.warning("No region from instance metadata, falling back to %s", self.default_region)
            region = self.default_region
        self._region = region
        return region

    def _get_client(self):
        if self._client is None:
            region = self.resolve_region()
            session = self._session or boto3.session.Session()
            self._client = session.client("s3", region_name=region)
            self.log.debug("Created S3 client for region %s", region)
        return self._client

    def fetch(self, url: str, user: Optional[str] = None, password: Optional[str] = None) -> FetchResult:
        bucket, key = split_s3_url(url)
        try:
            output = self._get_client().get_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as exc:
            raise FetchError(url, exc) from exc

        body = output["Body"]
        return FetchResult(
            url,
            self._iter_body(body, url),
            content_length=output.get("ContentLength"),
            closer=body.close,
        )

    def _iter_body(self, body, url: str) -> Iterator[bytes]:
        try:
            for chunk in body.iter_chunks(self.chunk_size):
                if chunk:
                    yield chunk
        except (ClientError, BotoCoreError) as exc:
            raise FetchError(url, exc) from exc

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
