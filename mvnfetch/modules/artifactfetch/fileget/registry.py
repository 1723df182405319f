"""Scheme-based transport lookup."""

from __future__ import annotations

import logging
from typing import Dict, Optional
from urllib.parse import urlsplit

import httpx

from mvnfetch.constants import S3_SCHEME
from mvnfetch.settings import Settings

from .base import Transport
from .http_transport import HttpTransport
from .s3_transport import S3Transport

log = logging.getLogger(__name__)


class TransportRegistry:
    """Maps URL schemes to transports; unknown schemes use the fallback."""

    def __init__(self, fallback: Transport) -> None:
        self._fallback = fallback
        self._transports: Dict[str, Transport] = {}

    def register(self, scheme: str, transport: Transport) -> None:
        self._transports[scheme.lower()] = transport

    def get(self, scheme: str) -> Transport:
        return self._transports.get(scheme.lower(), self._fallback)

    def for_url(self, url: str) -> Transport:
        scheme = urlsplit(url).scheme
        transport = self.get(scheme)
        log.debug("Selected %s for scheme %r", transport.__class__.__name__, scheme)
        return transport

    def close(self) -> None:
        closed = []
        for transport in [self._fallback, *self._transports.values()]:
            if any(transport is other for other in closed):
                continue
            transport.close()
            closed.append(transport)

    @classmethod
    def default(cls, settings: Settings, client: Optional[httpx.Client] = None) -> "TransportRegistry":
        registry = cls(
            HttpTransport(
                client,
                timeout=settings.http_timeout,
                chunk_size=settings.chunk_size,
            )
        )
        registry.register(
            S3_SCHEME,
            S3Transport(
                region=settings.s3_region,
                default_region=settings.s3_default_region,
                chunk_size=settings.chunk_size,
            ),
        )
        return registry
