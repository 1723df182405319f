"""Wiring of settings, transports and the batch service."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from mvnfetch.modules.artifactfetch import ArtifactBatchService, TransportRegistry

from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that builds the services sharing one Settings instance."""

    settings: Settings
    http_client: Optional[httpx.Client] = None
    registry: TransportRegistry = field(init=False)
    batch_service: ArtifactBatchService = field(init=False)

    def __post_init__(self) -> None:
        self.registry = TransportRegistry.default(self.settings, client=self.http_client)
        self.batch_service = ArtifactBatchService(self.settings, registry=self.registry)

    def close(self) -> None:
        log.debug("Closing transports")
        self.registry.close()

    def __enter__(self) -> "ServiceContainer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
