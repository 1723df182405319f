"""Artifact fetch module exports."""

from .domain import ArtifactDescriptor, Outcome, OutcomeStatus, parse_coordinate, summarize
from .fileget import TransportRegistry
from .service import ArtifactBatchService

__all__ = [
    "ArtifactBatchService",
    "ArtifactDescriptor",
    "Outcome",
    "OutcomeStatus",
    "TransportRegistry",
    "parse_coordinate",
    "summarize",
]
