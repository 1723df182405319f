"""Service exports."""

from .batch import ArtifactBatchService

__all__ = ["ArtifactBatchService"]
