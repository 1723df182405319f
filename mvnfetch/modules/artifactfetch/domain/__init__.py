from .artifact import ArtifactDescriptor, parse_coordinate
from .locator import artifact_path, artifact_url, file_name, normalize_repository_url
from .models import BatchSummary, Outcome, OutcomeStatus, summarize

__all__ = [
    "ArtifactDescriptor",
    "parse_coordinate",
    "artifact_path",
    "artifact_url",
    "file_name",
    "normalize_repository_url",
    "BatchSummary",
    "Outcome",
    "OutcomeStatus",
    "summarize",
]
