"""Maven repository layout: file names, relative paths and download URLs."""

from __future__ import annotations

from .artifact import ArtifactDescriptor
from ..util.exceptions import ResolutionError


def normalize_repository_url(url: str) -> str:
    if not url.endswith("/"):
        return url + "/"
    return url


def file_name(descriptor: ArtifactDescriptor) -> str:
    name = f"{descriptor.artifact}-{descriptor.version}"
    if descriptor.classifier:
        name = f"{name}-{descriptor.classifier}"
    return f"{name}.{descriptor.extension}"


def artifact_path(descriptor: ArtifactDescriptor) -> str:
    """Repository-relative path, e.g. ``org/example/lib/1.0/lib-1.0.jar``."""
    group_path = descriptor.group.replace(".", "/")
    return "/".join([group_path, descriptor.artifact, descriptor.version, file_name(descriptor)])


def artifact_url(descriptor: ArtifactDescriptor) -> str:
    for field_name in ("group", "artifact", "version", "repository_url"):
        if not getattr(descriptor, field_name):
            raise ResolutionError(field_name)
    return normalize_repository_url(descriptor.repository_url) + artifact_path(descriptor)
