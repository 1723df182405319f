"""Maven artifact descriptor and the coordinate parser that builds it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional

from mvnfetch.constants import COORDINATE_SEPARATOR, DEFAULT_EXTENSION, EXTENSION_SEPARATOR

from ..util.exceptions import ParseError

PATH_SEPARATORS = ("/", "\\")


@dataclass(frozen=True)
class ArtifactDescriptor:
    """Represents a single Maven artifact plus the repository it lives in."""

    group: str
    artifact: str
    version: str
    classifier: Optional[str] = None
    extension: str = DEFAULT_EXTENSION
    repository_url: str = ""
    repo_user: Optional[str] = None
    repo_password: Optional[str] = None

    @property
    def coordinate(self) -> str:
        parts = [self.group, self.artifact, self.version]
        if self.classifier:
            parts.append(self.classifier)
        text = COORDINATE_SEPARATOR.join(parts)
        if self.extension != DEFAULT_EXTENSION:
            text = f"{text}{EXTENSION_SEPARATOR}{self.extension}"
        return text

    def with_repository(
        self,
        repository_url: str,
        repo_user: Optional[str] = None,
        repo_password: Optional[str] = None,
    ) -> "ArtifactDescriptor":
        return replace(
            self,
            repository_url=repository_url,
            repo_user=repo_user,
            repo_password=repo_password,
        )


def _has_control_chars(value: str) -> bool:
    return any(ord(char) < 32 or ord(char) == 127 for char in value)


def parse_coordinate(text: str) -> ArtifactDescriptor:
    """Parse ``group:artifact:version[:classifier][@extension]``.

    The ``@extension`` suffix may only trail the last field, which is either the
    version or the classifier. Raises :class:`ParseError` for anything else.
    """
    raw = text.strip() if text else ""
    fields: List[str] = [part.strip() for part in raw.split(COORDINATE_SEPARATOR)]
    if len(fields) < 3:
        raise ParseError(text, "expected at least group:artifact:version")
    if len(fields) > 4:
        raise ParseError(text, "too many fields")

    if any(EXTENSION_SEPARATOR in part for part in fields[:-1]):
        raise ParseError(text, "extension is only allowed on the last field")

    extension = DEFAULT_EXTENSION
    last = fields[-1]
    if EXTENSION_SEPARATOR in last:
        if last.count(EXTENSION_SEPARATOR) > 1:
            raise ParseError(text, "more than one extension")
        last, extension = (part.strip() for part in last.split(EXTENSION_SEPARATOR))
        fields[-1] = last
        if not extension:
            raise ParseError(text, "empty extension")

    if not all(fields):
        raise ParseError(text, "empty field")

    if any(_has_control_chars(part) for part in fields + [extension]):
        raise ParseError(text, "control character in coordinate")
    if any(sep in part for part in fields + [extension] for sep in PATH_SEPARATORS):
        raise ParseError(text, "path separator in coordinate")
    # every field but the group ends up verbatim in the file name or path
    path_fields = fields[1:] + [extension]
    if any(part == "." or ".." in part for part in path_fields):
        raise ParseError(text, "relative path segment in coordinate")

    group, artifact, version = fields[:3]
    classifier = fields[3] if len(fields) == 4 else None
    return ArtifactDescriptor(
        group=group,
        artifact=artifact,
        version=version,
        classifier=classifier,
        extension=extension,
    )
