"""Item-level error kinds raised while fetching artifacts."""

from __future__ import annotations

from typing import Optional


class MvnFetchError(Exception):
    """Base class for every per-artifact failure."""


class ParseError(MvnFetchError):
    """A coordinate string does not match ``group:artifact:version[:classifier][@ext]``."""

    def __init__(self, coordinate: str, reason: str = "invalid coordinate") -> None:
        super().__init__(f"{reason} -> {coordinate}")
        self.coordinate = coordinate
        self.reason = reason


class ResolutionError(MvnFetchError):
    """A descriptor lacks a field needed to build its download URL."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"cannot resolve artifact url, missing {field_name}")
        self.field_name = field_name


class FetchError(MvnFetchError):
    """The transport failed to retrieve ``url``."""

    def __init__(self, url: str, cause: Optional[BaseException] = None, message: Optional[str] = None) -> None:
        detail = message or (str(cause) if cause else "fetch failed")
        super().__init__(f"{detail} ({url})")
        self.url = url
        self.cause = cause


class WriteError(MvnFetchError):
    """The destination file could not be created or fully written."""

    def __init__(self, path: str, cause: Optional[BaseException] = None, message: Optional[str] = None) -> None:
        detail = message or (str(cause) if cause else "write failed")
        super().__init__(f"{detail} ({path})")
        self.path = path
        self.cause = cause
