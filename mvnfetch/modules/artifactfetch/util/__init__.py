"""Utility modules for artifact fetching."""

from .exceptions import FetchError, MvnFetchError, ParseError, ResolutionError, WriteError

__all__ = [
    "FetchError",
    "MvnFetchError",
    "ParseError",
    "ResolutionError",
    "WriteError",
]
