"""Per-coordinate batch results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    PARSE_ERROR = "parse-error"
    RESOLUTION_ERROR = "resolution-error"
    FETCH_ERROR = "fetch-error"
    WRITE_ERROR = "write-error"


@dataclass
class Outcome:
    coordinate: str
    status: OutcomeStatus
    url: Optional[str] = None
    path: Optional[Path] = None
    message: str = ""
    bytes_written: int = 0

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS


@dataclass
class BatchSummary:
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    failures: List[Outcome] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return self.failed > 0


def summarize(outcomes: Iterable[Outcome]) -> BatchSummary:
    summary = BatchSummary()
    for outcome in outcomes:
        summary.total += 1
        if outcome.ok:
            summary.succeeded += 1
        else:
            summary.failed += 1
            summary.failures.append(outcome)
    return summary
