"""Batch download of Maven coordinates through a single bound transport."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import BinaryIO, List, Optional, Sequence

from mvnfetch.settings import Settings
from mvnfetch.modules.artifactfetch.domain import (
    ArtifactDescriptor,
    Outcome,
    OutcomeStatus,
    artifact_url,
    file_name,
    normalize_repository_url,
    parse_coordinate,
)
from mvnfetch.modules.artifactfetch.fileget import FetchResult, Transport, TransportRegistry
from mvnfetch.modules.artifactfetch.util.exceptions import (
    FetchError,
    ParseError,
    ResolutionError,
    WriteError,
)

PROGRESS_BYTES_STEP = 5 * 1024 * 1024


class ArtifactBatchService:
    """Resolve and download every coordinate of a batch, never stopping early."""

    def __init__(self, settings: Settings, registry: Optional[TransportRegistry] = None) -> None:
        self.settings = settings
        self.registry = registry or TransportRegistry.default(settings)
        self.log = logging.getLogger(self.__class__.__name__)

    def run(
        self,
        coordinates: Sequence[str],
        repository_url: Optional[str] = None,
        output_dir: Optional[str] = None,
        print_only: bool = False,
    ) -> List[Outcome]:
        repository_url = normalize_repository_url(repository_url or self.settings.mvn_server)
        target_dir = Path(output_dir or self.settings.resolved_output_dir())
        transport = self.registry.for_url(repository_url)
        self.log.info(
            "Processing %d coordinate(s) repository=%s transport=%s print_only=%s",
            len(coordinates),
            repository_url,
            transport.__class__.__name__,
            print_only,
        )

        outcomes: List[Outcome] = []
        for coordinate in coordinates:
            outcome = self._process(coordinate, repository_url, target_dir, transport, print_only)
            if not outcome.ok:
                self.log.error("%s failed [%s]: %s", coordinate, outcome.status.value, outcome.message)
            outcomes.append(outcome)
        return outcomes

    def _process(
        self,
        coordinate: str,
        repository_url: str,
        target_dir: Path,
        transport: Transport,
        print_only: bool,
    ) -> Outcome:
        try:
            descriptor = parse_coordinate(coordinate)
        except ParseError as exc:
            return Outcome(coordinate, OutcomeStatus.PARSE_ERROR, message=str(exc))

        descriptor = descriptor.with_repository(
            repository_url,
            repo_user=self.settings.repo_user,
            repo_password=self.settings.repo_password,
        )

        try:
            url = artifact_url(descriptor)
        except ResolutionError as exc:
            return Outcome(coordinate, OutcomeStatus.RESOLUTION_ERROR, message=str(exc))

        if print_only:
            return Outcome(coordinate, OutcomeStatus.SUCCESS, url=url)

        target = target_dir / file_name(descriptor)
        if os.path.dirname(os.path.abspath(target)) != os.path.abspath(target_dir):
            return Outcome(
                coordinate,
                OutcomeStatus.WRITE_ERROR,
                url=url,
                path=target,
                message=f"destination escapes the output directory ({target})",
            )
        try:
            written = self._download(descriptor, url, target, transport)
        except FetchError as exc:
            return Outcome(coordinate, OutcomeStatus.FETCH_ERROR, url=url, path=target, message=str(exc))
        except WriteError as exc:
            return Outcome(coordinate, OutcomeStatus.WRITE_ERROR, url=url, path=target, message=str(exc))
        return Outcome(coordinate, OutcomeStatus.SUCCESS, url=url, path=target, bytes_written=written)

    def _download(self, descriptor: ArtifactDescriptor, url: str, target: Path, transport: Transport) -> int:
        try:
            fh = open(target, "wb")
        except (OSError, ValueError) as exc:
            raise WriteError(str(target), exc) from exc

        self.log.info(
            "Downloading artifact group=%s artifact=%s version=%s url=%s",
            descriptor.group,
            descriptor.artifact,
            descriptor.version,
            url,
        )
        start_time = time.time()
        try:
            with fh:
                with transport.fetch(url, descriptor.repo_user, descriptor.repo_password) as result:
                    downloaded = self._copy(descriptor, result, fh, target)
        except (OSError, ValueError) as exc:
            raise WriteError(str(target), exc) from exc

        elapsed = max(time.time() - start_time, 1e-3)
        speed_mb_s = (downloaded / 1024 / 1024) / elapsed
        self.log.info(
            "Downloaded artifact %s -> %s (%d bytes, %.2f MB/s, %.2fs)",
            descriptor.coordinate,
            target,
            downloaded,
            speed_mb_s,
            elapsed,
        )
        return downloaded

    def _copy(self, descriptor: ArtifactDescriptor, result: FetchResult, fh: BinaryIO, target: Path) -> int:
        total = result.content_length or 0
        downloaded = 0
        next_percent = 10
        next_bytes_logged = PROGRESS_BYTES_STEP
        for chunk in result.iter_bytes():
            fh.write(chunk)
            downloaded += len(chunk)
            if total:
                percent = int(downloaded * 100 / total)
                if percent >= next_percent:
                    self.log.info("Download progress %s %s%% (%d/%d bytes)", descriptor.coordinate, percent, downloaded, total)
                    next_percent = (percent // 10 + 1) * 10
            elif downloaded >= next_bytes_logged:
                self.log.info("Download progress %s %d bytes", descriptor.coordinate, downloaded)
                next_bytes_logged += PROGRESS_BYTES_STEP

        fh.flush()
        if result.content_length is not None and downloaded != result.content_length:
            raise WriteError(
                str(target),
                message=f"short write, got {downloaded} of {result.content_length} bytes",
            )
        return downloaded
