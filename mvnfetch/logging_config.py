"""Process-wide logging setup."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s - %(message)s"


def configure_logging(level: str = "INFO", *, quiet: bool = False) -> None:
    """Configure the root logger once per process; ``quiet`` silences everything."""
    threshold = logging.CRITICAL + 1 if quiet else logging.getLevelName(level.upper())
    if not isinstance(threshold, int):
        threshold = logging.INFO
    logging.basicConfig(level=threshold, format=LOG_FORMAT, stream=sys.stderr, force=True)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(threshold, logging.WARNING))
    logging.getLogger("botocore").setLevel(max(threshold, logging.WARNING))
