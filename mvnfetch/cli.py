"""Command line entrypoint: ``mvnfetch [options] group:artifact:version ...``."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Optional, Sequence

import httpx

from mvnfetch.modules.artifactfetch import parse_coordinate, summarize
from mvnfetch.modules.artifactfetch.util.exceptions import ParseError

from .bootstrap import ServiceContainer
from .logging_config import configure_logging
from .settings import Settings, get_settings

log = logging.getLogger("mvnfetch")

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_NO_WORKDIR = 127


def build_parser(settings: Settings, workdir: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mvnfetch",
        description="Download Maven artifacts from an HTTP(S) or S3 repository.",
    )
    parser.add_argument(
        "coordinates",
        nargs="*",
        metavar="COORDINATE",
        help="group:artifact:version[:classifier][@extension]",
    )
    parser.add_argument("--mvn-server", default=settings.mvn_server, help="Custom maven server (http(s):// or s3://)")
    parser.add_argument(
        "--output-dir",
        default=settings.output_dir or workdir,
        help="Directory to save downloaded files (must exist)",
    )
    parser.add_argument("--print-only", action="store_true", help="Only print the resolved artifact urls")
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not output logs")
    parser.add_argument("--repo-user", default=settings.repo_user, help="Basic auth user for HTTP repositories")
    parser.add_argument("--repo-password", default=settings.repo_password, help="Basic auth password for HTTP repositories")
    return parser


def _parses(coordinate: str) -> bool:
    try:
        parse_coordinate(coordinate)
    except ParseError:
        return False
    return True


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.Client] = None,
) -> int:
    try:
        workdir = os.getcwd()
    except OSError:
        return EXIT_NO_WORKDIR

    settings = settings or get_settings()
    args = build_parser(settings, workdir).parse_args(argv)
    configure_logging(settings.log_level, quiet=args.quiet)

    settings = settings.model_copy(
        update={
            "mvn_server": args.mvn_server,
            "output_dir": args.output_dir,
            "repo_user": args.repo_user,
            "repo_password": args.repo_password,
        }
    )

    if not any(_parses(coordinate) for coordinate in args.coordinates):
        log.info("there is no coordinate to handle (%d invalid)", len(args.coordinates))
        return EXIT_OK

    with ServiceContainer(settings, http_client=http_client) as container:
        outcomes = container.batch_service.run(
            args.coordinates,
            repository_url=settings.mvn_server,
            output_dir=settings.output_dir,
            print_only=args.print_only,
        )

    for outcome in outcomes:
        if args.print_only and outcome.ok:
            print(outcome.url)
        elif outcome.ok:
            log.info("finish download -> %s", outcome.url)

    summary = summarize(outcomes)
    if summary.failures:
        log.warning("failed coordinates: %s", ", ".join(o.coordinate for o in summary.failures))
    log.info("done! %d of %d succeeded, %d failed", summary.succeeded, summary.total, summary.failed)
    return EXIT_FAILURES if summary.has_failures else EXIT_OK
