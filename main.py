"""CLI entrypoint: find Scopus IDs from Person exports that ORCID already knows about."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from contextlib import closing
from typing import TextIO

from dotenv import load_dotenv

from errors import ScopusCheckError
from file_locator import find_files_to_process
from models import RunConfig, RunSummary
from orcid_client import RequestThrottle, fetch_search_token, search_scopus_id
from person_reader import read_persons
from reporter import report_match

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(
        description="Check whether Scopus IDs in Person export files are registered in ORCID profiles"
    )
    parser.add_argument("-client_id", "--client-id", dest="client_id", default=None, help="Client ID for ORCID API")
    parser.add_argument(
        "-client_secret", "--client-secret", dest="client_secret", default=None, help="Client Secret for ORCID API"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-line progress and every lookup")
    parser.add_argument(
        "files",
        nargs="*",
        help="Person export files (default: *Person-export.json in the current directory)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> RunConfig:
    """Merge flags with ORCID_CLIENT_ID / ORCID_CLIENT_SECRET; flags win."""
    return RunConfig(
        client_id=args.client_id or os.getenv("ORCID_CLIENT_ID", ""),
        client_secret=args.client_secret or os.getenv("ORCID_CLIENT_SECRET", ""),
        paths=tuple(args.files),
    )


def run(config: RunConfig, stream: TextIO | None = None) -> RunSummary:
    """Run one full check; any failure propagates as a ScopusCheckError."""
    files = find_files_to_process(config.paths)
    token = fetch_search_token(
        config.client_id,
        config.client_secret,
        timeout=config.request_timeout_seconds,
    )
    throttle = RequestThrottle(config.throttle_seconds)
    summary = RunSummary()

    for path in files:
        LOGGER.info("Processing %s", path)
        file_records = 0
        file_matches = 0
        with closing(read_persons(path)) as persons:
            for _, person in persons:
                file_records += 1
                for scopus_id in person.scopus_ids():
                    result = search_scopus_id(
                        scopus_id,
                        token.access_token,
                        throttle=throttle,
                        timeout=config.request_timeout_seconds,
                    )
                    summary.lookups += 1
                    if report_match(person, result, stream=stream):
                        file_matches += 1

        summary.files += 1
        summary.records += file_records
        summary.matches += file_matches
        LOGGER.info("Finished %s: records=%s matches=%s", path, file_records, file_matches)

    LOGGER.info(
        "Run complete. files=%s records=%s lookups=%s matches=%s",
        summary.files,
        summary.records,
        summary.lookups,
        summary.matches,
    )
    return summary


def main(argv: Sequence[str] | None = None) -> None:
    """Initialize config and execute the check; exit 1 on the first error."""
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    config = build_config(args)

    try:
        run(config)
    except ScopusCheckError as exc:
        LOGGER.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
