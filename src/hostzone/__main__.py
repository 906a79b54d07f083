"""Command-line entry point: python -m hostzone."""

from __future__ import annotations

import argparse
import logging
import sys

from hostzone.config import get_settings
from hostzone.core import collect_report, get_name
from hostzone.errors import TimezoneError
from hostzone.schemas import Verdict

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNKNOWN = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hostzone",
        description="Print the local IANA time zone name.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print what every source reported, as JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log skipped sources and candidates to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the lookup and print the result."""
    args = _build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.json:
        report = collect_report()
        print(report.model_dump_json(indent=2))
        verdict = report.resolution.verdict if report.resolution is not None else None
        if report.error or verdict == Verdict.CONFLICTING:
            return EXIT_ERROR
        if not report.env and not report.registry and verdict != Verdict.UNIQUE:
            return EXIT_UNKNOWN
        return EXIT_OK

    try:
        name = get_name()
    except TimezoneError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_ERROR

    if not name:
        print("could not determine the local time zone", file=sys.stderr)
        return EXIT_UNKNOWN

    print(name)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
