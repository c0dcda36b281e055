#!/usr/bin/env python3
"""
SVP Transparency Dashboard — headless fetch + export

Fetches dashboard data from one source, applies the same fallback rules as the
web dashboard, and writes the JSON snapshot.

Usage:
    python main.py                                   # Sample data
    python main.py --source api --url https://...    # REST endpoint
    python main.py --source csv --csv-file gifts.csv # year,donations CSV
    python main.py --source csv --csv-file gifts.csv --strict  # exit 1 on fallback
"""

import argparse
import logging
import sys
from pathlib import Path

from config.settings import DEFAULT_API_KEY, DEFAULT_API_URL, LOG_LEVEL
from extractors.csv_upload import decode_upload
from extractors.registry import SOURCE_IDS
from loaders.dashboard_state import DashboardController
from loaders.snapshot_writer import summary_report, write_snapshot
from utils.errors import DashboardDataError, ValidationError
from utils.http_client import parse_custom_headers

logger = logging.getLogger("dashboard")


def setup_logging(level: str = LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(name)-20s | %(levelname)-7s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def read_csv_file(path: str | None) -> str:
    if not path:
        raise ValidationError("Please paste CSV data or upload a file.")
    try:
        payload = Path(path).read_bytes()
    except OSError as e:
        raise ValidationError(f"Cannot read CSV file {path}: {e.strerror}") from e
    return decode_upload(payload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fetch SVP dashboard data and export a JSON snapshot"
    )
    parser.add_argument(
        "--source", choices=SOURCE_IDS, default="mock",
        help="Data source to fetch from (default: mock)"
    )
    parser.add_argument(
        "--url", default=DEFAULT_API_URL,
        help="API endpoint for --source api"
    )
    parser.add_argument(
        "--csv-file", default=None,
        help="CSV file with year,donations columns for --source csv"
    )
    parser.add_argument(
        "--api-key", default=DEFAULT_API_KEY,
        help="Optional bearer token for the API source"
    )
    parser.add_argument(
        "--headers", default=None,
        help='Custom request headers as JSON, e.g. \'{"X-Org": "svp"}\''
    )
    parser.add_argument(
        "--output", type=Path, default=None,
        help="Snapshot path (default: data/output/svp_dashboard_data.json)"
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="Exit with status 1 when the fetch fails and sample data is used"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging()

    controller = DashboardController()
    logger.info("=" * 60)
    logger.info(f"Fetching dashboard data from: {args.source}")
    logger.info("=" * 60)

    try:
        headers = parse_custom_headers(args.headers)
        if args.source == "csv":
            params = read_csv_file(args.csv_file)
        elif args.source == "api":
            params = args.url
        else:
            params = None
    except DashboardDataError as e:
        result = controller.fail(args.source, e)
    else:
        result = controller.fetch(
            args.source, params, api_key=args.api_key, headers=headers
        )

    if not result.ok:
        logger.error(f"Fetch failed, exporting sample data instead: {result.error}")

    path = write_snapshot(controller.state, args.output)
    for line in summary_report(controller.state).splitlines():
        logger.info(line)
    logger.info(f"Output: {path}")

    if args.strict and not result.ok:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
