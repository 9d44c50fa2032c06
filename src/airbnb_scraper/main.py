# src/airbnb_scraper/main.py
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from airbnb_scraper.config import ScrapeOptions, resolve_output_format
from airbnb_scraper.logging import setup_logger
from airbnb_scraper.pipeline import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="airbnb-scraper",
        description="Scrape Airbnb listing pages and print them as CSV or JSON.",
    )
    parser.add_argument("urls", nargs="*", metavar="URL", help="Listing page URLs")

    fmt = parser.add_mutually_exclusive_group()
    fmt.add_argument("--csv", action="store_true", help="Print records as CSV")
    fmt.add_argument("--json", action="store_true", help="Print records as a JSON array")

    parser.add_argument("-v", "--verbose", action="store_true", help="Log each download to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.urls:
        parser.print_help(sys.stderr)
        return 1

    setup_logger(logging.INFO if args.verbose else logging.WARNING)

    options = ScrapeOptions(
        output_format=resolve_output_format(csv=args.csv, json=args.json),
        verbose=args.verbose,
    )
    result = asyncio.run(run(args.urls, options))

    if not result.ok:
        logger.error("%s", result.error)
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
