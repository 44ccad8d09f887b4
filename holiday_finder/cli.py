#!/usr/bin/env python3
"""
CLI tool to look up public holidays.

Usage:
    holiday-finder countries
    holiday-finder search --country US [--year 2025]

Options:
    --country, -c   ISO 3166-1 alpha-2 country code
    --year, -y      Year to search (default: current year)
    --base-url      Override the Nager.Date API base URL
"""

import argparse
import sys
from datetime import date
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from holiday_finder.core.logging_config import setup_logging
from holiday_finder.services.holiday_search import HolidaySearch, SearchOutcome
from holiday_finder.services.nager_service import NagerDateService
from holiday_finder.services.page import Page
from holiday_finder.services.page_setup import initialize_page
from holiday_finder.services.render import render_results_text

SUCCESS_OUTCOMES = {SearchOutcome.FOUND, SearchOutcome.EMPTY}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="holiday-finder",
        description="Look up public holidays via the Nager.Date API"
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Nager.Date API base URL (default: NAGER_API_BASE_URL setting)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL env var or INFO)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("countries", help="List supported countries")

    search = subparsers.add_parser("search", help="Show holidays for a country and year")
    search.add_argument(
        "--country", "-c",
        default="",
        help="Country code, e.g. US"
    )
    search.add_argument(
        "--year", "-y",
        default=None,
        help="Year (default: current year)"
    )
    return parser


def cmd_countries(service: NagerDateService) -> int:
    page = initialize_page(service)
    options = [o for o in page.select().options if o.value or o.disabled]
    for option in options:
        if option.disabled:
            print(option.label)
            return 1
        print(f"{option.value}  {option.label}")
    return 0


def cmd_search(service: NagerDateService, country: str, year: Optional[str]) -> int:
    page = Page.build()
    page.select().value = country.upper()
    page.input().value = year if year is not None else str(date.today().year)

    outcome = HolidaySearch(page, service).search()
    for line in render_results_text(page.results()):
        print(line)

    return 0 if outcome in SUCCESS_OUTCOMES else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(json_format=False, level=args.log_level)

    service = NagerDateService(base_url=args.base_url)

    if args.command == "countries":
        return cmd_countries(service)
    return cmd_search(service, args.country, args.year)


if __name__ == "__main__":
    sys.exit(main())
