#!/usr/bin/env python3
"""
Starting QB Collector

Fetches each team's starting quarterback from ESPN's public API and writes
the snapshot the QB picker loads at startup.

Usage:
    python fetch_qb_data.py
    python fetch_qb_data.py --season 2025 --output data/qb_data.json
"""

import argparse
import logging
import sys
from pathlib import Path

from nflquiz.config import (
    get_api_delay,
    get_api_max_retries,
    get_api_timeout,
    get_qb_data_path,
    get_season,
)
from nflquiz.fetcher import ESPNQBFetcher
from nflquiz.logging_config import setup_logging
from nflquiz.utils import save_json


def main():
    parser = argparse.ArgumentParser(description="Fetch starting QB data from ESPN")
    parser.add_argument(
        "--season", "-y",
        type=int,
        default=None,
        help="NFL season year (defaults to config, then the current year)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output path for the QB snapshot (defaults to config qb_data_path)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to wait between teams",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging (overrides config log_level)",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Log to the console only",
    )

    args = parser.parse_args()

    logger = setup_logging(
        run_name="fetch_qb_data",
        level=logging.DEBUG if args.verbose else None,
        log_to_file=not args.no_log_file,
    )

    season = args.season or get_season()
    output_path = Path(args.output) if args.output else get_qb_data_path()
    delay = args.delay if args.delay is not None else get_api_delay()

    fetcher = ESPNQBFetcher(
        season=season,
        delay=delay,
        max_retries=get_api_max_retries(),
        timeout=get_api_timeout(),
    )
    snapshot = fetcher.fetch_all()

    if not snapshot.qbs:
        logger.error("No QBs resolved; keeping the existing snapshot")
        sys.exit(1)

    save_json(output_path, snapshot)
    logger.info(f"Data saved to: {output_path}")


if __name__ == "__main__":
    main()
