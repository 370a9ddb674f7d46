#!/usr/bin/env python3
"""
Golf League Leaderboard CLI

Fetches the published league sheet (CSV export), extracts the leaderboard
and prints it. Optionally writes the snapshot as JSON for the web page.

Usage:
    python leaderboard.py
    python leaderboard.py --groups
    python leaderboard.py --input export.csv --output web/data/leaderboard.json
"""

import argparse
import logging
import sys
from pathlib import Path

from golfleague import (
    FetchError,
    build_snapshot,
    get_config,
    load_config,
    load_leaderboard,
    render_groups_text,
    render_text,
    snapshot_to_file,
    validate_snapshot,
)
from golfleague.logging_config import setup_logging
from golfleague.utils import save_model

ERROR_MESSAGE = 'Error loading leaderboard data. Please try refreshing.'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Golf League Leaderboard")
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to league config JSON (defaults to data/league_config.json)",
    )
    parser.add_argument(
        "--url", "-u",
        default=None,
        help="Override the sheet export URL",
    )
    parser.add_argument(
        "--input", "-i",
        default=None,
        help="Read a saved CSV export instead of fetching the sheet",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the leaderboard snapshot as JSON to this path",
    )
    parser.add_argument(
        "--groups", "-g",
        action="store_true",
        help="Print one table per group instead of the overall leaderboard",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Also write a timestamped log file into this directory",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger = setup_logging(
        level=logging.WARNING if args.quiet else logging.INFO,
        log_dir=Path(args.log_dir) if args.log_dir else None,
    )

    config = load_config(args.config) if args.config else get_config()
    if args.url:
        config = config.model_copy(update={'sheet_url': args.url})

    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            print(f"❌ CSV export not found: {input_path}")
            return 1
        snapshot = build_snapshot(input_path.read_text(encoding='utf-8'), config)
    else:
        try:
            snapshot = load_leaderboard(config)
        except FetchError:
            print(ERROR_MESSAGE)
            return 1

    for warning in validate_snapshot(snapshot, config):
        logger.warning(warning)

    if args.groups:
        print(render_groups_text(snapshot, config))
    else:
        print(render_text(snapshot, config))

    if args.output:
        save_model(args.output, snapshot_to_file(snapshot, config))
        logger.info(f'Leaderboard saved: {args.output}')

    return 0


if __name__ == "__main__":
    sys.exit(main())
