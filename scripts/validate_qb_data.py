#!/usr/bin/env python3
"""
QB Snapshot Validation Script

Checks a qb_data.json snapshot against the team/division table and
reports problems for review.

Usage:
    python scripts/validate_qb_data.py
    python scripts/validate_qb_data.py --path data/qb_data.json
"""

import argparse
import sys
from pathlib import Path

from nflquiz.config import get_qb_data_path
from nflquiz.quarterbacks import QBTable
from nflquiz.schemas import QBDataFile
from nflquiz.utils import validate_json_file
from nflquiz.validators import missing_teams, validate_division_table, validate_qb_table


def main():
    parser = argparse.ArgumentParser(description="Validate the QB snapshot")
    parser.add_argument(
        "--path", "-p",
        default=None,
        help="Path to qb_data.json (defaults to config qb_data_path)",
    )
    args = parser.parse_args()

    path = Path(args.path) if args.path else get_qb_data_path()

    snapshot, error = validate_json_file(path, QBDataFile)
    if error:
        print(f"❌ Could not load {path}: {error}")
        sys.exit(1)
    table = QBTable.from_snapshot(snapshot)

    errors = validate_division_table() + validate_qb_table(table)
    missing = missing_teams(table)

    print(f"Snapshot: {path}")
    print(f"Last updated: {table.last_updated}")
    print(f"QBs: {len(table)}")

    if missing:
        print(f"⚠️  Teams without a QB: {', '.join(missing)}")

    if errors:
        print(f"\n❌ {len(errors)} problem(s) found:")
        for error in errors:
            print(f"  - {error}")
        sys.exit(1)

    print("✓ Snapshot is valid")


if __name__ == "__main__":
    main()
