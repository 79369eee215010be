"""Command-line interface for Debate Pairing.

Reads the roster, attendance and history feeds, runs the engine, and writes
the generated event and the new history rows. Nothing is written unless the
whole run succeeds.
"""

# Debate Pairing
# Copyright (C) 2025  Debate Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import dataclasses
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from debatepairing.constants import (
    EVENT_FILE_NAME,
    HISTORY_COLUMNS,
    NEW_HISTORY_FILE_NAME,
)
from debatepairing.engine import PairingEngine
from debatepairing.exceptions import DebatePairingException, FeedException
from debatepairing.feeds import (
    parse_adjudicators,
    parse_competitors,
    parse_date,
    parse_history,
    parse_venues,
    present_names,
    read_rows,
    write_rows,
)
from debatepairing.models.engine_config import EngineConfig, load_config
from debatepairing.models.roster import Roster
from debatepairing.utils import set_package_level, setup_logger

logger = setup_logger(__name__)


def parse_event_date(value: str) -> date:
    """argparse type for ``--date``."""
    parsed = parse_date(value)
    if parsed is None:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}'")
    return parsed


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="debatepairing",
        description="Generate sides, adjudicators and venues for a debate event",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Team event
  debatepairing --format Team --competitors competitors.csv \\
      --adjudicators adjudicators.csv --venues venues.csv \\
      --attendance attendance.csv --history history.csv --output-dir out

  # Two-round single event with a fixed seed
  debatepairing --format Single ... --seed 7
        """,
    )

    parser.add_argument("--format", required=True, help="Event format to pair")
    parser.add_argument("--competitors", required=True, help="Competitor roster CSV")
    parser.add_argument("--adjudicators", required=True, help="Adjudicator roster CSV")
    parser.add_argument("--venues", required=True, help="Venue roster CSV")
    parser.add_argument("--attendance", required=True, help="Attendance CSV")
    parser.add_argument("--history", help="History CSV (omit for a first event)")
    parser.add_argument(
        "--date",
        type=parse_event_date,
        help="Event date written to the new history rows (default: today)",
    )

    parser.add_argument("--config", help="Load configuration from JSON file")
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument(
        "--iterations", type=int, help="Search budget of the pairing optimizer"
    )

    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory receiving event.csv and history_new.csv (default: .)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser


def build_config(args: argparse.Namespace) -> EngineConfig:
    config = load_config(args.config) if args.config else EngineConfig()
    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.iterations is not None:
        overrides["search_iterations"] = args.iterations
    return dataclasses.replace(config, **overrides) if overrides else config


def run(args: argparse.Namespace) -> int:
    config = build_config(args)
    roster = Roster(
        competitors=parse_competitors(read_rows(args.competitors)),
        adjudicators=parse_adjudicators(read_rows(args.adjudicators)),
        venues=parse_venues(read_rows(args.venues)),
    )
    present = present_names(read_rows(args.attendance))
    history = parse_history(read_rows(args.history)) if args.history else []

    result = PairingEngine(config).run(
        args.format, roster, present, history, event_date=args.date
    )

    output_dir = Path(args.output_dir)
    outputs = [
        (output_dir / EVENT_FILE_NAME, result.event_rows, result.event_columns),
        (output_dir / NEW_HISTORY_FILE_NAME, result.history_rows, HISTORY_COLUMNS),
    ]
    # both files appear together or not at all
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for path, rows, columns in outputs:
            write_rows(path.with_suffix(".tmp"), rows, columns)
        for path, _, _ in outputs:
            path.with_suffix(".tmp").replace(path)
    except OSError as e:
        raise FeedException(f"Cannot write output to {output_dir}: {e}") from e
    finally:
        for path, _, _ in outputs:
            path.with_suffix(".tmp").unlink(missing_ok=True)
    logger.info(
        "Generated %d pairings with %d warnings",
        len(result.pairings),
        len(result.warnings),
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_package_level(logging.DEBUG)

    try:
        return run(args)
    except DebatePairingException as e:
        logger.error("Pairing failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
