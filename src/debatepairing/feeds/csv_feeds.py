"""Row-oriented CSV feeds.

Reads the roster, attendance and history feeds into models, and writes
the generated event and history rows back out.
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

import csv
import re
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set, Union

from dateutil import parser as date_parser

from debatepairing.constants import (
    COL_ADJUDICATOR,
    COL_COMPETITOR,
    COL_CONFLICTS,
    COL_DATE,
    COL_FALLBACK,
    COL_FORMAT,
    COL_NAME,
    COL_NOVICE,
    COL_OPPONENT,
    COL_PARTNER,
    COL_ROUND,
    COL_SIDE,
    COL_STATUS,
    COL_VENUE,
    STATUS_PRESENT,
    TRUTHY_VALUES,
)
from debatepairing.exceptions import FeedException
from debatepairing.models.history import HistoryRecord
from debatepairing.models.roster import Adjudicator, Competitor, Venue
from debatepairing.type_hints import OutRows, Row
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)

_CONFLICT_SPLIT = re.compile(r"[;,]")


def _cell(row: Row, column: str) -> str:
    value = row.get(column)
    return value.strip() if value else ""


def parse_flag(value: Optional[str]) -> bool:
    """Interpret a boolean feed cell ("1", "true", "yes", "y", "x")."""
    return bool(value) and value.strip().lower() in TRUTHY_VALUES


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse a feed date leniently; unreadable values give None."""
    if not value or not value.strip():
        return None
    try:
        return date_parser.parse(value.strip()).date()
    except (ValueError, OverflowError):
        logger.debug("Unreadable date %r", value)
        return None


def read_rows(path: Union[str, Path]) -> List[Row]:
    """Read every row of a CSV feed with a header line."""
    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            return list(csv.DictReader(f))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise FeedException(f"Cannot read feed {path}: {e}") from e


def parse_competitors(rows: Iterable[Row]) -> List[Competitor]:
    competitors = []
    for row in rows:
        name = _cell(row, COL_NAME)
        if not name:
            continue
        competitors.append(
            Competitor(
                name=name,
                event_format=_cell(row, COL_FORMAT),
                partner=_cell(row, COL_PARTNER) or None,
                is_novice=parse_flag(row.get(COL_NOVICE)),
            )
        )
    return competitors


def parse_adjudicators(rows: Iterable[Row]) -> List[Adjudicator]:
    """Parse adjudicator rows; the conflict list may use ``,`` or ``;``."""
    adjudicators = []
    for row in rows:
        name = _cell(row, COL_NAME)
        if not name:
            continue
        conflicts = frozenset(
            entry.strip()
            for entry in _CONFLICT_SPLIT.split(_cell(row, COL_CONFLICTS))
            if entry.strip()
        )
        adjudicators.append(
            Adjudicator(
                name=name, event_format=_cell(row, COL_FORMAT), conflicts=conflicts
            )
        )
    return adjudicators


def parse_venues(rows: Iterable[Row]) -> List[Venue]:
    return [
        Venue(name=_cell(row, COL_NAME), event_format=_cell(row, COL_FORMAT))
        for row in rows
        if _cell(row, COL_NAME)
    ]


def present_names(rows: Iterable[Row]) -> Set[str]:
    """Names marked present; absent and unknown rows are invisible."""
    return {
        _cell(row, COL_NAME)
        for row in rows
        if _cell(row, COL_STATUS).lower() == STATUS_PRESENT and _cell(row, COL_NAME)
    }


def parse_history(rows: Iterable[Row]) -> List[HistoryRecord]:
    """Parse history rows.

    Rows are kept even when malformed; the aggregator decides what to skip.
    An unreadable round number becomes 0.
    """
    records = []
    for row in rows:
        try:
            round_number = int(_cell(row, COL_ROUND) or 0)
        except ValueError:
            round_number = 0
        records.append(
            HistoryRecord(
                date=parse_date(row.get(COL_DATE)),
                date_text=_cell(row, COL_DATE),
                event_format=_cell(row, COL_FORMAT),
                round_number=round_number,
                competitor=_cell(row, COL_COMPETITOR),
                is_fallback=parse_flag(row.get(COL_FALLBACK)),
                side=_cell(row, COL_SIDE),
                opponent=_cell(row, COL_OPPONENT),
                adjudicator=_cell(row, COL_ADJUDICATOR),
                venue=_cell(row, COL_VENUE),
            )
        )
    return records


def write_rows(
    path: Union[str, Path], rows: OutRows, fieldnames: Sequence[str]
) -> None:
    """Write ``rows`` as CSV with a header line."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(fieldnames))
            writer.writeheader()
            writer.writerows(rows)
    except OSError as e:
        raise FeedException(f"Cannot write {path}: {e}") from e
    logger.info("Wrote %d rows to %s", len(rows), path)
