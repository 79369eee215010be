"""Pairing data class."""

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

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from debatepairing.constants import (
    COL_ADJUDICATOR,
    COL_ADJUDICATORS,
    COL_COMPETITOR,
    COL_DATE,
    COL_FALLBACK,
    COL_FORMAT,
    COL_OPPONENT,
    COL_ROUND,
    COL_SIDE,
    COL_VENUE,
)
from debatepairing.models.engine_config import EngineConfig
from debatepairing.models.roster import Adjudicator, Venue
from debatepairing.models.unit import Unit
from debatepairing.type_hints import OutRow, OutRows


@dataclass
class Pairing:
    """One match of a round, or a BYE.

    Created empty by the round optimizer and filled in by the resource
    assignor. ``side_b`` of None is the "no-opponent" sentinel.

    Attributes:
        round_number: Round within the event (1-indexed)
        side_a: Unit on side A
        side_b: Unit on side B, or None for a BYE
        adjudicators: Assigned adjudicators, primary first
        venue: Assigned venue, or None
        penalty: Running penalty of the pairing
    """

    round_number: int
    side_a: Unit
    side_b: Optional[Unit] = None
    adjudicators: List[Adjudicator] = field(default_factory=list)
    venue: Optional[Venue] = None
    penalty: int = 0

    @property
    def is_bye(self) -> bool:
        return self.side_b is None

    @property
    def primary_adjudicator(self) -> Optional[Adjudicator]:
        return self.adjudicators[0] if self.adjudicators else None

    def competitor_names(self) -> List[str]:
        """All competitor names taking part in this pairing."""
        names = list(self.side_a.members)
        if self.side_b is not None:
            names.extend(self.side_b.members)
        return names

    def label(self) -> str:
        if self.side_b is None:
            return f"{self.side_a.key} (BYE)"
        return f"{self.side_a.key} vs {self.side_b.key}"

    def to_event_row(self, config: EngineConfig, include_round: bool = False) -> OutRow:
        """Row of the generated-event table."""
        row: OutRow = {}
        if include_round:
            row[COL_ROUND] = str(self.round_number)
        row[config.side_a_label] = self.side_a.display_name(config)
        row[config.side_b_label] = (
            self.side_b.display_name(config)
            if self.side_b is not None
            else config.no_opponent_label
        )
        row[COL_ADJUDICATORS] = config.list_delimiter.join(
            a.name for a in self.adjudicators
        )
        row[COL_VENUE] = self.venue.name if self.venue else ""
        return row

    def to_history_rows(
        self, config: EngineConfig, event_date: date, event_format: str
    ) -> OutRows:
        """History-feed rows: one per competitor per adjudicator.

        A BYE, or a match without adjudicators, yields one row per competitor.
        """
        sides = [(self.side_a, self.side_b, config.side_a_label)]
        if self.side_b is not None:
            sides.append((self.side_b, self.side_a, config.side_b_label))

        adjudicator_names = [a.name for a in self.adjudicators] or [""]
        rows: OutRows = []
        for unit, opponent, side_label in sides:
            if opponent is None:
                side_label = config.bye_label
                opponent_key = config.no_opponent_label
            else:
                opponent_key = opponent.key
            for member in unit.members:
                for adjudicator in adjudicator_names:
                    rows.append(
                        {
                            COL_DATE: event_date.isoformat(),
                            COL_FORMAT: event_format,
                            COL_ROUND: str(self.round_number),
                            COL_COMPETITOR: member,
                            COL_FALLBACK: "1" if unit.is_fallback else "0",
                            COL_SIDE: side_label,
                            COL_OPPONENT: opponent_key,
                            COL_ADJUDICATOR: adjudicator,
                            COL_VENUE: self.venue.name if self.venue else "",
                        }
                    )
        return rows
