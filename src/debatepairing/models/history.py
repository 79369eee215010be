"""History data models: parsed feed rows and the per-run history view."""

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

import copy
from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, Optional, Tuple, Union

from debatepairing.models.unit import Unit


@dataclass(frozen=True)
class HistoryRecord:
    """One row of the history feed.

    A panel match appears as one row per adjudicator; all other fields of
    those rows are equal.

    Attributes:
        date: Event date, or None when the feed value was unreadable
        event_format: Format of the event
        round_number: Round within the event (1 for team events)
        competitor: Competitor identity; empty for malformed rows
        is_fallback: Whether the competitor debated as a fallback unit
        side: Side label, or the BYE label
        opponent: Opposing unit key, or the no-opponent marker
        adjudicator: Adjudicator identity, empty for BYEs
        venue: Venue identity, empty for BYEs
        date_text: Date cell as written in the feed
    """

    date: Optional[date]
    event_format: str
    round_number: int
    competitor: str
    is_fallback: bool = False
    side: str = ""
    opponent: str = ""
    adjudicator: str = ""
    venue: str = ""
    date_text: str = ""

    @property
    def date_key(self) -> Union[date, str]:
        """The parsed date, or the raw feed cell when it was unreadable."""
        return self.date if self.date is not None else self.date_text

    def match_key(self) -> Tuple:
        """Identify the real match this row belongs to, whatever the adjudicator."""
        return (
            self.date_key,
            self.event_format,
            self.round_number,
            self.competitor,
            self.side,
            self.opponent,
            self.venue,
        )


@dataclass
class CompetitorHistory:
    """Aggregated past record of one competitor."""

    bye_count: int = 0
    fallback_count: int = 0
    side_counts: Counter = field(default_factory=Counter)
    opponents: Counter = field(default_factory=Counter)
    adjudicators: Counter = field(default_factory=Counter)

    def side_imbalance(self, side_a: str, side_b: str) -> int:
        """Side-A appearances minus side-B appearances."""
        return self.side_counts[side_a] - self.side_counts[side_b]


@dataclass
class HistoryView:
    """Read-only per-run snapshot of the history feed.

    Attributes
    ----------
    competitors : dict of str to CompetitorHistory
        Record per competitor name.
    adjudicator_venues : dict of str to Counter
        Venues previously used, per adjudicator name.
    """

    competitors: Dict[str, CompetitorHistory] = field(default_factory=dict)
    adjudicator_venues: Dict[str, Counter] = field(default_factory=dict)

    def competitor(self, name: str) -> CompetitorHistory:
        """Return the record of ``name``, or an empty one. Never inserts."""
        record = self.competitors.get(name)
        return record if record is not None else CompetitorHistory()

    def record_for(self, name: str) -> CompetitorHistory:
        """Return the record of ``name``, creating it when missing."""
        if name not in self.competitors:
            self.competitors[name] = CompetitorHistory()
        return self.competitors[name]

    def for_unit(self, unit: Unit) -> CompetitorHistory:
        return self.competitor(unit.history_source or unit.members[0])

    def bye_count(self, name: str) -> int:
        return self.competitor(name).bye_count

    def encounters(self, unit_a: Unit, unit_b: Unit) -> int:
        """Prior meetings of two units, summed over both units' histories."""
        return (
            self.for_unit(unit_a).opponents[unit_b.key]
            + self.for_unit(unit_b).opponents[unit_a.key]
        )

    def readjudication_count(self, adjudicator: str, names: Iterable[str]) -> int:
        """Sum of squared prior exposures of ``adjudicator`` to each of ``names``."""
        return sum(self.competitor(n).adjudicators[adjudicator] ** 2 for n in names)

    def venues_of(self, adjudicator: str) -> Counter:
        return self.adjudicator_venues.get(adjudicator, Counter())

    def copy(self) -> "HistoryView":
        """Return a deep, independently mutable copy."""
        return copy.deepcopy(self)
