"""Roster data models: competitors, adjudicators and venues."""

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
from typing import AbstractSet, FrozenSet, Iterable, List, Optional


@dataclass(frozen=True)
class Competitor:
    """A competitor on the roster.

    Attributes:
        name: Unique identity of the competitor
        event_format: Format the competitor is registered for
        partner: Declared partner name (team format only)
        is_novice: Skill-tier flag, used only as a soft pairing preference
    """

    name: str
    event_format: str
    partner: Optional[str] = None
    is_novice: bool = False


@dataclass(frozen=True)
class Adjudicator:
    """An adjudicator and the competitors they may never evaluate."""

    name: str
    event_format: str
    conflicts: FrozenSet[str] = field(default_factory=frozenset)

    def has_conflict(self, names: Iterable[str]) -> bool:
        """Check whether any of ``names`` is in this adjudicator's conflict set."""
        return not self.conflicts.isdisjoint(names)


@dataclass(frozen=True)
class Venue:
    name: str
    event_format: str


@dataclass
class Roster:
    """All roster rows, across formats.

    Attributes:
        competitors: Registered competitors
        adjudicators: Registered adjudicators
        venues: Registered venues
    """

    competitors: List[Competitor] = field(default_factory=list)
    adjudicators: List[Adjudicator] = field(default_factory=list)
    venues: List[Venue] = field(default_factory=list)

    def for_format(self, event_format: str) -> "Roster":
        """Return the part of the roster registered for ``event_format``."""
        return Roster(
            competitors=[c for c in self.competitors if c.event_format == event_format],
            adjudicators=[
                a for a in self.adjudicators if a.event_format == event_format
            ],
            venues=[v for v in self.venues if v.event_format == event_format],
        )

    def present(self, names: AbstractSet[str]) -> "Roster":
        """Return the people in ``names``. Venues are always kept."""
        return Roster(
            competitors=[c for c in self.competitors if c.name in names],
            adjudicators=[a for a in self.adjudicators if a.name in names],
            venues=list(self.venues),
        )

    @property
    def competitor_names(self) -> List[str]:
        return [c.name for c in self.competitors]
