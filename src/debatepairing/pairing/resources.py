"""Adjudicator and venue assignment.

Binds adjudicators (possibly panels) and venues to the pairings of a round
in three ordered passes. Conflicts are absolute: an adjudicator is never
placed on a pairing involving a competitor from their conflict set.
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

from typing import List, Sequence

from debatepairing.exceptions import (
    ConflictExhaustionException,
    ResourceInsufficiencyException,
)
from debatepairing.models.engine_config import EngineConfig
from debatepairing.models.history import HistoryView
from debatepairing.models.pairing import Pairing
from debatepairing.models.roster import Adjudicator, Venue
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


def check_resources(
    required: int, adjudicators: Sequence[Adjudicator], venues: Sequence[Venue]
) -> None:
    """Fail unless both pools can cover ``required`` matches.

    Raises:
        ResourceInsufficiencyException: naming the pool and the exact shortfall
    """
    if len(adjudicators) < required:
        raise ResourceInsufficiencyException("adjudicators", required, len(adjudicators))
    if len(venues) < required:
        raise ResourceInsufficiencyException("venues", required, len(venues))


class ResourceAssignor:
    """Assigns adjudicators and venues to the matches of one round.

    This class is responsible for:
    - Giving every match one conflict-free primary adjudicator, hardest match first
    - Spreading the remaining adjudicators over panels
    - Sending each match to a venue its primary adjudicator knows
    """

    def __init__(self, history: HistoryView, config: EngineConfig):
        self.history = history
        self.config = config

    def readjudication_penalty(self, adjudicator: Adjudicator, pairing: Pairing) -> int:
        """Penalty growing with the square of prior exposure to each competitor."""
        return self.config.readjudication_penalty * self.history.readjudication_count(
            adjudicator.name, pairing.competitor_names()
        )

    def assign(
        self,
        pairings: List[Pairing],
        adjudicators: Sequence[Adjudicator],
        venues: Sequence[Venue],
    ) -> None:
        """Fill ``pairings`` in place, or raise without a partial result.

        BYE pairings in the list are left alone.

        Raises:
            ResourceInsufficiencyException: If either pool is smaller than
                the number of matches
            ConflictExhaustionException: If a match has no conflict-free
                adjudicator left in pass 1
        """
        matches = [p for p in pairings if not p.is_bye]
        check_resources(len(matches), adjudicators, venues)
        if not matches:
            return

        unused = self._assign_primaries(matches, adjudicators)
        self._assign_panels(matches, unused)
        self._assign_venues(matches, venues)

    def _assign_primaries(
        self, matches: List[Pairing], adjudicators: Sequence[Adjudicator]
    ) -> List[Adjudicator]:
        available = list(adjudicators)
        # stable sort: equal penalties keep optimizer order
        for pairing in sorted(matches, key=lambda p: p.penalty, reverse=True):
            names = pairing.competitor_names()
            eligible = [a for a in available if not a.has_conflict(names)]
            if not eligible:
                raise ConflictExhaustionException(pairing.label())
            chosen = min(eligible, key=lambda a: self.readjudication_penalty(a, pairing))
            cost = self.readjudication_penalty(chosen, pairing)
            pairing.adjudicators.append(chosen)
            pairing.penalty += cost
            available.remove(chosen)
            logger.debug(
                "Primary %s -> %s (re-adjudication penalty %d)",
                chosen.name,
                pairing.label(),
                cost,
            )
        return available

    def _assign_panels(
        self, matches: List[Pairing], unused: List[Adjudicator]
    ) -> None:
        for adjudicator in unused:
            options = [
                p for p in matches if not adjudicator.has_conflict(p.competitor_names())
            ]
            if not options:
                logger.info(
                    "%s is conflicted with every match and stays unused",
                    adjudicator.name,
                )
                continue
            target = min(options, key=lambda p: self._panel_cost(adjudicator, p))
            cost = self.readjudication_penalty(adjudicator, target)
            target.adjudicators.append(adjudicator)
            target.penalty += cost
            logger.debug("Panelist %s -> %s", adjudicator.name, target.label())

    def _panel_cost(self, adjudicator: Adjudicator, pairing: Pairing) -> int:
        return self.readjudication_penalty(
            adjudicator, pairing
        ) + self.config.panel_size_penalty * len(pairing.adjudicators)

    def _assign_venues(self, matches: List[Pairing], venues: Sequence[Venue]) -> None:
        remaining = list(venues)
        for pairing in matches:
            familiar = self.history.venues_of(pairing.primary_adjudicator.name)
            # max() keeps the first of equal counts, i.e. pool order
            venue = max(remaining, key=lambda v: familiar[v.name])
            pairing.venue = venue
            remaining.remove(venue)
            logger.debug("Venue %s -> %s", venue.name, pairing.label())
