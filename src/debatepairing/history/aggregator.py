"""History aggregation.

Turns the flat history feed into per-competitor and per-adjudicator lookups
used as penalty weights by the pairing and resource steps, and folds a
freshly generated round into a private copy of those lookups.
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

from collections import Counter
from typing import Iterable, Set, Tuple

from debatepairing.models.engine_config import EngineConfig
from debatepairing.models.history import HistoryRecord, HistoryView
from debatepairing.models.pairing import Pairing
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


def build_history_view(
    records: Iterable[HistoryRecord], event_format: str, config: EngineConfig
) -> HistoryView:
    """Aggregate history-feed records of one format into a HistoryView.

    A match recorded as N rows (one per panel adjudicator) counts once for
    side occupancy, opponents and BYEs, and N times for re-adjudication.

    Parameters
    ----------
    records : iterable of HistoryRecord
        The full history feed. Rows of other formats are ignored.
    event_format : str
        Format being paired.
    config : EngineConfig
        Supplies the side and BYE labels.

    Returns
    -------
    HistoryView
        A fresh view; ``records`` are not modified.
    """
    view = HistoryView()
    seen_matches: Set[Tuple] = set()
    seen_venue_uses: Set[Tuple] = set()
    skipped = 0
    used = 0

    for record in records:
        if record.event_format != event_format:
            continue
        competitor = record.competitor.strip()
        if not competitor:
            skipped += 1
            continue
        used += 1
        history = view.record_for(competitor)

        if record.adjudicator:
            history.adjudicators[record.adjudicator] += 1
            if record.venue:
                venue_use = (
                    record.date_key,
                    record.round_number,
                    record.adjudicator,
                    record.venue,
                )
                if venue_use not in seen_venue_uses:
                    seen_venue_uses.add(venue_use)
                    view.adjudicator_venues.setdefault(
                        record.adjudicator, Counter()
                    )[record.venue] += 1

        match_key = record.match_key()
        if match_key in seen_matches:
            continue
        seen_matches.add(match_key)

        if record.is_fallback:
            history.fallback_count += 1
        if record.side == config.bye_label:
            history.bye_count += 1
        elif record.side in (config.side_a_label, config.side_b_label):
            history.side_counts[record.side] += 1
            if record.opponent and record.opponent != config.no_opponent_label:
                history.opponents[record.opponent] += 1
        else:
            logger.debug(
                "Unrecognised side %r for %s; only adjudication counted",
                record.side,
                competitor,
            )

    if skipped:
        logger.debug("Skipped %d history rows without a competitor", skipped)
    logger.info(
        "Built %s history from %d rows covering %d matches for %d competitors",
        event_format,
        used,
        len(seen_matches),
        len(view.competitors),
    )
    return view


def fold_round_into_history(
    view: HistoryView, pairings: Iterable[Pairing], config: EngineConfig
) -> HistoryView:
    """Return a copy of ``view`` as if ``pairings`` were already on record.

    Every panel adjudicator counts as a re-adjudication and a venue use.
    The input view is left untouched.
    """
    folded = view.copy()
    for pairing in pairings:
        if pairing.side_b is None:
            for member in pairing.side_a.members:
                record = folded.record_for(member)
                record.bye_count += 1
                if pairing.side_a.is_fallback:
                    record.fallback_count += 1
            continue

        sides = (
            (pairing.side_a, pairing.side_b, config.side_a_label),
            (pairing.side_b, pairing.side_a, config.side_b_label),
        )
        for unit, opponent, side_label in sides:
            for member in unit.members:
                record = folded.record_for(member)
                record.side_counts[side_label] += 1
                record.opponents[opponent.key] += 1
                if unit.is_fallback:
                    record.fallback_count += 1
                for adjudicator in pairing.adjudicators:
                    record.adjudicators[adjudicator.name] += 1

        if pairing.venue is not None:
            for adjudicator in pairing.adjudicators:
                folded.adjudicator_venues.setdefault(adjudicator.name, Counter())[
                    pairing.venue.name
                ] += 1
    return folded
