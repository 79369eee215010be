"""Round generation for the team and single formats.

This module sequences BYE selection, pairing optimization and resource
assignment for one round, and runs the two-round day of the single format
against a simulated history in which round one is already on record.
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

import random
from typing import List, Optional, Sequence, Tuple

from debatepairing.history.aggregator import fold_round_into_history
from debatepairing.models.engine_config import EngineConfig
from debatepairing.models.history import HistoryView
from debatepairing.models.pairing import Pairing
from debatepairing.models.roster import Adjudicator, Competitor, Venue
from debatepairing.models.unit import Unit
from debatepairing.pairing.bye import bye_pairing, select_bye
from debatepairing.pairing.optimizer import optimize_round
from debatepairing.pairing.resources import ResourceAssignor, check_resources
from debatepairing.pairing.units import fewest_byes, form_units, single_units
from debatepairing.type_hints import InheritanceRule
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


def generate_round(
    units: Sequence[Unit],
    adjudicators: Sequence[Adjudicator],
    venues: Sequence[Venue],
    history: HistoryView,
    config: EngineConfig,
    round_number: int = 1,
    exclude: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[List[Pairing], Optional[Unit]]:
    """Produce the complete, resourced pairings of one round.

    Args:
        units: Every unit taking part in the round
        adjudicators: Full adjudicator pool for the round
        venues: Full venue pool for the round
        history: History the round is paired against
        config: Engine configuration
        round_number: Round tag (1-indexed)
        exclude: Key of a unit that may not take the BYE unless it is the only one left
        rng: Random source

    Returns:
        Tuple of (pairings with the BYE last, BYE unit or None)

    Raises:
        ResourceInsufficiencyException: Before any pairing work, when a pool is too small
        ConflictExhaustionException: When a match has no conflict-free adjudicator
    """
    rng = rng or config.make_rng()
    check_resources(len(units) // 2, adjudicators, venues)

    pool = list(units)
    bye_unit = select_bye(pool, history, exclude=exclude, rng=rng)
    pairings = optimize_round(pool, history, config, round_number=round_number, rng=rng)
    ResourceAssignor(history, config).assign(pairings, adjudicators, venues)
    if bye_unit is not None:
        pairings.append(bye_pairing(bye_unit, round_number))
    return pairings, bye_unit


def generate_team_event(
    competitors: Sequence[Competitor],
    adjudicators: Sequence[Adjudicator],
    venues: Sequence[Venue],
    history: HistoryView,
    config: EngineConfig,
    rng: Optional[random.Random] = None,
    inherit: InheritanceRule = fewest_byes,
) -> List[Pairing]:
    """Form partner teams and pair the single round of a team event."""
    units = form_units(competitors, history, config, inherit=inherit)
    pairings, _ = generate_round(
        units, adjudicators, venues, history, config, round_number=1, rng=rng
    )
    return pairings


def generate_two_round_event(
    competitors: Sequence[Competitor],
    adjudicators: Sequence[Adjudicator],
    venues: Sequence[Venue],
    history: HistoryView,
    config: EngineConfig,
    rng: Optional[random.Random] = None,
) -> List[Pairing]:
    """Pair both rounds of a single-format day.

    Round two is paired against a private copy of ``history`` with round
    one folded in, and round one's BYE recipient is excluded from the
    second BYE when anyone else can take it. Both rounds draw on the full
    adjudicator and venue pools; reuse is discouraged only by the
    re-adjudication penalty.

    Returns:
        Round one's pairings followed by round two's
    """
    rng = rng or config.make_rng()
    units = single_units(competitors)
    # Both rounds need the same resources; fail before round one is built.
    check_resources(len(units) // 2, adjudicators, venues)

    first, first_bye = generate_round(
        units, adjudicators, venues, history, config, round_number=1, rng=rng
    )
    simulated = fold_round_into_history(history, first, config)
    second, _ = generate_round(
        units,
        adjudicators,
        venues,
        simulated,
        config,
        round_number=2,
        exclude=first_bye.key if first_bye else None,
        rng=rng,
    )
    return first + second
