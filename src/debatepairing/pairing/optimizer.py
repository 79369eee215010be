"""Round pairing optimizer.

Bounded randomized local search over complete pairings of an even unit
pool. Constraints here are all soft, so the best set found within the
budget is returned even when its penalty is not zero.
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

from debatepairing.exceptions import InvalidPairingException
from debatepairing.models.engine_config import EngineConfig
from debatepairing.models.history import HistoryView
from debatepairing.models.pairing import Pairing
from debatepairing.models.unit import Unit
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)

# (side_a, side_b, penalty)
_Candidate = Tuple[Unit, Unit, int]


def pair_penalty(
    unit_a: Unit, unit_b: Unit, history: HistoryView, config: EngineConfig
) -> int:
    """Penalty of pitting two units against each other."""
    penalty = 0
    if unit_a.is_novice != unit_b.is_novice:
        penalty += config.tier_mismatch_penalty
    penalty += config.rematch_penalty * history.encounters(unit_a, unit_b)
    return penalty


def orient_sides(
    first: Unit,
    second: Unit,
    history: HistoryView,
    config: EngineConfig,
    rng: random.Random,
) -> Tuple[Unit, Unit]:
    """Order two units as (side A, side B) to even out their side exposure.

    Each orientation is scored by the absolute side imbalance both units
    would have afterwards; the lower one wins and a tie is a coin flip.
    """
    imbalance_first = history.for_unit(first).side_imbalance(
        config.side_a_label, config.side_b_label
    )
    imbalance_second = history.for_unit(second).side_imbalance(
        config.side_a_label, config.side_b_label
    )
    first_on_a = abs(imbalance_first + 1) + abs(imbalance_second - 1)
    second_on_a = abs(imbalance_second + 1) + abs(imbalance_first - 1)
    if first_on_a < second_on_a:
        return first, second
    if second_on_a < first_on_a:
        return second, first
    return (first, second) if rng.random() < 0.5 else (second, first)


def _pair_consecutive(
    order: Sequence[Unit],
    history: HistoryView,
    config: EngineConfig,
    rng: random.Random,
) -> Tuple[List[_Candidate], int]:
    candidates: List[_Candidate] = []
    total = 0
    for i in range(0, len(order), 2):
        side_a, side_b = orient_sides(order[i], order[i + 1], history, config, rng)
        penalty = pair_penalty(side_a, side_b, history, config)
        candidates.append((side_a, side_b, penalty))
        total += penalty
    return candidates, total


def optimize_round(
    units: Sequence[Unit],
    history: HistoryView,
    config: EngineConfig,
    round_number: int = 1,
    rng: Optional[random.Random] = None,
    iterations: Optional[int] = None,
) -> List[Pairing]:
    """Pair every unit of an even pool exactly once.

    Parameters
    ----------
    units : sequence of Unit
        The pool, BYE already removed.
    history : HistoryView
        Source of side exposure and prior encounters.
    config : EngineConfig
        Penalty weights and default search budget.
    round_number : int
        Round tag for the produced pairings.
    rng : random.Random, optional
        Random source; an unseeded one is used when omitted.
    iterations : int, optional
        Overrides ``config.search_iterations``.

    Returns
    -------
    list of Pairing
        ``len(units) // 2`` pairings, each tagged with its penalty.

    Raises
    ------
    InvalidPairingException
        If the pool size is odd.
    """
    if len(units) % 2:
        raise InvalidPairingException(
            f"Cannot pair an odd pool of {len(units)} units; select a BYE first"
        )
    if not units:
        return []
    rng = rng or random.Random()
    budget = iterations if iterations is not None else config.search_iterations

    order = list(units)
    best: Optional[List[_Candidate]] = None
    best_total = 0
    tried = 0
    for tried in range(1, max(budget, 1) + 1):
        rng.shuffle(order)
        candidates, total = _pair_consecutive(order, history, config, rng)
        if best is None or total < best_total:
            best, best_total = candidates, total
            logger.debug("Iteration %d: new best penalty %d", tried, total)
        if best_total == 0:
            break

    pairings = [
        Pairing(round_number=round_number, side_a=a, side_b=b, penalty=penalty)
        for a, b, penalty in best
    ]
    logger.info(
        "Round %d: paired %d units after %d iterations, total penalty %d",
        round_number,
        len(units),
        tried,
        best_total,
    )
    for pairing in pairings:
        if pairing.penalty:
            logger.info(
                "Accepted compromise %s with penalty %d",
                pairing.label(),
                pairing.penalty,
            )
    return pairings
