"""BYE selection for odd-sized unit pools."""

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
from typing import List, Optional

from debatepairing.models.history import HistoryView
from debatepairing.models.pairing import Pairing
from debatepairing.models.unit import Unit
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


def select_bye(
    pool: List[Unit],
    history: HistoryView,
    exclude: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> Optional[Unit]:
    """Remove and return the unit sitting out, or None for an even pool.

    Candidates are ordered by their historical sit-out count, ties in random
    order. The first candidate whose key is not ``exclude`` is chosen; when
    every candidate is excluded the exclusion is waived, since every unit
    must get an assignment.

    Parameters
    ----------
    pool : list of Unit
        Units of the round. Modified in place when a BYE is taken.
    history : HistoryView
        Source of the sit-out counts.
    exclude : str, optional
        Key of a unit that already sat out earlier the same day.
    rng : random.Random, optional
        Random source for tie breaking.

    Returns
    -------
    Unit or None
    """
    if len(pool) % 2 == 0:
        return None
    rng = rng or random.Random()

    candidates = list(pool)
    rng.shuffle(candidates)
    candidates.sort(key=lambda u: history.for_unit(u).bye_count)

    chosen = next((u for u in candidates if u.key != exclude), None)
    if chosen is None:
        logger.warning(
            "Only %s is left for the BYE; waiving the repeat-BYE exclusion", exclude
        )
        chosen = candidates[0]

    pool.remove(chosen)
    logger.info(
        "BYE goes to %s (%d prior sit-outs)",
        chosen.key,
        history.for_unit(chosen).bye_count,
    )
    return chosen


def bye_pairing(unit: Unit, round_number: int) -> Pairing:
    """A BYE record: no opponent, adjudicator or venue."""
    return Pairing(round_number=round_number, side_a=unit, side_b=None)
