"""Unit formation: turning present competitors into the entities paired."""

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

from typing import Callable, Dict, Iterable, List, Sequence, Set

from debatepairing.models.engine_config import EngineConfig
from debatepairing.models.history import HistoryView
from debatepairing.models.roster import Competitor
from debatepairing.models.unit import Unit, make_unit_key
from debatepairing.type_hints import InheritanceRule
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


def fewest_byes(members: Sequence[str], bye_count: Callable[[str], int]) -> str:
    """Inherit from the member with the fewest sit-outs, ties broken by name."""
    return min(members, key=lambda name: (bye_count(name), name))


def form_units(
    competitors: Iterable[Competitor],
    history: HistoryView,
    config: EngineConfig,
    inherit: InheritanceRule = fewest_byes,
) -> List[Unit]:
    """Form team-format units from the present competitors.

    Two competitors become a team when both are present and each declares
    the other as partner. Anyone else becomes a one-member fallback unit.
    Competitors are visited in name order, so the result does not depend
    on the order of the roster rows.

    Args:
        competitors: Present team-format competitors
        history: History used to pick which member's record a unit inherits
        config: Supplies the unit key delimiter
        inherit: Rule choosing the inherited member

    Returns:
        Units sorted by key
    """
    by_name: Dict[str, Competitor] = {c.name: c for c in competitors}
    claimed: Set[str] = set()
    units: List[Unit] = []

    for name in sorted(by_name):
        if name in claimed:
            continue
        competitor = by_name[name]
        partner = by_name.get(competitor.partner) if competitor.partner else None
        if (
            partner is not None
            and partner.name not in claimed
            and partner.name != name
            and partner.partner == name
        ):
            members = tuple(sorted((name, partner.name)))
            claimed.update(members)
            units.append(
                Unit(
                    key=make_unit_key(members, config.unit_key_delimiter),
                    members=members,
                    is_novice=competitor.is_novice or partner.is_novice,
                    is_fallback=False,
                    history_source=inherit(members, history.bye_count),
                )
            )
            continue

        claimed.add(name)
        if competitor.partner:
            logger.info(
                "%s debates solo: partner %s is not available", name, competitor.partner
            )
        units.append(
            Unit(
                key=make_unit_key((name,), config.unit_key_delimiter),
                members=(name,),
                is_novice=competitor.is_novice,
                is_fallback=True,
                history_source=name,
            )
        )

    units.sort(key=lambda u: u.key)
    logger.info(
        "Formed %d units (%d fallback) from %d competitors",
        len(units),
        sum(1 for u in units if u.is_fallback),
        len(by_name),
    )
    return units


def single_units(competitors: Iterable[Competitor]) -> List[Unit]:
    """One unit per competitor, for the single format."""
    return sorted(
        (
            Unit(
                key=c.name,
                members=(c.name,),
                is_novice=c.is_novice,
                is_fallback=False,
                history_source=c.name,
            )
            for c in competitors
        ),
        key=lambda u: u.key,
    )
