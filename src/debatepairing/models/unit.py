"""Unit data class: the entity actually paired in a round."""

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

from dataclasses import dataclass
from typing import Iterable, Tuple

from debatepairing.constants import UNIT_KEY_DELIMITER
from debatepairing.models.engine_config import EngineConfig


def make_unit_key(members: Iterable[str], delimiter: str = UNIT_KEY_DELIMITER) -> str:
    """Build the canonical key of a unit from its member names.

    Names are sorted before joining, so the key does not depend on the
    order in which the members were found.
    """
    return delimiter.join(sorted(members))


@dataclass(frozen=True)
class Unit:
    """A competitor, a partnered team, or a one-member fallback.

    Attributes
    ----------
    key : str
        Canonical identity, see :func:`make_unit_key`.
    members : tuple of str
        Member names, sorted.
    is_novice : bool
        Skill-tier flag shared by the members.
    is_fallback : bool
        True for a one-member unit formed because a partner is absent.
    history_source : str
        Member whose history the unit inherits.
    """

    key: str
    members: Tuple[str, ...]
    is_novice: bool = False
    is_fallback: bool = False
    history_source: str = ""

    def display_name(self, config: EngineConfig) -> str:
        if self.is_fallback:
            return self.key + config.fallback_marker
        return self.key
