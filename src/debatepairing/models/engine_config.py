"""EngineConfig data class."""

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

import json
import random
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from debatepairing.constants import (
    BYE_LABEL,
    FALLBACK_MARKER,
    FORMAT_SINGLE,
    FORMAT_TEAM,
    LIST_DELIMITER,
    NO_OPPONENT,
    PANEL_SIZE_PENALTY,
    READJUDICATION_PENALTY,
    REMATCH_PENALTY,
    SEARCH_ITERATIONS,
    SIDE_A,
    SIDE_B,
    TIER_MISMATCH_PENALTY,
    UNIT_KEY_DELIMITER,
)
from debatepairing.exceptions import InvalidConfigurationException

_INT_FIELDS = (
    "tier_mismatch_penalty",
    "rematch_penalty",
    "readjudication_penalty",
    "panel_size_penalty",
    "search_iterations",
)


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid weight or count
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class EngineConfig:
    """Labels, penalty weights and search budget for one engine run.

    A single immutable value is threaded through every engine call.

    Attributes
    ----------
    side_a_label, side_b_label : str
        Names of the two opposing sides.
    bye_label : str
        Side recorded for a unit sitting out a round.
    no_opponent_label : str
        Marker written in place of the side-B unit of a BYE.
    fallback_marker : str
        Suffix shown after the name of a one-member fallback unit.
    unit_key_delimiter : str
        Joins the sorted member names of a unit into its key.
    list_delimiter : str
        Joins adjudicator panels in the event table.
    team_format, single_format : str
        Format names as they appear in the feeds.
    tier_mismatch_penalty : int
        Added to a pairing whose units differ in skill tier.
    rematch_penalty : int
        Added per prior encounter between the two units.
    readjudication_penalty : int
        Multiplies the squared prior exposure of an adjudicator to a competitor.
    panel_size_penalty : int
        Multiplies the current panel size when adding panel adjudicators.
    search_iterations : int
        Iteration budget of the round optimizer.
    seed : int or None
        Seed for the random source; None for an unseeded run.
    """

    side_a_label: str = SIDE_A
    side_b_label: str = SIDE_B
    bye_label: str = BYE_LABEL
    no_opponent_label: str = NO_OPPONENT
    fallback_marker: str = FALLBACK_MARKER
    unit_key_delimiter: str = UNIT_KEY_DELIMITER
    list_delimiter: str = LIST_DELIMITER
    team_format: str = FORMAT_TEAM
    single_format: str = FORMAT_SINGLE
    tier_mismatch_penalty: int = TIER_MISMATCH_PENALTY
    rematch_penalty: int = REMATCH_PENALTY
    readjudication_penalty: int = READJUDICATION_PENALTY
    panel_size_penalty: int = PANEL_SIZE_PENALTY
    search_iterations: int = SEARCH_ITERATIONS
    seed: Optional[int] = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "seed":
                valid = value is None or _is_int(value)
            elif f.name in _INT_FIELDS:
                valid = _is_int(value)
            else:
                valid = isinstance(value, str)
            if not valid:
                raise InvalidConfigurationException(
                    f"Invalid value for {f.name}: {value!r}"
                )
        if self.search_iterations < 1:
            raise InvalidConfigurationException(
                f"search_iterations must be at least 1, got {self.search_iterations}"
            )
        if self.side_a_label == self.side_b_label:
            raise InvalidConfigurationException("Side labels must differ")
        if self.bye_label in (self.side_a_label, self.side_b_label):
            raise InvalidConfigurationException(
                "BYE label must differ from both side labels"
            )

    def make_rng(self) -> random.Random:
        """Return a random source, seeded when the configuration asks for it."""
        return random.Random(self.seed) if self.seed is not None else random.Random()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """Deserialize configuration from dictionary."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfigurationException(
                f"Unknown configuration keys: {', '.join(unknown)}"
            )
        return cls(**data)


def load_config(path: Union[str, Path]) -> EngineConfig:
    """Read an EngineConfig from a JSON file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidConfigurationException(
            f"Cannot read configuration {path}: {e}"
        ) from e
    if not isinstance(data, dict):
        raise InvalidConfigurationException(
            f"Configuration {path} must hold a JSON object"
        )
    return EngineConfig.from_dict(data)
