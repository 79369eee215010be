"""Engine facade: one event, one format, one all-or-nothing run.

This module wires the roster pre-check, history aggregation and round
generation together and turns the result into output rows only once every
step has succeeded.
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
from dataclasses import dataclass, field
from datetime import date
from typing import AbstractSet, Iterable, List, Optional

from debatepairing.constants import COL_ADJUDICATORS, COL_ROUND, COL_VENUE
from debatepairing.exceptions import InvalidConfigurationException
from debatepairing.history.aggregator import build_history_view
from debatepairing.models.engine_config import EngineConfig
from debatepairing.models.history import HistoryRecord
from debatepairing.models.pairing import Pairing
from debatepairing.models.roster import Roster
from debatepairing.pairing.rounds import generate_team_event, generate_two_round_event
from debatepairing.pairing.units import fewest_byes
from debatepairing.type_hints import InheritanceRule, OutRows
from debatepairing.utils import setup_logger
from debatepairing.validation.audit import audit_event
from debatepairing.validation.integrity import create_integrity_validator

logger = setup_logger(__name__)


@dataclass
class EngineResult:
    """Everything one run produces, for the caller to persist.

    Attributes:
        event_format: Format that was paired
        pairings: All pairings, round by round, BYEs last within a round
        event_rows: Rows of the generated-event table
        event_columns: Column order of ``event_rows``
        history_rows: New history-feed rows
        warnings: Quality compromises found by the post-run audit
    """

    event_format: str
    pairings: List[Pairing] = field(default_factory=list)
    event_rows: OutRows = field(default_factory=list)
    event_columns: List[str] = field(default_factory=list)
    history_rows: OutRows = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class PairingEngine:
    """Generates one event for one format.

    The engine holds no state between runs: history is rebuilt from the
    records passed to every :meth:`run`.
    """

    def __init__(
        self, config: Optional[EngineConfig] = None, inherit: InheritanceRule = fewest_byes
    ):
        self.config = config or EngineConfig()
        self.inherit = inherit

    def event_columns(self, event_format: str) -> List[str]:
        columns = [
            self.config.side_a_label,
            self.config.side_b_label,
            COL_ADJUDICATORS,
            COL_VENUE,
        ]
        if event_format == self.config.single_format:
            columns.insert(0, COL_ROUND)
        return columns

    def run(
        self,
        event_format: str,
        roster: Roster,
        present: AbstractSet[str],
        history_records: Iterable[HistoryRecord],
        event_date: Optional[date] = None,
        rng: Optional[random.Random] = None,
    ) -> EngineResult:
        """Generate the pairings of one event.

        Args:
            event_format: Team or single format name from the configuration
            roster: Full roster, all formats
            present: Names marked present in the attendance feed
            history_records: Full history feed
            event_date: Date written to the new history rows (default today)
            rng: Random source (default from the configuration)

        Returns:
            EngineResult with the pairings and every output row

        Raises:
            InvalidConfigurationException: If the format is not supported
            InputIntegrityException: If the roster contradicts itself
            ResourceInsufficiencyException: If adjudicators or venues are too few
            ConflictExhaustionException: If a match has no conflict-free adjudicator
        """
        config = self.config
        if event_format not in (config.team_format, config.single_format):
            raise InvalidConfigurationException(
                f"Unsupported event format '{event_format}'"
            )
        rng = rng or config.make_rng()
        event_date = event_date or date.today()

        create_integrity_validator(config).validate(
            roster, event_format
        ).raise_for_issues()

        scoped = roster.for_format(event_format).present(present)
        logger.info(
            "Pairing %s event on %s: %d competitors, %d adjudicators, %d venues",
            event_format,
            event_date.isoformat(),
            len(scoped.competitors),
            len(scoped.adjudicators),
            len(scoped.venues),
        )
        history = build_history_view(history_records, event_format, config)

        if event_format == config.team_format:
            pairings = generate_team_event(
                scoped.competitors,
                scoped.adjudicators,
                scoped.venues,
                history,
                config,
                rng=rng,
                inherit=self.inherit,
            )
        else:
            pairings = generate_two_round_event(
                scoped.competitors,
                scoped.adjudicators,
                scoped.venues,
                history,
                config,
                rng=rng,
            )

        audit = audit_event(pairings, scoped.adjudicators, history, config)
        for warning in audit.warnings:
            logger.warning(warning)

        include_round = event_format == config.single_format
        history_rows: OutRows = []
        for pairing in pairings:
            history_rows.extend(
                pairing.to_history_rows(config, event_date, event_format)
            )
        return EngineResult(
            event_format=event_format,
            pairings=pairings,
            event_rows=[p.to_event_row(config, include_round) for p in pairings],
            event_columns=self.event_columns(event_format),
            history_rows=history_rows,
            warnings=audit.warnings,
        )
