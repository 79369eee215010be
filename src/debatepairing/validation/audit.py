"""Post-generation audit of an event.

Flags the quality compromises a generated event contains so an organiser
can review them. None of these stop a run. A conflict violation would be
a bug in the assignor and is reported as absolute.
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

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence, Set

from debatepairing.history.aggregator import fold_round_into_history
from debatepairing.models.engine_config import EngineConfig
from debatepairing.models.history import HistoryView
from debatepairing.models.pairing import Pairing
from debatepairing.models.roster import Adjudicator


class FindingSeverity(Enum):
    ABSOLUTE = "ABSOLUTE"
    QUALITY = "QUALITY"


@dataclass
class AuditFinding:
    severity: FindingSeverity
    description: str

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.description}"


@dataclass
class AuditReport:
    findings: List[AuditFinding] = field(default_factory=list)

    @property
    def absolute(self) -> List[AuditFinding]:
        return [f for f in self.findings if f.severity is FindingSeverity.ABSOLUTE]

    @property
    def warnings(self) -> List[str]:
        return [str(f) for f in self.findings]


def _audit_round(
    pairings: Sequence[Pairing],
    history: HistoryView,
    rounds_by_adjudicator: Dict[str, Set[int]],
    report: AuditReport,
) -> None:
    for pairing in pairings:
        if pairing.side_b is None:
            continue
        names = pairing.competitor_names()
        for adjudicator in pairing.adjudicators:
            rounds_by_adjudicator[adjudicator.name].add(pairing.round_number)
            if adjudicator.has_conflict(names):
                report.findings.append(
                    AuditFinding(
                        FindingSeverity.ABSOLUTE,
                        f"{adjudicator.name} adjudicates {pairing.label()} "
                        "despite a declared conflict",
                    )
                )
        if pairing.side_a.is_novice != pairing.side_b.is_novice:
            report.findings.append(
                AuditFinding(
                    FindingSeverity.QUALITY,
                    f"Round {pairing.round_number}: {pairing.label()} mixes skill tiers",
                )
            )
        meetings = history.encounters(pairing.side_a, pairing.side_b)
        if meetings:
            report.findings.append(
                AuditFinding(
                    FindingSeverity.QUALITY,
                    f"Round {pairing.round_number}: {pairing.label()} is a rematch "
                    f"({meetings} prior meetings)",
                )
            )


def audit_event(
    pairings: Sequence[Pairing],
    adjudicators: Sequence[Adjudicator],
    history: HistoryView,
    config: EngineConfig,
) -> AuditReport:
    """Review the pairings of one event against the history they were built on.

    Args:
        pairings: Every pairing of the event, all rounds
        adjudicators: Adjudicator pool of the event
        history: History the first round was paired against; later rounds
            are checked against it with the earlier rounds folded in
        config: Engine configuration

    Returns:
        AuditReport listing conflict violations, tier mismatches, rematches,
        adjudicators reused across rounds and adjudicators left unused
    """
    report = AuditReport()
    rounds_by_adjudicator: Dict[str, Set[int]] = defaultdict(set)

    by_round: Dict[int, List[Pairing]] = defaultdict(list)
    for pairing in pairings:
        by_round[pairing.round_number].append(pairing)

    current = history
    for round_number in sorted(by_round):
        _audit_round(by_round[round_number], current, rounds_by_adjudicator, report)
        current = fold_round_into_history(current, by_round[round_number], config)

    for name, rounds in sorted(rounds_by_adjudicator.items()):
        if len(rounds) > 1:
            report.findings.append(
                AuditFinding(
                    FindingSeverity.QUALITY,
                    f"{name} adjudicates in rounds "
                    f"{', '.join(str(r) for r in sorted(rounds))}",
                )
            )
    if any(not p.is_bye for p in pairings):
        for adjudicator in adjudicators:
            if adjudicator.name not in rounds_by_adjudicator:
                report.findings.append(
                    AuditFinding(
                        FindingSeverity.QUALITY,
                        f"{adjudicator.name} was left without a match",
                    )
                )
    return report
