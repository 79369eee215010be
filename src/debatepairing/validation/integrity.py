"""Roster integrity pre-check.

Runs before the engine and rejects rosters whose rows contradict each
other. The engine components assume these checks have passed.
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
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from debatepairing.exceptions import InputIntegrityException
from debatepairing.models.engine_config import EngineConfig
from debatepairing.models.roster import Competitor, Roster
from debatepairing.utils import setup_logger

logger = setup_logger(__name__)


class IssueType(Enum):
    """Kinds of roster integrity problems."""

    DUPLICATE_VENUE = "DUPLICATE_VENUE"
    DUAL_ROLE = "DUAL_ROLE"
    UNKNOWN_CONFLICT = "UNKNOWN_CONFLICT"
    MISSING_PARTNER = "MISSING_PARTNER"
    NON_MUTUAL_PARTNER = "NON_MUTUAL_PARTNER"
    TIER_MISMATCH = "TIER_MISMATCH"


@dataclass
class IntegrityIssue:
    issue_type: IssueType
    description: str

    def __str__(self) -> str:
        return f"{self.issue_type.value}: {self.description}"


@dataclass
class IntegrityReport:
    """All integrity issues found in one roster."""

    event_format: str
    issues: List[IntegrityIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def raise_for_issues(self) -> None:
        """Raise InputIntegrityException listing every issue, if there are any."""
        if self.issues:
            raise InputIntegrityException([str(issue) for issue in self.issues])


class RosterIntegrityValidator:
    """Checks a roster for contradictions before any pairing work."""

    def __init__(self, config: EngineConfig):
        self.config = config

    def validate(self, roster: Roster, event_format: str) -> IntegrityReport:
        """Validate the part of ``roster`` registered for ``event_format``.

        Conflict entries are checked against every competitor on the roster,
        so adjudicators may list people from other formats.
        """
        report = IntegrityReport(event_format=event_format)
        scoped = roster.for_format(event_format)

        self._check_duplicate_venues(scoped, report)
        self._check_dual_roles(roster, report)
        self._check_conflicts(scoped, set(roster.competitor_names), report)
        if event_format == self.config.team_format:
            self._check_partnerships(scoped.competitors, report)

        if report.issues:
            logger.error(
                "%s roster has %d integrity issues", event_format, len(report.issues)
            )
        return report

    def _check_duplicate_venues(self, roster: Roster, report: IntegrityReport) -> None:
        counts = Counter(v.name for v in roster.venues)
        for name, count in sorted(counts.items()):
            if count > 1:
                report.issues.append(
                    IntegrityIssue(
                        IssueType.DUPLICATE_VENUE,
                        f"Venue {name} is listed {count} times",
                    )
                )

    def _check_dual_roles(self, roster: Roster, report: IntegrityReport) -> None:
        both = set(roster.competitor_names) & {a.name for a in roster.adjudicators}
        for name in sorted(both):
            report.issues.append(
                IntegrityIssue(
                    IssueType.DUAL_ROLE,
                    f"{name} is listed as both adjudicator and competitor",
                )
            )

    def _check_conflicts(
        self, roster: Roster, known: set, report: IntegrityReport
    ) -> None:
        for adjudicator in roster.adjudicators:
            for name in sorted(adjudicator.conflicts - known):
                report.issues.append(
                    IntegrityIssue(
                        IssueType.UNKNOWN_CONFLICT,
                        f"Adjudicator {adjudicator.name} lists conflict {name}, "
                        "who is not on the roster",
                    )
                )

    def _check_partnerships(
        self, competitors: List[Competitor], report: IntegrityReport
    ) -> None:
        by_name: Dict[str, Competitor] = {c.name: c for c in competitors}
        for competitor in sorted(competitors, key=lambda c: c.name):
            if not competitor.partner:
                continue
            partner = by_name.get(competitor.partner)
            if partner is None:
                report.issues.append(
                    IntegrityIssue(
                        IssueType.MISSING_PARTNER,
                        f"{competitor.name} declares partner {competitor.partner}, "
                        "who is not on the team roster",
                    )
                )
                continue
            if partner.partner != competitor.name:
                report.issues.append(
                    IntegrityIssue(
                        IssueType.NON_MUTUAL_PARTNER,
                        f"{competitor.name} declares {partner.name}, but "
                        f"{partner.name} declares {partner.partner or 'nobody'}",
                    )
                )
            # report each mismatched pair once
            elif competitor.name < partner.name and (
                competitor.is_novice != partner.is_novice
            ):
                report.issues.append(
                    IntegrityIssue(
                        IssueType.TIER_MISMATCH,
                        f"Partners {competitor.name} and {partner.name} "
                        "are in different skill tiers",
                    )
                )


def create_integrity_validator(config: EngineConfig) -> RosterIntegrityValidator:
    """Factory function to create a roster integrity validator."""
    return RosterIntegrityValidator(config)
