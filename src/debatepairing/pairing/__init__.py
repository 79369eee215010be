"""Pairing engine components for Debate Pairing."""

from debatepairing.pairing.bye import bye_pairing, select_bye
from debatepairing.pairing.optimizer import optimize_round, pair_penalty
from debatepairing.pairing.resources import ResourceAssignor, check_resources
from debatepairing.pairing.rounds import (
    generate_round,
    generate_team_event,
    generate_two_round_event,
)
from debatepairing.pairing.units import fewest_byes, form_units, single_units

__all__ = [
    "bye_pairing",
    "select_bye",
    "optimize_round",
    "pair_penalty",
    "ResourceAssignor",
    "check_resources",
    "generate_round",
    "generate_team_event",
    "generate_two_round_event",
    "fewest_byes",
    "form_units",
    "single_units",
]
