"""Data models for Debate Pairing."""

from debatepairing.models.engine_config import EngineConfig, load_config
from debatepairing.models.history import CompetitorHistory, HistoryRecord, HistoryView
from debatepairing.models.pairing import Pairing
from debatepairing.models.roster import Adjudicator, Competitor, Roster, Venue
from debatepairing.models.unit import Unit, make_unit_key

__all__ = [
    "EngineConfig",
    "load_config",
    "CompetitorHistory",
    "HistoryRecord",
    "HistoryView",
    "Pairing",
    "Adjudicator",
    "Competitor",
    "Roster",
    "Venue",
    "Unit",
    "make_unit_key",
]
