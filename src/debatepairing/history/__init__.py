"""History aggregation for Debate Pairing."""

from debatepairing.history.aggregator import (
    build_history_view,
    fold_round_into_history,
)

__all__ = ["build_history_view", "fold_round_into_history"]
