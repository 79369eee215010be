import random

import pytest

from debatepairing.models import HistoryView, Unit
from debatepairing.models.history import CompetitorHistory
from debatepairing.pairing import bye_pairing, select_bye


def _units(*names):
    return [Unit(key=n, members=(n,), history_source=n) for n in names]


def test_even_pool_has_no_bye():
    pool = _units("Ann", "Bob", "Cy", "Di")

    assert select_bye(pool, HistoryView()) is None
    assert len(pool) == 4


@pytest.mark.parametrize("seed", range(30))
def test_unit_with_most_sit_outs_never_gets_the_bye(seed):
    history = HistoryView(competitors={"X": CompetitorHistory(bye_count=3)})
    pool = _units("X", "Ann", "Bob", "Cy", "Di")

    chosen = select_bye(pool, history, rng=random.Random(seed))

    assert chosen.key != "X"
    assert len(pool) == 4
    assert chosen not in pool


def test_fewest_sit_outs_wins():
    history = HistoryView(
        competitors={
            "Ann": CompetitorHistory(bye_count=2),
            "Bob": CompetitorHistory(bye_count=1),
            "Di": CompetitorHistory(bye_count=2),
        }
    )
    pool = _units("Ann", "Bob", "Cy", "Di", "Eve")
    history.competitors["Eve"] = CompetitorHistory(bye_count=1)

    chosen = select_bye(pool, history, rng=random.Random(3))

    assert chosen.key == "Cy"


@pytest.mark.parametrize("seed", range(20))
def test_exclusion_is_honoured(seed):
    history = HistoryView(
        competitors={n: CompetitorHistory(bye_count=1) for n in ("Bob", "Cy")}
    )
    pool = _units("Ann", "Bob", "Cy")

    chosen = select_bye(pool, history, exclude="Ann", rng=random.Random(seed))

    assert chosen.key in {"Bob", "Cy"}


def test_exclusion_is_waived_for_the_last_candidate():
    pool = _units("Ann")

    chosen = select_bye(pool, HistoryView(), exclude="Ann")

    assert chosen.key == "Ann"
    assert pool == []


def test_bye_pairing_has_no_opponent_or_resources():
    (unit,) = _units("Ann")

    pairing = bye_pairing(unit, round_number=2)

    assert pairing.is_bye
    assert pairing.round_number == 2
    assert pairing.adjudicators == []
    assert pairing.venue is None
