import random
from datetime import date

import pytest

from debatepairing import EngineConfig, PairingEngine
from debatepairing.constants import HISTORY_COLUMNS
from debatepairing.exceptions import (
    InputIntegrityException,
    InvalidConfigurationException,
    ResourceInsufficiencyException,
)
from debatepairing.feeds import parse_history
from debatepairing.models import (
    Adjudicator,
    Competitor,
    HistoryRecord,
    Roster,
    Venue,
)

DAY = date(2026, 10, 17)


def _roster():
    competitors = [
        Competitor("Ann", "Team", partner="Bob"),
        Competitor("Bob", "Team", partner="Ann"),
        Competitor("Cy", "Team", partner="Di"),
        Competitor("Di", "Team", partner="Cy"),
        Competitor("Eve", "Team", partner="Fin"),
        Competitor("Fin", "Team", partner="Eve"),
    ]
    competitors += [Competitor(n, "Single") for n in ("Sam", "Tia", "Uma", "Vic", "Wes")]
    adjudicators = [
        Adjudicator("Jay", "Team", frozenset({"Ann"})),
        Adjudicator("Kim", "Team"),
        Adjudicator("Lee", "Single"),
        Adjudicator("Max", "Single"),
    ]
    venues = [
        Venue("Hall", "Team"),
        Venue("Lab", "Team"),
        Venue("R1", "Single"),
        Venue("R2", "Single"),
    ]
    return Roster(competitors, adjudicators, venues)


def _everyone(roster):
    return set(roster.competitor_names) | {a.name for a in roster.adjudicators}


def test_absent_partner_leaves_a_fallback_unit():
    roster = _roster()
    present = _everyone(roster) - {"Fin"}

    result = PairingEngine(EngineConfig(seed=1)).run(
        "Team", roster, present, [], event_date=DAY
    )

    sides = {
        name
        for row in result.event_rows
        for name in (row["Proposition"], row["Opposition"])
    }
    assert "Eve (solo)" in sides
    assert "Ann & Bob" in sides
    assert "Fin" not in " ".join(sides)
    fallback_rows = [r for r in result.history_rows if r["Competitor"] == "Eve"]
    assert fallback_rows and all(r["Fallback"] == "1" for r in fallback_rows)


def test_team_event_rows():
    roster = _roster()
    # Ann and Bob sat out last time, so they debate today
    history = [
        HistoryRecord(date(2026, 10, 10), "Team", 1, name, side="BYE", opponent="-")
        for name in ("Ann", "Bob")
    ]

    result = PairingEngine(EngineConfig(seed=3)).run(
        "Team", roster, _everyone(roster), history, event_date=DAY
    )

    assert result.event_columns == ["Proposition", "Opposition", "Adjudicators", "Venue"]
    assert len(result.event_rows) == 2
    bye_rows = [r for r in result.event_rows if r["Opposition"] == "-"]
    assert len(bye_rows) == 1
    assert bye_rows[0]["Adjudicators"] == ""
    assert bye_rows[0]["Venue"] == ""

    match = next(p for p in result.pairings if not p.is_bye)
    assert "Ann" in match.competitor_names()
    assert [a.name for a in match.adjudicators] == ["Kim"]

    for row in result.history_rows:
        assert list(row) == HISTORY_COLUMNS
        assert row["Date"] == "2026-10-17"
        assert row["Format"] == "Team"
    # two teams of two in one match with one adjudicator, plus two BYE rows
    assert len(result.history_rows) == 6
    bye_history = [r for r in result.history_rows if r["Side"] == "BYE"]
    assert len(bye_history) == 2
    assert all(r["Opponent"] == "-" and r["Adjudicator"] == "" for r in bye_history)


def test_single_event_has_round_column_and_two_rounds():
    roster = _roster()

    result = PairingEngine(EngineConfig(seed=5)).run(
        "Single", roster, _everyone(roster), [], event_date=DAY
    )

    assert result.event_columns[0] == "Round"
    assert [r["Round"] for r in result.event_rows] == ["1"] * 3 + ["2"] * 3
    byes = [r["Proposition"] for r in result.event_rows if r["Opposition"] == "-"]
    assert len(byes) == 2
    assert byes[0] != byes[1]


def test_integrity_failure_stops_the_run():
    roster = _roster()
    roster.adjudicators.append(Adjudicator("Sam", "Single"))

    with pytest.raises(InputIntegrityException) as exc:
        PairingEngine().run("Single", roster, _everyone(roster), [])

    assert any("DUAL_ROLE" in issue for issue in exc.value.issues)


def test_unknown_format_is_rejected():
    with pytest.raises(InvalidConfigurationException):
        PairingEngine().run("Parliamentary", _roster(), set(), [])


def test_absent_adjudicators_do_not_count():
    roster = _roster()
    present = _everyone(roster) - {"Max"}

    with pytest.raises(ResourceInsufficiencyException):
        PairingEngine().run("Single", roster, present, [])


def test_history_rows_feed_the_next_event():
    roster = Roster(
        competitors=[Competitor(n, "Single") for n in ("Ann", "Bob", "Cy", "Di")],
        adjudicators=[Adjudicator("Jay", "Single"), Adjudicator("Kim", "Single")],
        venues=[Venue("R1", "Single"), Venue("R2", "Single")],
    )
    present = _everyone(roster)
    engine = PairingEngine(EngineConfig(seed=2))

    first = engine.run("Single", roster, present, [], event_date=DAY)
    met = {frozenset(p.competitor_names()) for p in first.pairings}
    history = parse_history(first.history_rows)

    second = engine.run(
        "Single",
        roster,
        present,
        history,
        event_date=date(2026, 10, 24),
        rng=random.Random(9),
    )

    # four singles allow three perfect matchings and two are already used
    round_one = {
        frozenset(p.competitor_names())
        for p in second.pairings
        if p.round_number == 1
    }
    assert not round_one & met
