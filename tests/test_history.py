from datetime import date

from debatepairing.history import build_history_view, fold_round_into_history
from debatepairing.models import (
    Adjudicator,
    EngineConfig,
    HistoryRecord,
    HistoryView,
    Pairing,
    Unit,
    Venue,
)

CONFIG = EngineConfig()
DAY = date(2026, 9, 1)


def _row(competitor, side, opponent, adjudicator="", venue="", **kwargs):
    return HistoryRecord(
        date=kwargs.pop("day", DAY),
        event_format=kwargs.pop("event_format", "Single"),
        round_number=kwargs.pop("round_number", 1),
        competitor=competitor,
        side=side,
        opponent=opponent,
        adjudicator=adjudicator,
        venue=venue,
        **kwargs,
    )


def _unit(*members):
    members = tuple(sorted(members))
    return Unit(key=" & ".join(members), members=members, history_source=members[0])


def test_panel_match_counts_once_for_sides_but_per_row_for_adjudication():
    rows = [
        _row("Ann", "Proposition", "Bob", adjudicator=judge, venue="Room 1")
        for judge in ("Jay", "Kim", "Lee")
    ]

    view = build_history_view(rows, "Single", CONFIG)

    ann = view.competitor("Ann")
    assert ann.side_counts["Proposition"] == 1
    assert ann.opponents["Bob"] == 1
    assert ann.adjudicators == {"Jay": 1, "Kim": 1, "Lee": 1}
    assert view.adjudicator_venues["Kim"]["Room 1"] == 1


def test_team_match_venue_use_counted_once_per_adjudicator():
    rows = [
        _row(member, "Opposition", "Cy & Di", adjudicator="Jay", venue="Hall",
             event_format="Team")
        for member in ("Ann", "Bob")
    ]

    view = build_history_view(rows, "Team", CONFIG)

    assert view.adjudicator_venues["Jay"]["Hall"] == 1
    assert view.competitor("Ann").adjudicators["Jay"] == 1
    assert view.competitor("Bob").opponents["Cy & Di"] == 1


def test_byes_and_fallbacks_are_counted():
    rows = [
        _row("Ann", "BYE", "-", round_number=1),
        _row("Ann", "BYE", "-", day=date(2026, 9, 8)),
        _row("Bob", "Proposition", "Cy", adjudicator="Jay", is_fallback=True),
    ]

    view = build_history_view(rows, "Single", CONFIG)

    assert view.bye_count("Ann") == 2
    assert view.competitor("Ann").opponents == {}
    assert view.competitor("Bob").fallback_count == 1


def test_malformed_and_foreign_rows_are_skipped():
    rows = [
        _row("", "Proposition", "Bob", adjudicator="Jay"),
        _row("   ", "BYE", "-"),
        _row("Cy", "Proposition", "Di", event_format="Team"),
        _row("Ann", "Proposition", "Bob"),
    ]

    view = build_history_view(rows, "Single", CONFIG)

    assert set(view.competitors) == {"Ann"}


def test_missing_competitor_lookup_does_not_insert():
    view = HistoryView()

    assert view.competitor("Nobody").bye_count == 0
    assert view.competitors == {}


def test_encounters_sum_both_histories():
    rows = [
        _row("Ann", "Proposition", "Bob"),
        _row("Bob", "Opposition", "Ann"),
        _row("Ann", "Opposition", "Bob", round_number=2),
    ]
    view = build_history_view(rows, "Single", CONFIG)

    assert view.encounters(_unit("Ann"), _unit("Bob")) == 3


def test_readjudication_count_is_quadratic():
    rows = [
        _row("Ann", "Proposition", "Bob", adjudicator="Jay", round_number=n)
        for n in (1, 2, 3)
    ]
    view = build_history_view(rows, "Single", CONFIG)

    assert view.readjudication_count("Jay", ["Ann", "Bob"]) == 9


def test_fold_round_leaves_original_untouched():
    view = build_history_view(
        [_row("Ann", "Proposition", "Bob", adjudicator="Jay", venue="Hall")],
        "Single",
        CONFIG,
    )
    jay = Adjudicator("Jay", "Single")
    kim = Adjudicator("Kim", "Single")
    match = Pairing(
        round_number=1,
        side_a=_unit("Bob"),
        side_b=_unit("Ann"),
        adjudicators=[jay, kim],
        venue=Venue("Hall", "Single"),
    )
    bye = Pairing(round_number=1, side_a=_unit("Cy"))

    folded = fold_round_into_history(view, [match, bye], CONFIG)

    assert folded.competitor("Ann").opponents["Bob"] == 2
    assert folded.competitor("Ann").side_counts["Opposition"] == 1
    assert folded.competitor("Bob").adjudicators == {"Jay": 1, "Kim": 1}
    assert folded.bye_count("Cy") == 1
    assert folded.adjudicator_venues["Jay"]["Hall"] == 2
    assert folded.adjudicator_venues["Kim"]["Hall"] == 1

    assert view.competitor("Ann").opponents["Bob"] == 1
    assert view.competitor("Bob").adjudicators == {}
    assert view.bye_count("Cy") == 0
    assert view.adjudicator_venues["Jay"]["Hall"] == 1


def test_rows_with_distinct_unreadable_dates_count_as_separate_matches():
    rows = [
        _row("Ann", "Proposition", "Bob", adjudicator="Jay", venue="Hall",
             day=None, date_text=text)
        for text in ("week one", "week two")
    ]

    view = build_history_view(rows, "Single", CONFIG)

    assert view.competitor("Ann").opponents["Bob"] == 2
    assert view.adjudicator_venues["Jay"]["Hall"] == 2
