import random

from debatepairing.models import Competitor, EngineConfig, HistoryView, make_unit_key
from debatepairing.models.history import CompetitorHistory
from debatepairing.pairing import form_units, single_units

CONFIG = EngineConfig()


def _team(name, partner=None, novice=False):
    return Competitor(name=name, event_format="Team", partner=partner, is_novice=novice)


def _roster():
    return [
        _team("Zoe", "Adam"),
        _team("Adam", "Zoe"),
        _team("Bea", "Carl", novice=True),
        _team("Carl", "Bea", novice=True),
        _team("Dora", "Eli"),  # Eli absent
        _team("Fay", "Gus"),  # Gus declares someone else
        _team("Gus", "Hal"),
        _team("Ivy"),
    ]


def test_unit_key_is_order_independent():
    assert make_unit_key(["Zoe", "Adam"]) == make_unit_key(["Adam", "Zoe"])
    assert make_unit_key(["Zoe", "Adam"]) == "Adam & Zoe"


def test_mutual_partners_form_a_team():
    units = {u.key: u for u in form_units(_roster(), HistoryView(), CONFIG)}

    team = units["Adam & Zoe"]
    assert team.members == ("Adam", "Zoe")
    assert not team.is_fallback
    assert units["Bea & Carl"].is_novice


def test_absent_or_non_mutual_partner_gives_fallback_units():
    units = {u.key: u for u in form_units(_roster(), HistoryView(), CONFIG)}

    for name in ("Dora", "Fay", "Gus", "Ivy"):
        assert units[name].is_fallback
        assert units[name].members == (name,)
    assert units["Dora"].display_name(CONFIG) == "Dora (solo)"
    assert units["Adam & Zoe"].display_name(CONFIG) == "Adam & Zoe"


def test_every_competitor_in_exactly_one_unit():
    units = form_units(_roster(), HistoryView(), CONFIG)

    members = [m for u in units for m in u.members]
    assert sorted(members) == sorted(c.name for c in _roster())


def test_formation_is_input_order_independent():
    expected = [u.key for u in form_units(_roster(), HistoryView(), CONFIG)]
    rng = random.Random(11)
    for _ in range(25):
        shuffled = _roster()
        rng.shuffle(shuffled)
        assert [u.key for u in form_units(shuffled, HistoryView(), CONFIG)] == expected


def test_team_inherits_history_of_member_with_fewer_byes():
    history = HistoryView(
        competitors={
            "Adam": CompetitorHistory(bye_count=3),
            "Zoe": CompetitorHistory(bye_count=1),
        }
    )

    units = {u.key: u for u in form_units(_roster(), history, CONFIG)}

    assert units["Adam & Zoe"].history_source == "Zoe"
    assert history.for_unit(units["Adam & Zoe"]).bye_count == 1


def test_inheritance_rule_is_pluggable():
    def most_byes(members, bye_count):
        return max(members, key=lambda name: (bye_count(name), name))

    history = HistoryView(competitors={"Adam": CompetitorHistory(bye_count=3)})

    units = {
        u.key: u for u in form_units(_roster(), history, CONFIG, inherit=most_byes)
    }

    assert units["Adam & Zoe"].history_source == "Adam"


def test_single_units_are_one_per_competitor():
    competitors = [Competitor(name, "Single") for name in ("Cy", "Ann", "Bob")]

    units = single_units(competitors)

    assert [u.key for u in units] == ["Ann", "Bob", "Cy"]
    assert not any(u.is_fallback for u in units)
