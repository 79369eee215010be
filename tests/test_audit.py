from debatepairing.models import Adjudicator, EngineConfig, HistoryView, Pairing, Unit, Venue
from debatepairing.validation import audit_event
from debatepairing.validation.audit import FindingSeverity

CONFIG = EngineConfig()


def _unit(name, novice=False):
    return Unit(key=name, members=(name,), is_novice=novice, history_source=name)


def _match(round_number, a, b, *adjudicators, novices=()):
    return Pairing(
        round_number=round_number,
        side_a=_unit(a, a in novices),
        side_b=_unit(b, b in novices),
        adjudicators=list(adjudicators),
        venue=Venue("R1", "Single"),
    )


JAY = Adjudicator("Jay", "Single")
KIM = Adjudicator("Kim", "Single")


def test_clean_event_has_no_findings():
    pairings = [_match(1, "Ann", "Bob", JAY), _match(1, "Cy", "Di", KIM)]

    report = audit_event(pairings, [JAY, KIM], HistoryView(), CONFIG)

    assert report.findings == []


def test_conflict_violation_is_absolute():
    conflicted = Adjudicator("Lee", "Single", frozenset({"Ann"}))

    report = audit_event(
        [_match(1, "Ann", "Bob", conflicted)], [conflicted], HistoryView(), CONFIG
    )

    assert len(report.absolute) == 1
    assert "Lee" in report.warnings[0]


def test_tier_mix_and_rematch_are_quality_findings():
    history = HistoryView()
    history.record_for("Ann").opponents["Bob"] = 1

    report = audit_event(
        [_match(1, "Ann", "Bob", JAY, novices=("Bob",))], [JAY], history, CONFIG
    )

    assert {f.severity for f in report.findings} == {FindingSeverity.QUALITY}
    text = " ".join(report.warnings)
    assert "mixes skill tiers" in text
    assert "rematch (1 prior meetings)" in text


def test_second_round_is_checked_against_the_first():
    pairings = [_match(1, "Ann", "Bob", JAY), _match(2, "Bob", "Ann", KIM)]

    report = audit_event(pairings, [JAY, KIM], HistoryView(), CONFIG)

    assert any("Round 2" in w and "rematch" in w for w in report.warnings)


def test_reused_and_idle_adjudicators_are_flagged():
    pairings = [_match(1, "Ann", "Bob", JAY), _match(2, "Ann", "Cy", JAY)]

    report = audit_event(pairings, [JAY, KIM], HistoryView(), CONFIG)

    assert "QUALITY: Jay adjudicates in rounds 1, 2" in report.warnings
    assert "QUALITY: Kim was left without a match" in report.warnings


def test_all_bye_event_does_not_flag_idle_adjudicators():
    bye = Pairing(round_number=1, side_a=_unit("Ann"))

    assert audit_event([bye], [JAY], HistoryView(), CONFIG).findings == []
