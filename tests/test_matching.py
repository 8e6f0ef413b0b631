from statline.models import BaseballRecord, RosterPlayer
from statline.reconcile import (
    exact_name_match,
    extract_first_name,
    extract_last_name,
    loose_name_match,
    match_by_surname,
    match_players,
    normalize_name,
)


def _player(number, first, last):
    return RosterPlayer(number=number, first_name=first, last_name=last)


def _record(jersey, name):
    return BaseballRecord(jersey=jersey, name=name)


def test_name_helpers_handle_both_orders():
    assert normalize_name("O'Neil-Smith Jr.") == "oneilsmith"
    assert normalize_name("José Núñez III") == "josenunez"
    assert extract_last_name("Smith, John") == "Smith"
    assert extract_first_name("Smith, John A.") == "John"
    assert extract_last_name("John Smith") == "Smith"
    assert extract_first_name("John Smith") == "John"
    assert extract_last_name("") == ""


def test_loose_match_accepts_initials_and_partial_names():
    assert loose_name_match("Mike", "Smith", "M. Smith")
    assert loose_name_match("Christopher", "Jones", "Jones, Chris")
    assert not loose_name_match("Sam", "Lee", "Doe, John")


def test_exact_match_needs_both_names():
    assert exact_name_match("John", "Doe", "Doe, John")
    assert not exact_name_match("John", "Doe", "Doe, Jon")


def test_same_jersey_with_loose_name_matches():
    roster = [_player("7", "Mike", "Smith")]
    records = [_record("7", "M. Smith")]

    report = match_players(roster, records)

    assert report.athletes[0].stats == records[0]
    assert report.matched_count == 1
    assert report.unmatched_records == []


def test_renumbered_athlete_matches_on_exact_name():
    roster = [_player("5", "John", "Doe"), _player("12", "Sam", "Lee")]
    records = [_record("12", "Doe, John"), _record("12", "Lee, Sam")]

    report = match_players(roster, records)

    assert report.athletes[0].stats.name == "Doe, John"
    assert report.athletes[1].stats.name == "Lee, Sam"


def test_jersey_matches_are_settled_before_name_matches():
    roster = [_player("5", "John", "Doe"), _player("12", "Jonathan", "Doe")]
    records = [_record("12", "Doe, John")]

    report = match_players(roster, records)

    assert report.athletes[0].stats is None
    assert report.athletes[1].stats == records[0]


def test_each_record_is_used_once():
    roster = [_player("7", "John", "Smith"), _player("7", "Jim", "Smith")]
    records = [_record("7", "Smith, John"), _record("44", "Nobody, Here")]

    report = match_players(roster, records)

    assert report.athletes[0].stats == records[0]
    assert report.athletes[1].stats is None
    assert report.matched_count == 1
    assert report.unmatched_names == ["Nobody, Here"]


def test_record_without_jersey_matches_by_exact_name():
    roster = [_player("7", "John", "Smith")]
    records = [_record("", "Smith, John")]

    report = match_players(roster, records)

    assert report.athletes[0].stats == records[0]


def test_record_without_jersey_matches_unique_surname():
    roster = [_player("12", "Michael", "Smith"), _player("4", "Sam", "Lee")]
    records = [_record("", "Smith, Mike")]

    report = match_players(roster, records)

    assert report.athletes[0].stats == records[0]
    assert report.athletes[1].stats is None
    assert report.unmatched_records == []


def test_name_suffix_and_accents_are_ignored():
    roster = [_player("12", "John", "Smith Jr."), _player("3", "José", "Núñez")]
    records = [_record("", "Smith, John"), _record("", "Nunez, Jose")]

    report = match_players(roster, records)

    assert report.athletes[0].stats == records[0]
    assert report.athletes[1].stats == records[1]


def test_surname_fallback_prefers_first_name_among_shared_surnames():
    roster = [_player("2", "Alex", "Doe"), _player("9", "Christopher", "Doe"), _player("5", "Ben", "Doe")]

    assert match_by_surname("Doe, Chris", roster) == 1
    assert match_by_surname("Doe, Ben", roster) == 2
    assert match_by_surname("Doe, Zack", roster) == 0
    assert match_by_surname("Doe, Chris", roster, [False, True, False]) == 0
    assert match_by_surname("Chris Doe", roster) is None
    assert match_by_surname("Roe, Chris", roster) is None


def test_surname_fallback_skips_records_with_jerseys():
    roster = [_player("12", "Michael", "Smith")]
    records = [_record("30", "Smith, Mike")]

    report = match_players(roster, records)

    assert report.athletes[0].stats is None
    assert report.unmatched_names == ["Smith, Mike"]
