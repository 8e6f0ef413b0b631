import pytest
from pydantic import ValidationError

from statline.models import (
    STAT_RECORD_LIST,
    BaseballRecord,
    BattingLine,
    BasketballRecord,
    CatStat,
    FootballRecord,
    MatchedAthlete,
    RosterPlayer,
    RushingLine,
    SoccerRecord,
)


def test_roster_player_requires_last_name():
    with pytest.raises(ValidationError):
        RosterPlayer(number="7", first_name="John", last_name="")


def test_roster_player_is_frozen():
    player = RosterPlayer(number="7", first_name="John", last_name="Smith")

    assert player.full_name == "John Smith"
    with pytest.raises(ValidationError):
        player.number = "8"


def test_missing_value_differs_from_zero():
    line = BattingLine(ab=10, sb=0)

    assert line.h is None
    assert line.sb == 0
    assert line.cs is None
    assert BattingLine(sb=3, att=5).cs == 2


def test_has_stats_per_sport():
    assert not BaseballRecord(name="Smith, John").has_stats()
    assert BaseballRecord(name="Smith, John", batting=BattingLine(ab=1)).has_stats()
    assert not BasketballRecord(name="Lee, Sam").has_stats()
    assert BasketballRecord(name="Lee, Sam", gp=0).has_stats()
    assert not SoccerRecord(name="Diaz, Luis").has_stats()
    assert FootballRecord(name="Brown, Tom", rushing=RushingLine(att=1)).has_stats()


def test_record_list_round_trips_through_discriminator():
    records = [
        BasketballRecord(jersey="12", name="Smith, John", gp=20, pts_avg=13.0),
        FootballRecord(jersey="22", name="Brown, Tom", rushing=RushingLine(att=120, net=580)),
    ]

    payload = STAT_RECORD_LIST.dump_python(records, mode="json")
    loaded = STAT_RECORD_LIST.validate_python(payload)

    assert [item["sport"] for item in payload] == ["basketball", "football"]
    assert loaded == records


def test_matched_athlete_has_stats():
    player = RosterPlayer(number="7", first_name="John", last_name="Smith")

    assert not MatchedAthlete(roster=player).has_stats
    assert not MatchedAthlete(roster=player, stats=BaseballRecord(name="Smith, John")).has_stats
    assert MatchedAthlete(roster=player, stats=BasketballRecord(name="Smith, John", gp=3)).has_stats


def test_cat_stat_blank():
    assert CatStat().is_blank
    assert CatStat(label="PTS", value="").is_blank
    assert not CatStat(label="PTS", value=0).is_blank
