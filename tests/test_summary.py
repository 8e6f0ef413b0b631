from statline.models import (
    BLANK_CAT_STAT,
    BaseballRecord,
    BasketballRecord,
    CatStat,
    DefenseLine,
    FootballRecord,
    KickingLine,
    PassingLine,
    ReceivingLine,
    RushingLine,
    SoccerFieldLine,
    SoccerGoalieLine,
    SoccerRecord,
    VolleyballRecord,
)
from statline.summary import (
    Category,
    basketball_cat_stats,
    cat_stats_for,
    classify,
    football_cat_stats,
    format_cat_value,
    soccer_cat_stats,
    volleyball_cat_stats,
)


def _pairs(stats):
    return [(stat.label, stat.value) for stat in stats]


def test_soccer_field_player_takes_first_positive_stats():
    record = SoccerRecord(jersey="9", name="Diaz, Luis", outfield=SoccerFieldLine(g=2, a=0, pts=4, sog=5, sh=9))

    assert _pairs(soccer_cat_stats(record)) == [("Goals", 2), ("Pts", 4), ("SOG", 5)]


def test_soccer_goalkeeper_gets_fixed_columns():
    record = SoccerRecord(
        jersey="1",
        name="Park, Kim",
        outfield=SoccerFieldLine(g=1),
        goalie=SoccerGoalieLine(saves=60, ga=12, sho=5),
    )

    stats = soccer_cat_stats(record, count=4)

    assert _pairs(stats[:3]) == [("Saves", 60), ("GA", 12), ("SHO", 5)]
    assert stats[3] == BLANK_CAT_STAT


def test_soccer_without_lines_is_blank():
    assert soccer_cat_stats(SoccerRecord(name="Empty, Ed")) == [BLANK_CAT_STAT] * 3


def test_volleyball_priority_skips_zero_values():
    record = VolleyballRecord(name="Lee, Mary", sp=80, pts=310.0, k=250, a=0, dig=150, blk=30.0)

    assert _pairs(volleyball_cat_stats(record)) == [("PTS", 310.0), ("Kills", 250), ("Digs", 150)]


def test_basketball_ranks_by_score_and_pins_ppg_first():
    record = BasketballRecord(
        name="Smith, John",
        gp=20,
        pts_avg=13.0,
        fg_pct=0.5,
        three_pct=0.4,
        ft_pct=0.8,
        reb_avg=3.0,
        ast=55,
        blk=5,
        stl=20,
    )

    assert _pairs(basketball_cat_stats(record)) == [("PPG", "13.0"), ("FT", "80%"), ("FG", "50%")]


def test_basketball_all_percentages_swap_in_ppg():
    record = BasketballRecord(name="Shooter, Sue", gp=20, pts_avg=3.5, fg_pct=0.6, three_pct=0.45, ft_pct=0.9)

    assert _pairs(basketball_cat_stats(record)) == [("PPG", "3.5"), ("FG", "60%"), ("FT", "90%")]


def test_basketball_ppg_in_top_three_is_kept_with_fewer_columns():
    record = BasketballRecord(name="Wing, Will", gp=10, pts_avg=5.5, fg_pct=0.6, ft_pct=0.9)

    assert [stat.label for stat in basketball_cat_stats(record, count=2)] == ["PPG", "FG"]


def test_basketball_rates_and_minutes():
    record = BasketballRecord(name="Big, Ben", gp=20, blk=30, stl=40, min_avg=32.0)

    stats = dict(_pairs(basketball_cat_stats(record, count=3)))

    assert stats == {"SPG": "2", "BPG": "1.5", "MPG": "32.0"}


def test_basketball_minutes_need_more_than_thirty():
    record = BasketballRecord(name="Role, Ray", gp=20, min_avg=30.0)

    assert basketball_cat_stats(record) == [BLANK_CAT_STAT] * 3


def test_football_passer_with_many_attempts():
    record = FootballRecord(
        name="Green, Al",
        passing=PassingLine(comp=9, att=15, yds=120, td=0, interceptions=1),
        rushing=RushingLine(att=40, net=200),
    )

    category, _stats = classify(record)

    assert category is Category.PASSING
    assert _pairs(football_cat_stats(record)) == [("PCT", "60.0%"), ("YDS", 120), ("INT", 1), ("", ""), ("", "")]


def test_football_rusher_beats_receiver_on_volume():
    record = FootballRecord(
        name="Brown, Tom",
        rushing=RushingLine(att=5, net=30, avg=6.0, td=1),
        receiving=ReceivingLine(no=2, yds=20, avg=10.0),
    )

    category, stats = classify(record)

    assert category is Category.RUSHING
    assert _pairs(stats) == [("CAR", 5), ("YDS", 30), ("AVG", 6), ("TD", 1)]


def test_football_receiver_and_defender():
    receiver = FootballRecord(
        name="Gray, Joe",
        rushing=RushingLine(att=1, net=4),
        receiving=ReceivingLine(no=30, yds=400, avg=13.3, td=3),
    )
    assert classify(receiver)[0] is Category.RECEIVING

    defender = FootballRecord(
        name="Stone, Max",
        defense=DefenseLine(tot=60.0, tfl="8.0-30", sacks="0-0", pbu=4, interceptions=""),
    )
    assert _pairs(football_cat_stats(defender, count=3)) == [("TKLS", 60), ("TFL", "8.0-30"), ("PBU", 4)]


def test_football_kicker_and_general():
    kicker = FootballRecord(name="Foot, Ray", kicking=KickingLine(fgm=8, fga=10, pct=80.0, long=45, pts=0))
    assert _pairs(football_cat_stats(kicker, count=3)) == [("FG", "8/10"), ("PCT", "80%"), ("LONG", 45)]

    category, stats = classify(FootballRecord(name="Walk, On"))
    assert category is Category.GENERAL
    assert stats == []


def test_cat_stats_for_dispatches_and_pads():
    record = VolleyballRecord(name="Lee, Mary", sp=80, pts=12.0)

    assert cat_stats_for(record, 2) == [CatStat(label="PTS", value=12.0), BLANK_CAT_STAT]
    assert cat_stats_for(None, 3) == [BLANK_CAT_STAT] * 3
    assert cat_stats_for(BaseballRecord(name="Smith, John"), 2) == [BLANK_CAT_STAT] * 2


def test_format_cat_value():
    assert format_cat_value(CatStat(label="PPG", value="13.0")) == "13.0 PPG"
    assert format_cat_value(CatStat(label="FG", value="3–4")) == "3-4 FG"
    assert format_cat_value(CatStat(label="SACKS", value="—")) == ""
    assert format_cat_value(BLANK_CAT_STAT) == ""
