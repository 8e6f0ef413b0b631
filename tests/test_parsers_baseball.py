from statline.parsers import parse_baseball_text, parse_fused_rows
from statline.parsers.baseball import Section, next_section
from statline.parsers.fused_baseball import Section as FusedSection
from statline.parsers.fused_baseball import header_section
from statline.pdf import PositionedToken, Row

SIDEARM_SHEET = """\
2025 Riverton College Baseball
Overall Record: 30-20 (as of May 20, 2025)
Sorted by Batting Avg
# Player avg gp-gs ab r h 2b 3b hr rbi tb slg% bb hbp so gdp ob% sf sh sb-att
7 Smith, John .342 50-50 190 40 65 12 2 8 45 105 .553 20 3 30 4 .410 2 1 10-12
22 Lee, Sam .250 40-30 100 15 25 5 0 1 12 33 .330 10 1 25 2 .320 1 3 2-4
Totals .300 50-50 1700 300 510 90 10 40 280 740 .435 200 30 300 30 .380 15 20 60-80
Sorted by Earned Run Avg
# Player era w-l app gs cg sho sv ip h r er bb so 2b 3b hr b/avg wp hp bk sfa sha
31 Jones, Mike 2.45 8-2 15 14 1 1/0 0 88.0 70 30 24 25 90 10 1 5 .220 4 6 0 2 3
22 Lee, Sam 5.40 1-1 10 0 0 0/1 2 15.0 18 10 9 6 12 3 0 2 .290 1 0 0 1 0
Sorted by Fielding
7 Smith, John 1.000 50 100 2 0 0
"""


def test_next_section_recognizes_headers():
    assert next_section("Sorted by Batting Avg") is Section.BATTING
    assert next_section("Sorted by Earned Run Avg (min. 10 IP)") is Section.PITCHING
    assert next_section("Sorted by Fielding Pct") is Section.NONE
    assert next_section("7 Smith, John .342") is None


def test_parse_baseball_text_merges_batting_and_pitching():
    result = parse_baseball_text(SIDEARM_SHEET)

    assert result.success
    by_name = {record.name: record for record in result.records}
    assert set(by_name) == {"Smith, John", "Lee, Sam", "Jones, Mike"}

    smith = by_name["Smith, John"]
    assert smith.jersey == "7"
    assert smith.batting.ab == 190
    assert smith.batting.hr == 8
    assert smith.batting.rbi == 45
    assert (smith.batting.sb, smith.batting.att, smith.batting.cs) == (10, 12, 2)
    assert smith.pitching is None

    lee = by_name["Lee, Sam"]
    assert lee.batting.h == 25
    assert lee.pitching.ip == "15.0"
    assert lee.pitching.sho == "0/1"
    assert lee.pitching.sv == 2

    jones = by_name["Jones, Mike"]
    assert (jones.pitching.w, jones.pitching.l) == (8, 2)
    assert jones.pitching.era == 2.45
    assert jones.pitching.hr == 5
    assert jones.pitching.hbp == 6
    assert jones.batting is None


def test_parse_baseball_text_reads_document_info():
    info = parse_baseball_text(SIDEARM_SHEET).info
    assert info.team_name == "Riverton College"
    assert info.record == "30-20"
    assert info.as_of == "May 20, 2025"


def test_parse_baseball_text_without_sections_warns():
    result = parse_baseball_text("nothing to see here\n7 Smith, John .342")
    assert result.records == []
    assert result.warnings


def _token(text: str, x: float, width: float) -> PositionedToken:
    return PositionedToken(text=text, x=x, y=500.0, width=width)


def _fused_row(*tokens: PositionedToken, y: float = 500.0, page: int = 0) -> Row:
    return Row(tokens=tuple(tokens), y=y, page=page)


def _batting_header(y: float = 520.0) -> Row:
    return _fused_row(_token("PLAYER", 10, 30), _token("AVG", 150, 15), _token("AB", 195, 10), y=y)


def test_header_section_priority():
    assert header_section("PLAYER ERA W-L APP GS IP") is FusedSection.PITCHING
    assert header_section("PLAYER AVG GP AB R H") is FusedSection.BATTING
    assert header_section("PLAYER FLD PO A E") is FusedSection.NONE
    assert header_section("AVG AB") is None


def test_parse_fused_rows_resolves_fused_batting_columns():
    data = _fused_row(
        _token("Smith,", 10, 25),
        _token("John", 40, 18),
        _token("18", 195, 8),
        _token("1215312", 215, 30),
        _token("7261.444", 300, 30),
        _token("5", 360, 4),
        _token("1", 380, 4),
        _token("3", 400, 4),
        _token("0", 420, 4),
        _token("1", 460, 4),
        _token("2", 480, 4),
        _token("3-4", 500, 12),
    )

    result = parse_fused_rows([_batting_header(), data])

    assert result.warnings == []
    [record] = result.records
    assert record.name == "Smith, John"
    assert record.jersey == ""
    batting = record.batting
    assert (batting.ab, batting.r, batting.h) == (18, 12, 15)
    assert (batting.doubles, batting.triples, batting.hr) == (3, 1, 2)
    assert batting.rbi == 7
    assert (batting.bb, batting.hbp, batting.so, batting.gdp) == (5, 1, 3, 0)
    assert (batting.sf, batting.sh, batting.sb, batting.att) == (1, 2, 3, 4)


def test_parse_fused_rows_splits_walks_and_hit_by_pitch_when_fused():
    data = _fused_row(
        _token("Lee,", 10, 18),
        _token("Sam", 35, 16),
        _token("10", 195, 8),
        _token("37201", 215, 25),
        _token("51", 360, 8),
        _token("4", 400, 4),
    )
    [record] = parse_fused_rows([_batting_header(), data]).records
    assert (record.batting.r, record.batting.h) == (3, 7)
    assert (record.batting.bb, record.batting.hbp) == (5, 1)


def test_parse_fused_rows_keeps_negative_walks_and_later_rows():
    odd = _fused_row(
        _token("Ray,", 10, 18),
        _token("Tom", 35, 16),
        _token("10", 195, 8),
        _token("37201", 215, 25),
        _token("-5", 360, 8),
        _token("4", 400, 4),
        y=500.0,
    )
    good = _fused_row(
        _token("Lee,", 10, 18),
        _token("Sam", 35, 16),
        _token("10", 195, 8),
        _token("37201", 215, 25),
        _token("51", 360, 8),
        _token("4", 400, 4),
        y=488.0,
    )

    result = parse_fused_rows([_batting_header(), odd, good])

    ray, lee = result.records
    assert ray.name == "Ray, Tom"
    assert (ray.batting.bb, ray.batting.hbp) == (-5, None)
    assert (lee.batting.bb, lee.batting.hbp) == (5, 1)


def test_parse_fused_rows_leaves_ambiguous_runs_unset_with_warning():
    data = _fused_row(
        _token("Lee,", 10, 18),
        _token("Sam", 35, 16),
        _token("10", 195, 8),
        _token("14221", 215, 25),
        _token("3", 400, 4),
    )

    result = parse_fused_rows([_batting_header(), data])

    [record] = result.records
    assert record.batting.h is None
    assert record.batting.r is None
    assert record.batting.so == 3
    assert any("14221" in warning for warning in result.warnings)


def test_parse_fused_rows_reads_pitching_and_stops_at_fielding():
    header = _fused_row(_token("PLAYER", 10, 30), _token("ERA", 125, 15), _token("IP", 280, 10), y=520.0)
    pitcher = _fused_row(
        _token("Jones,", 10, 25),
        _token("Mike", 40, 20),
        _token("2.45", 125, 16),
        _token("8-2", 155, 12),
        _token("15", 185, 8),
        _token("14", 200, 8),
        _token("1", 220, 4),
        _token("1", 240, 4),
        _token("0", 260, 4),
        _token("45.2433", 280, 35),
        _token("12", 360, 8),
        _token("40", 378, 8),
        _token("3", 460, 4),
        _token("2", 520, 4),
        y=500.0,
    )
    fielding = _fused_row(_token("PLAYER", 10, 30), _token("FLD", 150, 15), _token("PO", 200, 10), y=480.0)
    fielder = _fused_row(_token("Jones,", 10, 25), _token("Mike", 40, 20), _token("1.000", 150, 20), y=460.0)

    result = parse_fused_rows([header, pitcher, fielding, fielder])

    [record] = result.records
    pitching = record.pitching
    assert pitching.era == 2.45
    assert (pitching.w, pitching.l) == (8, 2)
    assert (pitching.app, pitching.gs, pitching.cg, pitching.sho, pitching.sv) == (15, 14, 1, "1", 0)
    assert pitching.ip == "45.2"
    assert (pitching.h, pitching.r, pitching.er) == (4, 3, 3)
    assert (pitching.bb, pitching.so, pitching.hr, pitching.hbp) == (12, 40, 3, 2)
    assert record.batting is None
