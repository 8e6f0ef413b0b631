from pathlib import Path

import pytest

from statline.config import ColumnLayout, ColumnRange, get_layout, iter_layouts
from statline.pdf import PositionedToken, Row, concat_regions, map_row, tokenize_row


def _token(text: str, x: float, width: float = 8.0, y: float = 500.0) -> PositionedToken:
    return PositionedToken(text=text, x=x, y=y, width=width)


def _row(*tokens: PositionedToken) -> Row:
    return Row(tokens=tuple(tokens), y=500.0)


def test_column_range_is_half_open():
    column = ColumnRange("jersey", 15, 33)
    assert column.contains(15)
    assert column.contains(32.9)
    assert not column.contains(33)


def test_map_row_takes_first_token_and_joins_names():
    layout = get_layout("sidearm-basketball")
    row = _row(
        _token("12", 20),
        _token("Doe,", 40, 18),
        _token("Jane", 62, 18),
        _token("20-18", 125, 20),
        _token("30.1", 175, 14),
        _token("14.5", 580, 14),
    )

    fields = map_row(row, layout)

    assert fields["jersey"] == "12"
    assert fields["name"] == "Doe, Jane"
    assert fields["gp_gs"] == "20-18"
    assert fields["min_avg"] == "30.1"
    assert fields["pts_avg"] == "14.5"
    assert fields["fg_fga"] == ""


def test_map_row_rounds_positions_for_sidearm_layouts():
    layout = get_layout("sidearm-basketball")
    # 32.6 rounds to 33, which belongs to the name column
    fields = map_row(_row(_token("7", 14.6), _token("Lee", 32.6)), layout)
    assert fields["jersey"] == "7"
    assert fields["name"] == "Lee"


def test_tokenize_row_merges_close_runs_but_not_across_breaks():
    tokens = tokenize_row(
        _row(_token("12", 200), _token("15", 211), _token("3", 522, 4), _token("4", 527, 4)),
        gap=5,
        breaks=(525,),
    )
    assert [t.text for t in tokens] == ["1215", "3", "4"]
    assert tokens[0].x == 200
    assert tokens[0].width == pytest.approx(19)


def test_concat_regions_joins_every_token_in_a_region():
    layout = ColumnLayout(
        key="test",
        revision="1",
        round_x=False,
        columns=(ColumnRange("a", 0, 50), ColumnRange("b", 50, 100)),
    )
    values = concat_regions([_token("3", 10), _token("72", 30), _token("9", 60), _token("x", 150)], layout)
    assert values == {"a": "372", "b": "9"}


def test_layout_round_trips_through_json(tmp_path: Path):
    layout = get_layout("fused-baseball-batting")
    path = tmp_path / "layout.json"
    layout.save(path)

    loaded = ColumnLayout.load(path)

    assert loaded == layout
    assert loaded.column("sb_att").x_max == 525


def test_layouts_are_ordered_and_lookups_fail_loudly():
    for layout in iter_layouts():
        assert layout.fields[0] in ("jersey", "name")
    with pytest.raises(KeyError):
        get_layout("sidearm-curling")
    with pytest.raises(KeyError):
        get_layout("sidearm-basketball").column("xg")
