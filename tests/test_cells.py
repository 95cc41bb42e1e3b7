import pytest

from monolayer.cells import (
    N_CELLINFO,
    CellPos,
    cells_from_list,
    named_colour,
    parse_frame,
    unpack_colour,
)


def test_unpack_primary_colours():
    assert unpack_colour(0xFF0000) == (1.0, 0.0, 0.0)
    assert unpack_colour(0x00FF00) == (0.0, 1.0, 0.0)
    assert unpack_colour(0x0000FF) == (0.0, 0.0, 1.0)


@pytest.mark.parametrize("r,g,b", [(0, 0, 0), (12, 200, 7), (255, 255, 255), (1, 2, 3)])
def test_unpack_round_trip(r, g, b):
    assert unpack_colour((r << 16) | (g << 8) | b) == (r / 255.0, g / 255.0, b / 255.0)


def test_named_colours():
    assert named_colour("orange") == (0.8, 0.5, 0.0)
    assert named_colour("brown") == (0.5, 0.5, 0.2)
    assert named_colour("purple") == (1.0, 0.0, 1.0)
    assert named_colour("grey") is None


def test_parse_frame_reads_until_end_marker():
    lines = iter(["T 3 1 2 3 0.5 2", "", "X ignored", "T 4 5 6 7 1.25 1.9", "E", "T 9 0 0 0 1 1"])
    cells = parse_frame(lines)
    assert cells == [
        CellPos(tag=3, x=1, y=2, z=3, diameter=0.5, state=2),
        CellPos(tag=4, x=5, y=6, z=7, diameter=1.25, state=1),
    ]
    assert list(lines) == ["T 9 0 0 0 1 1"]


def test_parse_frame_without_end_returns_all():
    cells = parse_frame(["T 1 0 0 0 1.0 1\n"])
    assert [c.tag for c in cells] == [1]


def test_parse_frame_short_line_raises():
    with pytest.raises(ValueError):
        parse_frame(["T 1 2 3"])


def test_cells_from_list():
    values = [5, 1, 2, 3, 1, 150, 0, 8, 4, 5, 6, 2, 80, 1]
    cells = cells_from_list(values, 2)
    assert len(cells) == 2
    assert cells[0] == CellPos(tag=5, x=1, y=2, z=3, diameter=1.5, state=1, highlight=0)
    assert cells[1].tag == 8
    assert cells[1].diameter == 80 / 100.0
    assert cells[1].highlight == 1


def test_cells_from_list_ignores_trailing_values():
    values = list(range(N_CELLINFO * 3))
    assert len(cells_from_list(values, 2)) == 2


def test_cells_from_list_too_short():
    with pytest.raises(ValueError):
        cells_from_list([1, 2, 3], 1)
    with pytest.raises(ValueError):
        cells_from_list([], -1)