import pytest

from monolayer.cells import CellPos
from monolayer.snapshot import cell_locations, format_locations, write_locations


def _cells():
    return [
        CellPos(tag=0, x=3, y=4, z=5, diameter=0.5, state=1),
        CellPos(tag=7, x=120, y=8, z=0, diameter=1.0, state=2),
    ]


def test_cell_locations_radius_is_half_diameter_in_um():
    rows = cell_locations(_cells(), 0.001)
    assert [r[:4] for r in rows] == [(1, 3, 4, 5), (2, 120, 8, 0)]
    assert rows[1][4] == pytest.approx(2 * rows[0][4])
    assert rows[1][4] == pytest.approx(0.001 * 1.0e4 / 2)


def test_format_locations_header_and_round_trip():
    text = format_locations(_cells(), 0.001)
    lines = text.splitlines()
    assert text.endswith("\n")
    assert float(lines[0]) == pytest.approx(10.0)
    assert int(lines[1]) == 2
    assert len(lines) == 4
    parsed = [line.split() for line in lines[2:]]
    rows = cell_locations(_cells(), 0.001)
    for fields, row in zip(parsed, rows):
        assert tuple(int(v) for v in fields[:4]) == row[:4]
        assert float(fields[4]) == pytest.approx(row[4], abs=0.005)


def test_format_locations_field_widths():
    line = format_locations(_cells(), 0.001).splitlines()[2]
    assert line == "1   3   4   5   2.50"


def test_format_locations_empty():
    assert format_locations([], 0.001).splitlines() == ["10", "0"]


def test_write_locations_writes_listing(tmp_path):
    path = tmp_path / "cells.txt"
    assert write_locations(path, _cells(), 0.001) is True
    assert path.read_text(encoding="utf-8") == format_locations(_cells(), 0.001)


def test_write_locations_skips_empty(tmp_path):
    path = tmp_path / "cells.txt"
    assert write_locations(path, [], 0.001) is False
    assert not path.exists()


def test_write_locations_bad_path_raises(tmp_path):
    with pytest.raises(OSError):
        write_locations(tmp_path / "missing" / "cells.txt", _cells(), 0.001)