import pytest

from monolayer.medium import (
    colony_curve,
    colony_y_range,
    glucose_depletion,
    parse_plot_request,
)
from monolayer.radiation import NPLOT


def _run(**overrides):
    args = dict(
        ncells=1000,
        ndays=11,
        medium_volume=0.2,
        initial_conc=5.5,
        mm_km=220,
        hill_n=1,
        consumption=7.1e-17,
    )
    args.update(overrides)
    return glucose_depletion(**args)


def test_glucose_depletion_has_nplot_points_starting_at_initial():
    days, concs = _run()
    assert len(days) == NPLOT
    assert len(concs) == NPLOT
    assert days[0] == 0.0
    assert concs[0] == 5.5


def test_glucose_depletion_ends_at_ndays_when_steps_divide_evenly():
    days, _ = _run(ndays=11)
    assert days[-1] == pytest.approx(11.0)


def test_glucose_depletion_is_non_increasing():
    _, concs = _run(ncells=10**6)
    assert all(b <= a for a, b in zip(concs, concs[1:]))
    assert concs[-1] < concs[0]


def test_glucose_without_consumption_stays_constant():
    _, concs = _run(consumption=0.0)
    assert all(c == 5.5 for c in concs)


def test_glucose_never_negative():
    _, concs = _run(ncells=10**9, consumption=1.0e-10)
    assert min(concs) == 0.0
    assert concs[-1] == 0.0


def test_glucose_days_increase():
    days, _ = _run(ndays=5)
    assert all(b > a for a, b in zip(days, days[1:]))


def test_colony_curve_bin_centres():
    result = colony_curve([0.1, 0.3, 0.0], 2.0)
    assert result is not None
    x, y = result
    assert x == [1.0, 3.0, 5.0]
    assert y == [0.1, 0.3, 0.0]


def test_colony_curve_all_zero_is_none():
    assert colony_curve([0.0, 0.0], 1.0) is None
    assert colony_curve([], 1.0) is None


def test_colony_y_range_steps_of_005():
    assert colony_y_range(0.01) == pytest.approx(0.05)
    assert colony_y_range(0.07) == pytest.approx(0.10)


def test_colony_y_range_capped_at_one():
    assert colony_y_range(2.0) == pytest.approx(1.0)


def test_colony_y_range_above_ymax():
    for ymax in (0.0, 0.12, 0.33, 0.9):
        assert colony_y_range(ymax) > ymax


@pytest.mark.parametrize(
    "name, expected",
    [
        ("pushButton_radSF_1", ("radSF", "1")),
        ("pushButton_glucose_0", ("glucose", "0")),
        ("pushButton_complementarySF_0", ("complementarySF", "0")),
    ],
)
def test_parse_plot_request(name, expected):
    assert parse_plot_request(name) == expected


@pytest.mark.parametrize("name", ["pushButton_colony", "a_b_c_d", "plain"])
def test_parse_plot_request_rejects_other_shapes(name):
    assert parse_plot_request(name) is None