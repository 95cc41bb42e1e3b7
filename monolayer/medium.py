"""Medium glucose depletion, colony size distribution and popup plot requests."""

from __future__ import annotations

from collections.abc import Sequence

from .radiation import NPLOT

__all__ = [
    "glucose_depletion",
    "colony_curve",
    "colony_y_range",
    "parse_plot_request",
]

_SECONDS_PER_DAY = 24 * 60 * 60
_TIME_STEP = 100.0  # sec


def glucose_depletion(
    ncells: int,
    ndays: float,
    medium_volume: float,
    initial_conc: float,
    mm_km: float,
    hill_n: int,
    consumption: float,
) -> tuple[list[float], list[float]]:
    """Return days and medium glucose concentration (mM) at NPLOT points.

    ``ncells`` cells consume glucose from ``medium_volume`` cm3 of medium at a
    Hill-function rate with maximum ``consumption`` mol/cell/s. The
    concentration never falls below zero. O2 has no effect on consumption.
    """
    max_cell_rate = consumption * 1.0e6  # mol/cell/s -> umol/cell/s
    nt = int(ndays * _SECONDS_PER_DAY / ((NPLOT - 1) * _TIME_STEP))
    conc = initial_conc
    t = 0.0
    days = [0.0]
    concs = [conc]
    km_n = mm_km**hill_n
    for _ in range(1, NPLOT):
        for _ in range(nt):
            c_n = conc**hill_n
            metab = c_n / (km_n + c_n)
            dcdt = ncells * (-metab * max_cell_rate) / medium_volume
            conc = max(conc + dcdt * _TIME_STEP, 0.0)
            t += _TIME_STEP
        days.append(t / _SECONDS_PER_DAY)
        concs.append(conc)
    return days, concs


def colony_curve(
    dist: Sequence[float], ddist: float
) -> tuple[list[float], list[float]] | None:
    """Return bin centres and probabilities of a colony size distribution.

    Returns None when every probability is zero, as there is nothing to plot.
    """
    probs = [float(p) for p in dist]
    if max(probs, default=0.0) == 0:
        return None
    centres = [(i + 0.5) * ddist for i in range(len(probs))]
    return centres, probs


def colony_y_range(ymax: float) -> float:
    """Return the top of the y axis: the first multiple of 0.05 above ``ymax``, at most 1."""
    i = next((i for i in range(1, 20) if ymax < i * 0.05), 20)
    return i * 0.05


def parse_plot_request(name: str) -> tuple[str, str] | None:
    """Split a button name such as ``pushButton_radSF_1`` into plot type and cell type.

    Returns None unless the name has exactly three ``_``-separated parts.
    """
    parts = name.split("_")
    if len(parts) != 3:
        return None
    return parts[1], parts[2]