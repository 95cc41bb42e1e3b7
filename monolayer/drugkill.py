"""Drug kill curves: metabolism-driven kill models combined with radiation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .radiation import NPLOT, RadiationParams

__all__ = [
    "KillParams",
    "experiment_kill_constant",
    "drug_kill_curve",
    "drug_radiation_curve",
]

_SECONDS_PER_HOUR = 3600.0


@dataclass(frozen=True)
class KillParams:
    """Kill parameters of one drug form acting on one cell type.

    Values are in the units shown in the GUI: ``kmet0`` per minute, ``ko2`` in
    uM and ``kill_duration`` in minutes. ``kill_o2``, ``kill_drug``,
    ``kill_duration`` and ``kill_fraction`` describe the kill experiment;
    ``kd`` is the kill probability rate parameter and ``kill_model`` (1..5)
    selects how the kill rate depends on drug and metabolism.
    """

    kmet0: float
    c2: float
    ko2: float
    n_o2: float
    kill_o2: float
    kill_drug: float
    kill_duration: float
    kill_fraction: float
    kd: float
    kill_model: int
    kills: bool = True

    def metabolism_rate(self, c_o2: float) -> float:
        """Return the metabolism rate constant (per second) at O2 level ``c_o2``."""
        kmet0 = self.kmet0 / 60  # /min -> /sec
        ko2 = 1.0e-3 * self.ko2  # uM -> mM
        ko2_n = ko2**self.n_o2
        return (1 - self.c2 + self.c2 * ko2_n / (ko2_n + c_o2**self.n_o2)) * kmet0

    def _rate(self, cdrug: float, dmdt: float) -> float:
        model = self.kill_model
        if model == 1:
            return dmdt
        if model == 2:
            return dmdt * cdrug
        if model == 3:
            return dmdt**2
        if model == 4:
            return cdrug
        if model == 5:
            return cdrug**2
        raise ValueError(f"unknown kill model: {model}")

    def kill_exponent(self, cdrug: float, c_o2: float) -> float:
        """Return the kill probability rate (per second) at the given concentrations."""
        dmdt = self.metabolism_rate(c_o2) * cdrug
        return self.kd * self._rate(cdrug, dmdt)


def experiment_kill_constant(kill: KillParams) -> float:
    """Return the Kd that reproduces the kill fraction of the kill experiment."""
    duration = 60 * kill.kill_duration  # min -> sec
    cdrug = kill.kill_drug
    dmdt = kill.metabolism_rate(kill.kill_o2) * cdrug
    rate = kill._rate(cdrug, dmdt)
    return -math.log(1 - kill.kill_fraction) / (duration * rate)


def _select(sf: float, plot: str) -> float:
    return 1 - sf if plot == "KF" else sf


def drug_kill_curve(
    kill: KillParams, c_o2: float, maxdose: float, plot: str
) -> tuple[list[float], list[float]] | None:
    """Return drug concentrations and one-hour kill ("KF") or survival fractions.

    Returns None when the drug does not kill.
    """
    if not kill.kills:
        return None
    concs = [i * maxdose / (NPLOT - 1) for i in range(NPLOT)]
    values = [
        _select(math.exp(-kill.kill_exponent(cdrug, c_o2) * _SECONDS_PER_HOUR), plot)
        for cdrug in concs
    ]
    return concs, values


def drug_radiation_curve(
    kill: KillParams,
    radiation: RadiationParams,
    max_o2: float,
    cdrug: float,
    rad_dose: float,
    plot: str,
) -> tuple[list[float], list[float]] | None:
    """Return O2 levels and combined drug plus radiation kill or survival fractions.

    Returns None when the drug does not kill.
    """
    if not kill.kills:
        return None
    levels = [i * max_o2 / (NPLOT - 1) for i in range(NPLOT)]
    values = []
    for c_o2 in levels:
        sf_drug = math.exp(-kill.kill_exponent(cdrug, c_o2) * _SECONDS_PER_HOUR)
        sf_rad = radiation.survival_fraction(rad_dose, c_o2)
        values.append(_select(sf_rad * sf_drug, plot))
    return levels, values