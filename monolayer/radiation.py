"""Linear-quadratic radiation survival with oxygen enhancement."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["NPLOT", "RadiationParams", "survival_fraction_curve"]

NPLOT = 100


@dataclass(frozen=True)
class RadiationParams:
    """Radiosensitivity parameters of one cell type.

    ``alpha_h`` and ``beta_h`` apply under anoxia; ``oer_alpha`` and
    ``oer_beta`` are the maximum oxygen enhancement ratios and ``km`` is the
    O2 concentration of half-maximal radiosensitivity.
    """

    alpha_h: float
    beta_h: float
    oer_alpha: float
    oer_beta: float
    km: float
    ser: float = 1.0

    def survival_fraction(self, dose: float, c_o2: float) -> float:
        """Return the fraction of cells surviving ``dose`` Gy at O2 level ``c_o2``."""
        denom = c_o2 + self.km
        if denom == 0:
            raise ZeroDivisionError("O2 concentration plus Km must not be zero")
        oer_alpha_d = dose * (self.oer_alpha * c_o2 + self.km) / denom * self.ser
        oer_beta_d = dose * (self.oer_beta * c_o2 + self.km) / denom * self.ser
        exponent = self.alpha_h * oer_alpha_d + self.beta_h * oer_beta_d**2
        return math.exp(-exponent)


def survival_fraction_curve(
    radiation: RadiationParams, c_o2: float, maxdose: float
) -> tuple[list[float], list[float]]:
    """Return doses and survival fractions at NPLOT points from 0 below ``maxdose``."""
    doses = [maxdose * i / NPLOT for i in range(NPLOT)]
    return doses, [radiation.survival_fraction(dose, c_o2) for dose in doses]