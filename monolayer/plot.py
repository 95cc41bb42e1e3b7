"""Time-series and profile plots: curves by name with an automatic y scale."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

__all__ = ["NCMAX", "PEN_COLOURS", "Curve", "Plot", "calc_yscale"]

NCMAX = 8
PEN_COLOURS: tuple[str, ...] = ("black", "red", "blue", "darkGreen", "magenta", "darkCyan")

_X_TITLES = {
    "conc": "Distance (um)",
    "vol": "Volume fraction",
    "oxy": "O2 level",
}


def calc_yscale(yval: float) -> float:
    """Return the y axis extent that leaves headroom above ``yval``."""
    return 1.3 * yval


@dataclass
class Curve:
    """One named curve with its data and pen colour."""

    title: str
    x: list[float] = field(default_factory=list)
    y: list[float] = field(default_factory=list)
    pen: str = PEN_COLOURS[0]


class Plot:
    """A plot holding up to NCMAX curves in fixed slots."""

    def __init__(self, name: str, casename: str) -> None:
        self.name = name
        self.curves: list[Curve | None] = [None] * NCMAX
        self.yscale = 0.0
        self.x_title = _X_TITLES.get(casename, "Time (hours)")
        if name:
            self.curves[0] = Curve(casename)

    @property
    def ncurves(self) -> int:
        """The number of curves attached."""
        return sum(1 for curve in self.curves if curve is not None)

    @property
    def y_range(self) -> tuple[float, float]:
        """The current y axis range."""
        return 0.0, self.yscale

    def add_curve(self, name: str) -> bool:
        """Attach a curve in the first free slot; return False if all are taken."""
        for k, curve in enumerate(self.curves):
            if curve is None:
                self.curves[k] = Curve(name)
                return True
        return False

    def remove_curve(self, name: str) -> None:
        """Detach every curve titled ``name``."""
        self.curves = [
            None if curve is not None and curve.title == name else curve
            for curve in self.curves
        ]

    def remove_all_curves(self) -> None:
        """Detach every curve."""
        self.curves = [None] * NCMAX

    def set_y_scale(self, maxval: float) -> None:
        """Set the y axis to fit ``maxval`` with headroom."""
        self.yscale = calc_yscale(maxval)

    def redraw(
        self,
        x: Sequence[float],
        y: Sequence[float],
        name: str,
        fixed_yscale: float = 0,
    ) -> None:
        """Give new data to the curves titled ``name`` and update the y scale.

        With ``fixed_yscale`` zero the scale only grows, to fit the last y value.
        """
        if len(x) != len(y):
            raise ValueError("x and y must have the same length")
        if not y:
            raise ValueError("no data to draw")
        for k, curve in enumerate(self.curves):
            if curve is None or curve.title != name:
                continue
            curve.pen = PEN_COLOURS[k] if k < len(PEN_COLOURS) else PEN_COLOURS[0]
            curve.x = list(x)
            curve.y = list(y)
            if fixed_yscale == 0:
                ylast = y[-1]
                if ylast > self.yscale:
                    self.yscale = max(self.yscale, calc_yscale(ylast))
            else:
                self.yscale = fixed_yscale