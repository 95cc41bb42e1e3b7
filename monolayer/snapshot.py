"""Cell location listings saved alongside a scene snapshot."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .cells import CellPos

__all__ = ["cell_locations", "format_locations", "write_locations"]


def _dx_um(delta_x: float) -> float:
    return delta_x * 1.0e4  # cm -> um


def cell_locations(
    cells: Iterable[CellPos], delta_x: float
) -> list[tuple[int, int, int, int, float]]:
    """Return (state, x, y, z, radius in um) for each cell.

    ``delta_x`` is the lattice spacing in cm; cell diameters are fractions of it.
    """
    dx = _dx_um(delta_x)
    return [(c.state, c.x, c.y, c.z, c.diameter * dx / 2) for c in cells]


def format_locations(cells: Iterable[CellPos], delta_x: float) -> str:
    """Return the location listing: spacing in um, cell count, then one line per cell."""
    rows = cell_locations(cells, delta_x)
    lines = [f"{_dx_um(delta_x):g}", str(len(rows))]
    lines.extend(f"{s} {x:3d} {y:3d} {z:3d} {r:6.2f}" for s, x, y, z, r in rows)
    return "".join(line + "\n" for line in lines)


def write_locations(
    path: str | os.PathLike[str], cells: Iterable[CellPos], delta_x: float
) -> bool:
    """Write the location listing to ``path``; return False if there are no cells.

    Raises OSError if the file cannot be written.
    """
    cells = list(cells)
    if not cells:
        return False
    with open(path, "w", encoding="utf-8") as out:
        out.write(format_locations(cells, delta_x))
    return True