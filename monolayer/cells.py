"""Cell positions as delivered by the simulation or read from a player file."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "N_CELLINFO",
    "CellPos",
    "unpack_colour",
    "named_colour",
    "parse_frame",
    "cells_from_list",
]

N_CELLINFO = 7

Colour = tuple[float, float, float]

_NAMED_COLOURS: dict[str, Colour] = {
    "red": (1.0, 0.0, 0.0),
    "orange": (0.8, 0.5, 0.0),
    "yellow": (1.0, 1.0, 0.0),
    "green": (0.0, 1.0, 0.0),
    "blue": (0.0, 0.0, 1.0),
    "purple": (1.0, 0.0, 1.0),
    "brown": (0.5, 0.5, 0.2),
}


@dataclass
class CellPos:
    """One cell: unique tag, lattice position, diameter, state and highlight flag."""

    tag: int
    x: int
    y: int
    z: int
    diameter: float
    state: int
    highlight: int = 0


def unpack_colour(x: int) -> Colour:
    """Interpret an int packed as 0xRRGGBB and return (r, g, b) in 0..1."""
    r = x >> 16
    rest = x - (r << 16)
    g = rest >> 8
    b = rest - (g << 8)
    return r / 255.0, g / 255.0, b / 255.0


def named_colour(name: str) -> Colour | None:
    """Return the rgb colour for a cell-type colour name, or None if unknown."""
    return _NAMED_COLOURS.get(name)


def _parse_cell(fields: list[str]) -> CellPos:
    if len(fields) < 7:
        raise ValueError(f"cell line has too few fields: {' '.join(fields)!r}")
    return CellPos(
        tag=int(fields[1]),
        x=int(fields[2]),
        y=int(fields[3]),
        z=int(fields[4]),
        diameter=float(fields[5]),
        state=int(float(fields[6])),
    )


def parse_frame(lines: Iterable[str]) -> list[CellPos]:
    """Read one frame of ``T`` cell lines, stopping after the ``E`` line.

    When given an iterator, the lines after the ``E`` line are left unread.
    Lines of other kinds are ignored.
    """
    cells: list[CellPos] = []
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        if fields[0] == "T":
            cells.append(_parse_cell(fields))
        elif fields[0] == "E":
            break
    return cells


def cells_from_list(values: Sequence[int], ncells: int) -> list[CellPos]:
    """Unpack ``ncells`` records of N_CELLINFO ints each from a flat list."""
    if ncells < 0:
        raise ValueError(f"negative cell count: {ncells}")
    if len(values) < N_CELLINFO * ncells:
        raise ValueError(
            f"{len(values)} values cannot hold {ncells} cells of {N_CELLINFO} values"
        )
    return [
        CellPos(
            tag=tag,
            x=x,
            y=y,
            z=z,
            state=state,
            diameter=diameter / 100.0,
            highlight=highlight,
        )
        for tag, x, y, z, state, diameter, highlight in (
            values[j : j + N_CELLINFO] for j in range(0, N_CELLINFO * ncells, N_CELLINFO)
        )
    ]