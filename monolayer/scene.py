"""Cell scene: keeps one display actor per cell tag in step with the cell list."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .cells import CellPos, cells_from_list, unpack_colour

__all__ = ["Actor", "CellScene"]

Colour = tuple[float, float, float]

_AXIS_CENTRE = -2
_AXIS_END = -3
_AXIS_BOTTOM = -4

_STATE_COLOURS: dict[int, Colour] = {
    -1: (0.5, 0.5, 0.5),  # non-cognate
    _AXIS_CENTRE: (1.0, 1.0, 1.0),
    _AXIS_END: (0.5, 0.0, 0.5),
    _AXIS_BOTTOM: (1.0, 0.2, 1.0),
}


@dataclass
class Actor:
    """The displayed sphere of one cell tag."""

    active: bool = False
    colour: Colour = (0.0, 0.0, 0.0)
    opacity: float = 1.0
    position: tuple[int, int, int] = (0, 0, 0)
    scale: float = 1.0


@dataclass
class CellScene:
    """The set of cells on display, indexed by unique cell tag.

    ``actors[tag]`` exists for every tag up to the largest seen; an actor is
    active while its tag is in the current cell list.
    """

    cells: list[CellPos] = field(default_factory=list)
    actors: list[Actor] = field(default_factory=list)
    opacity: dict[int, float] = field(default_factory=lambda: {1: 1.0, 2: 1.0})
    display_celltype: dict[int, bool] = field(default_factory=lambda: {1: True, 2: True})
    celltype_colour: dict[int, Colour] = field(default_factory=dict)
    use_celltype_colour: bool = True
    paused: bool = False
    first_render: bool = True

    def __init__(self) -> None:
        self.cells = []
        self.actors = []
        self.opacity = {1: 1.0, 2: 1.0}
        self.display_celltype = {1: True, 2: True}
        self.celltype_colour = {}
        self.use_celltype_colour = True
        self.paused = False
        self.first_render = True

    def load_cell_list(self, values: Sequence[int], ncells: int) -> None:
        """Replace the cells with those packed in a flat integer list."""
        self.cells = cells_from_list(values, ncells)

    def set_cells(self, cells: Iterable[CellPos]) -> None:
        """Replace the current cells."""
        self.cells = list(cells)

    def _colour(self, state: int) -> Colour:
        if state < 0:
            return _STATE_COLOURS.get(state, (0.0, 0.0, 0.0))
        if self.use_celltype_colour:
            return self.celltype_colour.get(state, (0.0, 0.0, 0.0))
        return unpack_colour(state)

    def process_cells(self) -> None:
        """Bring the actors in line with the current cells.

        With no cells the actors are left as they are.
        """
        if not self.cells:
            return
        maxtag = max(0, max(cell.tag for cell in self.cells))
        self.actors.extend(Actor() for _ in range(len(self.actors), maxtag + 1))
        present: set[int] = set()
        for cell in self.cells:
            if self.use_celltype_colour and not self.display_celltype.get(cell.state, True):
                continue
            present.add(cell.tag)
            actor = self.actors[cell.tag]
            actor.active = True
            actor.colour = self._colour(cell.state)
            actor.opacity = self.opacity.get(cell.state, 1.0)
            actor.position = (cell.x, cell.y, cell.z)
            actor.scale = cell.diameter
        for tag, actor in enumerate(self.actors):
            if actor.active and tag not in present:
                actor.active = False
        self.first_render = False

    def cleanup(self) -> None:
        """Remove every actor from the scene."""
        for actor in self.actors:
            actor.active = False
        self.actors.clear()
        self.first_render = True

    def set_opacity(self, position: int) -> None:
        """Set cell opacity from a 0..100 slider position; 100 is almost transparent."""
        value = 0.001 if position == 100 else (100.0 - position) / 100
        self.opacity[1] = value
        self.opacity[2] = value
        if self.paused:
            self.process_cells()