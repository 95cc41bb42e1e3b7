"""Playback of recorded cell position frames into a cell scene."""

from __future__ import annotations

import os
from types import TracebackType

from .cells import parse_frame
from .scene import CellScene

__all__ = ["Player"]


class Player:
    """Steps through a cell position file one frame at a time.

    Each frame is a run of ``T`` cell lines ended by an ``E`` line.
    Raises OSError if the file cannot be opened.
    """

    def __init__(
        self, path: str | os.PathLike[str], scene: CellScene, save_image: bool = False
    ) -> None:
        self._stream = open(path, encoding="utf-8")
        self.scene = scene
        self.save_image = save_image
        self.casename = ""
        self.saved_frames: list[str] = []
        self.framenum = 0
        if not scene.first_render:
            scene.cleanup()
        self.playing = True
        self.paused = False

    def __enter__(self) -> Player:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self.playing:
            self.stop()

    def _at_end(self) -> bool:
        pos = self._stream.tell()
        if not self._stream.read(1):
            return True
        self._stream.seek(pos)
        return False

    def next_frame(self) -> bool:
        """Show the next frame; return False once playing has ended."""
        if not self.playing:
            return False
        if self.paused:
            return True
        if self._at_end():
            self.stop()
            return False
        cells = parse_frame(iter(self._stream.readline, ""))
        self.scene.set_cells(cells)
        self.scene.process_cells()
        if self.save_image:
            self.saved_frames.append(self.frame_name(self.casename))
        self.framenum += 1
        return True

    def pause(self) -> None:
        """Hold the current frame."""
        self.paused = True

    def playon(self) -> None:
        """Resume after a pause."""
        self.paused = False

    def stop(self) -> None:
        """Stop playing and close the file."""
        self._stream.close()
        self.playing = False
        self.paused = False

    def frame_name(self, casename: str) -> str:
        """Return the image file name for the current frame number."""
        return f"{casename}{self.framenum:04d}.jpg"