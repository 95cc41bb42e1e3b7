"""Dose-response curves, medium depletion, cell-scene playback and plot curves for a tumour monolayer simulation."""

__version__ = "2.0"