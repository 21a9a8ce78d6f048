"""Rubik's cube model, move notation, scrambler and first-two-layers stage solver."""

__version__ = "1.2.0"
__all__ = ["cube", "step", "solver", "stages", "scrambler"]