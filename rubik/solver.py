"""Shortest face-turn solutions by iterative deepening search."""

from __future__ import annotations

import itertools
import sys
from typing import Optional

from rubik.cube import Cube
from rubik.step import NotationAlgorithm, NotationStep

_VALID_STEPS = NotationAlgorithm.parse("R R' L L' U U' F F' D D' B B'").steps


def _depth_solve(cube: Cube, depth: int) -> Optional[list[NotationStep]]:
    if depth == 0:
        return [] if cube.is_solved() else None
    for step in _VALID_STEPS:
        candidate = cube.copy()
        candidate.apply_notation_step(step)
        found = _depth_solve(candidate, depth - 1)
        if found is not None:
            return [step, *found]
    return None


def solve(cube: Cube) -> NotationAlgorithm:
    """Return a shortest sequence of quarter face turns that solves ``cube``.

    Hidden stickers are ignored when deciding whether a face is solved. The
    search never gives up, so an unsolvable cube makes it run forever.
    """
    for depth in itertools.count():
        print(f"Searching depth: {depth}", file=sys.stderr)
        found = _depth_solve(cube, depth)
        if found is not None:
            return NotationAlgorithm(tuple(found))
    raise AssertionError("unreachable")