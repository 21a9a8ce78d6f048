"""Solve the first two layers of a cube piece by piece."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from rubik.cube import Cube, Position
from rubik.solver import solve
from rubik.step import FaceId, NotationAlgorithm

UP, DOWN, RIGHT, LEFT, FRONT, BACK = (
    FaceId.UP,
    FaceId.DOWN,
    FaceId.RIGHT,
    FaceId.LEFT,
    FaceId.FRONT,
    FaceId.BACK,
)


@dataclass(frozen=True)
class Piece:
    """An edge (two colours) or corner (three colours) of a 3×3×3 cube."""

    faces: tuple[FaceId, ...]

    def __post_init__(self) -> None:
        faces = tuple(self.faces)
        if len(faces) not in (2, 3):
            raise ValueError(f"a piece has 2 or 3 faces, got {len(faces)}")
        object.__setattr__(self, "faces", faces)

    @property
    def is_corner(self) -> bool:
        return len(self.faces) == 3

    def locate(self, cube: Cube) -> tuple[Position, ...]:
        """Return the sticker positions this piece occupies on ``cube``."""
        found = (
            cube.find_corner(self.faces) if self.is_corner else cube.find_edge(self.faces)
        )
        if found is None:
            names = ", ".join(face.name for face in self.faces)
            raise ValueError(f"piece not found on cube: {names}")
        return found


CORNERS = (
    Piece((UP, FRONT, RIGHT)),
    Piece((UP, FRONT, LEFT)),
    Piece((UP, BACK, RIGHT)),
    Piece((UP, BACK, LEFT)),
    Piece((DOWN, FRONT, RIGHT)),
    Piece((DOWN, FRONT, LEFT)),
    Piece((DOWN, BACK, RIGHT)),
    Piece((DOWN, BACK, LEFT)),
)

EDGES = (
    Piece((UP, RIGHT)),
    Piece((UP, BACK)),
    Piece((UP, LEFT)),
    Piece((UP, FRONT)),
    Piece((DOWN, RIGHT)),
    Piece((DOWN, BACK)),
    Piece((DOWN, LEFT)),
    Piece((DOWN, FRONT)),
    Piece((FRONT, RIGHT)),
    Piece((RIGHT, BACK)),
    Piece((BACK, LEFT)),
    Piece((LEFT, FRONT)),
)

STAGES: tuple[tuple[Piece, ...], ...] = (
    (EDGES[0],),
    (EDGES[1],),
    (EDGES[2],),
    (EDGES[3],),
    (CORNERS[0],),
    (CORNERS[1],),
    (CORNERS[2],),
    (CORNERS[3],),
    (EDGES[8],),
    (EDGES[9],),
    (EDGES[10],),
    (EDGES[11],),
)


def whitelist(cube: Cube, pieces: Iterable[Piece]) -> Cube:
    """Return a copy of ``cube`` showing only the given pieces and the centres."""
    shown = {position for piece in pieces for position in piece.locate(cube)}
    shown.update((face, 1, 1) for face in FaceId)
    result = cube.copy()
    for face in FaceId:
        for y in range(3):
            for x in range(3):
                if (face, y, x) not in shown:
                    result.hide_sticker(face, y, x)
    return result


def solve_in_stages(cube: Cube) -> Iterator[NotationAlgorithm]:
    """Yield one solution per stage, each placing one more piece.

    ``cube`` itself is left unchanged; the stages are applied to a copy.
    """
    work = cube.copy()
    placed: list[Piece] = []
    for stage in STAGES:
        placed.extend(stage)
        solution = solve(whitelist(work, placed))
        work.apply_notation_algorithm(solution)
        yield solution


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a 3×3×3 cube from standard input and print a solution per stage."""
    parser = argparse.ArgumentParser(
        prog="solver",
        description="Read a cube from standard input and print stage solutions.",
    )
    parser.parse_args(argv)
    try:
        cube = Cube.parse(sys.stdin.read())
        if cube.size != 3:
            raise ValueError("only 3x3x3 cubes can be solved")
        for solution in solve_in_stages(cube):
            print(solution, flush=True)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())