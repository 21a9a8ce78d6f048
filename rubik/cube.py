"""Sticker-level model of an N×N×N cube."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional

from rubik.step import (
    Algorithm,
    Axis,
    FaceId,
    NotationAlgorithm,
    NotationStep,
    Step,
)

Sticker = Optional[FaceId]
Position = tuple[FaceId, int, int]

_FACE_ORDER = (
    FaceId.UP,
    FaceId.DOWN,
    FaceId.RIGHT,
    FaceId.LEFT,
    FaceId.FRONT,
    FaceId.BACK,
)

_STICKER_CHARS = {
    FaceId.UP: "u",
    FaceId.DOWN: "d",
    FaceId.RIGHT: "r",
    FaceId.LEFT: "l",
    FaceId.FRONT: "f",
    FaceId.BACK: "b",
    None: "0",
}
_CHAR_STICKERS = {char: sticker for sticker, char in _STICKER_CHARS.items()}


def sticker_to_char(sticker: Sticker) -> str:
    """Return the one-letter code of a sticker; hidden stickers are ``0``."""
    return _STICKER_CHARS[sticker]


def sticker_from_char(char: str) -> Sticker:
    """Parse a one-letter sticker code."""
    try:
        return _CHAR_STICKERS[char]
    except KeyError:
        raise ValueError(f"Could not parse sticker {char}") from None


class _Side(Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


def _rotate_grid(grid: list[list[Sticker]]) -> None:
    n = len(grid)
    old = [row[:] for row in grid]
    for y, row in enumerate(grid):
        for x in range(n):
            row[x] = old[x][n - 1 - y]


def _border_cells(side: _Side, layer: int, n: int) -> list[tuple[int, int]]:
    if side is _Side.TOP:
        return [(layer, i) for i in range(n)]
    if side is _Side.RIGHT:
        return [(i, n - 1 - layer) for i in range(n)]
    if side is _Side.BOTTOM:
        return [(n - 1 - layer, n - 1 - i) for i in range(n)]
    return [(n - 1 - i, layer) for i in range(n)]


@dataclass(frozen=True)
class _Neighbours:
    top: tuple[FaceId, _Side]
    right: tuple[FaceId, _Side]
    bottom: tuple[FaceId, _Side]
    left: tuple[FaceId, _Side]
    opposite: FaceId


_ADJACENCY = {
    FaceId.UP: _Neighbours(
        top=(FaceId.BACK, _Side.TOP),
        right=(FaceId.RIGHT, _Side.TOP),
        bottom=(FaceId.FRONT, _Side.TOP),
        left=(FaceId.LEFT, _Side.TOP),
        opposite=FaceId.DOWN,
    ),
    FaceId.DOWN: _Neighbours(
        top=(FaceId.FRONT, _Side.BOTTOM),
        right=(FaceId.RIGHT, _Side.BOTTOM),
        bottom=(FaceId.BACK, _Side.BOTTOM),
        left=(FaceId.LEFT, _Side.BOTTOM),
        opposite=FaceId.UP,
    ),
    FaceId.LEFT: _Neighbours(
        top=(FaceId.UP, _Side.LEFT),
        right=(FaceId.FRONT, _Side.LEFT),
        bottom=(FaceId.DOWN, _Side.LEFT),
        left=(FaceId.BACK, _Side.RIGHT),
        opposite=FaceId.RIGHT,
    ),
    FaceId.RIGHT: _Neighbours(
        top=(FaceId.UP, _Side.RIGHT),
        right=(FaceId.BACK, _Side.LEFT),
        bottom=(FaceId.DOWN, _Side.RIGHT),
        left=(FaceId.FRONT, _Side.RIGHT),
        opposite=FaceId.LEFT,
    ),
    FaceId.BACK: _Neighbours(
        top=(FaceId.UP, _Side.TOP),
        right=(FaceId.LEFT, _Side.LEFT),
        bottom=(FaceId.DOWN, _Side.BOTTOM),
        left=(FaceId.RIGHT, _Side.RIGHT),
        opposite=FaceId.FRONT,
    ),
    FaceId.FRONT: _Neighbours(
        top=(FaceId.UP, _Side.BOTTOM),
        right=(FaceId.RIGHT, _Side.LEFT),
        bottom=(FaceId.DOWN, _Side.TOP),
        left=(FaceId.LEFT, _Side.RIGHT),
        opposite=FaceId.BACK,
    ),
}

_AXIS_FACE = {Axis.Y: FaceId.UP, Axis.X: FaceId.RIGHT, Axis.Z: FaceId.FRONT}

_CORNERS: tuple[tuple[Position, Position, Position], ...] = (
    ((FaceId.FRONT, 0, 0), (FaceId.UP, 2, 0), (FaceId.LEFT, 0, 2)),
    ((FaceId.FRONT, 0, 2), (FaceId.UP, 2, 2), (FaceId.RIGHT, 0, 0)),
    ((FaceId.FRONT, 2, 2), (FaceId.DOWN, 0, 2), (FaceId.RIGHT, 2, 0)),
    ((FaceId.FRONT, 2, 0), (FaceId.DOWN, 0, 0), (FaceId.LEFT, 2, 2)),
    ((FaceId.BACK, 0, 0), (FaceId.UP, 0, 2), (FaceId.RIGHT, 0, 2)),
    ((FaceId.BACK, 0, 2), (FaceId.UP, 0, 0), (FaceId.LEFT, 0, 0)),
    ((FaceId.BACK, 2, 2), (FaceId.DOWN, 2, 0), (FaceId.LEFT, 2, 0)),
    ((FaceId.BACK, 2, 0), (FaceId.DOWN, 2, 2), (FaceId.RIGHT, 2, 2)),
)


def _top(face: FaceId) -> Position:
    return (face, 0, 1)


def _bottom(face: FaceId) -> Position:
    return (face, 2, 1)


def _left(face: FaceId) -> Position:
    return (face, 1, 0)


def _right(face: FaceId) -> Position:
    return (face, 1, 2)


_EDGES: tuple[tuple[Position, Position], ...] = (
    (_top(FaceId.BACK), _top(FaceId.UP)),
    (_left(FaceId.BACK), _right(FaceId.RIGHT)),
    (_right(FaceId.BACK), _left(FaceId.LEFT)),
    (_bottom(FaceId.BACK), _bottom(FaceId.DOWN)),
    (_top(FaceId.FRONT), _bottom(FaceId.UP)),
    (_left(FaceId.FRONT), _right(FaceId.LEFT)),
    (_right(FaceId.FRONT), _left(FaceId.RIGHT)),
    (_bottom(FaceId.FRONT), _top(FaceId.DOWN)),
    (_right(FaceId.UP), _top(FaceId.RIGHT)),
    (_bottom(FaceId.RIGHT), _right(FaceId.DOWN)),
    (_left(FaceId.DOWN), _bottom(FaceId.LEFT)),
    (_top(FaceId.LEFT), _left(FaceId.UP)),
)


@dataclass(frozen=True)
class FaceData:
    """The stickers of one face, as square rows of stickers."""

    tiles: tuple[tuple[Sticker, ...], ...]

    def __post_init__(self) -> None:
        tiles = tuple(tuple(row) for row in self.tiles)
        if not tiles:
            raise ValueError("Wrong row count")
        if any(len(row) != len(tiles) for row in tiles):
            raise ValueError("Wrong row width")
        object.__setattr__(self, "tiles", tiles)

    @property
    def size(self) -> int:
        return len(self.tiles)

    @classmethod
    def parse(cls, text: str) -> FaceData:
        """Parse rows of sticker letters separated by newlines."""
        rows = [
            tuple(sticker_from_char(char) for char in row.strip())
            for row in text.split("\n")
        ]
        return cls(tuple(rows))

    def rotated(self) -> FaceData:
        """Return the face turned a quarter turn."""
        grid = [list(row) for row in self.tiles]
        _rotate_grid(grid)
        return FaceData(tuple(tuple(row) for row in grid))

    def flatten_stickers(self) -> list[Sticker]:
        """Return the stickers row by row."""
        return [sticker for row in self.tiles for sticker in row]

    def is_solved(self) -> bool:
        """True when every visible sticker has the same colour."""
        visible = {sticker for sticker in self.flatten_stickers() if sticker is not None}
        return len(visible) <= 1

    def __str__(self) -> str:
        return "".join(
            "".join(sticker_to_char(s) for s in row) + "\n" for row in self.tiles
        )


class Cube:
    """A cube of any size, held as the stickers of its six faces."""

    def __init__(self, faces: Mapping[FaceId, FaceData]) -> None:
        missing = [face for face in FaceId if face not in faces]
        if missing:
            raise ValueError(f"missing faces: {', '.join(f.name for f in missing)}")
        sizes = {faces[face].size for face in FaceId}
        if len(sizes) != 1:
            raise ValueError("all faces must have the same size")
        self._size = sizes.pop()
        self._grids = {
            face: [list(row) for row in faces[face].tiles] for face in FaceId
        }

    @property
    def size(self) -> int:
        return self._size

    @classmethod
    def solved(cls, size: int = 3) -> Cube:
        """Build a solved cube of ``size``."""
        if size < 1:
            raise ValueError(f"cube size must be at least 1, got {size}")
        return cls(
            {
                face: FaceData(tuple((face,) * size for _ in range(size)))
                for face in FaceId
            }
        )

    @classmethod
    def parse(cls, text: str) -> Cube:
        """Parse six faces (up, down, right, left, front, back) separated by blank lines."""
        try:
            faces = [FaceData.parse(block) for block in text.strip().split("\n\n")]
        except ValueError as error:
            raise ValueError(f"Error parsing face: {error}") from error
        if len(faces) != len(_FACE_ORDER):
            raise ValueError("Wrong face count")
        return cls(dict(zip(_FACE_ORDER, faces)))

    def copy(self) -> Cube:
        """Return an independent copy of the cube."""
        return Cube({face: self.get_face(face) for face in FaceId})

    def is_solved(self) -> bool:
        return all(self.get_face(face).is_solved() for face in FaceId)

    def hide_sticker(self, face: FaceId, y: int, x: int) -> None:
        """Make one sticker unknown."""
        self._grids[face][y][x] = None

    def solve(self) -> None:
        """Reset every sticker to the colour of its face."""
        for face, grid in self._grids.items():
            for row in grid:
                row[:] = [face] * self._size

    def scramble_count(self, move_count: int, rng=None) -> None:
        """Apply ``move_count`` random single-layer turns."""
        self.apply_algorithm(Algorithm.random(move_count, self._size, rng))

    def scramble(self, rng=None) -> None:
        """Apply 100 random single-layer turns."""
        self.scramble_count(100, rng)

    def get_face(self, face: FaceId) -> FaceData:
        return FaceData(tuple(tuple(row) for row in self._grids[face]))

    def apply_notation_step(self, step: NotationStep) -> None:
        self.apply_step(Step.from_notation(step, self._size))

    def apply_notation_algorithm(self, algorithm: NotationAlgorithm) -> None:
        self.apply_algorithm(Algorithm.from_notation(algorithm, self._size))

    def apply_step(self, step: Step) -> None:
        layers = step.movement.layers
        if len(layers) != self._size:
            raise ValueError(
                f"step is for a cube of size {len(layers)}, not {self._size}"
            )
        face = _AXIS_FACE[step.movement.axis]
        for depth, selected in enumerate(layers):
            if selected:
                self._turn(face, step.count, depth)

    def apply_algorithm(self, algorithm: Algorithm) -> None:
        for step in algorithm.steps:
            self.apply_step(step)

    def flatten_stickers(self) -> list[Sticker]:
        """Return all stickers, face by face in up, down, right, left, front, back order."""
        return [
            sticker
            for face in _FACE_ORDER
            for sticker in self.get_face(face).flatten_stickers()
        ]

    def find_corner(self, corner: Iterable[FaceId]) -> Optional[tuple[Position, ...]]:
        """Locate the corner piece whose colours are ``corner`` on a 3×3×3 cube."""
        return self._find(_CORNERS, corner)

    def find_edge(self, edge: Iterable[FaceId]) -> Optional[tuple[Position, ...]]:
        """Locate the edge piece whose colours are ``edge`` on a 3×3×3 cube."""
        return self._find(_EDGES, edge)

    def _find(self, candidates, colours) -> Optional[tuple[Position, ...]]:
        if self._size != 3:
            raise ValueError("pieces can only be located on a cube of size 3")
        wanted = set(colours)
        for positions in candidates:
            stickers = [self._grids[face][y][x] for face, y, x in positions]
            if None not in stickers and set(stickers) == wanted:
                return positions
        return None

    def _turn(self, face: FaceId, cw_turns: int, depth: int) -> None:
        cw = cw_turns % 4
        ccw = 4 - cw
        neighbours = _ADJACENCY[face]
        if depth == self._size - 1:
            for _ in range(cw):
                _rotate_grid(self._grids[neighbours.opposite])
        views = [neighbours.top, neighbours.right, neighbours.bottom, neighbours.left]
        for _ in range(ccw):
            if depth == 0:
                _rotate_grid(self._grids[face])
            rows = [self._read(view, depth) for view in views]
            # top <- right, right <- bottom, bottom <- left, left <- top
            for view, row in zip(views, rows[1:] + rows[:1]):
                self._write(view, depth, row)

    def _read(self, view: tuple[FaceId, _Side], layer: int) -> list[Sticker]:
        face, side = view
        grid = self._grids[face]
        return [grid[y][x] for y, x in _border_cells(side, layer, self._size)]

    def _write(
        self, view: tuple[FaceId, _Side], layer: int, row: list[Sticker]
    ) -> None:
        face, side = view
        grid = self._grids[face]
        for (y, x), sticker in zip(_border_cells(side, layer, self._size), row):
            grid[y][x] = sticker

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self._grids == other._grids

    def __repr__(self) -> str:
        return f"Cube.parse({str(self)!r})"

    def __str__(self) -> str:
        return "\n".join(str(self.get_face(face)) for face in _FACE_ORDER) + "\n\n"