"""Cube moves: face notation, layer moves and sequences of moves."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum
from typing import Union


class FaceId(Enum):
    """One of the six faces of the cube."""

    UP = "up"
    DOWN = "down"
    RIGHT = "right"
    LEFT = "left"
    FRONT = "front"
    BACK = "back"


class MiddleRotation(Enum):
    """Slice moves between two opposite faces."""

    M = "M"
    E = "E"
    S = "S"


class CubeRotation(Enum):
    """Rotations of the whole cube."""

    X = "x"
    Y = "y"
    Z = "z"


class MovementKind(Enum):
    """What part of the cube a movement turns."""

    ROTATION = "rotation"
    DOUBLE_ROTATION = "double_rotation"
    MIDDLE_ROTATION = "middle_rotation"
    CUBE_ROTATION = "cube_rotation"


_TARGET_TYPES = {
    MovementKind.ROTATION: FaceId,
    MovementKind.DOUBLE_ROTATION: FaceId,
    MovementKind.MIDDLE_ROTATION: MiddleRotation,
    MovementKind.CUBE_ROTATION: CubeRotation,
}


@dataclass(frozen=True)
class Movement:
    """A movement in notation terms: its kind and the face or axis it names."""

    kind: MovementKind
    target: Union[FaceId, MiddleRotation, CubeRotation]

    def __post_init__(self) -> None:
        expected = _TARGET_TYPES[self.kind]
        if not isinstance(self.target, expected):
            raise TypeError(
                f"{self.kind.name} movement needs a {expected.__name__}, "
                f"got {self.target!r}"
            )


class Axis(Enum):
    """Axis around which layers turn."""

    X = "x"
    Y = "y"
    Z = "z"


_FACE_AXIS = {
    FaceId.UP: Axis.Y,
    FaceId.DOWN: Axis.Y,
    FaceId.RIGHT: Axis.X,
    FaceId.LEFT: Axis.X,
    FaceId.FRONT: Axis.Z,
    FaceId.BACK: Axis.Z,
}

_START_FACES = frozenset({FaceId.UP, FaceId.RIGHT, FaceId.FRONT})
_INVERTED_FACES = frozenset({FaceId.LEFT, FaceId.BACK, FaceId.DOWN})

_MIDDLE_AXIS = {
    MiddleRotation.M: Axis.X,
    MiddleRotation.E: Axis.Y,
    MiddleRotation.S: Axis.Z,
}

_CUBE_AXIS = {
    CubeRotation.X: Axis.X,
    CubeRotation.Y: Axis.Y,
    CubeRotation.Z: Axis.Z,
}


def _layers(size: int, selected: set[int]) -> tuple[bool, ...]:
    return tuple(i in selected for i in range(size))


@dataclass(frozen=True)
class LayerMovement:
    """A set of layers of a cube of a given size turning around one axis."""

    axis: Axis
    layers: tuple[bool, ...]

    @classmethod
    def from_movement(cls, movement: Movement, size: int) -> LayerMovement:
        """Resolve a notation movement to the layers it turns on a cube of ``size``."""
        if size < 1:
            raise ValueError(f"cube size must be at least 1, got {size}")
        kind, target = movement.kind, movement.target
        if kind is MovementKind.ROTATION:
            layer = 0 if target in _START_FACES else size - 1
            return cls(_FACE_AXIS[target], _layers(size, {layer}))
        if kind is MovementKind.DOUBLE_ROTATION:
            if size == 1:
                layers = _layers(size, {0})
            elif target in _START_FACES:
                layers = _layers(size, {0, 1})
            else:
                layers = _layers(size, {size - 1, size - 2})
            return cls(_FACE_AXIS[target], layers)
        if kind is MovementKind.MIDDLE_ROTATION:
            return cls(_MIDDLE_AXIS[target], _layers(size, {size // 2}))
        return cls(_CUBE_AXIS[target], (True,) * size)


@dataclass(frozen=True)
class NotationStep:
    """A movement turned ``count`` quarter turns clockwise, as written in notation."""

    movement: Movement
    count: int

    @classmethod
    def parse(cls, text: str) -> NotationStep:
        """Parse a single token such as ``R``, ``U2`` or ``x'``."""
        try:
            return _BY_TEXT[text]
        except KeyError:
            raise ValueError("Invalid Step String") from None

    def __str__(self) -> str:
        try:
            return _BY_STEP[self]
        except KeyError:
            raise ValueError(f"step has no notation: {self!r}") from None

    def __neg__(self) -> NotationStep:
        return NotationStep(self.movement, -self.count)


def _build_mapping() -> dict[str, NotationStep]:
    mapping: dict[str, NotationStep] = {}
    faces = {
        "R": FaceId.RIGHT,
        "L": FaceId.LEFT,
        "U": FaceId.UP,
        "D": FaceId.DOWN,
        "F": FaceId.FRONT,
        "B": FaceId.BACK,
    }
    for letter, face in faces.items():
        movement = Movement(MovementKind.ROTATION, face)
        mapping[letter] = NotationStep(movement, 1)
        mapping[letter + "2"] = NotationStep(movement, 2)
        mapping[letter + "'"] = NotationStep(movement, -1)
    for letter, face in faces.items():
        movement = Movement(MovementKind.DOUBLE_ROTATION, face)
        lower = letter.lower()
        mapping[lower] = NotationStep(movement, 1)
        mapping[lower + "'"] = NotationStep(movement, -1)
    for middle in MiddleRotation:
        movement = Movement(MovementKind.MIDDLE_ROTATION, middle)
        mapping[middle.value] = NotationStep(movement, 1)
        mapping[middle.value + "'"] = NotationStep(movement, -1)
    for rotation in CubeRotation:
        movement = Movement(MovementKind.CUBE_ROTATION, rotation)
        mapping[rotation.value] = NotationStep(movement, 1)
        mapping[rotation.value + "'"] = NotationStep(movement, -1)
    return mapping


_BY_TEXT = _build_mapping()
_BY_STEP = {step: text for text, step in _BY_TEXT.items()}


@dataclass(frozen=True)
class NotationAlgorithm:
    """A sequence of notation steps."""

    steps: tuple[NotationStep, ...] = ()

    @classmethod
    def parse(cls, text: str) -> NotationAlgorithm:
        """Parse space separated steps; extra spaces are ignored."""
        return cls(tuple(NotationStep.parse(token) for token in text.split(" ") if token))

    def __str__(self) -> str:
        return " ".join(str(step) for step in self.steps)

    def __neg__(self) -> NotationAlgorithm:
        return NotationAlgorithm(tuple(-step for step in reversed(self.steps)))

    def __iter__(self):
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)


@dataclass(frozen=True)
class Step:
    """A layer movement turned ``count`` quarter turns."""

    movement: LayerMovement
    count: int

    @classmethod
    def from_notation(cls, step: NotationStep, size: int) -> Step:
        """Resolve a notation step for a cube of ``size``."""
        movement = step.movement
        if movement.kind in (MovementKind.ROTATION, MovementKind.DOUBLE_ROTATION):
            invert = -1 if movement.target in _INVERTED_FACES else 1
        elif movement.kind is MovementKind.MIDDLE_ROTATION:
            invert = -1
        else:
            invert = 1
        return cls(LayerMovement.from_movement(movement, size), step.count * invert)

    def __neg__(self) -> Step:
        return Step(self.movement, -self.count)


@dataclass(frozen=True)
class Algorithm:
    """A sequence of layer steps."""

    steps: tuple[Step, ...] = ()

    @classmethod
    def from_notation(cls, algorithm: NotationAlgorithm, size: int) -> Algorithm:
        """Resolve every step of a notation algorithm for a cube of ``size``."""
        return cls(tuple(Step.from_notation(step, size) for step in algorithm.steps))

    @classmethod
    def random(cls, depth: int, size: int, rng=None) -> Algorithm:
        """Build ``depth`` random single-layer steps for a cube of ``size``."""
        if size < 1:
            raise ValueError(f"cube size must be at least 1, got {size}")
        source = rng if rng is not None else _random
        axes = list(Axis)
        steps = []
        for _ in range(depth):
            axis = source.choice(axes)
            layer = source.randrange(size)
            count = source.randint(-1, 2)
            steps.append(Step(LayerMovement(axis, _layers(size, {layer})), count))
        return cls(tuple(steps))

    def __neg__(self) -> Algorithm:
        return Algorithm(tuple(-step for step in reversed(self.steps)))

    def __iter__(self):
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)