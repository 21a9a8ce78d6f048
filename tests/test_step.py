import random

import pytest

from rubik.step import (
    Algorithm,
    Axis,
    CubeRotation,
    FaceId,
    LayerMovement,
    MiddleRotation,
    Movement,
    MovementKind,
    NotationAlgorithm,
    NotationStep,
    Step,
)


def rotation(face, count):
    return NotationStep(Movement(MovementKind.ROTATION, face), count)


def test_parse_algorithms():
    algorithm = NotationAlgorithm.parse(" R R'   L L'   ")
    assert algorithm == NotationAlgorithm(
        (
            rotation(FaceId.RIGHT, 1),
            rotation(FaceId.RIGHT, -1),
            rotation(FaceId.LEFT, 1),
            rotation(FaceId.LEFT, -1),
        )
    )


@pytest.mark.parametrize(
    "text",
    ["R", "R2", "R'", "L2", "U'", "D", "F2", "B'", "r", "l'", "u", "d'",
     "f", "b'", "M", "M'", "E", "S'", "x", "y'", "z"],
)
def test_step_round_trip(text):
    assert str(NotationStep.parse(text)) == text


def test_parse_values():
    assert NotationStep.parse("U2") == rotation(FaceId.UP, 2)
    assert NotationStep.parse("M'") == NotationStep(
        Movement(MovementKind.MIDDLE_ROTATION, MiddleRotation.M), -1
    )
    assert NotationStep.parse("z") == NotationStep(
        Movement(MovementKind.CUBE_ROTATION, CubeRotation.Z), 1
    )


@pytest.mark.parametrize("text", ["", "Q", "r2", "R3", "RR"])
def test_invalid_step(text):
    with pytest.raises(ValueError):
        NotationStep.parse(text)


def test_invalid_algorithm():
    with pytest.raises(ValueError):
        NotationAlgorithm.parse("R U K")


def test_movement_rejects_wrong_target():
    with pytest.raises(TypeError):
        Movement(MovementKind.ROTATION, CubeRotation.X)


def test_step_negation():
    assert -NotationStep.parse("R") == NotationStep.parse("R'")
    assert -(-NotationStep.parse("F2")) == NotationStep.parse("F2")


def test_unmapped_step_str_raises():
    with pytest.raises(ValueError):
        str(-NotationStep.parse("R2"))


def test_layer_movement_size_three():
    assert LayerMovement.from_movement(
        NotationStep.parse("R").movement, 3
    ) == LayerMovement(Axis.X, (True, False, False))
    assert LayerMovement.from_movement(
        NotationStep.parse("D").movement, 3
    ) == LayerMovement(Axis.Y, (False, False, True))
    assert LayerMovement.from_movement(
        NotationStep.parse("f").movement, 3
    ) == LayerMovement(Axis.Z, (True, True, False))
    assert LayerMovement.from_movement(
        NotationStep.parse("b").movement, 3
    ) == LayerMovement(Axis.Z, (False, True, True))
    assert LayerMovement.from_movement(
        NotationStep.parse("E").movement, 3
    ) == LayerMovement(Axis.Y, (False, True, False))
    assert LayerMovement.from_movement(
        NotationStep.parse("x").movement, 3
    ) == LayerMovement(Axis.X, (True, True, True))


def test_layer_movement_size_one_double():
    assert LayerMovement.from_movement(
        NotationStep.parse("l").movement, 1
    ) == LayerMovement(Axis.X, (True,))


def test_layer_movement_rejects_empty_cube():
    with pytest.raises(ValueError):
        LayerMovement.from_movement(NotationStep.parse("R").movement, 0)


def test_step_from_notation_inverts_counts():
    assert Step.from_notation(NotationStep.parse("R"), 3).count == 1
    assert Step.from_notation(NotationStep.parse("L"), 3).count == -1
    assert Step.from_notation(NotationStep.parse("B2"), 3).count == -2
    assert Step.from_notation(NotationStep.parse("d'"), 3).count == 1
    assert Step.from_notation(NotationStep.parse("M"), 3).count == -1
    assert Step.from_notation(NotationStep.parse("y'"), 3).count == -1


def test_algorithm_from_notation_and_negation():
    notation = NotationAlgorithm.parse("R U")
    algorithm = Algorithm.from_notation(notation, 3)
    assert [s.count for s in algorithm.steps] == [1, 1]
    reversed_algorithm = -algorithm
    assert reversed_algorithm.steps[0].movement.axis is Axis.Y
    assert [s.count for s in reversed_algorithm.steps] == [-1, -1]
    assert -reversed_algorithm == algorithm


def test_random_algorithm_invariants():
    algorithm = Algorithm.random(50, 4, random.Random(7))
    assert len(algorithm) == 50
    for step in algorithm.steps:
        assert len(step.movement.layers) == 4
        assert sum(step.movement.layers) == 1
        assert -1 <= step.count <= 2
        assert step.movement.axis in set(Axis)


def test_random_algorithm_is_reproducible():
    first = Algorithm.random(20, 3, random.Random(42))
    second = Algorithm.random(20, 3, random.Random(42))
    assert first == second


def test_random_algorithm_zero_depth():
    assert Algorithm.random(0, 3, random.Random(1)).steps == ()