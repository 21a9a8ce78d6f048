import io

import pytest

from rubik.cube import Cube
from rubik.stages import (
    CORNERS,
    EDGES,
    STAGES,
    Piece,
    main,
    solve_in_stages,
    whitelist,
)
from rubik.step import FaceId, NotationAlgorithm, NotationStep


def _hidden(cube):
    return sum(1 for sticker in cube.flatten_stickers() if sticker is None)


def test_piece_needs_two_or_three_faces():
    with pytest.raises(ValueError):
        Piece((FaceId.UP,))


def test_piece_locate_on_solved_cube():
    cube = Cube.solved()
    positions = EDGES[0].locate(cube)
    assert set(positions) == {(FaceId.UP, 1, 2), (FaceId.RIGHT, 0, 1)}


def test_piece_locate_missing_raises():
    cube = Cube.solved()
    cube.hide_sticker(FaceId.UP, 1, 2)
    with pytest.raises(ValueError):
        EDGES[0].locate(cube)


def test_whitelist_keeps_only_centres():
    cube = Cube.solved()
    shown = whitelist(cube, [])
    assert _hidden(shown) == 48
    for face in FaceId:
        assert shown.get_face(face).tiles[1][1] is face


def test_whitelist_shows_pieces_and_leaves_original():
    cube = Cube.solved()
    shown = whitelist(cube, [EDGES[0], CORNERS[0]])
    assert _hidden(shown) == 48 - 2 - 3
    assert shown.is_solved()
    assert _hidden(cube) == 0


def test_whitelist_follows_moved_piece():
    cube = Cube.solved()
    cube.apply_notation_step(NotationStep.parse("R"))
    shown = whitelist(cube, [EDGES[0]])
    assert shown.find_edge([FaceId.UP, FaceId.RIGHT]) == cube.find_edge(
        [FaceId.UP, FaceId.RIGHT]
    )


def test_stages_of_solved_cube_are_empty():
    solutions = list(solve_in_stages(Cube.solved()))
    assert len(solutions) == len(STAGES)
    assert all(solution == NotationAlgorithm(()) for solution in solutions)


def test_stages_undo_single_turn():
    cube = Cube.solved()
    cube.apply_notation_step(NotationStep.parse("R"))
    before = cube.copy()
    solutions = list(solve_in_stages(cube))
    assert solutions[0] == NotationAlgorithm.parse("R'")
    assert all(solution == NotationAlgorithm(()) for solution in solutions[1:])
    assert cube == before


def test_stages_place_every_piece():
    cube = Cube.solved()
    cube.apply_notation_algorithm(NotationAlgorithm.parse("F U"))
    for solution in solve_in_stages(cube):
        cube.apply_notation_algorithm(solution)
    placed = [piece for stage in STAGES for piece in stage]
    assert whitelist(cube, placed).is_solved()


def test_main_prints_a_line_per_stage(monkeypatch, capsys):
    cube = Cube.solved()
    cube.apply_notation_step(NotationStep.parse("R"))
    monkeypatch.setattr("sys.stdin", io.StringIO(str(cube)))
    assert main([]) == 0
    lines = capsys.readouterr().out.split("\n")
    assert lines[0] == "R'"
    assert lines[1:] == [""] * len(STAGES)


def test_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("xyz"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err