# rubik

A sticker-level model of an N×N×N Rubik's cube in plain Python, with standard move notation, a random scrambler and a stage-by-stage brute-force solver for the first two layers of a 3×3×3 cube. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `rubik-scrambler`

Applies 100 random single-layer turns to a solved 3×3×3 cube and prints it in the text format described below. `--seed N` makes the scramble repeatable.

```
rubik-scrambler --seed 42 > scrambled.txt
```

### `rubik-solver`

Reads a 3×3×3 cube from standard input and solves it one stage at a time: the four top edges, then the four top corners, then the four middle-layer edges, one piece per stage. Each stage is found by an iterative-deepening search over quarter face turns (`R R' L L' U U' F F' D D' B B'`), looking only at the pieces placed so far and the centres. It prints one line of notation per stage as it is found; the depth being searched is written to standard error. A cube that cannot be read, or is not 3×3×3, gives an error message and exit status 1.

```
rubik-solver < scrambled.txt
```

The search is exhaustive, so a stage that needs many moves can take a long time.

## Cube text format

A cube is six faces separated by blank lines, in the order Up, Down, Right, Left, Front, Back. Each face is N rows of N characters: `u`, `d`, `r`, `l`, `f` and `b` for the colour of each face, and `0` for a hidden sticker. Leading and trailing whitespace of the whole text and of each row is ignored.

```
uuu
uuu
uuu

ddd
ddd
ddd

...
```

`Cube.parse` reads this format and `str(cube)` writes it.

## Library use

```python
from rubik.cube import Cube
from rubik.step import NotationAlgorithm
from rubik.solver import solve

cube = Cube.solved(3)
alg = NotationAlgorithm.parse("R U R' U'")
cube.apply_notation_algorithm(alg)
print(cube.is_solved())          # False

cube.apply_notation_algorithm(-alg)
print(cube.is_solved())          # True

cube.apply_notation_algorithm(NotationAlgorithm.parse("R"))
print(solve(cube))               # R'
```

### `rubik.step`

- `NotationStep.parse` reads a single token: face turns `R L U D F B` (plain, `'` and `2`), wide turns `r l u d f b`, slice turns `M E S` and whole-cube rotations `x y z` (plain and `'`). An unknown token raises `ValueError`. `str()` writes a step back and `-step` reverses its direction.
- `NotationAlgorithm.parse` reads space-separated steps; `-alg` gives the inverse sequence.
- `Step.from_notation` and `Algorithm.from_notation` resolve notation to the layers it turns on a cube of a given size. `Algorithm.random(depth, size, rng)` builds random single-layer turns, using `rng` (a `random.Random`) when given.

### `rubik.cube`

- `Cube.solved(size)` makes a solved cube of any size; `Cube.parse(text)` reads one.
- `apply_notation_step`, `apply_notation_algorithm`, `apply_step` and `apply_algorithm` turn it; `scramble(rng)` and `scramble_count(n, rng)` apply random layer turns; `solve()` resets every sticker to its face's colour.
- `is_solved()` ignores hidden stickers; `hide_sticker(face, y, x)` hides one.
- `get_face`, `flatten_stickers` and `copy` read the state.
- `find_corner` and `find_edge` find where a piece with the given colours sits; they work only on a 3×3×3 cube and raise `ValueError` otherwise.

### `rubik.solver` and `rubik.stages`

- `solve(cube)` returns a shortest sequence of quarter face turns that solves the cube's visible stickers. It never gives up, so on a cube that cannot be solved it runs forever.
- `whitelist(cube, pieces)` returns a copy showing only the given `Piece`s and the centres.
- `solve_in_stages(cube)` yields one solution per stage, working on a copy.

## What it does not do

There is no graphical or interactive view of the cube and no animation of moves; the package works on text only. The stage solver stops after the first two layers of a 3×3×3 cube and does not solve the last layer.