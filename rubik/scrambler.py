"""Print a randomly scrambled 3×3×3 cube."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

from rubik.cube import Cube


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Scramble a solved 3×3×3 cube and print its stickers."""
    parser = argparse.ArgumentParser(
        prog="scrambler", description="Print a randomly scrambled cube."
    )
    parser.add_argument("--seed", type=int, help="seed for a repeatable scramble")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    cube = Cube.solved()
    cube.scramble(rng)
    print(cube)
    return 0


if __name__ == "__main__":
    sys.exit(main())