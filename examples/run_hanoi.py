import argparse
import logging
import sys
from pathlib import Path

# Ensure local repo package is used even if another "hanoi" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hanoi import HanoiEngine, HanoiError, Peg


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Step through a Tower of Hanoi solution.")
    parser.add_argument(
        "--rings",
        type=int,
        default=3,
        help="Number of rings in the tower",
    )
    parser.add_argument(
        "--jump",
        type=int,
        default=None,
        help="Step index to jump to before stepping",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=7,
        help="Number of moves to print",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def format_pegs(engine: HanoiEngine) -> str:
    return "  ".join(
        f"{peg.name.lower()}={list(engine.peg_contents(peg))}" for peg in Peg
    )


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        engine = HanoiEngine(args.rings)
    except HanoiError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.jump is not None:
        engine.jump_to_step(args.jump)

    print(f"step {engine.current_step}/{engine.total_steps}  {format_pegs(engine)}")
    for _ in range(args.steps):
        move = engine.next()
        if not move:
            break
        print(f"step {engine.current_step}/{engine.total_steps}  {move}  {format_pegs(engine)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
