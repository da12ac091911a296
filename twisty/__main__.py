"""
Command line driver: solve the built-in scramble and show the result.

    python -m twisty [--max-rounds N] [--verbose] [--timing] [--render PATH]
"""

import argparse
import logging
import sys

from twisty.solver import Color, Cube, SearchConfig, apply, bidirectional_search, is_goal
from twisty.performance import log_performance_report

logger = logging.getLogger("twisty")

DEFAULT_SCRAMBLE = Cube.from_side_colors(
    cap_sides=[Color.BLUE, Color.BLUE, Color.GREEN, Color.GREEN,
               Color.ORANGE, Color.ORANGE, Color.RED, Color.RED],
    base_sides=[Color.GREEN, Color.ORANGE, Color.ORANGE, Color.GREEN,
                Color.BLUE, Color.RED, Color.RED, Color.BLUE],
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="twisty", description=__doc__.strip().splitlines()[0])
    parser.add_argument("--max-rounds", type=int, default=SearchConfig.max_rounds,
                        help="Expansion rounds before giving up (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--timing", action="store_true", help="Log a phase timing report")
    parser.add_argument("--render", metavar="PATH",
                        help="Write a PNG strip of every state along the solution")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    SearchConfig.enable_performance_logging = args.timing

    config = SearchConfig(max_rounds=args.max_rounds)
    try:
        config.validate()
    except ValueError as e:
        logger.error("%s", e)
        return 2

    cube = DEFAULT_SCRAMBLE
    print("Start cube:")
    print(cube.describe())

    result = bidirectional_search(cube, config)
    log_performance_report()

    if not result.solved:
        print(f"No solution within {config.max_rounds} expansion rounds")
        return 1

    print(f"Solution ({len(result.moves)} moves): "
          + " ".join(action.name for action in result.moves))
    final = cube
    for action in result.moves:
        final = apply(final, action)
    print("Final cube:")
    print(final.describe())
    print(f"Solved: {is_goal(final)}")

    if args.render:
        from twisty.visualizer import CubeVisualizer

        visualizer = CubeVisualizer(output_dir=".")
        path = visualizer.save(visualizer.render_solution(cube, result.moves), args.render)
        print(f"Rendered solution to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
