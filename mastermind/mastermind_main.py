#!/usr/bin/env python3
"""
Watch a solver break a Mastermind code.

Usage:
    mastermind-solve --solver genetic --width 4 --colors 6
    mastermind-solve --secret "red green blue yellow" --verbose
    mastermind-solve --games 20 --no-repeats --seed 7
"""

import argparse
import random
import sys

from mastermind.config import CONFIG, GameConfig
from mastermind.errors import MastermindError
from mastermind.mastermind_env import active_colors, format_code, is_valid_code, parse_code
from mastermind.mastermind_sim import generate_secret, play_game, speed_test
from mastermind.solvers import SOLVERS, make_solver


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Let a solving strategy play Mastermind as the codebreaker."
    )
    parser.add_argument(
        "--solver",
        choices=sorted(SOLVERS),
        default="genetic",
        help="Guess strategy.",
    )
    parser.add_argument("--width", type=int, default=CONFIG["width"], help="Code width (1-8).")
    parser.add_argument(
        "--colors", type=int, default=CONFIG["color_count"], help="Number of colors in play (1-15)."
    )
    parser.add_argument(
        "--no-repeats",
        action="store_true",
        help="Disallow the same color twice in a code.",
    )
    parser.add_argument(
        "--max-tries", type=int, default=CONFIG["max_tries"], help="Guesses allowed per game."
    )
    parser.add_argument(
        "--secret",
        type=str,
        default=None,
        help='Secret code as color names, e.g. "red green blue yellow". Random if omitted.',
    )
    parser.add_argument(
        "--games",
        type=positive_int,
        default=1,
        help="Play this many random games and print timing statistics instead.",
    )
    parser.add_argument("--seed", type=int, default=CONFIG["random_seed"], help="Random seed.")
    parser.add_argument("--pop-size", type=int, default=None, help="Genetic solver population size.")
    parser.add_argument(
        "--generations", type=int, default=None, help="Genetic solver generations per attempt."
    )
    parser.add_argument("--verbose", action="store_true", help="Print solver diagnostics.")
    return parser


def solver_options(args) -> dict:
    options = {"verbose": args.verbose}
    if args.solver == "genetic":
        if args.pop_size is not None:
            options["pop_size"] = args.pop_size
        if args.generations is not None:
            options["generations"] = args.generations
    return options


def run(args) -> int:
    config = GameConfig(
        width=args.width,
        color_count=args.colors,
        allow_repeats=not args.no_repeats,
    )
    rng = random.Random(args.seed)
    print(
        f"[main] {args.solver} solver | width {config.width} | "
        f"colors: {format_code(active_colors(config.color_count))} | "
        f"repeats {'on' if config.allow_repeats else 'off'}"
    )

    if args.games > 1:
        report = speed_test(
            args.solver,
            config,
            args.games,
            max_tries=args.max_tries,
            rng=rng,
            **solver_options(args),
        )
        print("##################\nBenchmark results:")
        for line in report.lines():
            print(line)
        return 0

    if args.secret:
        secret = parse_code(args.secret)
        if not is_valid_code(secret, config):
            print(f"[main] Secret {format_code(secret)} is not a valid code for these settings.")
            return 2
    else:
        secret = generate_secret(config, rng)

    solver = make_solver(args.solver, config, rng=rng, **solver_options(args))
    result = play_game(solver, secret, config, max_tries=args.max_tries, verbose=True)
    if result.solved:
        print(f"SOLVED in {result.guesses_used} guesses ({result.seconds:.2f}s)!")
    else:
        print(f"Failed to solve within {args.max_tries} guesses.")
    print(f"Secret was: {format_code(secret)}")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except (MastermindError, ValueError) as e:
        print(f"[main] Error: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
