#!/usr/bin/env python3
"""
Play random games with each strategy, write one CSV row per game and plot
how many guesses the games took and how long a game took on average.

Usage:
    python -m mastermind.benchmark_solver --games 50 --out solver_bench.csv
"""

import argparse
import csv
import random
from collections import Counter
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from mastermind.config import CONFIG, GameConfig  # noqa: E402
from mastermind.mastermind_env import format_code  # noqa: E402
from mastermind.mastermind_main import positive_int  # noqa: E402
from mastermind.mastermind_sim import generate_secret, play_game, summarize  # noqa: E402
from mastermind.solvers import SOLVERS, make_solver  # noqa: E402

FIELDNAMES = ["solver", "game_idx", "secret", "guesses_used", "solved", "runtime_seconds"]


def run_benchmark(solvers, num_games, config, max_tries, rng, pop_size=None, generations=None):
    """Returns CSV rows and a {solver: [GameResult]} map."""
    rows = []
    results = {}
    for name in solvers:
        options = {}
        if name == "genetic":
            if pop_size is not None:
                options["pop_size"] = pop_size
            if generations is not None:
                options["generations"] = generations
        results[name] = []
        for i in range(num_games):
            solver = make_solver(name, config, rng=rng, **options)
            secret = generate_secret(config, rng)
            result = play_game(solver, secret, config, max_tries=max_tries)
            results[name].append(result)
            rows.append({
                "solver": name,
                "game_idx": i,
                "secret": format_code(secret),
                "guesses_used": result.guesses_used,
                "solved": int(result.solved),
                "runtime_seconds": f"{result.seconds:.6f}",
            })
            if (i + 1) % 10 == 0:
                print(f"[bench] {name}: finished {i + 1}/{num_games} games")

        report = summarize(results[name])
        print(f"[bench] {name}: won {report.won}/{report.repetitions}, "
              f"avg_guesses={report.average_guesses:.3f}, "
              f"avg_runtime={report.average_seconds:.3f}s")
    return rows, results


def write_csv(rows, out_path: Path) -> None:
    with out_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(rows)
    print(f"[bench] wrote {out_path}")


def guess_distribution(results, max_tries):
    """Per solver: list of game counts for 1..max_tries guesses, then fails."""
    dist = {}
    for name, games in results.items():
        counts = Counter()
        for r in games:
            counts[r.guesses_used if r.solved else "fail"] += 1
        labels = list(range(1, max_tries + 1)) + ["fail"]
        dist[name] = [counts[label] for label in labels]
    return dist


def plot_results(results, max_tries, fig_path: Path) -> None:
    dist = guess_distribution(results, max_tries)
    labels = [str(n) for n in range(1, max_tries + 1)] + ["fail"]

    fig, (ax_dist, ax_time) = plt.subplots(1, 2, figsize=(11, 4))
    bar_width = 0.8 / max(1, len(dist))
    for k, (name, values) in enumerate(dist.items()):
        xs = [x + k * bar_width for x in range(len(labels))]
        ax_dist.bar(xs, values, width=bar_width, label=name)
    ax_dist.set_xticks([x + 0.4 - bar_width / 2 for x in range(len(labels))])
    ax_dist.set_xticklabels(labels)
    ax_dist.set_xlabel(f"Guesses used (fail = not solved in {max_tries})")
    ax_dist.set_ylabel("Number of games")
    ax_dist.set_title("Distribution of guesses per game")
    ax_dist.legend()

    names = list(results)
    avg_times = [summarize(results[n]).average_seconds for n in names]
    ax_time.bar(names, avg_times)
    ax_time.set_ylabel("Average seconds per game")
    ax_time.set_title("Runtime per game")
    ax_time.grid(True, axis="y", linestyle="--", linewidth=0.5)

    fig.tight_layout()
    fig.savefig(fig_path, dpi=200)
    plt.close(fig)
    print(f"[bench] wrote plot to {fig_path}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Benchmark guess counts and runtime of the Mastermind solvers."
    )
    parser.add_argument(
        "--solvers",
        nargs="+",
        choices=sorted(SOLVERS),
        default=sorted(SOLVERS),
        help="Strategies to benchmark.",
    )
    parser.add_argument("--games", type=positive_int, default=20, help="Games per strategy.")
    parser.add_argument("--width", type=int, default=CONFIG["width"])
    parser.add_argument("--colors", type=int, default=CONFIG["color_count"])
    parser.add_argument("--no-repeats", action="store_true")
    parser.add_argument("--max-tries", type=int, default=CONFIG["max_tries"])
    parser.add_argument("--pop-size", type=int, default=None)
    parser.add_argument("--generations", type=int, default=None)
    parser.add_argument("--seed", type=int, default=CONFIG["random_seed"])
    parser.add_argument("--out", type=str, default="solver_bench.csv", help="Output CSV filename.")
    parser.add_argument("--png", type=str, default="solver_bench.png", help="Output PNG filename.")
    args = parser.parse_args(argv)

    config = GameConfig(
        width=args.width,
        color_count=args.colors,
        allow_repeats=not args.no_repeats,
    )
    rng = random.Random(args.seed)
    rows, results = run_benchmark(
        args.solvers,
        args.games,
        config,
        args.max_tries,
        rng,
        pop_size=args.pop_size,
        generations=args.generations,
    )
    write_csv(rows, Path(args.out))
    plot_results(results, args.max_tries, Path(args.png))


if __name__ == "__main__":
    main()
