#!/usr/bin/env python3
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional

from mastermind.config import CONFIG
from mastermind.history import GameHistory
from mastermind.mastermind_env import RNG, Code, format_code, random_code, score
from mastermind.solvers import make_solver

# =========================
# Game simulation (solver plays codebreaker)
# =========================


@dataclass
class GameResult:
    secret: Code
    solved: bool
    guesses_used: int
    seconds: float
    guesses: List[Code] = field(default_factory=list)


def generate_secret(config, rng: Optional[random.Random] = None) -> Code:
    """A secret code drawn the same way as a random guess."""
    return random_code(config, rng)


def play_game(
    solver,
    secret: Code,
    config,
    max_tries: int = CONFIG["max_tries"],
    verbose: bool = False,
) -> GameResult:
    """
    Let `solver` guess against `secret` until it is broken or the tries run
    out. Scoring against the secret happens here, not in the solver.
    """
    history = GameHistory(config, max_tries=max_tries)
    t0 = time.perf_counter()
    while not history.is_full():
        guess = solver.generate_guess(history)
        result = score(guess, secret)
        history.record(guess, result)
        if verbose:
            print(f"Guess {len(history)}: {format_code(guess)}  Score: {result}")
        if history.is_solved():
            break
    elapsed = time.perf_counter() - t0
    return GameResult(
        secret=secret,
        solved=history.is_solved(),
        guesses_used=len(history),
        seconds=elapsed,
        guesses=[g for g, _ in history],
    )


@dataclass
class SpeedReport:
    repetitions: int
    won: int
    lost: int
    total_seconds: float
    shortest: float
    longest: float
    average_guesses: float

    @property
    def average_seconds(self) -> float:
        return self.total_seconds / self.repetitions if self.repetitions else 0.0

    def lines(self) -> List[str]:
        return [
            f"Repetitions: {self.repetitions}",
            f"Duration in s: {self.total_seconds:.3f}",
            f"Average solving time in s: {self.average_seconds:.3f}",
            f"Shortest in s: {self.shortest:.3f}",
            f"Longest in s: {self.longest:.3f}",
            f"Won: {self.won}",
            f"Lost: {self.lost}",
            f"Average guesses: {self.average_guesses:.3f}",
        ]


def speed_test(
    strategy: str,
    config,
    repetitions: int,
    max_tries: int = CONFIG["max_tries"],
    rng: Optional[random.Random] = None,
    **solver_options,
) -> SpeedReport:
    """Play `repetitions` games with a fresh solver each and time them."""
    rng = rng or RNG
    results = []
    for _ in range(repetitions):
        solver = make_solver(strategy, config, rng=rng, **solver_options)
        secret = generate_secret(config, rng)
        results.append(play_game(solver, secret, config, max_tries=max_tries))
    return summarize(results)


def summarize(results: List[GameResult]) -> SpeedReport:
    times = [r.seconds for r in results]
    won = sum(1 for r in results if r.solved)
    return SpeedReport(
        repetitions=len(results),
        won=won,
        lost=len(results) - won,
        total_seconds=sum(times),
        shortest=min(times, default=0.0),
        longest=max(times, default=0.0),
        average_guesses=(
            sum(r.guesses_used for r in results) / len(results) if results else 0.0
        ),
    )
