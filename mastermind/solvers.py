#!/usr/bin/env python3
"""
The three interchangeable guess strategies behind one call shape:

    solver = make_solver("genetic", config, rng=...)
    guess = solver.generate_guess(history)

or, for a one-off guess, generate_guess(history, config, strategy=...).
"""

import random
from typing import Optional

from mastermind.bruteforce import BruteforceSearch
from mastermind.config import CONFIG
from mastermind.genetic_solver import GeneticSolver
from mastermind.history import session_config, snapshot
from mastermind.mastermind_env import RNG, Code, format_code, random_code


class RandomSolver:
    """Random valid code every turn, ignoring the history."""

    def __init__(self, config, rng: Optional[random.Random] = None, verbose: bool = CONFIG["debug"]):
        self.config = config
        self.rng = rng or RNG
        self.verbose = verbose

    def generate_guess(self, history=None) -> Code:
        guess = random_code(self.config, self.rng)
        if self.verbose:
            print(f"[random] Guess is {format_code(guess)}")
        return guess


class BruteforceSolver:
    """
    Counter-order enumeration. An empty history restarts the walk from the
    first code; otherwise the walk continues from this solver's last guess
    (or from the last guess in the history, for a fresh solver).
    The previous results are not consulted.
    """

    def __init__(self, config, rng: Optional[random.Random] = None, verbose: bool = CONFIG["debug"]):
        self.config = config
        self.search = BruteforceSearch(config, verbose=verbose)

    def generate_guess(self, history=None) -> Code:
        history = snapshot(history)
        if not history:
            self.search.reset()
        elif self.search.previous is None:
            self.search.previous = history[-1][0]
        return self.search.next()


SOLVERS = {
    "bruteforce": BruteforceSolver,
    "random": RandomSolver,
    "genetic": GeneticSolver,
}


def make_solver(name: str, config, rng: Optional[random.Random] = None, **options):
    try:
        cls = SOLVERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown strategy {name!r}; choose one of {', '.join(sorted(SOLVERS))}"
        ) from None
    return cls(config, rng=rng, **options)


def generate_guess(
    history,
    config=None,
    strategy: str = "genetic",
    rng: Optional[random.Random] = None,
    **options,
) -> Code:
    """
    One guess for `history` (a session object or a sequence of
    (code, score) pairs). `config` may be left out when the session can
    report its own.

    The genetic strategy may block for a long time; see genetic_solver.
    """
    if config is None:
        config = session_config(history)
        if config is None:
            raise ValueError("config is required when history is a plain sequence")
    return make_solver(strategy, config, rng=rng, **options).generate_guess(history)
