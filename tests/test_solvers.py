import random

import pytest

from mastermind import generate_guess, make_solver
from mastermind.config import GameConfig
from mastermind.history import GameHistory
from mastermind.mastermind_env import Color, is_feasible, is_valid_code, score
from mastermind.solvers import BruteforceSolver, RandomSolver, SOLVERS

R, G, B, Y = Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW


def test_registry_names():
    assert sorted(SOLVERS) == ["bruteforce", "genetic", "random"]


def test_unknown_strategy():
    with pytest.raises(ValueError, match="bruteforce"):
        make_solver("minimax", GameConfig())


def test_plain_history_needs_config():
    with pytest.raises(ValueError):
        generate_guess([], strategy="random")


def test_config_taken_from_session():
    config = GameConfig(width=3, color_count=2)
    history = GameHistory(config)
    guess = generate_guess(history, strategy="bruteforce")
    assert guess == (R, R, R)


def test_random_solver_ignores_history(rng):
    config = GameConfig(width=5, color_count=7, allow_repeats=False)
    solver = RandomSolver(config, rng=rng)
    for _ in range(20):
        assert is_valid_code(solver.generate_guess([((R,) * 5, (1, 0))]), config)


def test_bruteforce_solver_walks_and_restarts():
    config = GameConfig(width=2, color_count=2)
    solver = BruteforceSolver(config)
    history = GameHistory(config)
    assert solver.generate_guess(history) == (R, R)
    history.record((R, R), (0, 0))
    assert solver.generate_guess(history) == (R, G)
    assert solver.generate_guess(GameHistory(config)) == (R, R)


def test_fresh_bruteforce_continues_after_last_guess():
    config = GameConfig(width=2, color_count=3)
    guess = generate_guess([((R, B), (0, 0))], config, strategy="bruteforce")
    assert guess == (G, R)


def test_fresh_bruteforce_after_empty_guess():
    config = GameConfig(width=2, color_count=3)
    history = [((R, Color.EMPTY), (0, 0))]
    assert generate_guess(history, config, strategy="bruteforce") == (G, R)


def test_genetic_one_off_guess():
    config = GameConfig(width=4, color_count=6)
    history = [((R, G, B, Y), score((R, G, B, Y), (Y, Y, G, R)))]
    guess = generate_guess(
        history, config, rng=random.Random(3), pop_size=60, generations=40
    )
    assert is_feasible(guess, history)
