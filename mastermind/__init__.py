"""Mastermind codebreaking engine: scoring, feasibility and guess strategies."""

from mastermind.config import CONFIG, GameConfig
from mastermind.errors import (
    CodeWidthError,
    ConfigurationError,
    MastermindError,
    NoFeasibleCodeError,
    SolverCancelled,
)
from mastermind.history import GameHistory, snapshot
from mastermind.mastermind_env import (
    ALPHABET,
    Color,
    Score,
    is_feasible,
    is_valid_code,
    random_code,
    score,
)
from mastermind.solvers import generate_guess, make_solver

__all__ = [
    "ALPHABET",
    "CONFIG",
    "CodeWidthError",
    "Color",
    "ConfigurationError",
    "GameConfig",
    "GameHistory",
    "MastermindError",
    "NoFeasibleCodeError",
    "Score",
    "SolverCancelled",
    "generate_guess",
    "is_feasible",
    "is_valid_code",
    "make_solver",
    "random_code",
    "score",
    "snapshot",
]
