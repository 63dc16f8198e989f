#!/usr/bin/env python3
"""
Read access to the game history.

The turn controller owns the history. The solvers only ever look at an
immutable snapshot of it, taken once at the start of a request, so an
in-flight request is not affected by the controller appending a new turn.

Anything with this shape can be passed where a history is expected:

    active_turn_count() -> int
    guess_at(turn_index) -> code
    score_at(turn_index) -> (exact, color_only)
    config() -> GameConfig

as can a plain sequence of (code, score) pairs.
"""

from typing import Iterator, List, Optional, Tuple

from mastermind.errors import CodeWidthError
from mastermind.mastermind_env import Code, Score, format_code

Snapshot = Tuple[Tuple[Code, Score], ...]


def is_session(source) -> bool:
    return hasattr(source, "active_turn_count") and hasattr(source, "guess_at")


def snapshot(source) -> Snapshot:
    """Copy a session or a sequence of (code, score) pairs into a tuple."""
    if source is None:
        return ()
    if is_session(source):
        return tuple(
            (tuple(source.guess_at(i)), Score(*source.score_at(i)))
            for i in range(source.active_turn_count())
        )
    return tuple((tuple(guess), Score(*result)) for guess, result in source)


def session_config(source):
    """The GameConfig a session reports, or None for a plain sequence."""
    if is_session(source) and hasattr(source, "config"):
        return source.config()
    return None


class GameHistory:
    """
    Minimal append-only history implementing the session queries.
    Used by the simulation harness and handy for embedding the solvers.
    """

    def __init__(self, config, max_tries: Optional[int] = None):
        self._config = config
        self.max_tries = max_tries
        self._guesses: List[Code] = []
        self._scores: List[Score] = []

    def config(self):
        return self._config

    def active_turn_count(self) -> int:
        return len(self._guesses)

    def guess_at(self, turn_index: int) -> Code:
        return self._guesses[turn_index]

    def score_at(self, turn_index: int) -> Score:
        return self._scores[turn_index]

    def record(self, guess, result) -> None:
        guess = tuple(guess)
        result = Score(*result)
        width = self._config.width
        if len(guess) != width:
            raise CodeWidthError(f"guess has width {len(guess)}, expected {width}")
        if result.exact < 0 or result.color_only < 0 or sum(result) > width:
            raise ValueError(f"impossible score {tuple(result)} for width {width}")
        if self.is_full():
            raise ValueError(f"all {self.max_tries} tries have been used")
        self._guesses.append(guess)
        self._scores.append(result)

    def is_full(self) -> bool:
        return self.max_tries is not None and len(self._guesses) >= self.max_tries

    def is_solved(self) -> bool:
        return bool(self._scores) and self._scores[-1].exact == self._config.width

    def __len__(self):
        return len(self._guesses)

    def __iter__(self) -> Iterator[Tuple[Code, Score]]:
        return iter(zip(self._guesses, self._scores))

    def __str__(self):
        lines = []
        for i, (guess, result) in enumerate(self, start=1):
            lines.append(f"{i}: {format_code(guess)}  ->  {result}")
        return "\n".join(lines)
