#!/usr/bin/env python3
import random
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from mastermind.config import CONFIG
from mastermind.errors import CodeWidthError

# =========================
# Mastermind environment: alphabet, codes, scoring
# =========================


class Color(Enum):
    """
    Code symbols. Only identity and alphabet order matter; how a colour is
    drawn on screen is up to whoever displays it.
    """
    EMPTY = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    YELLOW = 4
    ORANGE = 5
    PURPLE = 6
    PINK = 7
    OLIVE = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_RED = 11
    LIGHT_ORANGE = 12
    LIGHT_PURPLE = 13
    WHITE = 14
    BLACK = 15

    def __str__(self):
        return self.name.lower()


# Every playable symbol, in alphabet order. EMPTY is not part of it.
ALPHABET: Tuple[Color, ...] = tuple(c for c in Color if c is not Color.EMPTY)

Code = Tuple[Color, ...]


class Score(NamedTuple):
    exact: int
    color_only: int

    def __str__(self):
        return f"{self.exact} black, {self.color_only} white"


History = Sequence[Tuple[Code, Score]]

RNG = random.Random(CONFIG["random_seed"])


def active_colors(color_count: int) -> Tuple[Color, ...]:
    """The first `color_count` symbols of the alphabet."""
    return ALPHABET[:color_count]


def color_index(color: Color) -> int:
    return ALPHABET.index(color)


def empty_code(width: int) -> Code:
    return (Color.EMPTY,) * width


def has_repeats(code: Sequence[Color]) -> bool:
    return len(set(code)) != len(code)


def is_valid_code(code: Sequence[Color], config) -> bool:
    """
    A code is valid when it has the configured width, uses only the active
    colours and, if repeats are off, no colour twice.
    """
    if len(code) != config.width:
        return False
    allowed = active_colors(config.color_count)
    for c in code:
        if c not in allowed:
            return False
    if not config.allow_repeats and has_repeats(code):
        return False
    return True


def parse_code(text: str) -> Code:
    """
    Turn "red green blue yellow" (or comma separated) into a code.
    Names are matched case-insensitively against Color names.
    """
    names = text.replace(",", " ").split()
    code = []
    for name in names:
        key = name.strip().upper().replace("-", "_")
        try:
            code.append(Color[key])
        except KeyError:
            raise ValueError(f"Unknown color name: {name!r}") from None
    return tuple(code)


def format_code(code: Sequence[Color]) -> str:
    return ", ".join(str(c) for c in code)


# =========================
# Scoring + feasibility
# =========================


def score(candidate: Sequence[Color], reference: Sequence[Color]) -> Score:
    """
    Black/white peg score of `candidate` against `reference`.

    Pass 1 counts exact matches. Pass 2 walks the remaining candidate
    positions in order and takes the first unused reference position with
    the same colour. EMPTY never matches anything.
    """
    if len(candidate) != len(reference):
        raise CodeWidthError(
            f"cannot score codes of width {len(candidate)} and {len(reference)}"
        )
    width = len(candidate)
    cand_used = [False] * width
    ref_used = [False] * width

    exact = 0
    for i in range(width):
        if candidate[i] is Color.EMPTY:
            cand_used[i] = True
            continue
        if candidate[i] == reference[i]:
            exact += 1
            cand_used[i] = True
            ref_used[i] = True

    color_only = 0
    for i in range(width):
        if cand_used[i]:
            continue
        for j in range(width):
            if not ref_used[j] and reference[j] == candidate[i]:
                color_only += 1
                ref_used[j] = True
                break
    return Score(exact, color_only)


def is_feasible(candidate: Sequence[Color], history: History) -> bool:
    """
    True if `candidate` could still be the secret: scored against every past
    guess it gives the same score that guess got. Vacuously true for an
    empty history.
    """
    for guess, recorded in history:
        if score(candidate, guess) != tuple(recorded):
            return False
    return True


def filter_candidates(candidates: Iterable[Code], history: History) -> List[Code]:
    """Keep only candidates consistent with the whole history."""
    return [c for c in candidates if is_feasible(c, history)]


# =========================
# Random codes
# =========================


def random_code(config, rng: Optional[random.Random] = None) -> Code:
    """
    Fill positions left to right with uniformly drawn active colours. With
    repeats off, a colour already placed is redrawn.
    """
    rng = rng or RNG
    colors = active_colors(config.color_count)
    code: List[Color] = []
    while len(code) < config.width:
        now = colors[rng.randrange(config.color_count)]
        if now in code and not config.allow_repeats:
            continue
        code.append(now)
    return tuple(code)
