#!/usr/bin/env python3
from typing import List, Optional

from mastermind.config import CONFIG
from mastermind.mastermind_env import (
    Code,
    Color,
    active_colors,
    color_index,
    has_repeats,
)

# =========================
# Exhaustive enumeration
# =========================


def first_code(config) -> Code:
    """
    Lowest valid code: the first colour everywhere, or the first `width`
    colours in order when repeats are off.
    """
    colors = active_colors(config.color_count)
    if config.allow_repeats:
        return (colors[0],) * config.width
    return tuple(colors[:config.width])


def increment(code: Code, config) -> Code:
    """
    Odometer step over the active colours: bump the rightmost position and
    carry leftwards on overflow. The all-last code wraps to the all-first one.
    A symbol outside the active colours (EMPTY included) counts as overflow.
    """
    colors = active_colors(config.color_count)
    digits: List[Color] = list(code)
    for i in range(len(digits) - 1, -1, -1):
        if digits[i] in colors:
            index = color_index(digits[i]) + 1
        else:
            index = len(colors)
        if index < len(colors):
            digits[i] = colors[index]
            break
        digits[i] = colors[0]
    return tuple(digits)


def next_code(previous: Optional[Code], config) -> Code:
    """
    Next code in counter order after `previous` (or the first code when
    there is none). With repeats off, codes containing a repeated colour are
    skipped.
    """
    if previous is None:
        return first_code(config)
    code = increment(previous, config)
    if not config.allow_repeats:
        while has_repeats(code):
            code = increment(code, config)
    return code


class BruteforceSearch:
    """
    Walks through every valid code in counter order, one per call.

    Once the last code has been handed out the walk wraps to the first one.
    """

    def __init__(self, config, verbose: bool = CONFIG["debug"]):
        self.config = config
        self.verbose = verbose
        self.previous: Optional[Code] = None

    def reset(self) -> None:
        self.previous = None

    def next(self) -> Code:
        if self.previous is None and self.verbose:
            print("[bruteforce] First try.")
        self.previous = next_code(self.previous, self.config)
        return self.previous
