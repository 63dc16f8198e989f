import random

import pytest

from mastermind.config import GameConfig
from mastermind.mastermind_env import Color

R, G, B, Y = Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def classic():
    return GameConfig(width=4, color_count=6, allow_repeats=True)


@pytest.fixture
def small():
    return GameConfig(width=3, color_count=4, allow_repeats=True)


class ScriptedRng:
    """Stands in for random.Random and replays fixed draws."""

    def __init__(self, randranges=(), randints=(), randoms=()):
        self.randranges = list(randranges)
        self.randints = list(randints)
        self.randoms = list(randoms)

    def randrange(self, n):
        value = self.randranges.pop(0)
        assert 0 <= value < n
        return value

    def randint(self, a, b):
        value = self.randints.pop(0)
        assert a <= value <= b
        return value

    def random(self):
        return self.randoms.pop(0)
