import itertools

from mastermind.bruteforce import BruteforceSearch, first_code, increment, next_code
from mastermind.config import GameConfig
from mastermind.mastermind_env import ALPHABET, Color, is_valid_code

R, G, B, Y = Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW


def test_first_code_with_repeats():
    assert first_code(GameConfig(width=4, color_count=6)) == (R, R, R, R)
    assert next_code(None, GameConfig(width=2, color_count=3)) == (R, R)


def test_first_code_without_repeats():
    config = GameConfig(width=4, color_count=6, allow_repeats=False)
    assert first_code(config) == (R, G, B, Y)


def test_increment_carries_leftwards():
    config = GameConfig(width=3, color_count=3)
    assert increment((R, R, R), config) == (R, R, G)
    assert increment((R, R, B), config) == (R, G, R)
    assert increment((R, B, B), config) == (G, R, R)
    assert increment((B, B, B), config) == (R, R, R)


def test_full_walk_visits_every_code_once_then_wraps():
    config = GameConfig(width=3, color_count=3, allow_repeats=True)
    search = BruteforceSearch(config)
    total = 3 ** 3
    codes = [search.next() for _ in range(total)]
    assert len(set(codes)) == total
    assert codes == list(itertools.product(ALPHABET[:3], repeat=3))
    assert search.next() == codes[0]


def test_walk_without_repeats_skips_repeated_codes():
    config = GameConfig(width=3, color_count=4, allow_repeats=False)
    search = BruteforceSearch(config)
    expected = [
        c for c in itertools.product(ALPHABET[:4], repeat=3) if len(set(c)) == 3
    ]
    codes = [search.next() for _ in range(len(expected))]
    assert codes == expected
    assert all(is_valid_code(c, config) for c in codes)
    assert search.next() == codes[0]


def test_reset_starts_over():
    search = BruteforceSearch(GameConfig(width=2, color_count=2))
    search.next()
    search.next()
    search.reset()
    assert search.next() == (R, R)


def test_single_color_single_position():
    config = GameConfig(width=1, color_count=1)
    search = BruteforceSearch(config)
    assert search.next() == (R,)
    assert search.next() == (R,)


def test_increment_treats_inactive_symbols_as_overflow():
    config = GameConfig(width=2, color_count=3)
    assert increment((R, Color.EMPTY), config) == (G, R)
    assert increment((Color.EMPTY, Color.EMPTY), config) == (R, R)
    # yellow is not in play with three colours
    assert increment((R, Y), config) == (G, R)
