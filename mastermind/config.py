#!/usr/bin/env python3
from dataclasses import dataclass

from mastermind.errors import ConfigurationError

CONFIG = {
    # Randomness / reproducibility (None = seed from the OS)
    "random_seed": None,

    # Game defaults
    "width": 4,
    "color_count": 6,
    "allow_repeats": True,
    "max_tries": 8,

    # Genetic solver
    "pop_size": 2000,
    "generations": 500,
    "feasible_codes_max": 1,
    "parent_pool_divisor": 5,   # parents come from the fittest 1/5
    "parent_step_max": 6,
    "one_point_crossover_rate": 0.5,
    "mutation_rate": 0.03,
    "permutation_rate": 0.03,
    "inversion_rate": 0.02,
    # None = retry with a fresh population until something feasible turns up
    "max_attempts": None,

    # Logging
    "debug": False,
}

MIN_WIDTH = 1
MAX_WIDTH = 8
MIN_COLORS = 1
MAX_COLORS = 15


@dataclass(frozen=True)
class GameConfig:
    """
    The three settings that decide which codes are valid.

    Construction fails with ConfigurationError when the settings are out of
    range or admit no valid code at all, so the solvers never see a
    configuration they cannot satisfy.
    """
    width: int = CONFIG["width"]
    color_count: int = CONFIG["color_count"]
    allow_repeats: bool = CONFIG["allow_repeats"]

    def __post_init__(self):
        if not MIN_WIDTH <= self.width <= MAX_WIDTH:
            raise ConfigurationError(
                f"width must be between {MIN_WIDTH} and {MAX_WIDTH}, got {self.width}"
            )
        if not MIN_COLORS <= self.color_count <= MAX_COLORS:
            raise ConfigurationError(
                f"color_count must be between {MIN_COLORS} and {MAX_COLORS}, "
                f"got {self.color_count}"
            )
        if not self.allow_repeats and self.color_count < self.width:
            raise ConfigurationError(
                f"cannot fill {self.width} positions with {self.color_count} "
                "colors when repeats are not allowed"
            )

    @classmethod
    def from_config(cls, overrides=None):
        """Build from CONFIG, with optional {name: value} overrides."""
        values = {
            "width": CONFIG["width"],
            "color_count": CONFIG["color_count"],
            "allow_repeats": CONFIG["allow_repeats"],
        }
        if overrides:
            values.update({k: v for k, v in overrides.items() if k in values})
        return cls(**values)

    def code_count(self) -> int:
        """Number of valid codes under these settings."""
        if self.allow_repeats:
            return self.color_count ** self.width
        total = 1
        for i in range(self.width):
            total *= self.color_count - i
        return total
