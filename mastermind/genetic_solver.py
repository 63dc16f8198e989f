#!/usr/bin/env python3
"""
genetic_solver.py

Genetic search for a guess that is consistent with every scored guess so far.

Outline of one request:

- No history yet: any random valid code will do.
- Otherwise run *attempts*. An attempt starts from a random population and
  evolves it for up to `generations` generations:
    * breed children from the fittest fifth (one-point or two-point crossover),
    * give each child a small chance of mutation, else permutation, else
      inversion,
    * replace duplicated children by fresh random codes,
    * rank by fitness and collect every fitness-0 (feasible) code.
  The attempt stops as soon as `feasible_codes_max` feasible codes are known.
- An attempt that finds nothing is thrown away and a new one starts. By
  default there is no limit on attempts: with a history that no code can
  satisfy (which a correct game never produces) the solver never returns.
  Set `max_attempts` to get NoFeasibleCodeError instead, or pass
  `should_stop` to be able to cancel from outside.
- The guess is picked at random among the collected feasible codes.

Based on "Efficient solutions for Mastermind using genetic algorithms"
(Berghman, Goossens, Leus).
"""

import random
from typing import Callable, List, Optional, Sequence, Tuple

from mastermind.config import CONFIG
from mastermind.errors import NoFeasibleCodeError, SolverCancelled
from mastermind.fitness import evaluate_population, rank_population
from mastermind.history import snapshot
from mastermind.mastermind_env import (
    RNG,
    Code,
    active_colors,
    format_code,
    is_valid_code,
    random_code,
)

# =========================
# Crossover operators
# =========================


def one_point_crossover(mother: Code, father: Code, rng: random.Random) -> Tuple[Code, Code]:
    """
    Child 1 takes the mother up to and including a random split index and
    the father after it; child 2 the other way round.
    """
    sep = rng.randrange(len(mother))
    child1 = mother[:sep + 1] + father[sep + 1:]
    child2 = father[:sep + 1] + mother[sep + 1:]
    return child1, child2


def two_point_crossover(mother: Code, father: Code, rng: random.Random) -> Tuple[Code, Code]:
    """
    Swap the segment between two ordered split indices: positions
    sep1 < i <= sep2 come from the other parent.
    """
    width = len(mother)
    sep1 = rng.randrange(width)
    sep2 = rng.randrange(width)
    if sep1 > sep2:
        sep1, sep2 = sep2, sep1
    child1 = mother[:sep1 + 1] + father[sep1 + 1:sep2 + 1] + mother[sep2 + 1:]
    child2 = father[:sep1 + 1] + mother[sep1 + 1:sep2 + 1] + father[sep2 + 1:]
    return child1, child2


# =========================
# Variation operators
# =========================


def mutation(code: Code, config, rng: random.Random) -> Code:
    """Put a random active colour at one random position."""
    pos = rng.randrange(len(code))
    colors = active_colors(config.color_count)
    new_color = colors[rng.randrange(config.color_count)]
    return code[:pos] + (new_color,) + code[pos + 1:]


def permutation(code: Code, rng: random.Random) -> Code:
    """Swap the colours at two random positions."""
    pos1 = rng.randrange(len(code))
    pos2 = rng.randrange(len(code))
    swapped = list(code)
    swapped[pos1], swapped[pos2] = swapped[pos2], swapped[pos1]
    return tuple(swapped)


def inversion(code: Code, rng: random.Random) -> Code:
    """Reverse the colours between two random positions (both included)."""
    pos1 = rng.randrange(len(code))
    pos2 = rng.randrange(len(code))
    if pos2 < pos1:
        pos1, pos2 = pos2, pos1
    return code[:pos1] + tuple(reversed(code[pos1:pos2 + 1])) + code[pos2 + 1:]


# =========================
# Parent selection
# =========================


class ParentSelector:
    """
    Hands out parent indices from the top of the ranked population.

    The index moves forward by a random 0..step_max each call and jumps back
    to 0 once it would leave the pool.
    """

    def __init__(self, pool_size: int, step_max: int, rng: random.Random):
        self.pool_size = max(1, pool_size)
        self.step_max = step_max
        self.rng = rng
        self.pos = 0

    def reset(self) -> None:
        self.pos = 0

    def next(self) -> int:
        self.pos += self.rng.randint(0, self.step_max)
        if self.pos >= self.pool_size:
            self.pos = 0
        return self.pos


# =========================
# Solver
# =========================

# max_attempts=None is meaningful (no cap), so it needs its own "not given".
_FROM_CONFIG = object()


class GeneticSolver:
    """
    Genetic-algorithm guess generator.

    Every hyperparameter defaults to its CONFIG entry.
    """

    def __init__(
        self,
        config,
        rng: Optional[random.Random] = None,
        pop_size: Optional[int] = None,
        generations: Optional[int] = None,
        feasible_codes_max: Optional[int] = None,
        parent_pool_divisor: Optional[int] = None,
        parent_step_max: Optional[int] = None,
        one_point_crossover_rate: Optional[float] = None,
        mutation_rate: Optional[float] = None,
        permutation_rate: Optional[float] = None,
        inversion_rate: Optional[float] = None,
        max_attempts=_FROM_CONFIG,
        should_stop: Optional[Callable[[], bool]] = None,
        verbose: Optional[bool] = None,
    ):
        def pick(value, key):
            return CONFIG[key] if value is None else value

        self.config = config
        self.rng = rng or RNG
        self.pop_size = pick(pop_size, "pop_size")
        self.generations = pick(generations, "generations")
        self.feasible_codes_max = pick(feasible_codes_max, "feasible_codes_max")
        self.parent_pool_divisor = pick(parent_pool_divisor, "parent_pool_divisor")
        self.parent_step_max = pick(parent_step_max, "parent_step_max")
        self.one_point_crossover_rate = pick(one_point_crossover_rate, "one_point_crossover_rate")
        self.mutation_rate = pick(mutation_rate, "mutation_rate")
        self.permutation_rate = pick(permutation_rate, "permutation_rate")
        self.inversion_rate = pick(inversion_rate, "inversion_rate")
        self.max_attempts = CONFIG["max_attempts"] if max_attempts is _FROM_CONFIG else max_attempts
        self.should_stop = should_stop
        self.verbose = pick(verbose, "debug")

        if self.pop_size < 2:
            raise ValueError("pop_size must be at least 2")
        if self.generations < 1:
            raise ValueError("generations must be at least 1")
        if self.feasible_codes_max < 1:
            raise ValueError("feasible_codes_max must be at least 1")

        self.selector = ParentSelector(
            self.pop_size // self.parent_pool_divisor,
            self.parent_step_max,
            self.rng,
        )
        # Filled in by generate_guess, for callers that want to inspect a run.
        self.attempts = 0
        self.generations_run = 0

    def _check_stop(self) -> None:
        if self.should_stop is not None and self.should_stop():
            raise SolverCancelled("genetic solver cancelled by caller")

    # ----- one generation -----

    def breed(self, population: Sequence[Code]) -> List[Code]:
        self.selector.reset()
        children: List[Code] = []
        while len(children) < self.pop_size:
            mother = population[self.selector.next()]
            father = population[self.selector.next()]
            if self.rng.random() < self.one_point_crossover_rate:
                child1, child2 = one_point_crossover(mother, father, self.rng)
            else:
                child1, child2 = two_point_crossover(mother, father, self.rng)
            children.append(child1)
            if len(children) < self.pop_size:
                children.append(child2)
        return children

    def vary(self, child: Code) -> Code:
        """
        At most one operator per child. Each tier gets its own draw and only
        runs if every tier before it missed.
        """
        if self.rng.random() < self.mutation_rate:
            return mutation(child, self.config, self.rng)
        elif self.rng.random() < self.permutation_rate:
            return permutation(child, self.rng)
        elif self.rng.random() < self.inversion_rate:
            return inversion(child, self.rng)
        return child

    def deduplicate(self, children: Sequence[Code], population: Sequence[Code]) -> Tuple[Code, ...]:
        """
        Replace a child by a random code if an earlier child already has the
        same colours, or if it is identical to the member it replaces.
        """
        seen = set()
        result = []
        for i, child in enumerate(children):
            if child in seen or child == population[i]:
                child = random_code(self.config, self.rng)
            seen.add(child)
            result.append(child)
        return tuple(result)

    def evolve_population(self, population: Sequence[Code]) -> Tuple[Code, ...]:
        """Next generation from a ranked population. The input is not modified."""
        children = [self.vary(child) for child in self.breed(population)]
        return self.deduplicate(children, population)

    def harvest(self, population, fitnesses, feasible: List[Code]) -> bool:
        """
        Add ranked fitness-0 codes to `feasible`. Returns True once it holds
        feasible_codes_max codes.
        """
        for code, fit in zip(population, fitnesses):
            if fit != 0:
                break
            if not is_valid_code(code, self.config) or code in feasible:
                continue
            feasible.append(code)
            if len(feasible) >= self.feasible_codes_max:
                return True
        return False

    # ----- attempts -----

    def run_attempt(self, history) -> List[Code]:
        """One fresh population evolved for up to `generations` generations."""
        feasible: List[Code] = []
        population = tuple(random_code(self.config, self.rng) for _ in range(self.pop_size))
        population, fitnesses = rank_population(population, evaluate_population(population, history))

        gens_done = 0
        for _ in range(self.generations):
            self._check_stop()
            population = self.evolve_population(population)
            population, fitnesses = rank_population(
                population, evaluate_population(population, history)
            )
            self.generations_run += 1
            gens_done += 1
            if self.harvest(population, fitnesses, feasible):
                break

        if self.verbose:
            print(
                f"[genetic] Attempt {self.attempts} | generations: {gens_done} | "
                f"best fitness: {fitnesses[0]} | feasible: {len(feasible)}"
            )
        return feasible

    def generate_guess(self, history) -> Code:
        """
        A code consistent with the whole history (a random code if the
        history is empty). Blocks until one is found; see the module
        docstring for the ways out.
        """
        history = snapshot(history)
        self.attempts = 0
        self.generations_run = 0

        if not history:
            if self.verbose:
                print("[genetic] No history yet; random first guess.")
            return random_code(self.config, self.rng)

        feasible: List[Code] = []
        while not feasible:
            if self.max_attempts is not None and self.attempts >= self.max_attempts:
                raise NoFeasibleCodeError(
                    f"no feasible code after {self.attempts} attempts "
                    f"of {self.generations} generations"
                )
            self._check_stop()
            self.attempts += 1
            feasible = self.run_attempt(history)
            if not feasible and self.verbose:
                print("[genetic] No feasible code found. Retry with new population.")

        if self.verbose:
            print(f"[genetic] There are {len(feasible)} feasible code(s)")
        guess = self.rng.choice(feasible)
        if self.verbose:
            print(f"[genetic] Guess is {format_code(guess)}")
        return guess
