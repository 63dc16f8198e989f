#!/usr/bin/env python3
from typing import List, Sequence, Tuple

from mastermind.mastermind_env import Code, History, score

# =========================
# Fitness evaluation
# =========================


def code_fitness(code: Code, history: History) -> int:
    """
    Total distance between the scores `code` would have produced as the
    secret and the scores actually recorded. 0 means the code is feasible.
    """
    total = 0
    for guess, (exact_k, color_only_k) in history:
        exact, color_only = score(code, guess)
        total += abs(exact - exact_k) + abs(color_only - color_only_k)
    return total


def evaluate_population(population: Sequence[Code], history: History) -> List[int]:
    return [code_fitness(code, history) for code in population]


def rank_population(
    population: Sequence[Code], fitnesses: Sequence[int]
) -> Tuple[Tuple[Code, ...], Tuple[int, ...]]:
    """
    Sort the population ascending by fitness. Stable, so equal fitness keeps
    the incoming order.
    """
    order = sorted(range(len(population)), key=lambda i: fitnesses[i])
    return (
        tuple(population[i] for i in order),
        tuple(fitnesses[i] for i in order),
    )
