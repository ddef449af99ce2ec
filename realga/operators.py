"""
Population operators and the strategy bundle the engine is parameterized by.

Ranking convention: populations are ordered ascending by fitness key, worst
first and best last. `build_selection_pool` relies on that order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np

from .exceptions import EmptySelectionPoolError
from .individual import Individual, make_individual, random_coordinate
from .objectives import ObjectiveFunction

Population = tuple[Individual, ...]
GenerateFn = Callable[[int, np.random.Generator], Population]
CrossoverFn = Callable[[Individual, Individual, int, np.random.Generator], Individual]
MutateFn = Callable[[Individual, int, np.random.Generator], Individual]
RankFn = Callable[[Sequence[Individual]], Population]


def generate_initial_population(size: int, rng: np.random.Generator) -> Population:
    """Sample `size` individuals uniformly in [0, HIGH_RANGE)^2."""
    return tuple(
        make_individual(random_coordinate(rng), random_coordinate(rng))
        for _ in range(size)
    )


def build_selection_pool(ranked: Sequence[Individual], offset: int = 0) -> Population:
    """
    Linear-rank selection pool for a worst-first population.

    The individual at rank i is replicated i + offset times. With the default
    offset of 0 the worst individual never appears and the best appears N-1
    times, for a pool of N*(N-1)/2 entries. offset=1 gives the conventional
    i+1 weighting.
    """
    pool = [
        individual
        for rank, individual in enumerate(ranked)
        for _ in range(rank + offset)
    ]
    if not pool:
        raise EmptySelectionPoolError(
            f"Selection pool is empty for a population of {len(ranked)} (offset={offset})"
        )
    return tuple(pool)


def midpoint_crossover(
    parent1: Individual,
    parent2: Individual,
    crossover_rate: int,
    rng: np.random.Generator,
) -> Individual:
    """Coordinate-wise average of the parents. Rate and rng are unused."""
    return make_individual((parent1.x + parent2.x) / 2, (parent1.y + parent2.y) / 2)


def blend_crossover(
    parent1: Individual,
    parent2: Individual,
    crossover_rate: int,
    rng: np.random.Generator,
) -> Individual:
    """Weighted blend: crossover_rate percent of parent1, the rest of parent2."""
    weight = float(np.clip(crossover_rate, 0, 100)) / 100.0
    child = weight * parent1.as_array() + (1.0 - weight) * parent2.as_array()
    return make_individual(child[0], child[1])


def reset_mutation(
    individual: Individual,
    mutation_rate: int,
    rng: np.random.Generator,
) -> Individual:
    """Hard reset: a brand-new random individual, unrelated to the input."""
    return make_individual(random_coordinate(rng), random_coordinate(rng))


def rank_population_with_fitness(
    population: Sequence[Individual],
    objective: ObjectiveFunction,
    maximize: bool = True,
) -> tuple[Population, np.ndarray]:
    """
    Rank worst-first and return the raw objective values in the ranked order.

    Each individual is scored exactly once. The sort is a stable numpy argsort,
    so ties keep their incoming order and NaN keys are placed after every
    finite key (i.e. NaN ranks as best).
    """
    values = np.fromiter((objective(ind) for ind in population), dtype=float, count=len(population))
    keys = values if maximize else -values
    order = np.argsort(keys, kind="stable")
    return tuple(population[int(i)] for i in order), values[order]


def rank_population(
    population: Sequence[Individual],
    objective: ObjectiveFunction,
    maximize: bool = True,
) -> Population:
    """Return a new tuple sorted worst-first by fitness; the input is left as is."""
    ranked, _ = rank_population_with_fitness(population, objective, maximize)
    return ranked


@dataclass(frozen=True)
class GeneticOperators:
    """Pluggable strategy set driving the generation loop."""

    objective: ObjectiveFunction
    generate: GenerateFn = generate_initial_population
    crossover: CrossoverFn = midpoint_crossover
    mutate: MutateFn = reset_mutation
    rank: Optional[RankFn] = None
    maximize: bool = True

    def rank_population(self, population: Sequence[Individual]) -> Population:
        if self.rank is not None:
            return self.rank(population)
        return rank_population(population, self.objective, self.maximize)

    def rank_with_fitness(self, population: Sequence[Individual]) -> tuple[Population, np.ndarray]:
        """Ranked population plus raw objective values aligned with it."""
        if self.rank is not None:
            ranked = self.rank(population)
            values = np.fromiter((self.fitness(ind) for ind in ranked), dtype=float, count=len(ranked))
            return ranked, values
        return rank_population_with_fitness(population, self.objective, self.maximize)

    def fitness(self, individual: Individual) -> float:
        return float(self.objective(individual))


def reference_operators(objective: ObjectiveFunction, maximize: bool = True) -> GeneticOperators:
    """Uniform init, midpoint crossover, reset mutation and stable ranking."""
    return GeneticOperators(objective=objective, maximize=maximize)
