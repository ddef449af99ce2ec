"""
Generation loop for the rank-selection genetic algorithm.

One call to `run_genetic_algorithm` is one run: validate settings, generate and
rank an initial population, then breed `num_generations` replacement
populations. Every random draw comes from the `rng` argument, so a fixed seed
reproduces a run exactly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from .config import GASettings
from .exceptions import PopulationSizeError
from .individual import Individual
from .operators import GeneticOperators, Population, build_selection_pool

logger = logging.getLogger(__name__)

StopHook = Callable[[int, Individual], bool]
GenerationHook = Callable[[int, Individual, float], None]


@dataclass
class GARunResult:
    best: Individual
    best_fitness: float
    fitness_history: np.ndarray
    avg_fitness_history: np.ndarray
    worst_fitness_history: np.ndarray
    initial_population: Population
    final_population: Population
    generations_completed: int
    stopped_early: bool = False


def _check_size(population: Population, expected: int, stage: str) -> None:
    if len(population) != expected:
        raise PopulationSizeError(
            f"{stage} produced {len(population)} individuals, expected {expected}"
        )


def breed_generation(
    ranked: Population,
    operators: GeneticOperators,
    settings: GASettings,
    rng: np.random.Generator,
) -> Population:
    """Build the next (unranked) population from a worst-first ranked one."""
    pool = build_selection_pool(ranked)

    next_population: list[Individual] = []
    for _ in range(settings.offspring_per_generation):
        i, j = rng.integers(0, len(pool), size=2)
        child = operators.crossover(pool[int(i)], pool[int(j)], settings.crossover_rate, rng)

        if rng.integers(0, 100) < settings.mutation_rate:
            child = operators.mutate(child, settings.mutation_rate, rng)

        next_population.append(child)

    # Elite goes last so a stable rank keeps it as best among equal keys.
    if settings.keep_best_across_population:
        next_population.append(ranked[-1])

    return tuple(next_population)


def run_genetic_algorithm(
    operators: GeneticOperators,
    settings: GASettings,
    rng: np.random.Generator,
    should_stop: Optional[StopHook] = None,
    on_generation: Optional[GenerationHook] = None,
) -> GARunResult:
    """
    Evolve a population for `settings.num_generations` generations.

    `should_stop(generation, best)` is checked before each generation and ends
    the run early when it returns True. `on_generation(generation, best,
    best_fitness)` is called after each generation is ranked.

    Raises InvalidSettingsError before anything runs, and PopulationSizeError if
    an operator returns a population of the wrong length.
    """
    settings.validate()

    initial = tuple(operators.generate(settings.population_size, rng))
    _check_size(initial, settings.population_size, "Initial population generator")

    logger.info(f"First best (unranked): {initial[-1]}")
    population, fitness = operators.rank_with_fitness(initial)
    best = population[-1]
    best_fitness = float(fitness[-1])
    logger.info(f"First best: {best} F={best_fitness:f}")

    best_hist: list[float] = []
    avg_hist: list[float] = []
    worst_hist: list[float] = []
    stopped_early = False

    for gen in range(settings.num_generations):
        if should_stop is not None and should_stop(gen, best):
            logger.info(f"Stop requested before generation {gen}")
            stopped_early = True
            break

        offspring = breed_generation(population, operators, settings, rng)
        _check_size(offspring, settings.population_size, f"Generation {gen}")

        population, fitness = operators.rank_with_fitness(offspring)
        _check_size(population, settings.population_size, f"Ranking of generation {gen}")
        best = population[-1]
        best_fitness = float(fitness[-1])

        best_hist.append(best_fitness)
        avg_hist.append(float(np.mean(fitness)))
        worst_hist.append(float(fitness[0]))

        if on_generation is not None:
            on_generation(gen, best, best_fitness)

        if gen % settings.log_every == 0:
            logger.info(f"Generation {gen}: best {best} F={best_fitness:f}")
        else:
            logger.debug(f"Generation {gen}: best F={best_fitness:f}")

    return GARunResult(
        best=best,
        best_fitness=best_fitness,
        fitness_history=np.array(best_hist, dtype=float),
        avg_fitness_history=np.array(avg_hist, dtype=float),
        worst_fitness_history=np.array(worst_hist, dtype=float),
        initial_population=initial,
        final_population=population,
        generations_completed=len(best_hist),
        stopped_early=stopped_early,
    )
