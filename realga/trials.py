"""Repeated runs on independently seeded generators."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .config import GASettings
from .engine import GARunResult, run_genetic_algorithm
from .exceptions import InvalidSettingsError
from .individual import Individual
from .operators import GeneticOperators

logger = logging.getLogger(__name__)


@dataclass
class TrialSummary:
    final_best: np.ndarray
    mean_best_history: np.ndarray
    mean_final_best: float
    std_final_best: float
    best: Individual
    best_fitness: float
    results: list[GARunResult]


def spawn_generators(seed: int, trials: int) -> list[np.random.Generator]:
    """One generator per trial; trial k gets the same stream whatever `trials` is."""
    children = np.random.SeedSequence(seed).spawn(trials)
    return [np.random.default_rng(child) for child in children]


def run_trials(
    operators: GeneticOperators,
    settings: GASettings,
    trials: int,
    seed: int,
) -> TrialSummary:
    if trials < 1:
        raise InvalidSettingsError(f"trials must be >= 1, got {trials}")
    settings.validate()

    results: list[GARunResult] = []
    for i, rng in enumerate(spawn_generators(seed, trials)):
        result = run_genetic_algorithm(operators, settings, rng)
        logger.debug(f"Trial {i}: best F={result.best_fitness:f}")
        results.append(result)

    final_best = np.array([r.best_fitness for r in results], dtype=float)
    if settings.num_generations > 0:
        mean_best_history = np.mean(np.vstack([r.fitness_history for r in results]), axis=0)
    else:
        mean_best_history = np.empty(0, dtype=float)

    keys = final_best if operators.maximize else -final_best
    winner = results[int(np.argmax(keys))]

    return TrialSummary(
        final_best=final_best,
        mean_best_history=mean_best_history,
        mean_final_best=float(np.mean(final_best)),
        std_final_best=float(np.std(final_best)),
        best=winner.best,
        best_fitness=winner.best_fitness,
        results=results,
    )
