#!/usr/bin/env python
"""
Reference run of the rank-selection GA.

This script solves:
    minimize f(x, y) = (1.5 - x + xy)^2 + (2.25 - x + xy^2)^2 + (2.625 - x + xy^3)^2
    starting from x, y sampled in [0, 100)

What this file does:
1. Runs the reference configuration (population 100, 1000 generations, elitism).
2. Prints the first best, progress every 50 generations and the final best.
3. Runs repeated trials comparing midpoint and blend crossover.
"""

from __future__ import annotations

import logging
from dataclasses import replace

import numpy as np

from realga import GASettings, beale, make_objective, reference_operators, run_genetic_algorithm, run_trials
from realga.operators import blend_crossover
from realga.report import format_individual, print_run_summary, print_trial_summary


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    seed = 598
    rng = np.random.default_rng(seed)

    settings = GASettings(
        population_size=100,
        mutation_rate=102,
        crossover_rate=100,
        num_generations=1000,
        keep_best_across_population=True,
    )

    objective = make_objective(beale)
    operators = reference_operators(objective, maximize=False)

    result = run_genetic_algorithm(operators, settings, rng)
    print_run_summary(result)

    # Short trial comparison; mutation below 100 so crossover actually matters.
    trial_settings = GASettings(
        population_size=40,
        mutation_rate=20,
        crossover_rate=75,
        num_generations=150,
        keep_best_across_population=True,
        log_every=1000,
    )
    midpoint = run_trials(operators, trial_settings, trials=20, seed=10_000)
    blend = run_trials(
        replace(operators, crossover=blend_crossover), trial_settings, trials=20, seed=10_000
    )

    print("\nCrossover comparison (Beale, lower is better)")
    print_trial_summary("Midpoint crossover", midpoint)
    print_trial_summary("Blend crossover (75%)", blend)
    print(f"Single-run best: {format_individual(result.best, result.best_fitness)}")


if __name__ == "__main__":
    main()
