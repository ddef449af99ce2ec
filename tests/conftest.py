"""
Shared fixtures for realga tests.
"""

import numpy as np
import pytest

from realga import GASettings, make_individual, reference_operators


@pytest.fixture
def rng():
    """Seeded generator so every test sees the same stream."""
    return np.random.default_rng(42)


@pytest.fixture
def peak_objective():
    """Smooth single-peak surface, maximum 0 at (30, 70)."""
    def objective(individual):
        return -((individual.x - 30.0) ** 2) - (individual.y - 70.0) ** 2
    return objective


@pytest.fixture
def peak_operators(peak_objective):
    return reference_operators(peak_objective, maximize=True)


@pytest.fixture
def small_settings():
    return GASettings(
        population_size=20,
        mutation_rate=10,
        crossover_rate=100,
        num_generations=30,
        keep_best_across_population=True,
    )


@pytest.fixture
def ladder():
    """Ten distinct individuals already ranked worst-first by their x value."""
    return tuple(make_individual(float(i), float(i)) for i in range(10))
