"""
realga - rank-selection genetic algorithm for real-valued (x, y) surfaces.
"""

__version__ = "0.1.0"

from .config import GASettings
from .engine import GARunResult, breed_generation, run_genetic_algorithm
from .exceptions import (
    EmptySelectionPoolError,
    InvalidSettingsError,
    PopulationSizeError,
    RealGAError,
)
from .individual import HIGH_RANGE, Individual, make_individual, random_coordinate
from .objectives import SURFACES, beale, booth, evaluate, make_objective, three_hump_camel
from .operators import (
    GeneticOperators,
    blend_crossover,
    build_selection_pool,
    generate_initial_population,
    midpoint_crossover,
    rank_population,
    rank_population_with_fitness,
    reference_operators,
    reset_mutation,
)
from .trials import TrialSummary, run_trials, spawn_generators

__all__ = [
    "GASettings",
    "GARunResult",
    "breed_generation",
    "run_genetic_algorithm",
    "RealGAError",
    "InvalidSettingsError",
    "PopulationSizeError",
    "EmptySelectionPoolError",
    "HIGH_RANGE",
    "Individual",
    "make_individual",
    "random_coordinate",
    "SURFACES",
    "beale",
    "booth",
    "three_hump_camel",
    "evaluate",
    "make_objective",
    "GeneticOperators",
    "blend_crossover",
    "build_selection_pool",
    "generate_initial_population",
    "midpoint_crossover",
    "rank_population",
    "rank_population_with_fitness",
    "reference_operators",
    "reset_mutation",
    "TrialSummary",
    "run_trials",
    "spawn_generators",
]
