from __future__ import annotations

import numbers
from dataclasses import dataclass

from .exceptions import InvalidSettingsError


@dataclass(frozen=True)
class GASettings:
    population_size: int = 100
    mutation_rate: int = 102  # percent; anything above 100 always mutates
    crossover_rate: int = 100  # forwarded to the crossover operator
    num_generations: int = 1000
    keep_best_across_population: bool = True
    log_every: int = 50

    def validate(self) -> None:
        """Raise InvalidSettingsError for settings that cannot drive a run."""
        for name in ("population_size", "mutation_rate", "crossover_rate", "num_generations", "log_every"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidSettingsError(f"{name} must be an integer, got {value!r}")

        if self.population_size < 2:
            raise InvalidSettingsError(
                f"population_size must be >= 2 to build a selection pool, got {self.population_size}"
            )
        if self.num_generations < 0:
            raise InvalidSettingsError(
                f"num_generations must be >= 0, got {self.num_generations}"
            )
        if self.log_every < 1:
            raise InvalidSettingsError(f"log_every must be >= 1, got {self.log_every}")

    @property
    def offspring_per_generation(self) -> int:
        if self.keep_best_across_population:
            return self.population_size - 1
        return self.population_size
