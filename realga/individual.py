"""Candidate representation: an immutable (x, y) coordinate pair."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

# Upper bound for initial sampling and reset mutation. Offspring are not clamped.
HIGH_RANGE = 100.0


@dataclass(frozen=True)
class Individual:
    x: float
    y: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


def make_individual(x: float, y: float) -> Individual:
    return Individual(x=float(x), y=float(y))


def random_coordinate(rng: np.random.Generator) -> float:
    """Uniform sample in [0, HIGH_RANGE)."""
    return HIGH_RANGE * float(rng.random())
