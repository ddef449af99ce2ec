"""
Benchmark surfaces of two variables.

Every surface accepts scalars or numpy arrays, so the same function can score a
single candidate or a whole grid of points.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from .individual import Individual

Surface = Callable[[np.ndarray | float, np.ndarray | float], np.ndarray | float]
ObjectiveFunction = Callable[[Individual], float]


def beale(x: np.ndarray | float, y: np.ndarray | float) -> np.ndarray | float:
    """Beale function, minimum 0 at (3, 0.5)."""
    return (
        np.power(1.5 - x + np.multiply(x, y), 2)
        + np.power(2.25 - x + np.multiply(x, np.power(y, 2)), 2)
        + np.power(2.625 - x + np.multiply(x, np.power(y, 3)), 2)
    )


def booth(x: np.ndarray | float, y: np.ndarray | float) -> np.ndarray | float:
    """Booth function, minimum 0 at (1, 3)."""
    a = np.add(x, np.multiply(2.0, y)) - 7.0
    b = np.add(np.multiply(2.0, x), y) - 5.0
    return a * a + b * b


def three_hump_camel(x: np.ndarray | float, y: np.ndarray | float) -> np.ndarray | float:
    """Three-hump camel function, minimum 0 at (0, 0)."""
    return (
        2.0 * np.power(x, 2)
        - 1.05 * np.power(x, 4)
        + np.power(x, 6) / 6.0
        + np.multiply(x, y)
        + np.power(y, 2)
    )


SURFACES: dict[str, Surface] = {
    "beale": beale,
    "booth": booth,
    "three_hump_camel": three_hump_camel,
}


def evaluate(individual: Individual, surface: Surface = beale) -> float:
    return float(surface(individual.x, individual.y))


def make_objective(surface: Surface | str) -> ObjectiveFunction:
    """Bind a surface (or its name in SURFACES) into an Individual -> float callable."""
    if isinstance(surface, str):
        try:
            surface = SURFACES[surface]
        except KeyError:
            raise KeyError(
                f"Unknown surface {surface!r}; expected one of {sorted(SURFACES)}"
            ) from None

    def objective(individual: Individual) -> float:
        return evaluate(individual, surface)

    objective.__name__ = getattr(surface, "__name__", "objective")
    return objective
