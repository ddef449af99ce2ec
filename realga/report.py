"""Console reporting for finished runs."""

from __future__ import annotations

import numpy as np

from .engine import GARunResult
from .individual import Individual
from .trials import TrialSummary


def format_individual(individual: Individual, fitness: float) -> str:
    return f"x: {individual.x:f}  y: {individual.y:f}  F(x, y): {fitness:f}"


def summarize_history(history: np.ndarray) -> dict[str, int | float]:
    """First/last/min/max of a best-fitness history. NaN everywhere when empty."""
    history = np.asarray(history, dtype=float)
    if history.size == 0:
        nan = float("nan")
        return {"generations": 0, "first": nan, "last": nan, "min": nan, "max": nan, "change": nan}
    return {
        "generations": int(history.size),
        "first": float(history[0]),
        "last": float(history[-1]),
        "min": float(np.min(history)),
        "max": float(np.max(history)),
        "change": float(history[-1] - history[0]),
    }


def print_run_summary(result: GARunResult) -> None:
    stats = summarize_history(result.fitness_history)
    print("\n=== Genetic Algorithm Results ===")
    print(f"Best: {format_individual(result.best, result.best_fitness)}")
    if result.stopped_early:
        print(f"Stopped early after {result.generations_completed} generations")
    if stats["generations"] == 0:
        print("No generations were bred; best comes from the initial population.")
        return
    print(
        f"Fitness history over {stats['generations']} generations: "
        f"first = {stats['first']:.6f} | last = {stats['last']:.6f} | "
        f"min = {stats['min']:.6f} | max = {stats['max']:.6f} | "
        f"change = {stats['change']:+.6e}"
    )


def print_trial_summary(label: str, summary: TrialSummary) -> None:
    print(
        f"{label}: "
        f"trials = {summary.final_best.size} | "
        f"mean final best = {summary.mean_final_best:.6f} +/- {summary.std_final_best:.6f} | "
        f"overall best = {format_individual(summary.best, summary.best_fitness)}"
    )
