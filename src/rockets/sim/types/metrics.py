from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GenerationMetrics:
    generation: int
    population: int
    completed: int
    crashed: int
    alive: int
    best_fitness: float
    mean_fitness: float
