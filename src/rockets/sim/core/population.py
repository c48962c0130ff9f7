from __future__ import annotations

import logging
import math
from typing import List, Optional

from ..types.snapshot import PopulationCounts
from ..utils.rng import DeterministicRng
from ..utils.weighted import InvalidWeightsError, WeightedIndex
from .config import SimulationConfig
from .rocket import Rocket, RocketState
from .world import World

logger = logging.getLogger(__name__)

_MAX_WEIGHT = 100.0


class Population:
    """All rockets of the current generation and the gene pool built from them.

    The gene pool is a fitness-proportionate distribution over rocket
    indices. It is rebuilt by every `selection` and consumed by the
    following `reproduction`, which replaces the whole cohort.
    """

    def __init__(self, config: SimulationConfig, rng: DeterministicRng, rockets: List[Rocket]):
        self._config = config
        self._rng = rng
        self._rockets = rockets
        self._gene_pool: Optional[WeightedIndex] = None

    @classmethod
    def initialize(cls, config: SimulationConfig, rng: DeterministicRng) -> "Population":
        rockets = [Rocket.spawn(config, rng=rng) for _ in range(config.num_rockets)]
        return cls(config, rng, rockets)

    @property
    def rockets(self) -> List[Rocket]:
        return self._rockets

    @property
    def gene_pool(self) -> Optional[WeightedIndex]:
        return self._gene_pool

    def __len__(self) -> int:
        return len(self._rockets)

    def update(self, frame_index: int, world: World) -> None:
        for rocket in self._rockets:
            is_wall = world.is_wall_at(rocket.position)
            rocket.update(frame_index, is_wall)

    def normalized_fitness(self) -> List[float]:
        """Fitness of each rocket scaled so the best one maps to 100."""
        fitness = [rocket.fitness() for rocket in self._rockets]
        max_fitness = max(fitness, default=0.0)
        if math.isinf(max_fitness):
            # Rockets sitting on the target share the whole pool.
            return [_MAX_WEIGHT if math.isinf(value) else 0.0 for value in fitness]
        if max_fitness <= 0.0:
            return [0.0 for _ in fitness]
        return [(value / max_fitness) * _MAX_WEIGHT for value in fitness]

    def selection(self) -> None:
        self._gene_pool = None
        weights = self.normalized_fitness()
        # InvalidWeightsError propagates with the pool left empty.
        self._gene_pool = WeightedIndex(weights)

    def reproduction(self) -> None:
        if self._gene_pool is None:
            logger.debug("no gene pool, keeping the current %d rockets", len(self._rockets))
            return

        new_population: List[Rocket] = []
        for _ in range(self._config.num_rockets):
            first = self._rockets[self._gene_pool.sample(self._rng)]
            second = self._rockets[self._gene_pool.sample(self._rng)]
            new_population.append(Rocket.reproduce(first, second, self._rng))
        self._rockets = new_population

    def counts(self) -> PopulationCounts:
        alive = crashed = completed = 0
        for rocket in self._rockets:
            if rocket.state is RocketState.CRASHED:
                crashed += 1
            elif rocket.state is RocketState.COMPLETED:
                completed += 1
            else:
                alive += 1
        return PopulationCounts(alive=alive, crashed=crashed, completed=completed)


__all__ = ["InvalidWeightsError", "Population"]
