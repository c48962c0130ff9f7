"""Simulation controller.

Drives the generational cycle one frame at a time. Each generation lasts
``rocket.lifespan`` frames; at the boundary the finished cohort is
scored and the next one is bred from it.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from ..types.metrics import GenerationMetrics
from ..types.snapshot import Snapshot
from ..utils.rng import DeterministicRng
from ..utils.weighted import InvalidWeightsError
from .config import SimulationConfig
from .population import Population
from .world import World

logger = logging.getLogger(__name__)


class Simulation:
    def __init__(
        self,
        config: SimulationConfig,
        world: World,
        rng: Optional[DeterministicRng] = None,
    ):
        self._config = config
        self._rng = rng if rng is not None else DeterministicRng(config.seed)
        self._world = world
        # Starts at 0 and is bumped once at the start of every generation.
        self.generation_count = 0
        self._frame_idx = 0
        self._population = Population.initialize(config, self._rng)
        self._last_metrics: GenerationMetrics | None = None

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "Simulation":
        return cls(config, World.load(config))

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def frame_idx(self) -> int:
        return self._frame_idx

    @property
    def population(self) -> Population:
        return self._population

    @property
    def world(self) -> World:
        return self._world

    @property
    def last_metrics(self) -> GenerationMetrics | None:
        return self._last_metrics

    def reset(self) -> None:
        self._rng.reset()
        self.generation_count = 0
        self._frame_idx = 0
        self._population = Population.initialize(self._config, self._rng)
        self._last_metrics = None

    def update(self) -> None:
        if self._frame_idx == 0:
            self._end_current_generation()
            self._start_new_generation()

        self._frame_idx = (self._frame_idx + 1) % self._config.rocket.lifespan
        self._population.update(self._frame_idx, self._world)

    def run_generation(self) -> GenerationMetrics | None:
        """Advance one full lifespan.

        A generation is only scored on the first frame of the next one, so
        the returned metrics lag one call behind; the first call returns
        ``None``.
        """
        for _ in range(self._config.rocket.lifespan):
            self.update()
        return self._last_metrics

    def snapshot(self) -> Snapshot:
        return Snapshot(
            generation=self.generation_count,
            frame=self._frame_idx,
            screen_dimensions=self._config.window.screen_dimensions,
            background=self._config.palette.background,
            walls=self._world.wall_rects(),
            target=self._world.target(),
            rockets=[rocket.view() for rocket in self._population.rockets],
            counts=self._population.counts(),
            last_generation=self._last_metrics,
        )

    def _start_new_generation(self) -> None:
        self.generation_count += 1
        self._population.reproduction()

    def _end_current_generation(self) -> None:
        if self.generation_count == 0:
            return

        self._frame_idx = 0
        self._last_metrics = self._measure()
        try:
            self._population.selection()
        except InvalidWeightsError as exc:
            logger.warning(
                "generation %d: selection failed (%s), next generation keeps the current rockets",
                self.generation_count,
                exc,
            )
        logger.info(
            "generation %d finished: %d completed, %d crashed, best fitness %.6g",
            self._last_metrics.generation,
            self._last_metrics.completed,
            self._last_metrics.crashed,
            self._last_metrics.best_fitness,
        )

    def _measure(self) -> GenerationMetrics:
        counts = self._population.counts()
        fitness = [rocket.fitness() for rocket in self._population.rockets]
        finite = [value for value in fitness if math.isfinite(value)]
        return GenerationMetrics(
            generation=self.generation_count,
            population=len(self._population),
            completed=counts.completed,
            crashed=counts.crashed,
            alive=counts.alive,
            best_fitness=max(fitness, default=0.0),
            mean_fitness=sum(finite) / len(finite) if finite else 0.0,
        )
