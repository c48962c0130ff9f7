"""Rocket, the simulation agent.

A rocket is a point mass pushed by one genome force per frame. It flies
until it reaches the target or touches a wall, and after that it never
moves again. See https://natureofcode.com/book/chapter-2-forces/ for the
position/velocity/acceleration model.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from pygame.math import Vector2

from ..types.snapshot import RocketView
from ..utils.math2d import heading_from_velocity
from ..utils.rng import DeterministicRng
from .config import SimulationConfig
from .genome import Genome

DistanceFn = Callable[[Vector2], float]


class RocketState(str, Enum):
    ALIVE = "Alive"
    CRASHED = "Crashed"
    COMPLETED = "Completed"


@dataclass(slots=True)
class Rocket:
    genome: Genome
    config: SimulationConfig = field(repr=False)
    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    acceleration: Vector2 = field(default_factory=Vector2)
    state: RocketState = RocketState.ALIVE

    @classmethod
    def spawn(
        cls,
        config: SimulationConfig,
        genome: Optional[Genome] = None,
        rng: Optional[DeterministicRng] = None,
    ) -> "Rocket":
        if genome is None:
            if rng is None:
                raise ValueError("a random genome needs an rng")
            genome = Genome.new_random(config.rocket.lifespan, rng)
        return cls(genome=genome, config=config, position=Vector2(config.rocket.spawn_location))

    @property
    def is_terminal(self) -> bool:
        return self.state is not RocketState.ALIVE

    @property
    def heading(self) -> float:
        return heading_from_velocity(self.velocity)

    def update(self, frame_index: int, is_colliding: bool) -> None:
        if self.is_terminal:
            return

        if self.target_distance() <= self.config.target.radius:
            self.state = RocketState.COMPLETED
            return

        # Wall or window boundary
        if is_colliding:
            self.state = RocketState.CRASHED
            return

        self.apply_force(self.genome.get(frame_index))

    def apply_force(self, force: Vector2) -> None:
        self.acceleration += force
        self.velocity += self.acceleration
        self.position += self.velocity
        self.acceleration = Vector2()

    def fitness(self, distance_fn: Optional[DistanceFn] = None) -> float:
        """Squared inverse distance to the target.

        Straight-line distance rates rockets stuck behind a wall near the
        target too highly. `distance_fn` lets a caller plug in an
        obstacle-aware distance, such as one read from a flood fill grid.
        A distance of zero yields ``math.inf``.
        """
        distance = self.target_distance() if distance_fn is None else distance_fn(self.position)
        if distance == 0.0:
            return math.inf
        inv_target_dist = 1.0 / distance
        return inv_target_dist * inv_target_dist

    def target_distance(self) -> float:
        return self.position.distance_to(Vector2(self.config.target.location))

    @staticmethod
    def reproduce(first: "Rocket", second: "Rocket", rng: DeterministicRng) -> "Rocket":
        mutation = first.config.mutation
        child_genome = Genome.crossover(first.genome, second.genome, rng).mutate(
            rng, mutation.probability, mutation.variation
        )
        return Rocket.spawn(first.config, genome=child_genome)

    def color(self) -> str:
        palette = self.config.palette
        if self.state is RocketState.CRASHED:
            return palette.rocket_crashed
        if self.state is RocketState.COMPLETED:
            return palette.rocket_completed
        return palette.rocket

    def view(self) -> RocketView:
        width, height = self.config.rocket.size
        return RocketView(
            x=self.position.x,
            y=self.position.y,
            heading=self.heading,
            width=width,
            height=height,
            state=self.state.value,
            color=self.color(),
            stroke_color=self.config.palette.rocket_stroke,
        )
