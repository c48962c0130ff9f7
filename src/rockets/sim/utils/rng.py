from __future__ import annotations

import random
from typing import Optional, Sequence

from pygame.math import Vector2


class DeterministicRng:
    """Single random stream shared by every stochastic step of a run.

    Genome randomisation, mutation, crossover split points and parent
    sampling all draw from here, so one seed reproduces a whole run.
    A ``None`` seed falls back to OS entropy.
    """

    def __init__(self, seed: Optional[int]):
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_float(self) -> float:
        return self._random.random()

    def next_range(self, low: float, high: float) -> float:
        return self._random.uniform(low, high)

    def next_int(self, max_value: int) -> int:
        return self._random.randrange(max_value)

    def next_unit_square(self) -> Vector2:
        return Vector2(self._random.uniform(-1.0, 1.0), self._random.uniform(-1.0, 1.0))

    def next_weighted_index(self, cum_weights: Sequence[float]) -> int:
        return self._random.choices(range(len(cum_weights)), cum_weights=cum_weights)[0]
