from __future__ import annotations

import math
from itertools import accumulate
from typing import Sequence

from .rng import DeterministicRng


class InvalidWeightsError(ValueError):
    """Raised when a list of weights cannot define a sampling distribution."""


class WeightedIndex:
    """Discrete distribution over ``range(len(weights))``.

    The chance of drawing an index is proportional to its weight. Built
    once per generation from normalised fitness values and then sampled
    twice per child.
    """

    def __init__(self, weights: Sequence[float]):
        if not weights:
            raise InvalidWeightsError("no weights given")
        for index, weight in enumerate(weights):
            if not math.isfinite(weight) or weight < 0.0:
                raise InvalidWeightsError(f"weight {index} is invalid: {weight!r}")
        self._cumulative = list(accumulate(float(w) for w in weights))
        self._total = self._cumulative[-1]
        if self._total <= 0.0:
            raise InvalidWeightsError("all weights are zero")

    def __len__(self) -> int:
        return len(self._cumulative)

    @property
    def total(self) -> float:
        return self._total

    def sample(self, rng: DeterministicRng) -> int:
        return rng.next_weighted_index(self._cumulative)
