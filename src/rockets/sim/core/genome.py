"""Genetic encoding of a rocket.

A genome is the flight plan of one rocket: one force vector per frame of
its lifespan. New genomes come from random sampling, single-point
crossover of two parents, or mutation of an existing genome; none of
these touch the genomes they read from.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from pygame.math import Vector2

from ..utils.rng import DeterministicRng


class Genome:
    __slots__ = ("_genes",)

    def __init__(self, genes: Iterable[Vector2]):
        # Copy every vector so no gene storage is shared with the source.
        self._genes: Tuple[Vector2, ...] = tuple(Vector2(g) for g in genes)

    @classmethod
    def new_random(cls, lifespan: int, rng: DeterministicRng) -> "Genome":
        return cls(rng.next_unit_square() for _ in range(lifespan))

    @classmethod
    def new_from(cls, genes: Iterable[Vector2]) -> "Genome":
        """Wrap caller supplied genes; the length is not checked against the lifespan."""
        return cls(genes)

    def get(self, index: int) -> Vector2:
        if index < 0 or index >= len(self._genes):
            raise IndexError(f"gene index {index} out of rocket lifespan bound {len(self._genes)}")
        return Vector2(self._genes[index])

    @staticmethod
    def crossover(first: "Genome", second: "Genome", rng: DeterministicRng) -> "Genome":
        """Child takes genes before a random split point from `first` and the rest from `second`."""
        split_point = rng.next_int(len(first._genes))
        return Genome.new_from(first._genes[:split_point] + second._genes[split_point:])

    def mutate(self, rng: DeterministicRng, probability: int, variation: float) -> "Genome":
        """Nudge each gene with a chance of `probability` per thousand.

        A mutated gene keeps its value and gets a uniform offset in
        ``[-variation, variation]`` added to each component.
        """
        rate = probability * 0.001
        mutated = []
        for gene in self._genes:
            gene = Vector2(gene)
            if rng.next_float() < rate:
                gene.x += rng.next_range(-1.0, 1.0) * variation
                gene.y += rng.next_range(-1.0, 1.0) * variation
            mutated.append(gene)
        return Genome.new_from(mutated)

    def __len__(self) -> int:
        return len(self._genes)

    def __iter__(self) -> Iterator[Vector2]:
        return (Vector2(g) for g in self._genes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Genome):
            return NotImplemented
        return self._genes == other._genes

    def __hash__(self) -> int:
        return hash(tuple((g.x, g.y) for g in self._genes))

    def __repr__(self) -> str:
        return f"Genome(len={len(self._genes)})"
