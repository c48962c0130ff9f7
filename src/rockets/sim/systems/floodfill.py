from __future__ import annotations

from collections import deque
from typing import Deque, List, Sequence, Set, Tuple

Cell = Tuple[int, int]

_ORTHOGONAL_OFFSETS: Tuple[Cell, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class FloodFill:
    """Four-way flood fill that turns a wall grid into a hop-distance grid.

    Starting from one cell, every free cell reachable through up/down/
    left/right moves is labelled with its shortest hop count plus one, so
    the start cell holds 1. Walls and unreachable cells keep their
    labels. Rockets can use the result as an obstacle-aware replacement
    for straight-line distance to the target.
    """

    def __init__(self, mat: Sequence[Sequence[int]], wall: int, no_wall: int):
        if not mat or not mat[0]:
            raise ValueError("flood fill needs a non-empty grid")
        self._mat: List[List[int]] = [list(row) for row in mat]
        self._grid_size = len(mat[0])
        self._wall = wall
        self._no_wall = no_wall
        self._queue: Deque[Cell] = deque()
        self._queued: Set[Cell] = set()
        self._visit_order: List[Cell] = []

    @property
    def wall(self) -> int:
        return self._wall

    @property
    def no_wall(self) -> int:
        return self._no_wall

    def visit_order(self) -> List[Cell]:
        return list(self._visit_order)

    def solve(self, start: Cell) -> List[List[int]]:
        self._enqueue(start, 1)
        self._process()
        return [list(row) for row in self._mat]

    def _fillable(self, cell: Cell) -> bool:
        x, y = cell
        if x < 0 or y < 0 or x >= self._grid_size or y >= self._grid_size:
            return False
        return self._mat[x][y] == self._no_wall and cell not in self._queued

    def _enqueue(self, cell: Cell, weight: int) -> None:
        self._queue.append(cell)
        self._queued.add(cell)
        self._mat[cell[0]][cell[1]] = weight

    def _process(self) -> None:
        while self._queue:
            x, y = self._queue.popleft()
            self._queued.discard((x, y))
            self._visit_order.append((x, y))
            weight = self._mat[x][y]
            for dx, dy in _ORTHOGONAL_OFFSETS:
                neighbor = (x + dx, y + dy)
                if self._fillable(neighbor):
                    self._enqueue(neighbor, weight + 1)
