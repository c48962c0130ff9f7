from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List, Tuple

from pygame.math import Vector2

from ..types.snapshot import TargetView, WallRect
from .config import SimulationConfig

logger = logging.getLogger(__name__)

GridCell = Tuple[int, int]

_OPEN_CELL = "1"


class World:
    """Obstacle grid the rockets fly through.

    Walls are stored as ``(row, col)`` grid cells. Positions are window
    coordinates with the origin at the window centre and y pointing up;
    everything outside the square window counts as a wall.
    """

    def __init__(self, config: SimulationConfig, walls: Iterable[GridCell], grid_size: int):
        self._config = config
        self._walls: FrozenSet[GridCell] = frozenset(walls)
        self._grid_size = grid_size
        self._block_size = config.window.screen_dimensions / grid_size if grid_size > 0 else 0.0

    @classmethod
    def load(cls, config: SimulationConfig) -> "World":
        path = Path(config.grid.map_path)
        # OSError propagates; there is no simulation without a map.
        with path.open() as handle:
            world = cls.from_lines(handle, config)
        logger.info("loaded %dx%d map from %s with %d wall cells", world.grid_size, world.grid_size, path, len(world.walls))
        return world

    @classmethod
    def from_lines(cls, lines: Iterable[str], config: SimulationConfig) -> "World":
        walls: List[GridCell] = []
        grid_size = 0
        for i, line in enumerate(lines):
            line = line.rstrip("\r\n")
            # Side length comes from the first row; later rows are not checked.
            if i == 0:
                grid_size = len(line)
            for j, char in enumerate(line):
                if char == _OPEN_CELL:
                    continue
                walls.append((i, j))
        return cls(config, walls, grid_size)

    @property
    def walls(self) -> FrozenSet[GridCell]:
        return self._walls

    @property
    def grid_size(self) -> int:
        return self._grid_size

    @property
    def block_size(self) -> float:
        return self._block_size

    def is_wall_cell(self, cell: GridCell) -> bool:
        return cell in self._walls

    def is_wall_at(self, position: Vector2) -> bool:
        half = self._config.window.half

        if position.x <= -half or position.x >= half:
            return True
        if position.y <= -half or position.y >= half:
            return True

        x, y = self.window_to_grid(position)
        # window_to_grid yields (col, row) while walls are keyed (row, col).
        return self.is_wall_cell((y, x))

    def window_to_grid(self, position: Vector2) -> GridCell:
        half = self._config.window.half
        cell_pixels = self._config.grid.cell_pixels
        x = position.x + half
        y = position.y - half
        return (int(abs(x / cell_pixels)), int(abs(y / cell_pixels)))

    def wall_rects(self) -> List[WallRect]:
        half = self._config.window.half
        block = self._block_size
        color = self._config.palette.grid
        return [
            WallRect(x=-half + block * j, y=half - block * i, size=block, color=color)
            for i, j in sorted(self._walls)
        ]

    def target(self) -> TargetView:
        target = self._config.target
        return TargetView(
            x=target.location[0],
            y=target.location[1],
            radius=target.radius,
            color=self._config.palette.target,
        )

    def label_grid(self, wall: int, no_wall: int) -> List[List[int]]:
        """Square ``[row][col]`` matrix of sentinel labels, ready for flood filling."""
        return [
            [wall if (i, j) in self._walls else no_wall for j in range(self._grid_size)]
            for i in range(self._grid_size)
        ]
