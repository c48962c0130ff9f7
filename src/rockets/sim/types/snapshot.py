from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .metrics import GenerationMetrics


@dataclass(frozen=True, slots=True)
class WallRect:
    # Top-left corner in window coordinates (origin centre, y up).
    x: float
    y: float
    size: float
    color: str


@dataclass(frozen=True, slots=True)
class TargetView:
    x: float
    y: float
    radius: float
    color: str


@dataclass(frozen=True, slots=True)
class RocketView:
    x: float
    y: float
    heading: float
    width: float
    height: float
    state: str
    color: str
    stroke_color: str


@dataclass(frozen=True, slots=True)
class PopulationCounts:
    alive: int
    crashed: int
    completed: int


@dataclass(frozen=True, slots=True)
class Snapshot:
    generation: int
    frame: int
    screen_dimensions: int
    background: str
    walls: List[WallRect]
    target: TargetView
    rockets: List[RocketView]
    counts: PopulationCounts
    last_generation: GenerationMetrics | None
