from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass(frozen=True)
class WindowConfig:
    screen_dimensions: int = 720

    @property
    def half(self) -> float:
        return self.screen_dimensions * 0.5


@dataclass(frozen=True)
class TargetConfig:
    location: tuple[float, float] = (330.0, 0.0)
    radius: float = 22.0


@dataclass(frozen=True)
class GridConfig:
    map_path: str = "assets/map.txt"
    # Window to grid conversion always divides by this, whatever the map size.
    cell_pixels: float = 24.0


@dataclass(frozen=True)
class RocketConfig:
    lifespan: int = 200
    spawn_location: tuple[float, float] = (-350.0, 0.0)
    size: tuple[float, float] = (5.0, 20.0)


@dataclass(frozen=True)
class MutationConfig:
    # Chance per gene, in parts per thousand.
    probability: int = 10
    variation: float = 0.5


@dataclass(frozen=True)
class PaletteConfig:
    background: str = "darkslategray"
    grid: str = "palevioletred"
    target: str = "gold"
    rocket: str = "white"
    rocket_stroke: str = "dimgray"
    rocket_completed: str = "greenyellow"
    rocket_crashed: str = "lightslategray"


@dataclass(frozen=True)
class SimulationConfig:
    seed: Optional[int] = 42
    num_rockets: int = 750
    window: WindowConfig = field(default_factory=WindowConfig)
    target: TargetConfig = field(default_factory=TargetConfig)
    grid: GridConfig = field(default_factory=GridConfig)
    rocket: RocketConfig = field(default_factory=RocketConfig)
    mutation: MutationConfig = field(default_factory=MutationConfig)
    palette: PaletteConfig = field(default_factory=PaletteConfig)

    def __post_init__(self) -> None:
        if self.num_rockets <= 0:
            raise ValueError(f"num_rockets must be positive, got {self.num_rockets}")
        if self.rocket.lifespan <= 0:
            raise ValueError(f"rocket.lifespan must be positive, got {self.rocket.lifespan}")
        if not 0 <= self.mutation.probability <= 1000:
            raise ValueError(f"mutation.probability must be within 0..1000, got {self.mutation.probability}")
        if self.grid.cell_pixels <= 0:
            raise ValueError(f"grid.cell_pixels must be positive, got {self.grid.cell_pixels}")
        if self.window.screen_dimensions <= 0:
            raise ValueError(f"window.screen_dimensions must be positive, got {self.window.screen_dimensions}")

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


def load_config(raw: dict) -> SimulationConfig:
    def _pair(value: tuple[float, float] | list[float] | None, default: tuple[float, float]) -> tuple[float, float]:
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return (float(value[0]), float(value[1]))
        return default

    window = WindowConfig(**raw.get("window", {}))

    target_raw = raw.get("target", {})
    target = TargetConfig(
        location=_pair(target_raw.get("location"), TargetConfig.location),
        **{k: v for k, v in target_raw.items() if k != "location"},
    )

    grid = GridConfig(**raw.get("grid", {}))

    rocket_raw = raw.get("rocket", {})
    rocket = RocketConfig(
        spawn_location=_pair(rocket_raw.get("spawn_location"), RocketConfig.spawn_location),
        size=_pair(rocket_raw.get("size"), RocketConfig.size),
        **{k: v for k, v in rocket_raw.items() if k not in {"spawn_location", "size"}},
    )

    mutation = MutationConfig(**raw.get("mutation", {}))
    palette = PaletteConfig(**raw.get("palette", {}))
    sim_values = {
        k: v for k, v in raw.items() if k not in {"window", "target", "grid", "rocket", "mutation", "palette"}
    }
    return SimulationConfig(
        window=window,
        target=target,
        grid=grid,
        rocket=rocket,
        mutation=mutation,
        palette=palette,
        **sim_values,
    )
