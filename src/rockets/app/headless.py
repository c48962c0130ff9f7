from __future__ import annotations

import argparse
import csv
import dataclasses
import json
import logging
import math
import sys
from pathlib import Path
from typing import Optional

from ..sim.core.config import SimulationConfig
from ..sim.core.simulation import Simulation
from ..sim.types.metrics import GenerationMetrics

logger = logging.getLogger(__name__)

_HEADER = [
    "generation",
    "population",
    "completed",
    "crashed",
    "alive",
    "best_fitness",
    "mean_fitness",
]


def _format_row(metrics: GenerationMetrics) -> list[object]:
    return [
        metrics.generation,
        metrics.population,
        metrics.completed,
        metrics.crashed,
        metrics.alive,
        f"{metrics.best_fitness:.6e}",
        f"{metrics.mean_fitness:.6e}",
    ]


def _summary_stats(values: list[float]) -> dict[str, float]:
    if not values:
        return {"min": 0.0, "max": 0.0, "avg": 0.0}
    return {
        "min": float(min(values)),
        "max": float(max(values)),
        "avg": float(sum(values) / len(values)),
    }


def build_config(
    config_path: Optional[Path] = None,
    seed: Optional[int] = None,
    map_path: Optional[Path] = None,
    num_rockets: Optional[int] = None,
) -> SimulationConfig:
    config = SimulationConfig.from_yaml(config_path) if config_path else SimulationConfig()
    if seed is not None:
        config = dataclasses.replace(config, seed=seed)
    if map_path is not None:
        config = dataclasses.replace(config, grid=dataclasses.replace(config.grid, map_path=str(map_path)))
    if num_rockets is not None:
        config = dataclasses.replace(config, num_rockets=num_rockets)
    return config


def run_headless(
    generations: int,
    config: SimulationConfig,
    log_path: Optional[Path] = None,
    summary_path: Optional[Path] = None,
) -> list[GenerationMetrics]:
    simulation = Simulation.from_config(config)

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_HEADER)

    history: list[GenerationMetrics] = []
    try:
        # A generation is scored on the first frame of the next one.
        while len(history) < generations:
            simulation.update()
            metrics = simulation.last_metrics
            if metrics is None or (history and history[-1].generation == metrics.generation):
                continue
            history.append(metrics)
            if writer:
                writer.writerow(_format_row(metrics))
    finally:
        if csv_file:
            csv_file.close()

    if summary_path:
        finite_best = [m.best_fitness for m in history if math.isfinite(m.best_fitness)]
        first_success = next((m.generation for m in history if m.completed > 0), None)
        summary = {
            "generations": generations,
            "seed": config.seed,
            "num_rockets": config.num_rockets,
            "lifespan": config.rocket.lifespan,
            "map_path": config.grid.map_path,
            "completed": _summary_stats([float(m.completed) for m in history]),
            "crashed": _summary_stats([float(m.crashed) for m in history]),
            "best_fitness": _summary_stats(finite_best),
            "first_generation_with_completion": first_success,
            "final": dataclasses.asdict(history[-1]) if history else None,
        }
        Path(summary_path).write_text(json.dumps(summary, indent=2))

    return history


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Headless genetic rockets simulation")
    parser.add_argument("--generations", type=int, default=50)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML file with simulation settings")
    parser.add_argument("--map", type=Path, default=None, help="Map file overriding grid.map_path")
    parser.add_argument("--rockets", type=int, default=None, help="Population size overriding num_rockets")
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write per-generation metrics")
    parser.add_argument("--summary", type=Path, default=None, help="Optional JSON file to write summary stats")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = build_config(args.config, args.seed, args.map, args.rockets)
    try:
        history = run_headless(args.generations, config, log_path=args.log, summary_path=args.summary)
    except OSError as exc:
        logger.error("cannot start simulation: %s", exc)
        sys.exit(1)

    completed = history[-1].completed if history else 0
    print(f"Ran {len(history)} generations, {completed} rockets reached the target in the last one")


if __name__ == "__main__":
    main()
