from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from rockets.sim.core.config import MutationConfig, RocketConfig, SimulationConfig, load_config

ROOT = Path(__file__).resolve().parents[2]


def test_defaults_match_reference_setup():
    config = SimulationConfig()

    assert config.num_rockets == 750
    assert config.window.screen_dimensions == 720
    assert config.window.half == 360.0
    assert config.target.location == (330.0, 0.0)
    assert config.target.radius == 22.0
    assert config.grid.cell_pixels == 24.0
    assert config.rocket.lifespan == 200
    assert config.rocket.spawn_location == (-350.0, 0.0)
    assert config.mutation.probability == 10
    assert config.mutation.variation == 0.5


def test_config_is_immutable():
    config = SimulationConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.num_rockets = 3  # type: ignore[misc]


def test_load_config_reads_nested_sections():
    config = load_config(
        {
            "seed": 9,
            "num_rockets": 12,
            "target": {"location": [100, -50], "radius": 5},
            "rocket": {"lifespan": 15, "spawn_location": [0, 0], "size": [2, 8]},
            "mutation": {"probability": 250},
            "grid": {"map_path": "maps/other.txt"},
            "palette": {"rocket": "red"},
        }
    )

    assert config.seed == 9
    assert config.num_rockets == 12
    assert config.target.location == (100.0, -50.0)
    assert config.target.radius == 5
    assert config.rocket.lifespan == 15
    assert config.rocket.spawn_location == (0.0, 0.0)
    assert config.rocket.size == (2.0, 8.0)
    assert config.mutation.probability == 250
    assert config.mutation.variation == 0.5
    assert config.grid.map_path == "maps/other.txt"
    assert config.grid.cell_pixels == 24.0
    assert config.palette.rocket == "red"
    assert config.palette.target == "gold"


def test_from_yaml_round_trips_file(tmp_path):
    path = tmp_path / "sim.yaml"
    path.write_text("num_rockets: 4\nrocket:\n  lifespan: 3\n")

    config = SimulationConfig.from_yaml(path)

    assert config.num_rockets == 4
    assert config.rocket.lifespan == 3
    assert config.target == SimulationConfig().target


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert SimulationConfig.from_yaml(path) == SimulationConfig()


def test_unknown_keys_are_rejected():
    with pytest.raises(TypeError):
        load_config({"rockets_per_wave": 3})


@pytest.mark.parametrize(
    "kwargs",
    [
        {"num_rockets": 0},
        {"rocket": RocketConfig(lifespan=0)},
        {"mutation": MutationConfig(probability=1001)},
        {"mutation": MutationConfig(probability=-1)},
    ],
)
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ValueError):
        SimulationConfig(**kwargs)


@pytest.mark.config_change
def test_shipped_yaml_matches_defaults():
    config = SimulationConfig.from_yaml(ROOT / "config" / "simulation.yaml")

    assert config == SimulationConfig()
