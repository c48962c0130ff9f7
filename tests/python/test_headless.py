import csv
import json

import pytest

from rockets.app.headless import build_config, main, run_headless


def _read_csv(path):
    with path.open(newline="") as handle:
        return list(csv.reader(handle))


@pytest.fixture
def map_path(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("\n".join(["1111"] * 4) + "\n")
    return path


@pytest.fixture
def config_path(tmp_path, map_path):
    path = tmp_path / "sim.yaml"
    path.write_text(f"seed: 3\nnum_rockets: 12\nrocket:\n  lifespan: 20\ngrid:\n  map_path: {map_path}\n")
    return path


def test_build_config_applies_overrides(config_path, tmp_path):
    config = build_config(config_path, seed=8, map_path=tmp_path / "other.txt", num_rockets=5)

    assert config.seed == 8
    assert config.num_rockets == 5
    assert config.rocket.lifespan == 20
    assert config.grid.map_path == str(tmp_path / "other.txt")


def test_headless_log_has_one_row_per_generation(tmp_path, config_path):
    log_path = tmp_path / "generations.csv"

    history = run_headless(3, build_config(config_path), log_path=log_path)

    rows = _read_csv(log_path)
    assert rows[0] == [
        "generation",
        "population",
        "completed",
        "crashed",
        "alive",
        "best_fitness",
        "mean_fitness",
    ]
    assert [int(row[0]) for row in rows[1:]] == [1, 2, 3]
    assert all(int(row[1]) == 12 for row in rows[1:])
    assert len(history) == 3


def test_headless_runs_are_deterministic(tmp_path, config_path):
    first = tmp_path / "a.csv"
    second = tmp_path / "b.csv"

    run_headless(2, build_config(config_path), log_path=first)
    run_headless(2, build_config(config_path), log_path=second)

    assert first.read_text() == second.read_text()


def test_headless_summary_output(tmp_path, config_path):
    summary_path = tmp_path / "summary.json"

    run_headless(2, build_config(config_path), summary_path=summary_path)

    payload = json.loads(summary_path.read_text())
    assert payload["generations"] == 2
    assert payload["seed"] == 3
    assert payload["num_rockets"] == 12
    assert payload["lifespan"] == 20
    assert payload["final"]["generation"] == 2
    assert set(payload["completed"]) == {"min", "max", "avg"}


def test_main_prints_result(tmp_path, config_path, capsys):
    main(["--generations", "1", "--config", str(config_path), "--log", str(tmp_path / "out.csv")])

    assert "Ran 1 generations" in capsys.readouterr().out
    assert (tmp_path / "out.csv").exists()


def test_main_exits_when_map_is_missing(tmp_path, config_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--generations", "1", "--config", str(config_path), "--map", str(tmp_path / "missing.txt")])

    assert excinfo.value.code == 1
