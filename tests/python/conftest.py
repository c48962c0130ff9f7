import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from rockets.sim.core.config import RocketConfig, SimulationConfig  # noqa: E402
from rockets.sim.core.world import World  # noqa: E402
from rockets.sim.utils.rng import DeterministicRng  # noqa: E402

OPEN_MAP = ["1111", "1111", "1111", "1111"]


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--run-config-tests",
        action="store_true",
        default=False,
        help="run tests that are intended only for configuration changes",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "config_change: marks tests that should only run when configuration files change",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--run-config-tests"):
        return

    skip_marker = pytest.mark.skip(
        reason="Run only when configuration is modified (use --run-config-tests)",
    )

    for item in items:
        if "config_change" in item.keywords:
            item.add_marker(skip_marker)


@pytest.fixture
def small_config() -> SimulationConfig:
    return SimulationConfig(seed=1234, num_rockets=20, rocket=RocketConfig(lifespan=30))


@pytest.fixture
def rng() -> DeterministicRng:
    return DeterministicRng(99)


@pytest.fixture
def open_world(small_config: SimulationConfig) -> World:
    return World.from_lines(OPEN_MAP, small_config)
