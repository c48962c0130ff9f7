from .sim.core.config import SimulationConfig
from .sim.core.simulation import Simulation

__all__ = ["Simulation", "SimulationConfig"]
