from .metrics import GenerationMetrics
from .snapshot import PopulationCounts, RocketView, Snapshot, TargetView, WallRect

__all__ = ["GenerationMetrics", "PopulationCounts", "RocketView", "Snapshot", "TargetView", "WallRect"]
