"""Generation utilities for cube surface walks."""
from .config import WalkSeeds, load_walk_seeds
from .settings import CubeSettings, SamplingSettings, WalkSettings, WalkerSettings, load_walker_settings
from .walk_generation import generate_configured_walk, with_change_probability
from .visualization import PathSample, export_path_csv, path_as_array, sample_walk
from .metrics import (
    MetricsSummary,
    WalkMetrics,
    collect_walk_metrics,
    compute_walk_metrics,
    export_walk_metrics,
    summarize_walk_metrics,
)

__all__ = [
    "WalkSeeds",
    "load_walk_seeds",
    "CubeSettings",
    "SamplingSettings",
    "WalkSettings",
    "WalkerSettings",
    "load_walker_settings",
    "generate_configured_walk",
    "with_change_probability",
    "PathSample",
    "export_path_csv",
    "path_as_array",
    "sample_walk",
    "MetricsSummary",
    "WalkMetrics",
    "collect_walk_metrics",
    "compute_walk_metrics",
    "export_walk_metrics",
    "summarize_walk_metrics",
]
