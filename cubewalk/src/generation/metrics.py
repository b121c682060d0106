"""Metrics export for verifying generated walk statistics across seeds."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from ...bounds import CubeBounds
from ...walk import WalkResult
from .config import WalkSeeds
from .settings import WalkerSettings
from .visualization import path_as_array
from .walk_generation import generate_configured_walk


# //1.- Encapsulate per-seed metrics derived from a generated walk.
@dataclass(frozen=True)
class WalkMetrics:
    seed: WalkSeeds
    steps: int
    stall_count: int
    transition_count: int
    direction_changes: int
    faces_visited: Tuple[str, ...]
    unique_points: int
    surface_coverage: float
    max_step_length: int
    all_on_surface: bool


# //2.- Aggregate statistics for a collection of seeds plus compliance summary.
@dataclass(frozen=True)
class MetricsSummary:
    metrics: Sequence[WalkMetrics]
    all_on_surface: bool
    all_unit_steps: bool
    has_transitions: bool


# //3.- Count lattice points that touch an extreme on at least one axis.
def _surface_mask(points: np.ndarray, bounds: CubeBounds) -> np.ndarray:
    if points.size == 0:
        return np.zeros(0, dtype=bool)
    extreme = (points == bounds.minimum) | (points == bounds.maximum)
    return np.any(extreme, axis=1)


# //4.- Compute metrics for a single walk instance.
def compute_walk_metrics(result: WalkResult, *, seeds: WalkSeeds) -> WalkMetrics:
    bounds = result.bounds
    points = path_as_array(result.path)
    if len(points) > 1:
        step_lengths = np.abs(np.diff(points, axis=0)).sum(axis=1)
        max_step = int(step_lengths.max())
    else:
        max_step = 0
    on_surface = _surface_mask(points, bounds)
    unique = np.unique(points, axis=0)
    inside = np.all((unique >= bounds.minimum) & (unique <= bounds.maximum), axis=1)
    covered = int(np.count_nonzero(_surface_mask(unique, bounds) & inside))
    return WalkMetrics(
        seed=seeds,
        steps=result.steps,
        stall_count=result.stall_count,
        transition_count=result.transition_count,
        direction_changes=result.direction_changes(),
        faces_visited=tuple(face.value for face in result.faces_visited),
        unique_points=int(len(unique)),
        surface_coverage=covered / bounds.surface_point_count(),
        max_step_length=max_step,
        all_on_surface=bool(on_surface.all()),
    )


# //5.- Evaluate the metric collection against the path invariants.
def summarize_walk_metrics(metrics: Sequence[WalkMetrics]) -> MetricsSummary:
    return MetricsSummary(
        metrics=tuple(metrics),
        all_on_surface=all(metric.all_on_surface for metric in metrics),
        all_unit_steps=all(metric.max_step_length <= 1 for metric in metrics),
        has_transitions=any(metric.transition_count > 0 for metric in metrics),
    )


# //6.- Orchestrate walk generation across multiple seeds collecting metrics.
def collect_walk_metrics(
    *,
    seeds: Sequence[WalkSeeds],
    settings: WalkerSettings,
) -> MetricsSummary:
    metrics: List[WalkMetrics] = []
    for seed in seeds:
        result = generate_configured_walk(settings, seeds=seed)
        metrics.append(compute_walk_metrics(result, seeds=seed))
    return summarize_walk_metrics(metrics)


# //7.- Export metrics summary to JSON for CI validation or dashboards.
def export_walk_metrics(
    summary: MetricsSummary,
    *,
    filepath: str,
) -> None:
    payload = {
        "all_on_surface": summary.all_on_surface,
        "all_unit_steps": summary.all_unit_steps,
        "has_transitions": summary.has_transitions,
        "metrics": [
            {
                "walk_seed": metric.seed.walk_seed,
                "steps": metric.steps,
                "stall_count": metric.stall_count,
                "transition_count": metric.transition_count,
                "direction_changes": metric.direction_changes,
                "faces_visited": list(metric.faces_visited),
                "unique_points": metric.unique_points,
                "surface_coverage": metric.surface_coverage,
                "max_step_length": metric.max_step_length,
                "all_on_surface": metric.all_on_surface,
            }
            for metric in summary.metrics
        ],
    }
    with open(filepath, "w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
