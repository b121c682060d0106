"""Tests validating walk metrics and path export workflow."""
from __future__ import annotations

import csv
import json
from dataclasses import replace

import numpy as np

from cubewalk import CubeBounds, Face, IntVector3, WalkerState, walk_from_state
from cubewalk.src.generation import (
    WalkSeeds,
    collect_walk_metrics,
    compute_walk_metrics,
    export_path_csv,
    export_walk_metrics,
    generate_configured_walk,
    load_walker_settings,
    path_as_array,
    sample_walk,
    with_change_probability,
)


# //1.- Metrics collection should produce compliant summaries across seeds.
def test_collect_walk_metrics_and_export(tmp_path):
    settings = load_walker_settings()
    seeds = [WalkSeeds(walk_seed=value) for value in range(5, 17)]
    summary = collect_walk_metrics(seeds=seeds, settings=settings)
    assert summary.all_on_surface
    assert summary.all_unit_steps
    assert summary.has_transitions
    for metric in summary.metrics:
        assert metric.steps == settings.walk.steps
        assert 0.0 < metric.surface_coverage <= 1.0
        assert metric.faces_visited

    output_path = tmp_path / "metrics.json"
    export_walk_metrics(summary, filepath=str(output_path))

    with output_path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    assert payload["all_on_surface"] is True
    assert len(payload["metrics"]) == len(seeds)
    assert payload["metrics"][0]["walk_seed"] == 5


# //2.- A scripted straight walk yields exact counts.
def test_compute_walk_metrics_for_known_walk(scripted_random):
    bounds = CubeBounds(0, 10)
    start = WalkerState(position=IntVector3(10, 8, 0), face=Face.POS_X, direction=IntVector3(0, 1, 0))
    result = walk_from_state(start, bounds, 4, 0.0, scripted_random(randoms=[0.5] * 4))
    metrics = compute_walk_metrics(result, seeds=WalkSeeds(walk_seed=1))
    assert [point.as_tuple() for point in result.path] == [(10, 8, 0), (10, 9, 0), (10, 10, 0), (10, 10, 0), (10, 10, 0)]
    assert metrics.stall_count == 2
    assert metrics.transition_count == 0
    assert metrics.direction_changes == 0
    assert metrics.faces_visited == ("+X",)
    assert metrics.unique_points == 3
    assert metrics.max_step_length == 1
    assert metrics.surface_coverage == 3 / bounds.surface_point_count()
    assert metrics.all_on_surface


# //3.- Configured walks honour overrides and seeds deterministically.
def test_generate_configured_walk_overrides():
    settings = with_change_probability(load_walker_settings(), 0.0)
    seeds = WalkSeeds(walk_seed=21)
    first = generate_configured_walk(settings, seeds=seeds, steps=40)
    second = generate_configured_walk(replace(settings, walk=replace(settings.walk, steps=40)), seeds=seeds)
    assert len(first.path) == 41
    assert first == second


# //4.- Paths convert to integer arrays with one row per point.
def test_path_as_array():
    array = path_as_array([IntVector3(1, 2, 3), IntVector3(1, 2, 4)])
    assert array.shape == (2, 3)
    assert np.array_equal(array[1], np.array([1, 2, 4]))
    assert path_as_array([]).shape == (0, 3)


# //5.- CSV export should write one row per state tagged with its outcome.
def test_export_path_csv(tmp_path):
    settings = load_walker_settings()
    result = generate_configured_walk(settings, seeds=WalkSeeds(walk_seed=2), steps=15)
    output_path = tmp_path / "path.csv"
    export_path_csv(sample_walk(result), str(output_path))

    with output_path.open("r", newline="") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == ["index", "x", "y", "z", "face", "outcome"]
    assert len(rows) == 17
    assert rows[1][5] == "start"
    assert rows[1][4] == result.states[0].face.value
    assert tuple(int(value) for value in rows[-1][1:4]) == result.path[-1].as_tuple()
    assert {row[5] for row in rows[2:]} <= {"moved", "transitioned", "stalled"}
