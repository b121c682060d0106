"""Path export helpers for inspecting generated walks."""
from __future__ import annotations

import csv
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from ...vector import Point3
from ...walk import WalkResult


# //1.- Dataclass capturing a single exported path row.
@dataclass
class PathSample:
    index: int
    x: int
    y: int
    z: int
    face: str
    outcome: str


# //2.- Convert a path to an (N, 3) integer array for vectorised checks.
def path_as_array(path: Sequence[Point3]) -> np.ndarray:
    if not path:
        return np.zeros((0, 3), dtype=np.int64)
    return np.array([point.as_tuple() for point in path], dtype=np.int64)


# //3.- Pair every state with the outcome that produced it; the start row is tagged "start".
def sample_walk(result: WalkResult) -> Iterable[PathSample]:
    labels = ["start"] + [outcome.value for outcome in result.outcomes]
    for index, (state, label) in enumerate(zip(result.states, labels)):
        position = state.position
        yield PathSample(
            index=index,
            x=position.x,
            y=position.y,
            z=position.z,
            face=state.face.value,
            outcome=label,
        )


# //4.- Export the sampled path to CSV for plotting or LED mapping tools.
def export_path_csv(
    samples: Iterable[PathSample],
    filepath: str,
) -> None:
    with open(filepath, "w", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(["index", "x", "y", "z", "face", "outcome"])
        for sample in samples:
            writer.writerow([sample.index, sample.x, sample.y, sample.z, sample.face, sample.outcome])
