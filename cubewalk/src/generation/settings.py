"""Structured loader for cube walk settings."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass

from ...bounds import CubeBounds
from ...walk import FreeAxisPolicy


# //1.- Capture the cube extent shared by all three axes.
@dataclass(frozen=True)
class CubeSettings:
    minimum: int
    maximum: int


# //2.- Record walk length and direction change probability.
@dataclass(frozen=True)
class WalkSettings:
    steps: int
    change_probability: float


# //3.- Describe how start points are sampled and how free axes are bounded.
@dataclass(frozen=True)
class SamplingSettings:
    free_axis_policy: FreeAxisPolicy
    legacy_z_coupling: bool


# //4.- Aggregate complete walker settings for downstream modules.
@dataclass(frozen=True)
class WalkerSettings:
    cube: CubeSettings
    walk: WalkSettings
    sampling: SamplingSettings

    def bounds(self) -> CubeBounds:
        return CubeBounds(minimum=self.cube.minimum, maximum=self.cube.maximum)


# //5.- Resolve the bundled configuration directory lazily.
def _default_config_directory() -> str:
    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
    return os.path.join(base_dir, "config")


# //6.- Load a single JSON configuration file and coerce to dictionary.
def _read_json_config(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


# //7.- Construct cube settings, validating them through CubeBounds.
def _load_cube_settings(config_dir: str) -> CubeSettings:
    payload = _read_json_config(os.path.join(config_dir, "cube.json"))
    bounds = CubeBounds(minimum=payload["min"], maximum=payload["max"])
    return CubeSettings(minimum=bounds.minimum, maximum=bounds.maximum)


# //8.- Build walk settings rejecting negative lengths and out-of-range probabilities.
def _load_walk_settings(config_dir: str) -> WalkSettings:
    payload = _read_json_config(os.path.join(config_dir, "walk.json"))
    steps = payload["steps"]
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise ValueError(f"Walk steps must be an integer, got {steps!r}")
    if steps < 0:
        raise ValueError("Walk steps must be non-negative")
    change_probability = float(payload.get("change_probability", 0.0))
    if not 0.0 <= change_probability <= 1.0:
        raise ValueError("Walk change_probability must lie in [0, 1]")
    return WalkSettings(steps=steps, change_probability=change_probability)


# //9.- Interpret sampling options, defaulting to the corrected sampler and clamped axes.
def _load_sampling_settings(config_dir: str) -> SamplingSettings:
    path = os.path.join(config_dir, "sampling.json")
    payload = _read_json_config(path) if os.path.exists(path) else {}
    policy = FreeAxisPolicy.from_name(payload.get("free_axis_policy", FreeAxisPolicy.CLAMPED.value))
    coupling = payload.get("legacy_z_coupling", False)
    if not isinstance(coupling, bool):
        raise ValueError("Sampling legacy_z_coupling must be a boolean")
    return SamplingSettings(free_axis_policy=policy, legacy_z_coupling=coupling)


# //10.- Public helper assembling full walker settings bundle.
def load_walker_settings(config_dir: str | None = None) -> WalkerSettings:
    directory = config_dir or _default_config_directory()
    cube = _load_cube_settings(directory)
    walk = _load_walk_settings(directory)
    sampling = _load_sampling_settings(directory)
    return WalkerSettings(cube=cube, walk=walk, sampling=sampling)
