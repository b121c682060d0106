"""High-level walk generation driven by settings and seeds."""
from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ...walk import WalkResult, random_surface_walk
from .config import WalkSeeds
from .settings import WalkerSettings


# //1.- Generate a single walk using the configured cube, length and sampling policy.
def generate_configured_walk(
    settings: WalkerSettings,
    *,
    seeds: WalkSeeds,
    steps: Optional[int] = None,
) -> WalkResult:
    rng = seeds.create_generator()
    return random_surface_walk(
        settings.bounds(),
        settings.walk.steps if steps is None else steps,
        settings.walk.change_probability,
        rng=rng,
        free_axis_policy=settings.sampling.free_axis_policy,
        legacy_z_coupling=settings.sampling.legacy_z_coupling,
    )


# //2.- Produce a copy of the settings with a different direction change probability.
def with_change_probability(settings: WalkerSettings, change_probability: float) -> WalkerSettings:
    if not 0.0 <= change_probability <= 1.0:
        raise ValueError("Change probability must lie in [0, 1]")
    return replace(settings, walk=replace(settings.walk, change_probability=float(change_probability)))
