"""Seed configuration for reproducible cube surface walks."""
from __future__ import annotations

import os
import random
from dataclasses import dataclass
from typing import Dict, Optional

# //1.- Define dataclass to encapsulate the walk seed for reproducibility.
@dataclass(frozen=True)
class WalkSeeds:
    """Seed driving both start sampling and stepping of a walk."""

    walk_seed: int = 0

    # //2.- Provide helper to build seeds from a mapping when available.
    @classmethod
    def from_mapping(cls, payload: Optional[Dict[str, int]] = None) -> "WalkSeeds":
        if not payload:
            return cls()
        return cls(walk_seed=int(payload.get("walk_seed", 0)))

    # //3.- Allow overriding the seed through environment variables for integration tests.
    @classmethod
    def from_environment(cls, prefix: str = "CUBEWALK") -> "WalkSeeds":
        walk = os.getenv(f"{prefix}_WALK_SEED")
        mapping: Dict[str, int] = {}
        if walk is not None:
            mapping["walk_seed"] = int(walk)
        return cls.from_mapping(mapping)

    # //4.- Produce the injectable generator shared by the sampler and the walk engine.
    def create_generator(self) -> random.Random:
        return random.Random(self.walk_seed)


# //5.- Provide canonical seed accessor used across modules.
def load_walk_seeds(
    mapping: Optional[Dict[str, int]] = None,
    *,
    env_prefix: str = "CUBEWALK",
) -> WalkSeeds:
    if mapping is not None:
        return WalkSeeds.from_mapping(mapping)
    return WalkSeeds.from_environment(prefix=env_prefix)
