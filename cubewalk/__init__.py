"""Cube surface walk package.

Generates pseudorandom walks confined to the surface of an axis-aligned
cube: a start point is sampled on a face, and the walker then takes unit
steps in the face plane, crossing onto neighbouring faces at the edges.
Seeded configuration, metrics and path export live under ``src.generation``.
"""

from .vector import IntVector3, Point3, Direction
from .bounds import CubeBounds
from .faces import FACE_PRIORITY, Face, classify_face, tangent_directions
from .sampler import sample_surface_start
from .walk import (
    BoundaryEvent,
    FreeAxisPolicy,
    StepOutcome,
    StepResult,
    SurfaceClassificationError,
    WalkResult,
    WalkerState,
    advance_walker,
    initial_state,
    random_surface_walk,
    walk_from_state,
)

__all__ = [
    "IntVector3",
    "Point3",
    "Direction",
    "CubeBounds",
    "FACE_PRIORITY",
    "Face",
    "classify_face",
    "tangent_directions",
    "sample_surface_start",
    "BoundaryEvent",
    "FreeAxisPolicy",
    "StepOutcome",
    "StepResult",
    "SurfaceClassificationError",
    "WalkResult",
    "WalkerState",
    "advance_walker",
    "initial_state",
    "random_surface_walk",
    "walk_from_state",
]
