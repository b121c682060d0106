"""Random walk confined to the surface of an axis-aligned cube.

The walker is an immutable :class:`WalkerState`. :func:`advance_walker`
turns one state into the next and reports what happened, and
:func:`random_surface_walk` folds that transition ``steps`` times from a
sampled start. Each iteration:

* with probability ``change_probability`` the heading is redrawn from the
  face's tangent set, never to the exact reverse of the current heading;
* the candidate ``position + direction`` is classified;
* the same face accepts the move, a different face accepts it and keeps
  the heading only when it is still tangent, and an off-surface candidate
  is rejected so the walker repeats its position (a stall).
"""
from __future__ import annotations

import logging
import math
import numbers
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .bounds import CubeBounds
from .faces import Face, classify_face, tangent_directions
from .sampler import sample_surface_start
from .vector import Direction, Point3

LOGGER = logging.getLogger(__name__)


class SurfaceClassificationError(RuntimeError):
    """Raised when the sampled start point does not lie on any face."""


class FreeAxisPolicy(Enum):
    """How the two in-plane axes are treated relative to the cube extent."""

    # Only equality with the face extreme is checked; the walk may drift
    # along a face plane past the cube's edges.
    UNBOUNDED = "unbounded"
    # Candidates outside [minimum, maximum] on any axis count as off-surface.
    CLAMPED = "clamped"

    @classmethod
    def from_name(cls, name: str) -> "FreeAxisPolicy":
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            choices = ", ".join(policy.value for policy in cls)
            raise ValueError(f"Unknown free axis policy {name!r}; expected one of {choices}") from None


class StepOutcome(Enum):
    MOVED = "moved"
    TRANSITIONED = "transitioned"
    STALLED = "stalled"


@dataclass(frozen=True)
class WalkerState:
    position: Point3
    face: Face
    direction: Direction
    step: int = 0


@dataclass(frozen=True)
class BoundaryEvent:
    """A rejected step that would have left the surface."""

    step: int
    position: Point3
    candidate: Point3
    direction: Direction
    face: Face


@dataclass(frozen=True)
class StepResult:
    state: WalkerState
    outcome: StepOutcome
    candidate: Point3
    direction_redrawn: bool


@dataclass(frozen=True)
class WalkResult:
    """Materialized walk: ``steps + 1`` states and ``steps`` outcomes."""

    bounds: CubeBounds
    states: Tuple[WalkerState, ...]
    outcomes: Tuple[StepOutcome, ...]
    boundary_events: Tuple[BoundaryEvent, ...]

    @property
    def path(self) -> Tuple[Point3, ...]:
        return tuple(state.position for state in self.states)

    @property
    def steps(self) -> int:
        return len(self.outcomes)

    @property
    def stall_count(self) -> int:
        return len(self.boundary_events)

    @property
    def transition_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome is StepOutcome.TRANSITIONED)

    @property
    def faces_visited(self) -> Tuple[Face, ...]:
        seen: List[Face] = []
        for state in self.states:
            if state.face not in seen:
                seen.append(state.face)
        return tuple(seen)

    def direction_changes(self) -> int:
        return sum(
            1
            for previous, current in zip(self.states, self.states[1:])
            if previous.direction != current.direction
        )


def _validate_walk_arguments(steps: int, change_probability: float) -> None:
    if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
        raise ValueError(f"Step count must be an integer, got {steps!r}")
    if steps < 0:
        raise ValueError(f"Step count must be non-negative, got {steps}")
    if isinstance(change_probability, bool) or not isinstance(change_probability, numbers.Real):
        raise ValueError(f"Change probability must be a real number, got {change_probability!r}")
    if math.isnan(change_probability) or not 0.0 <= change_probability <= 1.0:
        raise ValueError(f"Change probability must lie in [0, 1], got {change_probability}")


def initial_state(
    bounds: CubeBounds,
    rng: random.Random,
    *,
    legacy_z_coupling: bool = False,
) -> WalkerState:
    """Sample a start point, classify it and pick the first heading."""

    position = sample_surface_start(bounds, rng, legacy_z_coupling=legacy_z_coupling)
    face = classify_face(position, bounds)
    if face is None:
        raise SurfaceClassificationError(
            f"Invalid starting position {position.x},{position.y},{position.z}: not on the cube surface"
        )
    direction = rng.choice(tangent_directions(face))
    return WalkerState(position=position, face=face, direction=direction, step=0)


def _leaves_surface(candidate: Point3, face: Optional[Face], bounds: CubeBounds, policy: FreeAxisPolicy) -> bool:
    if face is None:
        return True
    return policy is FreeAxisPolicy.CLAMPED and not bounds.contains(candidate)


def advance_walker(
    state: WalkerState,
    bounds: CubeBounds,
    change_probability: float,
    rng: random.Random,
    *,
    free_axis_policy: FreeAxisPolicy = FreeAxisPolicy.CLAMPED,
) -> StepResult:
    """Compute the walker state after a single step."""

    direction = state.direction
    redrawn = False
    if rng.random() < change_probability:
        choices = tuple(d for d in tangent_directions(state.face) if d != -direction)
        direction = rng.choice(choices)
        redrawn = True

    candidate = state.position + direction
    candidate_face = classify_face(candidate, bounds)
    next_step = state.step + 1

    if _leaves_surface(candidate, candidate_face, bounds, free_axis_policy):
        stalled = WalkerState(position=state.position, face=state.face, direction=direction, step=next_step)
        return StepResult(state=stalled, outcome=StepOutcome.STALLED, candidate=candidate, direction_redrawn=redrawn)

    if candidate_face is state.face:
        moved = WalkerState(position=candidate, face=state.face, direction=direction, step=next_step)
        return StepResult(state=moved, outcome=StepOutcome.MOVED, candidate=candidate, direction_redrawn=redrawn)

    tangents = tangent_directions(candidate_face)
    if direction not in tangents:
        direction = rng.choice(tangents)
        redrawn = True
    crossed = WalkerState(position=candidate, face=candidate_face, direction=direction, step=next_step)
    return StepResult(state=crossed, outcome=StepOutcome.TRANSITIONED, candidate=candidate, direction_redrawn=redrawn)


def walk_from_state(
    start: WalkerState,
    bounds: CubeBounds,
    steps: int,
    change_probability: float,
    rng: random.Random,
    *,
    free_axis_policy: FreeAxisPolicy = FreeAxisPolicy.CLAMPED,
) -> WalkResult:
    """Fold :func:`advance_walker` ``steps`` times starting at ``start``."""

    _validate_walk_arguments(steps, change_probability)
    states: List[WalkerState] = [start]
    outcomes: List[StepOutcome] = []
    events: List[BoundaryEvent] = []
    state = start
    for _ in range(steps):
        result = advance_walker(state, bounds, change_probability, rng, free_axis_policy=free_axis_policy)
        if result.outcome is StepOutcome.STALLED:
            LOGGER.debug(
                "Step %d from %s towards %s leaves the surface; staying put",
                result.state.step,
                state.position.as_tuple(),
                result.candidate.as_tuple(),
            )
            events.append(
                BoundaryEvent(
                    step=result.state.step,
                    position=state.position,
                    candidate=result.candidate,
                    direction=result.state.direction,
                    face=state.face,
                )
            )
        state = result.state
        states.append(state)
        outcomes.append(result.outcome)
    if events:
        LOGGER.warning("Walk stalled on %d of %d steps at the cube boundary", len(events), steps)
    return WalkResult(
        bounds=bounds,
        states=tuple(states),
        outcomes=tuple(outcomes),
        boundary_events=tuple(events),
    )


def random_surface_walk(
    bounds: CubeBounds,
    steps: int,
    change_probability: float,
    *,
    rng: random.Random,
    free_axis_policy: FreeAxisPolicy = FreeAxisPolicy.CLAMPED,
    legacy_z_coupling: bool = False,
) -> WalkResult:
    """Generate a walk of ``steps`` unit moves on the surface of ``bounds``.

    Raises ``ValueError`` for invalid arguments and
    :class:`SurfaceClassificationError` if the start point is off the
    surface, which is only reachable with ``legacy_z_coupling``.
    """

    _validate_walk_arguments(steps, change_probability)
    start = initial_state(bounds, rng, legacy_z_coupling=legacy_z_coupling)
    return walk_from_state(
        start,
        bounds,
        steps,
        change_probability,
        rng,
        free_axis_policy=free_axis_policy,
    )
