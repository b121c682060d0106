"""Start point sampling on the cube surface."""
from __future__ import annotations

import math
import random

from .bounds import CubeBounds
from .faces import FACE_PRIORITY, Face
from .vector import IntVector3, Point3


def _uniform_coordinate(rng: random.Random, bounds: CubeBounds) -> float:
    # Half-open [minimum, maximum); ``rng.uniform`` may round onto the upper end.
    return bounds.minimum + rng.random() * bounds.span


def sample_surface_start(
    bounds: CubeBounds,
    rng: random.Random,
    *,
    legacy_z_coupling: bool = False,
) -> Point3:
    """Draw a lattice point on the cube surface.

    A face is picked uniformly from the six, its axis is pinned to the
    face's extreme, and the two free axes are drawn uniformly from
    ``[minimum, maximum)`` (lower axis first) before every coordinate is
    floored.

    ``legacy_z_coupling`` reproduces the historical sampler that floored
    the *y* sample into *z*. With it enabled the result can land inside
    the cube, for example whenever a z-face is chosen.
    """

    face: Face = rng.choice(FACE_PRIORITY)
    values = [0.0, 0.0, 0.0]
    for axis in range(3):
        if axis == face.axis:
            values[axis] = float(face.fixed_value(bounds))
        else:
            values[axis] = _uniform_coordinate(rng, bounds)
    x, y, z = (math.floor(value) for value in values)
    if legacy_z_coupling:
        z = math.floor(values[1])
    return IntVector3(x, y, z)
