"""Face identification and tangent directions for the cube surface."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple

from .bounds import CubeBounds
from .vector import Direction, IntVector3, Point3

AXIS_NAMES = ("X", "Y", "Z")


class Face(Enum):
    """One of the six cube faces, named by the axis held at an extreme."""

    POS_X = "+X"
    NEG_X = "-X"
    POS_Y = "+Y"
    NEG_Y = "-Y"
    POS_Z = "+Z"
    NEG_Z = "-Z"

    @property
    def axis(self) -> int:
        return AXIS_NAMES.index(self.value[1])

    @property
    def at_maximum(self) -> bool:
        return self.value[0] == "+"

    def fixed_value(self, bounds: CubeBounds) -> int:
        return bounds.extreme(self.at_maximum)

    def matches(self, point: Point3, bounds: CubeBounds) -> bool:
        return point.component(self.axis) == self.fixed_value(bounds)


# Classification order. Edge and corner points belong to the first matching
# face, so x-faces outrank y-faces and y-faces outrank z-faces.
FACE_PRIORITY: Tuple[Face, ...] = (
    Face.POS_X,
    Face.NEG_X,
    Face.POS_Y,
    Face.NEG_Y,
    Face.POS_Z,
    Face.NEG_Z,
)


def classify_face(point: Point3, bounds: CubeBounds) -> Optional[Face]:
    """Return the face ``point`` lies on, or ``None`` when it is off the surface.

    Only equality with an extreme is tested. A point far outside the cube
    along a face plane still classifies to that face; range checks on the
    free axes belong to the walk engine.
    """

    for face in FACE_PRIORITY:
        if face.matches(point, bounds):
            return face
    return None


def _tangents_for_axis(normal_axis: int) -> Tuple[Direction, ...]:
    directions = []
    for axis in range(3):
        if axis == normal_axis:
            continue
        directions.append(IntVector3.unit(axis, 1))
        directions.append(IntVector3.unit(axis, -1))
    return tuple(directions)


_TANGENTS_BY_AXIS: Dict[int, Tuple[Direction, ...]] = {
    axis: _tangents_for_axis(axis) for axis in range(3)
}


def tangent_directions(face: Optional[Face]) -> Tuple[Direction, ...]:
    """Return the four unit steps lying in the plane of ``face``.

    The order is fixed (positive before negative, lower axis first) so that
    seeded draws from the tuple are reproducible. ``None`` yields ``()``.
    """

    if face is None:
        return ()
    return _TANGENTS_BY_AXIS[face.axis]
