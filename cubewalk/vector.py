"""Integer 3D vector used for lattice points and unit steps.

Walk positions live on the integer grid once the start point has been
floored, so every arithmetic operation here stays in ``int``. The same
type doubles as a direction: a direction is simply a vector with a
single nonzero component of magnitude one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class IntVector3:
    """Immutable integer triple with the handful of helpers the walk needs."""

    x: int
    y: int
    z: int

    def __add__(self, other: "IntVector3") -> "IntVector3":
        return IntVector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "IntVector3") -> "IntVector3":
        return IntVector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "IntVector3":
        return IntVector3(-self.x, -self.y, -self.z)

    def component(self, axis: int) -> int:
        return (self.x, self.y, self.z)[axis]

    def manhattan_length(self) -> int:
        return abs(self.x) + abs(self.y) + abs(self.z)

    def is_unit_step(self) -> bool:
        """Return ``True`` when exactly one component is ``±1``."""

        return self.manhattan_length() == 1

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    @staticmethod
    def unit(axis: int, sign: int = 1) -> "IntVector3":
        if axis not in (0, 1, 2):
            raise ValueError(f"Axis must be 0, 1 or 2, got {axis!r}")
        if sign not in (-1, 1):
            raise ValueError(f"Sign must be -1 or 1, got {sign!r}")
        values = [0, 0, 0]
        values[axis] = sign
        return IntVector3(*values)


# Points and directions share a representation; the aliases keep signatures readable.
Point3 = IntVector3
Direction = IntVector3
