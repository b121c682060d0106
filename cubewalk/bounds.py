"""Cube extents shared by all three axes."""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Union

from .vector import Point3

Scalar = Union[int, float]


def _coerce_grid_value(name: str, value: Scalar) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"Cube {name} must be a real number, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if not float(value).is_integer():
        raise ValueError(f"Cube {name} must lie on the integer grid, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class CubeBounds:
    """Axis-aligned cube ``[minimum, maximum]^3`` on the integer lattice.

    Integral floats such as ``10.0`` are accepted and stored as ``int``.
    Fractional extremes are rejected because a floored lattice point can
    never compare equal to them, which would leave every sample off the
    surface.
    """

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        minimum = _coerce_grid_value("minimum", self.minimum)
        maximum = _coerce_grid_value("maximum", self.maximum)
        if minimum >= maximum:
            raise ValueError(
                f"Cube minimum must be strictly less than maximum, got ({minimum}, {maximum})"
            )
        object.__setattr__(self, "minimum", minimum)
        object.__setattr__(self, "maximum", maximum)

    @property
    def span(self) -> int:
        return self.maximum - self.minimum

    def extreme(self, use_maximum: bool) -> int:
        return self.maximum if use_maximum else self.minimum

    def contains(self, point: Point3) -> bool:
        """Return ``True`` when every coordinate lies in ``[minimum, maximum]``."""

        return all(self.minimum <= value <= self.maximum for value in point.as_tuple())

    def surface_point_count(self) -> int:
        """Number of lattice points on the cube surface."""

        side = self.span + 1
        inner = max(side - 2, 0)
        return side**3 - inner**3
