"""Tests for the integer vector and cube bounds primitives."""
from __future__ import annotations

import pytest

from cubewalk import CubeBounds, IntVector3


# //1.- Vector arithmetic should stay on the integer lattice.
def test_int_vector_arithmetic():
    a = IntVector3(1, 2, 3)
    b = IntVector3(0, -1, 0)
    assert a + b == IntVector3(1, 1, 3)
    assert a - b == IntVector3(1, 3, 3)
    assert -b == IntVector3(0, 1, 0)
    assert a.component(2) == 3
    assert a.as_tuple() == (1, 2, 3)
    assert a.manhattan_length() == 6


# //2.- Unit steps have exactly one nonzero component of magnitude one.
def test_unit_vectors():
    assert IntVector3.unit(1, -1) == IntVector3(0, -1, 0)
    assert IntVector3.unit(2).is_unit_step()
    assert not IntVector3(1, 1, 0).is_unit_step()
    assert not IntVector3(0, 0, 0).is_unit_step()
    with pytest.raises(ValueError):
        IntVector3.unit(3)
    with pytest.raises(ValueError):
        IntVector3.unit(0, 2)


# //3.- Bounds accept integral floats and reject degenerate or fractional extents.
def test_cube_bounds_validation():
    bounds = CubeBounds(0.0, 10.0)
    assert bounds.minimum == 0 and isinstance(bounds.minimum, int)
    assert bounds.maximum == 10 and isinstance(bounds.maximum, int)
    assert bounds.span == 10
    with pytest.raises(ValueError):
        CubeBounds(5, 5)
    with pytest.raises(ValueError):
        CubeBounds(10, 0)
    with pytest.raises(ValueError):
        CubeBounds(0, 10.5)
    with pytest.raises(ValueError):
        CubeBounds("0", 10)


# //4.- Containment and surface counts should reflect the lattice cube.
def test_cube_bounds_contains_and_surface_count():
    bounds = CubeBounds(0, 10)
    assert bounds.contains(IntVector3(10, 0, 5))
    assert not bounds.contains(IntVector3(10, 11, 5))
    assert bounds.surface_point_count() == 11**3 - 9**3
    assert CubeBounds(0, 1).surface_point_count() == 8
