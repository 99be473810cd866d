from __future__ import annotations

import math

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a test optional dependency")
from hypothesis import assume, given, strategies as st  # type: ignore

from vectors import Vector

coord = st.floats(-1e3, 1e3, allow_nan=False, allow_infinity=False)
vecs = st.builds(Vector, coord, coord, coord)
vecs_2d = st.builds(Vector, coord, coord)
angles = st.floats(-2 * math.pi, 2 * math.pi, allow_nan=False)


def _wrap(angle: float) -> float:
    return (angle + math.pi) % (2 * math.pi) - math.pi


@given(v=vecs)
def test_copy_equals_and_is_independent(v):
    c = v.copy()
    assert c.equals(v)
    before = (v.x, v.y, v.z)
    c.add(Vector(1, 1, 1)).mult(-2)
    assert (v.x, v.y, v.z) == before


@given(v=vecs, s=st.floats(1e-3, 1e3))
def test_mult_scales_magnitude(v, s):
    assert math.isclose(v.copy().mult(s).magnitude(), s * v.magnitude(), rel_tol=1e-9, abs_tol=1e-9)


@given(v=vecs)
def test_normalise_gives_unit_length(v):
    assume(v.magnitude() > 1e-3)
    assert math.isclose(v.copy().normalise().magnitude(), 1.0, rel_tol=1e-9)


@given(v=vecs_2d, a=angles)
def test_rotate_adds_to_heading_and_keeps_magnitude(v, a):
    assume(v.magnitude() > 1e-3)
    r = v.copy().rotate(a)
    assert abs(_wrap(r.heading() - (v.heading() + a))) < 1e-6
    assert math.isclose(r.magnitude(), v.magnitude(), rel_tol=1e-9)


@given(a=vecs, b=vecs)
def test_angle_between_is_antisymmetric(a, b):
    assume(a.magnitude() > 1e-3 and b.magnitude() > 1e-3)
    cz = a.cross(b).z
    # Both directions fall back to +1 when the cross product has no z component
    assume(cz != 0)
    assert math.isclose(a.angle_between(b), -b.angle_between(a), rel_tol=1e-9, abs_tol=1e-9)


@given(v=vecs, x=coord)
def test_partial_operand_matches_full_vector(v, x):
    assert v.copy().add({"x": x}) == v.copy().add(Vector(x, 0, 0))
    assert v.copy().sub({"x": x}) == v.copy().sub(Vector(x, 0, 0))
    assert v.dot({"x": x}) == v.dot(Vector(x, 0, 0))


@given(a=vecs, b=vecs)
def test_dist_is_symmetric_and_non_mutating(a, b):
    a0, b0 = a.copy(), b.copy()
    assert math.isclose(a.dist(b), b.dist(a), rel_tol=1e-12)
    assert a == a0 and b == b0
