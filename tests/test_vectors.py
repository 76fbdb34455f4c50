import math

import numpy as np
import pytest

from xsect import Point, Vector


def test_points_order_lexicographically():
    p1 = Point(10, 3, 3)
    p2 = Point(7, 3, -2)
    assert p1 > p2
    assert p1.y == p2.y
    assert sorted([p1, p2, Point(7, 3, -5)]) == [Point(7, 3, -5), p2, p1]


def test_vector_construction_paths_agree():
    p1 = Point(10, 3, 3)
    p2 = Point(7, 3, -2)
    w1 = Vector(-3, 0, -5)
    assert w1 == Vector.from_point(p2 - p1)
    assert w1 == Vector.from_pair(p1, p2)
    assert w1 == -Vector.from_pair(p2, p1)


def test_dot_product():
    w1 = Vector(3, 4, 0)
    w2 = Vector(-3, 4, 0)
    w3 = Vector(1, 1, 1)
    assert w1.dot(w3) == w3.dot(w1)
    assert w1.dot(w2) == -9 + 16


def test_componentwise_arithmetic():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(0.5, -1.0, 4.0)
    assert a + b == Vector(1.5, 1.0, 7.0)
    assert a - b == Vector(0.5, 3.0, -1.0)
    assert a.div_by(2.0) == Vector(0.5, 1.0, 1.5)
    assert Point(1, 2, 3) + Point(1, 1, 1) == Point(2, 3, 4)
    assert -Point(1, -2, 0) == Point(-1, 2, 0)
    assert Point(3.0, 6.0, 9.0).div_by(3.0) == Point(1.0, 2.0, 3.0)


def test_cross_product_is_right_handed():
    i = Vector(1.0, 0.0, 0.0)
    j = Vector(0.0, 1.0, 0.0)
    k = Vector(0.0, 0.0, 1.0)
    assert i.cross(j) == k
    assert j.cross(k) == i
    assert j.cross(i) == -k


def test_norm_and_unit():
    v = Vector(3.0, 4.0, 12.0)
    assert v.norm() == 13.0
    u = v.unit()
    assert u.norm() == pytest.approx(1.0)
    assert u.z == pytest.approx(12.0 / 13.0)


def test_orthogonality_means_zero_cross_product():
    a = Vector(1.0, 2.0, 3.0)
    assert a.is_orthogonal_to(Vector(2.0, 4.0, 6.0))
    assert a.is_orthogonal_to(-a)
    assert not a.is_orthogonal_to(Vector(0.0, 0.0, 1.0))


def test_orthogonality_is_exact_by_default():
    a = Vector(1.0, 0.0, 0.0)
    nearly = Vector(1.0, 1e-12, 0.0)
    assert not a.is_orthogonal_to(nearly)
    assert a.is_orthogonal_to(nearly, tolerance=1e-9)


def test_perpendicular_uses_dot_product():
    assert Vector(1.0, 0.0, 0.0).is_perpendicular_to(Vector(0.0, 5.0, 0.0))
    assert not Vector(1.0, 1.0, 0.0).is_perpendicular_to(Vector(0.0, 5.0, 0.0))


def test_with_component_returns_new_value():
    p = Point(1.0, 2.0, 3.0)
    assert p.with_component(1, 9.0) == Point(9.0, 2.0, 3.0)
    assert p.with_component(2, 9.0) == Point(1.0, 9.0, 3.0)
    assert p.with_component(3, 9.0) == Point(1.0, 2.0, 9.0)
    assert p == Point(1.0, 2.0, 3.0)


def test_zero_and_array_interop():
    assert Vector.zero() == Vector(0.0, 0.0, 0.0)
    assert Point.zero(0) == Point(0, 0, 0)
    v = Vector(1.0, -2.0, 0.5)
    np.testing.assert_array_equal(v.to_array(), np.array([1.0, -2.0, 0.5]))
    assert Vector.from_array(v.to_array()) == v
    assert Point.from_array([[1.0], [2.0], [3.0]]) == Point(1.0, 2.0, 3.0)


def test_numpy_scalars_flow_through():
    v = Vector(np.float64(3.0), np.float64(4.0), np.float64(0.0))
    assert v.norm() == pytest.approx(5.0)
    f32 = Vector(np.float32(0.0), np.float32(3.0), np.float32(4.0))
    assert f32.norm() == pytest.approx(5.0)


def test_unit_of_zero_vector_is_nan():
    for zero in (Vector(0.0, 0.0, 0.0), Vector(0, 0, 0)):
        assert all(math.isnan(c) for c in zero.unit())
    with np.errstate(all="raise"):
        u = Vector(np.float64(0.0), np.float64(0.0), np.float64(0.0)).unit()
    assert all(np.isnan(c) for c in u)


def test_division_by_zero_gives_signed_infinity():
    p = Point(1.0, -1.0, 0.0).div_by(0.0)
    assert p.x == math.inf and p.y == -math.inf and math.isnan(p.z)


def test_nan_components_are_never_close():
    v = Vector(math.nan, 0.0, 0.0)
    assert not v.is_close(Vector(1.0, 0.0, 0.0), tolerance=1e-9)
    assert not v.is_close(v, tolerance=1e-9)
    assert not v.is_zero(tolerance=1e-9)
