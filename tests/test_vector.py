import math

import pytest

from aoc2021.vector import Vector, Vector3d

A = Vector3d(1105, -1205, 1229)
B = Vector3d(-92, -2380, -20)


def test_vector3d_add_sub_round_trip():
    assert (A + B) - B == A


def test_vector_add_sub_round_trip():
    p, q = Vector(3, -8), Vector(-2, 11)
    assert (p + q) - q == p


def test_vector3d_length_squared_is_self_dot():
    assert A.length_squared() == A.dot(A)


def test_vector3d_length_matches_length_squared():
    assert A.length() ** 2 == pytest.approx(A.length_squared())


def test_vector_length_matches_length_squared():
    p = Vector(-6, 13)
    assert p.length() ** 2 == pytest.approx(p.length_squared())


def test_cross_is_orthogonal_to_both():
    c = A.cross(B)
    assert c.dot(A) == 0
    assert c.dot(B) == 0


def test_cross_is_anticommutative():
    assert A.cross(B) + B.cross(A) == Vector3d(0, 0, 0)


def test_distance_is_symmetric():
    assert A.distance_to(B) == pytest.approx(B.distance_to(A))
    assert A.distance_to(B) == pytest.approx((A - B).length())


def test_vector_distance_is_symmetric():
    p, q = Vector(1, 2), Vector(-4, 9)
    assert p.distance_to(q) == pytest.approx(q.distance_to(p))


def test_multiply_then_divide_round_trip():
    signs = Vector3d(-1, 1, -1)
    assert A.multiply(signs).divide(signs) == A


def test_divide_with_zero_component_gives_zero():
    result = Vector3d(4, 0, 6).divide(Vector3d(0, 5, 6))
    assert result.x == 0
    assert result.y == 0
    assert result.z == 1


def test_divide_truncates_toward_zero():
    assert Vector3d(-7, 7, 1).divide(Vector3d(2, 2, 1)) == Vector3d(-3, 3, 1)


def test_angle_between_self_is_zero():
    assert A.angle_between(A) == pytest.approx(0.0)


def test_angle_between_orthogonal_is_right_angle():
    c = A.cross(B)
    assert A.angle_between(c) == pytest.approx(math.pi / 2)


def test_angle_degrees_range():
    for p in (Vector(1, 1), Vector(-3, 2), Vector(-5, -5), Vector(2, -7)):
        assert 0 <= p.angle_degrees() < 360


def test_angle_degrees_negative_wraps():
    assert Vector(0, -1).angle_degrees() == 270


def test_angle_radians_opposite_directions_differ_by_pi():
    p = Vector(3, 4)
    opposite = Vector(-3, -4)
    assert abs(p.angle_radians() - opposite.angle_radians()) == pytest.approx(math.pi)


def test_vectors_are_hashable_values():
    assert len({Vector3d(1, 2, 3), Vector3d(1, 2, 3)}) == 1