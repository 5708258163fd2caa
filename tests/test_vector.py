import math

import pytest

from orbitrace.fixedpoint import ONE, to_fixed
from orbitrace.vector import Vec3, rotate_y, spherical_to_cartesian


def test_components_wrap_to_16_bits():
    assert Vec3(32767, 0, 0) + Vec3(1, 0, 0) == Vec3(-32768, 0, 0)


def test_add_and_sub_round_trip():
    a = Vec3(100, -200, 300)
    b = Vec3(-7, 11, 4000)
    assert (a + b) - b == a


def test_negated_twice_is_identity():
    v = Vec3(5, -6, 7)
    assert v.negated().negated() == v
    assert v + v.negated() == Vec3(0, 0, 0)


def test_dot_of_axis():
    x = Vec3(ONE, 0, 0)
    assert x.dot(x) == ONE
    assert x.dot(Vec3(0, ONE, 0)) == 0


def test_length_squared_matches_dot():
    v = Vec3(1000, -2000, 500)
    assert v.length_squared() == v.dot(v)


def test_componentwise_mul_by_ones():
    v = Vec3(123, -456, 789)
    assert v.mul(Vec3(ONE, ONE, ONE)) == v


def test_scale_by_one():
    v = Vec3(123, -456, 789)
    assert v.scale(ONE) == v


def test_scale_narrows_scalar():
    v = Vec3(ONE, ONE, ONE)
    assert v.scale(ONE + 65536) == v.scale(ONE)


@pytest.mark.parametrize(
    "v", [Vec3(ONE, ONE, ONE), Vec3(3000, -100, 200), Vec3.from_float(0.1, 1, 0.1)]
)
def test_normalized_has_unit_length(v):
    assert abs(v.normalized().length_squared() - ONE) < 40


def test_normalized_zero_is_zero():
    assert Vec3(0, 0, 0).normalized() == Vec3(0, 0, 0)


def test_float_round_trip():
    v = Vec3.from_float(0.7, 0.75, -0.4)
    assert v == Vec3.from_float(*v.to_float())
    assert v.x == to_fixed(0.7)


def test_iteration_yields_components():
    assert tuple(Vec3(1, 2, 3)) == (1, 2, 3)


def test_rotate_y_zero_angle_keeps_integer_vector():
    v = Vec3.from_float(2, 1, -3)
    assert rotate_y(v, 0.0) == v


def test_rotate_y_quarter_turn():
    v = Vec3.from_float(2, 0.5, 0)
    assert rotate_y(v, math.pi / 2) == Vec3.from_float(0, 0.5, -2)


def test_rotate_y_uses_integer_part_only():
    assert rotate_y(Vec3.from_float(2.5, 0, 0), 0.0) == Vec3.from_float(2, 0, 0)


def test_spherical_pole():
    assert spherical_to_cartesian(1.0, 0.0, 0.0) == Vec3(0, ONE, 0)


def test_spherical_equator():
    assert spherical_to_cartesian(1.0, 0.0, math.pi / 2) == Vec3(ONE, 0, 0)


@pytest.mark.parametrize("theta,phi", [(0.3, 1.1), (2.0, 0.4), (-1.2, 2.5)])
def test_spherical_length_matches_radius(theta, phi):
    v = spherical_to_cartesian(2.0, theta, phi)
    assert abs(v.length_squared() - 4 * ONE) < 8