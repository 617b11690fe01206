import math

import pytest

from asteroidfield.vector_math import Vec2, deg_to_rad, distance, lerp, rad_to_deg


def test_default_vector_is_origin():
    assert Vec2() == Vec2(0, 0)


def test_add_then_subtract_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(3.25, 4.0)
    assert (a + b) - b == a


def test_double_negation_is_identity():
    a = Vec2(7.0, -3.0)
    assert -(-a) == a


def test_vector_plus_its_negation_is_zero():
    a = Vec2(2.0, 9.0)
    assert a + (-a) == Vec2()


def test_scalar_multiplication_matches_addition():
    a = Vec2(1.25, -0.5)
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_multiply_by_zero_gives_origin():
    assert Vec2(5, 6) * 0 == Vec2()


def test_in_place_add_updates_name():
    a = Vec2(1, 1)
    a += Vec2(2, 3)
    assert a == Vec2(1, 1) + Vec2(2, 3)


def test_equality_requires_both_components():
    assert Vec2(1, 2) != Vec2(1, 3)
    assert Vec2(1, 2) != Vec2(0, 2)


def test_deg_to_rad_half_turn_is_pi():
    assert deg_to_rad(180) == pytest.approx(math.pi)


def test_rad_to_deg_pi_is_half_turn():
    assert rad_to_deg(math.pi) == pytest.approx(180)


@pytest.mark.parametrize("deg", [0.0, 45.0, 90.0, 270.0, -30.0])
def test_angle_conversion_round_trip(deg):
    assert rad_to_deg(deg_to_rad(deg)) == pytest.approx(deg)


def test_lerp_endpoints():
    assert lerp(3.0, 11.0, 0.0) == 3.0
    assert lerp(3.0, 11.0, 1.0) == 11.0


def test_lerp_midpoint_is_between():
    value = lerp(-4.0, 4.0, 0.5)
    assert value == pytest.approx(0.0)


def test_distance_is_symmetric_and_zero_to_self():
    a = Vec2(1, 2)
    b = Vec2(-3, 8)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, a) == 0.0


def test_distance_three_four_five():
    assert distance(Vec2(0, 0), Vec2(3, 4)) == pytest.approx(5.0)