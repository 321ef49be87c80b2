import math

import pytest

from keystrike.vector import Vector, XorShift32, gcd, vector_between


def test_addition_is_componentwise_and_commutative():
    a = Vector(1, -2)
    b = Vector(7, 5)
    assert a + b == b + a
    assert (a + b).x == a.x + b.x
    assert (a + b).y == a.y + b.y


def test_adding_zero_is_identity():
    v = Vector(9, -4)
    assert v + Vector(0, 0) == v


def test_norm_of_three_four():
    assert Vector(3, 4).norm() == pytest.approx(5.0)


def test_norm_is_non_negative_and_sign_independent():
    v = Vector(-6, 2)
    assert v.norm() == pytest.approx((-v).norm())
    assert v.norm() >= 0


def test_scaled_identity_and_negation():
    v = Vector(13, -8)
    assert v.scaled(1) == v
    assert v.scaled(-1) == -v
    assert v.scaled(0) == Vector(0, 0)


def test_scaled_rounds_halves_away_from_zero():
    assert Vector(3, -3).scaled(0.5) == Vector(2, -2)


def test_scaled_returns_integers():
    result = Vector(7, 11).scaled(0.33)
    assert isinstance(result.x, int) and isinstance(result.y, int)
    assert result == Vector(round(7 * 0.33), round(11 * 0.33))


def test_vector_between_round_trip():
    start = Vector(4, 10)
    end = Vector(-3, 22)
    assert start + vector_between(start, end) == end
    assert vector_between(start, start) == Vector(0, 0)


@pytest.mark.parametrize("a,b", [(12, 18), (17, 5), (100, 75), (7, 7)])
def test_gcd_matches_reference(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_gcd_with_zero_returns_other():
    assert gcd(42, 0) == 42


def test_xorshift_first_value_from_seed_one():
    assert XorShift32(1).next() == 270369


def test_xorshift_stays_within_32_bits():
    rng = XorShift32(0xDEADBEEF)
    values = [rng.next() for _ in range(200)]
    assert all(0 <= v <= 0xFFFFFFFF for v in values)


def test_between_is_in_range():
    rng = XorShift32(12345)
    values = [rng.between(-3, 4) for _ in range(500)]
    assert min(values) >= -3
    assert max(values) <= 4


def test_between_is_deterministic_for_a_seed():
    a = XorShift32(99)
    b = XorShift32(99)
    assert [a.between(0, 100) for _ in range(20)] == [b.between(0, 100) for _ in range(20)]


def test_between_equal_bounds_returns_bound_without_advancing():
    rng = XorShift32(5)
    assert rng.between(8, 8) == 8
    assert rng.state == 5


def test_zero_seed_behaves_like_seed_one():
    a = XorShift32(0)
    b = XorShift32(1)
    assert [a.between(0, 1000) for _ in range(10)] == [b.between(0, 1000) for _ in range(10)]


def test_between_rejects_empty_range():
    with pytest.raises(ValueError):
        XorShift32(1).between(5, 2)