import pytest

from orbitrace.fixedpoint import (
    FP_INF,
    ONE,
    div,
    inv_sqrt,
    mul,
    sqrt,
    to_byte,
    to_fixed,
    to_float,
    wrap16,
    wrap32,
)


def test_one_is_4096():
    assert to_fixed(1.0) == ONE == 4096


@pytest.mark.parametrize("x", [0.0, 0.1, 0.7, -0.4, 1.2, -3.75, 7.5])
def test_round_trip_within_one_ulp(x):
    assert abs(to_float(to_fixed(x)) - x) <= 1 / ONE


@pytest.mark.parametrize("x", [0.3, 0.8, 1.6, 2.5])
def test_to_fixed_is_symmetric(x):
    assert to_fixed(-x) == -to_fixed(x)


def test_wrap16_boundaries():
    assert wrap16(32767) == 32767
    assert wrap16(32768) == -32768
    assert wrap16(-32769) == 32767


def test_wrap32_boundaries():
    assert wrap32(2**31 - 1) == 2**31 - 1
    assert wrap32(2**31) == -(2**31)
    assert wrap32(FP_INF) == FP_INF


def test_to_fixed_wraps_out_of_range():
    assert to_fixed(8.0) == wrap16(8 * ONE)


@pytest.mark.parametrize("a", [0, 1, 123, -777, 20000, -32768])
def test_mul_by_one_is_identity(a):
    assert mul(a, ONE) == a
    assert mul(ONE, a) == a


def test_mul_commutes():
    assert mul(1234, -5678) == mul(-5678, 1234)


@pytest.mark.parametrize("a", [0, 5, -900, 16000])
def test_div_by_one_is_identity(a):
    assert div(a, ONE) == a


def test_div_by_zero_yields_zero():
    assert div(ONE, 0) == 0
    assert div(-5, 0) == 0


def test_div_truncates_toward_zero():
    assert div(-1, 3) == -div(1, 3)
    assert div(7, -2) == -div(7, 2)


def test_div_inverts_mul():
    assert div(mul(3 * ONE, 2 * ONE), 2 * ONE) == 3 * ONE


def test_inv_sqrt_of_one_is_close_to_one():
    assert abs(inv_sqrt(ONE) - ONE) < 16


def test_inv_sqrt_of_four_is_close_to_half():
    assert abs(inv_sqrt(4 * ONE) - ONE // 2) < 8


@pytest.mark.parametrize("x", [0, -1, -ONE])
def test_inv_sqrt_non_positive(x):
    assert inv_sqrt(x) == 0


@pytest.mark.parametrize("k", [1, 4, 9])
def test_sqrt_of_square(k):
    assert abs(sqrt(k * ONE) - int(k**0.5) * ONE) < 16 * k


def test_sqrt_non_positive():
    assert sqrt(0) == 0
    assert sqrt(-100) == 0


def test_to_byte_limits():
    assert to_byte(0) == 0
    assert to_byte(-5) == 0
    assert to_byte(ONE) == 255
    assert to_byte(ONE >> 4) == 255


def test_to_byte_is_monotonic():
    values = [to_byte(v) for v in range(0, ONE >> 4, 7)]
    assert values == sorted(values)
    assert all(0 <= b <= 255 for b in values)


def test_to_byte_without_boost_saturates_at_one():
    assert to_byte(ONE, 0) == 255
    assert to_byte(ONE >> 4, 0) < to_byte(ONE >> 4)