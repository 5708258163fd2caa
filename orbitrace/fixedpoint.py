"""Signed 4.12 fixed-point arithmetic with 16-bit storage and 32-bit intermediates."""

from __future__ import annotations

import struct

FRAC_BITS = 12
ONE = 1 << FRAC_BITS
FP_EPS = 1
FP_INF = 0x7FFFFFFF
DEFAULT_BRIGHTNESS_SHIFT = 4

_MAGIC = 0x5F3759DF


def wrap16(v: int) -> int:
    """Wrap an integer into the signed 16-bit range (two's complement)."""
    return ((int(v) + 0x8000) & 0xFFFF) - 0x8000


def wrap32(v: int) -> int:
    """Wrap an integer into the signed 32-bit range (two's complement)."""
    return ((int(v) + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def f32(x: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("<f", struct.pack("<f", x))[0]


def _f32_bits(x: float) -> int:
    return struct.unpack("<I", struct.pack("<f", x))[0]


def _f32_from_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits & 0xFFFFFFFF))[0]


def to_fixed(x: float) -> int:
    """Convert a real number to 4.12 fixed point, rounding half away from zero."""
    bias = 0.5 if x >= 0 else -0.5
    return wrap16(int(x * ONE + bias))


def to_float(v: int) -> float:
    """Convert a 4.12 fixed-point value back to a real number."""
    return v / ONE


def _trunc_div(n: int, d: int) -> int:
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d >= 0) else -q


def mul(a: int, b: int) -> int:
    """Multiply two fixed-point values, keeping a 32-bit result."""
    return wrap32((a * b) >> FRAC_BITS)


def div(a: int, b: int) -> int:
    """Divide two fixed-point values; division by zero yields zero."""
    if b == 0:
        return 0
    return wrap32(_trunc_div(a << FRAC_BITS, b))


def inv_sqrt(x: int) -> int:
    """Approximate 1/sqrt(x) with one Newton step in single precision."""
    if x <= 0:
        return 0
    x_f = f32(f32(float(x)) / ONE)
    y = _f32_from_bits(_MAGIC - (_f32_bits(x_f) >> 1))
    t = f32(0.5 * x_f)
    t = f32(t * y)
    t = f32(t * y)
    t = f32(1.5 - t)
    y = f32(y * t)
    return wrap32(int(f32(y * ONE)))


def sqrt(n: int) -> int:
    """Approximate the square root of a fixed-point value."""
    if n <= 0:
        return 0
    return mul(n, inv_sqrt(n))


def to_byte(v: int, brightness_shift: int = DEFAULT_BRIGHTNESS_SHIFT) -> int:
    """Map a fixed-point intensity to 0..255 after a brightness boost."""
    disp = wrap32(wrap16(v) << brightness_shift)
    val = (disp * 255) >> FRAC_BITS
    return max(0, min(255, val))