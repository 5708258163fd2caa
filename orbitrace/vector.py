"""Three-component fixed-point vectors and rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from orbitrace.fixedpoint import (
    FRAC_BITS,
    ONE,
    f32,
    inv_sqrt,
    mul,
    to_fixed,
    wrap16,
    wrap32,
)


@dataclass(frozen=True)
class Vec3:
    """A vector of three signed 16-bit 4.12 fixed-point components."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", wrap16(self.x))
        object.__setattr__(self, "y", wrap16(self.y))
        object.__setattr__(self, "z", wrap16(self.z))

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> int:
        """Fixed-point dot product with a 32-bit result."""
        return wrap32(
            mul(self.x, other.x) + mul(self.y, other.y) + mul(self.z, other.z)
        )

    def mul(self, other: Vec3) -> Vec3:
        """Component-wise fixed-point product."""
        return Vec3(
            mul(self.x, other.x), mul(self.y, other.y), mul(self.z, other.z)
        )

    def scale(self, s: int) -> Vec3:
        """Scale by a fixed-point scalar, first narrowed to 16 bits."""
        s16 = wrap16(s)
        return Vec3(mul(self.x, s16), mul(self.y, s16), mul(self.z, s16))

    def length_squared(self) -> int:
        return self.dot(self)

    def normalized(self) -> Vec3:
        """Approximately unit-length copy using the fast inverse square root."""
        return self.scale(inv_sqrt(self.length_squared()))

    def negated(self) -> Vec3:
        return -self

    def to_float(self) -> tuple[float, float, float]:
        return (self.x / ONE, self.y / ONE, self.z / ONE)

    @classmethod
    def from_float(cls, x: float, y: float, z: float) -> Vec3:
        return cls(to_fixed(x), to_fixed(y), to_fixed(z))


def rotate_y(v: Vec3, angle: float) -> Vec3:
    """Rotate about the Y axis, using only the integer parts of x and z."""
    a = f32(angle)
    cos_a = f32(math.cos(a))
    sin_a = f32(math.sin(a))
    ix = v.x >> FRAC_BITS
    iz = v.z >> FRAC_BITS
    nx = f32(f32(cos_a * ix) + f32(sin_a * iz))
    nz = f32(f32(-sin_a * ix) + f32(cos_a * iz))
    return Vec3(to_fixed(nx), v.y, to_fixed(nz))


def spherical_to_cartesian(radius: float, theta: float, phi: float) -> Vec3:
    """Point on a sphere; phi is measured from the +Y axis."""
    r = f32(radius)
    t = f32(theta)
    p = f32(phi)
    sin_p = f32(math.sin(p))
    x = f32(f32(r * sin_p) * f32(math.cos(t)))
    y = f32(r * f32(math.cos(p)))
    z = f32(f32(r * sin_p) * f32(math.sin(t)))
    return Vec3(to_fixed(x), to_fixed(y), to_fixed(z))