"""Gradient (Perlin-style) noise over fixed-point positions, in single precision."""

from __future__ import annotations

import math

from orbitrace.fixedpoint import f32
from orbitrace.vector import Vec3

# Gradients stored as raw fixed-point components.
_GRADIENTS: tuple[Vec3, ...] = (
    Vec3(1, 1, 0), Vec3(-1, 1, 0), Vec3(1, -1, 0), Vec3(-1, -1, 0),
    Vec3(1, 0, 1), Vec3(-1, 0, 1), Vec3(1, 0, -1), Vec3(-1, 0, -1),
    Vec3(0, 1, 1), Vec3(0, -1, 1), Vec3(0, 1, -1), Vec3(0, -1, -1),
    Vec3(1, 1, 0), Vec3(-1, 1, 0), Vec3(1, -1, 0), Vec3(-1, -1, 0),
)


def fade(t: float) -> float:
    """Quintic smoothing curve 6t^5 - 15t^4 + 10t^3."""
    t = f32(t)
    a = f32(6 * t)
    a = f32(a - 15)
    a = f32(a * t)
    a = f32(a + 10)
    a = f32(a * t)
    a = f32(a * t)
    return f32(a * t)


def lerp(t: float, a: float, b: float) -> float:
    """Linear interpolation from a (t = 0) to b (t = 1)."""
    return f32(a + f32(t * f32(b - a)))


def gradient(x: int, y: int, z: int) -> Vec3:
    """Gradient vector for an integer lattice corner."""
    h = (x * 16197654 + y * 31337764 + z * 6971234) & 0xFF
    return _GRADIENTS[h & 15]


def _corner(g: Vec3, dx: float, dy: float, dz: float) -> float:
    gx, gy, gz = g.to_float()
    return f32(f32(f32(gx * dx) + f32(gy * dy)) + f32(gz * dz))


def perlin(point: Vec3) -> float:
    """Noise value at a fixed-point position."""
    px, py, pz = point.to_float()
    x0, y0, z0 = math.floor(px), math.floor(py), math.floor(pz)
    x1, y1, z1 = x0 + 1, y0 + 1, z0 + 1

    xf = f32(px - x0)
    yf = f32(py - y0)
    zf = f32(pz - z0)
    xm = f32(xf - 1.0)
    ym = f32(yf - 1.0)
    zm = f32(zf - 1.0)

    u, v, w = fade(xf), fade(yf), fade(zf)

    d000 = _corner(gradient(x0, y0, z0), xf, yf, zf)
    d100 = _corner(gradient(x1, y0, z0), xm, yf, zf)
    d010 = _corner(gradient(x0, y1, z0), xf, ym, zf)
    d110 = _corner(gradient(x1, y1, z0), xm, ym, zf)
    d001 = _corner(gradient(x0, y0, z1), xf, yf, zm)
    d101 = _corner(gradient(x1, y0, z1), xm, yf, zm)
    d011 = _corner(gradient(x0, y1, z1), xf, ym, zm)
    d111 = _corner(gradient(x1, y1, z1), xm, ym, zm)

    x00 = lerp(u, d000, d100)
    x10 = lerp(u, d010, d110)
    x01 = lerp(u, d001, d101)
    x11 = lerp(u, d011, d111)

    yt0 = lerp(v, x00, x10)
    yt1 = lerp(v, x01, x11)
    return lerp(w, yt0, yt1)


def layered_perlin(point: Vec3, layers: int) -> float:
    """Octave-summed noise mapped into [0, 1]; zero layers means one plain sample."""
    if layers < 0:
        raise ValueError("layers must not be negative")
    if layers == 0:
        return f32(f32(perlin(point) + 1.0) * 0.5)

    frequency = 1.0
    amplitude = 1.0
    total = 0.0
    max_val = 0.0
    for _ in range(layers):
        scaled = Vec3(
            int(f32(point.x * frequency)),
            int(f32(point.y * frequency)),
            int(f32(point.z * frequency)),
        )
        total = f32(total + f32(perlin(scaled) * amplitude))
        max_val = f32(max_val + amplitude)
        amplitude = f32(amplitude * 0.5)
        frequency = f32(frequency * 2.0)
    return f32(f32(f32(total / max_val) + 1.0) * 0.5)