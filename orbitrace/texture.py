"""Procedural terrain colouring for planet surfaces."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from orbitrace.fixedpoint import f32, mul, to_fixed
from orbitrace.noise import layered_perlin
from orbitrace.vector import Vec3

COLOR_LAYERS = 3

# Returned when a latitude falls outside every band (raw, not normalised).
UNBANDED_COLOR = Vec3(255, 255, 255)

_NOISE_WEIGHT = to_fixed(0.1)
_ICE_START = to_fixed(0.9)
_ICE_END = to_fixed(0.8)
_FOREST_START = to_fixed(0.8)
_FOREST_END = to_fixed(0.4)
_DESERT_START = to_fixed(0.4)
_DESERT_END = to_fixed(0.0)


class TerrainBands(Enum):
    """How latitude bands are bounded.

    CLOSED checks both edges of every band; OPEN lets the ice band reach the
    pole and the desert band reach the equator.
    """

    CLOSED = "closed"
    OPEN = "open"


def convert_color(r: int, g: int, b: int) -> Vec3:
    """Convert 8-bit RGB components to a fixed-point colour in [0, 1]."""
    return Vec3(to_fixed(r / 255.0), to_fixed(g / 255.0), to_fixed(b / 255.0))


EARTH_PALETTE: tuple[Vec3, Vec3, Vec3] = (
    convert_color(245, 236, 213),
    convert_color(98, 111, 71),
    convert_color(240, 187, 120),
)

VIOLET_PALETTE: tuple[Vec3, Vec3, Vec3] = (
    convert_color(153, 41, 234),
    convert_color(204, 102, 218),
    convert_color(250, 235, 146),
)

SAND_PALETTE: tuple[Vec3, Vec3, Vec3] = (
    convert_color(216, 174, 109),
    convert_color(255, 225, 171),
    convert_color(219, 181, 124),
)


def _noise_fixed(value: float) -> int:
    return to_fixed(f32(value))


def planet_color(
    point: Vec3,
    normal: Vec3,
    base_color: Vec3,
    palette: Sequence[Vec3] | None = None,
    bands: TerrainBands = TerrainBands.CLOSED,
) -> Vec3:
    """Colour of a planet surface point, chosen by latitude and noisy band edges.

    The palette holds the ice, forest and desert colours; without one every
    band uses ``base_color``.
    """
    if palette is None:
        ice, forest, desert = (base_color,) * COLOR_LAYERS
    else:
        if len(palette) != COLOR_LAYERS:
            raise ValueError(f"palette must hold {COLOR_LAYERS} colours")
        ice, forest, desert = palette

    latitude = abs(normal.y)
    offset = mul(_noise_fixed(layered_perlin(point, COLOR_LAYERS)), _NOISE_WEIGHT)

    ice_start = _ICE_START + offset
    ice_end = _ICE_END + offset
    forest_start = _FOREST_START + offset
    forest_end = _FOREST_END + offset
    desert_start = _DESERT_START + offset
    desert_end = _DESERT_END + offset

    if bands is TerrainBands.OPEN:
        if latitude >= ice_end:
            return ice
        if forest_end <= latitude < forest_start:
            return forest
        if latitude < desert_start:
            return desert
        return UNBANDED_COLOR

    if ice_end <= latitude < ice_start:
        return ice
    if forest_end <= latitude < forest_start:
        return forest
    if desert_end <= latitude < desert_start:
        return desert
    return UNBANDED_COLOR