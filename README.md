# orbitrace

orbitrace holds the building blocks of a small fixed-point path tracer for
a planetary scene: signed 4.12 fixed-point arithmetic, fixed-point vectors,
gradient noise, latitude-banded planet colouring, and ray intersections
with spheres and flat rings.

All positions, directions, distances and colours are plain integers in
4.12 fixed point (`ONE == 4096`), stored with 16-bit wrap-around and
combined with 32-bit intermediates, so results carry the same rounding
and overflow a fixed-point renderer would show.

## Installing

```
pip install .
```

There are no runtime dependencies beyond the Python standard library
(Python 3.10 or later).

## Modules

- `orbitrace.fixedpoint`: the number format. `to_fixed` and `to_float`
  convert to and from real numbers; `wrap16` and `wrap32` apply two's
  complement wrap-around; `f32` rounds a float to single precision; `mul`
  and `div` multiply and divide (division by zero gives `0`); `inv_sqrt`
  and `sqrt` are fast approximations; `to_byte(v, brightness_shift)` maps
  an intensity to `0..255` after a brightness boost (default shift 4).
  `FP_EPS` and `FP_INF` are the smallest step and the "no hit" distance.
- `orbitrace.vector`: the frozen `Vec3` dataclass with `+`, `-`, unary
  `-`, `dot`, component-wise `mul`, `scale`, `length_squared`,
  `normalized`, `negated`, `to_float` and `Vec3.from_float(x, y, z)`;
  plus `rotate_y(v, angle)` and `spherical_to_cartesian(radius, theta, phi)`.
- `orbitrace.noise`: `fade`, `lerp`, `gradient(x, y, z)` for lattice
  corners, `perlin(point)` and `layered_perlin(point, layers)`, which sums
  octaves and maps the result into `[0, 1]` (a negative layer count raises
  `ValueError`).
- `orbitrace.texture`: `convert_color(r, g, b)` turns 8-bit RGB into a
  fixed-point colour, and `planet_color(point, normal, base_color, palette,
  bands)` picks an ice, forest or desert colour by latitude with noisy
  band edges. `TerrainBands.CLOSED` bounds every band on both sides;
  `TerrainBands.OPEN` lets ice reach the pole and desert the equator.
  `EARTH_PALETTE`, `VIOLET_PALETTE` and `SAND_PALETTE` are ready-made
  palettes; `UNBANDED_COLOR` is returned outside every band.
- `orbitrace.geometry`: `Material`, `Ray`, `Sphere` and `Ring`.
  `Sphere.intersect(ray)` and `Ring.intersect(ray)` return the distance
  along the ray, or `FP_INF` on a miss. A ring with an `ellipse_ratio` is
  an elliptical band in the XZ offsets from its centre; without one it is
  a circular band measured by distance from the centre.

## Example

```python
from orbitrace.fixedpoint import FP_INF, to_fixed, to_float
from orbitrace.geometry import Material, Ray, Sphere
from orbitrace.texture import EARTH_PALETTE, planet_color
from orbitrace.vector import Vec3

sphere = Sphere(
    center=Vec3.from_float(0.0, 0.0, -2.0),
    radius=to_fixed(0.5),
    material=Material(color=Vec3.from_float(0.8, 0.6, 0.3)),
)
ray = Ray(Vec3(), Vec3.from_float(0.0, 0.0, -1.0))

t = sphere.intersect(ray)
if t != FP_INF:
    hit = ray.origin + ray.direction.scale(t)
    normal = (hit - sphere.center).normalized()
    color = planet_color(hit, normal, sphere.material.color, EARTH_PALETTE)
    print(to_float(t), color.to_float())
```

## What the package does not do

The package stops at these pieces. It has no scene description, camera,
random sampling, sky, path tracing loop or image output, and no command to
run: it does not render frames or write image files by itself. Putting the
pieces together into a renderer is left to the code that uses them.

## Running the tests

```
pip install ".[test]"
pytest
```