"""Scene primitives: materials, rays, spheres and flat rings."""

from __future__ import annotations

from dataclasses import dataclass, field

from orbitrace.fixedpoint import (
    FP_EPS,
    FP_INF,
    ONE,
    div,
    mul,
    sqrt,
    to_fixed,
    wrap32,
)
from orbitrace.vector import Vec3

# Parallel-ray cut-off for circular rings; it rounds to zero in 4.12.
_CIRCULAR_PARALLEL_EPS = to_fixed(0.0001)


@dataclass
class Material:
    """Surface colour and whether the surface emits light."""

    color: Vec3 = field(default_factory=Vec3)
    is_light: bool = False


@dataclass(frozen=True)
class Ray:
    """A ray with a fixed-point origin and direction."""

    origin: Vec3
    direction: Vec3


@dataclass
class Sphere:
    """A sphere with a fixed-point centre and radius."""

    center: Vec3
    radius: int
    material: Material = field(default_factory=Material)

    def intersect(self, ray: Ray) -> int:
        """Nearest distance along the ray beyond FP_EPS, or FP_INF on a miss."""
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = wrap32(2 * oc.dot(ray.direction))
        c = wrap32(oc.dot(oc) - mul(self.radius, self.radius))
        discriminant = wrap32(mul(b, b) - wrap32(4 * mul(a, c)))
        if discriminant < 0:
            return FP_INF

        sqrt_d = sqrt(discriminant)
        inv_2a = div(ONE, wrap32(2 * a))

        near = mul(wrap32(-b - sqrt_d), inv_2a)
        if near > FP_EPS:
            return near
        far = mul(wrap32(-b + sqrt_d), inv_2a)
        if far > FP_EPS:
            return far
        return FP_INF


@dataclass
class Ring:
    """A flat annulus around a centre point.

    With an ``ellipse_ratio`` the ring is an elliptical band measured in the
    XZ offsets from its centre; without one it is a circular band measured by
    full distance from the centre.
    """

    center: Vec3
    normal: Vec3
    inner_radius: int
    outer_radius: int
    material: Material = field(default_factory=Material)
    ellipse_ratio: int | None = None

    def intersect(self, ray: Ray) -> int:
        """Distance along the ray to the ring, or FP_INF on a miss."""
        if self.ellipse_ratio is None:
            return self._intersect_circular(ray)
        return self._intersect_elliptical(ray, self.ellipse_ratio)

    def _plane_distance(self, ray: Ray, denom: int) -> int:
        return div(self.normal.dot(self.center - ray.origin), denom)

    def _intersect_elliptical(self, ray: Ray, ratio: int) -> int:
        denom = self.normal.dot(ray.direction)
        if -FP_EPS < denom < FP_EPS:
            return FP_INF

        t = self._plane_distance(ray, denom)
        if t <= FP_EPS:
            return FP_INF

        hit_point = ray.origin + ray.direction.scale(t)
        d = hit_point - self.center
        xx = mul(d.x, d.x)
        zz = mul(d.z, d.z)

        def ellipse(semi_major: int) -> int:
            semi_minor = mul(semi_major, ratio)
            x_term = div(xx, mul(semi_major, semi_major))
            z_term = div(zz, mul(semi_minor, semi_minor))
            return wrap32(x_term + z_term)

        if ellipse(self.outer_radius) > ONE or ellipse(self.inner_radius) < ONE:
            return FP_INF
        return t

    def _intersect_circular(self, ray: Ray) -> int:
        denom = self.normal.dot(ray.direction)
        if abs(denom) < _CIRCULAR_PARALLEL_EPS:
            return FP_INF

        t = self._plane_distance(ray, denom)
        if t < 0:
            return FP_INF

        p = ray.origin + ray.direction.scale(t)
        rel = p - self.center
        dist2 = rel.dot(rel)
        if dist2 < mul(self.inner_radius, self.inner_radius) or dist2 > mul(
            self.outer_radius, self.outer_radius
        ):
            return FP_INF
        return t