"""Ray intersection with finite cones."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .scene import Cone
from .vector import HitRecord, Ray, Vec3, face_normal

MISS = -1.0
# A hit this close to the ray origin ends the search for a closer one.
_EPSILON = 1e-6


def cone_height(point: Vec3, cone: Cone) -> float:
    """Height of *point* measured along the cone's axis from its base centre."""
    return (point - cone.center).dot(cone.axis.normalized())


def radius_at_height(cone: Cone, height: float) -> float:
    """Radius of the cone's cross-section at *height* along its axis."""
    radius = cone.diameter / 2.0
    return (cone.height - height) * radius / cone.height


def _within_height(ray: Ray, t: float, cone: Cone) -> bool:
    return 0 <= cone_height(ray.at(t), cone) <= cone.height


def _surface_distance(ray: Ray, cone: Cone) -> float:
    axis = cone.axis.normalized()
    offset = ray.origin - cone.center
    radius = cone.diameter / 2.0
    k = 1.0 + (radius * radius) / (cone.height * cone.height)
    along_direction = ray.direction.dot(axis)
    along_offset = offset.dot(axis)
    a = ray.direction.dot(ray.direction) - k * along_direction * along_direction
    b = 2.0 * (ray.direction.dot(offset) - k * along_direction * along_offset)
    c = offset.dot(offset) - k * along_offset * along_offset
    if a == 0.0:
        return MISS
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return MISS
    root = math.sqrt(discriminant)
    for t in ((-b - root) / (2.0 * a), (-b + root) / (2.0 * a)):
        if t > 0.0 and _within_height(ray, t, cone):
            return t
    return MISS


def cone_distance(ray: Ray, cone: Cone) -> float:
    """Distance along *ray* to the surface of *cone*, or -1.0 when it is missed."""
    t = _surface_distance(ray, cone)
    return t if t > 0.0 else MISS


def closest_cone(ray: Ray, cones: Iterable[Cone]) -> tuple[Cone, float] | None:
    """The nearest cone hit by *ray* and its distance, or None."""
    best: tuple[Cone, float] | None = None
    for cone in cones:
        t = cone_distance(ray, cone)
        if t > 0.0 and (best is None or t < best[1]):
            best = (cone, t)
            if t < _EPSILON:
                break
    return best


def cone_hit(ray: Ray, cone: Cone, t: float) -> HitRecord:
    """Hit record for *ray* meeting *cone* at distance *t*; the normal faces the ray."""
    point = ray.at(t)
    axis = cone.axis.normalized()
    height = (point - cone.center).dot(axis)
    axis_point = cone.center + axis * height
    radial = (point - axis_point).normalized()
    expected = axis_point + radial * radius_at_height(cone, cone_height(point, cone))
    outward = (point - expected).normalized()
    return HitRecord(t=t, point=point, normal=face_normal(ray, outward))