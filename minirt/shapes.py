"""Ray intersection with spheres, planes and cylinders."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import TypeVar

from .scene import Cylinder, Plane, Sphere
from .vector import HitRecord, Ray, Vec3

MISS = -1.0
# Rays this close to parallel with a plane are treated as missing it.
_PARALLEL_LIMIT = 1e-6
# Projections this close to a cylinder end are treated as lying on the cap.
_CAP_TOLERANCE = 1e-6
# A hit this close to the ray origin ends the search for a closer one.
_EPSILON = 1e-6

_Shape = TypeVar("_Shape")


def _first_positive_root(
    a: float, b: float, c: float, accept: Callable[[float], bool]
) -> float:
    """Smaller root of a*t^2 + b*t + c first, then the larger; -1.0 if neither fits."""
    if a == 0.0:
        return MISS
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return MISS
    root = math.sqrt(discriminant)
    for t in ((-b - root) / (2.0 * a), (-b + root) / (2.0 * a)):
        if t > 0.0 and accept(t):
            return t
    return MISS


def _closest(
    ray: Ray, shapes: Iterable[_Shape], distance: Callable[[Ray, _Shape], float]
) -> tuple[_Shape, float] | None:
    best: tuple[_Shape, float] | None = None
    for shape in shapes:
        t = distance(ray, shape)
        if t > 0.0 and (best is None or t < best[1]):
            best = (shape, t)
            if t < _EPSILON:
                break
    return best


def sphere_distance(ray: Ray, sphere: Sphere) -> float:
    """Distance along *ray* to *sphere*, or -1.0 when it is missed."""
    offset = ray.origin - sphere.center
    radius = sphere.diameter / 2.0
    a = ray.direction.dot(ray.direction)
    b = 2.0 * ray.direction.dot(offset)
    c = offset.dot(offset) - radius * radius
    return _first_positive_root(a, b, c, lambda t: True)


def closest_sphere(ray: Ray, spheres: Iterable[Sphere]) -> tuple[Sphere, float] | None:
    """The nearest sphere hit by *ray* and its distance, or None."""
    return _closest(ray, spheres, sphere_distance)


def sphere_hit(ray: Ray, sphere: Sphere, t: float) -> HitRecord:
    """Hit record for *ray* meeting *sphere* at distance *t*."""
    point = ray.at(t)
    return HitRecord(t=t, point=point, normal=(point - sphere.center).normalized())


def plane_distance(ray: Ray, plane: Plane) -> float:
    """Distance along *ray* to *plane* (a disc if it has a radius), or -1.0."""
    denominator = plane.normal.dot(ray.direction)
    if abs(denominator) <= _PARALLEL_LIMIT:
        return MISS
    t = (plane.point - ray.origin).dot(plane.normal) / denominator
    if t < 0:
        return MISS
    if plane.radius > 0:
        offset = ray.at(t) - plane.point
        if offset.dot(offset) > plane.radius * plane.radius:
            return MISS
    return t


def closest_plane(ray: Ray, planes: Iterable[Plane]) -> tuple[Plane, float] | None:
    """The nearest plane hit by *ray* and its distance, or None."""
    return _closest(ray, planes, plane_distance)


def plane_hit(ray: Ray, plane: Plane, t: float) -> HitRecord:
    """Hit record for *ray* meeting *plane*; the normal faces the ray."""
    normal = plane.normal
    if ray.direction.dot(normal) > 0:
        normal = -normal
    return HitRecord(t=t, point=ray.at(t), normal=normal)


def _within_height(ray: Ray, t: float, cylinder: Cylinder) -> bool:
    height = (ray.at(t) - cylinder.center).dot(cylinder.axis.normalized())
    return -cylinder.height / 2 <= height <= cylinder.height / 2


def cylinder_side_distance(ray: Ray, cylinder: Cylinder) -> float:
    """Distance along *ray* to the curved side of *cylinder*, or -1.0."""
    axis = cylinder.axis.normalized()
    offset = ray.origin - cylinder.center
    cross_direction = ray.direction.cross(axis)
    cross_offset = offset.cross(axis)
    radius = cylinder.diameter / 2.0
    a = cross_direction.dot(cross_direction)
    b = 2.0 * cross_direction.dot(cross_offset)
    c = cross_offset.dot(cross_offset) - radius * radius
    return _first_positive_root(a, b, c, lambda t: _within_height(ray, t, cylinder))


def cylinder_caps_distance(ray: Ray, cylinder: Cylinder) -> float:
    """Distance along *ray* to the nearer end cap of *cylinder*, or -1.0."""
    axis = cylinder.axis.normalized()
    radius = cylinder.diameter / 2.0
    half = cylinder.height / 2
    caps = (
        Plane(point=cylinder.center + (-axis) * (-half), normal=-axis, radius=radius),
        Plane(point=cylinder.center + axis * half, normal=axis, radius=radius),
    )
    hits = [t for t in (plane_distance(ray, cap) for cap in caps) if t > 0.0]
    return min(hits) if hits else MISS


def cylinder_distance(ray: Ray, cylinder: Cylinder) -> float:
    """Distance along *ray* to *cylinder* (side or caps), or -1.0."""
    hits = [
        t
        for t in (cylinder_side_distance(ray, cylinder), cylinder_caps_distance(ray, cylinder))
        if t > 0.0
    ]
    return min(hits) if hits else MISS


def closest_cylinder(
    ray: Ray, cylinders: Iterable[Cylinder]
) -> tuple[Cylinder, float] | None:
    """The nearest cylinder hit by *ray* and its distance, or None."""
    return _closest(ray, cylinders, cylinder_distance)


def cylinder_normal(point: Vec3, cylinder: Cylinder, projection: float) -> Vec3:
    """Surface normal at *point*, whose height along the axis is *projection*."""
    axis = cylinder.axis.normalized()
    half = cylinder.height / 2.0
    if abs(projection + half) < _CAP_TOLERANCE:
        return -axis
    if abs(projection - half) < _CAP_TOLERANCE:
        return axis
    axis_point = cylinder.center + axis * projection
    return (point - axis_point).normalized()


def cylinder_hit(ray: Ray, cylinder: Cylinder, t: float) -> HitRecord:
    """Hit record for *ray* meeting *cylinder* at distance *t*."""
    point = ray.at(t)
    projection = (point - cylinder.center).dot(cylinder.axis.normalized())
    return HitRecord(t=t, point=point, normal=cylinder_normal(point, cylinder, projection))