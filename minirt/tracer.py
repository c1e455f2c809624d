"""Tracing rays through a scene: visibility, shadows, lighting and reflection."""

from __future__ import annotations

from dataclasses import dataclass, field

from .cone import closest_cone, cone_hit
from .lighting import (
    add_rgb,
    ambient_color,
    background_color,
    diffuse_color,
    pack_rgb,
    specular_color,
    unpack_rgb,
)
from .scene import Properties, Scene, TextureKind
from .shapes import (
    closest_cylinder,
    closest_plane,
    closest_sphere,
    cylinder_hit,
    plane_hit,
    sphere_hit,
)
from .surface import bump_normal, checker_color, plane_uv, sphere_uv, texture_color
from .vector import HitRecord, Ray, Vec3, reflect

# Distance secondary rays start off the surface to avoid hitting it again.
_SURFACE_OFFSET = 0.001


@dataclass
class Intersection:
    """The nearest surface a ray met, its look and its colour there."""

    hit: HitRecord
    properties: Properties = field(default_factory=Properties)
    color: int = 0


def _surface_color(properties: Properties, u: float, v: float) -> int:
    texture = properties.texture
    if texture.kind is TextureKind.CHECKER:
        return checker_color(u, v, texture)
    if texture.data:
        return texture_color(texture, u, v)
    return texture.primary


def _textured(hit: HitRecord, properties: Properties, u: float, v: float) -> Intersection:
    color = _surface_color(properties, u, v)
    if properties.bump.enabled:
        hit.normal = bump_normal(properties.bump, hit.normal, u, v)
    return Intersection(hit=hit, properties=properties, color=color)


def _candidates(ray: Ray, scene: Scene):
    found = closest_sphere(ray, scene.spheres)
    if found is not None:
        sphere, t = found
        hit = sphere_hit(ray, sphere, t)
        yield _textured(hit, sphere.properties, *sphere_uv(hit.point))
    found = closest_plane(ray, scene.planes)
    if found is not None:
        plane, t = found
        hit = plane_hit(ray, plane, t)
        yield _textured(hit, plane.properties, *plane_uv(hit.point, plane))
    found = closest_cylinder(ray, scene.cylinders)
    if found is not None:
        cylinder, t = found
        yield Intersection(
            hit=cylinder_hit(ray, cylinder, t),
            properties=cylinder.properties,
            color=cylinder.properties.texture.primary,
        )
    found = closest_cone(ray, scene.cones)
    if found is not None:
        cone, t = found
        yield Intersection(
            hit=cone_hit(ray, cone, t),
            properties=cone.properties,
            color=cone.properties.texture.primary,
        )


def closest_intersection(ray: Ray, scene: Scene) -> Intersection | None:
    """The nearest object hit by *ray*, or None when it hits nothing.

    On equal distances the object checked first (sphere, plane, cylinder,
    cone) wins.
    """
    closest: Intersection | None = None
    for current in _candidates(ray, scene):
        if current.hit.t > 0 and (closest is None or current.hit.t < closest.hit.t):
            closest = current
    return closest


def shadow_ray(point: Vec3, light_position: Vec3, normal: Vec3) -> Ray:
    """Ray from just off the surface at *point* towards *light_position*."""
    return Ray(
        origin=point + normal * _SURFACE_OFFSET,
        direction=(light_position - point).normalized(),
    )


def in_shadow(ray: Ray, light_distance: float, scene: Scene) -> bool:
    """True when an object lies on *ray* nearer than *light_distance*."""
    sphere = closest_sphere(ray, scene.spheres)
    if sphere is not None and sphere[1] < light_distance:
        return True
    plane = closest_plane(ray, scene.planes)
    if plane is not None and _SURFACE_OFFSET < plane[1] < light_distance:
        return True
    cylinder = closest_cylinder(ray, scene.cylinders)
    if cylinder is not None and cylinder[1] < light_distance:
        return True
    cone = closest_cone(ray, scene.cones)
    return cone is not None and cone[1] < light_distance


def reflection_color(info: Intersection, ray: Ray, scene: Scene, depth: int) -> int:
    """Surface colour blended with what the mirrored ray sees.

    With no depth left or a non-reflective material the surface colour is
    returned unchanged.
    """
    reflectivity = info.properties.material.reflectivity
    if depth <= 0 or reflectivity <= 0.0:
        return info.color
    mirrored = Ray(
        origin=info.hit.point + info.hit.normal * _SURFACE_OFFSET,
        direction=reflect(ray.direction.normalized(), info.hit.normal),
    )
    seen = unpack_rgb(ray_color(mirrored, scene, depth))
    surface = unpack_rgb(info.color)
    red, green, blue = (
        int(s * (1 - reflectivity) + r * reflectivity) & 0xFF for s, r in zip(surface, seen)
    )
    return pack_rgb(red, green, blue)


def ray_color(ray: Ray, scene: Scene, depth: int) -> int:
    """Colour seen along *ray*, following up to *depth* reflections."""
    info = closest_intersection(ray, scene)
    if info is None:
        return background_color(ray.direction.normalized())
    material = info.properties.material
    final = unpack_rgb(ambient_color(info.color, scene.ambient))
    for light in scene.lights:
        distance = (light.position - info.hit.point).length()
        towards_light = shadow_ray(info.hit.point, light.position, info.hit.normal)
        if in_shadow(towards_light, distance, scene):
            continue
        lit = unpack_rgb(diffuse_color(info.hit, light, info.color, material))
        if material.specular > 0 and material.shininess > 0:
            highlight = specular_color(info.hit, scene.camera.position, light, material)
            lit = add_rgb(lit, unpack_rgb(highlight))
        final = add_rgb(final, lit)
    if material.reflectivity > 0.0 and depth > 0:
        final = unpack_rgb(reflection_color(info, ray, scene, depth - 1))
    return pack_rgb(*final)