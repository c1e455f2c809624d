"""Surface parametrisation, textures and bump mapping."""

from __future__ import annotations

import math

from .scene import BumpMap, Plane, Texture
from .vector import Vec3

# Scale of plane coordinates to texture space.
_PLANE_UV_SCALE = 0.04
# How strongly height differences tilt the normal.
BUMP_STRENGTH = 0.05


def sphere_uv(point: Vec3) -> tuple[float, float]:
    """Spherical (u, v) in [0, 1] of the direction of *point*."""
    unit = point.normalized()
    phi = math.atan2(unit.z, unit.x)
    theta = math.acos(min(max(unit.y, -1.0), 1.0))
    return (phi + math.pi) / (2 * math.pi), theta / math.pi


def plane_uv(point: Vec3, plane: Plane) -> tuple[float, float]:
    """Planar (u, v) of *point*, centred on 0.5 at the plane's reference point."""
    world_up = Vec3(0, 1, 0)
    if abs(plane.normal.dot(world_up)) > 0.99:
        right = Vec3(0, 0, 1).cross(plane.normal)
    else:
        right = world_up.cross(plane.normal)
    if right.length() < 1e-6:
        right = Vec3(1, 0, 0)
    right = right.normalized()
    up = plane.normal.cross(right).normalized()
    relative = point - plane.point
    return (
        0.5 + relative.dot(right) * _PLANE_UV_SCALE,
        0.5 + relative.dot(up) * _PLANE_UV_SCALE,
    )


def checker_color(u: float, v: float, texture: Texture) -> int:
    """Checkerboard colour at (u, v): primary where both cells share parity."""
    u_odd = math.floor(u * texture.scale * 8) % 2 != 0
    v_odd = math.floor(v * texture.scale * 8) % 2 != 0
    return texture.primary if u_odd == v_odd else texture.secondary


def _cell(coordinate: float, size: int) -> int:
    # Truncating division and a remainder taking the dividend's sign.
    return int(math.fmod(int(coordinate * size), size))


def texture_color(texture: Texture, u: float, v: float) -> int:
    """Image texel at (u, v); the primary colour where the lookup falls outside."""
    if not texture.data or texture.width <= 0 or texture.height <= 0:
        return texture.primary
    x = _cell(u, texture.width)
    y = _cell(1.0 - v, texture.height)
    index = y * texture.width + x
    if index < 0 or index >= texture.width * texture.height:
        return texture.primary
    return texture.data[index]


def _bump_height(bump: BumpMap, u: float, v: float) -> float:
    x = _cell(u, bump.width)
    y = _cell(1.0 - v, bump.height)
    if not (0 <= x < bump.width and 0 <= y < bump.height):
        return 0.0
    color = bump.data[y * bump.width + x]
    if color == 0:
        return 0.0
    return ((color & 0xFF) + ((color >> 8) & 0xFF) + ((color >> 16) & 0xFF)) / (3.0 * 255.0)


def _gradient(bump: BumpMap, u: float, v: float) -> tuple[float, float]:
    here = _bump_height(bump, u, v)
    along_u = _bump_height(bump, u + 1.0 / bump.width, v)
    along_v = _bump_height(bump, u, v + 1.0 / bump.height)
    if here == 0.0 or along_u == 0.0 or along_v == 0.0:
        return 0.0, 0.0
    return (
        (along_u - here) * BUMP_STRENGTH * bump.width,
        (along_v - here) * BUMP_STRENGTH * bump.height,
    )


def bump_normal(bump: BumpMap, normal: Vec3, u: float, v: float) -> Vec3:
    """Normal tilted by the slope of the height map at (u, v).

    *normal* comes back unchanged when the map is off, empty, or flat there.
    """
    if not bump.enabled or not bump.data or bump.width <= 0 or bump.height <= 0:
        return normal
    grad_u, grad_v = _gradient(bump, u, v)
    if grad_u == 0.0 and grad_v == 0.0:
        return normal
    up = Vec3(0, 1, 0)
    if abs(normal.dot(up)) > 0.99:
        up = Vec3(1, 0, 0)
    tangent = up.cross(normal).normalized()
    bitangent = normal.cross(tangent).normalized()
    return (normal - tangent * grad_u - bitangent * grad_v).normalized()