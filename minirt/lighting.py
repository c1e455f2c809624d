"""Colour arithmetic and the ambient, diffuse and specular light terms."""

from __future__ import annotations

from .scene import Ambient, Light, Material
from .vector import HitRecord, Vec3, reflect


def unpack_rgb(color: int) -> tuple[int, int, int]:
    """Split a packed 0xRRGGBB value into its channels."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def pack_rgb(red: int, green: int, blue: int) -> int:
    """Pack three 0..255 channels into 0xRRGGBB."""
    return ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def add_rgb(
    first: tuple[int, int, int], second: tuple[int, int, int]
) -> tuple[int, int, int]:
    """Channel-wise sum, saturating at 255."""
    red, green, blue = (min(a + b, 255) for a, b in zip(first, second))
    return red, green, blue


def _byte(value: float) -> int:
    return int(min(max(value, 0.0), 255.0))


def _scaled(color: int, factor: float, tint: int) -> int:
    channels = zip(unpack_rgb(color), unpack_rgb(tint))
    red, green, blue = (_byte(c * factor * (t / 255.0)) for c, t in channels)
    return pack_rgb(red, green, blue)


def ambient_color(color: int, ambient: Ambient) -> int:
    """Object colour lit only by the ambient light."""
    return _scaled(color, ambient.ratio, ambient.color)


def diffuse_color(hit: HitRecord, light: Light, color: int, material: Material) -> int:
    """Lambertian contribution of *light* at *hit*."""
    light_dir = (light.position - hit.point).normalized()
    diffuse = max(hit.normal.dot(light_dir), 0.0)
    intensity = light.ratio * diffuse
    if material.diffuse > 0:
        intensity *= material.diffuse
    return _scaled(color, intensity, light.color)


def specular_color(
    hit: HitRecord, camera_position: Vec3, light: Light, material: Material
) -> int:
    """Phong highlight of *light* at *hit* as seen from *camera_position*."""
    light_dir = (light.position - hit.point).normalized()
    view_dir = (camera_position - hit.point).normalized()
    reflected = reflect(-light_dir, hit.normal)
    factor = min(max(view_dir.dot(reflected), 0.0) ** material.shininess, 1.0)
    intensity = min(light.ratio * material.specular * factor, 1.0)
    red, green, blue = (_byte(intensity * c) for c in unpack_rgb(light.color))
    return pack_rgb(red, green, blue)


def background_color(direction: Vec3) -> int:
    """Sky gradient by the height of a unit *direction*."""
    t = (direction.y + 1.0) * 0.5
    return pack_rgb(
        _byte((1.0 - t) * 135 + t * 25),
        _byte((1.0 - t) * 206 + t * 25),
        _byte((1.0 - t) * 235 + t * 112),
    )