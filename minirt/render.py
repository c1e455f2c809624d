"""Casting primary rays through the camera and producing an image."""

from __future__ import annotations

import math
import os
from collections.abc import Callable

from PIL import Image

from .lighting import unpack_rgb
from .scene import Scene
from .tracer import ray_color
from .vector import Ray, Vec3

MAX_DEPTH = 20
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600


class _Viewport:
    """The grid of points the camera's rays pass through."""

    def __init__(self, scene: Scene, width: int, height: int):
        camera = scene.camera
        forward = camera.orientation.normalized()
        view_width = 2.0 * math.tan(math.radians(camera.fov) / 2.0) * (width / height)
        right = forward.cross(Vec3(0.0, 1.0, 0.0)).normalized()
        up = right.cross(forward).normalized()
        self.across = forward.cross(up).normalized() * (-view_width)
        self.down = up * (-self.across.x)
        center = camera.position + forward * 0.5
        self.upper_left = center - (self.across / 2.0 + self.down / 2.0)
        self.origin = camera.position
        self.width = width
        self.height = height

    def ray(self, x: int, y: int) -> Ray:
        u = x / (self.width - 1) if self.width > 1 else 0.0
        v = y / (self.height - 1) if self.height > 1 else 0.0
        target = self.upper_left + self.across * u + self.down * v
        return Ray(self.origin, (target - self.origin).normalized())


def primary_ray(scene: Scene, x: int, y: int, width: int, height: int) -> Ray:
    """Ray from the camera through pixel (*x*, *y*) of a *width* by *height* image."""
    return _Viewport(scene, width, height).ray(x, y)


def render(
    scene: Scene,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    progress: Callable[[int], None] | None = None,
) -> list[int]:
    """Render *scene* into row-major packed 0xRRGGBB pixels.

    *progress*, if given, is called after each row with the percentage of
    rows started so far.
    """
    viewport = _Viewport(scene, width, height)
    pixels: list[int] = []
    for y in range(height):
        pixels.extend(ray_color(viewport.ray(x, y), scene, MAX_DEPTH) for x in range(width))
        if progress is not None:
            progress(y * 100 // height)
    return pixels


def save_image(
    pixels: list[int], width: int, height: int, path: str | os.PathLike[str]
) -> None:
    """Write row-major packed pixels to an image file; the format follows the suffix."""
    if len(pixels) != width * height:
        raise ValueError(f"expected {width * height} pixels, got {len(pixels)}")
    image = Image.new("RGB", (width, height))
    image.putdata([unpack_rgb(color) for color in pixels])
    image.save(path)