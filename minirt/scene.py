"""Data model of a scene: camera, lights and objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .vector import Vec3


@dataclass
class Ambient:
    """Ambient light: ratio in [0, 1] and packed 0xRRGGBB colour."""

    ratio: float = 0.0
    color: int = 0


@dataclass
class Camera:
    """Viewpoint, viewing direction and horizontal field of view in degrees."""

    position: Vec3 = field(default_factory=Vec3)
    orientation: Vec3 = field(default_factory=Vec3)
    fov: float = 0.0


@dataclass
class Light:
    """A point light."""

    position: Vec3 = field(default_factory=Vec3)
    ratio: float = 0.0
    color: int = 0


@dataclass
class Material:
    """Phong coefficients and reflectivity of a surface."""

    ambient: float = 0.0
    diffuse: float = 0.0
    specular: float = 0.0
    shininess: float = 0.0
    reflectivity: float = 0.0


class TextureKind(IntEnum):
    """How a surface gets its colour."""

    SOLID = 0
    CHECKER = 1
    IMAGE = 2


@dataclass
class Texture:
    """Surface colouring; *data* holds row-major 0xRRGGBB pixels for images."""

    kind: TextureKind = TextureKind.SOLID
    scale: float = 0.0
    primary: int = 0
    secondary: int = 0
    width: int = 0
    height: int = 0
    data: list[int] | None = None


@dataclass
class BumpMap:
    """Height map used to perturb surface normals."""

    enabled: bool = False
    width: int = 0
    height: int = 0
    data: list[int] | None = None


@dataclass
class Properties:
    """Everything about an object's look beyond its geometry."""

    material: Material = field(default_factory=Material)
    texture: Texture = field(default_factory=Texture)
    bump: BumpMap = field(default_factory=BumpMap)


@dataclass
class Sphere:
    center: Vec3 = field(default_factory=Vec3)
    diameter: float = 0.0
    properties: Properties = field(default_factory=Properties)


@dataclass
class Plane:
    """An infinite plane, or a disc when *radius* is positive."""

    point: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    radius: float = 0.0
    properties: Properties = field(default_factory=Properties)


@dataclass
class Cylinder:
    center: Vec3 = field(default_factory=Vec3)
    axis: Vec3 = field(default_factory=Vec3)
    diameter: float = 0.0
    height: float = 0.0
    properties: Properties = field(default_factory=Properties)


@dataclass
class Cone:
    center: Vec3 = field(default_factory=Vec3)
    axis: Vec3 = field(default_factory=Vec3)
    height: float = 0.0
    diameter: float = 0.0
    properties: Properties = field(default_factory=Properties)


@dataclass
class Scene:
    """A whole scene; ambient and camera are None until declared."""

    ambient: Ambient | None = None
    camera: Camera | None = None
    lights: list[Light] = field(default_factory=list)
    spheres: list[Sphere] = field(default_factory=list)
    planes: list[Plane] = field(default_factory=list)
    cylinders: list[Cylinder] = field(default_factory=list)
    cones: list[Cone] = field(default_factory=list)