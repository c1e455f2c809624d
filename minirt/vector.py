"""Three-component vectors, rays and hit records."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Vector product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0.0:
            return Vec3()
        return self / size


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line starting at *origin* going along *direction*."""

    origin: Vec3
    direction: Vec3

    def at(self, t: float) -> Vec3:
        """Point reached after travelling parameter *t* along the ray."""
        return self.origin + self.direction * t


@dataclass
class HitRecord:
    """Where a ray met a surface, and the surface frame there."""

    t: float = 0.0
    point: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    tangent: Vec3 = field(default_factory=Vec3)
    bitangent: Vec3 = field(default_factory=Vec3)


def reflect(incident: Vec3, normal: Vec3) -> Vec3:
    """Mirror *incident* about *normal*."""
    return incident - normal * (2 * incident.dot(normal))


def face_normal(ray: Ray, outward_normal: Vec3) -> Vec3:
    """Return the normal turned to face against the incoming ray."""
    if ray.direction.dot(outward_normal) > 0.0:
        return -outward_normal
    return outward_normal