"""Three-component vectors and direction sampling helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from raypath.rng import random_double

Number = Union[int, float]


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector, also used for points and RGB colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Vec3 | Number) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Vec3 | Number) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        return Vec3(self.x / other, self.y / other, self.z / other)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vec3:
        """Return the unit vector; a zero vector raises ZeroDivisionError."""
        return self / self.length()

    def near_zero(self) -> bool:
        return all(abs(c) < 1e-6 for c in self)

    def min(self, other: Vec3) -> Vec3:
        return Vec3(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def max(self, other: Vec3) -> Vec3:
        return Vec3(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Mirror ``v`` about the surface normal ``n``."""
    return v - 2.0 * v.dot(n) * n


def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
    """Bend the unit direction ``uv`` through a surface with normal ``n``."""
    cos_theta = min((-uv).dot(n), 1.0)
    r_out_perp = etai_over_etat * (uv + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * n
    return r_out_perp + r_out_parallel


def random_in_unit_sphere() -> Vec3:
    """Return a random direction on the unit sphere (y is the polar axis)."""
    theta = math.pi / 2 * random_double(-1.0, 1.0)
    phi = math.pi * 2 * random_double(0.0, 1.0)
    return Vec3(
        math.sin(theta) * math.sin(phi),
        math.cos(theta),
        math.sin(theta) * math.cos(phi),
    )


def random_in_hemisphere(normal: Vec3) -> Vec3:
    """Return a random unit direction on the side of ``normal``."""
    direction = random_in_unit_sphere()
    return direction if direction.dot(normal) > 0.0 else -direction


def random_unit_vector() -> Vec3:
    return random_in_unit_sphere().normalized()


def random_cosine_direction() -> Vec3:
    """Return a cosine-weighted direction around +z."""
    r1 = random_double()
    r2 = random_double()
    phi = 2 * math.pi * r1
    return Vec3(
        math.cos(phi) * math.sqrt(r2),
        math.sin(phi) * math.sqrt(r2),
        math.sqrt(1 - r2),
    )


def random_to_sphere(radius: float, distance_squared: float) -> Vec3:
    """Return a direction around +z inside the cone that a sphere subtends."""
    r1 = random_double()
    r2 = random_double()
    z = 1 + r2 * (math.sqrt(1 - radius * radius / distance_squared) - 1)
    phi = 2 * math.pi * r1
    s = math.sqrt(1 - z * z)
    return Vec3(math.cos(phi) * s, math.sin(phi) * s, z)