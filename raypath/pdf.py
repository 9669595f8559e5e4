"""Orthonormal bases and probability densities over directions."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from raypath.rng import random_double
from raypath.vec import Vec3, random_cosine_direction, random_unit_vector


@dataclass(frozen=True, slots=True)
class Onb:
    """An orthonormal basis (u, v, w)."""

    u: Vec3
    v: Vec3
    w: Vec3

    @classmethod
    def from_w(cls, w: Vec3) -> Onb:
        """Build a basis whose w axis points along ``w``."""
        unit_w = w.normalized()
        a = Vec3(0.0, 1.0, 0.0) if abs(unit_w.x) > 0.9 else Vec3(1.0, 0.0, 0.0)
        v = unit_w.cross(a).normalized()
        u = unit_w.cross(v)
        return cls(u, v, unit_w)

    def local(self, a: Vec3) -> Vec3:
        """Express basis coordinates ``a`` in world space."""
        return a.x * self.u + a.y * self.v + a.z * self.w


class Pdf(ABC):
    """A density over directions that can also be sampled."""

    @abstractmethod
    def value(self, direction: Vec3) -> float:
        """Density at ``direction``."""

    @abstractmethod
    def generate(self) -> Vec3:
        """Draw a direction from this density."""


class SpherePdf(Pdf):
    """Uniform density over the whole sphere."""

    def value(self, direction: Vec3) -> float:
        return 1 / (4 * math.pi)

    def generate(self) -> Vec3:
        return random_unit_vector()


class CosinePdf(Pdf):
    """Cosine-weighted density around a normal."""

    def __init__(self, w: Vec3) -> None:
        self.uvw = Onb.from_w(w)

    def value(self, direction: Vec3) -> float:
        cosine_theta = direction.normalized().dot(self.uvw.w)
        return max(0.0, cosine_theta / math.pi)

    def generate(self) -> Vec3:
        return self.uvw.local(random_cosine_direction())


class HittablePdf(Pdf):
    """Density of directions from ``origin`` towards a set of objects."""

    def __init__(self, objects: Any, origin: Vec3) -> None:
        self.objects = objects
        self.origin = origin

    def value(self, direction: Vec3) -> float:
        return self.objects.pdf_value(self.origin, direction)

    def generate(self) -> Vec3:
        return self.objects.random(self.origin)


class MixturePdf(Pdf):
    """Equal-weight mixture of two densities."""

    def __init__(self, p0: Pdf, p1: Pdf) -> None:
        self.p0 = p0
        self.p1 = p1

    def value(self, direction: Vec3) -> float:
        return 0.5 * self.p0.value(direction) + 0.5 * self.p1.value(direction)

    def generate(self) -> Vec3:
        if random_double() < 0.5:
            return self.p0.generate()
        return self.p1.generate()