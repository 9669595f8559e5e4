"""Rays: an origin and a direction."""

from __future__ import annotations

from dataclasses import dataclass, field

from raypath.vec import Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line ``origin + t * direction``."""

    origin: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)

    def at(self, t: float) -> Vec3:
        return self.origin + t * self.direction