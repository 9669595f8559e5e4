"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raypath.ray import Ray
from raypath.vec import Vec3


@dataclass(frozen=True, slots=True)
class AABB:
    """A box spanned by its ``minimum`` and ``maximum`` corners."""

    minimum: Vec3
    maximum: Vec3

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        """Slab test: whether the ray crosses the box within (t_min, t_max)."""
        for lo, hi, o, d in zip(self.minimum, self.maximum, ray.origin, ray.direction):
            inv_d = 1.0 / d if d != 0 else math.copysign(math.inf, d)
            t0 = (lo - o) * inv_d
            t1 = (hi - o) * inv_d
            if inv_d < 0.0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True


def surrounding_box(box0: AABB, box1: AABB) -> AABB:
    """Return the smallest box enclosing both boxes."""
    return AABB(box0.minimum.min(box1.minimum), box0.maximum.max(box1.maximum))