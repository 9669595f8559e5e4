"""Participating media of constant density, such as smoke or fog."""

from __future__ import annotations

import math

from raypath.aabb import AABB
from raypath.hittable import HitRecord, Hittable
from raypath.material import Isotropic
from raypath.ray import Ray
from raypath.rng import random_double
from raypath.texture import Texture
from raypath.vec import Vec3


class Medium(Hittable):
    """A volume filling ``boundary`` that scatters rays at random depths."""

    def __init__(self, boundary: Hittable, density: float, albedo: Vec3 | Texture) -> None:
        self.boundary = boundary
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        entry = self.boundary.hit(ray, -math.inf, math.inf)
        if entry is None:
            return None
        exit_ = self.boundary.hit(ray, entry.t + 0.0001, math.inf)
        if exit_ is None:
            return None

        t_enter = max(entry.t, t_min)
        t_exit = min(exit_.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside = (t_exit - t_enter) * ray_length
        sample = random_double()
        if sample == 0.0:
            return None
        hit_distance = self.neg_inv_density * math.log(sample)
        if hit_distance > distance_inside:
            return None

        t = t_enter + hit_distance / ray_length
        # Normal and facing are arbitrary inside a volume.
        return HitRecord(
            p=ray.at(t),
            normal=Vec3(1.0, 0.0, 0.0),
            t=t,
            front_face=True,
            material=self.phase_function,
        )

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return self.boundary.bounding_box(time0, time1)