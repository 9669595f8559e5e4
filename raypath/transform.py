"""Objects placed in the scene through a 4x4 model matrix."""

from __future__ import annotations

import dataclasses
import itertools
from typing import TYPE_CHECKING

import numpy as np

from raypath.aabb import AABB
from raypath.hittable import HitRecord, Hittable
from raypath.ray import Ray
from raypath.vec import Vec3

if TYPE_CHECKING:
    from raypath.material import Material


def _apply(matrix: np.ndarray, v: Vec3, w: float) -> Vec3:
    """Multiply ``matrix`` by the homogeneous vector (v, w) and drop w."""
    x, y, z, _ = matrix @ np.array([v.x, v.y, v.z, w])
    return Vec3(float(x), float(y), float(z))


class TransHittable(Hittable):
    """Wraps an object given in local coordinates with a model transform."""

    def __init__(self, obj: Hittable | None = None, model: np.ndarray | None = None) -> None:
        self.object = obj
        self.model = np.identity(4) if model is None else np.array(model, dtype=float)
        if self.model.shape != (4, 4):
            raise ValueError("model matrix must be 4x4")
        self._inverse = np.linalg.inv(self.model)
        self._normal_matrix = self._inverse[:3, :3].T

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        if self.object is None:
            return None
        local_origin = _apply(self._inverse, ray.origin, 1.0)
        local_direction = _apply(self._inverse, ray.direction, 0.0)
        length = local_direction.length()
        if length == 0:
            return None

        local_ray = Ray(local_origin, local_direction / length)
        local = self.object.hit(local_ray, t_min, t_max * length)
        if local is None:
            return None

        t = local.t / length
        if t > t_max:
            return None

        nx, ny, nz = self._normal_matrix @ np.array(tuple(local.normal))
        normal = Vec3(float(nx), float(ny), float(nz)).normalized()
        return dataclasses.replace(
            local, p=_apply(self.model, local.p, 1.0), t=t, normal=normal
        )

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        if self.object is None:
            return None
        child = self.object.bounding_box(time0, time1)
        if child is None:
            return None

        corners = [
            _apply(self.model, Vec3(x, y, z), 1.0)
            for x, y, z in itertools.product(
                (child.minimum.x, child.maximum.x),
                (child.minimum.y, child.maximum.y),
                (child.minimum.z, child.maximum.z),
            )
        ]
        lo = hi = corners[0]
        for corner in corners[1:]:
            lo = lo.min(corner)
            hi = hi.max(corner)
        return AABB(lo, hi)

    def add_texture(self, material: Material) -> None:
        if self.object is not None:
            self.object.add_texture(material)