"""Axis-aligned rectangles and boxes built from them."""

from __future__ import annotations

from typing import TYPE_CHECKING

from raypath.aabb import AABB
from raypath.hittable import HitRecord, Hittable, HittableList
from raypath.ray import Ray
from raypath.vec import Vec3

if TYPE_CHECKING:
    from raypath.material import Material

_PAD = 0.0001


class XYRect(Hittable):
    """Rectangle [x0, x1] x [y0, y1] in the plane z = k."""

    def __init__(
        self, x0: float, x1: float, y0: float, y1: float, k: float, material: Material | None
    ) -> None:
        self.x0, self.x1, self.y0, self.y1, self.k = x0, x1, y0, y1, k
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        o, d = ray.origin, ray.direction
        if d.z == 0:
            return None
        t = (self.k - o.z) / d.z
        if t < t_min or t > t_max:
            return None
        x = o.x + t * d.x
        y = o.y + t * d.y
        if x < self.x0 or x > self.x1 or y < self.y0 or y > self.y1:
            return None
        rec = HitRecord(
            t=t,
            p=ray.at(t),
            u=(x - self.x0) / (self.x1 - self.x0),
            v=(y - self.y0) / (self.y1 - self.y0),
            material=self.material,
        )
        rec.set_face_normal(ray, Vec3(0.0, 0.0, 1.0))
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        # Pad the flat axis so the box has volume.
        return AABB(
            Vec3(self.x0, self.y0, self.k - _PAD), Vec3(self.x1, self.y1, self.k + _PAD)
        )


class XZRect(Hittable):
    """Rectangle [x0, x1] x [z0, z1] in the plane y = k."""

    def __init__(
        self, x0: float, x1: float, z0: float, z1: float, k: float, material: Material | None
    ) -> None:
        self.x0, self.x1, self.z0, self.z1, self.k = x0, x1, z0, z1, k
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        o, d = ray.origin, ray.direction
        if d.y == 0:
            return None
        t = (self.k - o.y) / d.y
        if t < t_min or t > t_max:
            return None
        x = o.x + t * d.x
        z = o.z + t * d.z
        if x < self.x0 or x > self.x1 or z < self.z0 or z > self.z1:
            return None
        rec = HitRecord(
            t=t,
            p=ray.at(t),
            u=(x - self.x0) / (self.x1 - self.x0),
            v=(z - self.z0) / (self.z1 - self.z0),
            material=self.material,
        )
        rec.set_face_normal(ray, Vec3(0.0, 1.0, 0.0))
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return AABB(
            Vec3(self.x0, self.k - _PAD, self.z0), Vec3(self.x1, self.k + _PAD, self.z1)
        )


class YZRect(Hittable):
    """Rectangle [y0, y1] x [z0, z1] in the plane x = k."""

    def __init__(
        self, y0: float, y1: float, z0: float, z1: float, k: float, material: Material | None
    ) -> None:
        self.y0, self.y1, self.z0, self.z1, self.k = y0, y1, z0, z1, k
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        o, d = ray.origin, ray.direction
        if d.x == 0:
            return None
        t = (self.k - o.x) / d.x
        if t < t_min or t > t_max:
            return None
        y = o.y + t * d.y
        z = o.z + t * d.z
        if y < self.y0 or y > self.y1 or z < self.z0 or z > self.z1:
            return None
        rec = HitRecord(
            t=t,
            p=ray.at(t),
            u=(y - self.y0) / (self.y1 - self.y0),
            v=(z - self.z0) / (self.z1 - self.z0),
            material=self.material,
        )
        rec.set_face_normal(ray, Vec3(1.0, 0.0, 0.0))
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return AABB(
            Vec3(self.k - _PAD, self.y0, self.z0), Vec3(self.k + _PAD, self.y1, self.z1)
        )


class Box(Hittable):
    """An axis-aligned box between corners ``p0`` and ``p1``, made of six rectangles."""

    def __init__(self, p0: Vec3, p1: Vec3, material: Material | None) -> None:
        self.box_min = p0
        self.box_max = p1
        self.sides = HittableList(
            [
                XYRect(p0.x, p1.x, p0.y, p1.y, p1.z, material),
                XYRect(p0.x, p1.x, p0.y, p1.y, p0.z, material),
                XZRect(p0.x, p1.x, p0.z, p1.z, p1.y, material),
                XZRect(p0.x, p1.x, p0.z, p1.z, p0.y, material),
                YZRect(p0.y, p1.y, p0.z, p1.z, p1.x, material),
                YZRect(p0.y, p1.y, p0.z, p1.z, p0.x, material),
            ]
        )

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return self.sides.hit(ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return AABB(self.box_min, self.box_max)