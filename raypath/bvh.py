"""Bounding volume hierarchy over a set of objects."""

from __future__ import annotations

from typing import Iterable

from raypath.aabb import AABB, surrounding_box
from raypath.hittable import HitRecord, Hittable
from raypath.ray import Ray
from raypath.rng import random_int


def _box_of(obj: Hittable) -> AABB:
    box = obj.bounding_box(0, 0)
    if box is None:
        raise ValueError("object has no bounding box and cannot be placed in a BVH")
    return box


def box_compare(a: Hittable, b: Hittable, axis: int) -> bool:
    """Whether ``a``'s box starts before ``b``'s along ``axis``."""
    return _box_of(a).minimum[axis] < _box_of(b).minimum[axis]


class BVHNode(Hittable):
    """A binary tree of bounding boxes, split along a random axis at each level."""

    def __init__(
        self, objects: Iterable[Hittable], time0: float = 0.0, time1: float = 0.0
    ) -> None:
        items = list(objects)
        if not items:
            raise ValueError("cannot build a BVH from no objects")

        axis = random_int(0, 2)
        self.left: Hittable
        self.right: Hittable
        if len(items) == 1:
            self.left = self.right = items[0]
        elif len(items) == 2:
            a, b = items
            self.left, self.right = (a, b) if box_compare(a, b, axis) else (b, a)
        else:
            items.sort(key=lambda obj: _box_of(obj).minimum[axis])
            mid = len(items) // 2
            self.left = BVHNode(items[:mid], time0, time1)
            self.right = BVHNode(items[mid:], time0, time1)

        box_left = self.left.bounding_box(time0, time1)
        box_right = self.right.bounding_box(time0, time1)
        if box_left is None or box_right is None:
            raise ValueError("object has no bounding box and cannot be placed in a BVH")
        self.box = surrounding_box(box_left, box_right)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        if not self.box.hit(ray, t_min, t_max):
            return None
        left = self.left.hit(ray, t_min, t_max)
        right = self.right.hit(ray, t_min, left.t if left is not None else t_max)
        return right if right is not None else left

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return self.box