"""Objects a ray can hit: the common interface, lists, spheres and triangles."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator

from raypath.aabb import AABB, surrounding_box
from raypath.pdf import Onb
from raypath.ray import Ray
from raypath.vec import Vec3, random_to_sphere

if TYPE_CHECKING:
    from raypath.material import Material


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    p: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    t: float = 0.0
    u: float = 0.0
    v: float = 0.0
    front_face: bool = False
    material: Material | None = None

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Store the normal facing against the ray and note which side was hit."""
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything that can be intersected by a ray."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Return the nearest hit with t in [t_min, t_max], or None."""

    @abstractmethod
    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        """Return a box around the object, or None if it has no bounds."""

    def pdf_value(self, origin: Vec3, direction: Vec3) -> float:
        """Density of sampling ``direction`` from ``origin`` towards this object."""
        return 0.0

    def random(self, origin: Vec3) -> Vec3:
        """Sample a direction from ``origin`` towards this object."""
        return Vec3(1.0, 0.0, 0.0)

    def add_texture(self, material: Material) -> None:
        """Assign a material; objects without one ignore this."""


class HittableList(Hittable):
    """A group of objects hit as one."""

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self.objects: list[Hittable] = list(objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def clear(self) -> None:
        self.objects.clear()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        closest = t_max
        result: HitRecord | None = None
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest)
            if rec is not None:
                closest = rec.t
                result = rec
        return result

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        if not self.objects:
            return None
        output: AABB | None = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            output = box if output is None else surrounding_box(output, box)
        return output


class Sphere(Hittable):
    """A sphere given by centre and radius."""

    def __init__(self, center: Vec3, radius: float, material: Material | None) -> None:
        self.center = center
        self.radius = radius
        self.material = material

    @staticmethod
    def get_sphere_uv(p: Vec3) -> tuple[float, float]:
        """Map a point on the unit sphere to (u, v) in [0, 1]."""
        theta = math.acos(-p.y)
        phi = math.atan2(-p.z, p.x) + math.pi
        return phi / (2 * math.pi), theta / math.pi

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        if a == 0:
            return None
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        delta = half_b * half_b - a * c
        if delta < 0:
            return None
        sqrt_delta = math.sqrt(delta)
        root = (-half_b - sqrt_delta) / a
        if root < t_min or t_max < root:
            root = (-half_b + sqrt_delta) / a
            if root < t_min or t_max < root:
                return None
        rec = HitRecord(t=root, p=ray.at(root), material=self.material)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = self.get_sphere_uv(outward_normal)
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        r = Vec3(self.radius, self.radius, self.radius)
        return AABB(self.center - r, self.center + r)

    def pdf_value(self, origin: Vec3, direction: Vec3) -> float:
        if self.hit(Ray(origin, direction), 0.001, math.inf) is None:
            return 0.0
        to_center = self.center - origin
        cos_theta_max = math.sqrt(
            max(0.0, 1 - self.radius * self.radius / to_center.dot(to_center))
        )
        solid_angle = 2 * math.pi * (1 - cos_theta_max)
        return 1 / solid_angle

    def random(self, origin: Vec3) -> Vec3:
        direction = self.center - origin
        uvw = Onb.from_w(direction)
        return uvw.local(random_to_sphere(self.radius, direction.dot(direction)))

    def add_texture(self, material: Material) -> None:
        self.material = material


@dataclass(frozen=True)
class Vertex:
    """A triangle corner: position, normal and texture coordinates."""

    pos: Vec3
    normal: Vec3 = field(default_factory=Vec3)
    uv: tuple[float, float] = (0.0, 0.0)


class Triangle(Hittable):
    """A triangle with per-vertex normals and texture coordinates."""

    def __init__(self, a: Vertex, b: Vertex, c: Vertex, material: Material | None) -> None:
        self.a = a
        self.b = b
        self.c = c
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        d = ray.direction
        e1 = self.b.pos - self.a.pos
        e2 = self.c.pos - self.a.pos
        t_vec = ray.origin - self.a.pos
        p_vec = d.cross(e2)
        q_vec = t_vec.cross(e1)

        denominator = p_vec.dot(e1)
        if denominator == 0:
            return None
        t = q_vec.dot(e2) / denominator
        u = p_vec.dot(t_vec) / denominator
        v = q_vec.dot(d) / denominator

        if t > t_max or t < t_min or u < 0 or u > 1 or v < 0 or v > 1 or u + v > 1:
            return None

        w = 1 - u - v
        rec = HitRecord(t=t, p=ray.at(t), material=self.material)
        normal = self.a.normal * w + self.b.normal * u + self.c.normal * v
        rec.set_face_normal(ray, normal)
        rec.u = self.a.uv[0] * w + self.b.uv[0] * u + self.c.uv[0] * v
        rec.v = self.a.uv[1] * w + self.b.uv[1] * u + self.c.uv[1] * v
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        lo = self.a.pos.min(self.b.pos).min(self.c.pos)
        hi = self.a.pos.max(self.b.pos).max(self.c.pos)
        return AABB(lo, hi)


class Directional(Hittable):
    """A light infinitely far away, shining along ``direction``."""

    def __init__(self, direction: Vec3, material: Material | None) -> None:
        self.direction = direction
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        # Only rays heading back towards the light, unobstructed, reach it.
        if ray.direction.dot(self.direction) >= 0 or t_max < math.inf:
            return None
        t = math.inf
        return HitRecord(t=t, p=ray.origin + t * ray.direction, material=self.material)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return None