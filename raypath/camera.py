"""Pinhole camera generating primary rays."""

from __future__ import annotations

import math

from raypath.ray import Ray
from raypath.vec import Vec3


class Camera:
    """A pinhole camera at ``lookfrom`` facing ``lookat`` with vertical field of view ``fov``."""

    def __init__(
        self, lookfrom: Vec3, lookat: Vec3, vup: Vec3, fov: float, width: int, height: int
    ) -> None:
        self.width = width
        self.height = height
        self.focal_length = 1.0
        self.aspect_ratio = width / height
        h = math.tan(math.radians(fov) / 2) * self.focal_length
        self.viewport_height = 2.0 * h
        self.viewport_width = self.aspect_ratio * self.viewport_height

        w = (lookat - lookfrom).normalized()
        u = w.cross(vup).normalized()
        v = u.cross(w)

        self.origin = lookfrom
        self.horizontal = self.viewport_width * u
        self.vertical = self.viewport_height * v
        self.lower_left_corner = self.origin - self.horizontal / 2.0 - self.vertical / 2.0 + w

    def get_ray(self, u: float, v: float) -> Ray:
        """Ray through viewport coordinates (u, v), each in [0, 1], with unit direction."""
        target = self.lower_left_corner + u * self.horizontal + v * self.vertical
        return Ray(self.origin, (target - self.origin).normalized())