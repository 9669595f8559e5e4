"""Scene contents and rendering settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from raypath.bvh import BVHNode
from raypath.camera import Camera
from raypath.hittable import Hittable, HittableList


def _typed(data: Mapping[str, Any], key: str, kind: type) -> Any:
    value = data[key]
    if kind is int and isinstance(value, bool) or not isinstance(value, kind):
        raise TypeError(f"{key!r} must be of type {kind.__name__}")
    return value


@dataclass(frozen=True)
class RenderConfig:
    """Samples per pixel, recursion depth and whether to trace through a BVH."""

    samples: int
    max_depth: int
    use_bvh: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RenderConfig:
        """Read the keys ``samples``, ``max_depth`` and ``useBVH``."""
        return cls(
            samples=_typed(data, "samples", int),
            max_depth=_typed(data, "max_depth", int),
            use_bvh=_typed(data, "useBVH", bool),
        )


class Scene:
    """Objects, lights, unbounded objects and a camera."""

    def __init__(self) -> None:
        self.camera: Camera | None = None
        self.bvh: BVHNode | None = None
        self.lights = HittableList()
        self.objects = HittableList()
        self.other_objects = HittableList()

    def add_camera(self, camera: Camera) -> None:
        self.camera = camera

    def add_object(self, obj: Hittable) -> None:
        self.objects.add(obj)

    def add_light(self, obj: Hittable) -> None:
        self.lights.add(obj)

    def build_bvh(self) -> BVHNode:
        self.bvh = BVHNode(self.objects)
        return self.bvh

    def world(self, use_bvh: bool) -> Hittable:
        """The hierarchy when ``use_bvh`` is set, otherwise the flat object list."""
        if not use_bvh:
            return self.objects
        if self.bvh is None:
            raise RuntimeError("BVH has not been built; call build_bvh first")
        return self.bvh