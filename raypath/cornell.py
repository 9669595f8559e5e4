"""The Cornell box test scene and a command to render it."""

from __future__ import annotations

import argparse
import logging
import math
import os
from pathlib import Path
from typing import Sequence

import numpy as np

from raypath import rng
from raypath.camera import Camera
from raypath.hittable import Triangle, Vertex
from raypath.material import DiffuseLight, Lambertian
from raypath.rect import Box, XYRect, XZRect, YZRect
from raypath.renderer import Renderer
from raypath.scene import RenderConfig, Scene
from raypath.transform import TransHittable
from raypath.vec import Vec3


def _translate(v: Vec3) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = tuple(v)
    return m


def _rotate_y(degrees: float) -> np.ndarray:
    a = math.radians(degrees)
    c, s = math.cos(a), math.sin(a)
    m = np.identity(4)
    m[0, 0], m[0, 2], m[2, 0], m[2, 2] = c, s, -s, c
    return m


def _scale(v: Vec3) -> np.ndarray:
    return np.diag([v.x, v.y, v.z, 1.0])


def cornell_box(scene: Scene, width: int = 600, height: int = 600) -> Scene:
    """Fill ``scene`` with the Cornell box: walls, a ceiling light, a triangle and two boxes."""
    scene.add_camera(
        Camera(Vec3(278, 278, -800), Vec3(278, 278, 0), Vec3(0, 1, 0), 40.0, width, height)
    )

    red = Lambertian(Vec3(0.65, 0.05, 0.05))
    white = Lambertian(Vec3(0.73, 0.73, 0.73))
    green = Lambertian(Vec3(0.12, 0.45, 0.15))
    light = DiffuseLight(Vec3(1.0, 1.0, 1.0))

    scene.add_object(YZRect(0, 555, 0, 555, 555, green))
    scene.add_object(YZRect(0, 555, 0, 555, 0, red))
    scene.add_object(XZRect(213, 343, 227, 332, 554, light))
    scene.add_object(XZRect(0, 555, 0, 555, 0, white))
    scene.add_object(XZRect(0, 555, 0, 555, 555, white))
    scene.add_object(XYRect(0, 555, 0, 555, 555, white))

    a = Vec3(278, 278, 278)
    b = Vec3(278, 478, 478)
    c = Vec3(478, 278, 278)
    normal = (b - a).cross(c - a).normalized()
    scene.add_object(Triangle(Vertex(a, normal), Vertex(b, normal), Vertex(c, normal), white))

    scene.add_light(XZRect(213, 343, 227, 332, 554, light))

    tall = Box(Vec3(0, 0, 0), Vec3(165, 330, 165), white)
    short = Box(Vec3(0, 0, 0), Vec3(165, 165, 165), white)
    model1 = _translate(Vec3(265, 0, 295)) @ _rotate_y(15.0)
    model2 = _translate(Vec3(130, 0, 65)) @ _rotate_y(-18.0) @ _scale(Vec3(1.5, 0.8, 1.5))
    scene.add_object(TransHittable(tall, model1))
    scene.add_object(TransHittable(short, model2))
    return scene


def run(
    scene: Scene, config: RenderConfig, output: str | os.PathLike[str] = "out.ppm"
) -> Path:
    """Render ``scene`` with ``config`` and write the result as PPM to ``output``."""
    if config.use_bvh and scene.bvh is None:
        scene.build_bvh()
    renderer = Renderer(config.samples, config.max_depth, config.use_bvh)
    renderer.render(scene)
    return renderer.write_ppm(output)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render the Cornell box to a PPM image.")
    parser.add_argument("--samples", type=int, default=16, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, default=8, help="maximum bounce depth")
    parser.add_argument("--no-bvh", action="store_true", help="trace without a BVH")
    parser.add_argument("--width", type=int, default=600)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible output")
    parser.add_argument("--output", default="out.ppm", help="output PPM file")
    args = parser.parse_args(argv)

    if args.samples < 1 or args.max_depth < 0 or args.width < 1 or args.height < 1:
        parser.error("samples, width and height must be positive and max depth non-negative")

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    if args.seed is not None:
        rng.seed(args.seed)

    scene = cornell_box(Scene(), args.width, args.height)
    config = RenderConfig(args.samples, args.max_depth, not args.no_bvh)
    run(scene, config, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())