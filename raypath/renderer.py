"""Monte Carlo path tracer producing an RGB image."""

from __future__ import annotations

import logging
import math
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import numpy as np

from raypath.pdf import HittablePdf, MixturePdf
from raypath.ray import Ray
from raypath.rng import clamp, random_double
from raypath.scene import Scene
from raypath.vec import Vec3

logger = logging.getLogger(__name__)

_T_MIN = 0.001


def encode_pixel(color: Vec3, samples_per_pixel: int) -> tuple[int, int, int]:
    """Average a summed colour, gamma-correct it (gamma 2) and scale it to 0..255."""
    scale = 1.0 / samples_per_pixel

    def channel(c: float) -> int:
        if math.isnan(c):
            c = 0.0
        value = math.sqrt(max(0.0, scale * c))
        return int(255 * clamp(value, 0.0, 1.0))

    r, g, b = (channel(c) for c in color)
    return r, g, b


class Renderer:
    """Traces a scene into an image of 8-bit RGB values."""

    def __init__(
        self,
        samples: int,
        max_depth: int,
        use_bvh: bool = True,
        background: Vec3 = Vec3(0.0, 0.0, 0.0),
    ) -> None:
        self.samples = samples
        self.max_depth = max_depth
        self.use_bvh = use_bvh
        self.background = background
        self.image: np.ndarray | None = None
        self.pixel_count = 0
        self._lock = threading.Lock()

    def ray_color(self, scene: Scene, ray: Ray, depth: int) -> Vec3:
        """Radiance arriving along ``ray``, following at most ``depth`` further bounces."""
        if depth < 0:
            return Vec3(0.0, 0.0, 0.0)

        rec = scene.world(self.use_bvh).hit(ray, _T_MIN, math.inf)
        if rec is None:
            rec = scene.other_objects.hit(ray, _T_MIN, math.inf)
            if rec is None:
                return self.background

        material = rec.material
        if material is None:
            return Vec3(0.0, 0.0, 0.0)

        emitted = material.emitted(rec.u, rec.v, rec.p)
        srec = material.scatter(ray, rec)
        if srec is None:
            return emitted

        if srec.is_specular:
            return srec.attenuation * self.ray_color(scene, srec.specular_ray, depth - 1)

        light_pdf = HittablePdf(scene.lights, rec.p) if len(scene.lights) else srec.pdf
        mixture = MixturePdf(light_pdf, srec.pdf)
        scattered = Ray(rec.p, mixture.generate())
        pdf_val = mixture.value(scattered.direction)
        if not pdf_val > 0:
            return emitted

        scattering_pdf = material.scattering_pdf(ray, rec, scattered)
        incoming = self.ray_color(scene, scattered, depth - 1)
        return emitted + srec.attenuation * scattering_pdf * incoming / pdf_val

    def render(self, scene: Scene, workers: int | None = None) -> np.ndarray:
        """Trace every pixel; returns the image as a (height, width, 3) array, row 0 at the bottom."""
        camera = scene.camera
        if camera is None:
            raise ValueError("scene has no camera")
        width, height = camera.width, camera.height

        self.image = np.zeros((height, width, 3), dtype=np.int64)
        self.pixel_count = 0

        if workers is None:
            workers = max(1, (os.cpu_count() or 2) - 1)
        workers = max(1, min(height, workers))
        interval = -(-height // workers)
        chunks = [
            (start, min(start + interval, height) - 1) for start in range(0, height, interval)
        ]
        logger.info("Running with %d threads", workers)

        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(self._render_rows, scene, start, end, index)
                for index, (start, end) in enumerate(chunks)
            ]
            for future in futures:
                future.result()
        logger.info("Tracing done")
        return self.image

    def _render_rows(self, scene: Scene, start: int, end: int, worker: int) -> None:
        camera = scene.camera
        width, height = camera.width, camera.height
        u_span = max(width - 1, 1)
        v_span = max(height - 1, 1)

        for j in range(end, start - 1, -1):
            if worker == 0 and (end - j) % 3 == 0:
                done = (end - j) / (end - start) * 100 if end > start else 100.0
                logger.info("Thread %d progress: %.1f %%", worker, done)
            for i in range(width):
                color = Vec3(0.0, 0.0, 0.0)
                for _ in range(self.samples):
                    u = (i + random_double()) / u_span
                    v = (j + random_double()) / v_span
                    color = color + self.ray_color(scene, camera.get_ray(u, v), self.max_depth)
                pixel = encode_pixel(color, self.samples)
                with self._lock:
                    self.image[j, i] = pixel
                    self.pixel_count += 1

    def to_ppm(self) -> str:
        """The rendered image as plain-text PPM (P3), top row first."""
        if self.image is None:
            raise RuntimeError("nothing has been rendered")
        height, width, _ = self.image.shape
        lines = ["P3", f"{width} {height}", "255"]
        lines.extend(
            f"{r} {g} {b}"
            for j in range(height - 1, -1, -1)
            for r, g, b in self.image[j].tolist()
        )
        return "\n".join(lines) + "\n"

    def write_ppm(self, path: str | os.PathLike[str]) -> Path:
        target = Path(path)
        target.write_text(self.to_ppm(), encoding="ascii")
        return target