"""Surface materials: how light scatters off or is emitted by a surface."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from raypath.hittable import HitRecord
from raypath.pdf import CosinePdf, Pdf
from raypath.ray import Ray
from raypath.rng import random_double
from raypath.texture import SolidColor, Texture
from raypath.vec import Vec3, random_in_unit_sphere, reflect, refract


def _as_texture(source: Vec3 | Texture) -> Texture:
    return SolidColor(source) if isinstance(source, Vec3) else source


@dataclass
class ScatterRecord:
    """Outcome of a scattering event."""

    attenuation: Vec3 = field(default_factory=Vec3)
    is_specular: bool = False
    specular_ray: Ray | None = None
    pdf: Pdf | None = None


class Material(ABC):
    """How a surface reacts to an incoming ray."""

    @abstractmethod
    def scatter(self, ray_in: Ray, rec: HitRecord) -> ScatterRecord | None:
        """Return how the ray scatters, or None if it is absorbed."""

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 0.0

    def emitted(self, u: float, v: float, p: Vec3) -> Vec3:
        return Vec3(0.0, 0.0, 0.0)


class Lambertian(Material):
    """Ideal diffuse surface."""

    def __init__(self, albedo: Vec3 | Texture) -> None:
        self.albedo = _as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> ScatterRecord | None:
        return ScatterRecord(
            attenuation=self.albedo.value(rec.u, rec.v, rec.p),
            is_specular=False,
            pdf=CosinePdf(rec.normal),
        )

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        cos_theta = rec.normal.dot(scattered.direction.normalized())
        return 0.0 if cos_theta < 0 else cos_theta / math.pi


class Metal(Material):
    """Mirror-like surface with optional fuzz (capped at 1)."""

    def __init__(self, albedo: Vec3, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1 else 1.0

    def scatter(self, ray_in: Ray, rec: HitRecord) -> ScatterRecord | None:
        reflected = reflect(ray_in.direction.normalized(), rec.normal)
        return ScatterRecord(
            attenuation=self.albedo,
            is_specular=True,
            specular_ray=Ray(rec.p, reflected + self.fuzz * random_in_unit_sphere()),
        )


class Dielectric(Material):
    """Clear material such as glass, with index of refraction ``ir``."""

    def __init__(self, ir: float) -> None:
        self.ir = ir

    def scatter(self, ray_in: Ray, rec: HitRecord) -> ScatterRecord | None:
        ratio = (1.0 / self.ir) if rec.front_face else self.ir
        unit_direction = ray_in.direction.normalized()
        cos_theta = min((-unit_direction).dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ratio * sin_theta > 1.0
        if cannot_refract or self.reflectance(cos_theta, ratio) > random_double():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio)

        return ScatterRecord(
            attenuation=Vec3(1.0, 1.0, 1.0),
            is_specular=True,
            specular_ray=Ray(rec.p, direction),
        )

    @staticmethod
    def reflectance(cosine: float, ref_idx: float) -> float:
        """Schlick's approximation of the reflection coefficient."""
        r0 = (1 - ref_idx) / (1 + ref_idx)
        r0 = r0 * r0
        return r0 + (1 - r0) * (1 - cosine) ** 5


class DiffuseLight(Material):
    """An emitting surface that scatters nothing."""

    def __init__(self, emit: Vec3 | Texture) -> None:
        self.emit = _as_texture(emit)
        self.intensity = 1.0

    def scatter(self, ray_in: Ray, rec: HitRecord) -> ScatterRecord | None:
        return None

    def emitted(self, u: float, v: float, p: Vec3) -> Vec3:
        return self.emit.value(u, v, p)


class Isotropic(Material):
    """Phase function of a participating medium: scatters uniformly."""

    def __init__(self, albedo: Vec3 | Texture) -> None:
        self.albedo = _as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> ScatterRecord | None:
        return ScatterRecord(
            attenuation=Vec3(1.0, 1.0, 1.0),
            is_specular=True,
            specular_ray=Ray(rec.p, random_in_unit_sphere()),
        )

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 1.0 / (4 * math.pi)