"""Surface materials: how rays scatter off, or are emitted by, a surface."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Union

from .hitable import HitRecord
from .objects import random_in_unit_sphere
from .ray import Ray
from .textures import SolidColor, Texture
from .vec3 import Vec3, dot, reflect, refract, schlick, unit_vector

_BLACK = Vec3(0.0, 0.0, 0.0)


def _as_texture(texture: Union[Texture, Vec3]) -> Texture:
    return texture if isinstance(texture, Texture) else SolidColor(texture)


@dataclass(frozen=True, slots=True)
class Scatter:
    """A scattered ray and the colour it is attenuated by."""

    attenuation: Vec3
    scattered: Ray


class Material(ABC):
    """The behaviour of a surface under a ray."""

    @abstractmethod
    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        """The scattered ray, or None if the ray is absorbed."""

    def emitted(self, u: float, v: float, p: Vec3) -> Vec3:
        """Light given off at the point; black unless the material glows."""
        return _BLACK


class Lambertian(Material):
    """A matte, diffusely reflecting surface."""

    def __init__(self, texture: Union[Texture, Vec3]) -> None:
        self.texture = _as_texture(texture)

    def __repr__(self) -> str:
        return f"Lambertian({self.texture!r})"

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        direction = rec.normal + random_in_unit_sphere()
        if direction.near_zero():
            direction = rec.normal
        scattered = Ray(rec.p, direction, ray_in.time)
        return Scatter(self.texture.value(rec.u, rec.v, rec.p), scattered)


class Metal(Material):
    """A mirror-like surface.

    The fuzz factor is kept as a whole number: anything below one becomes
    its integer part, anything at or above one becomes one.
    """

    def __init__(self, albedo: Vec3, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = int(fuzz) if fuzz < 1 else 1

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        reflected = reflect(unit_vector(ray_in.direction), rec.normal)
        scattered = Ray(rec.p, reflected + self.fuzz * random_in_unit_sphere())
        if dot(scattered.direction, rec.normal) > 0:
            return Scatter(self.albedo, scattered)
        return None


class Dielectric(Material):
    """A clear, refracting surface such as glass."""

    def __init__(self, ref_idx: float) -> None:
        self.ref_idx = ref_idx

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx})"

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        direction = ray_in.direction
        reflected = reflect(direction, rec.normal)
        d_dot_n = dot(direction, rec.normal)
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = d_dot_n / direction.length()
            radicand = 1 - self.ref_idx * self.ref_idx * (1 - cosine * cosine)
            cosine = math.sqrt(radicand) if radicand >= 0 else math.nan
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -d_dot_n / direction.length()
        refracted = refract(direction, outward_normal, ni_over_nt)
        if refracted is None:
            out = reflected
        else:
            reflect_prob = schlick(cosine, self.ref_idx)
            out = reflected if random.random() < reflect_prob else refracted
        return Scatter(Vec3(1.0, 1.0, 1.0), Ray(rec.p, out))


class DiffuseLight(Material):
    """A surface that emits light and scatters nothing."""

    def __init__(self, texture: Union[Texture, Vec3]) -> None:
        self.texture = _as_texture(texture)

    def __repr__(self) -> str:
        return f"DiffuseLight({self.texture!r})"

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        return None

    def emitted(self, u: float, v: float, p: Vec3) -> Vec3:
        return self.texture.value(u, v, p)