"""Primitive shapes: spheres, cylinders, planes, cones and triangles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .hitable import Hitable, HitRecord
from .ray import Ray
from .vec3 import Vec3, cross, dot, unit_vector

if TYPE_CHECKING:
    from .materials import Material

_TRIANGLE_EPSILON = 1e-9


def random_in_unit_sphere() -> Vec3:
    """A random point strictly inside the unit sphere."""
    while True:
        p = Vec3(
            2.0 * random.random() - 1.0,
            2.0 * random.random() - 1.0,
            2.0 * random.random() - 1.0,
        )
        if p.length_squared() < 1.0:
            return p


@dataclass(frozen=True)
class Sphere(Hitable):
    """A sphere of the given radius around center."""

    center: Vec3
    radius: float
    material: Optional[Material] = None

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.radius == 0:
            return None
        oc = ray.origin - self.center
        a = dot(ray.direction, ray.direction)
        b = dot(oc, ray.direction)
        c = dot(oc, oc) - self.radius * self.radius
        discriminant = b * b - a * c
        if discriminant <= 0:
            return None
        root = math.sqrt(discriminant)
        for t in ((-b - root) / a, (-b + root) / a):
            if t_min < t < t_max:
                p = ray.point_at_parameter(t)
                return HitRecord(t, p, (p - self.center) / self.radius, self.material)
        return None


@dataclass(frozen=True)
class Cylinder(Hitable):
    """An open cylinder along the y axis, centred on center."""

    center: Vec3
    radius: float
    height: float
    material: Optional[Material] = None

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.radius == 0:
            return None
        d = ray.direction
        oc = ray.origin - self.center
        a = d.x * d.x + d.z * d.z
        b = 2.0 * (oc.x * d.x + oc.z * d.z)
        c = oc.x * oc.x + oc.z * oc.z - self.radius * self.radius
        discriminant = b * b - 4 * a * c
        if discriminant <= 0:
            return None
        root = math.sqrt(discriminant)
        half = self.height / 2
        for sign in (-1, 1):
            t = (-b + sign * root) / (2 * a)
            if t_min < t < t_max:
                p = ray.point_at_parameter(t)
                y = p.y - self.center.y
                if -half <= y <= half:
                    normal = Vec3(
                        (p.x - self.center.x) / self.radius,
                        0.0,
                        (p.z - self.center.z) / self.radius,
                    )
                    return HitRecord(t, p, normal, self.material)
        return None


@dataclass(frozen=True)
class Plane(Hitable):
    """A rectangle in the plane z = center.z, length along x and width along y."""

    center: Vec3
    length: float
    width: float
    height: float = 0.0
    material: Optional[Material] = None

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if ray.direction.z == 0:
            return None
        t = (self.center.z - ray.origin.z) / ray.direction.z
        if t < t_min or t > t_max:
            return None
        x = ray.origin.x + t * ray.direction.x
        y = ray.origin.y + t * ray.direction.y
        half_length = self.length / 2.0
        half_width = self.width / 2.0
        if not (self.center.x - half_length <= x <= self.center.x + half_length):
            return None
        if not (self.center.y - half_width <= y <= self.center.y + half_width):
            return None
        return HitRecord(t, ray.point_at_parameter(t), Vec3(0.0, 0.0, 1.0), self.material)


@dataclass(frozen=True)
class Cone(Hitable):
    """A double cone along the y axis with its apex at center, cut at +/- height."""

    center: Vec3
    radius: float
    height: float
    material: Optional[Material] = None

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.radius == 0 or self.height == 0:
            return None
        d = ray.direction
        oc = ray.origin - self.center
        k = (self.radius / self.height) ** 2
        a = d.x * d.x + d.z * d.z - k * d.y * d.y
        b = 2.0 * (oc.x * d.x + oc.z * d.z - k * oc.y * d.y)
        c = oc.x * oc.x + oc.z * oc.z - k * oc.y * oc.y
        discriminant = b * b - 4 * a * c
        if discriminant <= 0 or a == 0:
            return None
        root = math.sqrt(discriminant)
        for sign in (-1, 1):
            t = (-b + sign * root) / (2 * a)
            if t_min < t < t_max:
                p = ray.point_at_parameter(t)
                y = p.y - self.center.y
                if -self.height <= y <= self.height:
                    normal = unit_vector(Vec3(
                        (p.x - self.center.x) / self.radius,
                        k * self.height / self.radius,
                        (p.z - self.center.z) / self.radius,
                    ))
                    return HitRecord(t, p, normal, self.material)
        return None


@dataclass(frozen=True)
class Triangle(Hitable):
    """A triangle with vertices v0, v1, v2 (Moller-Trumbore intersection)."""

    v0: Vec3
    v1: Vec3
    v2: Vec3
    material: Optional[Material] = None

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        edge1 = self.v1 - self.v0
        edge2 = self.v2 - self.v0
        h = cross(ray.direction, edge2)
        a = dot(edge1, h)
        if -_TRIANGLE_EPSILON < a < _TRIANGLE_EPSILON:
            return None
        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * dot(s, h)
        if u < 0.0 or u > 1.0:
            return None
        q = cross(s, edge1)
        v = f * dot(ray.direction, q)
        if v < 0.0 or u + v > 1.0:
            return None
        t = f * dot(edge2, q)
        if t > _TRIANGLE_EPSILON and t_min <= t <= t_max:
            normal = unit_vector(cross(edge1, edge2))
            return HitRecord(t, ray.point_at_parameter(t), normal, self.material)
        return None