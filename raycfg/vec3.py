"""Three-component vectors used for points, directions and colours."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Optional

_NEAR_ZERO = 1e-8


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector; also used as an RGB colour."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __pos__(self) -> Vec3:
        return self

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            t = float(other)
            return Vec3(t * self.x, t * self.y, t * self.z)
        return NotImplemented

    def __rmul__(self, other: object) -> Vec3:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, Real):
            return (1.0 / float(other)) * self
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def near_zero(self) -> bool:
        """True when every component is within 1e-8 of zero."""
        return all(abs(c) < _NEAR_ZERO for c in self)

    def normalized(self) -> Vec3:
        """Return the unit vector; a zero vector is returned unchanged."""
        length = self.length()
        if length > 0:
            return Vec3(self.x / length, self.y / length, self.z / length)
        return self


def dot(u: Vec3, v: Vec3) -> float:
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: Vec3, v: Vec3) -> Vec3:
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    """Return v scaled to length one; raises ZeroDivisionError for a zero vector."""
    return v / v.length()


def reflect(v: Vec3, n: Vec3) -> Vec3:
    return v - 2 * dot(v, n) * n


def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Optional[Vec3]:
    """Refract uv through a surface with normal n, or None on total internal reflection."""
    unit = unit_vector(uv)
    dt = dot(unit, n)
    discriminant = 1.0 - etai_over_etat * etai_over_etat * (1 - dt * dt)
    if discriminant > 0:
        return etai_over_etat * (unit - n * dt) - n * math.sqrt(discriminant)
    return None


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of reflectance."""
    r0 = (1 - ref_idx) / (1 + ref_idx)
    r0 = r0 * r0
    return r0 + (1 - r0) * (1 - cosine) ** 5


def random_double(min_value: float = 0.0, max_value: float = 1.0) -> float:
    """A uniform random number in [min_value, max_value)."""
    return min_value + (max_value - min_value) * random.random()


def random_vec3(min_value: float = 0.0, max_value: float = 1.0) -> Vec3:
    """A vector whose components are uniform in [min_value, max_value)."""
    return Vec3(
        random_double(min_value, max_value),
        random_double(min_value, max_value),
        random_double(min_value, max_value),
    )