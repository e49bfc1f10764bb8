"""A thin-lens camera that turns image coordinates into rays."""

from __future__ import annotations

import math
import random

from .parsing import CameraSettings
from .ray import Ray
from .vec3 import Vec3, cross, dot, unit_vector

_APERTURE = 0.1
_LOOK_AT = Vec3(0.0, 0.0, -1.0)
_UP = Vec3(0.0, 1.0, 0.0)


def random_in_unit_disk() -> Vec3:
    """A random point strictly inside the unit disk in the z = 0 plane."""
    while True:
        p = Vec3(2.0 * random.random() - 1.0, 2.0 * random.random() - 1.0, 0.0)
        if dot(p, p) < 1.0:
            return p


class Camera:
    """A camera at lookfrom facing lookat, with depth of field from its aperture.

    Image coordinate t = 0 is the top edge and t = 1 the bottom edge.
    """

    def __init__(
        self,
        lookfrom: Vec3,
        lookat: Vec3,
        vup: Vec3,
        fov: float,
        aspect: float,
        aperture: float,
        focus_dist: float,
    ) -> None:
        self.fov = fov
        self.lens_radius = aperture / 2
        theta = fov * math.pi / 180
        half_height = math.tan(theta / 2)
        half_width = aspect * half_height
        self.origin = lookfrom
        self.w = unit_vector(lookfrom - lookat)
        self.u = unit_vector(cross(vup, self.w))
        self.v = cross(self.w, self.u)
        self.lower_left_corner = (
            self.origin
            - half_width * focus_dist * self.u
            + half_height * focus_dist * self.v
            - focus_dist * self.w
        )
        self.horizontal = 2 * half_width * focus_dist * self.u
        self.vertical = -2 * half_height * focus_dist * self.v

    @classmethod
    def from_settings(cls, settings: CameraSettings) -> Camera:
        """A camera at the configured position looking toward (0, 0, -1)."""
        if settings.height == 0:
            raise ValueError("camera resolution height must not be zero")
        aspect = settings.width / settings.height
        lookfrom = Vec3(*(float(c) for c in settings.position))
        focus_dist = (lookfrom - _LOOK_AT).length()
        return cls(lookfrom, _LOOK_AT, _UP, settings.fov, aspect, _APERTURE, focus_dist)

    def get_ray(self, s: float, t: float) -> Ray:
        """The ray through image coordinates (s, t), jittered over the lens."""
        rd = self.lens_radius * random_in_unit_disk()
        offset = self.u * rd.x + self.v * rd.y
        target = self.lower_left_corner + s * self.horizontal + t * self.vertical
        return Ray(self.origin + offset, target - self.origin - offset)