"""Rays: an origin and a direction."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vec3 import Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line origin + t * direction, with an optional time stamp."""

    origin: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)
    time: float = 0.0

    def point_at_parameter(self, t: float) -> Vec3:
        return self.origin + t * self.direction