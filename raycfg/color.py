"""Integer RGB colours and their output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from .vec3 import Vec3


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB colour with integer channels, nominally 0 to 255."""

    r: int = 0
    g: int = 0
    b: int = 0

    def to_vec3(self) -> Vec3:
        """Scale each channel by integer division by 255, truncating toward zero."""
        return Vec3(
            float(_truncating_div(self.r, 255)),
            float(_truncating_div(self.g, 255)),
            float(_truncating_div(self.b, 255)),
        )


def write_color(out: TextIO, pixel_color: Vec3) -> None:
    """Write a colour with components in [0, 1] as an 'R G B' text line."""
    r, g, b = (int(255.999 * c) for c in pixel_color)
    out.write(f"{r} {g} {b}\n")