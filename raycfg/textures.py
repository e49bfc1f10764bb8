"""Textures: solid colours, 3D checkers and images loaded from files."""

from __future__ import annotations

import math
import sys
from abc import ABC, abstractmethod
from typing import Optional, Union

from PIL import Image

from .interval import Interval
from .vec3 import Vec3

_BYTES_PER_PIXEL = 3
_MAGENTA = (255, 0, 255)
_GAMMA = 2.2
_UNIT = Interval(0.0, 1.0)


class Texture(ABC):
    """A colour that varies with surface coordinates and position."""

    @abstractmethod
    def value(self, u: float, v: float, p: Vec3) -> Vec3:
        """The colour at texture coordinates (u, v) and point p."""


class SolidColor(Texture):
    """The same colour everywhere."""

    def __init__(self, albedo: Vec3) -> None:
        self.albedo = albedo

    def __repr__(self) -> str:
        return f"SolidColor({self.albedo!r})"

    def value(self, u: float, v: float, p: Vec3) -> Vec3:
        return self.albedo


def _as_texture(texture: Union[Texture, Vec3]) -> Texture:
    return texture if isinstance(texture, Texture) else SolidColor(texture)


class CheckerTexture(Texture):
    """A 3D checkerboard alternating between two textures in cubes of side `scale`."""

    def __init__(
        self,
        scale: float,
        even: Union[Texture, Vec3],
        odd: Union[Texture, Vec3],
    ) -> None:
        self.inv_scale = 1.0 / scale
        self.even = _as_texture(even)
        self.odd = _as_texture(odd)

    def value(self, u: float, v: float, p: Vec3) -> Vec3:
        total = sum(math.floor(self.inv_scale * c) for c in p)
        chosen = self.even if total % 2 == 0 else self.odd
        return chosen.value(u, v, p)


def _float_to_byte(value: float) -> int:
    if value <= 0.0:
        return 0
    if value >= 1.0:
        return 255
    return int(256.0 * value)


def _clamp_index(x: int, low: int, high: int) -> int:
    if x < low:
        return low
    if x < high:
        return x
    return high - 1


class ImageData:
    """RGB pixel bytes read from an image file, linearised with gamma 2.2."""

    def __init__(self, filename: Optional[str] = None) -> None:
        self.filename = filename or ""
        self._width = 0
        self._height = 0
        self._data: Optional[bytes] = None
        if filename:
            try:
                self.load(filename)
            except OSError:
                print(
                    f"Error: could not load texture image file {filename}",
                    file=sys.stderr,
                )

    @property
    def width(self) -> int:
        return self._width if self._data is not None else 0

    @property
    def height(self) -> int:
        return self._height if self._data is not None else 0

    def load(self, filename: str) -> None:
        """Read an image file; raises OSError if it cannot be read."""
        self._data = None
        self._width = self._height = 0
        with Image.open(filename) as img:
            rgb = img.convert("RGB")
            raw = rgb.tobytes()
            width, height = rgb.size
        table = bytes(_float_to_byte((i / 255.0) ** _GAMMA) for i in range(256))
        self._data = raw.translate(table)
        self._width = width
        self._height = height
        self.filename = filename

    def pixel_data(self, x: int, y: int) -> tuple[int, int, int]:
        """The RGB bytes at (x, y), clamped to the image; magenta if nothing is loaded."""
        if self._data is None:
            return _MAGENTA
        x = _clamp_index(x, 0, self._width)
        y = _clamp_index(y, 0, self._height)
        offset = y * self._width * _BYTES_PER_PIXEL + x * _BYTES_PER_PIXEL
        r, g, b = self._data[offset:offset + _BYTES_PER_PIXEL]
        return (r, g, b)


class ImageTexture(Texture):
    """A texture mapped from an image by (u, v) coordinates."""

    def __init__(self, filename: str) -> None:
        self.image = ImageData(filename)

    def value(self, u: float, v: float, p: Vec3) -> Vec3:
        if self.image.height <= 0:
            return Vec3(0.0, 1.0, 1.0)
        u = _UNIT.clamp(u)
        v = 1.0 - _UNIT.clamp(v)
        i = int(u * self.image.width)
        j = int(v * self.image.height)
        r, g, b = self.image.pixel_data(i, j)
        scale = 1.0 / 255.0
        return Vec3(scale * r, scale * g, scale * b)