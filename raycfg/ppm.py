"""Binary PPM (P6) images."""

from __future__ import annotations

from pathlib import Path
from typing import Union

_MAX_VALUE = 255


class PpmImage:
    """An RGB image written as a binary PPM file.

    Channel values are kept as their low byte, so 256 is stored as 0.
    """

    def __init__(self, width: int, height: int, filename: str = "") -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self.filename = filename
        self._pixels = bytearray(width * height * 3)

    def __repr__(self) -> str:
        return f"PpmImage({self.width}, {self.height}, filename={self.filename!r})"

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def __getitem__(self, position: tuple[int, int]) -> tuple[int, int, int]:
        x, y = position
        if not self._in_bounds(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        offset = (y * self.width + x) * 3
        r, g, b = self._pixels[offset:offset + 3]
        return (r, g, b)

    def set_pixel(self, x: int, y: int, r: int, g: int, b: int) -> None:
        """Set the pixel at column x, row y; positions outside the image are ignored."""
        if not self._in_bounds(x, y):
            return
        offset = (y * self.width + x) * 3
        self._pixels[offset:offset + 3] = bytes((r & 0xFF, g & 0xFF, b & 0xFF))

    def to_bytes(self) -> bytes:
        """The whole file: header followed by the pixels, row by row."""
        header = f"P6\n{self.width} {self.height}\n{_MAX_VALUE}\n".encode("ascii")
        return header + bytes(self._pixels)

    def save(self, directory: Union[str, Path] = "screenshots") -> Path:
        """Write the image under directory, creating it if needed; returns the path."""
        if not self.filename:
            raise ValueError("no file name set for the image")
        folder = Path(directory)
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / self.filename
        path.write_bytes(self.to_bytes())
        return path