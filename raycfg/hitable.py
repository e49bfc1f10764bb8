"""Hit records, the hitable interface and lists of hitables."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from .ray import Ray
from .vec3 import Vec3

if TYPE_CHECKING:
    from .materials import Material


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    t: float
    p: Vec3
    normal: Vec3
    material: Optional[Material] = None
    u: float = 0.0
    v: float = 0.0


class Hitable(ABC):
    """Anything a ray can hit."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the hit with t in the open range (t_min, t_max), or None."""


class HitableList(Hitable):
    """A collection of hitables that reports the closest hit."""

    def __init__(self, objects: Iterable[Hitable] = ()) -> None:
        self._objects = tuple(objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Hitable]:
        return iter(self._objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        closest: Optional[HitRecord] = None
        closest_so_far = t_max
        for obj in self._objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest = rec
                closest_so_far = rec.t
        return closest

    def dump(self) -> str:
        """A listing of the objects, one per line."""
        lines = ["Hitable list:"]
        lines.extend(f"\t[{index}]: {obj!r}" for index, obj in enumerate(self._objects))
        return "\n".join(lines)