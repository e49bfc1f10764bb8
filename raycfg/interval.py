"""Closed real intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Interval:
    """The interval [min, max]; the default is empty."""

    min: float = math.inf
    max: float = -math.inf

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> Interval:
        """Widen by delta, half on each side."""
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)


def enclosing(a: Interval, b: Interval) -> Interval:
    """The smallest interval that holds both a and b."""
    return Interval(min(a.min, b.min), max(a.max, b.max))


EMPTY = Interval(math.inf, -math.inf)
UNIVERSE = Interval(-math.inf, math.inf)