"""
Geometry helpers: 2D vectors and axis-aligned rectangles
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class Vector:
    """2D point or direction"""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Vector":
        return Vector(self.x * k, self.y * k)

    __rmul__ = __mul__

    def length(self) -> float:
        """Calculate vector length (magnitude)"""
        return math.hypot(self.x, self.y)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y

    def normalize(self) -> "Vector":
        """Unit vector in the same direction. The vector must be non-zero."""
        magnitude = math.sqrt(self.x * self.x + self.y * self.y)
        return Vector(self.x / magnitude, self.y / magnitude)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned bounding box anchored at its top-left corner"""
    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def intersects(self, other: "Rect") -> bool:
        """Overlap on both axes; touching edges count"""
        return (
            self.x <= other.max_x
            and other.x <= self.max_x
            and self.y <= other.max_y
            and other.y <= self.max_y
        )


def intersects(a: Rect, b: Rect) -> bool:
    return a.intersects(b)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Seedable random source for the spawner"""
    return np.random.default_rng(seed)
