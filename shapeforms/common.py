"""Basic vertex data types and angle helpers shared across the package."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["Position", "Color", "Vertex", "Vec4", "degrees_to_radians"]


@dataclass
class Position:
    """Homogeneous position of a vertex."""

    x: float
    y: float
    z: float
    w: float


@dataclass
class Color:
    """RGBA colour of a vertex."""

    r: float
    g: float
    b: float
    a: float


@dataclass
class Vertex:
    """A vertex made of a position and a colour."""

    position: Position
    color: Color


@dataclass(frozen=True)
class Vec4:
    """An immutable four-component float vector."""

    x: float
    y: float
    z: float
    w: float

    def __post_init__(self) -> None:
        for name in ("x", "y", "z", "w"):
            object.__setattr__(self, name, float(getattr(self, name)))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __len__(self) -> int:
        return 4


def degrees_to_radians(angle: float) -> float:
    """Convert an angle in degrees to radians."""
    return angle * math.pi / 180