"""Geometric predicates over triangles, boxes and circles.

Boxes use canvas coordinates: ``top`` grows downward and ``left`` grows to
the right, so a box spans ``[left, left + width) x [top, top + height)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Point:
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Circle:
        return cls(center=Point.from_dict(data["center"]), radius=data["radius"])


@dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle positioned on the canvas."""

    top: float
    left: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Box:
        return cls(
            top=data["top"],
            left=data["left"],
            width=data["width"],
            height=data["height"],
        )


def is_triangle(a: float, b: float, c: float) -> bool:
    """True if sides *a*, *b*, *c* satisfy the strict triangle inequality."""
    return a < b + c and b < a + c and c < a + b


def do_rectangles_overlap(first: Box, second: Box) -> bool:
    """True if the two boxes share interior area; touching edges do not count."""
    return (
        first.left < second.right
        and first.right > second.left
        and first.top < second.bottom
        and first.bottom > second.top
    )


def is_inside_circle(circle: Circle, point: Point) -> bool:
    distance = math.hypot(point.x - circle.center.x, point.y - circle.center.y)
    return distance < circle.radius
