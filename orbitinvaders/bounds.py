"""Axis-aligned boxes and circles used for collision and placement."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from .vec import Vec


@dataclass(frozen=True)
class Rect:
    """A plain rectangle given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float


def _sqrt_or_nan(value: float) -> float:
    return math.sqrt(value) if value >= 0.0 else math.nan


@dataclass
class BoxBounds:
    """Axis-aligned box given by its top-left corner and size."""

    left: float = -1.0
    top: float = -1.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_center(cls, center: Vec, size: Vec) -> BoxBounds:
        """Box of the given size centred on a point."""
        top_left = center - size / 2
        return cls(top_left.x, top_left.y, size.x, size.y)

    @classmethod
    def from_origin(cls, pos: Vec, size: Vec, origin: Vec = Vec.ZERO) -> BoxBounds:
        """Box placed at pos, shifted back by an origin inside the box."""
        return cls(pos.x - origin.x, pos.y - origin.y, size.x, size.y)

    @classmethod
    def from_rect(cls, rect: Rect) -> BoxBounds:
        """Box covering a Rect."""
        return cls(rect.x, rect.y, rect.w, rect.h)

    def as_rect(self) -> Rect:
        return Rect(self.left, self.top, self.width, self.height)

    def scaled(self, factor: float) -> BoxBounds:
        """New box expanded around the centre by a factor."""
        center = self.center()
        ret = BoxBounds(self.left, self.top, self.width * factor, self.height * factor)
        ret.set_center(center)
        return ret

    def __mul__(self, factor: float) -> BoxBounds:
        if isinstance(factor, (int, float)):
            return self.scaled(factor)
        return NotImplemented

    def grow(self, x: float, y: float) -> None:
        """Expand in place around the centre by absolute amounts."""
        self.left -= x / 2
        self.top -= y / 2
        self.width += x
        self.height += y

    def grown(self, x: float, y: float) -> BoxBounds:
        """Copy expanded around the centre by absolute amounts."""
        ret = BoxBounds(self.left, self.top, self.width, self.height)
        ret.grow(x, y)
        return ret

    def center(self) -> Vec:
        return Vec(self.left + self.width / 2, self.top + self.height / 2)

    def area(self) -> float:
        return self.width * self.height

    def set_center(self, center: Vec) -> None:
        self.left = center.x - self.width / 2
        self.top = center.y - self.height / 2

    def set_top_and_bottom(self, top: float, bottom: float) -> None:
        self.top = top
        self.height = bottom - top

    def set_top_left(self, top_left: Vec) -> None:
        self.left = top_left.x
        self.top = top_left.y

    def right(self) -> float:
        return self.left + self.width

    def bottom(self) -> float:
        return self.top + self.height

    def top_left(self) -> Vec:
        return Vec(self.left, self.top)

    def top_right(self) -> Vec:
        return Vec(self.right(), self.top)

    def bottom_left(self) -> Vec:
        return Vec(self.left, self.bottom())

    def bottom_right(self) -> Vec:
        return Vec(self.right(), self.bottom())

    def size(self) -> Vec:
        return Vec(self.width, self.height)

    def contains_point(self, point: Vec) -> bool:
        """True if the point lies in the box; right and bottom edges excluded."""
        return (
            self.left <= point.x < self.left + self.width
            and self.top <= point.y < self.top + self.height
        )

    def contains_box(self, other: BoxBounds) -> bool:
        """True if the other box lies strictly within the right and bottom edges."""
        return (
            other.left >= self.left
            and other.left + other.width < self.left + self.width
            and other.top >= self.top
            and other.top + other.height < self.top + self.height
        )

    def closest_point(self, target: Vec) -> Vec:
        """Point of the box nearest to target."""
        half = self.size() / 2
        offset = (self.center() - target).clamped(-half, half)
        return self.center() - offset

    def distance_sq(self, other: Union[BoxBounds, CircleBounds]) -> float:
        """Squared gap to another shape; negative inside a circle."""
        if isinstance(other, CircleBounds):
            closest = self.closest_point(other.pos)
            return closest.distance_sq(other.pos) - other.radius * other.radius
        if isinstance(other, BoxBounds):
            sqr_dist = 0.0
            if other.right() < self.left:
                d = other.right() - self.left
                sqr_dist += d * d
            elif other.left > self.right():
                d = other.left - self.right()
                sqr_dist += d * d
            if other.bottom() < self.top:
                d = other.bottom() - self.top
                sqr_dist += d * d
            elif other.top > self.bottom():
                d = other.top - self.bottom()
                sqr_dist += d * d
            return sqr_dist
        raise TypeError(f"cannot measure distance to {type(other).__name__}")

    def distance(self, other: Union[BoxBounds, CircleBounds]) -> float:
        """Gap to another shape; NaN when it overlaps a circle."""
        return _sqrt_or_nan(self.distance_sq(other))

    def __str__(self) -> str:
        return f"{self.left:g} {self.top:g} {self.width:g} {self.height:g}"


@dataclass
class CircleBounds:
    """Circle given by its centre and radius."""

    pos: Vec
    radius: float

    def center(self) -> Vec:
        return self.pos

    def distance_sq(self, other: Union[BoxBounds, CircleBounds]) -> float:
        """Squared-distance measure to another shape; negative when overlapping."""
        if isinstance(other, BoxBounds):
            return other.distance_sq(self)
        if isinstance(other, CircleBounds):
            reach = other.radius + self.radius
            return other.pos.distance_sq(self.pos) - reach * reach
        raise TypeError(f"cannot measure distance to {type(other).__name__}")

    def distance(self, other: Union[BoxBounds, CircleBounds]) -> float:
        """Gap to another shape; negative when two circles overlap."""
        if isinstance(other, BoxBounds):
            return other.distance(self)
        if isinstance(other, CircleBounds):
            return other.pos.distance(self.pos) - (other.radius + self.radius)
        raise TypeError(f"cannot measure distance to {type(other).__name__}")

    def contains_point(self, point: Vec) -> bool:
        return self.pos.distance_sq(point) < self.radius * self.radius

    def enclosing_box(self) -> BoxBounds:
        """Smallest axis-aligned box around the circle."""
        return BoxBounds.from_center(self.center(), Vec(self.radius * 2, self.radius * 2))

    def __str__(self) -> str:
        return f"{self.pos} r={self.radius:g}"