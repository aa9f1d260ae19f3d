"""Two-dimensional vectors, integer vectors, transforms and geometry helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Tuple, Union

from . import angles
from .mathutil import MAX_FLOAT, lerp

FLOAT_EPSILON = 1.1920928955078125e-07

CLOCKWISE = 1
ANTICLOCKWISE = -1

Number = Union[int, float]


@dataclass(frozen=True)
class VecI:
    """Integer 2D vector."""

    x: int
    y: int

    def __add__(self, other: VecI) -> VecI:
        return VecI(self.x + other.x, self.y + other.y)

    def __sub__(self, other: VecI) -> VecI:
        return VecI(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Vec:
    """Immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec]

    @classmethod
    def from_angle_rads(cls, rads: float, length: float = 1.0) -> Vec:
        """Vector pointing at the given angle in radians."""
        return cls(math.cos(rads) * length, math.sin(rads) * length)

    @classmethod
    def from_angle_degs(cls, degs: float, length: float = 1.0) -> Vec:
        """Vector pointing at the given angle in degrees."""
        return cls.from_angle_rads(angles.degs_to_rads(degs), length)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"{self.x:g},{self.y:g}"

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vec, Number]) -> Vec:
        if isinstance(other, Vec):
            return Vec(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vec:
        if isinstance(other, (int, float)):
            return Vec(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Union[Vec, Number]) -> Vec:
        if isinstance(other, Vec):
            return Vec(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vec(self.x / other, self.y / other)
        return NotImplemented

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vec:
        """Unit vector in the same direction, or the zero vector if too short."""
        vector_length = self.length()
        if vector_length > FLOAT_EPSILON:
            return Vec(self.x / vector_length, self.y / vector_length)
        return Vec()

    def dot(self, other: Vec) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec) -> float:
        return self.x * other.y - self.y * other.x

    def clamped(self, lo: Vec, hi: Vec) -> Vec:
        """Clamp each component into the box given by lo and hi."""
        x, y = self.x, self.y
        if x > hi.x:
            x = hi.x
        elif x < lo.x:
            x = lo.x
        if y > hi.y:
            y = hi.y
        elif y < lo.y:
            y = lo.y
        return Vec(x, y)

    def formatted(self) -> str:
        """Components with two decimals, comma separated."""
        return f"{self.x:.2f},{self.y:.2f}"

    def mirrored(self, mirror_x: bool, mirror_y: bool) -> Vec:
        return Vec(-self.x if mirror_x else self.x, -self.y if mirror_y else self.y)

    def sign(self, other: Vec) -> int:
        """CLOCKWISE if other is clockwise of this vector (Y pointing down)."""
        if self.y * other.x > self.x * other.y:
            return ANTICLOCKWISE
        return CLOCKWISE

    def angle_rads(self, other: Optional[Vec] = None) -> float:
        """Angle in [-PI, PI] of the line from this point to other."""
        other = Vec.ZERO if other is None else other
        return math.atan2(other.y - self.y, other.x - self.x)

    def angle_degs(self, other: Optional[Vec] = None) -> float:
        """Angle in [-180, 180] of the line from this point to other."""
        return angles.rads_to_degs(self.angle_rads(other))

    def rotated_rads(self, rads: float) -> Vec:
        """Rotate around the origin by an angle in radians."""
        cs = math.cos(rads)
        sn = math.sin(rads)
        return Vec(self.x * cs - self.y * sn, self.x * sn + self.y * cs)

    def rotated_degs(self, degrees: float) -> Vec:
        """Rotate around the origin by an angle in degrees."""
        return self.rotated_rads(angles.degs_to_rads(degrees))

    def rotated_to_face_rads(self, target: Vec, max_turn_rate_rads: float = MAX_FLOAT) -> Vec:
        """Rotate towards target, turning at most max_turn_rate_rads."""
        to_target = (target - self).normalized()
        heading = self.normalized()
        cosine = heading.dot(to_target)
        if not -1.0 <= cosine <= 1.0:
            return self
        angle = math.acos(cosine)
        if angle < 0.00001:
            return self
        if abs(angle) > max_turn_rate_rads:
            angle = max_turn_rate_rads
        return self.rotated_rads(angle * heading.sign(to_target))

    def rotated_to_face_degs(self, target: Vec, max_turn_rate_degs: Optional[float] = None) -> Vec:
        """Rotate towards target, turning at most max_turn_rate_degs."""
        if max_turn_rate_degs is None:
            return self.rotated_to_face_rads(target)
        return self.rotated_to_face_rads(target, angles.degs_to_rads(max_turn_rate_degs))

    def perp(self) -> Vec:
        """Perpendicular vector."""
        return Vec(-self.y, self.x)

    def truncated(self, max_length: float) -> Vec:
        """Shorten to max_length if longer."""
        if self.length() > max_length:
            return self.normalized() * max_length
        return self

    def distance(self, other: Vec) -> float:
        return math.sqrt(self.distance_sq(other))

    def distance_sq(self, other: Vec) -> float:
        dy = other.y - self.y
        dx = other.x - self.x
        return dy * dy + dx * dx

    def manhattan_distance(self, other: Vec) -> Vec:
        """Absolute per-axis separation."""
        return Vec(abs(other.x - self.x), abs(other.y - self.y))


Vec.ZERO = Vec(0.0, 0.0)


@dataclass(frozen=True)
class Transform(Vec):
    """Position with a rotation in degrees; arithmetic keeps rotation in [0, 360)."""

    rotation_degs: float = 0.0

    def __neg__(self) -> Transform:
        return Transform(-self.x, -self.y, 360.0 - self.rotation_degs)

    def __add__(self, other: Vec) -> Transform:
        if isinstance(other, Transform):
            return Transform(
                self.x + other.x,
                self.y + other.y,
                angles.wrap_degs(self.rotation_degs + other.rotation_degs),
            )
        if isinstance(other, Vec):
            return Transform(self.x + other.x, self.y + other.y, self.rotation_degs)
        return NotImplemented

    def __sub__(self, other: Vec) -> Vec:
        if isinstance(other, Transform):
            return Transform(
                self.x - other.x,
                self.y - other.y,
                angles.wrap_degs(self.rotation_degs - other.rotation_degs),
            )
        return super().__sub__(other)

    def __mul__(self, other: Number) -> Transform:
        if isinstance(other, (int, float)):
            return Transform(
                self.x * other, self.y * other, angles.wrap_degs(self.rotation_degs * other)
            )
        return NotImplemented

    def __rmul__(self, other: Number) -> Transform:
        return self.__mul__(other)

    def __truediv__(self, other: Number) -> Transform:
        if isinstance(other, (int, float)):
            return Transform(
                self.x / other, self.y / other, angles.wrap_degs(self.rotation_degs / other)
            )
        return NotImplemented


def distance(a: Vec, b: Vec) -> float:
    """Euclidean distance between two points."""
    return a.distance(b)


def distance_sq(a: Vec, b: Vec) -> float:
    """Squared Euclidean distance between two points."""
    return a.distance_sq(b)


def wrap_around(pos: Vec, max_x: float, max_y: float) -> Vec:
    """Wrap a position around the edges of a toroidal area."""
    x, y = pos.x, pos.y
    if x > max_x:
        x = 0.0
    if x < 0.0:
        x = max_x
    if y < 0.0:
        y = max_y
    if y > max_y:
        y = 0.0
    return Vec(x, y)


def is_second_in_fov_of_first(pos_first: Vec, facing_first: Vec, pos_second: Vec, fov: float) -> bool:
    """True if pos_second lies within the field of view (radians) of the first."""
    to_target = (pos_second - pos_first).normalized()
    return facing_first.dot(to_target) >= math.cos(fov / 2.0)


def line_intersection(a: Vec, b: Vec, c: Vec, d: Vec) -> Optional[Tuple[float, Vec]]:
    """Intersect segments AB and CD.

    Returns the distance along AB and the intersection point, or None.
    """
    r_top = (a.y - c.y) * (d.x - c.x) - (a.x - c.x) * (d.y - c.y)
    r_bot = (b.x - a.x) * (d.y - c.y) - (b.y - a.y) * (d.x - c.x)
    s_top = (a.y - c.y) * (b.x - a.x) - (a.x - c.x) * (b.y - a.y)
    s_bot = r_bot
    if r_bot == 0 or s_bot == 0:
        return None
    r = r_top / r_bot
    s = s_top / s_bot
    if 0 < r < 1 and 0 < s < 1:
        return a.distance(b) * r, a + r * (b - a)
    return None


def lerp_vec(start: Vec, end: Vec, t: float) -> Vec:
    """Component-wise linear interpolation."""
    return Vec(lerp(start.x, end.x, t), lerp(start.y, end.y, t))