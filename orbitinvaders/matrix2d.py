"""3x3 matrices for 2D affine transforms, using row vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .vec import Vec


@dataclass
class Matrix:
    """Mutable 2D transform matrix, the identity by default."""

    m11: float = 1.0
    m12: float = 0.0
    m13: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m23: float = 0.0
    m31: float = 0.0
    m32: float = 0.0
    m33: float = 1.0

    def _rows(self) -> List[List[float]]:
        return [
            [self.m11, self.m12, self.m13],
            [self.m21, self.m22, self.m23],
            [self.m31, self.m32, self.m33],
        ]

    def _set_rows(self, rows: Sequence[Sequence[float]]) -> None:
        (self.m11, self.m12, self.m13), (self.m21, self.m22, self.m23), (
            self.m31,
            self.m32,
            self.m33,
        ) = rows

    def identity(self) -> Matrix:
        """Reset to the identity matrix."""
        self._set_rows([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
        return self

    def zero(self) -> Matrix:
        """Set every entry to zero."""
        self._set_rows([[0.0] * 3 for _ in range(3)])
        return self

    def multiply(self, other: Matrix) -> Matrix:
        """Replace this matrix with this times other."""
        columns = list(zip(*other._rows()))
        self._set_rows(
            [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self._rows()]
        )
        return self

    def translate(self, x: float, y: float) -> Matrix:
        return self.multiply(Matrix(m31=x, m32=y))

    def scale(self, x_scale: float, y_scale: float) -> Matrix:
        return self.multiply(Matrix(m11=x_scale, m22=y_scale))

    def rotate(self, rotation: float) -> Matrix:
        """Rotate by an angle in radians."""
        sin = math.sin(rotation)
        cos = math.cos(rotation)
        return self.multiply(Matrix(m11=cos, m12=sin, m21=-sin, m22=cos))

    def rotate_to(self, fwd: Vec, side: Vec) -> Matrix:
        """Rotate onto the axes given by a forward and a side vector."""
        return self.multiply(Matrix(m11=fwd.x, m12=fwd.y, m21=side.x, m22=side.y))

    def transform(self, point: Vec) -> Vec:
        """Apply the transform to a point."""
        return Vec(
            self.m11 * point.x + self.m21 * point.y + self.m31,
            self.m12 * point.x + self.m22 * point.y + self.m32,
        )

    def transform_all(self, points: Iterable[Vec]) -> List[Vec]:
        """Apply the transform to several points."""
        return [self.transform(p) for p in points]


def point_to_world_space(point: Vec, heading: Vec, position: Vec) -> Vec:
    """Transform a point from an agent's local space into world space."""
    matrix = Matrix().rotate_to(heading, heading.perp()).translate(position.x, position.y)
    return matrix.transform(point)


def vector_to_world_space(point: Vec, heading: Vec) -> Vec:
    """Transform a direction from an agent's local space into world space."""
    return Matrix().rotate_to(heading, heading.perp()).transform(point)


def point_to_local_space(point: Vec, heading: Vec, position: Vec) -> Vec:
    """Transform a world point into an agent's local space."""
    side = heading.perp()
    matrix = Matrix(
        m11=heading.x,
        m12=side.x,
        m21=heading.y,
        m22=side.y,
        m31=-position.dot(heading),
        m32=-position.dot(side),
    )
    return matrix.transform(point)


def vector_to_local_space(point: Vec, heading: Vec, side: Vec) -> Vec:
    """Transform a world direction into an agent's local space."""
    matrix = Matrix(m11=heading.x, m12=side.x, m21=heading.y, m22=side.y)
    return matrix.transform(point)