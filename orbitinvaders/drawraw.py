"""Batching of quads into flat vertex and index arrays for triangle drawing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .bounds import Rect

MAX_VERTICES = 60000
MAX_INDICES = (MAX_VERTICES // 4) * 6
BLEED_MARGIN = 0.1


class BatchLayout(Enum):
    """Vertex formats, valued by their number of components."""

    XY_ST = 4
    XY_RGB = 5
    XY_ST_RGBA = 8

    @property
    def components(self) -> int:
        return self.value


@dataclass(frozen=True)
class Batch:
    """A flushed set of quads ready to be drawn as triangles."""

    layout: Optional[BatchLayout]
    vertices: Tuple[float, ...]
    indices: Tuple[int, ...]
    texture: Any = None

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // self.layout.components if self.layout else 0


class QuadBatch:
    """Accumulates quads of one vertex format and hands them to a sink when flushed.

    Without a sink, flushed batches collect in the flushed list.
    """

    def __init__(
        self,
        texture: Any = None,
        sink: Optional[Callable[[Batch], Any]] = None,
        max_vertices: int = MAX_VERTICES,
    ) -> None:
        if max_vertices < 8:
            raise ValueError("max_vertices must allow at least two quads")
        self.texture = texture
        self.max_vertices = max_vertices
        self.flushed: List[Batch] = []
        self._sink = sink if sink is not None else self.flushed.append
        self._layout: Optional[BatchLayout] = None
        self._vertices: List[float] = []
        self._indices: List[int] = []
        self.vertex_count = 0

    @property
    def index_count(self) -> int:
        return len(self._indices)

    def _add_quad(self, layout: BatchLayout, corners: Sequence[Sequence[float]]) -> None:
        if self._layout is not None and self._layout is not layout:
            raise ValueError(f"cannot mix {layout.name} quads into a {self._layout.name} batch")
        self._layout = layout
        base = self.vertex_count
        for corner in corners:
            self._vertices.extend(corner)
        self._indices.extend((base, base + 1, base + 2, base, base + 2, base + 3))
        self.vertex_count += 4
        if self.vertex_count + 4 >= self.max_vertices:
            self.flush()

    def batch_textured_quad(self, x: float, y: float, w: float, h: float, rect: Rect) -> None:
        """Add a textured quad; rect is in texture coordinates between 0 and 1."""
        self._add_quad(
            BatchLayout.XY_ST,
            [
                (x, y + h, rect.x, rect.y + rect.h),
                (x, y, rect.x, rect.y),
                (x + w, y, rect.x + rect.w, rect.y),
                (x + w, y + h, rect.x + rect.w, rect.y + rect.h),
            ],
        )

    def batch_colored_textured_quad(
        self, x: float, y: float, w: float, h: float, rect: Rect,
        r: float, g: float, b: float, a: float,
    ) -> None:
        """Add a tinted textured quad; colours and texture coordinates between 0 and 1."""
        self._add_quad(
            BatchLayout.XY_ST_RGBA,
            [
                (x, y + h, rect.x, rect.y + rect.h, r, g, b, a),
                (x, y, rect.x, rect.y, r, g, b, a),
                (x + w, y, rect.x + rect.w, rect.y, r, g, b, a),
                (x + w, y + h, rect.x + rect.w, rect.y + rect.h, r, g, b, a),
            ],
        )

    def batch_rgb_quad(
        self, x: float, y: float, w: float, h: float, r: float, g: float, b: float
    ) -> None:
        """Add a flat-coloured quad; colours between 0 and 1."""
        self._add_quad(
            BatchLayout.XY_RGB,
            [
                (x, y + h, r, g, b),
                (x, y, r, g, b),
                (x + w, y, r, g, b),
                (x + w, y + h, r, g, b),
            ],
        )

    def flush(self) -> Batch:
        """Hand the accumulated quads to the sink and start over."""
        batch = Batch(self._layout, tuple(self._vertices), tuple(self._indices), self.texture)
        self._layout = None
        self._vertices = []
        self._indices = []
        self.vertex_count = 0
        self._sink(batch)
        return batch


def fix_texture_bleeding(rect: Rect) -> Rect:
    """Shrink a texture rectangle slightly so neighbouring sprites do not bleed in."""
    e = BLEED_MARGIN
    return Rect(rect.x + e, rect.y + e, rect.w - 2 * e, rect.h - 2 * e)


def rect_to_texture_coordinates(rect: Rect, texture_w: float, texture_h: float) -> Rect:
    """Pixel rectangle to normalised texture coordinates, with the bleeding fix."""
    if texture_w <= 0 or texture_h <= 0:
        raise ValueError("texture size must be positive")
    fixed = fix_texture_bleeding(rect)
    return Rect(fixed.x / texture_w, fixed.y / texture_h, fixed.w / texture_w, fixed.h / texture_h)