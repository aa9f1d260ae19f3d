"""Debug logging and a queue of debug shapes drawn over the scene."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, TextIO, Tuple

from .bounds import BoxBounds, CircleBounds
from .vec import Vec

Color = Tuple[int, int, int]

RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)
CYAN: Color = (0, 255, 255)
MAGENTA: Color = (255, 0, 255)
YELLOW: Color = (255, 255, 0)
WHITE: Color = (255, 255, 255)


def _format_part(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    if isinstance(value, Vec):
        return f"{_format_part(float(value.x))},{_format_part(float(value.y))}"
    return str(value)


class DebugLog:
    """Writes lines prefixed with the current tick count."""

    def __init__(self, stream: Optional[TextIO] = None, ticks: int = 0) -> None:
        self.stream = stream
        self.ticks = ticks

    def log(self, *args: Any) -> None:
        """Write the arguments back to back on one line after 'ticks: '."""
        stream = self.stream if self.stream is not None else sys.stdout
        body = "".join(_format_part(arg) for arg in args)
        stream.write(f"{self.ticks}: {body}\n")


class ShapeKind(Enum):
    POINT = "point"
    ARROW = "arrow"
    BOX = "box"
    CIRCLE = "circle"


@dataclass(frozen=True)
class DebugShape:
    """A queued debug shape.

    For arrows pos is the vector and start its origin; for boxes pos is the
    top-left corner and start the bottom-right one.
    """

    kind: ShapeKind
    pos: Vec
    color: Color
    radius: float = -1.0
    start: Optional[Vec] = None


class DebugDrawQueue:
    """Collects debug shapes queued during update and draw.

    Shapes queued during update persist across frames that skip the update;
    shapes queued during draw are dropped after each draw.
    """

    def __init__(self, enabled: bool = False) -> None:
        self.enabled = enabled
        self.in_scene_draw = False
        self._points: List[DebugShape] = []
        self._arrows: List[DebugShape] = []
        self._bounds: List[DebugShape] = []
        self._marks: Optional[Tuple[int, int, int]] = None

    def _accepting(self) -> bool:
        return not (self.in_scene_draw and not self.enabled)

    def point(self, pos: Vec, color: Color = WHITE) -> None:
        if self._accepting():
            self._points.append(DebugShape(ShapeKind.POINT, pos, color))

    def arrow(self, vector: Vec, start: Vec, color: Color = WHITE) -> None:
        if self._accepting():
            self._arrows.append(DebugShape(ShapeKind.ARROW, vector, color, start=start))

    def box(self, bounds: BoxBounds, color: Color = RED) -> None:
        if self._accepting():
            self._bounds.append(
                DebugShape(ShapeKind.BOX, bounds.top_left(), color, start=bounds.bottom_right())
            )

    def circle(self, bounds: CircleBounds, color: Color = RED) -> None:
        if self._accepting():
            self._bounds.append(
                DebugShape(ShapeKind.CIRCLE, bounds.center(), color, radius=bounds.radius)
            )

    def before_update(self) -> None:
        """Forget all queued shapes; called before a scene update."""
        self._points.clear()
        self._arrows.clear()
        self._bounds.clear()

    def before_draw(self) -> None:
        """Mark the shapes queued so far; called before a scene draw."""
        self.in_scene_draw = True
        self._marks = (len(self._points), len(self._arrows), len(self._bounds))

    def after_draw(self) -> List[DebugShape]:
        """Return the shapes to draw (none when disabled) and drop those queued during draw."""
        if self._marks is None:
            raise RuntimeError("after_draw called without before_draw")
        self.in_scene_draw = False
        drawn: List[DebugShape] = []
        if self.enabled:
            drawn = [*self._points, *self._arrows, *self._bounds]
        points, arrows, bounds = self._marks
        del self._points[points:]
        del self._arrows[arrows:]
        del self._bounds[bounds:]
        return drawn