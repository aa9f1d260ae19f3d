"""Multi-line text with inline colour codes, laid out from measured segments."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, NamedTuple, Optional, Sequence, Tuple

MAGIC_SEPARATOR = "\x05"
MAGIC_INDICATOR = "\x07"
COLOR_CODE_LENGTH = 6

Color = Tuple[int, int, int]
Measure = Callable[[str, Color], Tuple[float, float]]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class TextColor:
    """An inline colour change that can be concatenated with strings."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for c in (self.r, self.g, self.b):
            if not 0 <= c <= 255:
                raise ValueError(f"colour component out of range: {c}")

    @staticmethod
    def _sanitize(c: int) -> int:
        # Bytes that would break line or segment splitting are nudged by one.
        if c in (0, ord("\n"), ord(MAGIC_SEPARATOR)):
            return c + 1
        return c

    def encode(self) -> str:
        """The colour code as embedded in a string."""
        body = "".join(chr(self._sanitize(c)) for c in (self.r, self.g, self.b))
        return MAGIC_SEPARATOR + MAGIC_INDICATOR + body + MAGIC_SEPARATOR

    def __add__(self, other: Any) -> str:
        if isinstance(other, str):
            return self.encode() + other
        return NotImplemented

    def __radd__(self, other: Any) -> str:
        if isinstance(other, str):
            return other + self.encode()
        return NotImplemented


class Segment(NamedTuple):
    text: str
    color: Color


class PlacedSegment(NamedTuple):
    x: float
    y: float
    text: str
    color: Color


@dataclass
class TextLayout:
    """Total size of a rendered text and where each segment goes."""

    width: float
    height: float
    pieces: List[PlacedSegment] = field(default_factory=list)


def _split_lines(text: str, separator: str) -> List[str]:
    # Like reading with a delimiter: no trailing empty piece after a final separator.
    if not text:
        return []
    parts = text.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


def split_colored_rows(text: str, default_color: Color = WHITE) -> List[List[Segment]]:
    """Split text into rows of coloured segments; empty lines give empty rows.

    A colour change carries over to the following rows.
    """
    rows: List[List[Segment]] = []
    color: Color = tuple(default_color)  # type: ignore[assignment]
    for line in _split_lines(text, "\n"):
        row: List[Segment] = []
        for piece in _split_lines(line, MAGIC_SEPARATOR):
            if len(piece) == 4 and piece[0] == MAGIC_INDICATOR:
                color = (ord(piece[1]), ord(piece[2]), ord(piece[3]))
                continue
            if piece:
                row.append(Segment(piece, color))
        rows.append(row)
    return rows


def layout_rows(
    rows: Sequence[Sequence[Segment]],
    measure: Measure,
    spacing: float = 0,
    empty_line_spacing: float = 12,
    alignment: Alignment = Alignment.LEFT,
) -> TextLayout:
    """Place measured segments row by row; measure gives (width, height) of a segment."""
    measured = [[(seg, *measure(seg.text, seg.color)) for seg in row] for row in rows]

    if len(measured) == 1 and len(measured[0]) == 1:
        seg, w, h = measured[0][0]
        return TextLayout(w, h, [PlacedSegment(0, 0, seg.text, seg.color)])

    total_height: float = 0
    max_width: float = 0
    for row in measured:
        if not row:
            total_height += empty_line_spacing
            continue
        max_width = max(max_width, sum(w for _, w, _ in row))
        total_height += max(h for _, _, h in row) + spacing

    width = max_width if max_width != 0 else 1
    height = total_height if total_height != 0 else 1

    pieces: List[PlacedSegment] = []
    y: float = 0
    for row in measured:
        if not row:
            y += empty_line_spacing
            continue
        row_width = sum(w for _, w, _ in row)
        row_height = max(h for _, _, h in row)
        if alignment is Alignment.CENTER:
            x = (width - row_width) // 2
        elif alignment is Alignment.RIGHT:
            x = width - row_width
        else:
            x = 0
        for seg, w, _ in row:
            pieces.append(PlacedSegment(x, y, seg.text, seg.color))
            x += w
        y += row_height + spacing

    return TextLayout(width, height, pieces)


class Text:
    """A string with fonts, colours and spacing, whose layout is cached until changed."""

    def __init__(self, font: Any = None, font_outline: Any = None) -> None:
        self.font = font
        self.font_outline = font_outline
        self.color: Color = WHITE
        self.outline_color: Color = BLACK
        self.spacing = 0
        self.empty_line_spacing = 12
        self.alignment = Alignment.LEFT
        self._string = ""
        self._cached: Optional[TextLayout] = None

    @property
    def string(self) -> str:
        return self._string

    def _invalidate(self) -> None:
        self._cached = None

    def set_string(self, value: str) -> Text:
        if value != self._string:
            self._string = value
            self._invalidate()
        return self

    def set_font(self, font: Any, font_outline: Any = None) -> Text:
        if font is not self.font or font_outline is not self.font_outline:
            self.font = font
            self.font_outline = font_outline
            self._invalidate()
        return self

    def set_fill_color(self, r: int, g: int, b: int) -> Text:
        if (r, g, b) != self.color:
            self.color = (r, g, b)
            self._invalidate()
        return self

    def set_outline_color(self, r: int, g: int, b: int) -> Text:
        if (r, g, b) != self.outline_color:
            self.outline_color = (r, g, b)
            self._invalidate()
        return self

    def set_multiline_alignment(self, alignment: Alignment) -> Text:
        self.alignment = alignment
        return self

    def set_multiline_spacing(self, pixels: int) -> Text:
        if pixels != self.spacing:
            self.spacing = pixels
            self._invalidate()
        return self

    def set_empty_lines_spacing(self, pixels: int) -> Text:
        if pixels != self.empty_line_spacing:
            self.empty_line_spacing = pixels
            self._invalidate()
        return self

    def has_changes(self) -> bool:
        """True if the layout must be computed again."""
        return self._cached is None

    def layout(self, measure: Measure) -> TextLayout:
        """The layout of the current string, computed with measure if not cached."""
        if self._cached is None:
            rows = split_colored_rows(self._string, self.color)
            self._cached = layout_rows(
                rows, measure, self.spacing, self.empty_line_spacing, self.alignment
            )
        return self._cached