"""A grid of tiles with bounds-checked access and view culling."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple

from .bounds import BoxBounds
from .vec import VecI


class TileMap:
    """Rectangular tile grid; tiles outside it read as out_of_bounds_tile."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        tile_size: int = 16,
        empty_tile: Any = 0,
        out_of_bounds_tile: Any = None,
        is_invisible: Optional[Callable[[Any], bool]] = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"negative map size: {width}x{height}")
        self._width = width
        self._height = height
        self.tile_size = tile_size
        self.empty_tile = empty_tile
        self.out_of_bounds_tile = empty_tile if out_of_bounds_tile is None else out_of_bounds_tile
        self.is_invisible = is_invisible or (lambda tile: tile == self.empty_tile)
        self._tiles: List[Any] = [empty_tile] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> VecI:
        return VecI(self._width, self._height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set_tile(self, x: int, y: int, tile: Any) -> None:
        """Set a tile; positions outside the map are ignored."""
        if self.in_bounds(x, y):
            self._tiles[y * self._width + x] = tile

    def get_tile(self, x: int, y: int) -> Any:
        """The tile at a position, or out_of_bounds_tile outside the map."""
        if not self.in_bounds(x, y):
            return self.out_of_bounds_tile
        return self._tiles[y * self._width + x]

    def load(self, rows: Sequence[Sequence[Any]]) -> None:
        """Replace all tiles from rows of exactly the map's size."""
        if len(rows) != self._height or any(len(row) != self._width for row in rows):
            raise ValueError(f"tile data does not match the map size {self._width}x{self._height}")
        self._tiles = [tile for row in rows for tile in row]

    def bounds_in_world(self) -> BoxBounds:
        return BoxBounds(0.0, 0.0, self._width * self.tile_size, self._height * self.tile_size)

    def _view_range(self, screen: BoxBounds) -> Tuple[int, int, int, int]:
        s = self.tile_size
        return (
            int(screen.left / s - 1),
            int(screen.right() / s + 1),
            int(screen.top / s - 1),
            int(screen.bottom() / s + 1),
        )

    def visible_tiles(self, screen: BoxBounds) -> Iterator[Tuple[int, int, Any]]:
        """Yield (x, y, tile) for visible map tiles around the screen area."""
        left, right, top, bottom = self._view_range(screen)
        left = max(left, 0)
        top = max(top, 0)
        if right >= self._width:
            right = self._width
        if bottom >= self._height:
            bottom = self._height
        for y in range(top, bottom):
            for x in range(left, right):
                tile = self._tiles[y * self._width + x]
                if not self.is_invisible(tile):
                    yield x, y, tile

    def out_of_bounds_cells(self, screen: BoxBounds) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) of cells outside the map that are drawn with out_of_bounds_tile.

        Nothing is yielded when out_of_bounds_tile is the empty tile.
        """
        if self.out_of_bounds_tile == self.empty_tile:
            return
        left, right, top, bottom = self._view_range(screen)
        if left < 0:
            for y in range(top, bottom):
                for x in range(left, min(0, right)):
                    yield x, y
            left = 0
        if right >= self._width:
            for y in range(top, bottom):
                for x in range(max(left, self._width), right):
                    yield x, y
            right = self._width
        if top < 0:
            for y in range(top, min(0, bottom)):
                for x in range(left, right):
                    yield x, y
            top = 0
        if bottom >= self._height:
            for y in range(max(top, self._height), bottom):
                for x in range(left, right):
                    yield x, y