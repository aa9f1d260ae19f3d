"""Overlap tests between shapes and entities."""

from __future__ import annotations

from itertools import combinations
from typing import Any, Iterator, List, Sequence, Tuple, Union

from .bounds import BoxBounds, CircleBounds
from .entity import BoxEntity, CircleEntity

Shape = Union[BoxBounds, CircleBounds]


def _as_shape(obj: Any) -> Shape:
    if isinstance(obj, (BoxBounds, CircleBounds)):
        return obj
    if isinstance(obj, (BoxEntity, CircleEntity)):
        return obj.bounds()
    raise TypeError(f"cannot collide {type(obj).__name__}")


def collide(a: Any, b: Any) -> bool:
    """True if two shapes, or the shapes of two entities, overlap."""
    a = _as_shape(a)
    b = _as_shape(b)
    if isinstance(a, BoxBounds) and isinstance(b, BoxBounds):
        return (
            a.left < b.left + b.width
            and a.left + a.width > b.left
            and a.top < b.top + b.height
            and a.top + a.height > b.top
        )
    if isinstance(a, CircleBounds) and isinstance(b, CircleBounds):
        return a.distance_sq(b) < 0
    return b.distance_sq(a) < 0


def colliding_pairs(set_a: Sequence[Any], set_b: Sequence[Any]) -> Iterator[Tuple[Any, Any]]:
    """Yield each colliding (a, b) pair across two collections, skipping an object paired with itself."""
    for a in set_a:
        for b in set_b:
            if a is b:
                continue
            if collide(a, b):
                yield a, b


def colliding_pairs_within(items: Sequence[Any]) -> Iterator[Tuple[Any, Any]]:
    """Yield each colliding pair within one collection, each pair once."""
    yield from (pair for pair in combinations(items, 2) if collide(*pair))


def self_collide(items: List[Any]) -> None:
    """Set colliding_with on every item to one item it overlaps, or None."""
    for item in items:
        item.colliding_with = None
    for index, a in enumerate(items):
        for b in items[index + 1:]:
            if collide(a, b):
                a.colliding_with = b
                b.colliding_with = a
                break