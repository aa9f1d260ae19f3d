"""Basic game entities with a position, velocity and collision shape."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bounds import BoxBounds, CircleBounds
from .vec import Vec


@dataclass(eq=False)
class Entity:
    """Something in the world with a position and a velocity."""

    pos: Vec = field(default_factory=Vec)
    vel: Vec = field(default_factory=Vec)
    alive: bool = True


@dataclass(eq=False)
class BoxEntity(Entity):
    """Entity with a box shape centred on its position."""

    size: Vec = field(default_factory=Vec)

    @classmethod
    def from_bounds(cls, bounds: BoxBounds) -> BoxEntity:
        """Entity occupying the given box."""
        return cls(pos=bounds.center(), size=bounds.size())

    def bounds(self) -> BoxBounds:
        return BoxBounds.from_center(self.pos, self.size)


@dataclass(eq=False)
class CircleEntity(Entity):
    """Entity with a circular shape centred on its position."""

    radius: float = 8.0

    def bounds(self) -> CircleBounds:
        return CircleBounds(self.pos, self.radius)