"""A simple particle system with randomised spawn parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Tuple

from .bounds import Rect
from .rand import roll, roll_float, vec_in_range
from .vec import Vec


@dataclass
class Particle:
    """One particle; its motion is driven by the owning system."""

    sprite: int = 0
    pos: Vec = field(default_factory=Vec)
    vel: Vec = field(default_factory=Vec)
    ttl: float = 0.0
    scale: float = 1.0
    rotation: float = 0.0
    rotation_vel: float = 0.0
    alpha: float = 1.0

    def update(self, dt: float, system: ParticleSystem) -> bool:
        """Advance by dt; returns True when the particle should be removed."""
        self.ttl -= dt
        if self.ttl < 0:
            return True
        self.vel = self.vel + system.acc * dt
        self.pos = self.pos + self.vel * dt
        self.scale += system.scale_vel * dt
        if self.scale < 0.0:
            if system.scale_vel < 0.0:
                return True
            self.scale = 0.0001
        self.rotation += self.rotation_vel * dt
        self.alpha += system.alpha_vel * dt
        if self.alpha < 0.0:
            if system.alpha_vel < 0.0:
                return True
            self.alpha = 0.0
        elif system.bounce_alpha > 0:
            if self.alpha > 2 * system.bounce_alpha:
                return True
        elif self.alpha > 1.0:
            self.alpha = 1.0
        return False


@dataclass
class ParticleSystem:
    """Spawns and moves particles sharing one texture."""

    texture: Any = None
    pos: Vec = field(default_factory=Vec)
    max_vel: Vec = field(default_factory=Vec)
    min_vel: Vec = field(default_factory=Vec)
    acc: Vec = field(default_factory=Vec)
    min_ttl: float = 1.0
    max_ttl: float = 1.0
    min_interval: float = 0.2
    max_interval: float = 0.2
    min_scale: float = 1.0
    max_scale: float = 1.0
    scale_vel: float = 0.0
    min_rotation: float = 0.0
    max_rotation: float = 0.0
    min_rotation_vel: float = 0.0
    max_rotation_vel: float = 0.0
    alpha: float = 1.0
    alpha_vel: float = 0.0
    bounce_alpha: float = -1.0
    time: float = 0.0
    particles: List[Particle] = field(default_factory=list)
    sprites: List[Rect] = field(default_factory=list)

    def add_sprite(self, rect: Rect) -> None:
        self.sprites.append(rect)

    def spawn(self, dt: float) -> None:
        """Spawn particles at the configured interval using the internal timer."""
        self.time = self.spawn_with_timer(self.time, dt)

    def spawn_with_timer(self, timer: float, dt: float) -> float:
        """Spawn particles driven by an external timer; returns the updated timer."""
        if self.max_interval <= 0.0:
            raise ValueError("max_interval must be positive to spawn particles")
        timer += dt
        while timer > 0:
            self.add_particle()
            timer -= roll_float(self.min_interval, self.max_interval)
        return timer

    def update_particles(self, dt: float) -> None:
        """Move existing particles and drop the expired ones; spawns nothing."""
        self.particles[:] = [p for p in self.particles if not p.update(dt, self)]

    def add_particle(self) -> Particle:
        """Create one particle with randomised parameters."""
        if not self.sprites:
            raise ValueError("the particle system has no sprites")
        particle = Particle(
            ttl=roll_float(self.min_ttl, self.max_ttl),
            pos=self.pos,
            vel=vec_in_range(self.min_vel, self.max_vel),
            sprite=roll(len(self.sprites)),
            rotation=roll_float(self.min_rotation, self.max_rotation),
            rotation_vel=roll_float(self.min_rotation_vel, self.max_rotation_vel),
            scale=roll_float(self.min_scale, self.max_scale),
            alpha=self.alpha,
        )
        self.particles.append(particle)
        return particle

    def add_particles(self, n: int) -> None:
        for _ in range(n):
            self.add_particle()

    def clear(self) -> None:
        self.particles.clear()

    def flip_x(self) -> None:
        """Mirror horizontal velocities, acceleration and spin."""
        self.min_vel, self.max_vel = (
            Vec(-self.max_vel.x, self.min_vel.y),
            Vec(-self.min_vel.x, self.max_vel.y),
        )
        self.acc = Vec(-self.acc.x, self.acc.y)
        self.min_rotation_vel, self.max_rotation_vel = (
            -self.max_rotation_vel,
            -self.min_rotation_vel,
        )

    def render_items(self) -> Iterator[Tuple[Vec, Rect, float, float, float]]:
        """Yield (position, sprite rect, scale, rotation in degrees, alpha) per particle.

        The sprite is meant to be drawn around its centre; alpha is in [0, 1]
        with the bounce applied.
        """
        for p in self.particles:
            alpha = p.alpha
            if self.bounce_alpha > 0.0 and alpha > self.bounce_alpha:
                alpha = 2 * self.bounce_alpha - alpha
            yield p.pos, self.sprites[p.sprite], p.scale, p.rotation, alpha