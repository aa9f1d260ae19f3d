"""Random helpers: quick rolls on a shared generator and a seedable dice engine."""

from __future__ import annotations

import math
import random
from typing import Optional

from .angles import TAU
from .bounds import BoxBounds
from .vec import Vec

_rng = random.Random()


def roll_float(lo: float = 1.0, hi: Optional[float] = None) -> float:
    """Random float in [lo, hi]; with one argument, in [0, lo]."""
    if hi is None:
        lo, hi = 0.0, lo
    return lo + _rng.random() * (hi - lo)


def roll(lo: int, hi: Optional[int] = None) -> int:
    """Random integer in [lo, hi); with one argument, in [0, lo)."""
    if hi is None:
        lo, hi = 0, lo
    return _rng.randrange(lo, hi)


def once_every(n: int) -> bool:
    """True with probability 1/n."""
    return roll(0, n) == 0


def percent_chance(percent: int) -> bool:
    """True with the given percent probability."""
    return roll(0, 100) < percent


def dir_in_circle() -> Vec:
    """Unit vector in a random direction."""
    return Vec.from_angle_rads(roll_float(0.0, TAU))


def pos_inside_circle(radius: float) -> Vec:
    """Uniformly distributed point inside a circle around the origin."""
    while True:
        x = roll_float(-1.0, 1.0)
        y = roll_float(-1.0, 1.0)
        if x * x + y * y <= 1.0:
            return Vec(x, y) * radius


def vec_in_range(lo: Vec, hi: Vec) -> Vec:
    """Random vector with each component between lo and hi."""
    return Vec(roll_float(lo.x, hi.x), roll_float(lo.y, hi.y))


def vec_in_bounds(bounds: BoxBounds) -> Vec:
    """Random point inside a box."""
    return vec_in_range(bounds.top_left(), bounds.bottom_right())


class Dice:
    """Seedable Mersenne Twister generator with dice and gaussian rolls."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._gen = random.Random()
        self._spare: Optional[float] = None
        self.current_seed = 0
        self.seed(seed)

    def seed(self, seed: Optional[int] = None) -> None:
        """Reseed; without a seed, draw one from the system."""
        if seed is None:
            seed = random.SystemRandom().getrandbits(32)
        self.current_seed = seed
        self._gen.seed(seed)
        self._spare = None

    def flip_coin(self) -> int:
        """0 or 1."""
        return self._gen.randint(0, 1)

    def roll_1d(self, sides: int) -> int:
        """Integer in [0, sides - 1]."""
        return self._gen.randint(0, sides - 1)

    def uniform(self) -> float:
        """Float in [0, 1)."""
        return self._gen.random()

    def gaussian(self, mean: float = 0.0, standard_deviation: float = 1.0) -> float:
        """Normally distributed value, generated in pairs by the polar method."""
        if self._spare is not None:
            y1, self._spare = self._spare, None
        else:
            while True:
                x1 = 2.0 * self.uniform() - 1.0
                x2 = 2.0 * self.uniform() - 1.0
                w = x1 * x1 + x2 * x2
                if 0.0 < w < 1.0:
                    break
            w = math.sqrt((-2.0 * math.log(w)) / w)
            y1 = x1 * w
            self._spare = x2 * w
        return mean + y1 * standard_deviation