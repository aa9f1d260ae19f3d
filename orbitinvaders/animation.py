"""Sprite-sheet frames and frame-by-frame animations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from .bounds import Rect
from .vec import Vec, VecI


@dataclass(frozen=True)
class AnimationFrame:
    """A region of a texture shown for a fixed time."""

    rect: Rect
    duration: float

    def size(self) -> Vec:
        return Vec(self.rect.w, self.rect.h)


@dataclass(frozen=True)
class SheetFrameCalculator:
    """Computes frame rectangles in a grid-shaped sprite sheet."""

    size: VecI
    columns: int
    offset: VecI = VecI(0, 0)

    def rect(self, index: int) -> Rect:
        """Rectangle of the sprite at a grid index, counted row by row."""
        if index < 0:
            raise ValueError(f"sprite index must not be negative: {index}")
        row, column = divmod(index, self.columns)
        return Rect(
            float(self.offset.x + self.size.x * column),
            float(self.offset.y + self.size.y * row),
            float(self.size.x),
            float(self.size.y),
        )

    def frame(self, index: int, duration: float) -> AnimationFrame:
        return AnimationFrame(self.rect(index), duration)

    def frames(self, begin: int, count: int, duration: float) -> Tuple[AnimationFrame, ...]:
        """Consecutive frames starting at begin, all with the same duration."""
        return tuple(self.frame(index, duration) for index in range(begin, begin + count))


def total_duration(frames: Sequence[AnimationFrame]) -> float:
    """Sum of the durations of all frames."""
    return sum(frame.duration for frame in frames)


def total_duration_for_frames(frames: Sequence[AnimationFrame], first: int, count: int) -> float:
    """Sum of the durations of count frames starting at first."""
    return total_duration(frames[first:first + count])


class Animation:
    """Plays a sequence of frames, optionally looping."""

    def __init__(self, frames: Sequence[AnimationFrame], loopable: bool = True) -> None:
        self.set(frames, loopable)

    def set(self, frames: Sequence[AnimationFrame], loopable: bool = True) -> None:
        """Switch to a frame sequence and restart."""
        if not frames:
            raise ValueError("an animation needs at least one frame")
        self.frames = frames
        self.loopable = loopable
        self.restart()

    def ensure(self, frames: Sequence[AnimationFrame], loopable: bool = True) -> None:
        """Switch to a frame sequence unless it is already the current one."""
        if not self.is_set(frames):
            self.set(frames, loopable)

    def is_set(self, frames: Sequence[AnimationFrame]) -> bool:
        """True if this very sequence object is playing."""
        return frames is self.frames

    def restart(self) -> None:
        self.timer = 0.0
        self.current_frame = 0
        self.complete = False

    def update(self, dt: float) -> None:
        """Advance forwards by dt seconds."""
        self.timer += dt
        while self.timer > self.frames[self.current_frame].duration:
            self.timer -= self.frames[self.current_frame].duration
            if self.current_frame < len(self.frames) - 1:
                self.current_frame += 1
            elif self.loopable:
                self.current_frame = 0
            else:
                self.complete = True
                break

    def update_reverse(self, dt: float) -> None:
        """Advance backwards by dt seconds."""
        self.timer += dt
        while self.timer > self.frames[self.current_frame].duration:
            self.timer -= self.frames[self.current_frame].duration
            if self.current_frame > 0:
                self.current_frame -= 1
            elif self.loopable:
                self.current_frame = len(self.frames) - 1
            else:
                self.complete = True
                break

    def current_rect(self) -> Rect:
        return self.frames[self.current_frame].rect

    def current_duration(self) -> float:
        return self.frames[self.current_frame].duration

    def total_frames(self) -> int:
        return len(self.frames)

    def total_duration(self) -> float:
        return total_duration(self.frames)


def rect_at_time(frames: Sequence[AnimationFrame], time: float) -> Rect:
    """Rectangle of a looping animation after time seconds."""
    anim = Animation(frames)
    total = total_duration(frames)
    if time > total:
        time = math.fmod(time, total)
    anim.update(time)
    return anim.current_rect()