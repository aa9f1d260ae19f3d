"""Frame timing for the main loop: capped delta time, game clock and FPS counter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MIN_DT = 0.06
FPS_REFRESH_SECONDS = 0.5


@dataclass(frozen=True)
class FrameTiming:
    """Timing of one frame: the capped dt, the real elapsed time and whether it was capped."""

    dt: float
    uncapped_dt: float
    slowed: bool


class FrameClock:
    """Turns tick counts into frame timings and keeps the game clock.

    Long frames are capped at MIN_DT so the game slows down instead of jumping.
    """

    def __init__(self, last_ticks: int = 0) -> None:
        self.last_ticks = last_ticks
        self.main_clock = 0.0
        self.main_clock_paused = False
        self.fast_forward = False
        self._fps_counter = 0
        self._fps_clock = 0.0

    def tick(self, ticks_ms: int) -> FrameTiming:
        """Start a frame at ticks_ms milliseconds and advance the game clock."""
        uncapped = (ticks_ms - self.last_ticks) / 1000.0
        self.last_ticks = ticks_ms
        dt = uncapped
        slowed = False
        if uncapped > MIN_DT:
            dt = MIN_DT
            slowed = True
        if self.fast_forward:
            dt = MIN_DT
        if not self.main_clock_paused:
            self.main_clock += dt
        return FrameTiming(dt, uncapped, slowed)

    def fps_sample(self, uncapped_dt: float, slowed: bool) -> Optional[str]:
        """Count a frame; every half second returns the FPS text, marked '!' if slowed."""
        self._fps_counter += 1
        self._fps_clock += uncapped_dt
        if self._fps_clock > FPS_REFRESH_SECONDS:
            text = str(int(self._fps_counter / self._fps_clock)) + ("!" if slowed else "")
            self._fps_counter = 0
            self._fps_clock = 0.0
            return text
        return None