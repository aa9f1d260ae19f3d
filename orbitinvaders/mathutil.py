"""Small numeric helpers used throughout the engine."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

MAX_INT = 2**31 - 1
MIN_INT = -(2**31)
MAX_DOUBLE = 1.7976931348623157e308
MIN_DOUBLE = 2.2250738585072014e-308
MAX_FLOAT = 3.4028234663852886e38
MIN_FLOAT = 1.1754943508222875e-38


@dataclass(frozen=True)
class Range:
    """An ordered pair of values, low first."""

    low: float
    high: float


def is_zero(val: float) -> bool:
    """True if the value is within the smallest normal float of zero."""
    return -MIN_FLOAT < val < MIN_FLOAT


def in_range(start: float, end: float, val: float) -> bool:
    """True if val lies strictly between start and end, in either order."""
    if start < end:
        return start < val < end
    return end < val < start


def remap(x: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linearly map x from one interval onto another."""
    return (x - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def format_fixed(value: float, precision: int = 2) -> str:
    """Format a number with a fixed count of decimals."""
    return f"{value:.{precision}f}"


def to_hex(value: int) -> str:
    """Lower-case hexadecimal of a 32-bit integer; negatives wrap around."""
    return format(value & 0xFFFFFFFF, "x")


def each_period(period: float, total_time_before: float, dt: float) -> bool:
    """True if advancing the clock by dt crosses a multiple of period."""
    return int((total_time_before + dt) / period) != int(total_time_before / period)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def round_up_to_multiple_of(value: int, multiple: int) -> int:
    """Round up to a multiple, using truncating integer division."""
    return _trunc_div(value + multiple - 1, multiple) * multiple


def sigmoid(value: float, response: float = 1.0) -> float:
    """Logistic function of value scaled by response."""
    return 1.0 / (1.0 + math.exp(-value / response))


def clamp(value, lo, hi):
    """Clamp value into [lo, hi]."""
    if lo > hi:
        raise ValueError(f"empty clamp interval: {lo} > {hi}")
    if value < lo:
        value = lo
    if value > hi:
        value = hi
    return value


def clamp_max(value, hi):
    """Limit value from above."""
    return hi if value > hi else value


def clamp_min(value, lo):
    """Limit value from below."""
    return lo if value < lo else value


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation between start and end."""
    return start + (end - start) * t


def smooth_damp(current: float, target: float, dampening: float) -> float:
    """Weighted average that moves current towards target."""
    return ((current * (dampening - 1)) + target) / dampening


def round_under_offset(val: float, offset: float) -> int:
    """Round up when the fractional part (after truncation) reaches offset."""
    integral = int(val)
    mantissa = val - integral
    return integral if mantissa < offset else integral + 1


def rounded(val: float) -> int:
    """Round half up, based on the truncated fractional part."""
    return round_under_offset(val, 0.5)


def is_nearly_equal(a: float, b: float, margin: float = 1e-12) -> bool:
    """True if a and b differ by less than margin."""
    return abs(a - b) < margin


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of a non-empty sequence."""
    if not values:
        raise ValueError("average of an empty sequence")
    return sum(float(v) for v in values) / len(values)


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation of a non-empty sequence."""
    mean = average(values)
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))


def fast_floor(x: float) -> int:
    """Quick floor: truncates positives, truncates and subtracts one otherwise."""
    return int(x) if x > 0 else int(x) - 1


def sort_two(a: float, b: float) -> Range:
    """Return the two values ordered as a Range."""
    return Range(b, a) if a > b else Range(a, b)