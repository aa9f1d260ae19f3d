"""Angle constants and conversions between degrees and radians."""

import math

TAU = 6.28318530718
PI = 3.14159265359


def degs_to_rads(degs: float) -> float:
    """Convert degrees to radians."""
    return TAU * (degs / 360.0)


def rads_to_degs(rads: float) -> float:
    """Convert radians to degrees."""
    return (rads * 360.0) / TAU


def wrap_degs(degs: float) -> float:
    """Bring an angle in degrees into [0, 360).

    Exact negative multiples of 360 come out as 360.
    """
    if degs >= 360.0:
        return math.fmod(degs, 360.0)
    if degs < 0.0:
        return 360.0 - math.fmod(-degs, 360.0)
    return degs


def wrap_rads(rads: float) -> float:
    """Bring an angle in radians into [0, TAU).

    Exact negative multiples of TAU come out as TAU.
    """
    if rads >= TAU:
        return math.fmod(rads, TAU)
    if rads < 0.0:
        return TAU - math.fmod(-rads, TAU)
    return rads