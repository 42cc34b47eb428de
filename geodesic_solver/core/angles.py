"""
Angle canonicalization and (sin, cos) pair helpers.

Angles in the solvers are carried as unit-norm (sin, cos) pairs rather
than bare radians; these helpers keep the pairs normalized and map
degree values into the canonical ranges.
"""
import math
import sys
from typing import Tuple

# Snap points for round_angle
_ROUND_TARGETS = (-180.0, -90.0, 0.0, 90.0, 180.0)


def normalize_angle(x: float) -> float:
    """
    Reduce an angle in degrees to the range (-180, 180].

    Works for any finite input, not only one revolution away. Negative
    zero is returned as positive zero.

    Example:
        >>> normalize_angle(-180.0)
        180.0
        >>> normalize_angle(540.0)
        180.0
        >>> normalize_angle(-190.0)
        170.0
    """
    y = math.fmod(x, 360.0)
    if y <= -180:
        y += 360
    elif y > 180:
        y -= 360
    return y + 0.0


def round_angle(x: float) -> float:
    """
    Snap an angle in degrees to -180, -90, 0, 90 or 180 when it is
    within one magnitude-scaled machine epsilon of it.

    Tiny non-zero angles such as 1e-200 become exactly zero, so the
    solvers never see an almost-but-not-quite meridian or equator.
    """
    for target in _ROUND_TARGETS:
        if abs(x - target) <= sys.float_info.epsilon * max(1.0, abs(target)):
            return target
    return x


def sincos_norm(s: float, c: float) -> Tuple[float, float]:
    """Scale (s, c) to unit length."""
    r = math.hypot(s, c)
    return s / r, c / r


def sincos_degrees(angle: float) -> Tuple[float, float]:
    """
    Sine and cosine of an angle in degrees, exact at multiples of 90.

    math.sin(math.radians(180)) is 1.2e-16 rather than 0; the solvers
    rely on the exact zeros to select the meridian and equatorial cases.
    """
    r = math.fmod(angle, 360.0)
    q = round(r / 90.0)
    if r == 90.0 * q:
        q %= 4
        return ((0.0, 1.0), (1.0, 0.0), (0.0, -1.0), (-1.0, 0.0))[q]
    rad = math.radians(angle)
    return math.sin(rad), math.cos(rad)


def atan2_degrees(y: float, x: float) -> float:
    """atan2 in degrees, canonicalized to (-180, 180]."""
    return normalize_angle(math.degrees(math.atan2(y, x)))
