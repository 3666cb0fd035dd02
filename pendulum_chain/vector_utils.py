#!/usr/bin/env python3
"""
Vector and angle helper functions for 2D operations.

These are small, fast functions for vector math used throughout the app.
"""
import math
from typing import Tuple

from .constants import FULL_RADIANS


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def vec_sub(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
    return (a[0] - b[0], a[1] - b[1])


def vec_len(a: Tuple[float, float]) -> float:
    return math.hypot(a[0], a[1])


def polar_offset(origin: Tuple[float, float], angle: float, length: float) -> Tuple[float, float]:
    """Point at `length` from `origin` in direction `angle` (radians)."""
    return (origin[0] + math.cos(angle) * length, origin[1] + math.sin(angle) * length)


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


def normalize_angle(radians: float) -> float:
    """Wrap an angle into [0, 2*pi)."""
    wrapped = (FULL_RADIANS + radians % FULL_RADIANS) % FULL_RADIANS
    # -tiny % 2pi can round up to exactly 2pi
    return 0.0 if wrapped >= FULL_RADIANS else wrapped
