#!/usr/bin/env python3
"""
General utilities for Pendulum Chain.
"""
import math
from typing import Optional

from .errors import InvalidGeometry


def try_float(val) -> Optional[float]:
    try:
        result = float(val)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result


def try_int(val) -> Optional[int]:
    f = try_float(val)
    if f is None:
        return None
    return int(f)


def coerce_color(c, default=(255, 255, 255)):
    """Turn any RGB(A) sequence into an (r, g, b) tuple clamped to 0..255."""
    try:
        r, g, b = int(c[0]), int(c[1]), int(c[2])
    except (TypeError, ValueError, IndexError):
        return default
    r = max(0, min(255, r)); g = max(0, min(255, g)); b = max(0, min(255, b))
    return (r, g, b)


def require_finite(name: str, value) -> float:
    """float(value), raising InvalidGeometry for non-numbers, NaN and infinities."""
    try:
        result = float(value)
    except (TypeError, ValueError):
        raise InvalidGeometry(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(result):
        raise InvalidGeometry(f"{name} must be finite, got {value!r}")
    return result
