#!/usr/bin/env python3
"""
Segment: one rotating link of a pendulum chain.

A segment rotates around its base at a constant angular speed; its end is the
base of the next segment, if there is one.

Propagation
- set_base, set_length, set_angle and set_next re-anchor every descendant
  before returning, so after any of them `s.next.base == s.end` holds along
  the whole chain.
- update() advances the angle of this segment and of every descendant in one
  walk. It writes each successor's base directly instead of going through
  set_base, since that successor is advanced right after anyway.

Both walks are iterative, so chain length is not bounded by the recursion
limit.
"""
import math
from typing import Optional, Tuple

from .constants import (
    DEFAULT_BALL_COLOR,
    DEFAULT_BALL_RADIUS,
    DEFAULT_LINE_COLOR,
    DEFAULT_LINE_WIDTH,
    FULL_RADIANS,
    TICK_SCALE,
)
from .errors import InvalidLink
from .utils import coerce_color, require_finite
from .vector_utils import normalize_angle, polar_offset, to_degrees, to_radians


class Segment:
    """
    A rigid link anchored at (base_x, base_y).

    Attributes (read through properties, written through set_* methods):
        base_x, base_y: anchor point in world units.
        length: distance from base to end.
        angle: angular position in radians, not normalized.
        angular_velocity: speed units per tick; one unit is TICK_SCALE radians.
        next: the segment whose base this segment's end drives, or None.

    Plain display attributes: line_color, line_width, ball_color, ball_radius.
    """

    def __init__(self, base_x: float, base_y: float, length: float,
                 angular_velocity: float, angle: float = 0.0):
        self._base_x = require_finite("base_x", base_x)
        self._base_y = require_finite("base_y", base_y)
        self._length = require_finite("length", length)
        self._angle = require_finite("angle", angle)
        self._angular_velocity = require_finite("angular_velocity", angular_velocity)
        self._next: Optional["Segment"] = None

        self.line_color = DEFAULT_LINE_COLOR
        self.line_width = DEFAULT_LINE_WIDTH
        self.ball_color = DEFAULT_BALL_COLOR
        self.ball_radius = DEFAULT_BALL_RADIUS

    def __repr__(self) -> str:
        return (f"Segment(base=({self._base_x:.3f}, {self._base_y:.3f}), "
                f"length={self._length:.3f}, angle={self._angle:.4f}, "
                f"angular_velocity={self._angular_velocity:.3f})")

    # -----------------------
    # Read access
    # -----------------------

    @property
    def base_x(self) -> float:
        return self._base_x

    @property
    def base_y(self) -> float:
        return self._base_y

    @property
    def base(self) -> Tuple[float, float]:
        return (self._base_x, self._base_y)

    @property
    def length(self) -> float:
        return self._length

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def angular_velocity(self) -> float:
        return self._angular_velocity

    @property
    def next(self) -> Optional["Segment"]:
        return self._next

    @property
    def end_x(self) -> float:
        return self._base_x + math.cos(self._angle) * self._length

    @property
    def end_y(self) -> float:
        return self._base_y + math.sin(self._angle) * self._length

    @property
    def end(self) -> Tuple[float, float]:
        return polar_offset(self.base, self._angle, self._length)

    def angle_degrees(self) -> float:
        """Current angle wrapped into [0, 360) degrees, for readouts."""
        return to_degrees(normalize_angle(self._angle))

    # -----------------------
    # Cascading mutators
    # -----------------------

    def propagate(self) -> None:
        """Re-anchor every descendant at its predecessor's end."""
        seg = self
        while seg._next is not None:
            successor = seg._next
            successor._base_x = seg.end_x
            successor._base_y = seg.end_y
            seg = successor

    def set_base(self, x: float, y: float) -> None:
        x = require_finite("base_x", x)
        y = require_finite("base_y", y)
        self._base_x = x
        self._base_y = y
        self.propagate()

    def set_length(self, value: float) -> None:
        """Set the length; negative values clamp to 0."""
        self._length = max(0.0, require_finite("length", value))
        self.propagate()

    def set_angle(self, value: float) -> None:
        self._angle = require_finite("angle", value)
        self.propagate()

    def set_angle_degrees(self, degrees: float, normalize: bool = True) -> None:
        radians = to_radians(require_finite("angle", degrees))
        if normalize:
            radians = normalize_angle(radians)
        self.set_angle(radians)

    def set_next(self, segment: Optional["Segment"]) -> None:
        if segment is not None:
            runner = segment
            while runner is not None:
                if runner is self:
                    raise InvalidLink("linking this segment would create a cycle")
                runner = runner._next
        self._next = segment
        self.propagate()

    # -----------------------
    # Non-geometric setters
    # -----------------------

    def set_angular_velocity(self, value: float) -> None:
        self._angular_velocity = require_finite("angular_velocity", value)

    def set_line_color(self, color) -> None:
        self.line_color = coerce_color(color, self.line_color)

    def set_ball_color(self, color) -> None:
        self.ball_color = coerce_color(color, self.ball_color)

    # -----------------------
    # Animation
    # -----------------------

    def update(self, tick_scale: float = TICK_SCALE) -> None:
        """Advance this segment and every descendant by one tick."""
        seg = self
        while seg is not None:
            seg._angle += seg._angular_velocity * tick_scale
            successor = seg._next
            if successor is not None:
                successor._base_x = seg.end_x
                successor._base_y = seg.end_y
            seg = successor

    def draw(self, surface) -> None:
        self.draw_line(surface)
        self.draw_ball(surface)

    def draw_line(self, surface) -> None:
        with surface.saved_state():
            surface.begin_path()
            surface.stroke_style = self.line_color
            surface.line_width = self.line_width
            surface.move_to(self._base_x, self._base_y)
            surface.line_to(self.end_x, self.end_y)
            surface.stroke()

    def draw_ball(self, surface) -> None:
        with surface.saved_state():
            surface.begin_path()
            surface.fill_style = self.ball_color
            surface.arc(self.end_x, self.end_y, self.ball_radius, 0.0, FULL_RADIANS)
            surface.fill()
