#!/usr/bin/env python3
"""
Chain: an ordered, singly linked sequence of Segments plus the trail of its end.

Structure
- head is the first segment, tail the last; each segment links to the next.
- head is None exactly when the chain is empty.
- The first segment is anchored at (anchor_x, anchor_y) when appended; every
  later segment is appended at the tail's end point.

Per tick (update)
1) head.update() advances every segment and re-anchors successors in one walk.
2) The tail's end point is recorded into the trail, newest first, oldest
   evicted past capacity, and marker opacities are recomputed.

Removal is an O(n) identity search, which is fine for interactively edited
chains of a few dozen segments.
"""
import logging
import math
from typing import Iterator, Optional

from .constants import DEFAULT_MAX_TRAILS, MAX_TRAILS, MIN_TRAILS, TICK_SCALE
from .errors import InvalidGeometry, SegmentNotFound
from .segment import Segment
from .trail import TrailBuffer
from .utils import require_finite

logger = logging.getLogger(__name__)


class Chain:
    """
    Owner of the segment chain and its trail buffer.

    Attributes:
        anchor_x, anchor_y: root point where the first segment is placed.
        head / tail: first and last segments, or None when empty.
        trail: TrailBuffer sampled from the tail's end on every update.
        tick_scale: radians per tick for one unit of angular velocity.
    """

    def __init__(self, anchor_x: float = 0.0, anchor_y: float = 0.0,
                 max_trail_count: int = DEFAULT_MAX_TRAILS, tick_scale: float = TICK_SCALE):
        self._anchor_x = require_finite("anchor_x", anchor_x)
        self._anchor_y = require_finite("anchor_y", anchor_y)
        self.head: Optional[Segment] = None
        self.tail: Optional[Segment] = None
        self.tick_scale = tick_scale
        self.trail = TrailBuffer(0)
        self.set_max_trail_count(max_trail_count)

    def __len__(self) -> int:
        return sum(1 for _ in self.segments())

    def __iter__(self) -> Iterator[Segment]:
        return self.segments()

    def __contains__(self, segment) -> bool:
        return any(seg is segment for seg in self.segments())

    def segments(self) -> Iterator[Segment]:
        """Walk from head to tail."""
        runner = self.head
        while runner is not None:
            yield runner
            runner = runner.next

    def index_of(self, segment: Segment) -> int:
        for i, seg in enumerate(self.segments()):
            if seg is segment:
                return i
        raise SegmentNotFound("segment is not part of this chain")

    @property
    def is_empty(self) -> bool:
        return self.head is None

    # -----------------------
    # Anchor
    # -----------------------

    @property
    def anchor_x(self) -> float:
        return self._anchor_x

    @property
    def anchor_y(self) -> float:
        return self._anchor_y

    def set_anchor(self, x: float, y: float) -> None:
        """Move the root point; the head (and everything after it) follows."""
        self._anchor_x = require_finite("anchor_x", x)
        self._anchor_y = require_finite("anchor_y", y)
        if self.head is not None:
            self.head.set_base(self._anchor_x, self._anchor_y)

    # -----------------------
    # Trail capacity
    # -----------------------

    @property
    def max_trail_count(self) -> int:
        return self.trail.capacity

    def set_max_trail_count(self, value) -> int:
        """
        Set how many trail markers are kept and truncate the trail immediately.

        Values below MIN_TRAILS clamp to MIN_TRAILS, values above MAX_TRAILS clamp
        to MAX_TRAILS. Returns the capacity actually applied.
        """
        try:
            count = float(value)
        except (TypeError, ValueError):
            raise InvalidGeometry(f"trail count must be a number, got {value!r}") from None
        if math.isnan(count):
            raise InvalidGeometry("trail count must not be NaN")
        if count < MIN_TRAILS:
            logger.warning("Trail count %s below %d; clamping", value, MIN_TRAILS)
            count = MIN_TRAILS
        elif count > MAX_TRAILS:
            logger.warning("Trail count %s above %d; clamping", value, MAX_TRAILS)
            count = MAX_TRAILS
        self.trail.set_capacity(int(count))
        return self.trail.capacity

    def reset_trail(self) -> None:
        self.trail.clear()

    # -----------------------
    # Structure
    # -----------------------

    def create_segment(self, length: float, angular_velocity: float, angle: float = 0.0) -> Segment:
        """Append a new segment at the tail's end (or the anchor) and return it."""
        if self.tail is None:
            segment = Segment(self._anchor_x, self._anchor_y, length, angular_velocity, angle)
            self.head = segment
        else:
            segment = Segment(self.tail.end_x, self.tail.end_y, length, angular_velocity, angle)
            self.tail.set_next(segment)
        self.tail = segment
        logger.debug("Appended %r", segment)
        return segment

    def remove_segment(self, target: Segment) -> None:
        """
        Unlink `target` from the chain.

        Removing the head re-roots the chain at the old head's base. Removing
        any other segment re-anchors everything after it at the predecessor's
        end. Raises SegmentNotFound if `target` is not in this chain.
        """
        if self.head is None:
            raise SegmentNotFound("cannot remove from an empty chain")

        if target is self.head:
            new_head = target.next
            self.head = new_head
            if new_head is None:
                self.tail = None
            else:
                new_head.set_base(target.base_x, target.base_y)
        else:
            runner = self.head
            while runner.next is not None and runner.next is not target:
                runner = runner.next
            if runner.next is None:
                raise SegmentNotFound("segment is not part of this chain")
            runner.set_next(target.next)
            if target is self.tail:
                self.tail = runner

        # detached segment no longer drives anything
        target.set_next(None)
        logger.debug("Removed %r", target)

    def clear(self) -> None:
        self.head = None
        self.tail = None
        self.trail.clear()

    # -----------------------
    # Animation
    # -----------------------

    def update(self) -> None:
        """Advance one tick and sample the tail's end into the trail."""
        if self.head is None:
            return
        self.head.update(self.tick_scale)
        tail = self.tail
        self.trail.record(tail.end_x, tail.end_y, tail.ball_radius, tail.ball_color)

    def draw(self, surface) -> None:
        """Trails first, then all lines, then all balls so balls sit on top."""
        self.trail.draw(surface)
        for seg in self.segments():
            seg.draw_line(surface)
        for seg in self.segments():
            seg.draw_ball(surface)
