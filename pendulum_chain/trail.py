#!/usr/bin/env python3
"""
Trail history of the chain's terminal point.

TrailBuffer keeps at most `capacity` markers, newest first. Opacity is a pure
function of a marker's position in the queue and the capacity, recomputed on
every record, so pausing the animation freezes the trail exactly as it is.
"""
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, List, Tuple

from .constants import DEFAULT_MAX_TRAILS, DEFAULT_TRAIL_COLOR, FULL_RADIANS


@dataclass
class TrailMarker:
    """
    One sample of the chain's end point.

    Fields:
    - x, y: sampled position (never changed after creation)
    - radius: ball radius of the sampled segment at sampling time
    - color: RGB tuple used for rendering
    - opacity: 0..1, assigned by the owning buffer
    """
    x: float
    y: float
    radius: float
    color: Tuple[int, int, int] = DEFAULT_TRAIL_COLOR
    opacity: float = 1.0

    def draw(self, surface) -> None:
        with surface.saved_state():
            surface.global_alpha = self.opacity
            surface.fill_style = self.color
            surface.begin_path()
            surface.arc(self.x, self.y, self.radius, 0.0, FULL_RADIANS)
            surface.fill()


def marker_opacity(index: int, capacity: int) -> float:
    """Opacity of the index-th newest marker: 1 for the newest, falling linearly."""
    if capacity <= 0:
        return 0.0
    return max(0.0, 1.0 - index / capacity)


class TrailBuffer:
    """Bounded, newest-first queue of TrailMarker."""

    def __init__(self, capacity: int = DEFAULT_MAX_TRAILS):
        self._capacity = max(0, int(capacity))
        self._markers: Deque[TrailMarker] = deque()

    def __len__(self) -> int:
        return len(self._markers)

    def __iter__(self) -> Iterator[TrailMarker]:
        return iter(self._markers)

    def __getitem__(self, index: int) -> TrailMarker:
        return self._markers[index]

    @property
    def capacity(self) -> int:
        return self._capacity

    def set_capacity(self, capacity: int) -> None:
        """Change the capacity, dropping the oldest markers right away if needed."""
        self._capacity = max(0, int(capacity))
        self._truncate()
        self.refresh_opacity()

    def record(self, x: float, y: float, radius: float,
               color: Tuple[int, int, int] = DEFAULT_TRAIL_COLOR) -> None:
        self._markers.appendleft(TrailMarker(x, y, radius, color))
        self._truncate()
        self.refresh_opacity()

    def refresh_opacity(self) -> None:
        for i, marker in enumerate(self._markers):
            marker.opacity = marker_opacity(i, self._capacity)

    def clear(self) -> None:
        self._markers.clear()

    def positions(self) -> List[Tuple[float, float]]:
        return [(m.x, m.y) for m in self._markers]

    def draw(self, surface) -> None:
        # oldest first so the freshest markers end up on top
        for marker in reversed(self._markers):
            marker.draw(surface)

    def _truncate(self) -> None:
        while len(self._markers) > self._capacity:
            self._markers.pop()
