#!/usr/bin/env python3
"""
Application context shared by the viewport thread and the control panel.

AppContext owns the Chain and the Camera2D and exposes every edit the UI can
make. The Pygame thread ticks and draws while holding `lock`; the Dear PyGui
thread edits while holding it, so each tick sees a consistent chain and each
edit lands between two ticks.
"""
import logging
import threading
from typing import List, Optional, Tuple

from .camera import Camera2D
from .chain import Chain
from .constants import (
    DEFAULT_MAX_TRAILS,
    DEFAULT_SEGMENT_ANGLE,
    DEFAULT_SEGMENT_LENGTH,
    DEFAULT_SEGMENT_SPEED,
)
from .presets import apply_preset
from .segment import Segment
from .utils import require_finite
from .vector_utils import vec_len, vec_sub

logger = logging.getLogger(__name__)


class AppContext:
    """
    Shared state between the UI thread (Dear PyGui) and the rendering thread (Pygame).
    All operations are guarded by a re-entrant lock.
    """

    def __init__(self, chain: Optional[Chain] = None, camera: Optional[Camera2D] = None):
        self.lock = threading.RLock()
        self.chain = chain if chain is not None else Chain(0.0, 0.0, DEFAULT_MAX_TRAILS)
        self.camera = camera if camera is not None else Camera2D()
        self.running = True  # app running
        self.playing = False  # animation ticking
        self.selected_index: Optional[int] = None
        self.tick_count = 0

    # -----------------------
    # Animation control
    # -----------------------

    def start(self) -> None:
        with self.lock:
            if self.playing:
                return
            self.playing = True
        logger.info("Animation started")

    def stop(self) -> None:
        with self.lock:
            if not self.playing:
                return
            self.playing = False
        logger.info("Animation stopped")

    def toggle(self) -> bool:
        with self.lock:
            playing = self.playing
        if playing:
            self.stop()
        else:
            self.start()
        return not playing

    def tick(self) -> bool:
        """Advance one frame if playing. Returns whether the chain moved."""
        with self.lock:
            if not self.playing:
                return False
            self.chain.update()
            self.tick_count += 1
            return True

    def step_once(self) -> None:
        """Advance exactly one tick regardless of the play state."""
        with self.lock:
            self.chain.update()
            self.tick_count += 1

    def shutdown(self) -> None:
        with self.lock:
            self.running = False
            self.playing = False

    # -----------------------
    # Selection
    # -----------------------

    def segments(self) -> List[Segment]:
        with self.lock:
            return list(self.chain.segments())

    def get_selected_segment(self) -> Optional[Segment]:
        with self.lock:
            segs = list(self.chain.segments())
            if self.selected_index is not None and 0 <= self.selected_index < len(segs):
                return segs[self.selected_index]
            return None

    def select_index(self, index: Optional[int]) -> None:
        with self.lock:
            count = len(self.chain)
            if index is None or not 0 <= index < count:
                self.selected_index = None
            else:
                self.selected_index = index

    def select_segment_at(self, world_pos: Tuple[float, float], pick_radius: float) -> Optional[int]:
        """Select the segment whose ball is closest to `world_pos`, within reach."""
        with self.lock:
            idx = None
            min_d = float("inf")
            for i, seg in enumerate(self.chain.segments()):
                d = vec_len(vec_sub(seg.end, world_pos))
                reach = max(seg.ball_radius * 2, pick_radius)
                if d < reach and d < min_d:
                    min_d = d
                    idx = i
            self.selected_index = idx
            return idx

    # -----------------------
    # Structure
    # -----------------------

    def add_segment(self, length: float = DEFAULT_SEGMENT_LENGTH,
                    speed: float = DEFAULT_SEGMENT_SPEED,
                    angle: float = DEFAULT_SEGMENT_ANGLE) -> Segment:
        with self.lock:
            seg = self.chain.create_segment(length, speed, angle)
            self.chain.reset_trail()
            self.selected_index = len(self.chain) - 1
            return seg

    def remove_segment(self, segment: Segment) -> None:
        with self.lock:
            selected = self.get_selected_segment()
            self.chain.remove_segment(segment)
            count = len(self.chain)
            if count == 0 or selected is None:
                self.selected_index = None
            elif selected is segment:
                # the removed segment was selected: keep the same slot
                self.selected_index = min(self.selected_index, count - 1)
            else:
                self.selected_index = self.chain.index_of(selected)

    def remove_selected(self) -> bool:
        with self.lock:
            seg = self.get_selected_segment()
            if seg is None:
                return False
            self.remove_segment(seg)
            return True

    def load_preset(self, name: str) -> None:
        with self.lock:
            created = apply_preset(self.chain, name)
            self.selected_index = 0 if created else None

    # -----------------------
    # Edits
    # -----------------------

    def edit_selected(self, speed: Optional[float] = None, length: Optional[float] = None,
                      degrees: Optional[float] = None, line_color=None, ball_color=None) -> bool:
        """
        Apply control-panel edits to the selected segment.

        Numeric edits reset the trail so old history is not mixed with the new
        motion. Every number is checked before anything is applied, so an
        InvalidGeometry from any field leaves the segment and trail untouched.
        """
        if speed is not None:
            speed = require_finite("angular_velocity", speed)
        if length is not None:
            length = require_finite("length", length)
        if degrees is not None:
            degrees = require_finite("angle", degrees)
        with self.lock:
            seg = self.get_selected_segment()
            if seg is None:
                return False
            if speed is not None:
                seg.set_angular_velocity(speed)
            if length is not None:
                seg.set_length(length)
            if degrees is not None:
                seg.set_angle_degrees(degrees)
            if line_color is not None:
                seg.set_line_color(line_color)
            if ball_color is not None:
                seg.set_ball_color(ball_color)
            if speed is not None or length is not None or degrees is not None:
                self.chain.reset_trail()
            return True

    def set_max_trail_count(self, value) -> int:
        with self.lock:
            return self.chain.set_max_trail_count(value)

    def increment_trails(self, delta: int) -> int:
        with self.lock:
            return self.chain.set_max_trail_count(self.chain.max_trail_count + delta)

    # -----------------------
    # View
    # -----------------------

    def center_view(self) -> None:
        with self.lock:
            self.camera.center_on((self.chain.anchor_x, self.chain.anchor_y))
