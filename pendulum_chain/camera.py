#!/usr/bin/env python3
"""
Camera utilities for 2D world-to-screen transforms.
"""
from typing import Optional, Tuple

from .constants import (
    DEFAULT_SCALE,
    MAX_SCALE,
    MIN_SCALE,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from .vector_utils import clamp


class Camera2D:
    """
    Simple 2D camera that maps world coordinates to screen pixels.

    screen = world * scale + offset, which is the affine transform
    (scale, 0, 0, scale, offset_x, offset_y) handed to the drawing surface.
    """

    def __init__(self, offset=None, scale=DEFAULT_SCALE):
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)
        if offset is None:
            offset = (VIEW_WIDTH / 2, VIEW_HEIGHT / 2)
        self.offset = [float(offset[0]), float(offset[1])]
        self.scale = float(scale)

    def set_viewport_size(self, w: int, h: int) -> None:
        """Resize the viewport, keeping the view at the same relative place."""
        old_w, old_h = self.viewport_size
        if old_w > 0 and old_h > 0:
            self.offset[0] = self.offset[0] * w / old_w
            self.offset[1] = self.offset[1] * h / old_h
        self.viewport_size = (w, h)

    def transform(self) -> Tuple[float, float, float, float, float, float]:
        return (self.scale, 0.0, 0.0, self.scale, self.offset[0], self.offset[1])

    def world_to_screen(self, pos: Tuple[float, float]) -> Tuple[float, float]:
        return (pos[0] * self.scale + self.offset[0], pos[1] * self.scale + self.offset[1])

    def screen_to_world(self, screen: Tuple[float, float]) -> Tuple[float, float]:
        return ((screen[0] - self.offset[0]) / self.scale, (screen[1] - self.offset[1]) / self.scale)

    def zoom(self, factor, pivot_screen: Optional[Tuple[float, float]] = None):
        """Zoom by `factor`; the world point under `pivot_screen` stays put."""
        factor = clamp(factor, 0.05, 20.0)
        if pivot_screen is None:
            pivot_screen = (self.viewport_size[0] / 2, self.viewport_size[1] / 2)
        before = self.screen_to_world(pivot_screen)
        self.scale = clamp(self.scale * factor, MIN_SCALE, MAX_SCALE)
        after = self.world_to_screen(before)
        self.offset[0] += pivot_screen[0] - after[0]
        self.offset[1] += pivot_screen[1] - after[1]

    def pan_pixels(self, dx_pixels, dy_pixels):
        self.offset[0] += dx_pixels
        self.offset[1] += dy_pixels

    def center_on(self, world: Tuple[float, float]) -> None:
        self.offset[0] = self.viewport_size[0] / 2 - world[0] * self.scale
        self.offset[1] = self.viewport_size[1] / 2 - world[1] * self.scale
