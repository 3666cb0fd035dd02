#!/usr/bin/env python3
"""
Canvas-style drawing surface on top of pygame.

The chain only ever talks to a small 2D-context contract:

- path building: begin_path, move_to, line_to, arc
- painting: stroke (current path outline), fill (current path interior)
- style state: stroke_style, fill_style, line_width, global_alpha
- state stack: save / restore, or the saved_state() context manager
- affine transform: set_transform(a, b, c, d, e, f) / reset_transform()

CanvasSurface implements it over a pygame.Surface. Path coordinates are world
coordinates; they are mapped through the current transform when recorded.
Colors are RGB tuples in 0..255, global_alpha is 0..1.
"""
import math
from contextlib import contextmanager
from typing import List, Tuple

import pygame
from pygame import gfxdraw

from .constants import FULL_RADIANS, SAFE_COORD_LIMIT

IDENTITY = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
ARC_STEPS = 48


class CanvasSurface:
    """
    2D drawing context over a pygame target surface.

    Attributes:
        target: the pygame.Surface being painted.
        stroke_style / fill_style: RGB colors used by stroke() / fill().
        line_width: stroke width in world units (scaled by the transform).
        global_alpha: opacity multiplier applied to every primitive.
    """

    def __init__(self, target: pygame.Surface):
        self.target = target
        self.stroke_style = (0, 0, 0)
        self.fill_style = (0, 0, 0)
        self.line_width = 1.0
        self.global_alpha = 1.0
        self._transform = IDENTITY
        self._stack: List[tuple] = []
        self._polylines: List[List[Tuple[float, float]]] = []
        self._discs: List[Tuple[Tuple[float, float], float]] = []

    # -----------------------
    # State
    # -----------------------

    def save(self) -> None:
        self._stack.append((self.stroke_style, self.fill_style, self.line_width,
                            self.global_alpha, self._transform))

    def restore(self) -> None:
        if not self._stack:
            raise RuntimeError("restore() called without a matching save()")
        (self.stroke_style, self.fill_style, self.line_width,
         self.global_alpha, self._transform) = self._stack.pop()

    @contextmanager
    def saved_state(self):
        """Pair save()/restore() around a block so style changes never leak."""
        self.save()
        try:
            yield self
        finally:
            self.restore()

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def transform(self) -> Tuple[float, float, float, float, float, float]:
        return self._transform

    def set_transform(self, a, b, c, d, e, f) -> None:
        self._transform = (float(a), float(b), float(c), float(d), float(e), float(f))

    def reset_transform(self) -> None:
        self._transform = IDENTITY

    def clear(self, color) -> None:
        self.target.fill(color)

    # -----------------------
    # Paths
    # -----------------------

    def _apply(self, x: float, y: float) -> Tuple[float, float]:
        a, b, c, d, e, f = self._transform
        return (a * x + c * y + e, b * x + d * y + f)

    def _scale_factor(self) -> float:
        a, b, c, d, _, _ = self._transform
        return math.sqrt(abs(a * d - b * c))

    def begin_path(self) -> None:
        self._polylines = []
        self._discs = []

    def move_to(self, x: float, y: float) -> None:
        self._polylines.append([self._apply(x, y)])

    def line_to(self, x: float, y: float) -> None:
        if not self._polylines:
            self.move_to(x, y)
            return
        self._polylines[-1].append(self._apply(x, y))

    def arc(self, x: float, y: float, radius: float,
            start_angle: float = 0.0, end_angle: float = FULL_RADIANS) -> None:
        sweep = end_angle - start_angle
        if abs(sweep) >= FULL_RADIANS:
            self._discs.append((self._apply(x, y), abs(radius) * self._scale_factor()))
            return
        steps = max(2, int(ARC_STEPS * abs(sweep) / FULL_RADIANS))
        points = []
        for i in range(steps + 1):
            t = start_angle + sweep * i / steps
            points.append(self._apply(x + math.cos(t) * radius, y + math.sin(t) * radius))
        self._polylines.append(points)

    # -----------------------
    # Painting
    # -----------------------

    def _rgba(self, color) -> Tuple[int, int, int, int]:
        alpha = max(0.0, min(1.0, float(self.global_alpha)))
        return (int(color[0]), int(color[1]), int(color[2]), int(round(255 * alpha)))

    def stroke(self) -> None:
        color = self._rgba(self.stroke_style)
        if color[3] == 0:
            return
        width = max(1, int(round(self.line_width * self._scale_factor())))
        if color[3] < 255:
            # pygame.draw ignores alpha, so blend through an overlay
            overlay = pygame.Surface(self.target.get_size(), pygame.SRCALPHA)
            self._stroke_onto(overlay, color, width)
            self.target.blit(overlay, (0, 0))
        else:
            self._stroke_onto(self.target, color[:3], width)

    def _stroke_onto(self, surf, color, width: int) -> None:
        for center, radius in self._discs:
            c = _safe_point(center)
            if c is not None:
                pygame.draw.circle(surf, color, c, max(1, int(round(radius))), width)
        for line in self._polylines:
            pts = [p for p in (_safe_point(pt) for pt in line) if p is not None]
            if len(pts) < 2:
                continue
            pygame.draw.lines(surf, color, False, pts, width)

    def fill(self) -> None:
        color = self._rgba(self.fill_style)
        if color[3] == 0:
            return
        for center, radius in self._discs:
            c = _safe_point(center)
            if c is None:
                continue
            r = max(1, int(round(radius)))
            gfxdraw.filled_circle(self.target, c[0], c[1], r, color)
            gfxdraw.aacircle(self.target, c[0], c[1], r, color)
        for line in self._polylines:
            pts = [p for p in (_safe_point(pt) for pt in line) if p is not None]
            if len(pts) >= 3:
                gfxdraw.filled_polygon(self.target, pts, color)


def _safe_point(pt):
    try:
        x, y = int(round(pt[0])), int(round(pt[1]))
    except (TypeError, ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None
