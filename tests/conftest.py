"""Shared fixtures for pendulum chain tests."""
import math
from contextlib import contextmanager

import pytest

from pendulum_chain.chain import Chain


class RecordingSurface:
    """Stand-in for CanvasSurface that records what would be painted."""

    def __init__(self):
        self.calls = []
        self.stroke_style = None
        self.fill_style = None
        self.line_width = 1.0
        self.global_alpha = 1.0
        self.depth = 0
        self.max_depth = 0

    def save(self):
        self.calls.append(("save",))
        self.depth += 1
        self.max_depth = max(self.max_depth, self.depth)

    def restore(self):
        self.calls.append(("restore",))
        self.depth -= 1
        assert self.depth >= 0

    @contextmanager
    def saved_state(self):
        saved = (self.stroke_style, self.fill_style, self.line_width, self.global_alpha)
        self.save()
        try:
            yield self
        finally:
            self.restore()
            self.stroke_style, self.fill_style, self.line_width, self.global_alpha = saved

    def begin_path(self):
        self.calls.append(("begin_path",))

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))

    def arc(self, x, y, radius, start_angle=0.0, end_angle=None):
        self.calls.append(("arc", x, y, radius))

    def stroke(self):
        self.calls.append(("stroke", self.stroke_style, self.line_width))

    def fill(self):
        self.calls.append(("fill", self.fill_style, self.global_alpha))

    def painted(self):
        return [c for c in self.calls if c[0] in ("stroke", "fill")]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def chain():
    return Chain(0.0, 0.0)


@pytest.fixture
def three_chain():
    """Anchored at (0, 0): lengths 50, 30, 20 at angles 0, pi/2, pi."""
    c = Chain(0.0, 0.0)
    c.create_segment(50.0, 1.0, 0.0)
    c.create_segment(30.0, 2.0, math.pi / 2)
    c.create_segment(20.0, -1.0, math.pi)
    return c
