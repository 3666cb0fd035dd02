"""Tests for the 2D camera."""
import pytest

from pendulum_chain.camera import Camera2D
from pendulum_chain.constants import MAX_SCALE, MIN_SCALE


class TestCamera2D:
    """Tests for pan/zoom transforms."""

    def test_default_centers_origin(self):
        """Test the world origin starts in the middle of the viewport."""
        cam = Camera2D()
        cam.set_viewport_size(800, 600)
        cam.center_on((0.0, 0.0))

        assert cam.world_to_screen((0.0, 0.0)) == (400.0, 300.0)

    def test_round_trip(self):
        """Test screen_to_world inverts world_to_screen."""
        cam = Camera2D(offset=(13.0, -7.0), scale=2.5)
        world = cam.screen_to_world(cam.world_to_screen((3.0, 4.0)))

        assert world == pytest.approx((3.0, 4.0))

    def test_transform_tuple(self):
        """Test the affine transform handed to the surface."""
        cam = Camera2D(offset=(10.0, 20.0), scale=3.0)

        assert cam.transform() == (3.0, 0.0, 0.0, 3.0, 10.0, 20.0)

    def test_pan(self):
        """Test panning moves the offset by the pixel delta."""
        cam = Camera2D(offset=(0.0, 0.0))
        cam.pan_pixels(5, -3)

        assert cam.offset == [5.0, -3.0]

    def test_zoom_keeps_pivot(self):
        """Test the world point under the pivot stays under it."""
        cam = Camera2D(offset=(100.0, 100.0), scale=1.0)
        pivot = (250.0, 180.0)
        before = cam.screen_to_world(pivot)
        cam.zoom(1.2, pivot)

        assert cam.scale == pytest.approx(1.2)
        assert cam.screen_to_world(pivot) == pytest.approx(before)

    def test_zoom_is_clamped(self):
        """Test zoom stays inside the scale bounds."""
        cam = Camera2D()
        for _ in range(200):
            cam.zoom(1.2)
        assert cam.scale == MAX_SCALE

        for _ in range(400):
            cam.zoom(1 / 1.2)
        assert cam.scale == MIN_SCALE

    def test_resize_keeps_relative_position(self):
        """Test resizing scales the offset with the viewport."""
        cam = Camera2D()
        cam.set_viewport_size(800, 600)
        cam.center_on((0.0, 0.0))
        cam.set_viewport_size(400, 300)

        assert cam.offset == pytest.approx([200.0, 150.0])
