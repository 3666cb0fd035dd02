"""Tests for small helpers."""
import math

import pytest

from pendulum_chain.errors import InvalidGeometry
from pendulum_chain.utils import coerce_color, require_finite, try_float, try_int
from pendulum_chain.vector_utils import clamp, normalize_angle, polar_offset, to_degrees, to_radians


class TestParsing:
    """Tests for lenient UI input parsing."""

    def test_try_float(self):
        """Test numbers parse and junk yields None."""
        assert try_float("2.5") == 2.5
        assert try_float("") is None
        assert try_float("nan") is None
        assert try_float(None) is None

    def test_try_int(self):
        """Test integers parse from text and floats."""
        assert try_int("12") == 12
        assert try_int(3.9) == 3
        assert try_int("x") is None

    def test_require_finite(self):
        """Test non-finite values raise InvalidGeometry."""
        assert require_finite("v", "1.5") == 1.5
        with pytest.raises(InvalidGeometry):
            require_finite("v", float("-inf"))

    def test_coerce_color_default(self):
        """Test malformed colors fall back to the default."""
        assert coerce_color("red", (1, 2, 3)) == (1, 2, 3)
        assert coerce_color([10.7, 20, 30]) == (10, 20, 30)


class TestAngles:
    """Tests for angle helpers."""

    def test_conversions(self):
        """Test degree/radian conversion."""
        assert to_radians(180) == pytest.approx(math.pi)
        assert to_degrees(math.pi / 2) == pytest.approx(90.0)

    def test_normalize(self):
        """Test angles wrap into [0, 2pi)."""
        assert normalize_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
        assert normalize_angle(5 * math.pi) == pytest.approx(math.pi)
        assert 0.0 <= normalize_angle(-1e-18) < 2 * math.pi

    def test_polar_offset(self):
        """Test the point at a distance and direction."""
        assert polar_offset((1.0, 1.0), math.pi / 2, 2.0) == pytest.approx((1.0, 3.0))

    def test_clamp(self):
        """Test clamp bounds a value."""
        assert clamp(5, 0, 3) == 3
        assert clamp(-1, 0, 3) == 0
