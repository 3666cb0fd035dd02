"""Tests for built-in chain presets."""
import pytest

from pendulum_chain.chain import Chain
from pendulum_chain.presets import PRESETS, apply_preset, list_presets


class TestPresets:
    """Tests for listing and applying presets."""

    def test_list(self):
        """Test every preset is listed."""
        names = list_presets()

        assert "Single" in names
        assert "Empty" in names
        assert len(names) == len(PRESETS)

    @pytest.mark.parametrize("name", list(PRESETS))
    def test_apply_builds_consistent_chain(self, name):
        """Test each preset produces a connected chain."""
        chain = Chain(0.0, 0.0)
        created = apply_preset(chain, name)

        assert list(chain) == created
        for prev, seg in zip(created, created[1:]):
            assert seg.base == pytest.approx(prev.end)

    def test_apply_replaces_existing(self):
        """Test applying a preset drops the old segments and trail."""
        chain = Chain(0.0, 0.0)
        chain.create_segment(5.0, 1.0)
        chain.update()
        apply_preset(chain, "Spirograph")

        assert len(chain) == 3
        assert len(chain.trail) == 0

    def test_colors_applied(self):
        """Test preset colors reach the segments."""
        chain = Chain(0.0, 0.0)
        created = apply_preset(chain, "Double")

        assert created[0].line_color == (120, 160, 255)
        assert created[1].ball_color == (255, 255, 255)

    def test_unknown(self):
        """Test an unknown preset raises KeyError and leaves the chain alone."""
        chain = Chain(0.0, 0.0)
        chain.create_segment(5.0, 1.0)

        with pytest.raises(KeyError):
            apply_preset(chain, "Nope")
        assert len(chain) == 1
