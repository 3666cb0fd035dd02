"""Tests for the pygame-backed canvas surface."""
import pygame
import pytest

from pendulum_chain.chain import Chain
from pendulum_chain.surface import IDENTITY, CanvasSurface

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


@pytest.fixture
def canvas():
    target = pygame.Surface((40, 40))
    target.fill(BLACK)
    return CanvasSurface(target)


class TestCanvasState:
    """Tests for the save/restore stack and transform."""

    def test_saved_state_restores_style(self, canvas):
        """Test style set inside saved_state is undone afterwards."""
        with canvas.saved_state():
            canvas.stroke_style = (1, 2, 3)
            canvas.global_alpha = 0.2
            canvas.set_transform(2, 0, 0, 2, 5, 5)
            assert canvas.depth == 1

        assert canvas.depth == 0
        assert canvas.stroke_style == BLACK
        assert canvas.global_alpha == 1.0
        assert canvas.transform == IDENTITY

    def test_unbalanced_restore(self, canvas):
        """Test restore without save is an error."""
        with pytest.raises(RuntimeError):
            canvas.restore()

    def test_reset_transform(self, canvas):
        """Test reset_transform returns to identity."""
        canvas.set_transform(3, 0, 0, 3, 1, 1)
        canvas.reset_transform()

        assert canvas.transform == IDENTITY


class TestCanvasPainting:
    """Tests for pixels painted through the contract."""

    def test_fill_disc(self, canvas):
        """Test a full arc is filled as a disc."""
        canvas.fill_style = WHITE
        canvas.begin_path()
        canvas.arc(20, 20, 5)
        canvas.fill()

        assert canvas.target.get_at((20, 20))[:3] == WHITE
        assert canvas.target.get_at((2, 2))[:3] == BLACK

    def test_stroke_line(self, canvas):
        """Test a stroked path paints along the line."""
        canvas.stroke_style = WHITE
        canvas.line_width = 3
        canvas.begin_path()
        canvas.move_to(0, 10)
        canvas.line_to(39, 10)
        canvas.stroke()

        assert canvas.target.get_at((20, 10))[:3] == WHITE
        assert canvas.target.get_at((20, 30))[:3] == BLACK

    def test_transform_maps_world_to_screen(self, canvas):
        """Test path points go through the current transform."""
        canvas.set_transform(2, 0, 0, 2, 10, 10)
        canvas.fill_style = WHITE
        canvas.begin_path()
        canvas.arc(5, 5, 2)
        canvas.fill()

        assert canvas.target.get_at((20, 20))[:3] == WHITE
        assert canvas.target.get_at((5, 5))[:3] == BLACK

    def test_global_alpha_blends(self, canvas):
        """Test a half-transparent fill blends with the background."""
        canvas.fill_style = WHITE
        canvas.global_alpha = 0.5
        canvas.begin_path()
        canvas.arc(20, 20, 6)
        canvas.fill()

        red = canvas.target.get_at((20, 20))[0]
        assert 90 < red < 170

    def test_zero_alpha_paints_nothing(self, canvas):
        """Test a fully transparent fill leaves the target untouched."""
        canvas.fill_style = WHITE
        canvas.global_alpha = 0.0
        canvas.begin_path()
        canvas.arc(20, 20, 6)
        canvas.fill()

        assert canvas.target.get_at((20, 20))[:3] == BLACK

    def test_off_screen_points_are_skipped(self, canvas):
        """Test absurd coordinates do not raise."""
        canvas.stroke_style = WHITE
        canvas.begin_path()
        canvas.move_to(0, 0)
        canvas.line_to(1e12, 1e12)
        canvas.stroke()

    def test_chain_draw(self, canvas):
        """Test a chain paints its ball on a real surface."""
        chain = Chain(10.0, 20.0)
        seg = chain.create_segment(20.0, 0.0, 0.0)
        seg.set_ball_color((255, 0, 0))
        seg.set_line_color((0, 255, 0))
        chain.draw(canvas)

        assert canvas.target.get_at((30, 20))[:3] == (255, 0, 0)
        assert canvas.target.get_at((18, 20))[:3] == (0, 255, 0)
        assert canvas.depth == 0
