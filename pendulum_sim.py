#!/usr/bin/env python3
"""
Pendulum Chain application entry point and UI/renderer coordination.

What this module does
- Starts two event loops: a Pygame rendering thread (viewport) and the Dear PyGui UI
  (running on the main thread).
- Both share one AppContext that owns the chain, the trail and the camera; all
  access goes through its re-entrant lock.
- The viewport ticks the chain once per frame while playing and draws it through a
  canvas-style surface under the camera transform.
- The control panel adds/removes segments and edits speed, length, angle and colors
  of the selected one, sets the trail length and drives play/pause and zoom.

Running
1) Install dependencies: `pip install -e .`
2) Run this module: `python pendulum_sim.py`

Two windows will open: the viewport (Pygame) and the controls (Dear PyGui). Closing
either will shut down the application cleanly.
"""

import logging
import threading
import time

import pygame
import dearpygui.dearpygui as dpg

from pendulum_chain.constants import (
    BACKGROUND_COLOR,
    HUD_TEXT_COLOR,
    MAX_TRAILS,
    MIN_TRAILS,
    SELECTION_COLOR,
    TARGET_FPS,
    VIEW_HEIGHT,
    VIEW_WIDTH,
    ZOOM_IN,
    ZOOM_OUT,
)
from pendulum_chain.controller import AppContext
from pendulum_chain.errors import PendulumChainError
from pendulum_chain.logging_config import setup_logging
from pendulum_chain.presets import list_presets
from pendulum_chain.surface import CanvasSurface
from pendulum_chain.utils import try_float, try_int
from pendulum_chain.vector_utils import clamp

logger = logging.getLogger("pendulum_chain.app")

DEFAULT_PRESET = "Single"

# ============================================================
# Pygame Renderer Thread
# ============================================================


class PygameRenderer(threading.Thread):
    """
    Pygame loop: ticks the chain, draws trails, segments and HUD.
    Handles selection, camera panning and zoom.
    """
    def __init__(self, ctx: AppContext):
        super().__init__(daemon=True)
        self.ctx = ctx
        self.surface = None
        self.canvas = None
        self.clock = None
        self.dragging_background = False
        self.drag_start_screen = (0, 0)
        self.pan_speed_keys = 600  # pixels per second
        self.running = True

    def run(self):
        pygame.init()
        pygame.display.set_caption("Pendulum Chain - Viewport")
        self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT), pygame.RESIZABLE)
        self.canvas = CanvasSurface(self.surface)
        with self.ctx.lock:
            self.ctx.camera.set_viewport_size(VIEW_WIDTH, VIEW_HEIGHT)
        self.clock = pygame.time.Clock()

        last_time = time.perf_counter()
        while self.running and self.ctx.running:
            now = time.perf_counter()
            real_dt = now - last_time
            last_time = now

            self.handle_events(real_dt)
            self.ctx.tick()
            self.draw()

            self.clock.tick(TARGET_FPS)

        pygame.quit()
        logger.info("Viewport closed")

    def handle_events(self, real_dt):
        camera = self.ctx.camera
        keys = pygame.key.get_pressed()
        with self.ctx.lock:
            if keys[pygame.K_LEFT]:
                camera.pan_pixels(self.pan_speed_keys * real_dt, 0)
            if keys[pygame.K_RIGHT]:
                camera.pan_pixels(-self.pan_speed_keys * real_dt, 0)
            if keys[pygame.K_UP]:
                camera.pan_pixels(0, self.pan_speed_keys * real_dt)
            if keys[pygame.K_DOWN]:
                camera.pan_pixels(0, -self.pan_speed_keys * real_dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.ctx.shutdown()
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.canvas = CanvasSurface(self.surface)
                with self.ctx.lock:
                    camera.set_viewport_size(event.w, event.h)

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                self.ctx.toggle()

            elif event.type == pygame.MOUSEWHEEL:
                factor = ZOOM_IN if event.y > 0 else ZOOM_OUT
                with self.ctx.lock:
                    camera.zoom(factor, pygame.mouse.get_pos())

            elif event.type == pygame.MOUSEBUTTONDOWN:
                mouse = pygame.mouse.get_pos()
                if event.button == 1:
                    with self.ctx.lock:
                        world = camera.screen_to_world(mouse)
                        pick = 10 / camera.scale
                    # Select a ball if clicked near one; otherwise start a background drag
                    if self.ctx.select_segment_at(world, pick) is None:
                        self.dragging_background = True
                        self.drag_start_screen = mouse
                elif event.button in (2, 3):
                    self.dragging_background = True
                    self.drag_start_screen = mouse

            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button in (1, 2, 3):
                    self.dragging_background = False

            elif event.type == pygame.MOUSEMOTION:
                if self.dragging_background:
                    mouse = pygame.mouse.get_pos()
                    dx = mouse[0] - self.drag_start_screen[0]
                    dy = mouse[1] - self.drag_start_screen[1]
                    with self.ctx.lock:
                        camera.pan_pixels(dx, dy)
                    self.drag_start_screen = mouse

    def draw(self):
        canvas = self.canvas
        canvas.clear(BACKGROUND_COLOR)

        with self.ctx.lock:
            canvas.set_transform(*self.ctx.camera.transform())
            self.ctx.chain.draw(canvas)
            selected = self.ctx.get_selected_segment()
            if selected is not None:
                with canvas.saved_state():
                    canvas.stroke_style = SELECTION_COLOR
                    canvas.line_width = 1 / self.ctx.camera.scale
                    canvas.begin_path()
                    canvas.arc(selected.end_x, selected.end_y, selected.ball_radius + 4 / self.ctx.camera.scale)
                    canvas.stroke()
            canvas.reset_transform()
            playing = self.ctx.playing
            count = len(self.ctx.chain)
            trails = self.ctx.chain.max_trail_count
            ticks = self.ctx.tick_count

        draw_text(self.surface, "Left-click: select ball | Drag: pan | Wheel: zoom | Arrows: pan | Space: Play/Pause",
                  10, 10, HUD_TEXT_COLOR)
        draw_text(self.surface, f"Segments: {count}  Trails: {trails}  Tick: {ticks}  [{'Playing' if playing else 'Paused'}]",
                  10, 30, HUD_TEXT_COLOR)

        pygame.display.flip()


_cached_font = None


def draw_text(surface, text, x, y, color):
    global _cached_font
    if not pygame.font.get_init():
        pygame.font.init()
    if _cached_font is None:
        _cached_font = pygame.font.SysFont("consolas", 16)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))

# ============================================================
# Dear PyGui UI
# ============================================================


class UI:
    """
    Dear PyGui interface: presets, segment list and editor, trails and animation controls.
    """
    def __init__(self, ctx: AppContext):
        self.ctx = ctx

        self.segment_list_id = None
        self.speed_id = None
        self.length_id = None
        self.degrees_id = None
        self.line_color_id = None
        self.ball_color_id = None
        self.trails_id = None
        self.play_button_id = None
        self.status_msg_id = None

        # Track selection to avoid overwriting edits during typing
        self._last_edit_selected_idx = None

        self._build_ui()

        dpg.set_frame_callback(1, self._post_setup)
        self._schedule_sync()

    def _post_setup(self):
        self.load_preset(DEFAULT_PRESET)

    def _schedule_sync(self):
        """Reschedule the periodic sync callback using frame callbacks (approx ~10Hz)."""
        current = dpg.get_frame_count()
        dpg.set_frame_callback(current + 6, self._sync_ui_with_ctx)

    # -----------------------
    # UI Construction
    # -----------------------

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title='Pendulum Chain - Controls', width=460, height=640)

        with dpg.window(label="Controls", width=440, height=620, pos=(10, 10), tag="main_window"):
            with dpg.group(horizontal=True):
                dpg.add_text("Preset:")
                presets = list_presets()
                dpg.add_combo(presets, default_value=DEFAULT_PRESET, width=200, tag="preset_combo",
                              callback=lambda s, a, u: self.load_preset(a))
                dpg.add_button(label="Load", callback=lambda: self.load_preset(dpg.get_value("preset_combo")))

            dpg.add_separator()
            dpg.add_text("Segments")
            self.segment_list_id = dpg.add_listbox(items=[], width=420, num_items=6, callback=self._on_select_segment)
            with dpg.group(horizontal=True):
                dpg.add_button(label="Add Segment", callback=self._on_add_segment)
                dpg.add_button(label="Remove Selected", callback=self._on_remove_segment)

            dpg.add_separator()
            dpg.add_text("Edit Selected Segment")
            with dpg.group():
                self.speed_id = dpg.add_input_text(label="Speed", default_value="", width=150,
                                                   on_enter=True, callback=self._on_speed)
                self.length_id = dpg.add_input_text(label="Length", default_value="", width=150,
                                                    on_enter=True, callback=self._on_length)
                self.degrees_id = dpg.add_input_text(label="Degrees", default_value="", width=150,
                                                     on_enter=True, callback=self._on_degrees)
                self.ball_color_id = dpg.add_color_edit(default_value=(255, 255, 255, 255), label="Ball color",
                                                        no_alpha=True, width=220, callback=self._on_ball_color)
                self.line_color_id = dpg.add_color_edit(default_value=(255, 255, 255, 255), label="Line color",
                                                        no_alpha=True, width=220, callback=self._on_line_color)

            dpg.add_separator()
            dpg.add_text("Trails")
            with dpg.group(horizontal=True):
                dpg.add_button(label="-", width=30, callback=lambda: self._on_trail_step(-1))
                self.trails_id = dpg.add_input_int(default_value=self.ctx.chain.max_trail_count,
                                                   min_value=MIN_TRAILS, max_value=MAX_TRAILS, step=0, width=120,
                                                   callback=self._on_trail_count)
                dpg.add_button(label="+", width=30, callback=lambda: self._on_trail_step(1))

            dpg.add_separator()
            dpg.add_text("Animation")
            with dpg.group(horizontal=True):
                self.play_button_id = dpg.add_button(label="Play", callback=self._toggle_play)
                dpg.add_button(label="Step", callback=self._step_once)
                dpg.add_button(label="Zoom +", callback=lambda: self._zoom(ZOOM_IN))
                dpg.add_button(label="Zoom -", callback=lambda: self._zoom(ZOOM_OUT))
                dpg.add_button(label="Center", callback=self._center_view)

            self.status_msg_id = dpg.add_text("")

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    # -----------------------
    # UI Callbacks
    # -----------------------

    def _set_status(self, msg: str, color=(180, 220, 180)):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=color)

    def _set_error(self, msg: str):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=(255, 120, 120))

    def _refresh_segment_list(self):
        segs = self.ctx.segments()
        with self.ctx.lock:
            sel = self.ctx.selected_index
        items = [f"#{i + 1}  len {s.length:.1f}  speed {s.angular_velocity:g}" for i, s in enumerate(segs)]
        dpg.configure_item(self.segment_list_id, items=items)
        if items:
            dpg.set_value(self.segment_list_id, items[clamp(sel or 0, 0, len(items) - 1)])

    def _on_select_segment(self, sender, app_data, user_data):
        items = dpg.get_item_configuration(self.segment_list_id).get("items", [])
        if app_data in items:
            self.ctx.select_index(items.index(app_data))
        self._populate_edit_fields_from_selected()
        with self.ctx.lock:
            self._last_edit_selected_idx = self.ctx.selected_index

    def _populate_edit_fields_from_selected(self):
        seg = self.ctx.get_selected_segment()
        if not seg:
            return
        dpg.set_value(self.speed_id, f"{seg.angular_velocity:g}")
        dpg.set_value(self.length_id, f"{seg.length:g}")
        dpg.set_value(self.degrees_id, f"{seg.angle_degrees():.3f}")
        dpg.set_value(self.ball_color_id, (*seg.ball_color, 255))
        dpg.set_value(self.line_color_id, (*seg.line_color, 255))

    def _on_add_segment(self):
        self.ctx.add_segment()
        self._refresh_segment_list()
        self._populate_edit_fields_from_selected()
        self._set_status("Added segment.")

    def _on_remove_segment(self):
        if self.ctx.remove_selected():
            self._refresh_segment_list()
            self._populate_edit_fields_from_selected()
            self._set_status("Removed selected segment.")
        else:
            self._set_error("No segment selected.")

    def _apply_edit(self, label: str, **edits):
        try:
            changed = self.ctx.edit_selected(**edits)
        except PendulumChainError as exc:
            self._set_error(str(exc))
            return
        if not changed:
            self._set_error("No segment selected to edit.")
            return
        self._refresh_segment_list()
        self._set_status(f"Updated {label}.")

    def _on_speed(self, sender, app_data, user_data=None):
        value = try_float(app_data)
        if value is None:
            self._set_error("Speed must be a number.")
            return
        self._apply_edit("speed", speed=value)

    def _on_length(self, sender, app_data, user_data=None):
        value = try_float(app_data)
        if value is None:
            self._set_error("Length must be a number.")
            return
        self._apply_edit("length", length=value)
        seg = self.ctx.get_selected_segment()
        if seg:
            dpg.set_value(self.length_id, f"{seg.length:g}")

    def _on_degrees(self, sender, app_data, user_data=None):
        value = try_float(app_data)
        if value is None:
            self._set_error("Degrees must be a number.")
            return
        self._apply_edit("angle", degrees=value)

    def _on_ball_color(self, sender, app_data, user_data=None):
        # get_value reports 0..255, unlike the normalized callback payload
        self._apply_edit("ball color", ball_color=dpg.get_value(self.ball_color_id))

    def _on_line_color(self, sender, app_data, user_data=None):
        self._apply_edit("line color", line_color=dpg.get_value(self.line_color_id))

    def _on_trail_count(self, sender, app_data, user_data=None):
        value = try_int(app_data)
        if value is None:
            self._set_error("Trail count must be a whole number.")
            return
        applied = self.ctx.set_max_trail_count(value)
        dpg.set_value(self.trails_id, applied)
        self._set_status(f"Trail length set to {applied}.")

    def _on_trail_step(self, delta: int):
        applied = self.ctx.increment_trails(delta)
        dpg.set_value(self.trails_id, applied)

    def _toggle_play(self):
        playing = self.ctx.toggle()
        dpg.configure_item(self.play_button_id, label="Pause" if playing else "Play")
        self._set_status(f"Animation {'playing' if playing else 'paused'}.")

    def _step_once(self):
        self.ctx.step_once()
        self._set_status("Stepped one tick.")

    def _zoom(self, factor: float):
        with self.ctx.lock:
            self.ctx.camera.zoom(factor)

    def _center_view(self):
        self.ctx.center_view()

    def load_preset(self, name: str):
        try:
            self.ctx.load_preset(name.strip())
        except KeyError:
            self._set_error(f"Unknown preset '{name}'.")
            return
        self.ctx.center_view()
        self._refresh_segment_list()
        self._populate_edit_fields_from_selected()
        self._set_status(f"Loaded preset: {name}")

    def _sync_ui_with_ctx(self):
        """
        Periodic UI update: keeps the selected segment's angle readout and the play button current.
        """
        seg = self.ctx.get_selected_segment()
        with self.ctx.lock:
            current_idx = self.ctx.selected_index
            playing = self.ctx.playing
        if seg:
            if current_idx != self._last_edit_selected_idx:
                self._refresh_segment_list()
                self._populate_edit_fields_from_selected()
                self._last_edit_selected_idx = current_idx
            elif playing:
                dpg.set_value(self.degrees_id, f"{seg.angle_degrees():.3f}")
        dpg.configure_item(self.play_button_id, label="Pause" if playing else "Play")
        self._schedule_sync()

# ============================================================
# Application Entry
# ============================================================


def main():
    setup_logging(logging.INFO)
    ctx = AppContext()

    renderer = PygameRenderer(ctx)
    renderer.start()

    UI(ctx)
    ctx.start()

    try:
        dpg.start_dearpygui()
    finally:
        ctx.shutdown()
        renderer.running = False
        renderer.join(timeout=2.0)
        dpg.destroy_context()


if __name__ == "__main__":
    main()
