#!/usr/bin/env python3
"""
Shared constants for Pendulum Chain (world units are pixels at zoom 1.0).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""
import math

FULL_RADIANS = 2 * math.pi

# Motion controls
TICK_SCALE = 0.01  # radians per tick for one unit of angular speed

# New segment defaults (used by the "Add segment" control)
DEFAULT_SEGMENT_LENGTH = 50.0
DEFAULT_SEGMENT_SPEED = 1.0
DEFAULT_SEGMENT_ANGLE = math.pi / 2

# Segment styling
DEFAULT_LINE_COLOR = (255, 255, 255)
DEFAULT_BALL_COLOR = (255, 255, 255)
DEFAULT_LINE_WIDTH = 3
DEFAULT_BALL_RADIUS = 3.0

# Trails
DEFAULT_TRAIL_COLOR = (255, 255, 255)
DEFAULT_MAX_TRAILS = 10
MIN_TRAILS = 0
MAX_TRAILS = 999_999

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
BACKGROUND_COLOR = (10, 12, 18)
SELECTION_COLOR = (255, 255, 0)
HUD_TEXT_COLOR = (200, 200, 200)
TARGET_FPS = 60

# Camera zoom (pixels per world unit)
ZOOM_IN = 1.2
ZOOM_OUT = 1 / ZOOM_IN
DEFAULT_SCALE = 1.0
MIN_SCALE = 0.02
MAX_SCALE = 50.0

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
