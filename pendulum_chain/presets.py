#!/usr/bin/env python3
"""
Built-in chain presets.

Each preset is a list of SegmentSpec appended head to tail. Angles are given
in degrees like the control panel shows them; speeds are in the same units as
Segment.angular_velocity.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from .chain import Chain
from .constants import (
    DEFAULT_BALL_COLOR,
    DEFAULT_LINE_COLOR,
    DEFAULT_SEGMENT_LENGTH,
    DEFAULT_SEGMENT_SPEED,
)
from .segment import Segment
from .vector_utils import to_radians

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SegmentSpec:
    length: float
    speed: float
    degrees: float = 0.0
    line_color: Tuple[int, int, int] = DEFAULT_LINE_COLOR
    ball_color: Tuple[int, int, int] = DEFAULT_BALL_COLOR


def template_single() -> List[SegmentSpec]:
    return [SegmentSpec(DEFAULT_SEGMENT_LENGTH, DEFAULT_SEGMENT_SPEED, 90.0)]


def template_double() -> List[SegmentSpec]:
    """Slow long arm carrying a fast counter-rotating short arm."""
    return [
        SegmentSpec(100.0, 1.0, 0.0, (120, 160, 255), (120, 160, 255)),
        SegmentSpec(60.0, -3.0, 0.0, (255, 140, 120), (255, 255, 255)),
    ]


def template_spirograph() -> List[SegmentSpec]:
    """Three arms with speed ratios 1 : 5 : -9, tracing a looped rosette."""
    return [
        SegmentSpec(120.0, 1.0, 0.0, (90, 90, 110), (90, 90, 110)),
        SegmentSpec(60.0, 5.0, 0.0, (140, 200, 140), (140, 200, 140)),
        SegmentSpec(25.0, -9.0, 0.0, (255, 204, 0), (255, 204, 0)),
    ]


def template_flower() -> List[SegmentSpec]:
    return [
        SegmentSpec(90.0, 2.0, 0.0, (200, 120, 255), (200, 120, 255)),
        SegmentSpec(45.0, -6.0, 0.0, (255, 120, 200), (255, 220, 240)),
    ]


def template_empty() -> List[SegmentSpec]:
    return []


PRESETS: Dict[str, Callable[[], List[SegmentSpec]]] = {
    "Single": template_single,
    "Double": template_double,
    "Spirograph": template_spirograph,
    "Flower": template_flower,
    "Empty": template_empty,
}


def list_presets() -> List[str]:
    return list(PRESETS.keys())


def apply_preset(chain: Chain, name: str) -> List[Segment]:
    """Replace the chain's segments with the named preset. Raises KeyError if unknown."""
    specs = PRESETS[name]()
    chain.clear()
    created = []
    for item in specs:
        seg = chain.create_segment(item.length, item.speed, to_radians(item.degrees))
        seg.set_line_color(item.line_color)
        seg.set_ball_color(item.ball_color)
        created.append(seg)
    chain.reset_trail()
    logger.info("Loaded preset '%s' (%d segments)", name, len(created))
    return created
