"""
Slide Rule Layout
=================
Logical geometry of the rule: where the body, the slide and the cursor are
drawn, where each scale's baseline runs and how long each tick tier is.

All values are in logical units. A scale fraction f is drawn at
x = SCALE_LENGTH * f, so the left index sits at x=0 and the right index at
x=100.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Optional

import numpy as np

from sliderule.config import SCALE_LENGTH
from sliderule.model.geometry import LogicalRect
from sliderule.model.scales import (
    Mark, MarkTier, linear_log_marks, square_root_log_marks, linear_reading, square_root_reading
)
from sliderule.model.state import InteractionState


class Part(StrEnum):
    """Movable group a drawing element belongs to."""
    BODY = "body"
    SLIDE = "slide"
    CURSOR = "cursor"


@dataclass(frozen=True)
class ScaleTrack:
    """
    One engraved scale.

    Attributes:
        name: Letter printed at the left end.
        part: Group the scale moves with.
        baseline: y of the edge the ticks grow from.
        mirrored: Ticks grow upwards (towards smaller y) when True.
        marks: Callable returning the (cached) marks of the scale family.
        name_y: Baseline of the scale letter.
        reading: Converts a scale fraction to the engraved value.
    """
    name: str
    part: Part
    baseline: float
    mirrored: bool
    marks: Callable[[], tuple[Mark, ...]]
    name_y: float
    reading: Callable[[float], Optional[float]]

    def placed_marks(self) -> list[Mark]:
        """Marks of the family, mirrored to match this track."""
        marks = self.marks()
        if self.mirrored:
            return [m.mirror() for m in marks]
        return list(marks)


# ------------------------------------------------------------------------------
# Parts
# ------------------------------------------------------------------------------

SLIDE_RECT = LogicalRect(-8.0, 35.0, 116.0, 10.0)
UPPER_STATOR_RECT = LogicalRect(-3.0, 25.0, 106.0, 10.0)
LOWER_STATOR_RECT = LogicalRect(-3.0, 45.0, 106.0, 10.0)

# Cursor frame relative to the hairline at x=0
CURSOR_RECT = LogicalRect(-5.0, 24.75, 10.0, 30.5)
HAIRLINE_TOP = 25.0
HAIRLINE_BOTTOM = 55.0

# End braces holding the two stators together
BRACE_INNER_X = -3.0
BRACE_OUTER_X = -8.0
BRACE_CORNER_RADIUS = 1.0
BRACE_NOTCH_RADIUS = 7.0
BRACE_NOTCH_CHORD = 12.0

SCALE_NAME_X = -2.0

TRACKS: tuple[ScaleTrack, ...] = (
    ScaleTrack("A", Part.BODY, baseline=35.0, mirrored=True, marks=square_root_log_marks, name_y=33.5,
               reading=square_root_reading),
    ScaleTrack("B", Part.SLIDE, baseline=35.0, mirrored=False, marks=square_root_log_marks, name_y=37.7,
               reading=square_root_reading),
    ScaleTrack("C", Part.SLIDE, baseline=45.0, mirrored=True, marks=linear_log_marks, name_y=43.5,
               reading=linear_reading),
    ScaleTrack("D", Part.BODY, baseline=45.0, mirrored=False, marks=linear_log_marks, name_y=47.7,
               reading=linear_reading),
)

# ------------------------------------------------------------------------------
# Ticks
# ------------------------------------------------------------------------------

TICK_LENGTHS: dict[MarkTier, float] = {
    MarkTier.PRIMARY: 1.25,
    MarkTier.SECONDARY: 1.5,
    MarkTier.TERTIARY: 1.0,
    MarkTier.QUATERNARY: 0.5,
}

MAJOR_FONT_SIZE = 2.0
MINOR_FONT_SIZE = 1.2


def mark_x(mark: Mark) -> float:
    return SCALE_LENGTH * mark.value


def tick_span(mark: Mark, baseline: float) -> tuple[float, float]:
    """(y0, y1) of the tick stroke drawn for ``mark`` from ``baseline``."""
    length = TICK_LENGTHS[mark.tier]
    return baseline, baseline - length if mark.mirrored else baseline + length


def label_anchor(mark: Mark, baseline: float) -> tuple[float, float, bool]:
    """
    Where to put the text of a labeled mark.

    Returns:
        (x, y, centered): y is the text baseline; primary labels are centered
        on the tick, minor labels start just right of it.
    """
    x = mark_x(mark)
    if mark.tier is MarkTier.PRIMARY:
        return x, baseline + (-1.5 if mark.mirrored else 2.7), True
    return x + 0.1, baseline + (-1.5 if mark.mirrored else 2.3), False


def cursor_readings(state: InteractionState) -> dict[str, Optional[float]]:
    """
    Value under the hairline on every scale, keyed by scale name.

    Scales on the slide are read relative to the slide offset; a scale the
    hairline does not cross reads None.
    """
    readings: dict[str, Optional[float]] = {}
    for track in TRACKS:
        x = state.cursor_offset
        if track.part is Part.SLIDE:
            x -= state.slide_offset
        readings[track.name] = track.reading(x / SCALE_LENGTH)
    return readings


# ------------------------------------------------------------------------------
# Braces
# ------------------------------------------------------------------------------

def _arc(
    center: tuple[float, float],
    radius: float,
    start_deg: float,
    end_deg: float,
    n_segments: int
) -> np.ndarray:
    """Points of a circular arc (y down, angles in degrees), both ends included."""
    cx, cy = center
    theta = np.deg2rad(np.linspace(start_deg, end_deg, n_segments + 1))
    return np.c_[cx + radius * np.cos(theta), cy + radius * np.sin(theta)]


def brace_outline(right: bool = False, n_segments: int = 12) -> np.ndarray:
    """
    Closed (N, 2) outline of an end brace.

    The brace spans the body height (y 25..55) and carries a concave thumb
    notch in its outer edge. The right brace mirrors the left one about the
    middle of the scales.

    Args:
        right: Build the right brace instead of the left one.
        n_segments: Segments per arc.
    """
    top, bottom = UPPER_STATOR_RECT.y, LOWER_STATOR_RECT.bottom
    inner, outer, r = BRACE_INNER_X, BRACE_OUTER_X, BRACE_CORNER_RADIUS
    mid_y = (top + bottom) / 2.0
    half_chord = BRACE_NOTCH_CHORD / 2.0
    center_offset = math.sqrt(BRACE_NOTCH_RADIUS ** 2 - half_chord ** 2)
    notch_angle = math.degrees(math.atan2(half_chord, center_offset))

    pts = np.vstack([
        [[inner, top], [inner, bottom]],
        _arc((outer + r, bottom - r), r, 90.0, 180.0, n_segments),
        _arc((outer - center_offset, mid_y), BRACE_NOTCH_RADIUS, notch_angle, -notch_angle, n_segments),
        _arc((outer + r, top + r), r, 180.0, 270.0, n_segments),
    ])

    if right:
        pts[:, 0] = SCALE_LENGTH - pts[:, 0]

    # close the ring
    if not np.allclose(pts[0], pts[-1]):
        pts = np.vstack((pts, pts[0]))

    return pts
