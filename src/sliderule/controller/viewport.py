"""
Viewport Controller
Pan and zoom of the visible logical rectangle, clamped to the home extent.
"""
from __future__ import annotations

import logging
from typing import Optional

from sliderule.config import ZOOM_STEP
from sliderule.model.geometry import LogicalRect, Point, clip
from sliderule.model.state import home_rect

logger = logging.getLogger(__name__)


class ViewportController:
    """
    Owns the visible rectangle.

    After every operation the rectangle lies fully inside the home extent and
    is never wider or taller than it: the view can zoom in freely but never
    out past 1:1.
    """

    def __init__(self, home: Optional[LogicalRect] = None, rect: Optional[LogicalRect] = None) -> None:
        self.home: LogicalRect = home if home is not None else home_rect()
        self.rect: LogicalRect = self.clamp(rect) if rect is not None else self.home

    def clamp(self, rect: LogicalRect) -> LogicalRect:
        """Shrink ``rect`` to the home size if needed and move it inside home."""
        home = self.home
        if home.contains_rect(rect):
            return rect
        logger.debug("Clamping %s into the home extent.", rect)
        w = min(rect.w, home.w)
        h = min(rect.h, home.h)
        return LogicalRect(
            x=clip(rect.x, home.x, home.x + home.w - w),
            y=clip(rect.y, home.y, home.y + home.h - h),
            w=w,
            h=h,
        )

    def zoom_at(self, anchor: Point, factor: float) -> LogicalRect:
        """
        Zoom by ``factor`` keeping ``anchor`` fixed on screen.

        Args:
            anchor: Logical point under the pointer.
            factor: > 1 zooms in, < 1 zooms out.

        Returns:
            The new rectangle (also stored in ``self.rect``).
        """
        if factor <= 0.0:
            raise ValueError(f"Zoom factor must be > 0, got {factor}.")

        current = self.rect
        w = min(self.home.w, current.w / factor)
        h = min(self.home.h, current.h / factor)
        ideal_x = current.x + (anchor.x - current.x) * (1.0 - 1.0 / factor)
        ideal_y = current.y + (anchor.y - current.y) * (1.0 - 1.0 / factor)

        self.rect = self.clamp(LogicalRect(ideal_x, ideal_y, w, h))
        logger.debug("Zoom x%.4f at (%.2f, %.2f) -> %s", factor, anchor.x, anchor.y, self.rect)
        return self.rect

    def zoom_step(self, anchor: Point, direction: float) -> LogicalRect:
        """One wheel tick: zoom in for direction > 0, out for direction < 0."""
        if direction > 0:
            return self.zoom_at(anchor, ZOOM_STEP)
        if direction < 0:
            return self.zoom_at(anchor, 1.0 / ZOOM_STEP)
        return self.rect

    def pan_by(self, dx: float, dy: float) -> LogicalRect:
        self.rect = self.clamp(self.rect.translated(dx, dy))
        return self.rect

    def reset(self) -> LogicalRect:
        self.rect = self.home
        logger.debug("Viewport reset to home extent.")
        return self.rect
