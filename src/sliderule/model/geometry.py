"""
Geometric Primitives of the logical drawing space.
"""
from __future__ import annotations

from dataclasses import dataclass


def clip(value: float, lower: float, upper: float) -> float:
    """Return ``value`` limited to the closed interval [lower, upper]."""
    return min(max(value, lower), upper)


@dataclass(frozen=True)
class Point:
    """A point in logical space."""
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class LogicalRect:
    """
    An axis-aligned rectangle in logical space (the visible window).

    Attributes:
        x, y: Top-left corner (y grows downwards, as on screen).
        w, h: Width and height, both strictly positive.
    """
    x: float
    y: float
    w: float
    h: float

    def __post_init__(self) -> None:
        if self.w <= 0.0:
            raise ValueError(f"Rectangle width must be > 0, got {self.w}.")
        if self.h <= 0.0:
            raise ValueError(f"Rectangle height must be > 0, got {self.h}.")

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains_rect(self, other: LogicalRect, eps: float = 1e-9) -> bool:
        """True if ``other`` lies fully inside this rectangle (within ``eps``)."""
        return (
            other.x >= self.x - eps
            and other.y >= self.y - eps
            and other.right <= self.right + eps
            and other.bottom <= self.bottom + eps
        )

    def translated(self, dx: float, dy: float) -> LogicalRect:
        return LogicalRect(self.x + dx, self.y + dy, self.w, self.h)
