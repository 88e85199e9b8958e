"""
Configuration & Global Constants
================================
This module serves as the central registry for the fixed geometry of the
slide rule and the limits of the interactive state.

Why is this file needed?
------------------------
1. Single source: The home extent and the offset ranges are read by the
   controllers, the view and the tests; none of them hardcode the numbers.
2. Startup: These values are fixed when the process starts. Nothing here is
   persisted or changed at runtime.

Exports:
    HOME_X, HOME_Y, HOME_W, HOME_H (float): The home extent (largest viewport).
    ZOOM_STEP (float): Zoom factor applied per wheel tick.
    SLIDE_RANGE, CURSOR_RANGE (tuple[float, float]): Allowed offsets.
    INITIAL_SLIDE_OFFSET, INITIAL_CURSOR_OFFSET (float): Offsets at startup.
"""
from typing import Final

# Home extent in logical units: the whole rule plus a small margin.
HOME_X: Final[float] = -10.0
HOME_Y: Final[float] = 0.0
HOME_W: Final[float] = 120.0
HOME_H: Final[float] = 80.0

ZOOM_STEP: Final[float] = 1.15

# Length of one scale decade in logical units (scale fraction 0..1 -> 0..100)
SCALE_LENGTH: Final[float] = 100.0

SLIDE_RANGE: Final[tuple[float, float]] = (-100.0, 100.0)
CURSOR_RANGE: Final[tuple[float, float]] = (0.0, 100.0)

INITIAL_SLIDE_OFFSET: Final[float] = 0.0
INITIAL_CURSOR_OFFSET: Final[float] = 50.0
