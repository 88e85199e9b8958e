"""
Interaction State (Data Model)
==============================
This module defines the long-lived view state of the running application.

Why is this file needed?
------------------------
1. State Management: The visible rectangle and the two offsets live in one
   value that the host owns and hands to the controllers.
2. Decoupling: Views read from this object; controllers return an updated
   copy instead of mutating shared cells.

Classes:
    InteractionState: The viewport rectangle plus slide and cursor offsets.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from sliderule.config import (
    HOME_X, HOME_Y, HOME_W, HOME_H, INITIAL_SLIDE_OFFSET, INITIAL_CURSOR_OFFSET
)
from sliderule.model.geometry import LogicalRect


def home_rect() -> LogicalRect:
    """The home extent: the largest rectangle the viewport may show."""
    return LogicalRect(HOME_X, HOME_Y, HOME_W, HOME_H)


@dataclass(frozen=True)
class InteractionState:
    rect: LogicalRect = field(default_factory=home_rect)
    slide_offset: float = INITIAL_SLIDE_OFFSET
    cursor_offset: float = INITIAL_CURSOR_OFFSET
