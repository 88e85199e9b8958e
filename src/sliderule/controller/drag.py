"""
Drag Controller
===============
Pointer-drag state machine.

States:
    idle             -> no session
    dragging(mode)   -> one of SlideDrag / CursorDrag / BodyDrag

A gesture's mode is decided once, on pointer-down, from the element under
the pointer. It never changes until the pointer is released or leaves the
surface, even if the pointer crosses another element.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Optional, Union

from sliderule.config import SLIDE_RANGE, CURSOR_RANGE
from sliderule.controller.viewport import ViewportController
from sliderule.model.geometry import LogicalRect, Point, clip
from sliderule.model.state import InteractionState

logger = logging.getLogger(__name__)


class DragMode(StrEnum):
    SLIDE = "slide"
    CURSOR = "cursor"
    BODY = "body"
    NONE = "none"


def classify_target(tag: Optional[str]) -> DragMode:
    """
    Pick the drag mode for the element tagged ``tag``.

    Elements of the slide strip are tagged "slide", the cursor frame is tagged
    "cursor"; anything else (including no element) pans the body.
    """
    if tag == DragMode.SLIDE:
        return DragMode.SLIDE
    if tag == DragMode.CURSOR:
        return DragMode.CURSOR
    return DragMode.BODY


# ------------------------------------------------------------------------------
# Drag sessions
# ------------------------------------------------------------------------------

@dataclass(frozen=True)
class SlideDrag:
    start: Point
    offset: float


@dataclass(frozen=True)
class CursorDrag:
    start: Point
    offset: float


@dataclass(frozen=True)
class BodyDrag:
    start: Point
    rect: LogicalRect


DragSession = Union[SlideDrag, CursorDrag, BodyDrag]


class DragController:
    """
    Turns a pointer-down/move/up sequence into updates of exactly one of the
    slide offset, the cursor offset or the viewport rectangle.

    Body drags pan through ``viewport`` so the home-extent clamp applies.
    The caller must keep ``state.rect`` equal to ``viewport.rect``.
    """

    def __init__(self, viewport: ViewportController) -> None:
        self._viewport = viewport
        self._session: Optional[DragSession] = None

    @property
    def session(self) -> Optional[DragSession]:
        return self._session

    @property
    def active(self) -> bool:
        return self._session is not None

    @property
    def mode(self) -> DragMode:
        session = self._session
        if isinstance(session, SlideDrag):
            return DragMode.SLIDE
        if isinstance(session, CursorDrag):
            return DragMode.CURSOR
        if isinstance(session, BodyDrag):
            return DragMode.BODY
        return DragMode.NONE

    def begin(self, mode: DragMode, start: Point, state: InteractionState) -> None:
        """Start a gesture, snapshotting the value that ``mode`` manipulates."""
        if self._session is not None:
            logger.warning("Pointer-down during an active %s drag; restarting gesture.", self.mode)

        if mode is DragMode.SLIDE:
            self._session = SlideDrag(start, state.slide_offset)
        elif mode is DragMode.CURSOR:
            self._session = CursorDrag(start, state.cursor_offset)
        elif mode is DragMode.BODY:
            self._session = BodyDrag(start, state.rect)
        else:
            raise ValueError(f"Cannot start a drag in mode {mode!r}.")

        logger.debug("Drag started: mode=%s at (%.2f, %.2f)", mode, start.x, start.y)

    def move(self, pointer: Point, state: InteractionState) -> InteractionState:
        """
        Apply the pointer position to the grabbed value.

        Args:
            pointer: Logical pointer position, mapped with the current viewport.
            state: State before this event.

        Returns:
            Updated state (the same object when idle).
        """
        session = self._session
        if session is None:
            return state

        if isinstance(session, SlideDrag):
            dx = pointer.x - session.start.x
            return replace(state, slide_offset=clip(session.offset + dx, *SLIDE_RANGE))

        if isinstance(session, CursorDrag):
            dx = pointer.x - session.start.x
            return replace(state, cursor_offset=clip(session.offset + dx, *CURSOR_RANGE))

        # Body: the viewport has already moved during this gesture, so the
        # pointer is first expressed in the snapshot's frame.
        snapshot = session.rect
        live = self._viewport.rect
        in_snapshot = pointer - (live.origin - snapshot.origin)
        target = snapshot.origin - (in_snapshot - session.start)
        rect = self._viewport.pan_by(target.x - live.x, target.y - live.y)
        return replace(state, rect=rect)

    def end(self, pointer: Point, state: InteractionState) -> InteractionState:
        """Apply the final pointer position and return to idle."""
        if self._session is None:
            return state
        state = self.move(pointer, state)
        logger.debug("Drag finished: mode=%s", self.mode)
        self._session = None
        return state

    def cancel(self) -> None:
        """Drop the session without applying anything."""
        self._session = None
