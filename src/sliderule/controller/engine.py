"""
Interaction Engine
Routes pointer and wheel events to the drag and viewport controllers.

Every handler reads the state, computes the new state and publishes it before
returning, so event N is fully applied before event N+1 is handled.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from sliderule.controller.coordinates import CoordinateMapper
from sliderule.controller.drag import DragController, DragMode, classify_target
from sliderule.controller.viewport import ViewportController
from sliderule.model.state import InteractionState

logger = logging.getLogger(__name__)

DevicePoint = tuple[float, float]
StateListener = Callable[[InteractionState], None]


class InteractionEngine:
    """Owns the InteractionState and the controllers that update it."""

    def __init__(self, state: Optional[InteractionState] = None) -> None:
        state = state if state is not None else InteractionState()
        self.viewport = ViewportController(rect=state.rect)
        self.drag = DragController(self.viewport)
        self._state = replace(state, rect=self.viewport.rect)
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> InteractionState:
        return self._state

    def add_listener(self, callback: StateListener) -> None:
        """Call ``callback`` with the new state whenever it changes."""
        self._listeners.append(callback)

    def _publish(self, state: InteractionState) -> None:
        if state == self._state:
            return
        self._state = state
        for callback in self._listeners:
            callback(state)

    # ------------------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------------------

    def pointer_down(self, device_point: DevicePoint, target: Optional[str], mapper: CoordinateMapper) -> DragMode:
        """
        Start a drag.

        Args:
            device_point: Pointer position in device pixels.
            target: Hit-test tag of the element under the pointer.
            mapper: Device->logical mapping of the surface right now.

        Returns:
            The mode chosen for the gesture.
        """
        mode = classify_target(target)
        self.drag.begin(mode, mapper.to_logical(device_point), self._state)
        return mode

    def pointer_move(self, device_point: DevicePoint, mapper: CoordinateMapper) -> None:
        if not self.drag.active:
            return
        self._publish(self.drag.move(mapper.to_logical(device_point), self._state))

    def pointer_up(self, device_point: DevicePoint, mapper: CoordinateMapper) -> None:
        if not self.drag.active:
            return
        self._publish(self.drag.end(mapper.to_logical(device_point), self._state))

    def pointer_leave(self, device_point: DevicePoint, mapper: CoordinateMapper) -> None:
        self.pointer_up(device_point, mapper)

    # ------------------------------------------------------------------------------
    # Wheel / view actions
    # ------------------------------------------------------------------------------

    def wheel(self, device_point: DevicePoint, delta_y: float, mapper: CoordinateMapper) -> None:
        """
        Zoom one step around the pointer.

        ``delta_y`` follows the DOM/Qt convention of "scroll distance", so a
        negative value (wheel rolled away from the user) zooms in.
        """
        anchor = mapper.to_logical(device_point)
        rect = self.viewport.zoom_step(anchor, -delta_y)
        self._publish(replace(self._state, rect=rect))

    def reset_view(self) -> None:
        """Back to the home extent; offsets are kept."""
        self.drag.cancel()
        self._publish(replace(self._state, rect=self.viewport.reset()))
        logger.info("View reset.")
