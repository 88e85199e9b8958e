"""
Unit Tests for the DragController state machine.
"""
import logging
import random

import pytest

from sliderule.config import HOME_X, SLIDE_RANGE, CURSOR_RANGE
from sliderule.controller.drag import (
    BodyDrag, CursorDrag, DragController, DragMode, SlideDrag, classify_target
)
from sliderule.controller.viewport import ViewportController
from sliderule.model.geometry import Point
from sliderule.model.state import InteractionState


@pytest.fixture
def viewport():
    return ViewportController()


@pytest.fixture
def drag(viewport):
    return DragController(viewport)


class TestClassifyTarget:

    @pytest.mark.parametrize("tag, mode", [
        ("slide", DragMode.SLIDE),
        ("cursor", DragMode.CURSOR),
        (None, DragMode.BODY),
        ("stator", DragMode.BODY),
    ])
    def test_classify(self, tag, mode):
        assert classify_target(tag) is mode


class TestLifecycle:

    def test_idle_by_default(self, drag):
        assert drag.active is False
        assert drag.mode is DragMode.NONE
        assert drag.session is None

    def test_move_while_idle_is_ignored(self, drag):
        state = InteractionState()
        assert drag.move(Point(80.0, 10.0), state) is state

    def test_end_while_idle_is_ignored(self, drag):
        state = InteractionState()
        assert drag.end(Point(80.0, 10.0), state) is state

    @pytest.mark.parametrize("mode, session_type", [
        (DragMode.SLIDE, SlideDrag),
        (DragMode.CURSOR, CursorDrag),
        (DragMode.BODY, BodyDrag),
    ])
    def test_begin_snapshots_value(self, drag, mode, session_type):
        state = InteractionState(slide_offset=12.0, cursor_offset=34.0)
        drag.begin(mode, Point(1.0, 2.0), state)
        assert isinstance(drag.session, session_type)
        assert drag.mode is mode
        assert drag.session.start == Point(1.0, 2.0)

    def test_begin_when_mode_none_then_raises_error(self, drag):
        with pytest.raises(ValueError):
            drag.begin(DragMode.NONE, Point(0.0, 0.0), InteractionState())

    def test_end_applies_final_move_and_goes_idle(self, drag):
        state = InteractionState(slide_offset=0.0)
        drag.begin(DragMode.SLIDE, Point(10.0, 40.0), state)
        state = drag.end(Point(17.0, 40.0), state)
        assert state.slide_offset == pytest.approx(7.0)
        assert drag.active is False
        assert drag.mode is DragMode.NONE

    def test_begin_while_active_restarts_and_warns(self, drag, caplog):
        state = InteractionState(slide_offset=0.0, cursor_offset=50.0)
        drag.begin(DragMode.SLIDE, Point(10.0, 40.0), state)

        with caplog.at_level(logging.WARNING, logger="sliderule.controller.drag"):
            drag.begin(DragMode.CURSOR, Point(50.0, 30.0), state)

        assert "active slide drag" in caplog.text
        assert drag.mode is DragMode.CURSOR
        state = drag.end(Point(60.0, 30.0), state)
        assert state.cursor_offset == pytest.approx(60.0)
        assert state.slide_offset == 0.0
        assert drag.active is False

    def test_cancel_drops_session(self, drag):
        drag.begin(DragMode.CURSOR, Point(0.0, 0.0), InteractionState())
        drag.cancel()
        assert drag.active is False


class TestSlideAndCursor:

    def test_slide_follows_pointer_from_snapshot(self, drag):
        state = InteractionState(slide_offset=5.0)
        drag.begin(DragMode.SLIDE, Point(10.0, 40.0), state)
        state = drag.move(Point(12.0, 40.0), state)
        state = drag.move(Point(20.0, 0.0), state)
        assert state.slide_offset == pytest.approx(15.0)

    def test_slide_drag_leaves_cursor_and_viewport_alone(self, drag):
        start = InteractionState()
        drag.begin(DragMode.SLIDE, Point(10.0, 40.0), start)
        state = drag.move(Point(40.0, 70.0), start)
        assert state.cursor_offset == start.cursor_offset
        assert state.rect == start.rect

    def test_cursor_drag_leaves_slide_alone(self, drag):
        start = InteractionState(slide_offset=-20.0)
        drag.begin(DragMode.CURSOR, Point(50.0, 40.0), start)
        state = drag.move(Point(60.0, 40.0), start)
        assert state.cursor_offset == pytest.approx(60.0)
        assert state.slide_offset == -20.0

    def test_offsets_stay_in_range_for_arbitrary_moves(self, drag):
        rng = random.Random(1234)
        for mode, attr, (lo, hi) in (
            (DragMode.SLIDE, "slide_offset", SLIDE_RANGE),
            (DragMode.CURSOR, "cursor_offset", CURSOR_RANGE),
        ):
            state = InteractionState()
            drag.begin(mode, Point(0.0, 0.0), state)
            for _ in range(200):
                state = drag.move(Point(rng.uniform(-500.0, 500.0), 0.0), state)
                assert lo <= getattr(state, attr) <= hi
            drag.end(Point(0.0, 0.0), state)

    def test_mode_does_not_change_mid_gesture(self, drag):
        state = InteractionState()
        drag.begin(DragMode.CURSOR, Point(50.0, 30.0), state)
        # pointer crosses the slide; still a cursor drag
        state = drag.move(Point(55.0, 40.0), state)
        assert drag.mode is DragMode.CURSOR
        assert state.slide_offset == 0.0


class TestBodyPan:

    def test_pan_moves_against_pointer(self, drag, viewport):
        viewport.zoom_at(Point(50.0, 40.0), 2.0)
        state = InteractionState(rect=viewport.rect)
        origin = state.rect.origin
        drag.begin(DragMode.BODY, Point(50.0, 40.0), state)
        # pointer moved 5 units left in the (unchanged) frame
        state = drag.move(Point(45.0, 40.0), state)
        assert state.rect.x == pytest.approx(origin.x + 5.0)
        assert state.rect.y == pytest.approx(origin.y)
        assert viewport.rect == state.rect

    def test_pan_clamps_exactly_at_home(self, drag, viewport):
        viewport.zoom_at(Point(50.0, 40.0), 2.0)
        state = InteractionState(rect=viewport.rect)
        drag.begin(DragMode.BODY, Point(50.0, 40.0), state)
        state = drag.end(Point(500.0, 40.0), state)
        assert state.rect.x == HOME_X
