"""
Unit Tests for the logical-space primitives.
"""
import pytest

from sliderule.model.geometry import LogicalRect, Point, clip


class TestClip:
    """Tests for clip()."""

    @pytest.mark.parametrize("value", [-100.0, -3.5, 0.0, 42.0, 100.0])
    def test_clip_when_in_range_then_returns_value(self, value):
        assert clip(value, -100.0, 100.0) == value

    def test_clip_when_below_then_returns_lower(self):
        assert clip(-250.0, -100.0, 100.0) == -100.0

    def test_clip_when_above_then_returns_upper(self):
        assert clip(1e9, 0.0, 100.0) == 100.0

    @pytest.mark.parametrize("value", [-1e6, -101.0, -0.1, 0.0, 55.5, 100.1, 1e6])
    def test_clip_result_always_within_bounds(self, value):
        assert 0.0 <= clip(value, 0.0, 100.0) <= 100.0


class TestLogicalRect:
    """Tests for LogicalRect."""

    def test_init_when_zero_width_then_raises_error(self):
        with pytest.raises(ValueError, match="width must be > 0"):
            LogicalRect(0.0, 0.0, 0.0, 10.0)

    def test_init_when_negative_height_then_raises_error(self):
        with pytest.raises(ValueError, match="height must be > 0"):
            LogicalRect(0.0, 0.0, 10.0, -1.0)

    def test_edges_and_origin(self):
        r = LogicalRect(-10.0, 0.0, 120.0, 80.0)
        assert r.origin == Point(-10.0, 0.0)
        assert r.right == 110.0
        assert r.bottom == 80.0

    def test_contains_rect_when_inside_then_true(self):
        home = LogicalRect(-10.0, 0.0, 120.0, 80.0)
        assert home.contains_rect(LogicalRect(0.0, 10.0, 50.0, 30.0))
        assert home.contains_rect(home)

    def test_contains_rect_when_sticking_out_then_false(self):
        home = LogicalRect(-10.0, 0.0, 120.0, 80.0)
        assert not home.contains_rect(LogicalRect(-11.0, 10.0, 50.0, 30.0))

    def test_translated_keeps_size(self):
        r = LogicalRect(1.0, 2.0, 3.0, 4.0).translated(10.0, -2.0)
        assert (r.x, r.y, r.w, r.h) == (11.0, 0.0, 3.0, 4.0)

    def test_point_arithmetic(self):
        assert Point(1.0, 2.0) + Point(3.0, 4.0) == Point(4.0, 6.0)
        assert Point(1.0, 2.0) - Point(3.0, 4.0) == Point(-2.0, -2.0)
