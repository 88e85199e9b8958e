"""
Unit Tests for CoordinateMapper.
"""
import numpy as np
import pytest

from sliderule.controller.coordinates import CoordinateMapper, fit_transform
from sliderule.model.geometry import LogicalRect, Point


class TestCoordinateMapper:

    def test_identity(self):
        mapper = CoordinateMapper(np.eye(3))
        assert mapper.to_logical((12.5, -3.0)) == Point(12.5, -3.0)

    def test_init_when_wrong_shape_then_raises_error(self):
        with pytest.raises(ValueError, match="3x3"):
            CoordinateMapper(np.eye(2))

    def test_from_screen_ctm_inverts(self):
        ctm = np.array([[10.0, 0.0, 100.0], [0.0, 10.0, 50.0], [0.0, 0.0, 1.0]])
        mapper = CoordinateMapper.from_screen_ctm(ctm)
        p = mapper.to_logical((200.0, 150.0))
        assert (p.x, p.y) == pytest.approx((10.0, 10.0))

    def test_from_screen_ctm_when_singular_then_linalg_error_propagates(self):
        with pytest.raises(np.linalg.LinAlgError):
            CoordinateMapper.from_screen_ctm(np.zeros((3, 3)))

    def test_for_viewport_maps_corners_when_aspect_matches(self):
        mapper = CoordinateMapper.for_viewport(LogicalRect(-10.0, 0.0, 120.0, 80.0), 1200.0, 800.0)
        p = mapper.to_logical((0.0, 0.0))
        assert (p.x, p.y) == pytest.approx((-10.0, 0.0))
        p = mapper.to_logical((1200.0, 800.0))
        assert (p.x, p.y) == pytest.approx((110.0, 80.0))

    def test_for_viewport_centers_letterboxed_axis(self):
        # Surface twice as wide as needed: the rect is centered horizontally
        mapper = CoordinateMapper.for_viewport(LogicalRect(0.0, 0.0, 100.0, 100.0), 400.0, 200.0)
        p = mapper.to_logical((100.0, 0.0))
        assert (p.x, p.y) == pytest.approx((0.0, 0.0))
        p = mapper.to_logical((200.0, 100.0))
        assert (p.x, p.y) == pytest.approx((50.0, 50.0))

    def test_to_device_round_trip(self):
        mapper = CoordinateMapper.for_viewport(LogicalRect(5.0, 10.0, 30.0, 20.0), 640.0, 480.0)
        device = mapper.to_device(Point(17.0, 22.0))
        p = mapper.to_logical(device)
        assert (p.x, p.y) == pytest.approx((17.0, 22.0))

    def test_fit_transform_letterboxes_vertically(self):
        # Surface taller than needed: 50 px bars above and below
        ctm = fit_transform(LogicalRect(0.0, 0.0, 100.0, 100.0), 200.0, 300.0)
        assert np.allclose(ctm, [[2.0, 0.0, 0.0], [0.0, 2.0, 50.0], [0.0, 0.0, 1.0]])
