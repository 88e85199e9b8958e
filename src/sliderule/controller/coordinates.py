"""
Device -> Logical Coordinate Mapping.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from sliderule.model.geometry import LogicalRect, Point

if TYPE_CHECKING:
    import numpy.typing as npt


def fit_transform(rect: LogicalRect, width: float, height: float) -> np.ndarray:
    """
    Logical->device matrix showing ``rect`` in a ``width`` x ``height`` surface.

    The rectangle is scaled uniformly to fit the surface and centered
    along the axis with spare room (an SVG viewBox with
    preserveAspectRatio="xMidYMid meet").
    """
    scale = min(width / rect.w, height / rect.h)
    tx = (width - rect.w * scale) / 2.0 - rect.x * scale
    ty = (height - rect.h * scale) / 2.0 - rect.y * scale
    return np.array([
        [scale, 0.0, tx],
        [0.0, scale, ty],
        [0.0, 0.0, 1.0],
    ])


class CoordinateMapper:
    """
    Converts device (screen pixel) coordinates into logical coordinates.

    The mapping is a 3x3 affine matrix acting on column vectors (x, y, 1).
    It is a snapshot of the render surface's transform, so build a new mapper
    whenever the viewport or the surface size changes.
    """

    def __init__(self, device_to_logical: npt.ArrayLike) -> None:
        matrix = np.asarray(device_to_logical, dtype=np.float64)
        if matrix.shape != (3, 3):
            raise ValueError(f"Expected a 3x3 affine matrix, got shape {matrix.shape}.")
        self._matrix = matrix

    @classmethod
    def from_screen_ctm(cls, logical_to_device: npt.ArrayLike) -> CoordinateMapper:
        """
        Build the mapper from the surface's logical->device matrix.

        Raises:
            numpy.linalg.LinAlgError: If the matrix is singular (zero-sized surface).
        """
        return cls(np.linalg.inv(np.asarray(logical_to_device, dtype=np.float64)))

    @classmethod
    def for_viewport(cls, rect: LogicalRect, width: float, height: float) -> CoordinateMapper:
        """Mapping of ``rect`` fitted into a ``width`` x ``height`` surface (see ``fit_transform``)."""
        return cls.from_screen_ctm(fit_transform(rect, width, height))

    def to_logical(self, device_point: tuple[float, float]) -> Point:
        x, y, _ = self._matrix @ np.array([device_point[0], device_point[1], 1.0])
        return Point(float(x), float(y))

    def to_device(self, point: Point) -> tuple[float, float]:
        """Inverse mapping, logical -> device."""
        x, y, _ = np.linalg.solve(self._matrix, np.array([point.x, point.y, 1.0]))
        return float(x), float(y)
