import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import sliderule without installing it
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# GUI tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from sliderule.controller.coordinates import CoordinateMapper  # noqa: E402
from sliderule.controller.engine import InteractionEngine  # noqa: E402

SURFACE_SIZE = (1200.0, 800.0)


@pytest.fixture
def engine():
    """Engine at the home extent with the startup offsets."""
    return InteractionEngine()


@pytest.fixture
def surface_mapper(engine):
    """
    Mapper factory standing in for the render surface: every call reflects the
    engine's current viewport in a 1200x800 px surface.
    """
    def _mapper() -> CoordinateMapper:
        return CoordinateMapper.for_viewport(engine.state.rect, *SURFACE_SIZE)
    return _mapper
