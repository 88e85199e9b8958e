"""Interactive virtual slide rule."""

__version__ = "0.1.0"
