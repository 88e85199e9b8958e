"""
Interaction Engine
==================
Coordinate mapping, viewport control and the pointer-drag state machine.

Why is this package needed?
---------------------------
1. Gestures: It decides which part of the rule (slide, cursor or the whole
   body) a drag moves, and by how much.
2. Viewport: It keeps the visible rectangle inside the home extent while
   panning and zooming.

Note: This package should be pure Python/NumPy and should NOT import PySide6.
"""
