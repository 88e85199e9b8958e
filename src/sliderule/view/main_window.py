"""
Main Application Window
=======================
The primary GUI container: the slide rule canvas, the menu bar and a status
bar showing the values under the hairline.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects global actions (View -> Reset View) to the
   interaction engine.
"""
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QLabel
from PySide6.QtGui import QAction, QKeySequence

from sliderule.controller.engine import InteractionEngine
from sliderule.model.layout import cursor_readings
from sliderule.model.state import InteractionState
from sliderule.view.widgets.slide_rule_view import SlideRuleView


VISIBLE_APP_NAME = "Slide Rule"


def format_reading(value: Optional[float]) -> str:
    """Four significant digits, or a dash when the hairline is off the scale."""
    if value is None:
        return "-"
    return f"{value:.4g}"


class MainWindow(QMainWindow):
    def __init__(self, engine: InteractionEngine) -> None:
        super().__init__()
        self.engine = engine

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 800)

        # --- CENTRAL CANVAS ---
        self.canvas = SlideRuleView(engine)
        self.setCentralWidget(self.canvas)

        # --- STATUS BAR ---
        self.readout_label = QLabel()
        self.zoom_label = QLabel()
        self.statusBar().addWidget(self.readout_label, 1)
        self.statusBar().addPermanentWidget(self.zoom_label)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # --- CONNECTIONS ---
        self.canvas.state_changed.connect(self.on_state_changed)

        self.on_state_changed(engine.state)

    def _create_actions(self) -> None:
        self.act_reset_view = QAction("Reset View", self)
        self.act_reset_view.setShortcut("Ctrl+0")
        self.act_reset_view.triggered.connect(self.engine.reset_view)

        self.act_exit = QAction("Quit", self)
        self.act_exit.setShortcut(QKeySequence.Quit)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_exit)

        view_menu = menu_bar.addMenu("&View")
        view_menu.addAction(self.act_reset_view)

    # --- SLOTS ---

    def on_state_changed(self, state: InteractionState) -> None:
        """Refresh the readout and zoom level."""
        readings = cursor_readings(state)
        self.readout_label.setText(
            "   ".join(f"{name}: {format_reading(value)}" for name, value in readings.items())
        )
        zoom = self.engine.viewport.home.w / state.rect.w
        self.zoom_label.setText(f"Zoom {zoom * 100:.0f} %")
