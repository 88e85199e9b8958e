"""
Slide Rule Canvas
=================
A QGraphicsView drawing the rule in logical units. It hit-tests
pointer-downs by item tag and hands every pointer and wheel event to the
InteractionEngine. The visible rectangle comes from the engine state and is
fitted into the widget by the view transform.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from PySide6.QtCore import Qt, QPointF, QRectF, Signal
from PySide6.QtGui import (
    QBrush, QColor, QFont, QFontMetricsF, QMouseEvent, QPainter, QPainterPath, QPen, QPolygonF,
    QResizeEvent, QTransform, QWheelEvent
)
from PySide6.QtWidgets import (
    QGraphicsItem, QGraphicsLineItem, QGraphicsPathItem, QGraphicsRectItem, QGraphicsScene,
    QGraphicsSimpleTextItem, QGraphicsView, QWidget
)

from sliderule.controller.coordinates import CoordinateMapper, fit_transform
from sliderule.controller.engine import InteractionEngine
from sliderule.model import layout
from sliderule.model.geometry import LogicalRect
from sliderule.model.layout import Part, ScaleTrack
from sliderule.model.scales import MarkTier
from sliderule.model.state import InteractionState

logger = logging.getLogger(__name__)

# QGraphicsItem.data() key holding the hit-test tag
TAG_KEY = 0

# Text is laid out at this pixel size and scaled down into logical units
_FONT_PX = 20

SLIDE_COLOR = "#F7C88C"
STATOR_COLOR = "#FCDDB5"
BRACE_COLOR = "silver"
HAIRLINE_COLOR = "red"
CURSOR_FILL = QColor(255, 255, 255, 0x44)
STROKE_WIDTH = 0.08


def _qrect(rect: LogicalRect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.w, rect.h)


def transform_to_matrix(t: QTransform) -> np.ndarray:
    """QTransform (row-vector convention) as a 3x3 column-vector affine matrix."""
    return np.array([
        [t.m11(), t.m21(), t.dx()],
        [t.m12(), t.m22(), t.dy()],
        [0.0, 0.0, 1.0],
    ])


class SlideRuleView(QGraphicsView):
    """
    Render surface of the slide rule.

    Draws the rule as a QGraphicsScene in logical units and forwards raw
    pointer and wheel events to the InteractionEngine. Items that belong to
    the slide or the cursor are tagged (``data(TAG_KEY)``) so a pointer-down
    can be classified by the item it hits.
    """

    state_changed = Signal(object)  # InteractionState

    def __init__(self, engine: InteractionEngine, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.engine = engine
        self._last_pointer: tuple[float, float] = (0.0, 0.0)

        self.setScene(QGraphicsScene(self))
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setTransformationAnchor(QGraphicsView.NoAnchor)
        self.setResizeAnchor(QGraphicsView.NoAnchor)
        self.setAlignment(Qt.AlignCenter)
        self.setMouseTracking(True)
        self.setMinimumSize(320, 200)

        self._slide_item = self._build_slide()
        self._build_body()
        self._cursor_item = self._build_cursor()

        self.engine.add_listener(self._on_state_changed)
        self._apply_state(self.engine.state)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def mapper(self) -> CoordinateMapper:
        """Device->logical mapping of the current view transform."""
        return CoordinateMapper.from_screen_ctm(transform_to_matrix(self.viewportTransform()))

    def item_tag(self, device_point: QPointF) -> Optional[str]:
        """Tag of the topmost item under ``device_point`` or of its nearest tagged ancestor."""
        item = self.itemAt(device_point.toPoint())
        while item is not None:
            tag = item.data(TAG_KEY)
            if tag is not None:
                return str(tag)
            item = item.parentItem()
        return None

    # ------------------------------------------------------------------------------
    # Scene construction
    # ------------------------------------------------------------------------------

    def _build_slide(self) -> QGraphicsRectItem:
        slide = QGraphicsRectItem(_qrect(layout.SLIDE_RECT))
        slide.setBrush(QBrush(QColor(SLIDE_COLOR)))
        slide.setPen(QPen(Qt.NoPen))
        slide.setData(TAG_KEY, Part.SLIDE.value)
        slide.setZValue(0)
        self.scene().addItem(slide)

        for track in layout.TRACKS:
            if track.part is Part.SLIDE:
                self._add_track(track, parent=slide)
        return slide

    def _build_body(self) -> None:
        scene = self.scene()
        upper, lower = (
            scene.addRect(_qrect(rect), QPen(Qt.NoPen), QBrush(QColor(STATOR_COLOR)))
            for rect in (layout.UPPER_STATOR_RECT, layout.LOWER_STATOR_RECT)
        )
        for stator in (upper, lower):
            stator.setZValue(1)

        # Body scales are engraved along the inner edge of their stator
        for track in layout.TRACKS:
            if track.part is Part.BODY:
                stator = upper if track.baseline <= layout.UPPER_STATOR_RECT.bottom else lower
                self._add_track(track, parent=stator)

        for right in (False, True):
            outline = layout.brace_outline(right=right)
            path = QPainterPath()
            path.addPolygon(QPolygonF([QPointF(x, y) for x, y in outline]))
            brace = scene.addPath(path, QPen(Qt.NoPen), QBrush(QColor(BRACE_COLOR)))
            brace.setZValue(2)

    def _build_cursor(self) -> QGraphicsRectItem:
        cursor = QGraphicsRectItem(_qrect(layout.CURSOR_RECT))
        cursor.setBrush(QBrush(CURSOR_FILL))
        cursor.setPen(self._pen(BRACE_COLOR, 0.5))
        cursor.setData(TAG_KEY, Part.CURSOR.value)
        cursor.setZValue(3)

        hairline = QGraphicsLineItem(0.0, layout.HAIRLINE_TOP, 0.0, layout.HAIRLINE_BOTTOM, cursor)
        hairline.setPen(self._pen(HAIRLINE_COLOR, STROKE_WIDTH))

        self.scene().addItem(cursor)
        return cursor

    def _add_track(self, track: ScaleTrack, parent: QGraphicsItem) -> None:
        """Ticks, labels and the scale letter of one track, as children of ``parent``."""
        ticks = QPainterPath()
        for mark in track.placed_marks():
            x = layout.mark_x(mark)
            y0, y1 = layout.tick_span(mark, track.baseline)
            ticks.moveTo(x, y0)
            ticks.lineTo(x, y1)

            if mark.label:
                lx, ly, centered = layout.label_anchor(mark, track.baseline)
                size = layout.MAJOR_FONT_SIZE if mark.tier is MarkTier.PRIMARY else layout.MINOR_FONT_SIZE
                self._add_text(mark.label, lx, ly, size, centered, parent)

        tick_item = QGraphicsPathItem(ticks, parent)
        tick_item.setPen(self._pen("black", STROKE_WIDTH))

        self._add_text(track.name, layout.SCALE_NAME_X, track.name_y, layout.MAJOR_FONT_SIZE, False, parent)

    @staticmethod
    def _add_text(text: str, x: float, baseline: float, size: float, centered: bool,
                  parent: QGraphicsItem) -> QGraphicsSimpleTextItem:
        font = QFont()
        font.setPixelSize(_FONT_PX)
        metrics = QFontMetricsF(font)
        scale = size / _FONT_PX

        item = QGraphicsSimpleTextItem(text, parent)
        item.setFont(font)
        item.setScale(scale)
        left = x - metrics.horizontalAdvance(text) * scale / 2.0 if centered else x
        item.setPos(left, baseline - metrics.ascent() * scale)
        return item

    @staticmethod
    def _pen(color: str, width: float) -> QPen:
        pen = QPen(QColor(color))
        pen.setWidthF(width)
        return pen

    # ------------------------------------------------------------------------------
    # State -> scene
    # ------------------------------------------------------------------------------

    def _on_state_changed(self, state: InteractionState) -> None:
        self._apply_state(state)
        self.state_changed.emit(state)

    def _apply_state(self, state: InteractionState) -> None:
        self._slide_item.setPos(state.slide_offset, 0.0)
        self._cursor_item.setPos(state.cursor_offset, 0.0)
        self._apply_viewport(state.rect)

    def _apply_viewport(self, rect: LogicalRect) -> None:
        """Fit ``rect`` into the widget, centered, keeping the aspect ratio."""
        width = self.viewport().width()
        height = self.viewport().height()
        if width <= 0 or height <= 0:
            logger.debug("Viewport has zero size; keeping the previous transform.")
            return

        # The translation lives in the transform, not in the scroll bars,
        # which only move in whole pixels. With the scene rect mapped onto
        # the centered fit, Qt's own centering offset is zero.
        ctm = fit_transform(rect, width, height)
        self.setSceneRect(_qrect(rect))
        self.setTransform(QTransform(ctm[0, 0], ctm[1, 0], ctm[0, 1], ctm[1, 1], ctm[0, 2], ctm[1, 2]))

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._apply_viewport(self.engine.state.rect)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            event.ignore()
            return
        pos = event.position()
        self._last_pointer = (pos.x(), pos.y())
        self.engine.pointer_down(self._last_pointer, self.item_tag(pos), self.mapper())
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        self._last_pointer = (pos.x(), pos.y())
        self.engine.pointer_move(self._last_pointer, self.mapper())
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            event.ignore()
            return
        pos = event.position()
        self._last_pointer = (pos.x(), pos.y())
        self.engine.pointer_up(self._last_pointer, self.mapper())
        event.accept()

    def leaveEvent(self, event) -> None:
        # Leave events carry no position; finish at the last known one
        self.engine.pointer_leave(self._last_pointer, self.mapper())
        super().leaveEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        dy = event.angleDelta().y()
        if dy == 0:
            event.ignore()
            return
        pos = event.position()
        self.engine.wheel((pos.x(), pos.y()), -dy, self.mapper())
        event.accept()
