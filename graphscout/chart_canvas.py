"""Chart canvas widgets: the plot area and the vertical labels column."""

import logging
from typing import Optional

from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import (
    QColor, QFont, QFontMetrics, QMouseEvent, QPainter, QPaintEvent, QPen, QWheelEvent
)
from PySide6.QtWidgets import QGestureEvent, QPinchGesture, QWidget

from .chart_controller import ChartController
from .config import COLORS, RENDERING, UI
from .data_model import EmptySeriesError, LabelSet
from .gesture_controller import ScaleEvent, TouchAction
from .series_renderer import LineSeriesRenderer, PlotGeometry, SeriesRenderer

logger = logging.getLogger(__name__)

_PINCH_ACTIVE_STATES = (Qt.GestureState.GestureStarted, Qt.GestureState.GestureUpdated)


class ChartCanvas(QWidget):
    """Plot area: grid, x labels, title and the series.

    Input events are translated into TouchAction/ScaleEvent values and handed
    to the controller's GestureController; the canvas never changes the
    viewport itself.
    """

    def __init__(self, controller: ChartController,
                 renderer: Optional[SeriesRenderer] = None,
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._renderer: SeriesRenderer = renderer or LineSeriesRenderer()
        self._empty_series_logged = False
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)
        self.setMinimumSize(RENDERING.MIN_CANVAS_WIDTH, RENDERING.MIN_CANVAS_HEIGHT)
        self.grabGesture(Qt.GestureType.PinchGesture)

    @property
    def controller(self) -> ChartController:
        return self._controller

    def setRenderer(self, renderer: SeriesRenderer) -> None:
        self._renderer = renderer
        self.update()

    def graphWidth(self) -> float:
        return float(self.width() - 1)

    def graphHeight(self) -> float:
        return float(self.height() - 2 * RENDERING.BORDER)

    # ---- Painting ----
    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(COLORS.BACKGROUND))
        painter.setFont(QFont(RENDERING.FONT_FAMILY, RENDERING.FONT_SIZE))
        try:
            graph_width = self.graphWidth()
            graph_height = self.graphHeight()
            min_x, max_x, min_y, max_y = self._controller.get_visible_range()
            labels = self._controller.get_labels(graph_width, graph_height)
            samples = self._controller.get_window()
        except EmptySeriesError as e:
            if not self._empty_series_logged:
                logger.warning("Nothing to draw: %s", e)
                self._empty_series_logged = True
            painter.end()
            return

        geometry = PlotGeometry(
            graph_width=graph_width,
            graph_height=graph_height,
            border=RENDERING.BORDER,
            horstart=0.0,
            min_x=min_x,
            min_y=min_y,
            diff_x=max_x - min_x,
            diff_y=max_y - min_y,
        )
        self._draw_grid(painter, labels, geometry)
        self._draw_title(painter, geometry)
        if max_y != min_y:
            self._renderer.draw(painter, samples, geometry)
        painter.end()

    def _draw_grid(self, painter: QPainter, labels: LabelSet, geometry: PlotGeometry) -> None:
        width = self.width() - 1
        height = self.height()
        border = geometry.border
        pen = QPen(QColor(COLORS.GRID))
        pen.setWidth(0)  # cosmetic 1 device-pixel
        text_color = QColor(COLORS.TEXT)
        fm = painter.fontMetrics()

        # Horizontal grid lines, one per vertical label
        painter.setPen(pen)
        for y in label_positions(len(labels.vertical), geometry.graph_height, border):
            painter.drawLine(QPointF(geometry.horstart, y), QPointF(width, y))

        # Vertical grid lines with x labels
        count = len(labels.horizontal)
        for i, x in enumerate(label_positions(count, geometry.graph_width, geometry.horstart)):
            painter.setPen(pen)
            painter.drawLine(QPointF(x, height - border), QPointF(x, border))
            text = labels.horizontal[i]
            text_width = fm.horizontalAdvance(text)
            if i == 0:
                text_x = x
            elif i == count - 1:
                text_x = x - text_width
            else:
                text_x = x - text_width / 2
            painter.setPen(text_color)
            painter.drawText(QPointF(text_x, height - RENDERING.LABEL_BASELINE_OFFSET), text)

    def _draw_title(self, painter: QPainter, geometry: PlotGeometry) -> None:
        title = self._controller.get_title()
        if not title:
            return
        painter.save()
        painter.setFont(QFont(RENDERING.FONT_FAMILY, RENDERING.TITLE_FONT_SIZE))
        fm = QFontMetrics(painter.font())
        x = geometry.horstart + geometry.graph_width / 2 - fm.horizontalAdvance(title) / 2
        painter.setPen(QColor(COLORS.TEXT))
        painter.drawText(QPointF(x, geometry.border - RENDERING.LABEL_BASELINE_OFFSET), title)
        painter.restore()

    # ---- Input ----
    def event(self, event: QEvent) -> bool:
        if event.type() == QEvent.Type.Gesture:
            return self._gesture_event(event)  # type: ignore[arg-type]
        return super().event(event)

    def _gesture_event(self, event: QGestureEvent) -> bool:
        pinch = event.gesture(Qt.GestureType.PinchGesture)
        if not isinstance(pinch, QPinchGesture):
            return False
        focal = self.mapFromGlobal(pinch.centerPoint().toPoint())
        scale = ScaleEvent(
            scale_factor=pinch.scaleFactor(),
            in_progress=pinch.state() in _PINCH_ACTIVE_STATES,
            focal_x=float(focal.x()),
        )
        handled = self._controller.gestures.on_scale(scale)
        event.setAccepted(pinch, handled)
        return handled

    def _dispatch_touch(self, action: TouchAction, event: QMouseEvent) -> bool:
        return self._controller.gestures.on_touch(action, event.position().x(), self.graphWidth())

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton and self._dispatch_touch(TouchAction.PRESS, event):
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if event.buttons() & Qt.MouseButton.LeftButton and self._dispatch_touch(TouchAction.MOVE, event):
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton and self._dispatch_touch(TouchAction.RELEASE, event):
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        """Ctrl+wheel zooms, plain wheel scrolls."""
        delta = event.angleDelta().y()
        if delta == 0:
            return super().wheelEvent(event)
        notches = delta / UI.WHEEL_NOTCH_DELTA

        if event.modifiers() & Qt.KeyboardModifier.ControlModifier:
            if not self._controller.is_scalable():
                return super().wheelEvent(event)
            # Wheel up narrows the window (zoom in)
            factor = UI.ZOOM_WHEEL_FACTOR if delta > 0 else 1.0 / UI.ZOOM_WHEEL_FACTOR
            self._controller.zoom(factor)
        else:
            if not self._controller.is_scrollable():
                return super().wheelEvent(event)
            # Wheel up scrolls towards smaller x, like dragging to the right
            self._controller.pan(notches * UI.WHEEL_PAN_PIXELS, self.graphWidth())
        event.accept()


class VerticalLabelsView(QWidget):
    """Column left of the canvas showing the y-axis labels."""

    def __init__(self, controller: ChartController, canvas: ChartCanvas,
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._canvas = canvas
        self.setFixedWidth(RENDERING.VERTICAL_LABELS_WIDTH)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(COLORS.BACKGROUND))
        painter.setFont(QFont(RENDERING.FONT_FAMILY, RENDERING.FONT_SIZE))
        try:
            labels = self._controller.get_labels(self._canvas.graphWidth(), self._canvas.graphHeight())
        except EmptySeriesError:
            painter.end()
            return
        painter.setPen(QColor(COLORS.TEXT))
        positions = label_positions(len(labels.vertical), self._canvas.graphHeight(), RENDERING.BORDER)
        for text, y in zip(labels.vertical, positions):
            painter.drawText(QPointF(0, y), text)
        painter.end()


def label_positions(count: int, extent: float, offset: float) -> list[float]:
    """Evenly spaced pixel positions for count labels across extent."""
    if count <= 0:
        return []
    if count == 1:
        return [offset]
    step = extent / (count - 1)
    return [offset + step * i for i in range(count)]
