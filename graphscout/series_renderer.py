"""Series renderers.

Purpose
- Turn the windowed samples of a chart into QPainter primitives.
- Keep ChartCanvas thin: the canvas computes the plot geometry and the
  window, a SeriesRenderer draws them.

Key ideas
- Data space maps linearly onto the plot rectangle. X grows to the right from
  horstart; Y grows upwards from the bottom edge at border + graph_height.
- Renderers are only called when the visible y range is not degenerate
  (diff_y != 0), so the mapping never divides by zero in y.
"""

from dataclasses import dataclass
from typing import List, Protocol, Sequence, Tuple

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPen, QPolygonF

from .config import COLORS, RENDERING
from .data_model import Sample


@dataclass(frozen=True)
class PlotGeometry:
    """Pixel geometry of the plot area and the data range it shows."""
    graph_width: float
    graph_height: float
    border: float
    horstart: float
    min_x: float
    min_y: float
    diff_x: float
    diff_y: float


def map_to_pixels(samples: Sequence[Sample], geometry: PlotGeometry) -> List[Tuple[float, float]]:
    """Map samples from data space to (px, py) pixel coordinates."""
    g = geometry
    points: List[Tuple[float, float]] = []
    for sample in samples:
        ratio_x = (sample.x - g.min_x) / g.diff_x if g.diff_x else 0.0
        ratio_y = (sample.y - g.min_y) / g.diff_y if g.diff_y else 0.0
        px = g.horstart + ratio_x * g.graph_width
        py = g.border + g.graph_height - ratio_y * g.graph_height
        points.append((px, py))
    return points


class SeriesRenderer(Protocol):
    """Draws one series into the plot area."""

    def draw(self, painter: QPainter, samples: Sequence[Sample], geometry: PlotGeometry) -> None:
        ...


def _series_pen() -> QPen:
    pen = QPen(QColor(COLORS.SERIES))
    pen.setWidth(RENDERING.SERIES_STROKE_WIDTH)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    return pen


class LineSeriesRenderer:
    """Polyline through consecutive samples."""

    def draw(self, painter: QPainter, samples: Sequence[Sample], geometry: PlotGeometry) -> None:
        if len(samples) < 2:
            return
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setPen(_series_pen())
        polygon = QPolygonF([QPointF(px, py) for px, py in map_to_pixels(samples, geometry)])
        painter.drawPolyline(polygon)
        painter.restore()


class BarSeriesRenderer:
    """One filled bar per sample, evenly spread across the plot width."""

    def bar_rects(self, samples: Sequence[Sample], geometry: PlotGeometry) -> List[QRectF]:
        if not samples:
            return []
        g = geometry
        column_width = g.graph_width / len(samples)
        bottom = g.border + g.graph_height
        rects: List[QRectF] = []
        for i, (_, py) in enumerate(map_to_pixels(samples, geometry)):
            left = g.horstart + i * column_width
            width = max(0.0, column_width - RENDERING.BAR_SPACING)
            rects.append(QRectF(left, py, width, bottom - py))
        return rects

    def draw(self, painter: QPainter, samples: Sequence[Sample], geometry: PlotGeometry) -> None:
        painter.save()
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(COLORS.SERIES))
        for rect in self.bar_rects(samples, geometry):
            painter.drawRect(rect)
        painter.restore()
