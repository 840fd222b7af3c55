"""GraphScout - PySide6 scrollable and zoomable chart widget."""

__version__ = "0.1.0"

from .data_model import (
    Sample, SampleSeries, LabelSet, GestureState, ChartConfig, EmptySeriesError
)
from .viewport import Viewport
from .window_query import window, y_range
from .label_formatter import LabelFormatter, precision_for_span
from .axis_labels import AxisLabelGenerator
from .gesture_controller import GestureController, TouchAction, ScaleEvent
from .chart_controller import ChartController
from .series_renderer import SeriesRenderer, LineSeriesRenderer, BarSeriesRenderer, PlotGeometry
from .chart_widget import ChartWidget
from .config import RENDERING, COLORS, UI

__all__ = [
    'Sample', 'SampleSeries', 'LabelSet', 'GestureState', 'ChartConfig', 'EmptySeriesError',
    'Viewport', 'window', 'y_range', 'LabelFormatter', 'precision_for_span',
    'AxisLabelGenerator', 'GestureController', 'TouchAction', 'ScaleEvent',
    'ChartController', 'SeriesRenderer', 'LineSeriesRenderer', 'BarSeriesRenderer',
    'PlotGeometry', 'ChartWidget',
    'RENDERING', 'COLORS', 'UI'
]
