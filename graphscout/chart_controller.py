"""ChartController: the Qt-free aggregate behind a chart widget.

The controller owns the sample series, the viewport, the label formatter and
the cached axis labels. It exposes the queries a render pass needs and the
operations that mutate the viewport, and it invalidates derived caches after
each mutation.

It uses a simple callback-based notification mechanism plus a typed EventBus
(no Qt dependencies) so it can be unit-tested easily. ChartWidget subscribes
to these callbacks and schedules repaints.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union

from PySide6.QtCore import QLocale

from .application.event_bus import EventBus
from .application.events import (
    InteractionChangedEvent, LabelsInvalidatedEvent, ViewportChangedEvent
)
from .axis_labels import AxisLabelGenerator
from .config import UI
from .data_model import (
    ChartConfig, LabelSet, Sample, SampleLike, SampleSeries, VisibleRange
)
from .gesture_controller import GestureController
from .label_formatter import LabelFormatter
from .viewport import Viewport
from .window_query import window, y_range

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class ChartController:
    """Non-Qt controller holding all chart state.

    Responsibilities:
    - Own the series (fixed for the controller's lifetime) and the viewport.
    - Answer render-pass queries: visible range, window, labels, title.
    - Apply pan/zoom/explicit viewport changes and invalidate caches.
    - Route touch input through a GestureController.

    Notes:
    - Explicit horizontal/vertical labels passed at construction replace the
      generated labels for that axis.
    - Label generation runs under a lock and re-checks the cache inside it,
      so concurrent callers share a single generation per invalidation.
    """

    def __init__(self,
                 series: Union[SampleSeries, Iterable[SampleLike], None],
                 title: Optional[str] = "",
                 horizontal_labels: Optional[Sequence[str]] = None,
                 vertical_labels: Optional[Sequence[str]] = None,
                 config: Optional[ChartConfig] = None,
                 locale: Optional[QLocale] = None,
                 event_bus: Optional[EventBus] = None) -> None:
        """
        Args:
            series: Samples sorted by x ascending.
            title: Chart title, None is treated as empty.
            horizontal_labels: Fixed x-axis labels, or None to generate them.
            vertical_labels: Fixed y-axis labels (top to bottom), or None to generate them.
            config: Label layout configuration.
            locale: Locale for label formatting, defaults to the system locale.
            event_bus: Bus to publish events on, a private one is created if None.
        """
        self._series = series if isinstance(series, SampleSeries) else SampleSeries(series)
        if __debug__ and not self._series.is_sorted():
            logger.warning("Series is not sorted by x; windowing results are undefined")
        self._title = title or ""
        self._explicit_horizontal = tuple(horizontal_labels) if horizontal_labels is not None else None
        self._explicit_vertical = tuple(vertical_labels) if vertical_labels is not None else None
        self._config = config or ChartConfig()

        self._viewport = Viewport(self._series)
        self._formatter = LabelFormatter(self._visible_y_range, locale)
        self._label_generator = AxisLabelGenerator(self.format_label, self._config)

        # Label cache, keyed by the plot size it was generated for
        self._labels: Optional[LabelSet] = None
        self._labels_size: Optional[tuple[float, float]] = None
        self._labels_lock = threading.RLock()
        self._label_generations = 0

        self.event_bus = event_bus or EventBus()
        self._callbacks: Dict[str, List[Callback]] = {
            "viewport_changed": [],
            "labels_invalidated": [],
            "interaction_changed": [],
        }
        self.gestures = GestureController(self, UI.DEFAULT_SCROLLABLE, UI.DEFAULT_SCALABLE)

    # ---- Subscription API ----
    def on(self, event_name: str, callback: Callback) -> None:
        self._callbacks.setdefault(event_name, []).append(callback)

    def off(self, event_name: str, callback: Callback) -> None:
        callbacks = self._callbacks.get(event_name, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def _emit(self, event_name: str) -> None:
        for cb in list(self._callbacks.get(event_name, [])):
            try:
                cb()
            except Exception:
                # State change already applied; keep notifying the rest
                logger.exception("Callback for %r failed", event_name)

    # ---- Render-pass queries ----
    @property
    def series(self) -> SampleSeries:
        return self._series

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def formatter(self) -> LabelFormatter:
        return self._formatter

    @property
    def config(self) -> ChartConfig:
        return self._config

    def get_title(self) -> str:
        return self._title

    def get_window(self) -> Sequence[Sample]:
        """Samples needed to draw the current viewport, with edge padding."""
        return window(self._series, self._viewport)

    def get_visible_range(self) -> VisibleRange:
        """Return (min_x, max_x, min_y, max_y) for the current viewport.

        The x bounds come from the viewport, the y bounds from the window.

        Raises:
            EmptySeriesError: No samples to derive the bounds from.
        """
        min_x, max_x = self._viewport.bounds()
        min_y, max_y = self._visible_y_range()
        return min_x, max_x, min_y, max_y

    def _visible_y_range(self) -> tuple[float, float]:
        return y_range(self.get_window())

    def format_label(self, value: float, is_x: bool) -> str:
        """Format a label value. Subclasses may format x and y differently."""
        return self._formatter.format(value)

    def get_labels(self, pixel_width: float, pixel_height: float) -> LabelSet:
        """Return axis labels for a plot area, generating them if needed.

        Raises:
            EmptySeriesError: Labels must be generated and there is no data.
        """
        size = (pixel_width, pixel_height)
        with self._labels_lock:
            if self._labels is None or self._labels_size != size:
                self._labels = self._generate_labels(pixel_width, pixel_height)
                self._labels_size = size
            return self._labels

    def _generate_labels(self, pixel_width: float, pixel_height: float) -> LabelSet:
        self._label_generations += 1
        logger.debug("Generating labels for %sx%s plot area", pixel_width, pixel_height)
        horizontal = self._explicit_horizontal
        vertical = self._explicit_vertical
        if horizontal is None:
            min_x, max_x = self._viewport.bounds()
            horizontal = self._label_generator.horizontal(pixel_width, min_x, max_x)
        if vertical is None:
            min_y, max_y = self._visible_y_range()
            vertical = self._label_generator.vertical(pixel_height, min_y, max_y)
        return LabelSet(horizontal=horizontal, vertical=vertical)

    def cached_labels(self) -> Optional[LabelSet]:
        return self._labels

    @property
    def label_generations(self) -> int:
        """Number of times labels were generated since construction."""
        return self._label_generations

    # ---- Cache invalidation ----
    def invalidate_labels(self, reset_formatter: bool = False) -> None:
        """Discard cached labels, and optionally the formatter precision."""
        with self._labels_lock:
            self._labels = None
            self._labels_size = None
            if reset_formatter:
                self._formatter.invalidate()
        self.event_bus.publish(LabelsInvalidatedEvent(formatter_reset=reset_formatter))
        self._emit("labels_invalidated")

    def invalidate_formatter(self) -> None:
        self.invalidate_labels(reset_formatter=True)

    # ---- Viewport operations ----
    def get_viewport_start(self) -> float:
        return self._viewport.start

    def get_viewport_size(self) -> float:
        return self._viewport.size

    def set_viewport(self, start: float, size: float) -> None:
        """Set the visible x-range directly. A size of 0 shows the whole series."""
        old_start, old_size = self._viewport.start, self._viewport.size
        self._viewport.set_explicit(start, size)
        self.invalidate_labels()
        self._viewport_changed(old_start, old_size)

    def pan(self, pixel_delta: float, pixel_width: float) -> bool:
        """Scroll the viewport by a screen-space delta."""
        old_start, old_size = self._viewport.start, self._viewport.size
        if not self._viewport.pan(pixel_delta, pixel_width):
            return False
        self.invalidate_labels()
        self._viewport_changed(old_start, old_size)
        return True

    def zoom(self, scale_factor: float) -> bool:
        """Scale the viewport size by a pinch factor."""
        old_start, old_size = self._viewport.start, self._viewport.size
        if not self._viewport.zoom(scale_factor):
            return False
        self.invalidate_labels(reset_formatter=True)
        self._viewport_changed(old_start, old_size)
        return True

    def _viewport_changed(self, old_start: float, old_size: float) -> None:
        vp = self._viewport
        logger.debug("Viewport %s+%s -> %s+%s", old_start, old_size, vp.start, vp.size)
        self.event_bus.publish(ViewportChangedEvent(
            old_start=old_start,
            old_size=old_size,
            new_start=vp.start,
            new_size=vp.size
        ))
        self._emit("viewport_changed")

    # ---- Interaction configuration ----
    def is_scrollable(self) -> bool:
        return self.gestures.is_scrollable()

    def is_scalable(self) -> bool:
        return self.gestures.is_scalable()

    def set_scrollable(self, scrollable: bool) -> None:
        """Allow horizontal scrolling. Only useful with an active viewport."""
        self.gestures.set_scrollable(scrollable)
        self._interaction_changed()

    def set_scalable(self, scalable: bool) -> None:
        """Allow pinch-zoom. This forces scrollable on."""
        self.gestures.set_scalable(scalable)
        self._interaction_changed()

    def is_user_interacting(self) -> bool:
        return self.gestures.is_user_interacting()

    def _interaction_changed(self) -> None:
        self.event_bus.publish(InteractionChangedEvent(
            scrollable=self.gestures.is_scrollable(),
            scalable=self.gestures.is_scalable()
        ))
        self._emit("interaction_changed")
