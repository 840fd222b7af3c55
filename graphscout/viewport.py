"""Visible x-range of a chart with clamped pan and pinch-zoom."""

from typing import Tuple

from .data_model import SampleSeries


class Viewport:
    """The visible x-axis window [start, start + size] over a series.

    A size of 0 means no viewport is active and the whole series is shown.
    pan() and zoom() keep an active viewport inside the series bounds by
    clamping. set_explicit() assigns without clamping; the bounds are repaired
    on the next interactive pan or zoom.

    The viewport holds no caches. Callers that derive data from its bounds
    (labels, formatter precision) invalidate them after a mutation.
    """

    def __init__(self, series: SampleSeries, start: float = 0.0, size: float = 0.0) -> None:
        self._series = series
        self.start = float(start)
        self.size = float(size)

    def __repr__(self) -> str:
        return f"Viewport(start={self.start!r}, size={self.size!r})"

    @property
    def series(self) -> SampleSeries:
        return self._series

    @property
    def end(self) -> float:
        return self.start + self.size

    def is_active(self) -> bool:
        return self.size != 0

    def effective_min_x(self) -> float:
        """Left edge of the visible range.

        Raises:
            EmptySeriesError: The viewport is inactive and the series is empty.
        """
        if self.is_active():
            return self.start
        return self._series.first.x

    def effective_max_x(self) -> float:
        """Right edge of the visible range.

        Raises:
            EmptySeriesError: The viewport is inactive and the series is empty.
        """
        if self.is_active():
            return self.start + self.size
        return self._series.last.x

    def bounds(self) -> Tuple[float, float]:
        return self.effective_min_x(), self.effective_max_x()

    def set_explicit(self, start: float, size: float) -> None:
        self.start = float(start)
        self.size = float(size)

    def pan(self, pixel_delta: float, pixel_width: float) -> bool:
        """Scroll by a screen-space delta.

        Dragging to the right moves the visible window to the left.

        Args:
            pixel_delta: Horizontal finger/mouse movement in pixels.
            pixel_width: Width of the plot area in pixels.

        Returns:
            True if start changed.
        """
        if not self.is_active() or pixel_width <= 0 or self._series.is_empty():
            return False
        old_start = self.start
        self.start -= pixel_delta * self.size / pixel_width
        self._clamp_start()
        return self.start != old_start

    def zoom(self, scale_factor: float) -> bool:
        """Apply a pinch scale factor around the center of the window.

        The size changes by size * (scale_factor - 1) in the opposite
        direction: a factor above 1 narrows the window, a factor below 1
        widens it. A widened window is pushed back inside the series, or
        snapped to the full series when it no longer fits.

        Returns:
            True if start or size changed.
        """
        if not self.is_active() or self._series.is_empty():
            return False
        old = (self.start, self.size)
        new_size = self.size * scale_factor
        diff = new_size - self.size
        if self.size - diff <= 0:
            # A factor of 2 or more would collapse the window
            return False
        self.start += diff / 2
        self.size -= diff
        if diff < 0:
            first_x = self._series.first.x
            last_x = self._series.last.x
            if self.start < first_x:
                self.start = first_x
            overlap = self.start + self.size - last_x
            if overlap > 0:
                if self.start - overlap > first_x:
                    self.start -= overlap
                else:
                    # Maximal zoom-out
                    self.start = first_x
                    self.size = last_x - self.start
        return (self.start, self.size) != old

    def _clamp_start(self) -> None:
        first_x = self._series.first.x
        last_x = self._series.last.x
        if self.start < first_x:
            self.start = first_x
        elif self.start + self.size > last_x:
            self.start = last_x - self.size
