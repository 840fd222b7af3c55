"""Axis label generation sized to the available pixel space."""

import math
from typing import Callable, List, Optional, Tuple

from .data_model import ChartConfig

# (value, is_x) -> label text
LabelFormat = Callable[[float, bool], str]


class AxisLabelGenerator:
    """Produces evenly spaced x and y axis labels.

    One label slot is reserved per ChartConfig.horizontal_label_width pixels
    on the x axis and per ChartConfig.vertical_label_height pixels on the y
    axis. Both ends are labelled, so n slots produce n + 1 labels.
    """

    def __init__(self, format_label: LabelFormat, config: Optional[ChartConfig] = None) -> None:
        self._format_label = format_label
        self._config = config or ChartConfig()

    def horizontal_count(self, pixel_width: float) -> int:
        return max(0, int(math.floor(pixel_width / self._config.horizontal_label_width)))

    def vertical_count(self, pixel_height: float) -> int:
        return max(0, int(math.floor(pixel_height / self._config.vertical_label_height)))

    def horizontal(self, pixel_width: float, min_x: float, max_x: float) -> Tuple[str, ...]:
        """Labels from min_x (left) to max_x (right)."""
        count = self.horizontal_count(pixel_width)
        return tuple(self._format_label(value, True)
                     for value in _spaced_values(min_x, max_x, count))

    def vertical(self, pixel_height: float, min_y: float, max_y: float) -> Tuple[str, ...]:
        """Labels from max_y (top, index 0) to min_y (bottom)."""
        count = self.vertical_count(pixel_height)
        values = _spaced_values(min_y, max_y, count)
        return tuple(self._format_label(value, False) for value in reversed(values))


def _spaced_values(low: float, high: float, count: int) -> List[float]:
    if count == 0:
        return [low]
    return [low + (high - low) * i / count for i in range(count + 1)]
