"""Windowed data query: the samples needed to draw the current viewport.

The window is the minimal contiguous run of the series that covers the
visible x-range, plus one sample just outside each edge so that the line
continues smoothly to the border of the plot while scrolling.
"""

from typing import List, Sequence, Tuple

from .data_model import EmptySeriesError, Sample, SampleSeries
from .viewport import Viewport


def window(series: SampleSeries, viewport: Viewport) -> Sequence[Sample]:
    """Return the samples needed to render the viewport.

    With an inactive viewport the series' own backing tuple is returned
    without copying. Otherwise the result holds at most one sample left of
    viewport.start (the closest one), every sample in
    [viewport.start, viewport.start + viewport.size], and at most one sample
    right of the window, after which the scan stops.
    """
    if not viewport.is_active():
        return series.samples

    start = viewport.start
    end = viewport.start + viewport.size
    result: List[Sample] = []
    for sample in series:
        if sample.x >= start:
            result.append(sample)
            if sample.x > end:
                break  # one more for smooth scrolling
        elif not result:
            result.append(sample)
        else:
            result[0] = sample  # keep only the closest sample on the left
    return result


def y_range(samples: Sequence[Sample]) -> Tuple[float, float]:
    """Return (min_y, max_y) of a window.

    Raises:
        EmptySeriesError: The window holds no samples.
    """
    if not samples:
        raise EmptySeriesError("cannot compute y range of an empty window")
    min_y = max_y = samples[0].y
    for sample in samples:
        if sample.y < min_y:
            min_y = sample.y
        elif sample.y > max_y:
            max_y = sample.y
    return min_y, max_y
