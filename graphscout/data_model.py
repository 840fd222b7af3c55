"""Core data structures for the GraphScout chart.

This module defines the data the chart displays and the small pieces of state
derived from it. Don't confuse the SampleSeries, which is the whole data set
and never changes after construction, with the window, which is the slice of
samples needed to draw the current viewport.

    ChartController
    ├── series: SampleSeries        (x-ascending, immutable)
    │   ├── Sample(x=0.0, y=0.0)
    │   ├── Sample(x=1.0, y=10.0)
    │   └── ...
    ├── viewport: Viewport          (start/size, size == 0 means "show all")
    ├── labels: LabelSet            (cached, None until computed)
    └── gesture: GestureState       (last touch x, pinch in progress)

"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union, overload

from .config import RENDERING


class EmptySeriesError(ValueError):
    """Raised when bounds are requested from a series with no samples."""


@dataclass(frozen=True)
class Sample:
    """A single (x, y) data point."""
    x: float
    y: float


SampleLike = Union[Sample, Tuple[float, float]]


class SampleSeries(Sequence[Sample]):
    """Ordered, immutable sequence of samples.

    Samples must be sorted by x ascending. This is a caller contract and is not
    checked on construction; use is_sorted() for debug checks.
    """

    __slots__ = ("_samples",)

    def __init__(self, samples: Optional[Iterable[SampleLike]] = None) -> None:
        items: list[Sample] = []
        for item in samples or ():
            if isinstance(item, Sample):
                items.append(item)
            else:
                x, y = item
                items.append(Sample(float(x), float(y)))
        self._samples: Tuple[Sample, ...] = tuple(items)

    @overload
    def __getitem__(self, index: int) -> Sample: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Sample, ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Sample, Tuple[Sample, ...]]:
        return self._samples[index]

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def __repr__(self) -> str:
        return f"SampleSeries({len(self._samples)} samples)"

    @property
    def samples(self) -> Tuple[Sample, ...]:
        """Backing tuple, shared without copying."""
        return self._samples

    @property
    def first(self) -> Sample:
        if not self._samples:
            raise EmptySeriesError("series has no samples")
        return self._samples[0]

    @property
    def last(self) -> Sample:
        if not self._samples:
            raise EmptySeriesError("series has no samples")
        return self._samples[-1]

    def is_empty(self) -> bool:
        return not self._samples

    def is_sorted(self) -> bool:
        """Check the x-ascending contract."""
        return all(a.x <= b.x for a, b in zip(self._samples, self._samples[1:]))


@dataclass(frozen=True)
class LabelSet:
    """Formatted axis labels for one render pass.

    vertical is stored top to bottom: index 0 is the maximum y value.
    """
    horizontal: Tuple[str, ...] = ()
    vertical: Tuple[str, ...] = ()


@dataclass
class GestureState:
    """Transient touch state for the current interaction."""
    last_x: Optional[float] = None      # None means no active drag
    scaling: bool = False               # Pinch gesture in progress


@dataclass
class ChartConfig:
    """Per-chart configuration for label layout."""
    horizontal_label_width: float = RENDERING.HORIZONTAL_LABEL_WIDTH   # Pixels per x label slot
    vertical_label_height: float = RENDERING.VERTICAL_LABEL_HEIGHT     # Pixels per y label slot


VisibleRange = Tuple[float, float, float, float]  # (min_x, max_x, min_y, max_y)
