"""Main GraphScout widget: vertical labels column plus the plot canvas."""

from typing import Iterable, Optional, Sequence, Union, cast

from PySide6.QtCore import QLocale, Signal
from PySide6.QtWidgets import QHBoxLayout, QWidget

from .application.events import ViewportChangedEvent
from .chart_canvas import ChartCanvas, VerticalLabelsView
from .chart_controller import ChartController
from .data_model import ChartConfig, SampleLike, SampleSeries
from .series_renderer import SeriesRenderer


class ChartWidget(QWidget):
    """Zoomable and scrollable chart of one sample series.

    Scrolling is only useful with a viewport (setViewPort) that does not
    show all data. Enabling scaling enables scrolling as well.
    """

    viewportChanged = Signal(float, float)  # start, size

    def __init__(self,
                 series: Union[SampleSeries, Iterable[SampleLike], None],
                 title: Optional[str] = "",
                 horizontal_labels: Optional[Sequence[str]] = None,
                 vertical_labels: Optional[Sequence[str]] = None,
                 renderer: Optional[SeriesRenderer] = None,
                 config: Optional[ChartConfig] = None,
                 locale: Optional[QLocale] = None,
                 parent: Optional[QWidget] = None) -> None:
        """
        Args:
            series: Samples, must be sorted by x ascending.
            title: Optional chart title.
            horizontal_labels: Fixed x labels; generated automatically if None.
            vertical_labels: Fixed y labels, top to bottom; generated automatically if None.
            renderer: Series renderer, a line renderer by default.
            config: Label layout configuration.
            locale: Locale for label formatting.
            parent: Parent widget.
        """
        super().__init__(parent)
        self.controller = ChartController(
            series, title, horizontal_labels, vertical_labels, config=config, locale=locale
        )
        self._canvas: ChartCanvas = cast(ChartCanvas, None)
        self._labels_view: VerticalLabelsView = cast(VerticalLabelsView, None)
        self._setup_ui(renderer)

        # Bind controller events to view updates
        self.controller.on("labels_invalidated", self._labels_view.update)
        self.controller.on("viewport_changed", self._canvas.update)
        self.controller.event_bus.subscribe(ViewportChangedEvent, self._on_viewport_changed)

    def _setup_ui(self, renderer: Optional[SeriesRenderer]) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._canvas = ChartCanvas(self.controller, renderer)
        self._labels_view = VerticalLabelsView(self.controller, self._canvas)
        layout.addWidget(self._labels_view)
        layout.addWidget(self._canvas, 1)

    def _on_viewport_changed(self, event: ViewportChangedEvent) -> None:
        self.viewportChanged.emit(event.new_start, event.new_size)

    @property
    def canvas(self) -> ChartCanvas:
        return self._canvas

    @property
    def labelsView(self) -> VerticalLabelsView:
        return self._labels_view

    def setRenderer(self, renderer: SeriesRenderer) -> None:
        self._canvas.setRenderer(renderer)

    # ---- Configuration surface ----
    def isScrollable(self) -> bool:
        return self.controller.is_scrollable()

    def setScrollable(self, scrollable: bool) -> None:
        self.controller.set_scrollable(scrollable)

    def isScalable(self) -> bool:
        return self.controller.is_scalable()

    def setScalable(self, scalable: bool) -> None:
        """Enable pinch and Ctrl+wheel zoom. Forces scrollable on."""
        self.controller.set_scalable(scalable)

    def setViewPort(self, start: float, size: float) -> None:
        """Show [start, start + size]. A size of 0 shows the whole series."""
        self.controller.set_viewport(start, size)

    def viewPortStart(self) -> float:
        return self.controller.get_viewport_start()

    def viewPortSize(self) -> float:
        return self.controller.get_viewport_size()

    def isUserInteracting(self) -> bool:
        return self.controller.is_user_interacting()
