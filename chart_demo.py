#!/usr/bin/env python3
"""GraphScout demo application: a scrollable, zoomable sine chart."""

import argparse
import logging
import math
import sys

import qdarkstyle
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QMainWindow

from graphscout import BarSeriesRenderer, ChartWidget, Sample, SampleSeries


def make_series(points: int, step: float) -> SampleSeries:
    """Damped sine wave sampled every `step` x units."""
    return SampleSeries(
        Sample(i * step, math.sin(i * step) * math.exp(-i * step / (points * step)) * 100)
        for i in range(points)
    )


class ChartDemoWindow(QMainWindow):
    def __init__(self, args: argparse.Namespace) -> None:
        super().__init__()
        self.setWindowTitle("GraphScout Demo")
        self.resize(900, 500)

        series = make_series(args.points, args.step)
        renderer = BarSeriesRenderer() if args.bars else None
        self.chart = ChartWidget(series, title=args.title, renderer=renderer)
        if args.viewport is not None:
            start, size = args.viewport
            self.chart.setViewPort(start, size)
        self.chart.setScrollable(True)
        if args.scalable:
            self.chart.setScalable(True)
        self.setCentralWidget(self.chart)


def main() -> None:
    """Run the demo application."""
    parser = argparse.ArgumentParser(description="GraphScout Chart Demo")
    parser.add_argument("--points", type=int, default=200, help="Number of samples to generate")
    parser.add_argument("--step", type=float, default=0.1, help="X distance between samples")
    parser.add_argument("--title", type=str, default="Damped sine", help="Chart title")
    parser.add_argument("--viewport", type=float, nargs=2, metavar=("START", "SIZE"),
                        help="Initial visible x-range")
    parser.add_argument("--scalable", action="store_true", help="Enable pinch and Ctrl+wheel zoom")
    parser.add_argument("--bars", action="store_true", help="Draw bars instead of a line")
    parser.add_argument("--style", choices=["default", "dark", "light"], default="default",
                        help="Application style")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    QApplication.setHighDpiScaleFactorRoundingPolicy(Qt.HighDpiScaleFactorRoundingPolicy.PassThrough)
    app = QApplication(sys.argv)

    if args.style == "dark":
        app.setStyleSheet(qdarkstyle.load_stylesheet(palette=qdarkstyle.DarkPalette))
    elif args.style == "light":
        app.setStyleSheet(qdarkstyle.load_stylesheet(palette=qdarkstyle.LightPalette))

    window = ChartDemoWindow(args)
    window.show()

    print("GraphScout - Chart Demo")
    print("=======================")
    print("- Drag with the left mouse button to scroll")
    print("- Mouse wheel scrolls, Ctrl+wheel zooms (with --scalable)")
    print()

    app.exec()


if __name__ == "__main__":
    main()
