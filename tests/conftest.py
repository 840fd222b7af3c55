"""Common test fixtures for GraphScout tests."""

import os

# Widgets are rendered offscreen so the suite runs without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QLocale

from graphscout import ChartController, ChartWidget, SampleSeries


@pytest.fixture
def us_locale():
    """Locale with ',' group separator and '.' decimal point."""
    return QLocale("en_US")


@pytest.fixture
def example_series():
    """Four-sample series used in the windowing examples."""
    return SampleSeries([(0, 0), (1, 10), (2, 5), (3, 20)])


@pytest.fixture
def ramp_series():
    """Eleven samples with x = 0..10 and y = x * 2."""
    return SampleSeries((float(i), float(i * 2)) for i in range(11))


@pytest.fixture
def controller(ramp_series, us_locale):
    """Controller over the ramp series with a fixed locale."""
    return ChartController(ramp_series, "Ramp", locale=us_locale)


@pytest.fixture
def chart_widget(qtbot, ramp_series, us_locale):
    """Shown ChartWidget over the ramp series."""
    widget = ChartWidget(ramp_series, title="Ramp", locale=us_locale)
    widget.resize(600, 400)
    widget.show()
    qtbot.addWidget(widget)
    qtbot.waitExposed(widget)
    return widget
