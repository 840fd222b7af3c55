"""Tests for ChartController, the aggregate behind ChartWidget."""

import logging
import threading

import pytest

from graphscout.application.events import (
    InteractionChangedEvent, LabelsInvalidatedEvent, ViewportChangedEvent
)
from graphscout.chart_controller import ChartController
from graphscout.data_model import EmptySeriesError, LabelSet, SampleSeries
from graphscout.gesture_controller import TouchAction


class TestQueries:
    def test_title(self, controller) -> None:
        assert controller.get_title() == "Ramp"
        assert ChartController([(0, 1)], title=None).get_title() == ""

    def test_accepts_plain_pairs(self, us_locale) -> None:
        controller = ChartController([(0, 1), (2, 3)], locale=us_locale)
        assert controller.get_visible_range() == (0.0, 2.0, 1.0, 3.0)

    def test_full_series_range(self, controller) -> None:
        assert controller.get_visible_range() == (0.0, 10.0, 0.0, 20.0)
        assert controller.get_window() is controller.series.samples

    def test_y_range_follows_window(self, us_locale) -> None:
        series = SampleSeries([(0, 100), (1, 1), (2, 2), (3, 3), (4, 4), (5, -100)])
        controller = ChartController(series, locale=us_locale)
        controller.set_viewport(2, 1)
        assert controller.get_visible_range() == (2.0, 3.0, 1.0, 4.0)

    def test_empty_series_raises(self, us_locale) -> None:
        controller = ChartController([], locale=us_locale)
        with pytest.raises(EmptySeriesError):
            controller.get_visible_range()
        with pytest.raises(EmptySeriesError):
            controller.get_labels(400, 300)

    def test_unsorted_series_logs_warning(self, us_locale, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="graphscout.chart_controller"):
            ChartController([(2, 0), (1, 0)], locale=us_locale)
        assert "not sorted" in caplog.text


class TestLabels:
    def test_generated_labels(self, controller) -> None:
        labels = controller.get_labels(400, 160)
        assert labels == LabelSet(
            horizontal=("0", "2.5", "5", "7.5", "10"),
            vertical=("20", "10", "0"),
        )

    def test_labels_are_cached(self, controller) -> None:
        first = controller.get_labels(400, 160)
        assert controller.get_labels(400, 160) is first
        assert controller.label_generations == 1

    def test_new_plot_size_regenerates(self, controller) -> None:
        controller.get_labels(400, 160)
        labels = controller.get_labels(200, 160)
        assert len(labels.horizontal) == 3
        assert controller.label_generations == 2

    def test_explicit_labels_bypass_generation(self, ramp_series, us_locale) -> None:
        controller = ChartController(ramp_series, horizontal_labels=["a", "b"], locale=us_locale)
        labels = controller.get_labels(1000, 160)
        assert labels.horizontal == ("a", "b")
        assert labels.vertical == ("20", "10", "0")

        controller = ChartController(ramp_series, vertical_labels=["hi", "lo"], locale=us_locale)
        assert controller.get_labels(1000, 800).vertical == ("hi", "lo")

    def test_pan_invalidates_labels(self, controller) -> None:
        controller.set_viewport(2, 4)
        before = controller.get_labels(400, 160)
        controller.pan(-100, 400)
        assert controller.cached_labels() is None
        after = controller.get_labels(400, 160)
        assert after.horizontal != before.horizontal
        assert after.horizontal[0] == "3"

    def test_zoom_resets_formatter(self, controller) -> None:
        controller.set_viewport(2, 4)
        controller.get_labels(400, 160)
        assert controller.formatter.is_valid()
        assert controller.zoom(0.5)
        assert not controller.formatter.is_valid()
        assert controller.cached_labels() is None

    def test_set_viewport_keeps_formatter(self, controller) -> None:
        controller.get_labels(400, 160)
        controller.set_viewport(2, 4)
        assert controller.formatter.is_valid()
        assert controller.cached_labels() is None

    def test_single_generation_under_concurrent_access(self, controller) -> None:
        barrier = threading.Barrier(8)
        results = []

        def worker() -> None:
            barrier.wait()
            results.append(controller.get_labels(400, 160))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert controller.label_generations == 1
        assert all(r is results[0] for r in results)

    def test_format_label_override(self, ramp_series, us_locale) -> None:
        class AxisNamedController(ChartController):
            def format_label(self, value: float, is_x: bool) -> str:
                return "X" if is_x else "Y"

        controller = AxisNamedController(ramp_series, locale=us_locale)
        assert controller.get_labels(400, 160) == LabelSet(
            horizontal=("X",) * 5,
            vertical=("Y",) * 3,
        )

    def test_generation_count_is_read_only(self, controller) -> None:
        controller.get_labels(400, 160)
        with pytest.raises(AttributeError):
            controller.label_generations = 0
        assert controller.label_generations == 1


class TestViewportOperations:
    def test_viewport_accessors(self, controller) -> None:
        controller.set_viewport(2, 4)
        assert controller.get_viewport_start() == 2.0
        assert controller.get_viewport_size() == 4.0

    def test_pan_without_change_returns_false(self, controller) -> None:
        controller.set_viewport(0, 4)
        assert not controller.pan(100, 400)

    def test_zoom_example(self, controller) -> None:
        controller.set_viewport(2, 4)
        controller.zoom(0.5)
        assert controller.get_viewport_start() == pytest.approx(1.0)
        assert controller.get_viewport_size() == pytest.approx(6.0)

    def test_callbacks_notified(self, controller) -> None:
        calls = []
        controller.on("viewport_changed", lambda: calls.append("viewport"))
        controller.on("labels_invalidated", lambda: calls.append("labels"))
        controller.set_viewport(2, 4)
        controller.pan(-40, 400)
        assert calls == ["labels", "viewport", "labels", "viewport"]

    def test_off_removes_callback(self, controller) -> None:
        calls = []
        callback = lambda: calls.append(1)
        controller.on("viewport_changed", callback)
        controller.off("viewport_changed", callback)
        controller.set_viewport(2, 4)
        assert calls == []

    def test_failing_callback_is_logged(self, controller, caplog) -> None:
        def broken() -> None:
            raise RuntimeError("boom")

        controller.on("viewport_changed", broken)
        with caplog.at_level(logging.ERROR, logger="graphscout.chart_controller"):
            controller.set_viewport(2, 4)
        assert controller.get_viewport_size() == 4.0
        assert "viewport_changed" in caplog.text

    def test_events_published(self, controller) -> None:
        viewport_events = []
        label_events = []
        controller.event_bus.subscribe(ViewportChangedEvent, viewport_events.append)
        controller.event_bus.subscribe(LabelsInvalidatedEvent, label_events.append)
        controller.set_viewport(2, 4)
        controller.zoom(1.5)

        assert [(e.old_start, e.old_size, e.new_start, e.new_size) for e in viewport_events] == [
            (0.0, 0.0, 2.0, 4.0),
            (2.0, 4.0, 3.0, 2.0),
        ]
        assert [e.formatter_reset for e in label_events] == [False, True]


class TestInteraction:
    def test_defaults(self, controller) -> None:
        assert not controller.is_scrollable()
        assert not controller.is_scalable()
        assert not controller.is_user_interacting()

    def test_scalable_implies_scrollable(self, controller) -> None:
        events = []
        controller.event_bus.subscribe(InteractionChangedEvent, events.append)
        controller.set_scalable(True)
        assert controller.is_scrollable()
        assert events[-1].scrollable and events[-1].scalable

    def test_drag_moves_viewport(self, controller) -> None:
        controller.set_viewport(2, 4)
        controller.set_scrollable(True)
        gestures = controller.gestures
        gestures.on_touch(TouchAction.PRESS, 200, 400)
        gestures.on_touch(TouchAction.MOVE, 200, 400)
        gestures.on_touch(TouchAction.MOVE, 300, 400)
        assert controller.is_user_interacting()
        assert controller.get_viewport_start() == pytest.approx(1.0)
        gestures.on_touch(TouchAction.RELEASE, 300, 400)
        assert not controller.is_user_interacting()
