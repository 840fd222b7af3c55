"""Tests for adaptive precision label formatting."""

import pytest
from PySide6.QtCore import QLocale

from graphscout.label_formatter import LabelFormatter, precision_for_span


class RangeProvider:
    """Callable returning a configurable y range and counting calls."""

    def __init__(self, min_y: float, max_y: float) -> None:
        self.range = (min_y, max_y)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.range


@pytest.mark.parametrize("span, digits", [
    (0.0, 6),
    (0.05, 6),
    (0.1, 4),
    (0.5, 4),
    (1.0, 3),
    (10.0, 3),
    (20.0, 1),
    (50.0, 1),
    (100.0, 0),
    (500.0, 0),
])
def test_precision_for_span(span, digits) -> None:
    assert precision_for_span(span) == digits


class TestLabelFormatter:
    def test_large_span_rounds_to_integer_with_grouping(self, us_locale) -> None:
        formatter = LabelFormatter(RangeProvider(0, 500), us_locale)
        assert formatter.format(1234.56) == "1,235"

    def test_medium_span_keeps_one_digit(self, us_locale) -> None:
        formatter = LabelFormatter(RangeProvider(0, 50), us_locale)
        assert formatter.format(1234.56) == "1,234.6"

    def test_tiny_span_keeps_six_digits(self, us_locale) -> None:
        formatter = LabelFormatter(RangeProvider(1.0, 1.05), us_locale)
        assert formatter.format(0.0123456789) == "0.012346"

    def test_trailing_zeros_dropped(self, us_locale) -> None:
        formatter = LabelFormatter(RangeProvider(0, 10), us_locale)
        assert formatter.format(2.5) == "2.5"
        assert formatter.format(2.0) == "2"

    def test_negative_values(self, us_locale) -> None:
        formatter = LabelFormatter(RangeProvider(0, 50), us_locale)
        assert formatter.format(-3.26) == "-3.3"
        assert formatter.format(-1500.0) == "-1,500"

    def test_no_negative_zero(self, us_locale) -> None:
        formatter = LabelFormatter(RangeProvider(0, 500), us_locale)
        assert formatter.format(-0.2) == "0"

    def test_locale_separators(self) -> None:
        formatter = LabelFormatter(RangeProvider(0, 50), QLocale("de_DE"))
        assert formatter.format(1234.56) == "1.234,6"

    def test_precision_is_memoized(self, us_locale) -> None:
        provider = RangeProvider(0, 500)
        formatter = LabelFormatter(provider, us_locale)
        assert not formatter.is_valid()
        formatter.format(1.0)
        formatter.format(2.0)
        assert provider.calls == 1
        assert formatter.is_valid()

    def test_precision_kept_until_invalidated(self, us_locale) -> None:
        provider = RangeProvider(0, 500)
        formatter = LabelFormatter(provider, us_locale)
        assert formatter.format(1.25) == "1"

        provider.range = (0, 10)
        assert formatter.format(1.25) == "1"

        formatter.invalidate()
        assert formatter.format(1.25) == "1.25"
        assert provider.calls == 2

    def test_values_beyond_integer_range(self, us_locale) -> None:
        formatter = LabelFormatter(RangeProvider(0.0, 1e20), us_locale)
        assert formatter.format(1e19) == "10,000,000,000,000,000,000"
        assert formatter.format(-1e19) == "-10,000,000,000,000,000,000"

        text = formatter.format(1e300)
        digits = text.replace(",", "")
        assert digits.isdigit()
        assert digits.startswith("1")
        assert len(digits) == 301

    def test_large_value_with_fraction_digits(self, us_locale) -> None:
        formatter = LabelFormatter(RangeProvider(0, 10), us_locale)
        assert formatter.format(12345678901234567.0).startswith("12,345,678,901,234,56")
