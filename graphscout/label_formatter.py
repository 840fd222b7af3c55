"""Adaptive precision number formatting for axis labels."""

from typing import Callable, Optional, Tuple

from PySide6.QtCore import QLocale

# (exclusive upper bound of the y span, maximum fraction digits)
PRECISION_STEPS: Tuple[Tuple[float, int], ...] = (
    (0.1, 6),
    (1.0, 4),
    (20.0, 3),
    (100.0, 1),
)


def precision_for_span(span: float) -> int:
    """Return the maximum number of fraction digits for a y-axis span."""
    for bound, digits in PRECISION_STEPS:
        if span < bound:
            return digits
    return 0


class LabelFormatter:
    """Formats label values with a precision derived from the y range.

    The precision is chosen the first time a value is formatted after
    invalidation and then reused for both axes until invalidate() is called.
    Values are formatted with the locale's decimal point and group separator;
    trailing fractional zeros are dropped.
    """

    def __init__(self,
                 range_provider: Callable[[], Tuple[float, float]],
                 locale: Optional[QLocale] = None) -> None:
        """
        Args:
            range_provider: Returns (min_y, max_y) of the visible data.
            locale: Locale used for formatting. Defaults to the system locale.
        """
        self._range_provider = range_provider
        self._locale: QLocale = locale if locale is not None else QLocale()
        self._digits: Optional[int] = None

    @property
    def locale(self) -> QLocale:
        return self._locale

    def is_valid(self) -> bool:
        return self._digits is not None

    def invalidate(self) -> None:
        """Forget the cached precision."""
        self._digits = None

    def precision(self) -> int:
        if self._digits is None:
            min_y, max_y = self._range_provider()
            self._digits = precision_for_span(max_y - min_y)
        return self._digits

    def format(self, value: float) -> str:
        digits = self.precision()
        rounded = round(float(value), digits)
        if rounded == 0:
            rounded = 0.0  # no "-0"
        # Float overload: no integer width limit, applies the group separator
        text = self._locale.toString(rounded, 'f', digits)
        point = self._locale.decimalPoint()
        if digits > 0 and point in text:
            text = text.rstrip(self._locale.zeroDigit())
            if text.endswith(point):
                text = text[:-len(point)]
        return text
