"""Event classes published by the chart controller."""

from dataclasses import dataclass, field
import time


@dataclass(frozen=True, kw_only=True)
class Event:
    """Base class for all events."""
    timestamp: float = field(default_factory=time.time)


@dataclass(frozen=True, kw_only=True)
class ViewportChangedEvent(Event):
    """Emitted when the viewport start or size changes."""
    old_start: float
    old_size: float
    new_start: float
    new_size: float


@dataclass(frozen=True, kw_only=True)
class LabelsInvalidatedEvent(Event):
    """Emitted when cached axis labels are discarded."""
    formatter_reset: bool = False


@dataclass(frozen=True, kw_only=True)
class InteractionChangedEvent(Event):
    """Emitted when scroll or scale support is toggled."""
    scrollable: bool
    scalable: bool
