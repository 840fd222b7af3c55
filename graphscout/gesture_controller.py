"""Translation of raw touch and pinch input into viewport mutations.

The controller is Qt-free. The canvas converts platform events into
TouchAction/ScaleEvent values and forwards them here; the controller decides
whether the event pans, zooms or is left to the platform's default handling.

    press ──► Touching ──move──► pan(x - last_x) ──► Touching
                 │
              release
                 ▼
               Idle

While a pinch is in progress MOVE events are consumed without panning; the
first MOVE after the pinch ends starts a fresh drag.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from .data_model import GestureState


class TouchAction(Enum):
    PRESS = "press"
    MOVE = "move"
    RELEASE = "release"


@dataclass(frozen=True)
class ScaleEvent:
    """Output of the platform's pinch recognizer for one input event."""
    scale_factor: float                 # Relative to the previous scale event
    in_progress: bool                   # Recognizer is tracking a pinch
    focal_x: Optional[float] = None     # Informational; zoom stays centred on the viewport


class ViewportTarget(Protocol):
    """Receiver of gesture driven viewport changes."""

    def pan(self, pixel_delta: float, pixel_width: float) -> bool:
        ...

    def zoom(self, scale_factor: float) -> bool:
        ...


class GestureController:
    """Touch state machine driving pan and pinch-zoom.

    Scaling implies scrolling: enabling scale support turns pan support on.
    When pan support is off every event is reported as unhandled.
    """

    def __init__(self, target: ViewportTarget, scrollable: bool = False, scalable: bool = False) -> None:
        self._target = target
        self._state = GestureState()
        self._scrollable = False
        self._scalable = False
        self.set_scrollable(scrollable)
        self.set_scalable(scalable)

    @property
    def state(self) -> GestureState:
        return self._state

    def is_scrollable(self) -> bool:
        return self._scrollable

    def is_scalable(self) -> bool:
        return self._scalable

    def set_scrollable(self, scrollable: bool) -> None:
        self._scrollable = bool(scrollable)

    def set_scalable(self, scalable: bool) -> None:
        """Enable pinch-zoom. This forces scrollable on."""
        self._scalable = bool(scalable)
        if self._scalable:
            self._scrollable = True

    def is_user_interacting(self) -> bool:
        return self._state.last_x is not None

    def reset(self) -> None:
        self._state = GestureState()

    def on_touch(self,
                 action: TouchAction,
                 x: float,
                 content_width: float,
                 scale: Optional[ScaleEvent] = None) -> bool:
        """Process one input event.

        Args:
            action: Touch phase of the event.
            x: Horizontal position in content pixels.
            content_width: Width of the plot area in pixels.
            scale: Pinch recognizer output for this event, if any.

        Returns:
            True if the event was consumed.
        """
        if not self._scrollable:
            return False

        handled = False
        if self._scalable and scale is not None:
            handled = self.on_scale(scale)
        if handled:
            return True

        if action is TouchAction.PRESS:
            self._state.last_x = None
        elif action is TouchAction.MOVE:
            if self._state.scaling:
                # Pointer moves during a pinch belong to the pinch
                return True
            if self._state.last_x is not None:
                self._target.pan(x - self._state.last_x, content_width)
            self._state.last_x = x
        elif action is TouchAction.RELEASE:
            self._state.last_x = None
        return True

    def on_scale(self, scale: ScaleEvent) -> bool:
        """Apply a pinch update. Returns True while the pinch is in progress."""
        if not self._scalable:
            return False
        if self._state.scaling and not scale.in_progress:
            # Re-anchor the drag on the first move after the pinch
            self._state.last_x = None
        self._state.scaling = scale.in_progress
        if scale.in_progress:
            self._target.zoom(scale.scale_factor)
        return scale.in_progress
