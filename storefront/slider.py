"""Step slider state machine.

The slider maps a horizontal position to one of `steps` integer values,
0 at the left end and `steps - 1` at the right. Clicks and key steps commit
at once. A drag only previews while the pointer moves and commits once,
when the pointer is released, so `changes` fires at most once per gesture.

While dragging, move/end observers are attached through a `PointerTracker`
for the whole viewport. They are owned by a `GestureGuard`, which detaches
them exactly once however the gesture finishes: released, cancelled,
restarted, or abandoned by an exception inside a ``with`` block.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Protocol

from storefront.errors import InvalidArgument
from storefront.events import SLIDER_CHANGE, SLIDER_PREVIEW, EventChannel

logger = logging.getLogger(__name__)

Detach = Callable[[], None]


class StepDirection(enum.Enum):
    PREVIOUS = "previous"
    NEXT = "next"
    HOME = "home"
    END = "end"


class PointerTracker(Protocol):
    """Source of viewport-wide pointer movement for the duration of a drag."""

    def attach(
        self,
        on_move: Callable[[float], None],
        on_end: Callable[[float], None],
        on_cancel: Callable[[], None],
    ) -> Detach: ...


@dataclass
class SliderState:
    step_count: int
    committed_value: int
    is_dragging: bool = False
    preview_value: int = field(default=-1)

    def __post_init__(self) -> None:
        if self.preview_value < 0:
            self.preview_value = self.committed_value


class GestureGuard:
    """Owns the listeners of one drag gesture and detaches them exactly once."""

    def __init__(self, detach: Detach | None = None, abort: Callable[[], None] | None = None) -> None:
        self._detach = detach
        self._abort = abort
        self.released = False

    def release(self) -> None:
        if self.released:
            return
        self.released = True
        detach, self._detach = self._detach, None
        if detach is not None:
            detach()

    def __enter__(self) -> GestureGuard:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # Leaving the block without a clean end aborts the gesture.
        if not self.released and self._abort is not None:
            self._abort()
        self.release()


def _validate_config(steps: object, value: object) -> None:
    if isinstance(steps, bool) or not isinstance(steps, int) or steps < 2:
        raise InvalidArgument("steps must be an integer greater than 1", {"steps": steps})
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
        raise InvalidArgument("value must be a non-negative number", {"value": value})


class SliderGesture:
    """Turns track clicks, key steps and pointer drags into a committed step value."""

    def __init__(self, steps: int, value: float = 0, tracker: PointerTracker | None = None) -> None:
        _validate_config(steps, value)
        self.state = SliderState(step_count=steps, committed_value=min(math.floor(value), steps - 1))
        self.tracker = tracker
        self.changes: EventChannel[int] = EventChannel(SLIDER_CHANGE)
        self.previews: EventChannel[int] = EventChannel(SLIDER_PREVIEW)
        self._guard: GestureGuard | None = None
        self._drag_fraction: float | None = None

    @property
    def steps(self) -> int:
        return self.state.step_count

    @property
    def value(self) -> int:
        return self.state.committed_value

    @property
    def preview_value(self) -> int:
        return self.state.preview_value

    @property
    def is_dragging(self) -> bool:
        return self.state.is_dragging

    @property
    def position_fraction(self) -> float:
        """Thumb position in [0, 1]; continuous while dragging, snapped otherwise."""
        if self.state.is_dragging and self._drag_fraction is not None:
            return self._drag_fraction
        return self.state.committed_value / (self.state.step_count - 1)

    def clamp(self, value: int) -> int:
        return max(0, min(value, self.state.step_count - 1))

    def value_for(self, fraction: float) -> int:
        """Nearest step for a track position, rounding halves up."""
        fraction = _clamp_fraction(fraction)
        return self.clamp(math.floor(fraction * (self.state.step_count - 1) + 0.5))

    def on_track_activate(self, fraction: float) -> bool:
        return self._commit(self.value_for(fraction))

    def on_discrete_step(self, direction: StepDirection) -> bool:
        current = self.state.committed_value
        if direction is StepDirection.PREVIOUS:
            candidate = current - 1
        elif direction is StepDirection.NEXT:
            candidate = current + 1
        elif direction is StepDirection.HOME:
            candidate = 0
        else:
            candidate = self.state.step_count - 1
        return self._commit(candidate)

    def on_gesture_start(self) -> GestureGuard:
        if self.state.is_dragging:
            self.on_gesture_cancel()

        self.state.is_dragging = True
        self.state.preview_value = self.state.committed_value
        self._drag_fraction = self.position_fraction

        detach = None
        if self.tracker is not None:
            detach = self.tracker.attach(self.on_gesture_move, self.on_gesture_end, self.on_gesture_cancel)
        self._guard = GestureGuard(detach, abort=self.on_gesture_cancel)
        logger.debug("slider_drag_start value=%d", self.state.committed_value)
        return self._guard

    def on_gesture_move(self, fraction: float) -> None:
        if not self.state.is_dragging:
            return
        self._drag_fraction = _clamp_fraction(fraction)
        self.state.preview_value = self.value_for(fraction)
        self.previews.emit(self.state.preview_value)

    def on_gesture_end(self, fraction: float) -> bool:
        if not self.state.is_dragging:
            return False
        candidate = self.value_for(fraction)
        self._finish_gesture()
        logger.debug("slider_drag_end candidate=%d committed=%d", candidate, self.state.committed_value)
        committed = self._commit(candidate)
        if not committed:
            self.previews.emit(self.state.committed_value)
        return committed

    def on_gesture_cancel(self) -> None:
        if not self.state.is_dragging:
            return
        self._finish_gesture()
        logger.debug("slider_drag_cancel value=%d", self.state.committed_value)
        self.previews.emit(self.state.committed_value)

    def _finish_gesture(self) -> None:
        self.state.is_dragging = False
        self.state.preview_value = self.state.committed_value
        self._drag_fraction = None
        guard, self._guard = self._guard, None
        if guard is not None:
            guard.release()

    def _commit(self, candidate: int) -> bool:
        candidate = self.clamp(candidate)
        if candidate == self.state.committed_value:
            return False
        self.state.committed_value = candidate
        if not self.state.is_dragging:
            self.state.preview_value = candidate
        logger.debug("slider_commit value=%d", candidate)
        self.changes.emit(candidate)
        return True


def _clamp_fraction(fraction: float) -> float:
    if math.isnan(fraction):
        return 0.0
    return max(0.0, min(1.0, fraction))
