"""Spiciness step slider widget."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual import events
from textual.widget import Widget

from storefront.events import EventChannel
from storefront.rendering import format_slider_track
from storefront.slider import Detach, SliderGesture, StepDirection


class _MouseCaptureTracker:
    """Viewport-wide pointer tracking backed by Textual mouse capture.

    While captured, the widget keeps receiving move/up events even when the
    pointer leaves it, so drags are not cut short at the widget edge.
    """

    def __init__(self, widget: StepSlider) -> None:
        self._widget = widget
        self._handlers: tuple[Callable[[float], None], Callable[[float], None], Callable[[], None]] | None = None

    @property
    def active(self) -> bool:
        return self._handlers is not None

    def attach(
        self,
        on_move: Callable[[float], None],
        on_end: Callable[[float], None],
        on_cancel: Callable[[], None],
    ) -> Detach:
        self._handlers = (on_move, on_end, on_cancel)
        self._widget.capture_mouse()

        def detach() -> None:
            self._handlers = None
            self._widget.release_mouse()

        return detach

    def move(self, fraction: float) -> None:
        if self._handlers is not None:
            self._handlers[0](fraction)

    def end(self, fraction: float) -> None:
        if self._handlers is not None:
            self._handlers[1](fraction)

    def cancel(self) -> None:
        if self._handlers is not None:
            self._handlers[2]()


class StepSlider(Widget, can_focus=True):
    """A horizontal track of `steps` positions with a draggable thumb."""

    DEFAULT_CSS = """
    StepSlider {
        height: 2;
        width: 1fr;
        min-width: 11;
    }

    StepSlider:focus {
        background: $boost;
    }
    """

    BINDINGS = [
        ("left", "step('previous')", "Milder"),
        ("right", "step('next')", "Spicier"),
        ("home", "step('home')", "Mildest"),
        ("end", "step('end')", "Hottest"),
    ]

    def __init__(self, steps: int, value: float = 0, *, id: str | None = None, classes: str | None = None) -> None:
        super().__init__(id=id, classes=classes)
        self._tracker = _MouseCaptureTracker(self)
        self.gesture = SliderGesture(steps, value, tracker=self._tracker)
        self.gesture.changes.subscribe(self._redraw)
        self.gesture.previews.subscribe(self._redraw)

    @property
    def changes(self) -> EventChannel[int]:
        return self.gesture.changes

    @property
    def value(self) -> int:
        return self.gesture.value

    def render(self) -> Text:
        return format_slider_track(
            self.gesture.steps,
            self.gesture.preview_value,
            self.gesture.position_fraction,
            self._track_width(),
        )

    def action_step(self, direction: str) -> None:
        self.gesture.on_discrete_step(StepDirection(direction))

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if event.button != 1:
            return
        self.focus()
        if event.y == 0 and abs(event.x - self._thumb_column()) <= 1:
            self.gesture.on_gesture_start()
        else:
            self.gesture.on_track_activate(self._fraction_at(event.x))
        event.stop()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self._tracker.active:
            self._tracker.move(self._fraction_at(event.x))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self._tracker.active:
            self._tracker.end(self._fraction_at(event.x))
            event.stop()

    def on_mouse_release(self, event: events.MouseRelease) -> None:
        # Capture taken away mid-drag (screen change, focus loss).
        self._tracker.cancel()

    def on_unmount(self) -> None:
        self.gesture.on_gesture_cancel()

    def _track_width(self) -> int:
        return max(self.size.width, self.gesture.steps * 2 - 1)

    def _thumb_column(self) -> int:
        return int(round(self.gesture.position_fraction * (self._track_width() - 1)))

    def _fraction_at(self, x: int) -> float:
        return x / (self._track_width() - 1)

    def _redraw(self, _value: int) -> None:
        self.refresh()
