"""Filter checkbox widget."""

from __future__ import annotations

from textual.widgets import Checkbox

from storefront.events import EventChannel


class FilterToggle(Checkbox):
    """A checkbox that republishes its value on a named channel."""

    def __init__(self, label: str, channel_name: str, value: bool = False, *, id: str | None = None) -> None:
        super().__init__(label, value, id=id)
        self.changes: EventChannel[bool] = EventChannel(channel_name)

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        if event.checkbox is self:
            self.changes.emit(event.value)
