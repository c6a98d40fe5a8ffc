"""Category ribbon widget."""

from __future__ import annotations

from typing import Sequence

from textual.app import ComposeResult
from textual.containers import HorizontalScroll
from textual.widgets import Button

from storefront.errors import InvalidArgument
from storefront.events import RIBBON_SELECT, EventChannel
from storefront.models import Category


class RibbonMenu(HorizontalScroll):
    """A scrollable row of categories; the empty id selects everything."""

    DEFAULT_CSS = """
    RibbonMenu {
        height: 3;
    }

    RibbonMenu > .ribbon-item {
        min-width: 8;
        border: none;
        margin: 0 1;
    }

    RibbonMenu > .ribbon-item.-active {
        text-style: bold reverse;
    }
    """

    def __init__(self, categories: Sequence[Category], *, id: str | None = None) -> None:
        if not categories:
            raise InvalidArgument("Categories must be a non-empty list")
        super().__init__(id=id)
        self.categories = list(categories)
        self.selections: EventChannel[str] = EventChannel(RIBBON_SELECT)
        self.value = self.categories[0].id
        self._buttons: list[tuple[Button, Category]] = []

    def compose(self) -> ComposeResult:
        for category in self.categories:
            button = Button(category.name, classes="ribbon-item")
            button.set_class(category.id == self.value, "-active")
            self._buttons.append((button, category))
            yield button

    def on_button_pressed(self, event: Button.Pressed) -> None:
        for button, category in self._buttons:
            if button is event.button:
                self.select(category.id)
                event.stop()
                return

    def select(self, category_id: str) -> None:
        """Mark a category active and announce it, even when it is already selected."""
        if not any(category.id == category_id for category in self.categories):
            return
        self.value = category_id
        for button, category in self._buttons:
            button.set_class(category.id == category_id, "-active")
        self.selections.emit(category_id)
