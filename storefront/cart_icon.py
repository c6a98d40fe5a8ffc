"""Cart badge widget."""

from __future__ import annotations

from decimal import Decimal

from textual import events
from textual.widgets import Static

from storefront.events import CART_OPEN, EventChannel
from storefront.rendering import format_cart_badge


class CartIcon(Static):
    """Shows the cart count and total; hidden while the cart is empty."""

    DEFAULT_CSS = """
    CartIcon {
        width: auto;
        min-width: 18;
        height: 3;
        border: round $accent;
        padding: 0 1;
    }
    """

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.opens: EventChannel[None] = EventChannel(CART_OPEN)
        self.count = 0
        self.display = False

    def show_totals(self, count: int, total: Decimal) -> None:
        self.count = count
        self.display = count > 0
        self.update(format_cart_badge(count, total))

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.opens.emit(None)
