"""Product grid and card widgets."""

from __future__ import annotations

from typing import Sequence

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Static

from storefront.events import PRODUCT_ADD, EventChannel
from storefront.models import Product
from storefront.rendering import format_product_card


class ProductCard(Horizontal):
    """One product with its add button."""

    DEFAULT_CSS = """
    ProductCard {
        height: 3;
        border-bottom: solid $surface;
    }

    ProductCard > .card-body {
        width: 1fr;
    }

    ProductCard > .card-add {
        min-width: 5;
        width: 5;
    }
    """

    def __init__(self, product: Product) -> None:
        super().__init__(classes="product-card")
        self.product = product

    def compose(self) -> ComposeResult:
        yield Static(format_product_card(self.product), classes="card-body")
        yield Button("+", classes="card-add", variant="primary")


class ProductGrid(VerticalScroll):
    """Lists the filtered catalog. Each `show` replaces every card."""

    DEFAULT_CSS = """
    ProductGrid {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }
    """

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.product_add: EventChannel[str] = EventChannel(PRODUCT_ADD)
        self.shown: list[Product] = []

    def show(self, products: Sequence[Product]) -> None:
        self.shown = list(products)
        self.remove_children()
        if not self.shown:
            self.mount(Static("No dishes match these filters", classes="grid-empty"))
            return
        self.mount_all([ProductCard(product) for product in self.shown])

    def on_button_pressed(self, event: Button.Pressed) -> None:
        card = event.button.parent
        if isinstance(card, ProductCard):
            self.product_add.emit(card.product.id)
            event.stop()
