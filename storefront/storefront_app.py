"""Main Textual app class."""

from __future__ import annotations

import logging
from typing import Sequence

from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Footer, Header, Static

from storefront.cart import CartStore, CartUpdate, OrderPoster
from storefront.cart_icon import CartIcon
from storefront.carousel import Carousel
from storefront.checkout_modal import CheckoutModal
from storefront.config import SLIDER_INITIAL_VALUE, SLIDER_STEPS
from storefront.coordinator import EventCoordinator
from storefront.data import CATEGORIES, SLIDES, default_catalog
from storefront.events import NUTS_FILTER_CHANGE, VEGETARIAN_FILTER_CHANGE, Subscription
from storefront.filters import FilterPipeline
from storefront.models import Category, Product, Slide
from storefront.product_grid import ProductGrid
from storefront.ribbon_menu import RibbonMenu
from storefront.step_slider import StepSlider
from storefront.toggles import FilterToggle

logger = logging.getLogger(__name__)


class StorefrontApp(App):
    """Carousel, category ribbon, spiciness filters, product grid and cart."""

    TITLE = "Storefront"
    SUB_TITLE = "Thai kitchen"

    CSS = """
    Screen {
        layout: vertical;
    }

    #top-row {
        height: auto;
    }

    #top-row > Carousel {
        width: 1fr;
    }

    #filters-row {
        height: auto;
        padding: 0 1;
    }

    #slider-label {
        width: auto;
        padding: 0 1;
    }

    #filters-row > FilterToggle {
        width: auto;
    }
    """

    BINDINGS = [
        ("c", "open_cart", "Cart"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        products: Sequence[Product] | None = None,
        order_client: OrderPoster | None = None,
        slides: Sequence[Slide] | None = None,
        categories: Sequence[Category] | None = None,
    ) -> None:
        super().__init__()
        self.products = list(products) if products is not None else default_catalog()
        self.slides = list(slides) if slides is not None else SLIDES
        self.categories = list(categories) if categories is not None else CATEGORIES
        self.cart = CartStore(order_client)
        self.pipeline = FilterPipeline(self.products)
        self.coordinator = EventCoordinator(self.products, self.cart, self.pipeline)
        self._subscriptions: list[Subscription] = []
        self._cart_icon: CartIcon | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="top-row"):
            yield Carousel(self.slides, id="carousel")
            yield CartIcon(id="cart-icon")
        yield RibbonMenu(self.categories, id="ribbon")
        with Horizontal(id="filters-row"):
            yield Static("Max spiciness", id="slider-label")
            yield StepSlider(SLIDER_STEPS, SLIDER_INITIAL_VALUE, id="spiciness-slider")
            yield FilterToggle("No nuts", NUTS_FILTER_CHANGE, id="nuts-checkbox")
            yield FilterToggle("Vegetarian only", VEGETARIAN_FILTER_CHANGE, id="vegetarian-checkbox")
        yield ProductGrid(id="products-grid")
        yield Footer()

    def on_mount(self) -> None:
        carousel = self.query_one("#carousel", Carousel)
        ribbon = self.query_one("#ribbon", RibbonMenu)
        slider = self.query_one("#spiciness-slider", StepSlider)
        nuts = self.query_one("#nuts-checkbox", FilterToggle)
        vegetarian = self.query_one("#vegetarian-checkbox", FilterToggle)
        grid = self.query_one("#products-grid", ProductGrid)
        icon = self.query_one("#cart-icon", CartIcon)
        self._cart_icon = icon

        self._subscriptions = [
            self.pipeline.results.subscribe(grid.show),
            self.cart.updates.subscribe(self._on_cart_update),
            icon.opens.subscribe(lambda _payload: self.action_open_cart()),
        ]
        self.coordinator.connect(
            product_sources=(carousel.product_add, grid.product_add),
            slider=slider.changes,
            ribbon=ribbon.selections,
            nuts_toggle=nuts.changes,
            vegetarian_toggle=vegetarian.changes,
        )

        self.pipeline.update(
            exclude_nuts=nuts.value,
            vegetarian_only=vegetarian.value,
            max_spiciness=slider.value,
            category=ribbon.value or None,
        )
        icon.show_totals(self.cart.total_count(), self.cart.total_price())
        logger.info("app_mounted products=%d", len(self.products))

    def on_unmount(self) -> None:
        self.coordinator.disconnect()
        for subscription in self._subscriptions:
            subscription.cancel()
        self._subscriptions.clear()

    def action_open_cart(self) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        if not self.cart.open_checkout():
            return
        self.push_screen(CheckoutModal(self.cart))

    def _on_cart_update(self, _update: CartUpdate) -> None:
        # The checkout screen may be on top; keep a direct handle to the badge.
        if self._cart_icon is not None:
            self._cart_icon.show_totals(self.cart.total_count(), self.cart.total_price())
