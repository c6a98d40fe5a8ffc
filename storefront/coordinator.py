"""Routes widget events to the cart and the filter pipeline."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from storefront.cart import CartStore
from storefront.events import EventChannel, Subscription
from storefront.filters import FilterPipeline
from storefront.models import Product

logger = logging.getLogger(__name__)


class EventCoordinator:
    """Subscribes to each widget's outgoing channels and calls the owning component.

    Widgets never see each other; the coordinator is the only place where a
    product card, the slider or the ribbon reaches the cart or the filters.
    """

    def __init__(self, catalog: Sequence[Product], cart: CartStore, pipeline: FilterPipeline) -> None:
        self._products_by_id = {product.id: product for product in catalog}
        self.cart = cart
        self.pipeline = pipeline
        self._subscriptions: list[Subscription] = []

    @property
    def connected(self) -> bool:
        return bool(self._subscriptions)

    def connect(
        self,
        *,
        product_sources: Iterable[EventChannel[str]] = (),
        slider: EventChannel[int] | None = None,
        ribbon: EventChannel[str] | None = None,
        nuts_toggle: EventChannel[bool] | None = None,
        vegetarian_toggle: EventChannel[bool] | None = None,
    ) -> None:
        for channel in product_sources:
            self._subscriptions.append(channel.subscribe(self.on_product_add))
        if slider is not None:
            self._subscriptions.append(slider.subscribe(self.on_slider_change))
        if ribbon is not None:
            self._subscriptions.append(ribbon.subscribe(self.on_ribbon_select))
        if nuts_toggle is not None:
            self._subscriptions.append(nuts_toggle.subscribe(self.on_nuts_filter_change))
        if vegetarian_toggle is not None:
            self._subscriptions.append(vegetarian_toggle.subscribe(self.on_vegetarian_filter_change))
        logger.debug("coordinator_connected subscriptions=%d", len(self._subscriptions))

    def disconnect(self) -> None:
        for subscription in self._subscriptions:
            subscription.cancel()
        self._subscriptions.clear()

    def on_product_add(self, product_id: str) -> None:
        product = self._products_by_id.get(product_id)
        if product is None:
            logger.warning("product_add_unknown id=%r", product_id)
            return
        self.cart.add_product(product)

    def on_slider_change(self, level: int) -> None:
        self.pipeline.update(max_spiciness=level)

    def on_ribbon_select(self, category_id: str) -> None:
        self.pipeline.update(category=category_id or None)

    def on_nuts_filter_change(self, checked: bool) -> None:
        self.pipeline.update(exclude_nuts=checked)

    def on_vegetarian_filter_change(self, checked: bool) -> None:
        self.pipeline.update(vegetarian_only=checked)
