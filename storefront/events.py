"""Named publish/subscribe channels that widgets expose for their outgoing events."""

from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

PRODUCT_ADD = "product-add"
SLIDER_CHANGE = "slider-change"
RIBBON_SELECT = "ribbon-select"
NUTS_FILTER_CHANGE = "nuts-filter-change"
VEGETARIAN_FILTER_CHANGE = "vegetarian-filter-change"

CART_UPDATE = "cart-update"
CART_OPEN = "cart-open"
CHECKOUT_CLOSED = "checkout-closed"
FILTER_RESULTS = "filter-results"
SLIDER_PREVIEW = "slider-preview"


class Subscription:
    """Handle returned by `EventChannel.subscribe`; cancelling is idempotent."""

    def __init__(self, channel: EventChannel, handler: Callable) -> None:
        self._channel = channel
        self.handler = handler
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self._channel._discard(self)


class EventChannel(Generic[T]):
    """Synchronous, ordered delivery of one named event to its subscribers.

    `emit` calls every handler before it returns, so observers never lag the
    state that produced the event. A handler that raises aborts delivery and
    the exception reaches the emitter.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._subscriptions: list[Subscription] = []

    def __repr__(self) -> str:
        return f"EventChannel({self.name!r}, subscribers={len(self._subscriptions)})"

    def __len__(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, handler: Callable[[T], None]) -> Subscription:
        subscription = Subscription(self, handler)
        self._subscriptions.append(subscription)
        return subscription

    def emit(self, payload: T) -> None:
        logger.debug("emit name=%s payload=%r subscribers=%d", self.name, payload, len(self._subscriptions))
        # Snapshot so handlers may unsubscribe while being notified.
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.handler(payload)

    def _discard(self, subscription: Subscription) -> None:
        # Identity, not equality: the same handler may be registered twice.
        self._subscriptions = [sub for sub in self._subscriptions if sub is not subscription]
