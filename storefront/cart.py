"""Cart state and checkout submission."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, Protocol

from storefront.events import CART_UPDATE, CHECKOUT_CLOSED, EventChannel
from storefront.models import CheckoutForm, LineItem, Product
from storefront.order_client import OrderClient, PostResult

logger = logging.getLogger(__name__)


class OrderPoster(Protocol):
    async def post_order(self, form_fields: Mapping[str, str]) -> PostResult: ...


class SubmitStatus(enum.Enum):
    SUCCESS = "success"
    FAILED = "failed"
    ALREADY_IN_PROGRESS = "already_in_progress"
    CHECKOUT_CLOSED = "checkout_closed"


@dataclass(frozen=True)
class SubmitOutcome:
    """Result of `CartStore.submit_order`.

    `total` is the cart total captured when the submission started.
    """

    status: SubmitStatus
    total: Decimal = Decimal("0")
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status is SubmitStatus.SUCCESS


@dataclass(frozen=True)
class CartUpdate:
    """Payload of a cart-update notification.

    `item` is the affected line item (already detached when `removed`), or
    None when the whole cart was cleared by a successful order.
    """

    item: LineItem | None
    removed: bool = False
    cleared: bool = False


class CartStore:
    """Authoritative cart contents: at most one line item per product id."""

    def __init__(self, order_client: OrderPoster | None = None) -> None:
        self._items: list[LineItem] = []
        self._order_client: OrderPoster = order_client or OrderClient()
        self._submitting = False
        self.checkout_open = False
        self.checkout_succeeded = False
        self.updates: EventChannel[CartUpdate] = EventChannel(CART_UPDATE)
        self.checkout_closed: EventChannel[None] = EventChannel(CHECKOUT_CLOSED)

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    @property
    def submitting(self) -> bool:
        return self._submitting

    def line_for(self, product_id: str) -> LineItem | None:
        for item in self._items:
            if item.product.id == product_id:
                return item
        return None

    def add_product(self, product: Product | None) -> None:
        if product is None:
            return

        item = self.line_for(product.id)
        if item is None:
            item = LineItem(product=product, count=1)
            self._items.append(item)
        else:
            item.count += 1
        logger.debug("cart_add product=%s count=%d", product.id, item.count)
        self._notify(CartUpdate(item=item))

    def adjust_count(self, product_id: str, delta: int) -> None:
        item = self.line_for(product_id)
        if item is None:
            return

        item.count += delta
        removed = item.count <= 0
        if removed:
            self._items.remove(item)
        logger.debug("cart_adjust product=%s delta=%d count=%d removed=%s", product_id, delta, item.count, removed)
        self._notify(CartUpdate(item=item, removed=removed))

    def is_empty(self) -> bool:
        return not self._items

    def total_count(self) -> int:
        return sum(item.count for item in self._items)

    def total_price(self) -> Decimal:
        return sum((item.subtotal for item in self._items), Decimal("0"))

    def open_checkout(self) -> bool:
        """Enter the checkout view. Refused for an empty cart."""
        if self.is_empty():
            return False
        self.checkout_open = True
        self.checkout_succeeded = False
        return True

    def close_checkout(self) -> None:
        if not self.checkout_open:
            return
        self.checkout_open = False
        self.checkout_succeeded = False
        logger.debug("checkout_closed")
        self.checkout_closed.emit(None)

    async def submit_order(self, form: CheckoutForm | Mapping[str, str]) -> SubmitOutcome:
        """Post the delivery form and empty the cart on success.

        The cart is left untouched on any failure; the caller decides how to
        present it. A second call while one is in flight is rejected.
        """
        if not self.checkout_open:
            return SubmitOutcome(SubmitStatus.CHECKOUT_CLOSED, reason="checkout is not open")
        if self._submitting:
            return SubmitOutcome(SubmitStatus.ALREADY_IN_PROGRESS, reason="an order is already being submitted")

        form_fields = form.as_form_fields() if isinstance(form, CheckoutForm) else dict(form)
        total = self.total_price()
        self._submitting = True
        logger.info("order_submit items=%d total=%s", len(self._items), total)
        try:
            result = await self._order_client.post_order(form_fields)
        finally:
            self._submitting = False

        if not result.ok:
            logger.warning("order_submit_failed reason=%s", result.reason)
            return SubmitOutcome(SubmitStatus.FAILED, total=total, reason=result.reason or "order was not accepted")

        self._items.clear()
        if self.checkout_open:
            self.checkout_succeeded = True
        logger.info("order_submit_succeeded total=%s", total)
        self._notify(CartUpdate(item=None, cleared=True))
        return SubmitOutcome(SubmitStatus.SUCCESS, total=total)

    def _notify(self, update: CartUpdate) -> None:
        self.updates.emit(update)
        if self.checkout_open and not self.checkout_succeeded and self.is_empty():
            self.close_checkout()
