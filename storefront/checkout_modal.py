"""Checkout modal screen."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from storefront.cart import CartStore, CartUpdate, SubmitOutcome, SubmitStatus
from storefront.constant import CHECKOUT_FORM_DEFAULTS
from storefront.events import Subscription
from storefront.models import CheckoutForm, LineItem
from storefront.rendering import format_line_item, format_price

logger = logging.getLogger(__name__)

_FORM_FIELDS = (
    ("name", "Name"),
    ("email", "Email"),
    ("tel", "Phone"),
    ("address", "Address"),
)

SUCCESS_MESSAGE = "Order successful! Your order is being cooked :)\nWe'll notify you about delivery time shortly."


class CheckoutLine(Horizontal):
    """A cart line with minus/plus counters."""

    DEFAULT_CSS = """
    CheckoutLine {
        height: 3;
    }

    CheckoutLine > .line-body {
        width: 1fr;
        padding: 1 0;
    }

    CheckoutLine > Button {
        min-width: 5;
        width: 5;
    }
    """

    def __init__(self, item: LineItem) -> None:
        super().__init__(classes="checkout-line")
        self.product_id = item.product.id
        self.item = item

    def compose(self) -> ComposeResult:
        yield Button("−", classes="counter-minus")
        yield Static(format_line_item(self.item), classes="line-body")
        yield Button("+", classes="counter-plus")


class CheckoutModal(ModalScreen[None]):
    """Line items, delivery form and order submission for the current cart."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("ctrl+c", "close", "Close"),
    ]

    CSS = """
    CheckoutModal {
        align: center middle;
        background: $background 60%;
    }

    #checkout-dialog {
        width: 72;
        height: auto;
        max-height: 90%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #checkout-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #checkout-lines {
        height: auto;
        max-height: 12;
    }

    #checkout-total {
        text-style: bold;
        margin: 1 0;
    }

    #checkout-status {
        color: #ffb3b3;
    }

    #order-button.is-loading {
        text-style: italic;
    }
    """

    def __init__(self, cart: CartStore) -> None:
        super().__init__()
        self.cart = cart
        self.last_outcome: SubmitOutcome | None = None
        self._subscriptions: list[Subscription] = []
        self._closing = False

    def compose(self) -> ComposeResult:
        with Container(id="checkout-dialog"):
            yield Static("Your order", id="checkout-title")
            yield VerticalScroll(id="checkout-lines")
            yield Static(id="checkout-total")
            with Container(id="checkout-form"):
                for field_name, placeholder in _FORM_FIELDS:
                    yield Input(
                        value=CHECKOUT_FORM_DEFAULTS.get(field_name, ""),
                        placeholder=placeholder,
                        id=f"field-{field_name}",
                    )
                yield Static(id="checkout-status")
                yield Button("Order", id="order-button", variant="success")
            yield Static(id="checkout-success")

    def on_mount(self) -> None:
        self._subscriptions = [
            self.cart.updates.subscribe(self._on_cart_update),
            self.cart.checkout_closed.subscribe(self._on_checkout_closed),
        ]
        self.query_one("#checkout-success", Static).display = False
        self._refresh_lines()

    def on_unmount(self) -> None:
        self._closing = True
        for subscription in self._subscriptions:
            subscription.cancel()
        self._subscriptions.clear()

    def action_close(self) -> None:
        if self.cart.checkout_open:
            # Emits checkout-closed, which dismisses this screen.
            self.cart.close_checkout()
            return
        self._dismiss_once()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "order-button":
            self._start_submit()
            return

        line = event.button.parent
        if not isinstance(line, CheckoutLine):
            return
        if event.button.has_class("counter-plus"):
            self.cart.adjust_count(line.product_id, 1)
        elif event.button.has_class("counter-minus"):
            self.cart.adjust_count(line.product_id, -1)

    def read_form(self) -> CheckoutForm:
        values = {field_name: self.query_one(f"#field-{field_name}", Input).value for field_name, _ in _FORM_FIELDS}
        return CheckoutForm(**values)

    def _start_submit(self) -> None:
        form = self.read_form()
        missing = form.missing_fields()
        if missing:
            self._set_status(f"Please fill in: {', '.join(missing)}")
            return
        if self.cart.submitting:
            return

        self._set_status("")
        button = self.query_one("#order-button", Button)
        button.label = "Sending…"
        button.add_class("is-loading")
        # Runs on the app so closing this screen does not cancel an order in flight.
        self.app.run_worker(self._submit(form), group="checkout")

    async def _submit(self, form: CheckoutForm) -> SubmitOutcome:
        try:
            outcome = await self.cart.submit_order(form)
        finally:
            if not self._closing:
                button = self.query_one("#order-button", Button)
                button.label = "Order"
                button.remove_class("is-loading")

        self.last_outcome = outcome
        logger.info("checkout_outcome status=%s total=%s", outcome.status.value, outcome.total)
        if self._closing:
            return outcome
        if outcome.status is SubmitStatus.SUCCESS:
            self._show_success()
        elif outcome.status is SubmitStatus.FAILED:
            self._set_status("Order was not sent. Please try again.")
        return outcome

    def _show_success(self) -> None:
        self.query_one("#checkout-title", Static).update("Success!")
        self.query_one("#checkout-lines").display = False
        self.query_one("#checkout-total").display = False
        self.query_one("#checkout-form").display = False
        success = self.query_one("#checkout-success", Static)
        success.update(SUCCESS_MESSAGE)
        success.display = True

    def _on_cart_update(self, update: CartUpdate) -> None:
        if update.cleared:
            return
        self._refresh_lines()

    def _on_checkout_closed(self, _payload: None) -> None:
        self._dismiss_once()

    def _dismiss_once(self) -> None:
        if self._closing:
            return
        self._closing = True
        self.dismiss()

    def _refresh_lines(self) -> None:
        lines = self.query_one("#checkout-lines", VerticalScroll)
        lines.remove_children()
        lines.mount_all([CheckoutLine(item) for item in self.cart.items])

        total = Text()
        total.append("Total ")
        total.append(format_price(self.cart.total_price()))
        self.query_one("#checkout-total", Static).update(total)

    def _set_status(self, message: str) -> None:
        self.query_one("#checkout-status", Static).update(message)
