"""Rendering helpers for products, cart lines and the slider track."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from storefront.config import CURRENCY_SYMBOL
from storefront.data import spiciness_label
from storefront.models import LineItem, Product

_CENTS = Decimal("0.01")

THUMB = "◆"
STEP_ACTIVE = "●"
STEP_IDLE = "○"


def format_price(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{amount.quantize(_CENTS)}"


def badge_style(tag: str) -> str:
    """Return a consistent badge style for product tags."""
    if tag == "nuts":
        return "bold #ffffff on #8a5a2b"
    if tag == "veg":
        return "bold #0b1f0f on #5fbf72"
    return "bold #ffffff on #b23a48"


def format_spiciness(level: int | None) -> str:
    if not level:
        return ""
    return "♥" * level


def format_product_label(product: Product) -> Text:
    """Render a product name followed by its tags."""
    text = Text()
    text.append(product.name, style="bold")
    if product.vegetarian:
        text.append(" ")
        text.append("veg", style=badge_style("veg"))
    if product.nuts:
        text.append(" ")
        text.append("nuts", style=badge_style("nuts"))
    spicy = format_spiciness(product.spiciness)
    if spicy:
        text.append(" ")
        text.append(spicy, style=badge_style("spicy"))
    return text


def format_product_card(product: Product) -> Text:
    text = format_product_label(product)
    text.append("\n")
    text.append(format_price(product.price))
    if product.spiciness is not None:
        text.append(f"  {spiciness_label(product.spiciness)}", style="dim")
    return text


def format_line_item(item: LineItem) -> Text:
    text = Text()
    text.append(item.product.name)
    text.append(f"  x{item.count}  ", style="bold")
    text.append(format_price(item.subtotal))
    return text


def format_cart_badge(count: int, total: Decimal) -> Text:
    text = Text()
    text.append(f"Cart {count}", style="bold")
    text.append(f"  {format_price(total)}")
    return text


def _column(fraction: float, width: int) -> int:
    return int(round(fraction * (width - 1)))


def format_slider_track(steps: int, shown_value: int, fraction: float, width: int) -> Text:
    """Render a two-line slider: the track with step marks and thumb, then the value under the thumb."""
    width = max(width, steps * 2 - 1)
    thumb_col = _column(fraction, width)
    step_cols = {_column(idx / (steps - 1), width): idx for idx in range(steps)}

    track = Text()
    for col in range(width):
        if col == thumb_col:
            track.append(THUMB, style="bold #b23a48")
        elif col in step_cols:
            is_active = step_cols[col] == shown_value
            track.append(STEP_ACTIVE if is_active else STEP_IDLE, style="#b23a48" if col < thumb_col else "dim")
        else:
            track.append("━" if col < thumb_col else "─", style="#b23a48" if col < thumb_col else "dim")

    label = str(shown_value)
    start = max(0, min(thumb_col - len(label) // 2, width - len(label)))
    track.append("\n")
    track.append(" " * start)
    track.append(label, style="bold")
    return track
