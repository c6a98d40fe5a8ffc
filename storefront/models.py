"""Domain models for the storefront."""

from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal


@dataclass(frozen=True)
class Product:
    """A catalog product. Cart line items hold a reference, never a copy."""

    id: str
    name: str
    price: Decimal
    image: str
    category: str | None = None
    spiciness: int | None = None
    nuts: bool | None = None
    vegetarian: bool | None = None


@dataclass(frozen=True)
class Category:
    """A ribbon category. An empty id stands for "All"."""

    id: str
    name: str


@dataclass(frozen=True)
class Slide:
    """A carousel slide offering one product."""

    id: str
    name: str
    price: Decimal
    image: str


@dataclass
class LineItem:
    """One product's entry in the cart."""

    product: Product
    count: int = 1

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.count


@dataclass
class CheckoutForm:
    """Delivery fields posted with an order."""

    name: str = ""
    email: str = ""
    tel: str = ""
    address: str = ""

    def as_form_fields(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name).strip() for f in fields(self)}

    def missing_fields(self) -> list[str]:
        """Return names of required fields left blank."""
        return [name for name, value in self.as_form_fields().items() if not value]
