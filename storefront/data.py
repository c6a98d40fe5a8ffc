"""Static catalog data and record validation."""

from __future__ import annotations

import json
import logging
import math
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from storefront.config import CATALOG_PATH
from storefront.constant import (
    CATEGORY_RECORDS,
    PRODUCT_RECORDS,
    SLIDE_RECORDS,
    SPICINESS_LABELS,
)
from storefront.errors import InvalidArgument
from storefront.models import Category, Product, Slide

logger = logging.getLogger(__name__)

_PRODUCT_REQUIRED_FIELDS = ("id", "name", "image", "price")
_SLIDE_REQUIRED_FIELDS = ("id", "name", "price", "image")


def _require_fields(record: Mapping[str, Any], required: Iterable[str], where: str) -> None:
    if not isinstance(record, Mapping):
        raise InvalidArgument(f"{where} must be a mapping", {"record": record})
    for field_name in required:
        if field_name not in record:
            raise InvalidArgument(f"{where} is missing required field: {field_name!r}")


def parse_price(raw: Any, where: str) -> Decimal:
    """Parse a non-negative decimal price."""
    if isinstance(raw, bool):
        raise InvalidArgument(f"{where} has an invalid price", {"price": raw})
    try:
        price = Decimal(str(raw))
    except (InvalidOperation, ValueError):
        raise InvalidArgument(f"{where} has an invalid price", {"price": raw}) from None
    if not price.is_finite() or price < 0:
        raise InvalidArgument(f"{where} has an invalid price", {"price": raw})
    return price


def _optional_flag(record: Mapping[str, Any], *keys: str) -> bool | None:
    for key in keys:
        if key in record and record[key] is not None:
            return bool(record[key])
    return None


def product_from_record(record: Mapping[str, Any], index: int = 0) -> Product:
    """Build a Product from a raw record, failing fast on malformed data."""
    where = f"Product at index {index}"
    _require_fields(record, _PRODUCT_REQUIRED_FIELDS, where)

    spiciness = record.get("spiciness")
    if spiciness is not None:
        if isinstance(spiciness, bool) or not isinstance(spiciness, (int, float)) or not math.isfinite(spiciness):
            raise InvalidArgument(f"{where} has an invalid spiciness", {"spiciness": spiciness})
        spiciness = int(spiciness)

    category = record.get("category")
    return Product(
        id=str(record["id"]),
        name=str(record["name"]),
        price=parse_price(record["price"], where),
        image=str(record["image"]),
        category=str(category) if category is not None else None,
        spiciness=spiciness,
        nuts=_optional_flag(record, "nuts"),
        # Catalog files in the wild spell it both ways.
        vegetarian=_optional_flag(record, "vegetarian", "vegeterian"),
    )


def products_from_records(records: Sequence[Mapping[str, Any]]) -> list[Product]:
    products = [product_from_record(record, idx) for idx, record in enumerate(records)]
    seen: set[str] = set()
    for product in products:
        if product.id in seen:
            raise InvalidArgument(f"Duplicate product id: {product.id!r}")
        seen.add(product.id)
    return products


def categories_from_records(records: Sequence[Mapping[str, Any]]) -> list[Category]:
    """Build ribbon categories. A record without an id becomes the "All" entry."""
    if not isinstance(records, Sequence) or not records:
        raise InvalidArgument("Categories must be a non-empty list")
    categories: list[Category] = []
    for idx, record in enumerate(records):
        _require_fields(record, ("name",), f"Category at index {idx}")
        categories.append(Category(id=str(record.get("id", "") or ""), name=str(record["name"])))
    return categories


def slides_from_records(records: Sequence[Mapping[str, Any]]) -> list[Slide]:
    if not isinstance(records, Sequence) or not records:
        raise InvalidArgument("Slides must be a non-empty list")
    slides: list[Slide] = []
    for idx, record in enumerate(records):
        where = f"Slide at index {idx}"
        _require_fields(record, _SLIDE_REQUIRED_FIELDS, where)
        slides.append(
            Slide(
                id=str(record["id"]),
                name=str(record["name"]),
                price=parse_price(record["price"], where),
                image=str(record["image"]),
            )
        )
    return slides


def load_catalog(path: str | Path) -> list[Product]:
    """Load a JSON product list from disk."""
    catalog_file = Path(path)
    try:
        raw = json.loads(catalog_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidArgument(f"Cannot read catalog {catalog_file}: {exc}") from exc
    if not isinstance(raw, list):
        raise InvalidArgument(f"Catalog {catalog_file} must contain a JSON list")
    products = products_from_records(raw)
    logger.info("catalog_loaded path=%s products=%d", catalog_file, len(products))
    return products


def spiciness_label(level: int | None) -> str:
    if level is None:
        return ""
    return SPICINESS_LABELS.get(level, str(level))


PRODUCTS: list[Product] = products_from_records(PRODUCT_RECORDS)
CATEGORIES: list[Category] = categories_from_records(CATEGORY_RECORDS)
SLIDES: list[Slide] = slides_from_records(SLIDE_RECORDS)


def default_catalog() -> list[Product]:
    """Catalog from CATALOG_PATH when configured, otherwise the bundled one."""
    if CATALOG_PATH:
        return load_catalog(CATALOG_PATH)
    return list(PRODUCTS)
