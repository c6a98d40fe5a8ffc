"""Compound product filtering."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Iterable, Sequence

from storefront.errors import InvalidArgument
from storefront.events import FILTER_RESULTS, EventChannel
from storefront.models import Product

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterCriteria:
    """Independently togglable criteria, combined with AND.

    A criterion left at its default passes every product.
    """

    exclude_nuts: bool = False
    vegetarian_only: bool = False
    max_spiciness: int | None = None
    category: str | None = None

    def merge(self, **changes: Any) -> FilterCriteria:
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise InvalidArgument(f"Unknown filter criteria: {', '.join(unknown)}")
        return replace(self, **changes)


def matches(product: Product, criteria: FilterCriteria) -> bool:
    """Evaluate the compound predicate for one product.

    Vegetarian-only keeps just the products marked vegetarian. For the
    other criteria a missing attribute never rejects a product, and a
    category filter needs an exact match.
    """
    if criteria.exclude_nuts and product.nuts:
        return False
    if criteria.vegetarian_only and not product.vegetarian:
        return False
    if (
        criteria.max_spiciness is not None
        and product.spiciness is not None
        and product.spiciness > criteria.max_spiciness
    ):
        return False
    if criteria.category and product.category != criteria.category:
        return False
    return True


def apply_filters(catalog: Iterable[Product], criteria: FilterCriteria) -> list[Product]:
    """Return the matching products in catalog order."""
    return [product for product in catalog if matches(product, criteria)]


class FilterPipeline:
    """Holds the current criteria and republishes the filtered catalog on every change."""

    def __init__(self, catalog: Sequence[Product], criteria: FilterCriteria | None = None) -> None:
        self._catalog = list(catalog)
        self.criteria = criteria or FilterCriteria()
        self.results: EventChannel[list[Product]] = EventChannel(FILTER_RESULTS)

    @property
    def catalog(self) -> list[Product]:
        return list(self._catalog)

    def current(self) -> list[Product]:
        return apply_filters(self._catalog, self.criteria)

    def update(self, **changes: Any) -> list[Product]:
        """Merge criteria changes, rescan the whole catalog and publish the result."""
        self.criteria = self.criteria.merge(**changes)
        filtered = self.current()
        logger.debug("filter_update criteria=%r matched=%d/%d", self.criteria, len(filtered), len(self._catalog))
        self.results.emit(filtered)
        return filtered
