"""Tests for widget-to-component event routing."""

import pytest

from storefront.cart import CartStore
from storefront.coordinator import EventCoordinator
from storefront.events import (
    NUTS_FILTER_CHANGE,
    PRODUCT_ADD,
    RIBBON_SELECT,
    SLIDER_CHANGE,
    VEGETARIAN_FILTER_CHANGE,
    EventChannel,
)
from storefront.filters import FilterCriteria, FilterPipeline


# Fixtures

@pytest.fixture
def channels():
    return {
        "grid": EventChannel(PRODUCT_ADD),
        "carousel": EventChannel(PRODUCT_ADD),
        "slider": EventChannel(SLIDER_CHANGE),
        "ribbon": EventChannel(RIBBON_SELECT),
        "nuts": EventChannel(NUTS_FILTER_CHANGE),
        "vegetarian": EventChannel(VEGETARIAN_FILTER_CHANGE),
    }


@pytest.fixture
def wiring(catalog, channels):
    cart = CartStore(order_client=object())
    pipeline = FilterPipeline(catalog)
    coordinator = EventCoordinator(catalog, cart, pipeline)
    coordinator.connect(
        product_sources=(channels["grid"], channels["carousel"]),
        slider=channels["slider"],
        ribbon=channels["ribbon"],
        nuts_toggle=channels["nuts"],
        vegetarian_toggle=channels["vegetarian"],
    )
    return coordinator, cart, pipeline


class TestEventCoordinator:
    """Each named event reaches the right component."""

    def test_product_add_from_any_source_reaches_cart(self, wiring, channels):
        _, cart, _ = wiring

        channels["grid"].emit("satay")
        channels["carousel"].emit("satay")
        channels["carousel"].emit("rice")

        assert [(item.product.id, item.count) for item in cart.items] == [("satay", 2), ("rice", 1)]

    def test_unknown_product_id_is_ignored(self, wiring, channels):
        _, cart, _ = wiring

        channels["grid"].emit("penang-shrimp")

        assert cart.is_empty()

    def test_filter_events_merge_into_criteria(self, wiring, channels):
        _, _, pipeline = wiring
        rendered = []
        pipeline.results.subscribe(lambda products: rendered.append([p.id for p in products]))

        channels["slider"].emit(3)
        channels["nuts"].emit(True)
        channels["vegetarian"].emit(True)
        channels["ribbon"].emit("soups")

        assert pipeline.criteria == FilterCriteria(
            exclude_nuts=True, vegetarian_only=True, max_spiciness=3, category="soups"
        )
        assert rendered[-1] == []
        assert len(rendered) == 4

    def test_empty_ribbon_selection_clears_category(self, wiring, channels):
        _, _, pipeline = wiring

        channels["ribbon"].emit("soups")
        channels["ribbon"].emit("")

        assert pipeline.criteria.category is None

    def test_disconnect_stops_routing(self, wiring, channels):
        coordinator, cart, _ = wiring

        coordinator.disconnect()
        channels["grid"].emit("satay")

        assert not coordinator.connected
        assert cart.is_empty()
        assert len(channels["grid"]) == 0
