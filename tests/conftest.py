"""Shared fixtures for storefront tests."""

from decimal import Decimal

import pytest

from storefront.models import Product


@pytest.fixture
def catalog():
    """A small catalog covering every filterable attribute, including missing ones."""
    return [
        Product(id="satay", name="Chicken satay", price=Decimal("9.50"), image="satay.png",
                category="bits-and-bites", spiciness=1, nuts=True),
        Product(id="tom-yam", name="Tom yam", price=Decimal("7"), image="tom_yam.png",
                category="soups", spiciness=3, nuts=False, vegetarian=False),
        Product(id="green-curry", name="Green curry", price=Decimal("12"), image="green_curry.png",
                category="vegetable-dishes", spiciness=4, vegetarian=True),
        Product(id="papaya", name="Papaya salad", price=Decimal("8.25"), image="papaya.png",
                category="salads", spiciness=0, nuts=True, vegetarian=True),
        Product(id="rice", name="Jasmine rice", price=Decimal("2.50"), image="rice.png"),
    ]


@pytest.fixture
def products_by_id(catalog):
    return {product.id: product for product in catalog}
