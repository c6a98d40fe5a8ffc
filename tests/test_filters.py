"""Tests for the compound product filter."""

import pytest

from storefront.data import PRODUCTS
from storefront.errors import InvalidArgument
from storefront.filters import FilterCriteria, FilterPipeline, apply_filters


class TestApplyFilters:
    """Each criterion alone and combined."""

    def test_default_criteria_pass_everything(self, catalog):
        assert apply_filters(catalog, FilterCriteria()) == catalog

    def test_exclude_nuts_keeps_nut_free_subset_in_order(self, catalog):
        result = apply_filters(catalog, FilterCriteria(exclude_nuts=True))

        assert [p.id for p in result] == ["tom-yam", "green-curry", "rice"]

    def test_vegetarian_only_keeps_marked_products(self, catalog):
        result = apply_filters(catalog, FilterCriteria(vegetarian_only=True))

        # satay and rice are unmarked, tom-yam is explicitly not vegetarian.
        assert [p.id for p in result] == ["green-curry", "papaya"]

    def test_vegetarian_only_on_bundled_menu(self):
        result = apply_filters(PRODUCTS, FilterCriteria(vegetarian_only=True))

        assert all(p.vegetarian for p in result)
        assert [p.id for p in result] == [
            "som-tam-papaya-salad",
            "tom-yam-vegetarian",
            "tom-kha-vegetarian",
            "green-curry-veggies",
            "sweet-corn-cakes",
            "jasmine-rice",
            "red-curry-veggies",
        ]
        assert "penang-shrimp" not in [p.id for p in result]

    def test_max_spiciness_ignores_products_without_spiciness(self, catalog):
        result = apply_filters(catalog, FilterCriteria(max_spiciness=1))

        assert [p.id for p in result] == ["satay", "papaya", "rice"]

    def test_max_spiciness_zero_is_an_active_criterion(self, catalog):
        result = apply_filters(catalog, FilterCriteria(max_spiciness=0))

        assert [p.id for p in result] == ["papaya", "rice"]

    def test_category_requires_exact_match(self, catalog):
        result = apply_filters(catalog, FilterCriteria(category="soups"))

        assert [p.id for p in result] == ["tom-yam"]

    def test_empty_category_means_all(self, catalog):
        assert apply_filters(catalog, FilterCriteria(category="")) == catalog

    def test_criteria_combine_with_and(self, catalog):
        criteria = FilterCriteria(exclude_nuts=True, vegetarian_only=True, max_spiciness=4)

        assert [p.id for p in apply_filters(catalog, criteria)] == ["green-curry"]


class TestFilterPipeline:
    """Incremental criteria merges and full re-publication."""

    def test_update_merges_and_publishes_full_result(self, catalog):
        pipeline = FilterPipeline(catalog)
        published = []
        pipeline.results.subscribe(published.append)

        pipeline.update(exclude_nuts=True)
        pipeline.update(category="soups")

        assert pipeline.criteria == FilterCriteria(exclude_nuts=True, category="soups")
        assert [[p.id for p in batch] for batch in published] == [
            ["tom-yam", "green-curry", "rice"],
            ["tom-yam"],
        ]

    def test_update_back_to_default_restores_catalog(self, catalog):
        pipeline = FilterPipeline(catalog)
        pipeline.update(max_spiciness=0)

        assert pipeline.update(max_spiciness=None) == catalog

    def test_unknown_criterion_is_rejected(self, catalog):
        pipeline = FilterPipeline(catalog)

        with pytest.raises(InvalidArgument):
            pipeline.update(gluten_free=True)
