"""Unit tests for property, estate and fertility valuation."""

import pytest

from heirloom.adapters.memory import InMemoryWorld
from heirloom.application.services import (
    AnimalFertilityCalculator,
    EstateValuationService,
    FertilityTier,
    PriceTable,
    PropertyValuationService,
)
from heirloom.core.exceptions import InvalidParameterError
from heirloom.domain.models import ValuationOptions


@pytest.fixture
def estate_world():
    return InMemoryWorld(
        characters=[
            {"id": "rich", "cash": 100, "propertyDetails": {"farmland": 4, "cattle": 2, "dragons": 1}},
            {"id": "landless", "cash": 30},
            {"id": "broke", "cash": "lots", "propertyDetails": {}},
        ]
    )


@pytest.fixture
def valuation(estate_world):
    return PropertyValuationService(estate_world)


class TestPropertyValue:
    """Tests for single property lines."""

    def test_known_property(self, valuation):
        info = valuation.get_property_value("rich", "farmland")
        assert (info.units, info.unit_price, info.multiplier, info.value) == (4, 250, 1.0, 1000)
        assert info.source == "base-price-table"

    def test_unknown_property(self, valuation):
        info = valuation.get_property_value("rich", "dragons")
        assert info.value == 0
        assert info.source == "unknown-property"

    def test_not_held(self, valuation):
        info = valuation.get_property_value("rich", "pig")
        assert info.units == 0
        assert info.value == 0

    def test_no_character(self, valuation):
        assert valuation.get_property_value("nobody", "farmland").source == "no-character"

    def test_no_properties(self, valuation):
        assert valuation.get_property_value("landless", "farmland").source == "no-properties"

    def test_multiplier(self, valuation):
        info = valuation.get_property_value("rich", "cattle", ValuationOptions(multiplier=1.5))
        assert info.value == 900

    def test_non_finite_multiplier_ignored(self, valuation):
        info = valuation.get_property_value("rich", "cattle", ValuationOptions(multiplier=float("nan")))
        assert info.multiplier == 1.0
        assert info.value == 600

    def test_price_override_replaces_table(self, valuation):
        info = valuation.get_property_value("rich", "cattle", ValuationOptions(prices={"farmland": 1}))
        assert info.value == 0
        assert info.source == "unknown-property"

    def test_alias(self, valuation):
        assert valuation.get_property("rich", "farmland") == valuation.get_property_value("rich", "farmland")


class TestTotalsAndPrices:
    """Tests for totals and the price table."""

    def test_total(self, valuation):
        total = valuation.get_total_property_value("rich")
        assert total.total == 1600
        assert set(total.breakdown) == {"farmland", "cattle", "dragons"}
        assert total.source == "summed"

    def test_total_without_properties(self, valuation):
        assert valuation.get_total_property_value("landless").source == "no-properties"
        assert valuation.get_total_property_value("nobody").total == 0

    def test_empty_holdings_sum_to_zero(self, valuation):
        total = valuation.get_total_property_value("broke")
        assert total.total == 0
        assert total.source == "summed"

    def test_set_prices(self, valuation):
        valuation.set_price("dragons", 10_000)
        valuation.set_prices({"farmland": 1, "cattle": 2})
        assert valuation.get_total_property_value("rich").total == 10_000 + 4 + 4

    def test_price_tables_are_per_instance(self, estate_world):
        first = PropertyValuationService(estate_world)
        first.set_price("farmland", 1)
        second = PropertyValuationService(estate_world)
        assert second.get_property_value("rich", "farmland").unit_price == 250

    @pytest.mark.parametrize("price", [-1, float("inf"), "100"])
    def test_invalid_price_rejected(self, valuation, price):
        with pytest.raises(InvalidParameterError):
            valuation.set_price("farmland", price)

    def test_custom_table(self, estate_world):
        valuation = PropertyValuationService(estate_world, PriceTable({"farmland": 10}))
        assert valuation.get_total_property_value("rich").total == 40


class TestEstate:
    """Tests for EstateValuationService."""

    def test_summed(self, valuation, estate_world):
        estate = EstateValuationService(estate_world, valuation).get_estate_valuation("rich")
        assert estate.cash == 100
        assert estate.property == 1600
        assert estate.total == 1700
        assert estate.property_breakdown["farmland"].value == 1000
        assert estate.source == "summed"

    def test_invalid_cash_is_zero(self, valuation, estate_world):
        estate = EstateValuationService(estate_world, valuation).get_estate_valuation("broke")
        assert estate.cash == 0
        assert estate.total == 0

    def test_no_character(self, valuation, estate_world):
        estate = EstateValuationService(estate_world, valuation).get_estate_valuation("nobody")
        assert (estate.cash, estate.property, estate.total) == (0, 0, 0)
        assert estate.property_breakdown == {}
        assert estate.source == "no-character"


class TestAnimalFertility:
    """Tests for AnimalFertilityCalculator."""

    @pytest.mark.parametrize(
        "farmland, expected",
        [(0, 1.0), (4, 1.0), (5, 1.1), (10, 1.25), (20, 1.5), (35, 1.8), (50, 2.2), (500, 2.2)],
    )
    def test_tiers(self, farmland, expected):
        world = InMemoryWorld(characters=[{"id": "c", "propertyDetails": {"farmland": farmland}}])
        assert AnimalFertilityCalculator(world).get_animal_fertility_factor("c") == expected

    def test_unknown_character(self):
        assert AnimalFertilityCalculator(InMemoryWorld()).get_animal_fertility_factor("x") == 1.0

    def test_no_properties(self, estate_world):
        assert AnimalFertilityCalculator(estate_world).get_animal_fertility_factor("landless") == 1.0

    def test_cap(self):
        world = InMemoryWorld(characters=[{"id": "c", "propertyDetails": {"farmland": 100}}])
        calculator = AnimalFertilityCalculator(
            world, tiers=(FertilityTier(1, 9.0),), max_multiplier=5.0
        )
        assert calculator.get_animal_fertility_factor("c") == 5.0
