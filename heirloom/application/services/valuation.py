"""Property and estate valuation services.

Property units come from the character snapshot; unit prices come from a
price table owned by the valuation service instance. The estate of a
character is its liquid cash plus its total property value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from heirloom.application.ports import CharacterRepository
from heirloom.core.exceptions import InvalidParameterError
from heirloom.core.logging import get_logger
from heirloom.domain.models import (
    EstateValuation,
    PropertyTotal,
    PropertyValue,
    ValuationOptions,
)

log = get_logger(__name__)

BASE_PROPERTY_PRICES: dict[str, float] = {
    "farmland": 250,
    "vineyards": 360,
    "orchards": 420,
    "prime_farmland": 2700,
    "cattle": 300,
    "pig": 120,
    "sheep": 180,
    "goat": 150,
}


@dataclass
class PriceTable:
    """Unit price per property kind."""
    prices: dict[str, float] = field(default_factory=lambda: dict(BASE_PROPERTY_PRICES))

    def set_price(self, property_key: str, unit_price: float) -> None:
        if not isinstance(unit_price, (int, float)) or not math.isfinite(unit_price) or unit_price < 0:
            raise InvalidParameterError("unit_price", unit_price, "must be a finite number >= 0")
        self.prices[property_key] = unit_price


class PropertyValuationService:
    """Values the property holdings of characters."""

    def __init__(self, characters: CharacterRepository, price_table: PriceTable | None = None):
        self.characters = characters
        self.price_table = price_table or PriceTable()

    def set_price(self, property_key: str, unit_price: float) -> None:
        self.price_table.set_price(property_key, unit_price)
        log.info("property_price_set", property_key=property_key, unit_price=unit_price)

    def set_prices(self, price_map: dict[str, float]) -> None:
        for property_key, unit_price in price_map.items():
            self.set_price(property_key, unit_price)

    def get_property_value(
        self,
        character_id: str,
        property_key: str,
        options: ValuationOptions | None = None,
    ) -> PropertyValue:
        """Value one property kind: units x unit price x multiplier.

        ``options.prices`` replaces the price table for this call. A missing
        or non-finite ``options.multiplier`` means 1.
        """
        options = options or ValuationOptions()
        prices = options.prices if options.prices is not None else self.price_table.prices
        multiplier = options.multiplier
        if multiplier is None or not math.isfinite(multiplier):
            multiplier = 1.0

        char = self.characters.get_character(character_id)
        if char is None:
            return PropertyValue(property_key=property_key, multiplier=multiplier, source="no-character")

        details = char.property_details
        if details is None:
            return PropertyValue(property_key=property_key, multiplier=multiplier, source="no-properties")

        units = details.get(property_key, 0)
        unit_price = prices.get(property_key, 0)

        return PropertyValue(
            property_key=property_key,
            units=units,
            unit_price=unit_price,
            multiplier=multiplier,
            value=units * unit_price * multiplier,
            source="base-price-table" if unit_price else "unknown-property",
        )

    # Shorter alias, same signature and result
    get_property = get_property_value

    def get_total_property_value(
        self, character_id: str, options: ValuationOptions | None = None
    ) -> PropertyTotal:
        char = self.characters.get_character(character_id)
        if char is None or char.property_details is None:
            return PropertyTotal(source="no-properties")

        breakdown = {
            key: self.get_property_value(character_id, key, options)
            for key in char.property_details
        }
        total = sum(info.value for info in breakdown.values())
        return PropertyTotal(total=total, breakdown=breakdown, source="summed")


class EstateValuationService:
    """Estate = liquid cash + total property value."""

    def __init__(self, characters: CharacterRepository, property_valuation: PropertyValuationService):
        self.characters = characters
        self.property_valuation = property_valuation

    def get_estate_valuation(
        self, character_id: str, options: ValuationOptions | None = None
    ) -> EstateValuation:
        char = self.characters.get_character(character_id)
        if char is None:
            return EstateValuation(source="no-character")

        property_total = self.property_valuation.get_total_property_value(character_id, options)
        return EstateValuation(
            cash=char.cash,
            property=property_total.total,
            total=char.cash + property_total.total,
            property_breakdown=property_total.breakdown,
            source="summed",
        )


@dataclass(frozen=True)
class FertilityTier:
    """Multiplier applied from ``min_farmland`` units of farmland upward."""
    min_farmland: float
    multiplier: float


DEFAULT_FERTILITY_TIERS: tuple[FertilityTier, ...] = (
    FertilityTier(50, 2.2),
    FertilityTier(35, 1.8),
    FertilityTier(20, 1.5),
    FertilityTier(10, 1.25),
    FertilityTier(5, 1.1),
)


class AnimalFertilityCalculator:
    """Tiered animal fertility multiplier driven by farmland holdings."""

    def __init__(
        self,
        characters: CharacterRepository,
        tiers: tuple[FertilityTier, ...] = DEFAULT_FERTILITY_TIERS,
        max_multiplier: float = 5.0,
    ):
        self.characters = characters
        # Highest threshold first so the first match is the best tier
        self.tiers = tuple(sorted(tiers, key=lambda t: t.min_farmland, reverse=True))
        self.max_multiplier = max_multiplier

    def get_animal_fertility_factor(self, character_id: str) -> float:
        char = self.characters.get_character(character_id)
        if char is None:
            return 1.0

        farmland = (char.property_details or {}).get("farmland", 0)

        factor = 1.0
        for tier in self.tiers:
            if farmland >= tier.min_farmland:
                factor = tier.multiplier
                break

        return min(factor, self.max_multiplier)
