"""Public inheritance API.

Wires every service from the host collaborators once, at construction.
"""

from __future__ import annotations

from typing import Literal

import pandas as pd

from heirloom.adapters.memory import InMemoryWorld
from heirloom.application.ports import CharacterRepository, EstateValuator, FlagReader, FlagWriter
from heirloom.application.services import (
    AnimalFertilityCalculator,
    EstateValuationService,
    HeirResolver,
    InheritancePreviewer,
    PreviewExporter,
    PriceTable,
    PropertyValuationService,
    ShareProvider,
    ShareStore,
    preview_to_frame,
)
from heirloom.core.logging import get_logger
from heirloom.core.settings import HeirloomSettings, get_settings
from heirloom.domain.calculator.shares import SharesInput
from heirloom.domain.models import (
    ClearResult,
    EstateValuation,
    HeirOptions,
    HeirSet,
    InheritancePreview,
    PreviewOptions,
    PropertyTotal,
    PropertyValue,
    SetSharesOptions,
    ShareResult,
    ShareWriteResult,
    StoredShares,
    ValuationOptions,
)

log = get_logger(__name__)


class InheritanceAPI:
    """Heirs, shares, previews and valuation for one game state."""

    def __init__(
        self,
        characters: CharacterRepository,
        flag_reader: FlagReader | None = None,
        flag_writer: FlagWriter | None = None,
        *,
        estate_valuator: EstateValuator | None = None,
        price_table: PriceTable | None = None,
        settings: HeirloomSettings | None = None,
    ):
        settings = settings or get_settings()

        self.property_valuation = PropertyValuationService(characters, price_table)
        self.fertility = AnimalFertilityCalculator(
            characters, max_multiplier=settings.max_fertility_multiplier
        )
        self.estate_valuator = estate_valuator or EstateValuationService(
            characters, self.property_valuation
        )
        self.heir_resolver = HeirResolver(characters)
        self.share_store = ShareStore(
            self.heir_resolver,
            flag_reader,
            flag_writer,
            flag_name=settings.shares_flag_name,
            default_options=SetSharesOptions(restrict_to_eligible=settings.restrict_to_eligible),
        )
        self.share_provider = ShareProvider(self.share_store, self.heir_resolver)
        self.previewer = InheritancePreviewer(
            self.estate_valuator, self.share_provider, self.heir_resolver
        )
        self.exporter = PreviewExporter(settings.export_dir)
        log.debug("inheritance_api_initialized", flag_name=settings.shares_flag_name)

    @classmethod
    def from_world(
        cls, world: InMemoryWorld, settings: HeirloomSettings | None = None
    ) -> "InheritanceAPI":
        return cls(world, world, world, settings=settings)

    # --- Heirs & shares ---

    def get_eligible_heirs(self, character_id: str, options: HeirOptions | None = None) -> HeirSet:
        return self.heir_resolver.resolve_heirs(character_id, options)

    def get_inheritance_shares(self, deceased_id: str) -> ShareResult:
        return self.share_provider.get_shares(deceased_id)

    def get_stored_inheritance_shares(self, deceased_id: str) -> StoredShares | None:
        return self.share_store.get_stored_shares(deceased_id)

    def preview_inheritance(
        self, deceased_id: str, options: PreviewOptions | None = None
    ) -> InheritancePreview:
        return self.previewer.preview(deceased_id, options)

    def set_inheritance_shares(
        self, deceased_id: str, shares: SharesInput, options: SetSharesOptions | None = None
    ) -> ShareWriteResult:
        return self.share_store.set_shares(deceased_id, shares, options)

    def clear_inheritance_shares(self, deceased_id: str) -> ClearResult:
        return self.share_store.clear_shares(deceased_id)

    # --- Export ---

    def preview_frame(self, deceased_id: str, options: PreviewOptions | None = None) -> pd.DataFrame:
        """Preview as a table, one row per heir."""
        return preview_to_frame(self.previewer.preview(deceased_id, options))

    def export_preview(
        self,
        deceased_id: str,
        fmt: Literal["json", "csv"] = "json",
        options: PreviewOptions | None = None,
    ) -> str:
        """Save a preview under the configured export directory and return its path."""
        return self.exporter.save_preview(self.previewer.preview(deceased_id, options), fmt=fmt)

    # --- Valuation ---

    def get_property_value(
        self, character_id: str, property_key: str, options: ValuationOptions | None = None
    ) -> PropertyValue:
        return self.property_valuation.get_property_value(character_id, property_key, options)

    get_property = get_property_value

    def get_total_property_value(
        self, character_id: str, options: ValuationOptions | None = None
    ) -> PropertyTotal:
        return self.property_valuation.get_total_property_value(character_id, options)

    def set_property_price(self, property_key: str, unit_price: float) -> None:
        self.property_valuation.set_price(property_key, unit_price)

    def set_property_prices(self, price_map: dict[str, float]) -> None:
        self.property_valuation.set_prices(price_map)

    def get_estate_value(
        self, character_id: str, options: ValuationOptions | None = None
    ) -> EstateValuation:
        return self.estate_valuator.get_estate_valuation(character_id, options)

    def get_animal_fertility_factor(self, character_id: str) -> float:
        return self.fertility.get_animal_fertility_factor(character_id)
