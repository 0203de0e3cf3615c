"""Inheritance preview service.

Combines the estate valuation, the share distribution and the heir list into
a per-heir breakdown. Property is split by total value only; individual
assets are not allocated.
"""

from __future__ import annotations

from heirloom.application.ports import EstateValuator
from heirloom.application.services.heirs import HeirResolver
from heirloom.application.services.share_provider import ShareProvider
from heirloom.core.logging import get_logger
from heirloom.domain.calculator.formatting import format_value
from heirloom.domain.models import (
    HeirAllocation,
    HeirOptions,
    InheritancePreview,
    PreviewOptions,
)

log = get_logger(__name__)


class InheritancePreviewer:
    """Builds inheritance previews."""

    def __init__(
        self,
        estate_valuator: EstateValuator,
        share_provider: ShareProvider,
        heir_resolver: HeirResolver,
    ):
        self.estate_valuator = estate_valuator
        self.share_provider = share_provider
        self.heir_resolver = heir_resolver

    def preview(self, deceased_id: str, options: PreviewOptions | None = None) -> InheritancePreview:
        """Split the estate of ``deceased_id`` among its heirs.

        Amounts are computed from raw values. ``options.ui`` formats cash,
        property and the raw total independently, so the displayed total can
        differ from displayed cash + property.

        Args:
            deceased_id: Character whose estate is previewed
            options: Valuation overrides, heir snapshots and display format

        Returns:
            Preview with one allocation per heir, in share order
        """
        options = options or PreviewOptions()
        ui = options.ui

        estate = self.estate_valuator.get_estate_valuation(
            deceased_id, options.valuation_options()
        )
        shares_info = self.share_provider.get_shares(deceased_id)
        # Display only: shares are never recomputed from this
        heirs_info = self.heir_resolver.resolve_heirs(
            deceased_id, HeirOptions(include_characters=options.include_heir_characters)
        )
        heirs_by_id = {heir.id: heir for heir in heirs_info.heirs or []}

        per_heir = []
        for heir_id in shares_info.heirs:
            share = shares_info.shares.get(heir_id, 0.0)

            raw_cash = estate.cash * share
            raw_property = estate.property * share
            raw_total = raw_cash + raw_property

            per_heir.append(
                HeirAllocation(
                    heir_id=heir_id,
                    share=share,
                    cash=format_value(raw_cash, ui),
                    property_value=format_value(raw_property, ui),
                    total_value=format_value(raw_total, ui),
                    raw_cash=raw_cash,
                    raw_property_value=raw_property,
                    raw_total_value=raw_total,
                    heir=heirs_by_id.get(heir_id) if options.include_heir_characters else None,
                )
            )

        source = f"estate:{estate.source}|shares:{shares_info.source}|heirs:{heirs_info.source}"
        log.debug("preview_computed", deceased_id=deceased_id, heir_count=len(per_heir), source=source)

        return InheritancePreview(
            deceased_id=deceased_id,
            estate=estate,
            shares=shares_info,
            per_heir=per_heir,
            source=source,
        )
