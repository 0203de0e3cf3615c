"""Inheritance data models.

Option records for each operation, the computed heir set and share
distribution, the persisted share override and the per-heir preview.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from .character import CharacterSnapshot
from .estate import EstateValuation, ValuationOptions

# Finite, strictly positive fraction
ShareValue = Annotated[float, Field(gt=0, allow_inf_nan=False)]
ShareMap = dict[str, ShareValue]

MAX_ROUND_PLACES = 15

STORED_SHARES_VERSION = 1


# --- Options ---

class HeirOptions(BaseModel):
    """Which heir sources to collect."""

    include_designated: bool = Field(default=True, description="Collect the designated heir")
    include_children: bool = Field(default=True, description="Collect living children")
    include_characters: bool = Field(
        default=False, description="Also resolve full character snapshots"
    )


class SetSharesOptions(BaseModel):
    """Options for storing an override distribution."""

    restrict_to_eligible: bool = Field(
        default=True, description="Silently drop ids that are not eligible heirs"
    )


class DisplayFormat(BaseModel):
    """Display-only formatting of preview amounts.

    ``floor`` wins over ``round`` when both are set.
    """

    floor: bool = Field(default=False, description="Truncate toward zero")
    round: int | None = Field(
        None, ge=0, le=MAX_ROUND_PLACES, description="Decimal places to round to"
    )


class PreviewOptions(ValuationOptions):
    """Preview options; valuation overrides pass through to the estate."""

    include_heir_characters: bool = Field(
        default=False, description="Attach resolved heir snapshots"
    )
    ui: DisplayFormat | None = Field(None, description="Display formatting")

    def valuation_options(self) -> ValuationOptions:
        return ValuationOptions(prices=self.prices, multiplier=self.multiplier)


# --- Heirs & shares ---

class HeirSet(BaseModel):
    """Ordered, deduplicated eligible heirs of one character."""

    designated_heir_id: str | None = None
    heir_ids: list[str] = Field(default_factory=list)
    heirs: list[CharacterSnapshot] | None = None
    source: str = ""


class ShareResult(BaseModel):
    """Share distribution for one deceased character."""

    shares: ShareMap = Field(default_factory=dict)
    heirs: list[str] = Field(default_factory=list, description="Heir order")
    share_per_heir: float = Field(default=0.0, description="0 unless equal split")
    source: str


class StoredShareRecord(BaseModel):
    """Versioned override payload as written to the character flag."""

    version: int = Field(..., alias="v", strict=True)
    set_at: int | None = Field(None, alias="setAt")
    cleared_at: int | None = Field(None, alias="clearedAt")
    shares: ShareMap = Field(default_factory=dict)

    model_config = {"populate_by_name": True}

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class StoredShares(BaseModel):
    """A usable stored override (non-empty, current version)."""

    shares: ShareMap
    set_at: int | None = None
    source: str


class ShareWriteResult(BaseModel):
    deceased_id: str
    shares: ShareMap
    source: str


class ClearResult(BaseModel):
    deceased_id: str
    cleared: bool
    source: str


# --- Preview ---

class HeirAllocation(BaseModel):
    """One heir's part of the estate.

    ``raw_*`` amounts are authoritative; the unprefixed amounts are the
    display values after formatting.
    """

    heir_id: str
    share: float
    cash: float
    property_value: float
    total_value: float
    raw_cash: float
    raw_property_value: float
    raw_total_value: float
    heir: CharacterSnapshot | None = None


class InheritancePreview(BaseModel):
    """Per-heir breakdown of a deceased character's estate."""

    deceased_id: str
    estate: EstateValuation
    shares: ShareResult
    per_heir: list[HeirAllocation] = Field(default_factory=list)
    source: str
