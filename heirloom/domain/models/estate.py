"""Valuation data models.

Property value lines, property totals and the estate valuation consumed by
the inheritance preview.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValuationOptions(BaseModel):
    """Per-call valuation overrides."""

    prices: dict[str, float] | None = Field(
        None, description="Replaces the price table for this call"
    )
    multiplier: float | None = Field(
        None, description="Value multiplier; ignored unless finite (default 1)"
    )


class PropertyValue(BaseModel):
    """Valuation of one property kind held by a character."""

    property_key: str
    units: float = 0.0
    unit_price: float = 0.0
    multiplier: float = 1.0
    value: float = 0.0
    source: str


class PropertyTotal(BaseModel):
    """Sum of every property line of a character."""

    total: float = 0.0
    breakdown: dict[str, PropertyValue] = Field(default_factory=dict)
    source: str


class EstateValuation(BaseModel):
    """Estate of a character: liquid cash plus total property value."""

    cash: float = Field(default=0.0, description="Liquid cash")
    property: float = Field(default=0.0, description="Total property value")
    total: float = Field(default=0.0, description="cash + property")
    property_breakdown: dict[str, PropertyValue] = Field(default_factory=dict)
    source: str = Field(..., description="Provenance tag")
