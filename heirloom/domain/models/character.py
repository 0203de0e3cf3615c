"""Character snapshot model.

A snapshot is the read-only view of one game character as handed over by the
host. Hosts use camelCase keys (``fatherId``, ``propertyDetails``); both
spellings validate.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class CharacterSnapshot(BaseModel):
    """Immutable character view used for heir and estate computations."""

    # Identity
    id: str = Field(..., description="Unique character identifier")

    # Wealth
    cash: float = Field(default=0.0, description="Liquid cash")
    property_details: dict[str, float] | None = Field(
        None, description="Property kind -> unit count"
    )

    # Lifecycle
    is_dead: bool = Field(default=False, description="Character has died")
    age: float = Field(default=0.0, description="Age in years")

    # Family
    father_id: str | None = Field(None, description="Father identifier")
    mother_id: str | None = Field(None, description="Mother identifier")
    parent_id: str | None = Field(None, description="Generic parent identifier")
    designated_heir_id: str | None = Field(
        None,
        validation_alias=AliasChoices(
            "designated_heir_id", "designatedHeirId", "flagDesignatedHeirId"
        ),
        description="Explicitly named heir",
    )

    model_config = {
        "extra": "allow",
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("cash", mode="before")
    @classmethod
    def coerce_cash(cls, v: Any) -> float:
        """Anything that is not a finite number counts as no cash."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return 0.0
        return float(v) if math.isfinite(v) else 0.0

    @field_validator("age", mode="before")
    @classmethod
    def coerce_age(cls, v: Any) -> float:
        return 0.0 if v is None else v

    def is_child_of(self, character_id: str) -> bool:
        """True when any parent link points at ``character_id``."""
        return character_id in (self.father_id, self.mother_id, self.parent_id)
