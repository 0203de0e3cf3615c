"""Data models for heirloom."""

from .character import CharacterSnapshot
from .estate import EstateValuation, PropertyTotal, PropertyValue, ValuationOptions
from .inheritance import (
    MAX_ROUND_PLACES,
    STORED_SHARES_VERSION,
    ClearResult,
    DisplayFormat,
    HeirAllocation,
    HeirOptions,
    HeirSet,
    InheritancePreview,
    PreviewOptions,
    SetSharesOptions,
    ShareMap,
    ShareResult,
    ShareWriteResult,
    StoredShareRecord,
    StoredShares,
)

__all__ = [
    "CharacterSnapshot",
    "EstateValuation",
    "PropertyTotal",
    "PropertyValue",
    "ValuationOptions",
    "MAX_ROUND_PLACES",
    "STORED_SHARES_VERSION",
    "ClearResult",
    "DisplayFormat",
    "HeirAllocation",
    "HeirOptions",
    "HeirSet",
    "InheritancePreview",
    "PreviewOptions",
    "SetSharesOptions",
    "ShareMap",
    "ShareResult",
    "ShareWriteResult",
    "StoredShareRecord",
    "StoredShares",
]
