"""Application services."""

from .exporter import PreviewExporter, preview_to_frame
from .heirs import HeirResolver
from .previewer import InheritancePreviewer
from .share_provider import ShareProvider
from .share_store import ShareStore
from .valuation import (
    AnimalFertilityCalculator,
    EstateValuationService,
    FertilityTier,
    PriceTable,
    PropertyValuationService,
)

__all__ = [
    "HeirResolver",
    "ShareStore",
    "ShareProvider",
    "InheritancePreviewer",
    "PreviewExporter",
    "preview_to_frame",
    "PriceTable",
    "PropertyValuationService",
    "EstateValuationService",
    "AnimalFertilityCalculator",
    "FertilityTier",
]
