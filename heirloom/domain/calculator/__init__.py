"""Pure share and formatting calculators."""

from .formatting import format_value, round_to
from .shares import SharesInput, coerce_to_map, equal_split, normalize_shares

__all__ = [
    "SharesInput",
    "coerce_to_map",
    "equal_split",
    "normalize_shares",
    "format_value",
    "round_to",
]
