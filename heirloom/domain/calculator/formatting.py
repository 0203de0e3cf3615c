"""Display formatting for preview amounts.

Only preview output goes through here; no formatted value is ever used in
further arithmetic.
"""

from __future__ import annotations

import math

from heirloom.domain.models.inheritance import DisplayFormat


def round_to(n: float, places: int) -> float:
    """Round half up (toward +inf) to ``places`` decimals.

    Values too large to scale are returned unchanged.
    """
    p = 10.0 ** places
    scaled = n * p
    if not math.isfinite(scaled):
        return n
    return math.floor(scaled + 0.5) / p


def format_value(n: float, ui: DisplayFormat | None) -> float:
    """Apply display formatting rules to one amount.

    Non-finite amounts pass through unformatted.
    """
    if ui is None or not math.isfinite(n):
        return n
    if ui.floor:
        return float(math.trunc(n))
    if ui.round is not None:
        return round_to(n, ui.round)
    return n
