"""Share normalisation functions.

Turns loosely typed share input into a validated distribution whose
fractions sum to 1.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Mapping, Sequence
from typing import Any, Union

from heirloom.domain.models.inheritance import ShareMap

# A mapping keyed by heir id, or a sequence of records such as
# {"heirId": "c1", "share": 3} / {"id": "c1", "value": 3}
SharesInput = Union[Mapping[str, Any], Sequence[Mapping[str, Any]], None]


def _to_number(value: Any) -> float | None:
    """Parse a share value; None when it is not a finite number."""
    if value is None:
        return None
    try:
        n = float(value)
    except (TypeError, ValueError):
        return None
    return n if math.isfinite(n) else None


def _first_present(row: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = row.get(key)
        if value is not None:
            return value
    return None


def coerce_to_map(shares: SharesInput) -> dict[str, Any]:
    """Convert either share input form into a mapping keyed by heir id.

    Records without a string identifier are skipped. Any other input
    yields an empty mapping.
    """
    if isinstance(shares, Mapping):
        return dict(shares)

    if isinstance(shares, Sequence) and not isinstance(shares, (str, bytes)):
        out: dict[str, Any] = {}
        for row in shares:
            if not isinstance(row, Mapping):
                continue
            heir_id = _first_present(row, "heirId", "id")
            if isinstance(heir_id, str):
                out[heir_id] = _first_present(row, "share", "value")
        return out

    return {}


def normalize_shares(raw: Mapping[Any, Any] | None) -> tuple[ShareMap, float]:
    """Normalize raw shares to fractions summing to 1.

    Entries with an empty key, a value that is not a finite number, or a
    value <= 0 are dropped first.

    Args:
        raw: Heir id -> share weight, in any numeric-ish form

    Returns:
        Tuple of (normalized map, sum of the kept raw weights). Both are
        empty/0 when no valid weight remains. The reported sum is capped at
        the largest finite float; every fraction is finite and > 0.
    """
    cleaned: dict[str, float] = {}

    for key, value in (raw or {}).items():
        n = _to_number(value)
        if not key or n is None or n <= 0:
            continue
        cleaned[str(key)] = n

    if not cleaned:
        return {}, 0.0

    total = sum(cleaned.values())
    if not math.isfinite(total):
        # Sum overflowed: divide by the largest weight first so the divisor stays finite
        largest = max(cleaned.values())
        cleaned = {key: n / largest for key, n in cleaned.items()}
        divisor = sum(cleaned.values())
        total = sys.float_info.max
    else:
        divisor = total

    fractions = {key: n / divisor for key, n in cleaned.items()}
    # Weights negligible next to the others underflow to 0
    return {key: f for key, f in fractions.items() if f > 0}, total


def equal_split(heir_ids: Sequence[str]) -> tuple[ShareMap, float]:
    """Give every heir 1/N of the estate."""
    if not heir_ids:
        return {}, 0.0
    share_per_heir = 1 / len(heir_ids)
    return {heir_id: share_per_heir for heir_id in heir_ids}, share_per_heir
