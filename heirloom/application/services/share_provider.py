"""Share distribution service.

Uses a stored override when one exists, otherwise splits the estate equally
among the eligible heirs.
"""

from __future__ import annotations

from heirloom.application.services.heirs import HeirResolver
from heirloom.application.services.share_store import ShareStore
from heirloom.core.logging import get_logger
from heirloom.domain.calculator.shares import equal_split
from heirloom.domain.models import ShareResult

log = get_logger(__name__)


class ShareProvider:
    """Decides the share distribution of a deceased character."""

    def __init__(self, store: ShareStore, heir_resolver: HeirResolver):
        self.store = store
        self.heir_resolver = heir_resolver

    def get_shares(self, deceased_id: str) -> ShareResult:
        stored = self.store.get_stored_shares(deceased_id)
        if stored is not None:
            return ShareResult(
                shares=dict(stored.shares),
                heirs=list(stored.shares),
                share_per_heir=0.0,
                source=stored.source,
            )

        heir_ids = self.heir_resolver.resolve_heirs(deceased_id).heir_ids
        if not heir_ids:
            log.debug("no_heirs_found", deceased_id=deceased_id)
            return ShareResult(source="no-heirs")

        shares, share_per_heir = equal_split(heir_ids)
        return ShareResult(
            shares=shares,
            heirs=list(heir_ids),
            share_per_heir=share_per_heir,
            source="equal-split",
        )
