"""Share override persistence.

Stores, reads and clears the versioned share override kept in a character
flag. The flag store has no delete primitive: clearing writes an empty
distribution, and an empty stored distribution reads as absent.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any, Callable

from pydantic import ValidationError

from heirloom.application.ports import FlagReader, FlagWriter
from heirloom.application.services.heirs import HeirResolver
from heirloom.core.exceptions import FlagStoreUnavailableError
from heirloom.core.logging import get_logger
from heirloom.core.settings import SHARES_FLAG_NAME
from heirloom.domain.calculator.shares import SharesInput, coerce_to_map, normalize_shares
from heirloom.domain.models import (
    STORED_SHARES_VERSION,
    ClearResult,
    SetSharesOptions,
    ShareWriteResult,
    StoredShareRecord,
    StoredShares,
)

log = get_logger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class ShareStore:
    """Reads and writes share overrides through the character flag store."""

    def __init__(
        self,
        heir_resolver: HeirResolver,
        reader: FlagReader | None = None,
        writer: FlagWriter | None = None,
        *,
        flag_name: str = SHARES_FLAG_NAME,
        default_options: SetSharesOptions | None = None,
        clock: Callable[[], int] = _now_ms,
    ):
        self.heir_resolver = heir_resolver
        self.reader = reader
        self.writer = writer
        self.flag_name = flag_name
        self.default_options = default_options or SetSharesOptions()
        self.clock = clock

    @property
    def source_tag(self) -> str:
        return f"stored:{self.flag_name}"

    def get_stored_shares(self, deceased_id: str) -> StoredShares | None:
        """Return the usable stored override, or None.

        Missing reader, missing payload, malformed payload, wrong version and
        an empty (cleared) distribution all read as None.
        """
        if self.reader is None:
            return None

        payload = self.reader.read_character_flag(deceased_id, self.flag_name)
        # Some hosts wrap flag values as {"data": payload}
        if isinstance(payload, Mapping) and "data" in payload and "v" not in payload:
            payload = payload["data"]
        if not payload:
            return None

        try:
            record = StoredShareRecord.model_validate(payload)
        except ValidationError as e:
            log.warning(
                "stored_shares_ignored",
                deceased_id=deceased_id,
                reason="malformed",
                errors=e.error_count(),
            )
            return None

        if record.version != STORED_SHARES_VERSION:
            log.warning(
                "stored_shares_ignored",
                deceased_id=deceased_id,
                reason="version",
                version=record.version,
            )
            return None

        if not record.shares:
            return None

        return StoredShares(shares=record.shares, set_at=record.set_at, source=self.source_tag)

    def set_shares(
        self,
        deceased_id: str,
        shares: SharesInput,
        options: SetSharesOptions | None = None,
    ) -> ShareWriteResult:
        """Normalize and persist an override distribution.

        Raises:
            FlagStoreUnavailableError: No flag writer is available.
        """
        options = options or self.default_options
        if self.writer is None:
            raise FlagStoreUnavailableError("set_shares")

        raw: dict[str, Any] = coerce_to_map(shares)

        if options.restrict_to_eligible:
            eligible = set(self.heir_resolver.resolve_heirs(deceased_id).heir_ids)
            dropped = [heir_id for heir_id in raw if heir_id not in eligible]
            raw = {heir_id: value for heir_id, value in raw.items() if heir_id in eligible}
            if dropped:
                log.debug("ineligible_shares_dropped", deceased_id=deceased_id, dropped=dropped)

        normalized, _ = normalize_shares(raw)

        record = StoredShareRecord(
            version=STORED_SHARES_VERSION, set_at=self.clock(), shares=normalized
        )
        self.writer.write_character_flag(deceased_id, self.flag_name, record.to_payload())

        log.info("shares_stored", deceased_id=deceased_id, heir_count=len(normalized))
        return ShareWriteResult(deceased_id=deceased_id, shares=normalized, source=self.source_tag)

    def clear_shares(self, deceased_id: str) -> ClearResult:
        """Overwrite the override with an empty distribution (best effort)."""
        if self.writer is None:
            log.warning("shares_clear_skipped", deceased_id=deceased_id, reason="no-writer")
            return ClearResult(deceased_id=deceased_id, cleared=False, source="no-flag-writer")

        record = StoredShareRecord(
            version=STORED_SHARES_VERSION, cleared_at=self.clock(), shares={}
        )
        self.writer.write_character_flag(deceased_id, self.flag_name, record.to_payload())

        log.info("shares_cleared", deceased_id=deceased_id)
        return ClearResult(
            deceased_id=deceased_id, cleared=True, source=f"overwritten-empty:{self.flag_name}"
        )
