"""Export services for inheritance previews.

Flattens previews into tables and saves them for inspection.
"""

from __future__ import annotations

import json
import os
from datetime import datetime
from typing import Literal

import pandas as pd

from heirloom.core.logging import get_logger
from heirloom.domain.models import InheritancePreview

log = get_logger(__name__)

PREVIEW_COLUMNS = [
    "heir_id",
    "share",
    "cash",
    "property_value",
    "total_value",
    "raw_cash",
    "raw_property_value",
    "raw_total_value",
]


def preview_to_frame(preview: InheritancePreview) -> pd.DataFrame:
    """One row per heir, in share order."""
    rows = [allocation.model_dump(include=set(PREVIEW_COLUMNS)) for allocation in preview.per_heir]
    return pd.DataFrame(rows, columns=PREVIEW_COLUMNS)


class PreviewExporter:
    """Saves inheritance previews as JSON or CSV files."""

    def __init__(self, output_dir: str = "results"):
        self.output_dir = output_dir

    def _ensure_dir(self) -> None:
        if not os.path.exists(self.output_dir):
            os.makedirs(self.output_dir)
            log.info("created_output_directory", path=self.output_dir)

    def save_preview(
        self,
        preview: InheritancePreview,
        fmt: Literal["json", "csv"] = "json",
        prefix: str = "inheritance",
    ) -> str:
        """Save one preview.

        Args:
            preview: Preview to save
            fmt: "json" keeps the whole preview, "csv" the per-heir table
            prefix: Filename prefix

        Returns:
            Path to the saved file.
        """
        self._ensure_dir()
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = os.path.join(self.output_dir, f"{prefix}_{preview.deceased_id}_{timestamp}.{fmt}")

        try:
            if fmt == "csv":
                preview_to_frame(preview).to_csv(filepath, index=False)
            else:
                payload = {
                    "metadata": {
                        "timestamp": datetime.now().isoformat(),
                        "heir_count": len(preview.per_heir),
                    },
                    "preview": preview.model_dump(mode="json"),
                }
                with open(filepath, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            log.error("preview_save_failed", path=filepath, error=str(e))
            raise

        log.info("preview_saved", path=filepath, fmt=fmt, heir_count=len(preview.per_heir))
        return filepath
