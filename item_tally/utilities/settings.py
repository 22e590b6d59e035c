# item_tally/utilities/settings.py
"""
Runtime settings for the report.

Defaults describe the "Item Name" / "Quantity" export the tool was built for;
every value may be overridden through ``ITEM_TALLY_*`` environment variables.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

ENV_PREFIX = "ITEM_TALLY_"

DEFAULT_DETAIL_COLUMNS: Tuple[str, ...] = ("Date", "Party", "Location", "Rate")


@dataclass(frozen=True)
class ReportSettings:
    item_column: str = "Item Name"
    quantity_column: str = "Quantity"
    # pass-through columns shown under an expanded item, when the file has them
    detail_columns: Tuple[str, ...] = DEFAULT_DETAIL_COLUMNS
    delimiter: str = ","
    encoding: str = "utf-8-sig"
    log_file: Path = Path("logs") / "item_tally.log"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ReportSettings":
        env = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}

        def _get(key: str) -> Optional[str]:
            raw = env.get(ENV_PREFIX + key)
            if raw is None or not raw.strip():
                return None
            return raw.strip()

        if (v := _get("ITEM_COLUMN")) is not None:
            overrides["item_column"] = v
        if (v := _get("QUANTITY_COLUMN")) is not None:
            overrides["quantity_column"] = v
        if (v := _get("DETAIL_COLUMNS")) is not None:
            overrides["detail_columns"] = tuple(
                c.strip() for c in v.split(",") if c.strip()
            )
        if (v := _get("DELIMITER")) is not None:
            overrides["delimiter"] = "\t" if v in ("\\t", "tab") else v
        if (v := _get("ENCODING")) is not None:
            overrides["encoding"] = v
        if (v := _get("LOG_FILE")) is not None:
            overrides["log_file"] = Path(v)
        if (v := _get("LOG_LEVEL")) is not None:
            overrides["log_level"] = v.upper()
        return cls(**overrides)

    def with_overrides(self, **changes: Any) -> "ReportSettings":
        return replace(self, **changes)
