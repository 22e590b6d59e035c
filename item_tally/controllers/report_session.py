# item_tally/controllers/report_session.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import List, NamedTuple, Optional, Sequence, Tuple

from item_tally.controllers.aggregator import aggregate_records
from item_tally.controllers.drilldown import DrillDownIndex, ExpansionState
from item_tally.controllers.rate_store import RateInput, RateStore
from item_tally.controllers.row_parser import load_records
from item_tally.controllers.summary import compute_summary, line_amount
from item_tally.data_model import AggregatedItem, ParseFailure, RawRecord, Summary
from item_tally.utilities import ReportSettings, title_from_filename

log = logging.getLogger(__name__)


class ReportRow(NamedTuple):
    serial: int  # 1-based, as printed in the S.No. column
    name: str
    quantity: Decimal
    rate: str  # "" when the user has not entered a rate
    amount: Decimal


@dataclass
class ReportSession:
    """
    Holds everything derived from the currently loaded file.

    Responsibilities:
    • Load a file and rebuild records, aggregation and drill-down index in one step.
    • Own the rate store and expansion state, and reset both on every new load.
    • Keep the previous report intact when a load fails.
    """

    settings: ReportSettings = field(default_factory=ReportSettings)

    source_path: Optional[Path] = None
    records: List[RawRecord] = field(default_factory=list)
    items: List[AggregatedItem] = field(default_factory=list)
    rates: RateStore = field(default_factory=RateStore)
    expansion: ExpansionState = field(default_factory=ExpansionState)
    index: DrillDownIndex = field(default_factory=lambda: DrillDownIndex(()))

    def load(self, path: Path | str) -> bool:
        """Parse ``path`` and replace the report. Returns False (state untouched) on failure."""
        path = Path(path)
        try:
            records = load_records(path, self.settings)
        except ParseFailure as e:
            log.error("Error parsing %s: %s", path, e.reason, exc_info=e.cause)
            return False
        self.load_records(records, source_path=path)
        return True

    def load_records(
        self, records: Sequence[RawRecord], *, source_path: Optional[Path] = None
    ) -> None:
        """Replace all state with a report built from ``records``."""
        self.records = list(records)
        self.items = aggregate_records(self.records)
        self.index = DrillDownIndex(self.records)
        # positions now refer to different items
        self.rates.clear()
        self.expansion.clear()
        self.source_path = source_path
        log.info(
            "Loaded %d rows → %d items%s",
            len(self.records),
            len(self.items),
            f" from {source_path}" if source_path else "",
        )

    @property
    def loaded(self) -> bool:
        return self.source_path is not None or bool(self.records)

    @property
    def title(self) -> str:
        if self.source_path is None:
            return ""
        return title_from_filename(self.source_path.name)

    # --- rates ---

    def set_rate(self, index: int, raw_value: RateInput) -> bool:
        if not 0 <= index < len(self.items):
            log.debug("Ignoring rate for row %d: only %d rows", index, len(self.items))
            return False
        return self.rates.set_rate(index, raw_value)

    # --- drill-down ---

    def toggle(self, name: str) -> bool:
        return self.expansion.toggle(name)

    def is_expanded(self, name: str) -> bool:
        return self.expansion.is_expanded(name)

    def rows_for(self, name: str) -> Tuple[RawRecord, ...]:
        return self.index.rows_for(name)

    def detail_columns(self) -> List[str]:
        """Configured drill-down columns that the loaded file actually has."""
        present = set()
        for r in self.records:
            present.update(r.fields)
        return [c for c in self.settings.detail_columns if c in present]

    # --- derived values ---

    @property
    def summary(self) -> Summary:
        return compute_summary(self.items, self.rates)

    def rows(self) -> List[ReportRow]:
        return [
            ReportRow(
                serial=i + 1,
                name=it.name,
                quantity=it.total_quantity,
                rate=self.rates.display_value(i),
                amount=line_amount(it, self.rates.get_rate(i)),
            )
            for i, it in enumerate(self.items)
        ]
