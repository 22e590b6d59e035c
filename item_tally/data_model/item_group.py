from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from item_tally.data_model.raw_record import RawRecord


@dataclass(frozen=True)
class ItemGroup:
    """
    Represents the drill-down of one aggregated item: every raw row whose trimmed
    item name equals ``name``, in file order.
    ``total_quantity`` uses the same coercion as the aggregator, so it always equals
    the matching ``AggregatedItem.total_quantity``.
    """
    name: str
    total_quantity: Decimal
    rows: Tuple[RawRecord, ...]  # immutable tuple for safety
