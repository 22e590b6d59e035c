from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class AggregatedItem:
    name: str  # trimmed item name, unique within one aggregation
    total_quantity: Decimal
