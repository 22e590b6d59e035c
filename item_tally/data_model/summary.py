from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Summary:
    total_quantity: Decimal
    total_amount: Decimal
