# item_tally/controllers/summary.py
from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from item_tally.controllers.rate_store import RateStore
from item_tally.data_model import AggregatedItem, Summary
from item_tally.utilities.converters_scalar import ZERO


def line_amount(item: AggregatedItem, rate: Decimal) -> Decimal:
    return item.total_quantity * rate


def compute_summary(items: Sequence[AggregatedItem], rates: RateStore) -> Summary:
    """Totals for the report footer; recomputed from scratch on every call.

    ``total_amount`` multiplies each row's quantity by the rate stored at the
    row's position (unset rates count as 0). No rounding is applied.
    """
    total_quantity = sum((it.total_quantity for it in items), ZERO)
    total_amount = sum(
        (line_amount(it, rates.get_rate(i)) for i, it in enumerate(items)), ZERO
    )
    return Summary(total_quantity=total_quantity, total_amount=total_amount)
