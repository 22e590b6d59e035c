# item_tally/controllers/aggregator.py
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Iterable, List

from item_tally.data_model import AggregatedItem, RawRecord
from item_tally.utilities import to_decimal
from item_tally.utilities.converters_scalar import ZERO

log = logging.getLogger(__name__)


def coerce_quantity(text: str) -> Decimal:
    """
    Best-effort quantity: blank → 0, "5" → 5, " 2.5 " → 2.5, "abc" → 0.

    Never raises. A cell that is not a finite number counts as zero so one bad
    row cannot block the report.
    """
    try:
        return to_decimal(text if text is not None else "")
    except ValueError:
        log.debug("Quantity %r is not numeric; counting it as 0", text)
        return ZERO


def record_quantity(record: RawRecord) -> Decimal:
    return coerce_quantity(record.quantity_text)


def aggregate_records(records: Iterable[RawRecord]) -> List[AggregatedItem]:
    """Fold raw rows into per-item quantity totals.

    Rows are grouped by their trimmed item name, so ``"Rice"`` and ``" Rice "``
    are one item. Rows with a blank name are dropped and contribute nothing.
    Output order is the order in which each name first appears.

    Parameters
    ----------
    records : Iterable[RawRecord]
        Parsed rows in file order.

    Returns
    -------
    List[AggregatedItem]
        One entry per distinct name. Empty input gives an empty list.
    """
    # dicts keep insertion order, which is exactly first-seen order
    totals: Dict[str, Decimal] = {}
    skipped = 0
    for r in records:
        name = r.item_name
        if not name:
            skipped += 1
            continue
        totals[name] = totals.get(name, ZERO) + record_quantity(r)

    if skipped:
        log.debug("Skipped %d rows without an item name", skipped)
    return [AggregatedItem(name=n, total_quantity=q) for n, q in totals.items()]
