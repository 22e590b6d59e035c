# item_tally/controllers/drilldown.py
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple

from item_tally.controllers.aggregator import record_quantity
from item_tally.data_model import ItemGroup, RawRecord
from item_tally.utilities.converters_scalar import ZERO

log = logging.getLogger(__name__)


class DrillDownIndex:
    """
    Raw rows grouped by trimmed item name, for the expand-an-item view.

    Grouping uses ``RawRecord.item_name`` (the same trimmed value the aggregator
    keys on), so each row that feeds an aggregated total sits in exactly one group.
    Rows with a blank name belong to no group.
    """

    def __init__(self, records: Iterable[RawRecord]) -> None:
        by_name: Dict[str, List[RawRecord]] = {}
        for r in records:
            name = r.item_name
            if name:
                by_name.setdefault(name, []).append(r)
        self._rows: Dict[str, Tuple[RawRecord, ...]] = {
            name: tuple(rows) for name, rows in by_name.items()
        }

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._rows

    def names(self) -> List[str]:
        return list(self._rows)

    def rows_for(self, name: str) -> Tuple[RawRecord, ...]:
        """Rows for ``name`` in file order; unknown names give ``()``."""
        return self._rows.get((name or "").strip(), ())

    def group_for(self, name: str) -> ItemGroup:
        key = (name or "").strip()
        rows = self._rows.get(key, ())
        total: Decimal = sum((record_quantity(r) for r in rows), ZERO)
        return ItemGroup(name=key, total_quantity=total, rows=rows)

    def groups(self) -> List[ItemGroup]:
        """All groups, in the order each name first appears in the file."""
        return [self.group_for(n) for n in self._rows]


class ExpansionState:
    """Which item names are currently expanded. Every name starts collapsed."""

    def __init__(self) -> None:
        self._expanded: Set[str] = set()

    def toggle(self, name: str) -> bool:
        """Flip ``name`` between collapsed and expanded; returns the new state."""
        name = name.strip()
        if name in self._expanded:
            self._expanded.discard(name)
            return False
        self._expanded.add(name)
        return True

    def is_expanded(self, name: str) -> bool:
        return name.strip() in self._expanded

    @property
    def expanded(self) -> FrozenSet[str]:
        return frozenset(self._expanded)

    def clear(self) -> None:
        self._expanded.clear()
