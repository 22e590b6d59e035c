# item_tally/controllers/rate_store.py
"""
RateStore: user-entered unit rates keyed by aggregated row position.

Rates know nothing about item names: position 3 means "the fourth row of the
current aggregation". Whoever owns the store must ``clear()`` it whenever the
aggregated list is rebuilt.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Iterator, Tuple, Union

from item_tally.utilities import format_decimal, to_decimal
from item_tally.utilities.converters_scalar import ZERO

log = logging.getLogger(__name__)

RateInput = Union[str, int, float, Decimal]


class RateStore:
    """Sparse ``index -> Decimal`` map; unset and explicit zero are distinct."""

    def __init__(self) -> None:
        self._rates: Dict[int, Decimal] = {}

    def set_rate(self, index: int, raw_value: RateInput) -> bool:
        """
        Parse ``raw_value`` and store it at ``index``.

        Non-numeric, non-finite or negative input leaves any previous rate in
        place and returns False. Blank text is stored as an explicit 0.
        """
        try:
            rate = to_decimal(raw_value)
        except ValueError:
            log.debug("Ignoring rate %r for row %d: not a number", raw_value, index)
            return False
        if rate < 0:
            log.debug("Ignoring rate %r for row %d: negative", raw_value, index)
            return False
        self._rates[int(index)] = rate
        return True

    def get_rate(self, index: int) -> Decimal:
        return self._rates.get(index, ZERO)

    def has_rate(self, index: int) -> bool:
        return index in self._rates

    def display_value(self, index: int) -> str:
        """Text for the rate input box: empty when the user never entered one."""
        if index not in self._rates:
            return ""
        return format_decimal(self._rates[index])

    def clear(self) -> None:
        self._rates.clear()

    def __len__(self) -> int:
        return len(self._rates)

    def __iter__(self) -> Iterator[Tuple[int, Decimal]]:
        return iter(sorted(self._rates.items()))

    def __repr__(self) -> str:
        return f"RateStore({dict(self._rates)!r})"
