# item_tally/utilities/converters_scalar.py
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Final

ZERO: Final[Decimal] = Decimal("0")

# same magnitude range as an IEEE double; keeps sums and products clear of Overflow
MAX_EXPONENT: Final[int] = 308

_PLAIN_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _bad(value: Any, target: str) -> ValueError:
    return ValueError(f"Cannot convert {type(value).__name__} to {target}")


def to_decimal(value: Any) -> Decimal:
    """
    Convert a cell value into a finite Decimal.

    Accepts:
      • Decimal / int → returned as Decimal
      • float         → converted through ``str`` to avoid binary artifacts
      • str           → surrounding whitespace stripped, then parsed as a plain
                        ASCII number ("5", "-2.5", "1e3"); blank text reads as 0

    Unlike a bookkeeping parser this does *not* strip currency symbols or
    digit separators: cells like "1,200" or "1_000" are not numbers.

    Raises
    ------
    ValueError
        If the value is not numeric, is NaN/Infinity, or its magnitude is
        outside 1e-308 .. 1e308.
    """
    if isinstance(value, bool):
        raise _bad(value, "Decimal")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            return ZERO
        if not _PLAIN_NUMBER.fullmatch(s):
            raise ValueError(f"Could not parse Decimal from {value!r}")
        try:
            result = Decimal(s)
        except InvalidOperation as e:
            raise ValueError(f"Could not parse Decimal from {value!r}") from e
    else:
        raise _bad(value, "Decimal")

    if not result.is_finite():
        raise ValueError(f"Non-finite number {value!r}")
    if result.is_zero():
        return ZERO
    if abs(result.adjusted()) > MAX_EXPONENT:
        raise ValueError(f"Number out of range {value!r}")
    return result


def format_decimal(value: Decimal) -> str:
    """Render without trailing zeros or exponent: Decimal("8.0") -> "8"."""
    text = format(value.normalize(), "f")
    return "0" if text in ("-0", "") else text
