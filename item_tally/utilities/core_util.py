#!/usr/bin/env python3
"""
Core Utilities

Features:
- String utilities shared by the parser and the report layers
"""

from __future__ import annotations

import re
from typing import Any, Optional

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def to_cell_text(value: Any) -> str:
    """Normalize a raw spreadsheet cell to text; missing/NaN cells become ``""``."""
    if value is None:
        return ""
    # float('nan') is the only value not equal to itself
    if isinstance(value, float) and value != value:
        return ""
    return str(value)


_CSV_SUFFIX = re.compile(r"\.csv$", re.IGNORECASE)
_FROM_DASH = re.compile(r"From\s*-\s*", re.IGNORECASE)
_TO_DASH = re.compile(r"To\s*-\s*", re.IGNORECASE)


def title_from_filename(name: str) -> str:
    """
    Turn an export file name into a report heading.

    "Items From - 01-04-2024 To - 30-04-2024.csv" -> "Items From 01-04-2024 To 30-04-2024"

    Only the first "From -" and "To -" are rewritten.
    """
    title = _CSV_SUFFIX.sub("", name)
    title = _FROM_DASH.sub("From ", title, count=1)
    title = _TO_DASH.sub("To ", title, count=1)
    return title


# endregion Common functions
