# item_tally/data_model/errors.py
from __future__ import annotations

from pathlib import Path
from typing import Optional


class ItemTallyError(Exception):
    """Base class for errors the GUI reports to the user instead of crashing."""


class ParseFailure(ItemTallyError, ValueError):
    """The uploaded file could not be read as a table with a header row."""

    def __init__(self, path: Path | str, reason: str, cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.reason = reason
        self.cause = cause
        super().__init__(f"Could not read {self.path.name}: {reason}")


class PrintError(ItemTallyError, RuntimeError):
    """The printable report could not be handed to the host print facility."""
