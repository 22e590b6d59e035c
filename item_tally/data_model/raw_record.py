from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class RawRecord:
    """
    One parsed data row. ``fields`` maps header name -> cell text (never None).
    ``idx`` is the row's position among the file's non-blank data rows.
    """

    idx: int
    fields: Mapping[str, str] = field(default_factory=dict, hash=False)
    item_column: str = "Item Name"
    quantity_column: str = "Quantity"

    def __post_init__(self) -> None:
        # freeze the mapping so the record cannot be edited after parsing
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def item_name(self) -> str:
        return (self.fields.get(self.item_column) or "").strip()

    @property
    def quantity_text(self) -> str:
        return self.fields.get(self.quantity_column) or ""

    def get(self, name: str, default: str = "") -> str:
        return self.fields.get(name, default)
