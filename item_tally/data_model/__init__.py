# item_tally/data_model/__init__.py
from .aggregated_item import AggregatedItem
from .errors import ItemTallyError, ParseFailure, PrintError
from .item_group import ItemGroup
from .raw_record import RawRecord
from .summary import Summary

__all__ = [
    "RawRecord", "AggregatedItem", "ItemGroup", "Summary",
    "ItemTallyError", "ParseFailure", "PrintError"]
