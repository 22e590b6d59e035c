# item_tally/controllers/__init__.py
from .aggregator import aggregate_records, coerce_quantity
from .drilldown import DrillDownIndex, ExpansionState
from .rate_store import RateStore
from .report_session import ReportRow, ReportSession
from .row_parser import load_records, records_from_frame
from .summary import compute_summary, line_amount

__all__ = [
    "load_records", "records_from_frame", "aggregate_records", "coerce_quantity",
    "RateStore", "compute_summary", "line_amount", "DrillDownIndex",
    "ExpansionState", "ReportSession", "ReportRow"]
