from .config_logging import LOGGING, configure_logging
from .converters_scalar import format_decimal, to_decimal
from .core_util import is_null_or_whitespace, title_from_filename, to_cell_text
from .settings import ReportSettings

__all__ = [
    "is_null_or_whitespace",
    "title_from_filename",
    "to_cell_text",
    "to_decimal",
    "format_decimal",
    "ReportSettings",
    "configure_logging",
    "LOGGING",
]
