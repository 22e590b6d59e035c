"""
Spreadsheet → RawRecord loading.

The parser is deliberately thin: pandas does the reading, this module only
normalizes every cell to text and wraps each row in a ``RawRecord``.

Primary responsibilities:
• Read CSV/delimited text or an Excel workbook with the first row as header.
• Skip fully blank rows; keep every other row, in file order.
• Keep numeric cells as text (coercion happens in the aggregator).
• Turn any reader failure into a single ``ParseFailure``.
"""

# item_tally/controllers/row_parser.py
from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import List, Optional

import pandas as pd

from item_tally.data_model import ParseFailure, RawRecord
from item_tally.utilities import ReportSettings, is_null_or_whitespace, to_cell_text

log = logging.getLogger(__name__)

EXCEL_SUFFIXES = frozenset({".xlsx", ".xlsm"})


def _read_frame(path: Path, settings: ReportSettings) -> pd.DataFrame:
    if path.suffix.lower() in EXCEL_SUFFIXES:
        # dtype=str keeps "007" as "007"; blank cells come back as NaN
        return pd.read_excel(path, dtype=str)
    return pd.read_csv(
        path,
        sep=settings.delimiter,
        # rows ending in a delimiter must not turn the first column into the index
        index_col=False,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        encoding=settings.encoding,
    )


def records_from_frame(
    df: pd.DataFrame, settings: Optional[ReportSettings] = None
) -> List[RawRecord]:
    """Convert a DataFrame (header already applied) into ``RawRecord``s.

    Parameters
    ----------
    df : pd.DataFrame
        Frame as returned by ``read_csv``/``read_excel``. Cell types are not assumed.
    settings : ReportSettings, optional
        Supplies the item-name and quantity column names carried by each record.

    Returns
    -------
    List[RawRecord]
        One record per row that has at least one non-blank cell, in frame order.
        ``idx`` counts kept rows only.

    Notes
    -----
    - Header names are stripped of surrounding whitespace.
    - Missing cells (NaN/None) become ``""``.
    """
    settings = settings or ReportSettings()
    columns = [str(c).strip() for c in df.columns]

    for needed in (settings.item_column, settings.quantity_column):
        if needed not in columns:
            log.warning("Column %r not found in header %s", needed, columns)

    out: List[RawRecord] = []
    for values in df.itertuples(index=False, name=None):
        cells = [to_cell_text(v) for v in values]
        if all(is_null_or_whitespace(c) for c in cells):
            continue
        out.append(
            RawRecord(
                idx=len(out),
                fields=dict(zip(columns, cells)),
                item_column=settings.item_column,
                quantity_column=settings.quantity_column,
            )
        )
    return out


def load_records(
    path: Path | str, settings: Optional[ReportSettings] = None
) -> List[RawRecord]:
    """Load a spreadsheet export into ordered ``RawRecord``s.

    Parameters
    ----------
    path : Path | str
        CSV (or other delimited text) file, or an Excel workbook
        (``.xlsx``/``.xlsm``). The first row must be the header.
    settings : ReportSettings, optional
        Delimiter, encoding and column names. Defaults to ``ReportSettings()``.

    Returns
    -------
    List[RawRecord]
        Records in file order; blank lines skipped.

    Raises
    ------
    ParseFailure
        If the file is missing, empty, undecodable or otherwise unreadable.
    """
    settings = settings or ReportSettings()
    path = Path(path)
    log.info("Parsing %s", path)
    try:
        df = _read_frame(path, settings)
    except FileNotFoundError as e:
        raise ParseFailure(path, "file not found", e) from e
    except pd.errors.EmptyDataError as e:
        raise ParseFailure(path, "file is empty", e) from e
    except pd.errors.ParserError as e:
        raise ParseFailure(path, f"malformed rows ({e})", e) from e
    except UnicodeDecodeError as e:
        raise ParseFailure(path, f"not {settings.encoding} text", e) from e
    except (ValueError, OSError, ImportError, zipfile.BadZipFile) as e:
        # read_excel raises ValueError for non-workbook content, ImportError without an engine
        raise ParseFailure(path, str(e) or type(e).__name__, e) from e

    records = records_from_frame(df, settings)
    log.debug("Parsed %d records from %s", len(records), path)
    return records
