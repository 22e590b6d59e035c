# item_tally/controllers/report_writer.py
"""
Printable and exportable renderings of a ``ReportSession``.

• ``render_text_report``: fixed-width text for the printer.
• ``write_report_csv``:   the same table as CSV, with a totals row.
• ``print_report``:       write the text report and hand it to the OS print command.
"""
from __future__ import annotations

import csv
import logging
import os
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence

from item_tally.controllers.report_session import ReportSession
from item_tally.data_model import PrintError
from item_tally.utilities import format_decimal

log = logging.getLogger(__name__)

REPORT_HEADERS = ["S.No.", "Item Name", "Item Quantity", "Rate", "Amount"]
CURRENCY_PREFIX = "₹"


def _table_lines(header: Sequence[str], rows: Sequence[Sequence[str]]) -> List[str]:
    widths = [len(h) for h in header]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(cell))

    def fmt(cells: Sequence[str]) -> str:
        return "  ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    sep = "  ".join("-" * w for w in widths)
    return [fmt(header), sep, *(fmt(r) for r in rows)]


def render_text_report(session: ReportSession, *, include_details: bool = True) -> str:
    """Render the on-screen report as plain text.

    Expanded items (per the session's expansion state) are followed by their raw
    rows, indented, when ``include_details`` is true.
    """
    lines: List[str] = []
    if session.title:
        lines += [session.title, ""]

    cells = [
        [
            str(r.serial),
            r.name,
            format_decimal(r.quantity),
            r.rate,
            format_decimal(r.amount) if r.rate else "",
        ]
        for r in session.rows()
    ]
    table = _table_lines(REPORT_HEADERS, cells)
    lines += table[:2]

    detail_cols = session.detail_columns()
    for row, text in zip(session.rows(), table[2:]):
        lines.append(text)
        if include_details and session.is_expanded(row.name):
            for rec in session.rows_for(row.name):
                parts = [f"{session.settings.quantity_column}: {rec.quantity_text}"]
                parts += [f"{c}: {rec.get(c)}" for c in detail_cols if rec.get(c)]
                lines.append("      - " + ", ".join(parts))

    summary = session.summary
    lines += [
        "",
        f"Total (No.)  {format_decimal(summary.total_quantity)}",
        f"Total (Rs)   {CURRENCY_PREFIX}{format_decimal(summary.total_amount)}",
    ]
    return "\n".join(lines) + "\n"


def write_report_csv(session: ReportSession, out_path: Path) -> Path:
    out_path = Path(out_path)
    summary = session.summary
    with out_path.open("w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(REPORT_HEADERS)
        for r in session.rows():
            w.writerow(
                [
                    r.serial,
                    r.name,
                    format_decimal(r.quantity),
                    r.rate,
                    format_decimal(r.amount),
                ]
            )
        w.writerow(
            [
                "",
                "Total",
                format_decimal(summary.total_quantity),
                "",
                format_decimal(summary.total_amount),
            ]
        )
    log.info("Wrote CSV report → %s", out_path)
    return out_path


def _send_to_printer(path: Path) -> None:
    if sys.platform.startswith("win"):
        os.startfile(str(path), "print")  # type: ignore[attr-defined]
    else:
        subprocess.run(["lpr", str(path)], check=True, capture_output=True)


def print_report(session: ReportSession, out_dir: Optional[Path] = None) -> Path:
    """Write the text report to ``out_dir`` (a temp dir by default) and print it.

    Raises
    ------
    PrintError
        If the print command is missing or fails.
    """
    out_dir = Path(out_dir) if out_dir else Path(tempfile.mkdtemp(prefix="item_tally_"))
    out_dir.mkdir(parents=True, exist_ok=True)
    stem = session.title or "report"
    path = out_dir / f"{stem}.txt"
    path.write_text(render_text_report(session), encoding="utf-8")

    log.info("Printing %s", path)
    try:
        _send_to_printer(path)
    except FileNotFoundError as e:
        raise PrintError(f"No print command available:\n{e}") from e
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or b"").decode(errors="replace").strip()
        raise PrintError(f"Printing failed: {detail or e}") from e
    except OSError as e:
        raise PrintError(f"Printing failed: {e}") from e
    return path
