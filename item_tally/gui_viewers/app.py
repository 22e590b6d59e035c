# item_tally/gui_viewers/app.py
from __future__ import annotations

import logging
import sys
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox, ttk
from types import SimpleNamespace
from typing import Dict, Optional

from item_tally.controllers.report_session import ReportRow, ReportSession
from item_tally.controllers import report_writer
from item_tally.data_model import ItemTallyError
from item_tally.utilities import ReportSettings, configure_logging, format_decimal

log = logging.getLogger(__name__)

COLUMNS = ("sno", "name", "qty", "rate", "amount")
HEADINGS = {
    "sno": "S.No.",
    "name": "Item Name",
    "qty": "Item Quantity",
    "rate": "Rate",
    "amount": "Amount",
}
FILETYPES = [
    ("CSV files", "*.csv"),
    ("Excel workbooks", "*.xlsx *.xlsm"),
    ("All files", "*.*"),
]


class App(tk.Tk):
    """
    Single-window report: pick a file, type a rate per item, read the totals.

    Items open in the tree to show the raw rows they were built from.
    """

    def __init__(
        self,
        session: Optional[ReportSession] = None,
        messagebox_api=None,
        settings: Optional[ReportSettings] = None,
    ):
        super().__init__()
        self.settings = settings or (session.settings if session else ReportSettings())
        self.session = session or ReportSession(settings=self.settings)

        # Dependency-injected messagebox wrapper; calls module functions at call time
        self.mb = messagebox_api or SimpleNamespace(
            showinfo=lambda *a, **k: messagebox.showinfo(*a, **k),
            showerror=lambda *a, **k: messagebox.showerror(*a, **k),
            askyesno=lambda *a, **k: messagebox.askyesno(*a, **k),
        )
        self.title("Item Tally")
        self.geometry("900x640")
        self.minsize(720, 480)

        # tree iid -> aggregated row position
        self._iid_to_index: Dict[str, int] = {}
        self._build()

    # ---------- layout ----------

    def _build(self):
        pad = {"padx": 8, "pady": 6}
        self.title_var = tk.StringVar(value="")
        self.rate_var = tk.StringVar(value="")
        self.total_qty_var = tk.StringVar(value="0")
        self.total_amount_var = tk.StringVar(value=f"{report_writer.CURRENCY_PREFIX}0")

        actions = ttk.Frame(self)
        actions.pack(fill="x", **pad)
        ttk.Button(actions, text="Open file…", command=self._browse).pack(side="left")
        ttk.Button(actions, text="Print", command=self._print).pack(side="left", padx=6)
        ttk.Button(actions, text="Export CSV…", command=self._export_csv).pack(
            side="left"
        )

        ttk.Label(self, textvariable=self.title_var).pack(fill="x", **pad)

        table = ttk.Frame(self)
        table.pack(fill="both", expand=True, **pad)
        self.tree = ttk.Treeview(table, columns=COLUMNS, show="tree headings")
        self.tree.column("#0", width=28, stretch=False)
        for col in COLUMNS:
            self.tree.heading(col, text=HEADINGS[col])
        self.tree.column("name", width=360)
        self.tree.pack(side="left", fill="both", expand=True)
        scroll = ttk.Scrollbar(table, orient="vertical", command=self.tree.yview)
        scroll.pack(side="left", fill="y")
        self.tree.configure(yscrollcommand=scroll.set)
        self.tree.bind("<<TreeviewSelect>>", lambda e: self._on_select())
        self.tree.bind("<<TreeviewOpen>>", lambda e: self._on_open_close(True))
        self.tree.bind("<<TreeviewClose>>", lambda e: self._on_open_close(False))

        rate_bar = ttk.Frame(self)
        rate_bar.pack(fill="x", **pad)
        ttk.Label(rate_bar, text="Rate for selected item:").pack(side="left")
        self.rate_entry = ttk.Entry(rate_bar, textvariable=self.rate_var, width=12)
        self.rate_entry.pack(side="left", padx=6)
        self.rate_entry.bind("<Return>", lambda e: self._apply_selected_rate())
        ttk.Button(rate_bar, text="Set rate", command=self._apply_selected_rate).pack(
            side="left"
        )

        totals = ttk.Frame(self)
        totals.pack(fill="x", **pad)
        ttk.Label(totals, text="Total (No.)").grid(row=0, column=0, sticky="w")
        ttk.Label(totals, textvariable=self.total_qty_var).grid(
            row=0, column=1, sticky="e"
        )
        ttk.Label(totals, text="Total (Rs)").grid(row=1, column=0, sticky="w")
        ttk.Label(totals, textvariable=self.total_amount_var).grid(
            row=1, column=1, sticky="e"
        )
        totals.columnconfigure(1, weight=1)

    # ---------- actions ----------

    def _browse(self):
        p = filedialog.askopenfilename(title="Select items file", filetypes=FILETYPES)
        if p:
            self.load_file(Path(p))

    def load_file(self, path: Path) -> bool:
        if not self.session.load(path):
            self.mb.showerror("Error", f"Could not read {Path(path).name}. See log.")
            return False
        self.refresh()
        return True

    def apply_rate(self, index: int, raw_value: str) -> bool:
        changed = self.session.set_rate(index, raw_value)
        if changed:
            self._update_row(index)
            self._update_totals()
        return changed

    def _selected_index(self) -> Optional[int]:
        sel = self.tree.selection()
        if not sel:
            return None
        iid = sel[0]
        # a raw row is selected: rate applies to its parent item
        parent = self.tree.parent(iid)
        return self._iid_to_index.get(parent or iid)

    def _on_select(self):
        index = self._selected_index()
        if index is not None:
            self.rate_var.set(self.session.rates.display_value(index))

    def _apply_selected_rate(self):
        index = self._selected_index()
        if index is None:
            self.mb.showinfo("Info", "Select an item first.")
            return
        if not self.apply_rate(index, self.rate_var.get()):
            # keep the box in sync with the rate that is still in effect
            self.rate_var.set(self.session.rates.display_value(index))

    def _on_open_close(self, opened: bool):
        iid = self.tree.focus()
        index = self._iid_to_index.get(iid)
        if index is None:
            return
        name = self.session.items[index].name
        if self.session.is_expanded(name) != opened:
            self.session.toggle(name)

    def _print(self):
        if not self.session.loaded:
            self.mb.showinfo("Info", "Open a file first.")
            return
        try:
            path = report_writer.print_report(self.session)
        except ItemTallyError as e:
            self.mb.showerror("Error", str(e))
            return
        log.info("Sent %s to printer", path)

    def _export_csv(self):
        if not self.session.loaded:
            self.mb.showinfo("Info", "Open a file first.")
            return
        p = filedialog.asksaveasfilename(
            title="Export report as CSV",
            defaultextension=".csv",
            initialfile=f"{self.session.title or 'report'} summary.csv",
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")],
        )
        if not p:
            return
        try:
            out = report_writer.write_report_csv(self.session, Path(p))
        except OSError as e:
            self.mb.showerror("Error", f"Could not write CSV:\n{e}")
            return
        self.mb.showinfo("Done", f"CSV written:\n{out}")

    # ---------- rendering ----------

    @staticmethod
    def _row_values(row: ReportRow):
        amount = format_decimal(row.amount) if row.rate else ""
        return (row.serial, row.name, format_decimal(row.quantity), row.rate, amount)

    def refresh(self):
        """Redraw the table and totals from the session."""
        self.title_var.set(self.session.title)
        self.tree.delete(*self.tree.get_children())
        self._iid_to_index.clear()

        detail_cols = self.session.detail_columns()
        for i, row in enumerate(self.session.rows()):
            iid = f"item-{i}"
            self._iid_to_index[iid] = i
            self.tree.insert(
                "",
                "end",
                iid=iid,
                values=self._row_values(row),
                open=self.session.is_expanded(row.name),
            )
            for rec in self.session.rows_for(row.name):
                details = ", ".join(f"{c}: {rec.get(c)}" for c in detail_cols if rec.get(c))
                self.tree.insert(
                    iid,
                    "end",
                    iid=f"{iid}-row-{rec.idx}",
                    values=("", details, rec.quantity_text, "", ""),
                )

        self._update_totals()

    def _update_row(self, index: int):
        row = self.session.rows()[index]
        self.tree.item(f"item-{index}", values=self._row_values(row))

    def _update_totals(self):
        summary = self.session.summary
        self.total_qty_var.set(format_decimal(summary.total_quantity))
        self.total_amount_var.set(
            f"{report_writer.CURRENCY_PREFIX}{format_decimal(summary.total_amount)}"
        )


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    settings = ReportSettings.from_env()
    configure_logging(settings)
    app = App(settings=settings)
    if argv:
        app.load_file(Path(argv[0]))
    app.mainloop()


if __name__ == "__main__":
    main()
