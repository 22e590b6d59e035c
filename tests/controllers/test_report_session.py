from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path

from item_tally.controllers.report_session import ReportRow, ReportSession
from item_tally.data_model import AggregatedItem, RawRecord


def _csv(tmp_path: Path, name: str, text: str) -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


EXAMPLE = "Item Name,Quantity,Date,Party\nRice,5,01/04,Ram\n Rice ,3,02/04,Shyam\nOil,abc,03/04,\n"


def test_load_builds_report(tmp_path):
    # Arrange
    s = ReportSession()
    p = _csv(tmp_path, "Stock From - 01-04 To - 30-04.csv", EXAMPLE)

    # Act
    ok = s.load(p)

    # Assert
    assert ok
    assert s.loaded
    assert s.source_path == p
    assert s.title == "Stock From 01-04 To 30-04"
    assert s.items == [AggregatedItem("Rice", Decimal("8")), AggregatedItem("Oil", Decimal("0"))]
    assert len(s.records) == 3
    assert [r.get("Party") for r in s.rows_for("Rice")] == ["Ram", "Shyam"]


def test_example_totals(tmp_path):
    s = ReportSession()
    s.load(_csv(tmp_path, "a.csv", EXAMPLE))

    assert s.set_rate(0, "10")

    assert s.summary.total_quantity == Decimal("8")
    assert s.summary.total_amount == Decimal("80")
    assert s.rows() == [
        ReportRow(1, "Rice", Decimal("8"), "10", Decimal("80")),
        ReportRow(2, "Oil", Decimal("0"), "", Decimal("0")),
    ]


def test_new_upload_clears_rates_and_expansion(tmp_path):
    s = ReportSession()
    s.load(_csv(tmp_path, "a.csv", EXAMPLE))
    s.set_rate(0, "10")
    s.set_rate(1, "4")
    s.toggle("Rice")

    s.load(_csv(tmp_path, "b.csv", "Item Name,Quantity\nSoap,2\nRice,1\n"))

    assert [it.name for it in s.items] == ["Soap", "Rice"]
    assert len(s.rates) == 0
    assert not s.rates.has_rate(0)
    assert s.summary.total_amount == 0
    assert not s.is_expanded("Rice")
    assert s.title == "b"


def test_failed_load_keeps_previous_report(tmp_path, caplog):
    s = ReportSession()
    s.load(_csv(tmp_path, "a.csv", EXAMPLE))
    s.set_rate(0, "10")
    s.toggle("Oil")
    before = (list(s.items), list(s.records), s.source_path)

    with caplog.at_level(logging.ERROR):
        ok = s.load(tmp_path / "missing.csv")

    assert ok is False
    assert (s.items, s.records, s.source_path) == before
    assert s.rates.get_rate(0) == Decimal("10")
    assert s.is_expanded("Oil")
    assert any("Error parsing" in r.getMessage() for r in caplog.records)


def test_failed_first_load_leaves_empty_session(tmp_path):
    s = ReportSession()
    assert s.load(_csv(tmp_path, "empty.csv", "")) is False
    assert not s.loaded
    assert s.items == []
    assert s.title == ""
    assert s.summary.total_quantity == 0


def test_set_rate_outside_list_is_rejected(tmp_path):
    s = ReportSession()
    s.load(_csv(tmp_path, "a.csv", EXAMPLE))
    assert s.set_rate(2, "5") is False
    assert s.set_rate(-1, "5") is False
    assert len(s.rates) == 0


def test_non_numeric_rate_keeps_previous(tmp_path):
    s = ReportSession()
    s.load(_csv(tmp_path, "a.csv", EXAMPLE))
    s.set_rate(0, "12")
    assert s.set_rate(0, "twelve") is False
    assert s.rates.get_rate(0) == Decimal("12")


def test_load_records_directly():
    s = ReportSession()
    recs = [
        RawRecord(idx=0, fields={"Item Name": "A", "Quantity": "1", "Location": "X"}),
        RawRecord(idx=1, fields={"Item Name": "A", "Quantity": "2"}),
    ]
    s.load_records(recs)
    assert s.loaded
    assert s.title == ""
    assert s.items == [AggregatedItem("A", Decimal("3"))]
    assert s.detail_columns() == ["Location"]


def test_detail_columns_follow_settings_order(tmp_path):
    s = ReportSession()
    s.load(_csv(tmp_path, "a.csv", "Party,Item Name,Quantity,Date\nRam,Rice,1,01/04\n"))
    assert s.detail_columns() == ["Date", "Party"]


def test_trailing_delimiter_export_aggregates_by_name(tmp_path):
    s = ReportSession()
    assert s.load(_csv(tmp_path, "a.csv", "Item Name,Quantity\nRice,5,\n Rice ,3,\nOil,abc,\n"))
    assert s.items == [AggregatedItem("Rice", Decimal("8")), AggregatedItem("Oil", Decimal("0"))]


def test_out_of_range_numbers_do_not_break_the_report(tmp_path):
    s = ReportSession()
    assert s.load(_csv(tmp_path, "a.csv", "Item Name,Quantity\nRice,1e99999999\nRice,1e99999999\nOil,2\n"))
    assert s.items == [AggregatedItem("Rice", Decimal("0")), AggregatedItem("Oil", Decimal("2"))]

    assert s.set_rate(1, "1e99999999") is False

    assert s.summary.total_amount == Decimal("0")
    assert [r.rate for r in s.rows()] == ["", ""]


def test_expansion_ignores_surrounding_whitespace(tmp_path):
    s = ReportSession()
    s.load(_csv(tmp_path, "a.csv", EXAMPLE))

    assert s.toggle(" Rice ") is True

    assert s.is_expanded("Rice")
    assert s.is_expanded("  Rice")
    assert s.toggle("Rice") is False
