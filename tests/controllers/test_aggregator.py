from __future__ import annotations

from decimal import Decimal

import pytest

from item_tally.controllers.aggregator import aggregate_records, coerce_quantity
from item_tally.data_model import AggregatedItem, RawRecord


def _recs(*pairs):
    """Build records from (name, qty) pairs; None means the column is absent."""
    out = []
    for i, (name, qty) in enumerate(pairs):
        fields = {}
        if name is not None:
            fields["Item Name"] = name
        if qty is not None:
            fields["Quantity"] = qty
        out.append(RawRecord(idx=i, fields=fields))
    return out


@pytest.mark.parametrize(
    "text,expected",
    [("5", "5"), (" 3 ", "3"), ("2.5", "2.5"), ("", "0"), ("abc", "0"), ("NaN", "0"), (None, "0")],
)
def test_coerce_quantity_is_lenient(text, expected):
    assert coerce_quantity(text) == Decimal(expected)


def test_aggregate_example_rice_and_oil():
    # Arrange
    recs = _recs(("Rice", "5"), (" Rice ", "3"), ("Oil", "abc"))

    # Act
    items = aggregate_records(recs)

    # Assert
    assert items == [
        AggregatedItem("Rice", Decimal("8")),
        AggregatedItem("Oil", Decimal("0")),
    ]


def test_aggregate_preserves_first_seen_order():
    recs = _recs(("A", "1"), ("B", "1"), ("A", "1"), ("C", "1"))
    assert [it.name for it in aggregate_records(recs)] == ["A", "B", "C"]


def test_aggregate_skips_blank_and_missing_names():
    recs = _recs(("", "10"), ("   ", "20"), (None, "30"), ("Soap", "2"))
    items = aggregate_records(recs)
    assert items == [AggregatedItem("Soap", Decimal("2"))]


def test_aggregate_empty_input():
    assert aggregate_records([]) == []


def test_aggregate_total_matches_sum_of_named_rows():
    recs = _recs(
        ("A", "1.5"), ("B", "x"), ("", "100"), ("A", "-0.5"), ("C", ""), ("B", "4"), (" C", "2")
    )
    expected = sum(
        (coerce_quantity(r.quantity_text) for r in recs if r.item_name), Decimal("0")
    )

    items = aggregate_records(recs)

    assert sum((it.total_quantity for it in items), Decimal("0")) == expected
    assert len({it.name for it in items}) == len(items)


def test_aggregate_is_deterministic():
    recs = _recs(("A", "1"), ("B", "2"), ("A", "3"))
    assert aggregate_records(recs) == aggregate_records(recs)


def test_aggregate_accepts_generator():
    recs = _recs(("A", "1"), ("A", "2"))
    assert aggregate_records(r for r in recs) == [AggregatedItem("A", Decimal("3"))]


def test_aggregate_out_of_range_quantity_counts_zero():
    recs = _recs(("Rice", "1e99999999"), ("Rice", "1e99999999"), ("Rice", "2"))
    assert aggregate_records(recs) == [AggregatedItem("Rice", Decimal("2"))]
