from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from item_tally.data_model import AggregatedItem, ItemGroup, RawRecord, Summary


def test_item_group_holds_rows_as_tuple():
    r1 = RawRecord(idx=0, fields={"Item Name": "Rice", "Quantity": "5"})
    r2 = RawRecord(idx=2, fields={"Item Name": " Rice", "Quantity": "3"})

    g = ItemGroup(name="Rice", total_quantity=Decimal("8"), rows=(r1, r2))

    assert g.rows == (r1, r2)
    assert isinstance(g.rows, tuple)
    with pytest.raises(FrozenInstanceError):
        setattr(g, "total_quantity", Decimal("9"))


def test_aggregated_item_and_summary_are_value_objects():
    assert AggregatedItem("Rice", Decimal("8")) == AggregatedItem("Rice", Decimal("8.0"))
    s = Summary(total_quantity=Decimal("8"), total_amount=Decimal("80"))
    with pytest.raises(FrozenInstanceError):
        setattr(s, "total_amount", Decimal("0"))
