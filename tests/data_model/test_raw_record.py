from dataclasses import FrozenInstanceError

import pytest

from item_tally.data_model import RawRecord


def _rec(idx=0, **fields):
    return RawRecord(idx=idx, fields=fields)


def test_raw_record_typed_accessors_trim_name_only():
    # Arrange
    r = RawRecord(idx=3, fields={"Item Name": "  Rice ", "Quantity": " 5 ", "Date": "01/04"})

    # Assert
    assert r.item_name == "Rice"
    assert r.quantity_text == " 5 "
    assert r.get("Date") == "01/04"
    assert r.get("Missing") == ""
    assert r.get("Missing", "n/a") == "n/a"


def test_raw_record_missing_columns_read_as_blank():
    r = RawRecord(idx=0, fields={"Other": "x"})
    assert r.item_name == ""
    assert r.quantity_text == ""


def test_raw_record_custom_column_names():
    r = RawRecord(
        idx=0,
        fields={"Product": " Oil", "Qty": "2"},
        item_column="Product",
        quantity_column="Qty",
    )
    assert r.item_name == "Oil"
    assert r.quantity_text == "2"


def test_raw_record_is_immutable():
    src = {"Item Name": "Rice"}
    r = RawRecord(idx=0, fields=src)

    with pytest.raises(FrozenInstanceError):
        setattr(r, "idx", 1)
    with pytest.raises(TypeError):
        r.fields["Item Name"] = "Oil"  # type: ignore[index]

    # later edits to the source dict do not leak into the record
    src["Item Name"] = "Oil"
    assert r.item_name == "Rice"


def test_raw_record_equality_and_hash():
    a = _rec(0, **{"Item Name": "Rice", "Quantity": "5"})
    b = _rec(0, **{"Item Name": "Rice", "Quantity": "5"})
    c = _rec(0, **{"Item Name": "Rice", "Quantity": "6"})

    assert a == b
    assert a != c
    assert len({a, b}) == 1
