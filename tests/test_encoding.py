from datetime import date
from decimal import Decimal
from uuid import UUID

from asyncpg import Range

from app.core.encoding import encode_rows, encode_value


def test_decimal_stays_exact():
    assert encode_value(Decimal("12345678901234567890.12345")) == "12345678901234567890.12345"
    assert encode_value(Decimal("9.90")) == "9.90"


def test_bytes_become_hex():
    assert encode_value(b"\xff\x00") == "\\xff00"
    assert encode_value(memoryview(b"\x0a")) == "\\x0a"


def test_unknown_driver_types_fall_back_to_text():
    assert encode_value(Range(1, 5)) == str(Range(1, 5))


def test_non_finite_floats_become_text():
    assert encode_value(float("nan")) == "nan"
    assert encode_value(float("inf")) == "inf"


def test_arrays_encode_element_wise():
    assert encode_value([Decimal("1.50"), None, b"\x01"]) == ["1.50", None, "\\x01"]


def test_encode_rows_keeps_column_order_and_plain_values():
    rows = [
        {
            "id": 7,
            "ok": True,
            "day": date(2024, 1, 2),
            "uid": UUID("12345678-1234-5678-1234-567812345678"),
            "note": None,
        }
    ]
    encoded = encode_rows(rows)

    assert list(encoded[0].keys()) == ["id", "ok", "day", "uid", "note"]
    assert encoded[0] == {
        "id": 7,
        "ok": True,
        "day": "2024-01-02",
        "uid": "12345678-1234-5678-1234-567812345678",
        "note": None,
    }
