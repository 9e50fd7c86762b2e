from datetime import date, datetime
from decimal import Decimal

import pytest

from app.core.csv_export import format_value, to_csv
from app.core.errors import NoData


def test_quotes_fields_with_commas():
    assert to_csv([{"a": 1, "b": "x,y"}]) == 'a,b\n1,"x,y"'


def test_null_is_empty_field():
    assert to_csv([{"a": None}]) == "a\n"


def test_empty_result_is_no_data():
    with pytest.raises(NoData):
        to_csv([])


def test_doubles_inner_quotes():
    assert to_csv([{"name": 'say "hi"'}]) == 'name\n"say ""hi"""'


def test_follows_first_row_column_order():
    rows = [
        {"id": 1, "name": "a", "active": True},
        {"name": "b", "active": False, "id": 2},
    ]
    assert to_csv(rows) == "id,name,active\n1,a,true\n2,b,false"


def test_missing_keys_render_empty():
    assert to_csv([{"a": 1, "b": 2}, {"a": 3}]) == "a,b\n1,2\n3,"


def test_no_trailing_newline():
    assert not to_csv([{"a": 1}, {"a": 2}]).endswith("\n")


def test_format_value_handles_scalar_types():
    assert format_value(Decimal("10.50")) == "10.50"
    assert format_value(date(2024, 3, 1)) == "2024-03-01"
    assert format_value(datetime(2024, 3, 1, 12, 30)) == "2024-03-01T12:30:00"
    assert format_value(2.5) == "2.5"
    assert format_value(False) == "false"


def test_arrays_render_as_postgres_literals():
    assert format_value(["a", "b"]) == "{a,b}"
    assert format_value([1, None, 3]) == "{1,NULL,3}"
    assert to_csv([{"tags": ["a", "b"]}]) == 'tags\n"{a,b}"'


def test_bytes_render_as_hex():
    assert format_value(b"\xff\x00") == "\\xff00"
    assert format_value(bytearray(b"\x01")) == "\\x01"
