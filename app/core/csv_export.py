from datetime import date, datetime, time
from typing import Any, Dict, List

from app.core.encoding import bytea_hex
from app.core.errors import NoData


def format_value(value: Any) -> str:
    """
    Render one cell: null as empty, booleans lower-case, times as ISO 8601,
    bytea as hex and arrays as ``{a,b}``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytea_hex(value)
    if isinstance(value, (list, tuple)):
        # PostgreSQL array literal, NULL elements spelled out
        items = ("NULL" if item is None else format_value(item) for item in value)
        return "{" + ",".join(items) + "}"
    return str(value)


def escape_field(text: str) -> str:
    if "," in text or '"' in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def to_csv(rows: List[Dict[str, Any]]) -> str:
    """
    Serialize a result set to CSV text.

    The header comes from the first row's keys; every row is written in that
    column order. Lines are joined with ``\\n`` and there is no trailing
    newline.

    Raises:
        NoData: ``rows`` is empty.
    """
    if not rows:
        raise NoData("Nenhum dado encontrado")

    headers = list(rows[0].keys())
    lines = [",".join(escape_field(header) for header in headers)]
    for row in rows:
        lines.append(
            ",".join(escape_field(format_value(row.get(header))) for header in headers)
        )
    return "\n".join(lines)
