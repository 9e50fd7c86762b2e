import math
from decimal import Decimal
from typing import Any, Dict, List

from fastapi.encoders import jsonable_encoder


def bytea_hex(value: bytes) -> str:
    """Render binary data the way PostgreSQL prints bytea: ``\\x`` + hex."""
    return "\\x" + bytes(value).hex()


# numeric stays exact, bytea never goes through utf-8 decoding
ROW_ENCODERS = {
    Decimal: str,
    bytes: bytea_hex,
    bytearray: bytea_hex,
    memoryview: bytea_hex,
}


def encode_value(value: Any) -> Any:
    """Turn one driver value into something JSON can carry without loss."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    try:
        return jsonable_encoder(value, custom_encoder=ROW_ENCODERS)
    except (TypeError, ValueError):
        # Driver types FastAPI does not know (asyncpg Range, ...)
        return str(value)


def encode_rows(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [{key: encode_value(value) for key, value in row.items()} for row in rows]
