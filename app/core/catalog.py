from typing import Any, Dict, List

from app.core.database import Executor
from app.core.errors import InvalidIdentifier
from app.core.identifiers import validate


# -----------------------------------------------------------------------------
# CATALOG MODULE
# Purpose: list schemas, tables/views and column metadata from information_schema.
# Every query here is fixed text; names only ever travel as bound values.
# -----------------------------------------------------------------------------

SYSTEM_SCHEMAS = ("information_schema", "pg_catalog", "pg_toast")

LIST_SCHEMAS_SQL = """
    SELECT schema_name
    FROM information_schema.schemata
    WHERE schema_name <> ALL($1::text[])
    ORDER BY schema_name
"""

LIST_OBJECTS_SQL = """
    SELECT table_name, table_type
    FROM information_schema.tables
    WHERE table_schema = $1
    ORDER BY table_type, table_name
"""

DESCRIBE_COLUMNS_SQL = """
    SELECT column_name, data_type, is_nullable, column_default
    FROM information_schema.columns
    WHERE table_schema = $1 AND table_name = $2
    ORDER BY ordinal_position
"""


async def list_schemas(executor: Executor) -> List[str]:
    """
    Return user-visible schema names, sorted alphabetically.

    System schemas are excluded in the query and again here, so the result
    never contains them whatever the executor returns.
    """
    rows = await executor.execute(LIST_SCHEMAS_SQL, [list(SYSTEM_SCHEMAS)])
    names = {row["schema_name"] for row in rows}
    return sorted(name for name in names if name not in SYSTEM_SCHEMAS)


async def list_objects(executor: Executor, schema: str) -> List[Dict[str, Any]]:
    """
    Return the tables and views of ``schema``.

    Each entry has ``table_name``, ``table_type`` and ``tipo`` ("view" when
    the catalog marks it VIEW, "table" otherwise).

    Raises:
        InvalidIdentifier: before touching the database if ``schema`` is bad.
    """
    if not validate(schema):
        raise InvalidIdentifier("Nome de schema inválido")

    rows = await executor.execute(LIST_OBJECTS_SQL, [schema])
    return [
        {
            "table_name": row["table_name"],
            "table_type": row["table_type"],
            "tipo": "view" if row["table_type"] == "VIEW" else "table",
        }
        for row in rows
    ]


async def describe_columns(
    executor: Executor, schema: str, obj: str
) -> List[Dict[str, Any]]:
    """Return column metadata of ``schema.obj`` in ordinal order."""
    # Both names are bound values here; validated anyway for uniform 400s
    if not validate(schema) or not validate(obj):
        raise InvalidIdentifier("Nome de schema ou view inválido")

    return await executor.execute(DESCRIBE_COLUMNS_SQL, [schema, obj])
