import logging
from typing import Any, Dict, List

from app.core.database import Executor
from app.core.errors import DatabaseError
from app.core.identifiers import qualified_name

logger = logging.getLogger(__name__)

DEFAULT_ROW_LIMIT = 100
DEFAULT_CSV_LIMIT = 1000


def build_select(schema: str, obj: str) -> str:
    """Return ``SELECT * FROM schema.obj LIMIT $1`` for validated names."""
    return f"SELECT * FROM {qualified_name(schema, obj)} LIMIT $1"


async def fetch_rows(
    executor: Executor, schema: str, obj: str, limit: int = DEFAULT_ROW_LIMIT
) -> List[Dict[str, Any]]:
    """
    Fetch up to ``limit`` rows from a table or view.

    The limit is always a bound parameter. Rows come back exactly as the
    driver produced them.

    Raises:
        InvalidIdentifier: if either name is bad; no query is issued.
        QueryExecutionError: if the database rejects the statement; the
            error's ``target`` names the object that was requested.
    """
    sql = build_select(schema, obj)
    target = f"{schema}.{obj}"

    try:
        return await executor.execute(sql, [limit])
    except DatabaseError as error:
        logger.error(f"Failed to read {target}: {error}")
        error.target = target
        raise
