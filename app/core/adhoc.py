from typing import Any, Dict, List, Optional, Sequence

from app.core.database import Executor
from app.core.errors import DisallowedOperation, MissingInput


def is_select(sql: str) -> bool:
    """
    Textual allow-list: the statement must start with ``select``.

    This is not a parser. ``SELECT ... INTO``, stacked statements and
    side-effecting functions called from a SELECT all pass.
    """
    return sql.strip().lower().startswith("select")


async def run_adhoc(
    executor: Executor, sql: Optional[str], params: Optional[Sequence[Any]] = None
) -> List[Dict[str, Any]]:
    """
    Run caller-supplied SQL with positional ``$n`` parameters.

    Meant for trusted internal callers only: the SQL structure comes from
    the request as-is, the only gate is ``is_select``.

    Raises:
        MissingInput: ``sql`` is empty.
        DisallowedOperation: ``sql`` does not start with SELECT.
        QueryExecutionError: the database rejected the statement.
    """
    if not sql:
        raise MissingInput("SQL é obrigatório")

    if not is_select(sql):
        raise DisallowedOperation("Apenas consultas SELECT são permitidas")

    return await executor.execute(sql, list(params or []))
