from typing import Annotated

from fastapi import APIRouter, Depends

from app.core import schemas
from app.core.adhoc import run_adhoc
from app.core.database import Executor, get_executor
from app.core.encoding import encode_rows

router = APIRouter(tags=["Query"])

executor_dep = Annotated[Executor, Depends(get_executor)]


@router.post("/consulta")
async def run_query(payload: schemas.AdhocQueryRequest, executor: executor_dep):
    """
    Run a caller-supplied SELECT with positional ``$n`` parameters.
    Internal use only: the SELECT prefix check is the sole restriction.
    """
    data = await run_adhoc(executor, payload.sql, payload.params)
    return {"success": True, "total": len(data), "dados": encode_rows(data)}
