from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse, Response

from app.core import rows
from app.core.csv_export import to_csv
from app.core.database import Executor, get_executor
from app.core.encoding import encode_rows
from app.core.errors import BrowserError, DatabaseError

router = APIRouter(tags=["Data"])

executor_dep = Annotated[Executor, Depends(get_executor)]


@router.get("/dados/{schema}/{objeto}")
async def get_rows(
    schema: str,
    objeto: str,
    executor: executor_dep,
    limit: Annotated[int, Query(ge=0)] = rows.DEFAULT_ROW_LIMIT,
):
    """Return up to ``limit`` rows of a table or view as JSON."""
    data = await rows.fetch_rows(executor, schema, objeto, limit)
    return {
        "success": True,
        "schema": schema,
        "objeto": objeto,
        "total": len(data),
        "dados": encode_rows(data),
    }


@router.get("/csv/{schema}/{objeto}", response_class=PlainTextResponse)
async def export_csv(
    schema: str,
    objeto: str,
    executor: executor_dep,
    limit: Annotated[int, Query(ge=0)] = rows.DEFAULT_CSV_LIMIT,
):
    """
    Export up to ``limit`` rows as a CSV attachment (e.g. for spreadsheet imports).
    Failures are answered in plain text, not the JSON envelope.
    """
    try:
        content = to_csv(await rows.fetch_rows(executor, schema, objeto, limit))
    except DatabaseError as error:
        return PlainTextResponse(
            f"Erro: {error.message}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    except BrowserError as error:
        return PlainTextResponse(error.message, status_code=error.status_code)

    return Response(
        content=content,
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{schema}_{objeto}.csv"'
        },
    )
