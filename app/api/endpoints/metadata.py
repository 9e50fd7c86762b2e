from typing import Annotated

from fastapi import APIRouter, Depends

from app.core import catalog, schemas
from app.core.database import Executor, get_executor

router = APIRouter(tags=["Metadata"])

executor_dep = Annotated[Executor, Depends(get_executor)]


@router.get("/schemas", response_model=schemas.SchemasResponse)
async def get_schemas(executor: executor_dep):
    """List every non-system schema."""
    names = await catalog.list_schemas(executor)
    return schemas.SchemasResponse(schemas=names)


@router.get("/schema/{schema}/objetos", response_model=schemas.ObjectsResponse)
async def get_objects(schema: str, executor: executor_dep):
    """List tables and views of a schema."""
    objects = await catalog.list_objects(executor, schema)
    return schemas.ObjectsResponse(schema_name=schema, objetos=objects)


@router.get("/info/{schema}/{view}", response_model=schemas.ColumnsResponse)
async def get_view_info(schema: str, view: str, executor: executor_dep):
    """Describe the columns of a view or table."""
    columns = await catalog.describe_columns(executor, schema, view)
    return schemas.ColumnsResponse(schema_name=schema, view=view, colunas=columns)
