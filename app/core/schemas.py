from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =========================
# CATALOG
# =========================
class SchemasResponse(BaseModel):
    success: bool = True
    schemas: List[str]


class DatabaseObject(BaseModel):
    table_name: str
    table_type: str
    tipo: str


class ObjectsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    schema_name: str = Field(alias="schema")
    objetos: List[DatabaseObject]


class ColumnInfo(BaseModel):
    column_name: str
    data_type: str
    is_nullable: str
    column_default: Optional[str] = None


class ColumnsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    schema_name: str = Field(alias="schema")
    view: str
    colunas: List[ColumnInfo]


# =========================
# AD-HOC QUERY
# =========================
class AdhocQueryRequest(BaseModel):
    """
    Body of POST /consulta.
    ``sql`` is optional here so an absent value reaches the guard and is
    answered with 400 instead of a validation error.
    """

    sql: Optional[str] = None
    params: Optional[List[Any]] = None


# =========================
# ERRORS
# =========================
class ErrorResponse(BaseModel):
    success: bool = False
    erro: str
    detalhes: Optional[str] = None


def error_body(message: str, target: Optional[str] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "erro": message}
    if target:
        body["detalhes"] = f"Tentativa de acessar: {target}"
    return body
