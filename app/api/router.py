from fastapi import APIRouter
from app.api.endpoints import metadata, data, query
from app.core import schemas

api_router = APIRouter(
    prefix="/api",
    responses={
        400: {"model": schemas.ErrorResponse},
        500: {"model": schemas.ErrorResponse},
    },
)

# Combine all sub-routers into one
api_router.include_router(metadata.router)
api_router.include_router(data.router)
api_router.include_router(query.router)
