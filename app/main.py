import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.api.router import api_router
from app.core.config import settings
from app.core.database import engine
from app.core.errors import BrowserError
from app.core.schemas import error_body

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


# Close the pool once the process shuts down
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"Browsing {settings.DB_NAME} at {settings.DB_HOST}:{settings.DB_PORT}"
    )
    yield
    await engine.dispose()
    logger.info("Connection pool disposed")


app = FastAPI(title="PostgreSQL Browser API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BrowserError)
async def browser_error_handler(request: Request, error: BrowserError):
    return JSONResponse(
        status_code=error.status_code,
        content=error_body(error.message, error.target),
    )


# Bad query params or body are client errors in the same shape as any other
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, error: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in problem['loc'][1:])}: {problem['msg']}"
        for problem in error.errors()
    )
    message = f"Requisição inválida: {problems}"

    # CSV export answers in plain text
    if request.url.path.startswith(f"{api_router.prefix}/csv/"):
        return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message)
    )


# Include the master router containing all our endpoints
app.include_router(api_router)


@app.get("/")
async def root():
    return {
        "message": "API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
