import logging
import ssl
from typing import Any, Dict, List, Protocol, Sequence

import asyncpg
from sqlalchemy import event, exc
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.core.config import settings
from app.core.errors import ConnectionFailure, PoolTimeout, QueryExecutionError

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


def _connect_args() -> Dict[str, Any]:
    args: Dict[str, Any] = {"timeout": settings.DB_CONNECT_TIMEOUT}
    if settings.DB_SSL:
        # Accept self-signed certificates
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        args["ssl"] = context
    return args


engine = create_async_engine(
    settings.database_url,
    echo=settings.DB_ECHO,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=0,
    pool_timeout=settings.DB_CONNECT_TIMEOUT,
    pool_recycle=settings.DB_IDLE_TIMEOUT,
    pool_pre_ping=True,
    connect_args=_connect_args(),
)


@event.listens_for(engine.sync_engine, "connect")
def _on_connect(dbapi_connection, connection_record):
    logger.info(f"Connected to PostgreSQL at {settings.DB_HOST}:{settings.DB_PORT}")


class Executor(Protocol):
    """Runs one parameterized statement and returns its rows."""

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Row]: ...


class PoolExecutor:
    """
    Executor backed by the SQLAlchemy connection pool.

    Statements go straight to the asyncpg driver connection so that
    ``$1``-style placeholders and ad-hoc SQL reach PostgreSQL untouched.
    Each call is a single autocommit statement; no transaction is opened.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Row]:
        try:
            async with self.engine.connect() as conn:
                raw = await conn.get_raw_connection()
                records = await raw.driver_connection.fetch(sql, *params)
        except exc.TimeoutError as error:
            logger.error(f"Connection pool exhausted: {error}")
            raise PoolTimeout(
                "Tempo esgotado aguardando conexão com o banco de dados"
            ) from error
        except (asyncpg.PostgresError, asyncpg.InterfaceError) as error:
            logger.error(f"Query failed: {error}")
            raise QueryExecutionError(str(error)) from error
        except (exc.SQLAlchemyError, OSError) as error:
            logger.error(f"Database connection failed: {error}")
            raise ConnectionFailure(str(error)) from error

        # Records keep the column order of the query
        return [dict(record) for record in records]


pool_executor = PoolExecutor(engine)


# Gives the routes access to postgres; overridden in tests
async def get_executor() -> Executor:
    return pool_executor
