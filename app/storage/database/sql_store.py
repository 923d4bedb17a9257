from typing import Any, Dict, List, Protocol, Sequence, runtime_checkable
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.logger import logger
from app.storage.database.errors import DatabaseQueryError

Row = Dict[str, Any]


@runtime_checkable
class QueryStore(Protocol):
    """Anything that can run positional SQL text and hand back rows as mappings."""

    async def fetch(self, query_text: str, params: Sequence[Any] = ()) -> List[Row]: ...

    async def query(self, query_text: str, params: Sequence[Any] = ()) -> List[Row]: ...


class SqlStore:
    """
    Read-only access to the catalog database through raw SQL.

    Placeholders are PostgreSQL style (``$1``, ``$2``...) and are bound
    positionally by the asyncpg driver. Every call checks out its own
    connection, so two calls can be awaited concurrently.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    async def fetch(self, query_text: str, params: Sequence[Any] = ()) -> List[Row]:
        async with self.engine.connect() as conn:
            result = await conn.exec_driver_sql(query_text, tuple(params))
            return [dict(r) for r in result.mappings().all()]

    async def query(self, query_text: str, params: Sequence[Any] = ()) -> List[Row]:
        try:
            return await self.fetch(query_text, params)
        except Exception as e:
            logger.error("[SqlStore] Query failed: %s", e, exc_info=True)
            raise DatabaseQueryError() from e
