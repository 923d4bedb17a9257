from .errors import DatabaseQueryError, InvalidListRequest
from .sql_store import QueryStore, SqlStore, Row
from .db_connector import engine, get_store, dispose_engine

__all__ = [
    "DatabaseQueryError",
    "InvalidListRequest",
    "QueryStore",
    "SqlStore",
    "Row",
    "engine",
    "get_store",
    "dispose_engine",
]
