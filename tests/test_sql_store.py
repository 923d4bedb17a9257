import asyncio
from contextlib import asynccontextmanager
from types import MappingProxyType

import pytest

from app.storage.database import DatabaseQueryError, QueryStore, SqlStore


class StubResult:
    def __init__(self, rows):
        self._rows = rows

    def mappings(self):
        return self

    def all(self):
        return list(self._rows)


class StubConnection:
    def __init__(self, engine):
        self.engine = engine

    async def exec_driver_sql(self, statement, parameters=None):
        self.engine.executed.append((statement, parameters))
        await asyncio.sleep(0)
        if self.engine.error is not None:
            raise self.engine.error
        return StubResult(self.engine.rows)


class StubEngine:
    """Just enough of AsyncEngine for SqlStore: ``connect()`` and ``exec_driver_sql``."""

    def __init__(self, rows=(), *, error=None, connect_error=None):
        self.rows = [MappingProxyType(r) for r in rows]
        self.error = error
        self.connect_error = connect_error
        self.executed = []
        self.open = 0
        self.opened = 0

    @asynccontextmanager
    async def connect(self):
        if self.connect_error is not None:
            raise self.connect_error
        self.open += 1
        self.opened += 1
        try:
            yield StubConnection(self)
        finally:
            self.open -= 1


def test_sql_store_satisfies_query_store():
    assert isinstance(SqlStore(StubEngine()), QueryStore)


def test_fetch_returns_plain_dicts_and_binds_positionally():
    engine = StubEngine([{"genre_id": 1, "name": "Drama"}, {"genre_id": 2, "name": "Horror"}])

    rows = asyncio.run(SqlStore(engine).fetch("SELECT genre_id, name FROM genre WHERE name ILIKE $1", ["%r%"]))

    assert rows == [{"genre_id": 1, "name": "Drama"}, {"genre_id": 2, "name": "Horror"}]
    assert all(type(r) is dict for r in rows)
    assert engine.executed == [("SELECT genre_id, name FROM genre WHERE name ILIKE $1", ("%r%",))]
    assert engine.open == 0


def test_fetch_lets_driver_errors_through():
    engine = StubEngine(error=RuntimeError("relation \"genre\" does not exist"))

    with pytest.raises(RuntimeError):
        asyncio.run(SqlStore(engine).fetch("SELECT 1"))

    assert engine.open == 0


def test_query_wraps_statement_errors():
    cause = RuntimeError("syntax error at or near \"FROM\"")
    engine = StubEngine(error=cause)

    with pytest.raises(DatabaseQueryError) as exc:
        asyncio.run(SqlStore(engine).query("SELECT FROM"))

    assert str(exc.value) == "Database query failed"
    assert exc.value.__cause__ is cause
    assert engine.open == 0


def test_query_wraps_connection_errors():
    engine = StubEngine(connect_error=OSError("connection refused"))

    with pytest.raises(DatabaseQueryError) as exc:
        asyncio.run(SqlStore(engine).query("SELECT 1"))

    assert isinstance(exc.value.__cause__, OSError)
    assert engine.executed == []


def test_query_returns_rows_when_nothing_fails():
    engine = StubEngine([{"count": 3}])
    assert asyncio.run(SqlStore(engine).query("SELECT COUNT(*) AS count FROM genre")) == [{"count": 3}]


def test_concurrent_fetches_use_separate_connections():
    engine = StubEngine([{"count": 1}])
    store = SqlStore(engine)

    async def both():
        return await asyncio.gather(store.fetch("SELECT 1"), store.fetch("SELECT 2"))

    first, second = asyncio.run(both())

    assert first == second == [{"count": 1}]
    assert engine.opened == 2
    assert engine.open == 0
