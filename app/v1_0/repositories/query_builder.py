from typing import Any, List, Mapping, Optional, Tuple

from sqlalchemy import ColumnElement, bindparam, literal_column, select, text
from sqlalchemy.dialects.postgresql.asyncpg import dialect as asyncpg_dialect
from sqlalchemy.sql import ClauseElement, Select

from app.storage.database import InvalidListRequest
from app.v1_0.entities.page import QuerySpec

SORT_DIRECTIONS = ("ASC", "DESC")

# renders ``$n`` placeholders, the form SqlStore hands to the driver
_DIALECT = asyncpg_dialect()


def compile_statement(stmt: ClauseElement) -> Tuple[str, Tuple[Any, ...]]:
    """Compile ``stmt`` for asyncpg and return its SQL with the positional params."""
    compiled = stmt.compile(dialect=_DIALECT)
    values = compiled.construct_params(escape_names=False)
    return str(compiled), tuple(values[name] for name in compiled.positiontup or ())


def param(name: str, value: Any):
    return bindparam(name, value, unique=True)


def bound_text(statement: str, **values: Any) -> Tuple[str, Tuple[Any, ...]]:
    """Compile a fixed statement whose ``:name`` markers take ``values``."""
    return compile_statement(text(statement).bindparams(*(param(k, v) for k, v in values.items())))


class ListQueryBuilder:
    """
    Assembles the base/count query pair for a list view.

    Criteria are SQLAlchemy column expressions or ``text()`` clauses with
    bound parameters; they are ANDed in insertion order and shared by both
    statements. Caller text only ever reaches the database as a bound value.
    ORDER BY only ever renders a column from ``sortable``.
    """

    def __init__(
        self,
        *,
        select: str,
        from_: str,
        sortable: Mapping[str, str],
        default_sort: str,
        count_from: Optional[str] = None,
        count_expr: str = "COUNT(*)",
        group_by: Optional[str] = None,
    ) -> None:
        if default_sort not in sortable:
            raise ValueError(f"default_sort {default_sort!r} is not sortable")
        self.select = select
        self.from_ = from_
        self.sortable = dict(sortable)
        self.count_from = count_from or from_
        self.count_expr = count_expr
        self.group_by = group_by
        self._criteria: List[ColumnElement[Any]] = []
        self._sort_column = self.sortable[default_sort]
        self._sort_direction = "ASC"

    def where(self, *criteria: ColumnElement[Any]) -> "ListQueryBuilder":
        self._criteria.extend(criteria)
        return self

    def order_by(self, key: Optional[str], direction: Optional[str] = "ASC") -> "ListQueryBuilder":
        """
        Pick the sort column by public key (``"name"``) or by the column it
        maps to (``"t.name"``). Unknown keys and directions are rejected.
        """
        if key is not None:
            if key in self.sortable:
                self._sort_column = self.sortable[key]
            elif key in self.sortable.values():
                self._sort_column = key
            else:
                raise InvalidListRequest(f"Unsupported sort field: {key}")

        d = (direction or "ASC").upper()
        if d not in SORT_DIRECTIONS:
            raise InvalidListRequest(f"Unsupported sort order: {direction}")
        self._sort_direction = d
        return self

    def base_statement(self) -> Select:
        stmt = select(literal_column(self.select)).select_from(text(self.from_)).where(*self._criteria)
        if self.group_by:
            stmt = stmt.group_by(literal_column(self.group_by))
        column = literal_column(self._sort_column)
        return stmt.order_by(column.desc() if self._sort_direction == "DESC" else column.asc())

    def count_statement(self) -> Select:
        return (
            select(literal_column(self.count_expr).label("count"))
            .select_from(text(self.count_from))
            .where(*self._criteria)
        )

    def build(self, *, page: int = 1, page_size: int = 10, show_all: bool = False) -> QuerySpec:
        base_query, params = compile_statement(self.base_statement())
        count_query, count_params = compile_statement(self.count_statement())
        if count_params != params:
            raise ValueError("count and base queries bind different parameters")

        return QuerySpec(
            base_query=base_query,
            count_query=count_query,
            params=params,
            page=page,
            page_size=page_size,
            show_all=show_all,
        )
