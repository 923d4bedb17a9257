from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy import ColumnElement, false, literal_column, or_, true

from app.storage.database import QueryStore
from app.v1_0.entities.page import PageDTO, QuerySpec
from app.v1_0.schemas import ListParams
from .paginated import paginated_query
from .query_builder import ListQueryBuilder, param

FiltersT = TypeVar("FiltersT", bound=BaseModel)


class ListingRepository(ABC, Generic[FiltersT]):
    """
    Read side of one catalog list view.

    Subclasses describe the SELECT (columns, joins, grouping, sortable
    columns) as class attributes and translate their filters into predicates
    in ``apply_filters``. Paging is delegated to ``paginated_query``.
    """

    select: ClassVar[str]
    from_: ClassVar[str]
    count_from: ClassVar[Optional[str]] = None
    count_expr: ClassVar[str] = "COUNT(*)"
    group_by: ClassVar[Optional[str]] = None
    sortable: ClassVar[Mapping[str, str]]
    default_sort: ClassVar[str]

    def new_query(self) -> ListQueryBuilder:
        return ListQueryBuilder(
            select=self.select,
            from_=self.from_,
            count_from=self.count_from,
            count_expr=self.count_expr,
            group_by=self.group_by,
            sortable=self.sortable,
            default_sort=self.default_sort,
        )

    @abstractmethod
    def apply_filters(
        self,
        qb: ListQueryBuilder,
        search: Optional[str],
        filters: Optional[FiltersT],
    ) -> None:
        """Add this view's WHERE criteria for ``search`` and ``filters`` to ``qb``."""

    def build_spec(self, params: ListParams, filters: Optional[FiltersT] = None) -> QuerySpec:
        qb = self.new_query()
        self.apply_filters(qb, params.q, filters)
        qb.order_by(params.sort, params.order)
        return qb.build(
            page=params.effective_page,
            page_size=params.size,
            show_all=params.effective_show_all,
        )

    async def list_paginated(
        self,
        params: ListParams,
        store: QueryStore,
        filters: Optional[FiltersT] = None,
    ) -> PageDTO[Mapping[str, Any]]:
        return await paginated_query(store, self.build_spec(params, filters))


def like(term: str) -> str:
    return f"%{term}%"


def search_predicate(term: str, *columns: str) -> ColumnElement[bool]:
    """Case-insensitive substring match of ``term`` against any of ``columns``."""
    pattern = param("search", like(term))
    return or_(*(literal_column(c).ilike(pattern) for c in columns)).self_group()


def status_predicate(alias: str, status: str) -> ColumnElement[bool]:
    return literal_column(f"{alias}.is_deleted") == (true() if status == "deleted" else false())


def equals(column: str, name: str, value: Any) -> ColumnElement[bool]:
    return literal_column(column) == param(name, value)
