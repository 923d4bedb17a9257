from math import ceil
from typing import Any, Mapping, Sequence

from app.core.logger import logger
from app.storage.database import DatabaseQueryError, InvalidListRequest, QueryStore
from app.v1_0.entities.page import PageDTO, QuerySpec
from .concurrent import gather_or_cancel


def window_clause(page: int, page_size: int) -> str:
    return f"LIMIT {page_size} OFFSET {(page - 1) * page_size}"


def _parse_count(rows: Sequence[Mapping[str, Any]]) -> int:
    total = int(rows[0]["count"])
    if total < 0:
        raise ValueError(f"negative count {total}")
    return total


async def paginated_query(
    store: QueryStore,
    spec: QuerySpec,
) -> PageDTO[Mapping[str, Any]]:
    """
    Run a list query as one page plus a total.

    The windowed ``base_query`` and the ``count_query`` are awaited together;
    both must succeed, and a failure in one cancels the other. In show-all
    mode the base query runs without a window and the result always reports
    page 1 of 1.

    Rows inserted or deleted between the two reads can leave ``total`` out of
    step with ``data``; nothing here pins a snapshot.

    Raises:
        InvalidListRequest: ``page`` or ``page_size`` below 1.
        DatabaseQueryError: either query failed or the count row was unusable.
    """
    if spec.page_size < 1:
        raise InvalidListRequest(f"page_size must be >= 1, got {spec.page_size}")
    if spec.page < 1:
        raise InvalidListRequest(f"page must be >= 1, got {spec.page}")

    data_query = spec.base_query
    if not spec.show_all:
        data_query = f"{spec.base_query.rstrip()} {window_clause(spec.page, spec.page_size)}"

    params = list(spec.params)

    try:
        rows, count_rows = await gather_or_cancel(
            store.fetch(data_query, params),
            store.fetch(spec.count_query, params),
        )
        total = _parse_count(count_rows)
    except Exception as e:
        logger.error("[paginated_query] Paginated query error: %s", e, exc_info=True)
        raise DatabaseQueryError() from e

    if spec.show_all:
        page, total_pages, page_size = 1, 1, len(rows)
    else:
        page, total_pages, page_size = spec.page, ceil(total / spec.page_size), spec.page_size

    logger.debug(
        "[paginated_query] page=%s/%s rows=%s total=%s show_all=%s",
        page, total_pages, len(rows), total, spec.show_all,
    )

    return PageDTO(
        data=list(rows),
        total=total,
        total_pages=total_pages,
        page=page,
        page_size=page_size,
        has_next=page < total_pages,
        has_prev=page > 1,
    )
