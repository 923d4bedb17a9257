from typing import Optional
from fastapi import Query

from app.core.settings import settings
from app.v1_0.schemas import ListParams


def get_list_params(
    page: Optional[int] = Query(None, ge=1, description="1-based page; omit with showAll unset to list everything"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    q: Optional[str] = Query(None, max_length=200, description="Case-insensitive search"),
    show_all: Optional[bool] = Query(None, alias="showAll"),
    sort: Optional[str] = Query(None, max_length=64),
    order: str = Query("ASC", pattern=r"(?i)^(asc|desc)$"),
) -> ListParams:
    return ListParams(
        page=page,
        size=size,
        q=q,
        show_all=show_all,
        sort=sort,
        order=order,
    )
