from typing import Optional

from pydantic import BaseModel

from app.storage.database import QueryStore, Row
from .base_repository import ListingRepository, search_predicate
from .query_builder import ListQueryBuilder, bound_text

VIEWER_BY_ID = """SELECT viewer_id, username, email, created_date
FROM viewer
WHERE viewer_id = :viewer_id"""

class ViewerRepository(ListingRepository[BaseModel]):
    select = "viewer_id, username, email, created_date"
    from_ = "viewer"
    sortable = {
        "viewer_id": "viewer_id",
        "username": "username",
        "email": "email",
        "created_date": "created_date",
    }
    default_sort = "viewer_id"

    def apply_filters(
        self,
        qb: ListQueryBuilder,
        search: Optional[str],
        filters: Optional[BaseModel],
    ) -> None:
        if search:
            qb.where(search_predicate(search, "username", "email"))

    async def get_by_id(self, store: QueryStore, viewer_id: int) -> Optional[Row]:
        rows = await store.query(*bound_text(VIEWER_BY_ID, viewer_id=viewer_id))
        return rows[0] if rows else None
