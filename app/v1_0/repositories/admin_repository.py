from typing import Optional

from app.v1_0.schemas import StatusFilters
from .base_repository import ListingRepository, search_predicate, status_predicate
from .query_builder import ListQueryBuilder

class AdminRepository(ListingRepository[StatusFilters]):
    select = "a.admin_id, a.username, a.email, a.role, a.created_date, a.is_deleted"
    from_ = "admin a"
    sortable = {
        "admin_id": "a.admin_id",
        "username": "a.username",
        "email": "a.email",
        "role": "a.role",
        "created_date": "a.created_date",
    }
    default_sort = "admin_id"

    def apply_filters(
        self,
        qb: ListQueryBuilder,
        search: Optional[str],
        filters: Optional[StatusFilters],
    ) -> None:
        f = filters or StatusFilters()
        qb.where(status_predicate("a", f.status))
        if search:
            qb.where(search_predicate(search, "a.username", "a.email", "a.role"))
