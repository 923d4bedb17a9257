from typing import List, Optional

from app.storage.database import QueryStore, Row
from app.v1_0.schemas import StatusFilters
from .base_repository import ListingRepository, search_predicate, status_predicate
from .query_builder import ListQueryBuilder, bound_text

PROVIDER_BY_ID = """SELECT provider_id, name, email, phone, address, is_deleted
FROM contentprovider
WHERE provider_id = :provider_id"""

PROVIDER_LICENSES = """SELECT l.license_id, l.start_date, l.end_date, l.is_active,
       t.title_id, t.name AS title_name
FROM license l
JOIN title t ON l.title_id = t.title_id
WHERE l.provider_id = :provider_id
ORDER BY l.end_date DESC"""

class ProviderRepository(ListingRepository[StatusFilters]):
    select = """cp.provider_id, cp.name, cp.email, cp.phone, cp.is_deleted,
       COUNT(l.license_id) AS license_count"""
    from_ = """contentprovider cp
LEFT JOIN license l ON cp.provider_id = l.provider_id"""
    count_from = "contentprovider cp"
    group_by = "cp.provider_id, cp.name, cp.email, cp.phone, cp.is_deleted"
    sortable = {
        "provider_id": "cp.provider_id",
        "name": "cp.name",
        "email": "cp.email",
        "phone": "cp.phone",
        "license_count": "license_count",
    }
    default_sort = "provider_id"

    def apply_filters(
        self,
        qb: ListQueryBuilder,
        search: Optional[str],
        filters: Optional[StatusFilters],
    ) -> None:
        f = filters or StatusFilters()
        qb.where(status_predicate("cp", f.status))
        if search:
            qb.where(search_predicate(search, "cp.name", "cp.email", "cp.phone"))

    async def get_by_id(self, store: QueryStore, provider_id: int) -> Optional[Row]:
        rows = await store.query(*bound_text(PROVIDER_BY_ID, provider_id=provider_id))
        return rows[0] if rows else None

    async def licenses_of(self, store: QueryStore, provider_id: int) -> List[Row]:
        return await store.query(*bound_text(PROVIDER_LICENSES, provider_id=provider_id))
