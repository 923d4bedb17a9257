from typing import Optional

from sqlalchemy import false, literal_column, text, true

from app.v1_0.schemas import LicenseFilters
from .base_repository import ListingRepository, search_predicate, status_predicate
from .query_builder import ListQueryBuilder, param

EXPIRING_WINDOW_DAYS = 30

class LicenseRepository(ListingRepository[LicenseFilters]):
    select = """l.license_id, l.start_date, l.end_date, l.is_active, l.is_deleted,
       t.title_id, t.name AS title_name,
       cp.provider_id, cp.name AS provider_name,
       (l.end_date - CURRENT_DATE) AS days_remaining"""
    from_ = """license l
JOIN title t ON l.title_id = t.title_id
JOIN contentprovider cp ON l.provider_id = cp.provider_id"""
    sortable = {
        "license_id": "l.license_id",
        "start_date": "l.start_date",
        "end_date": "l.end_date",
        "is_active": "l.is_active",
        "title_name": "t.name",
        "provider_name": "cp.name",
        "days_remaining": "days_remaining",
    }
    default_sort = "license_id"

    def apply_filters(
        self,
        qb: ListQueryBuilder,
        search: Optional[str],
        filters: Optional[LicenseFilters],
    ) -> None:
        f = filters or LicenseFilters()
        qb.where(status_predicate("l", f.status))
        if search:
            qb.where(search_predicate(search, "t.name", "cp.name"))

        is_active = literal_column("l.is_active")
        if f.filter == "active":
            qb.where(is_active == true())
        elif f.filter == "inactive":
            qb.where(is_active == false())
        elif f.filter == "expiring":
            qb.where(
                is_active == true(),
                text(
                    "l.end_date BETWEEN CURRENT_DATE AND CURRENT_DATE + make_interval(days => :days)"
                ).bindparams(param("days", EXPIRING_WINDOW_DAYS)),
            )
