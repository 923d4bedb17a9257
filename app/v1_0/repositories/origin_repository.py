from typing import Optional

from pydantic import BaseModel

from .base_repository import ListingRepository, search_predicate
from .query_builder import ListQueryBuilder

class OriginRepository(ListingRepository[BaseModel]):
    select = "o.origin_id, o.country, o.language, COUNT(t.title_id) AS title_count"
    from_ = """origin o
LEFT JOIN title t ON o.origin_id = t.origin_id"""
    count_from = "origin o"
    group_by = "o.origin_id, o.country, o.language"
    sortable = {
        "origin_id": "o.origin_id",
        "country": "o.country",
        "language": "o.language",
        "title_count": "title_count",
    }
    default_sort = "origin_id"

    def apply_filters(
        self,
        qb: ListQueryBuilder,
        search: Optional[str],
        filters: Optional[BaseModel],
    ) -> None:
        if search:
            qb.where(search_predicate(search, "o.country", "o.language"))
