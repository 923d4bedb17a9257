from typing import Optional

from pydantic import BaseModel

from .base_repository import ListingRepository, search_predicate
from .query_builder import ListQueryBuilder

class GenreRepository(ListingRepository[BaseModel]):
    select = "g.genre_id, g.name, COUNT(tg.title_id) AS title_count"
    from_ = """genre g
LEFT JOIN title_genre tg ON g.genre_id = tg.genre_id"""
    count_from = "genre g"
    group_by = "g.genre_id, g.name"
    sortable = {
        "genre_id": "g.genre_id",
        "name": "g.name",
        "title_count": "title_count",
    }
    default_sort = "genre_id"

    def apply_filters(
        self,
        qb: ListQueryBuilder,
        search: Optional[str],
        filters: Optional[BaseModel],
    ) -> None:
        if search:
            qb.where(search_predicate(search, "g.name"))
