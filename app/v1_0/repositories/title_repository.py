from typing import Any, Dict, List, Optional

from sqlalchemy import text

from app.storage.database import QueryStore, Row
from app.v1_0.schemas import TitleFilters
from .concurrent import gather_or_cancel
from .base_repository import ListingRepository, equals, search_predicate, status_predicate
from .query_builder import ListQueryBuilder, bound_text, param

TITLE_BY_ID = """SELECT t.title_id, t.name, t.type, t.original_release_date, t.is_original,
       t.season_count, t.episode_count, t.is_deleted,
       o.country, o.language, o.origin_id
FROM title t
JOIN origin o ON t.origin_id = o.origin_id
WHERE t.title_id = :title_id"""

TITLE_GENRES = """SELECT g.genre_id, g.name
FROM genre g
JOIN title_genre tg ON g.genre_id = tg.genre_id
WHERE tg.title_id = :title_id
ORDER BY g.name"""

TITLE_LICENSES = """SELECT l.license_id, l.start_date, l.end_date, l.is_active,
       cp.provider_id, cp.name AS provider_name
FROM license l
JOIN contentprovider cp ON l.provider_id = cp.provider_id
WHERE l.title_id = :title_id
ORDER BY l.end_date DESC"""

TITLE_VIEWS = """SELECT date, views
FROM viewcount
WHERE title_id = :title_id
ORDER BY date
LIMIT :limit"""

TITLE_INTERACTIONS = """SELECT date, likes, list_adds
FROM interactionstats
WHERE title_id = :title_id
ORDER BY date
LIMIT :limit"""


class TitleRepository(ListingRepository[TitleFilters]):
    select = """t.title_id, t.name, t.type, t.original_release_date, t.is_original,
       t.season_count, t.episode_count, t.is_deleted,
       o.country, o.language, o.origin_id,
       ARRAY_REMOVE(ARRAY_AGG(g.name ORDER BY g.name), NULL) AS genres"""
    from_ = """title t
JOIN origin o ON t.origin_id = o.origin_id
LEFT JOIN title_genre tg ON t.title_id = tg.title_id
LEFT JOIN genre g ON tg.genre_id = g.genre_id"""
    count_expr = "COUNT(DISTINCT t.title_id)"
    group_by = """t.title_id, t.name, t.type, t.original_release_date, t.is_original,
         t.season_count, t.episode_count, t.is_deleted,
         o.country, o.language, o.origin_id"""
    sortable = {
        "title_id": "t.title_id",
        "name": "t.name",
        "type": "t.type",
        "original_release_date": "t.original_release_date",
        "is_original": "t.is_original",
        "season_count": "t.season_count",
        "episode_count": "t.episode_count",
        "country": "o.country",
        "language": "o.language",
    }
    default_sort = "title_id"

    def apply_filters(
        self,
        qb: ListQueryBuilder,
        search: Optional[str],
        filters: Optional[TitleFilters],
    ) -> None:
        f = filters or TitleFilters()
        qb.where(status_predicate("t", f.status))
        if search:
            qb.where(search_predicate(search, "t.name", "o.country", "o.language"))
        if f.type:
            qb.where(equals("t.type", "type", f.type))
        if f.origin_id is not None:
            qb.where(equals("o.origin_id", "origin_id", f.origin_id))
        if f.genre_id is not None:
            qb.where(
                text(
                    "EXISTS (SELECT 1 FROM title_genre tgf "
                    "WHERE tgf.title_id = t.title_id AND tgf.genre_id = :genre_id)"
                ).bindparams(param("genre_id", f.genre_id))
            )

    async def filter_options(self, store: QueryStore) -> Dict[str, List[Dict[str, Any]]]:
        """Distinct title types, all origins and all genres, read concurrently."""
        types, origins, genres = await gather_or_cancel(
            store.query("SELECT DISTINCT type FROM title ORDER BY type"),
            store.query("SELECT origin_id, country, language FROM origin ORDER BY country, language"),
            store.query("SELECT genre_id, name FROM genre ORDER BY name"),
        )
        return {"types": types, "origins": origins, "genres": genres}

    async def get_by_id(self, store: QueryStore, title_id: int) -> Optional[Row]:
        rows = await store.query(*bound_text(TITLE_BY_ID, title_id=title_id))
        return rows[0] if rows else None

    async def detail(self, store: QueryStore, title_id: int, stats_limit: int = 30) -> Optional[Dict[str, Any]]:
        """
        The title row plus its genres, licenses and per-day stats, or None if
        there is no such title. Soft-deleted titles are returned as well.
        """
        title = await self.get_by_id(store, title_id)
        if title is None:
            return None
        genres, licenses, views, interactions = await gather_or_cancel(
            store.query(*bound_text(TITLE_GENRES, title_id=title_id)),
            store.query(*bound_text(TITLE_LICENSES, title_id=title_id)),
            store.query(*bound_text(TITLE_VIEWS, title_id=title_id, limit=stats_limit)),
            store.query(*bound_text(TITLE_INTERACTIONS, title_id=title_id, limit=stats_limit)),
        )
        return {
            "title": title,
            "genres": genres,
            "licenses": licenses,
            "view_stats": views,
            "interaction_stats": interactions,
        }

    async def licenses_of(self, store: QueryStore, title_id: int) -> List[Row]:
        return await store.query(*bound_text(TITLE_LICENSES, title_id=title_id))
