from typing import Any, Dict, List

from app.storage.database import QueryStore, Row
from .query_builder import bound_text

RECENT_WINDOW_DAYS = 30

SUMMARY = """SELECT
  (SELECT COUNT(*) FROM title) AS all_titles,
  (SELECT COUNT(*) FROM title WHERE is_deleted = false) AS active_titles,
  (SELECT COUNT(*) FROM title WHERE is_deleted = true) AS deleted_titles,
  (SELECT COUNT(*) FROM viewer) AS viewers,
  (SELECT COUNT(*) FROM contentprovider) AS providers,
  (SELECT COUNT(*) FROM genre) AS genres,
  (SELECT COALESCE(SUM(views), 0) FROM viewcount) AS total_views,
  (SELECT COALESCE(SUM(likes), 0) FROM interactionstats) AS total_likes,
  (SELECT COALESCE(SUM(list_adds), 0) FROM interactionstats) AS total_list_adds,
  (SELECT COUNT(DISTINCT viewer_id) FROM viewer
    WHERE created_date > NOW() - make_interval(days => :days)) AS active_users,
  (SELECT COUNT(*) FROM title
    WHERE original_release_date > NOW() - make_interval(days => :days)) AS new_titles,
  (SELECT COUNT(*) FROM license
    WHERE is_active = true AND end_date < NOW() + make_interval(days => :days)) AS expiring_licenses"""

VIEWS_BY_DATE = """SELECT date, SUM(views) AS total_views
FROM viewcount
GROUP BY date
ORDER BY date
LIMIT :limit"""

INTERACTIONS_BY_DATE = """SELECT date, SUM(likes) AS total_likes, SUM(list_adds) AS total_list_adds
FROM interactionstats
GROUP BY date
ORDER BY date
LIMIT :limit"""

TOP_TITLES = """SELECT t.title_id, t.name, SUM(v.views) AS total_views
FROM title t
JOIN viewcount v ON t.title_id = v.title_id
GROUP BY t.title_id, t.name
ORDER BY total_views DESC
LIMIT :limit"""

TOP_GENRES = """SELECT g.genre_id, g.name, SUM(v.views) AS total_views
FROM genre g
JOIN title_genre tg ON g.genre_id = tg.genre_id
JOIN viewcount v ON tg.title_id = v.title_id
GROUP BY g.genre_id, g.name
ORDER BY total_views DESC
LIMIT :limit"""

TOP_TYPES = """SELECT t.type, SUM(v.views) AS total_views
FROM title t
JOIN viewcount v ON t.title_id = v.title_id
GROUP BY t.type
ORDER BY total_views DESC"""

CONTENT_BY_TYPE = """SELECT type, COUNT(*) AS count
FROM title
GROUP BY type
ORDER BY count DESC"""


class StatsRepository:
    """
    Aggregates over the catalog and its view/interaction counters.

    Date series are the earliest ``limit`` days on record; top lists are
    ranked by summed views.
    """

    async def summary(self, store: QueryStore, days: int = RECENT_WINDOW_DAYS) -> Dict[str, Any]:
        rows = await store.query(*bound_text(SUMMARY, days=days))
        return dict(rows[0])

    async def views_by_date(self, store: QueryStore, limit: int = 30) -> List[Row]:
        return await store.query(*bound_text(VIEWS_BY_DATE, limit=limit))

    async def interactions_by_date(self, store: QueryStore, limit: int = 30) -> List[Row]:
        return await store.query(*bound_text(INTERACTIONS_BY_DATE, limit=limit))

    async def top_titles(self, store: QueryStore, limit: int = 10) -> List[Row]:
        return await store.query(*bound_text(TOP_TITLES, limit=limit))

    async def top_genres(self, store: QueryStore, limit: int = 10) -> List[Row]:
        return await store.query(*bound_text(TOP_GENRES, limit=limit))

    async def top_types(self, store: QueryStore) -> List[Row]:
        return await store.query(TOP_TYPES)

    async def content_by_type(self, store: QueryStore) -> List[Row]:
        return await store.query(CONTENT_BY_TYPE)
