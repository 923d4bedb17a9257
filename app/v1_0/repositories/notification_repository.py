from typing import List

from app.storage.database import QueryStore, Row
from .query_builder import bound_text

EXPIRING_LICENSES = """SELECT l.license_id, t.name AS title_name, l.end_date,
       (l.end_date - CURRENT_DATE) AS days_remaining
FROM license l
JOIN title t ON l.title_id = t.title_id
WHERE l.is_active = true
  AND l.is_deleted = false
  AND l.end_date BETWEEN CURRENT_DATE AND CURRENT_DATE + make_interval(days => :days)
ORDER BY l.end_date ASC
LIMIT :limit"""

RECENT_TITLES = """SELECT t.title_id, t.name, t.original_release_date
FROM title t
WHERE t.is_deleted = false
  AND t.original_release_date > CURRENT_DATE - make_interval(days => :days)
ORDER BY t.original_release_date DESC
LIMIT :limit"""


class NotificationRepository:
    async def expiring_licenses(self, store: QueryStore, days: int = 30, limit: int = 5) -> List[Row]:
        """Active licenses ending within ``days``, soonest first."""
        return await store.query(*bound_text(EXPIRING_LICENSES, days=days, limit=limit))

    async def recent_titles(self, store: QueryStore, days: int = 7, limit: int = 5) -> List[Row]:
        """Live titles released in the last ``days``, newest first."""
        return await store.query(*bound_text(RECENT_TITLES, days=days, limit=limit))
