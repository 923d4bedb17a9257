from datetime import datetime, timezone
from typing import List, Optional

from fastapi import HTTPException, status

from app.core.logger import logger
from app.storage.database import DatabaseQueryError, QueryStore
from app.v1_0.entities import NotificationDTO
from app.v1_0.repositories import NotificationRepository, gather_or_cancel


def _days(n: int) -> str:
    return f"{n} day" if n == 1 else f"{n} days"


class NotificationService:
    def __init__(self, notification_repository: NotificationRepository) -> None:
        self.notification_repository = notification_repository

    async def list_notifications(
        self,
        store: QueryStore,
        now: Optional[datetime] = None,
    ) -> List[NotificationDTO]:
        """
        Licenses expiring within 30 days, then titles released in the last
        week; at most five of each.

        Raises:
            HTTPException: 500 if either read fails.
        """
        repo = self.notification_repository
        try:
            licenses, titles = await gather_or_cancel(
                repo.expiring_licenses(store),
                repo.recent_titles(store),
            )
        except DatabaseQueryError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to load notifications",
            )

        now = now or datetime.now(timezone.utc)
        out: List[NotificationDTO] = []
        for r in licenses:
            remaining = round(float(r["days_remaining"] or 0))
            out.append(
                NotificationDTO(
                    id=f"license-{r['license_id']}",
                    kind="license_expiring",
                    title="License Expiring Soon",
                    message=f"\"{r['title_name']}\" license expires in {_days(remaining)}",
                    time=now,
                )
            )
        for r in titles:
            out.append(
                NotificationDTO(
                    id=f"title-{r['title_id']}",
                    kind="title_added",
                    title="New Title Added",
                    message=f"\"{r['name']}\" was added on {r['original_release_date'].isoformat()}",
                    time=now,
                )
            )

        logger.debug("[NotificationService] %s expiring, %s new", len(licenses), len(titles))
        return out
