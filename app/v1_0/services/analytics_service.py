from fastapi import HTTPException, status

from app.core.logger import logger
from app.storage.database import DatabaseQueryError, QueryStore
from app.v1_0.entities import AnalyticsDTO
from app.v1_0.repositories import StatsRepository, gather_or_cancel
from .dashboard_service import interactions_by_date, top_genres, top_titles, top_types, views_by_date


class AnalyticsService:
    def __init__(self, stats_repository: StatsRepository) -> None:
        self.stats_repository = stats_repository

    async def overview(self, store: QueryStore, days: int = 30, top_limit: int = 10) -> AnalyticsDTO:
        """
        Daily views and interactions for the first ``days`` days on record
        plus the top titles, genres and types by views.

        Raises:
            HTTPException: 500 if any of the reads fails.
        """
        logger.debug("[AnalyticsService] overview days=%s top_limit=%s", days, top_limit)
        repo = self.stats_repository
        try:
            views, interactions, titles, genres, types = await gather_or_cancel(
                repo.views_by_date(store, days),
                repo.interactions_by_date(store, days),
                repo.top_titles(store, top_limit),
                repo.top_genres(store, top_limit),
                repo.top_types(store),
            )
        except DatabaseQueryError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to load analytics",
            )

        return AnalyticsDTO(
            views_over_time=views_by_date(views),
            interactions_over_time=interactions_by_date(interactions),
            top_titles=top_titles(titles),
            top_genres=top_genres(genres),
            top_types=top_types(types),
        )
