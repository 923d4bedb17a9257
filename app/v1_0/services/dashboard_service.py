from dataclasses import fields
from typing import Any, List, Mapping, Sequence

from fastapi import HTTPException, status

from app.core.logger import logger
from app.storage.database import DatabaseQueryError, QueryStore
from app.v1_0.entities import (
    DashboardStatsDTO,
    DashboardChartsDTO,
    ViewsByDateDTO,
    InteractionsByDateDTO,
    TitleViewsDTO,
    GenreViewsDTO,
    TypeViewsDTO,
    TypeCountDTO,
)
from app.v1_0.repositories import StatsRepository, gather_or_cancel


def _int(value: Any) -> int:
    # SUM over bigint comes back as Decimal, over no rows as NULL
    return int(value or 0)


def views_by_date(rows: Sequence[Mapping[str, Any]]) -> List[ViewsByDateDTO]:
    return [ViewsByDateDTO(date=r["date"], total_views=_int(r["total_views"])) for r in rows]


def interactions_by_date(rows: Sequence[Mapping[str, Any]]) -> List[InteractionsByDateDTO]:
    return [
        InteractionsByDateDTO(
            date=r["date"],
            total_likes=_int(r["total_likes"]),
            total_list_adds=_int(r["total_list_adds"]),
        )
        for r in rows
    ]


def top_titles(rows: Sequence[Mapping[str, Any]]) -> List[TitleViewsDTO]:
    return [TitleViewsDTO(title_id=r["title_id"], name=r["name"], total_views=_int(r["total_views"])) for r in rows]


def top_genres(rows: Sequence[Mapping[str, Any]]) -> List[GenreViewsDTO]:
    return [GenreViewsDTO(genre_id=r["genre_id"], name=r["name"], total_views=_int(r["total_views"])) for r in rows]


def top_types(rows: Sequence[Mapping[str, Any]]) -> List[TypeViewsDTO]:
    return [TypeViewsDTO(type=r["type"], total_views=_int(r["total_views"])) for r in rows]


class DashboardService:
    """Landing page numbers: the counter cards and the five overview charts."""

    def __init__(self, stats_repository: StatsRepository) -> None:
        self.stats_repository = stats_repository

    async def stats(self, store: QueryStore) -> DashboardStatsDTO:
        logger.debug("[DashboardService] stats")
        try:
            row = await self.stats_repository.summary(store)
        except DatabaseQueryError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to load dashboard stats",
            )
        return DashboardStatsDTO(**{f.name: _int(row.get(f.name)) for f in fields(DashboardStatsDTO)})

    async def charts(self, store: QueryStore, top_limit: int = 10) -> DashboardChartsDTO:
        """
        Views per day, the most viewed titles, genres and types, and the
        title count per type, read concurrently.

        Raises:
            HTTPException: 500 if any of the reads fails.
        """
        logger.debug("[DashboardService] charts top_limit=%s", top_limit)
        repo = self.stats_repository
        try:
            views, titles, genres, types, by_type = await gather_or_cancel(
                repo.views_by_date(store),
                repo.top_titles(store, top_limit),
                repo.top_genres(store, top_limit),
                repo.top_types(store),
                repo.content_by_type(store),
            )
        except DatabaseQueryError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to load dashboard charts",
            )

        return DashboardChartsDTO(
            views_by_date=views_by_date(views),
            top_titles=top_titles(titles),
            top_genres=top_genres(genres),
            top_types=top_types(types),
            content_by_type=[TypeCountDTO(type=r["type"], count=_int(r["count"])) for r in by_type],
        )
