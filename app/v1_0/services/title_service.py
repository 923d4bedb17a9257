from datetime import date
from typing import Optional

from fastapi import HTTPException, status

from app.core.logger import logger
from app.storage.database import DatabaseQueryError, QueryStore
from app.v1_0.entities import (
    TitleRowDTO,
    TitleFilterOptionsDTO,
    OriginOptionDTO,
    GenreOptionDTO,
    TitleDetailDTO,
    TitleLicenseDTO,
    TitleViewStatDTO,
    TitleInteractionStatDTO,
    TitleHistoryDTO,
    TitleHistoryEventDTO,
)
from app.v1_0.repositories import TitleRepository, gather_or_cancel
from .listing_service import ListingService


class TitleService(ListingService[TitleRowDTO]):
    def __init__(self, title_repository: TitleRepository) -> None:
        super().__init__(title_repository, "titles", TitleRowDTO)
        self.title_repository = title_repository

    async def filter_options(self, store: QueryStore) -> TitleFilterOptionsDTO:
        """
        Collect the choices for the titles list filters.

        Raises:
            HTTPException: 500 if any of the lookups fails.
        """
        logger.debug("[TitlesService] filter options")
        try:
            opts = await self.title_repository.filter_options(store)
        except DatabaseQueryError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to load title filters",
            )

        return TitleFilterOptionsDTO(
            types=[r["type"] for r in opts["types"]],
            origins=[
                OriginOptionDTO(
                    origin_id=r["origin_id"],
                    country=r["country"],
                    language=r["language"],
                )
                for r in opts["origins"]
            ],
            genres=[
                GenreOptionDTO(genre_id=r["genre_id"], name=r["name"])
                for r in opts["genres"]
            ],
        )

    def _not_found(self, title_id: int) -> HTTPException:
        logger.info("[TitlesService] title %s not found", title_id)
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Title not found")

    async def get_detail(self, store: QueryStore, title_id: int) -> TitleDetailDTO:
        """
        One title with its genres, licenses and daily stats.

        Raises:
            HTTPException:
                - 404 if the title does not exist.
                - 500 if any of the reads fails.
        """
        try:
            found = await self.title_repository.detail(store, title_id)
        except DatabaseQueryError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to load title",
            )
        if found is None:
            raise self._not_found(title_id)

        return TitleDetailDTO(
            **dict(found["title"]),
            genres=[GenreOptionDTO(genre_id=r["genre_id"], name=r["name"]) for r in found["genres"]],
            licenses=[TitleLicenseDTO(**dict(r)) for r in found["licenses"]],
            view_stats=[TitleViewStatDTO(date=r["date"], views=r["views"]) for r in found["view_stats"]],
            interaction_stats=[
                TitleInteractionStatDTO(date=r["date"], likes=r["likes"], list_adds=r["list_adds"])
                for r in found["interaction_stats"]
            ],
        )

    async def get_history(
        self,
        store: QueryStore,
        title_id: int,
        today: Optional[date] = None,
    ) -> TitleHistoryDTO:
        """
        Timeline of a title, newest first: its release and the start and
        end of each license. License ends after ``today`` are not listed.

        Raises:
            HTTPException:
                - 404 if the title does not exist.
                - 500 if either read fails.
        """
        try:
            title, licenses = await gather_or_cancel(
                self.title_repository.get_by_id(store, title_id),
                self.title_repository.licenses_of(store, title_id),
            )
        except DatabaseQueryError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to load title history",
            )
        if title is None:
            raise self._not_found(title_id)

        today = today or date.today()
        events = []
        if title["original_release_date"] is not None:
            events.append(TitleHistoryEventDTO(
                date=title["original_release_date"],
                action="Released",
                details=f"{title['type']} released",
            ))
        for r in licenses:
            events.append(TitleHistoryEventDTO(
                date=r["start_date"],
                action="License started",
                details=f"Licensed from {r['provider_name']} (license {r['license_id']})",
            ))
            if r["end_date"] <= today:
                events.append(TitleHistoryEventDTO(
                    date=r["end_date"],
                    action="License ended",
                    details=f"License {r['license_id']} with {r['provider_name']} ended",
                ))
        events.sort(key=lambda e: e.date, reverse=True)

        return TitleHistoryDTO(
            title_id=title["title_id"],
            name=title["name"],
            is_deleted=title["is_deleted"],
            events=events,
        )
