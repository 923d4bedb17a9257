from fastapi import HTTPException, status

from app.storage.database import DatabaseQueryError, QueryStore
from app.v1_0.entities import ViewerRowDTO, ViewerDetailDTO
from app.v1_0.repositories import ViewerRepository
from .listing_service import ListingService


class ViewerService(ListingService[ViewerRowDTO]):
    def __init__(self, viewer_repository: ViewerRepository) -> None:
        super().__init__(viewer_repository, "viewers", ViewerRowDTO)
        self.viewer_repository = viewer_repository

    async def get_detail(self, store: QueryStore, viewer_id: int) -> ViewerDetailDTO:
        try:
            viewer = await self.viewer_repository.get_by_id(store, viewer_id)
        except DatabaseQueryError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to load viewer",
            )
        if viewer is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Viewer not found")
        return ViewerDetailDTO(**dict(viewer))
