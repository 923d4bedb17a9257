from fastapi import HTTPException, status

from app.core.logger import logger
from app.storage.database import DatabaseQueryError, QueryStore
from app.v1_0.entities import ProviderRowDTO, ProviderDetailDTO, ProviderLicenseDTO
from app.v1_0.repositories import ProviderRepository, gather_or_cancel
from .listing_service import ListingService


class ProviderService(ListingService[ProviderRowDTO]):
    def __init__(self, provider_repository: ProviderRepository) -> None:
        super().__init__(provider_repository, "providers", ProviderRowDTO)
        self.provider_repository = provider_repository

    async def get_detail(self, store: QueryStore, provider_id: int) -> ProviderDetailDTO:
        """
        A provider and every license it holds, latest end date first.

        Raises:
            HTTPException:
                - 404 if the provider does not exist.
                - 500 if either read fails.
        """
        try:
            provider, licenses = await gather_or_cancel(
                self.provider_repository.get_by_id(store, provider_id),
                self.provider_repository.licenses_of(store, provider_id),
            )
        except DatabaseQueryError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to load provider",
            )
        if provider is None:
            logger.info("[ProvidersService] provider %s not found", provider_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Provider not found")

        return ProviderDetailDTO(
            **dict(provider),
            licenses=[ProviderLicenseDTO(**dict(r)) for r in licenses],
        )
