from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel

from app.core.logger import logger
from app.storage.database import DatabaseQueryError, InvalidListRequest, QueryStore
from app.v1_0.entities import PageDTO
from app.v1_0.repositories import ListingRepository
from app.v1_0.schemas import ListParams

RowT = TypeVar("RowT")


class ListingService(Generic[RowT]):
    def __init__(
        self,
        repository: ListingRepository,
        resource: str,
        row_type: Callable[..., RowT],
    ) -> None:
        self.repository = repository
        self.resource = resource
        self.row_type = row_type
        self._tag = f"[{resource.capitalize()}Service]"

    def _to_row(self, row: Mapping[str, Any]) -> RowT:
        return self.row_type(**dict(row))

    async def list_paginated(
        self,
        params: ListParams,
        store: QueryStore,
        filters: Optional[BaseModel] = None,
    ) -> PageDTO[RowT]:
        """
        List one page of the resource (or all of it in show-all mode).

        Args:
            params: Paging, search and sort input.
            store: Catalog store for this request.
            filters: Resource-specific filters, if the resource has any.

        Returns:
            PageDTO with typed rows and pagination metadata.

        Raises:
            HTTPException:
                - 400 on an unsupported sort field/order or page bounds.
                - 500 if the underlying queries fail.
        """
        logger.debug(
            "%s list page=%s size=%s show_all=%s sort=%s %s filters=%s",
            self._tag,
            params.effective_page,
            params.size,
            params.effective_show_all,
            params.sort,
            params.order,
            filters.model_dump() if filters is not None else None,
        )
        try:
            page = await self.repository.list_paginated(params, store, filters)
        except InvalidListRequest as e:
            logger.warning("%s rejected list request: %s", self._tag, e)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )
        except DatabaseQueryError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to load {self.resource}",
            )

        return PageDTO(
            data=[self._to_row(r) for r in page.data],
            total=page.total,
            total_pages=page.total_pages,
            page=page.page,
            page_size=page.page_size,
            has_next=page.has_next,
            has_prev=page.has_prev,
        )
