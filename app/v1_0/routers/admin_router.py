from fastapi import APIRouter, HTTPException, Depends, Query
from dependency_injector.wiring import inject, Provide

from app.storage.database import SqlStore, get_store
from app.app_containers import ApplicationContainer
from app.core.logger import logger

from app.v1_0.schemas import ListParams, StatusFilters, RecordStatus
from app.v1_0.entities import AdminPageDTO
from app.v1_0.services import ListingService
from .list_params import get_list_params

router = APIRouter(prefix="/admins", tags=["Admins"])

@router.get(
    "/page",
    response_model=AdminPageDTO,
    summary="List admins paginated",
)
@inject
async def list_admins_paginated(
    params: ListParams = Depends(get_list_params),
    status: RecordStatus = Query("active"),
    store: SqlStore = Depends(get_store),
    service: ListingService = Depends(Provide[ApplicationContainer.api_container.admin_service]),
):
    logger.debug(f"[AdminRouter] list_paginated page={params.page} status={status}")
    try:
        return await service.list_paginated(params, store, StatusFilters(status=status))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[AdminRouter] list_paginated error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to list admins")
