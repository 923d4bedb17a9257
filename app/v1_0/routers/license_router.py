from fastapi import APIRouter, HTTPException, Depends, Query
from dependency_injector.wiring import inject, Provide

from app.storage.database import SqlStore, get_store
from app.app_containers import ApplicationContainer
from app.core.logger import logger

from app.v1_0.schemas import ListParams, LicenseFilters, LicenseFilter, RecordStatus
from app.v1_0.entities import LicensePageDTO
from app.v1_0.services import ListingService
from .list_params import get_list_params

router = APIRouter(prefix="/licenses", tags=["Licenses"])

@router.get(
    "/page",
    response_model=LicensePageDTO,
    summary="List licenses paginated",
)
@inject
async def list_licenses_paginated(
    params: ListParams = Depends(get_list_params),
    status: RecordStatus = Query("active"),
    filter: LicenseFilter = Query("all", description="all | active | inactive | expiring (ends within 30 days)"),
    store: SqlStore = Depends(get_store),
    service: ListingService = Depends(Provide[ApplicationContainer.api_container.license_service]),
):
    logger.debug(f"[LicenseRouter] list_paginated page={params.page} status={status} filter={filter}")
    try:
        return await service.list_paginated(params, store, LicenseFilters(status=status, filter=filter))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[LicenseRouter] list_paginated error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to list licenses")
