from fastapi import APIRouter, HTTPException, Depends, Path, Query
from dependency_injector.wiring import inject, Provide

from app.storage.database import SqlStore, get_store
from app.app_containers import ApplicationContainer
from app.core.logger import logger

from app.v1_0.schemas import ListParams, StatusFilters, RecordStatus
from app.v1_0.entities import ProviderPageDTO, ProviderDetailDTO
from app.v1_0.services import ProviderService
from .list_params import get_list_params

router = APIRouter(prefix="/providers", tags=["Providers"])

@router.get(
    "/page",
    response_model=ProviderPageDTO,
    summary="List providers paginated",
)
@inject
async def list_providers_paginated(
    params: ListParams = Depends(get_list_params),
    status: RecordStatus = Query("active"),
    store: SqlStore = Depends(get_store),
    service: ProviderService = Depends(Provide[ApplicationContainer.api_container.provider_service]),
):
    logger.debug(f"[ProviderRouter] list_paginated page={params.page} status={status}")
    try:
        return await service.list_paginated(params, store, StatusFilters(status=status))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[ProviderRouter] list_paginated error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to list providers")

@router.get(
    "/{provider_id}",
    response_model=ProviderDetailDTO,
    summary="Get one provider with its licenses",
)
@inject
async def get_provider(
    provider_id: int = Path(..., ge=1),
    store: SqlStore = Depends(get_store),
    service: ProviderService = Depends(Provide[ApplicationContainer.api_container.provider_service]),
):
    logger.debug(f"[ProviderRouter] get provider_id={provider_id}")
    try:
        return await service.get_detail(store, provider_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[ProviderRouter] get error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load provider")
