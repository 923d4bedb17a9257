from fastapi import APIRouter, HTTPException, Depends
from dependency_injector.wiring import inject, Provide

from app.storage.database import SqlStore, get_store
from app.app_containers import ApplicationContainer
from app.core.logger import logger

from app.v1_0.schemas import ListParams
from app.v1_0.entities import OriginPageDTO
from app.v1_0.services import ListingService
from .list_params import get_list_params

router = APIRouter(prefix="/origins", tags=["Origins"])

@router.get(
    "/page",
    response_model=OriginPageDTO,
    summary="List origins paginated",
)
@inject
async def list_origins_paginated(
    params: ListParams = Depends(get_list_params),
    store: SqlStore = Depends(get_store),
    service: ListingService = Depends(Provide[ApplicationContainer.api_container.origin_service]),
):
    logger.debug(f"[OriginRouter] list_paginated page={params.page} show_all={params.show_all}")
    try:
        return await service.list_paginated(params, store)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[OriginRouter] list_paginated error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to list origins")
