from fastapi import APIRouter, HTTPException, Depends, Path
from dependency_injector.wiring import inject, Provide

from app.storage.database import SqlStore, get_store
from app.app_containers import ApplicationContainer
from app.core.logger import logger

from app.v1_0.schemas import ListParams
from app.v1_0.entities import ViewerPageDTO, ViewerDetailDTO
from app.v1_0.services import ViewerService
from .list_params import get_list_params

router = APIRouter(prefix="/viewers", tags=["Viewers"])

@router.get(
    "/page",
    response_model=ViewerPageDTO,
    summary="List viewers paginated",
)
@inject
async def list_viewers_paginated(
    params: ListParams = Depends(get_list_params),
    store: SqlStore = Depends(get_store),
    service: ViewerService = Depends(Provide[ApplicationContainer.api_container.viewer_service]),
):
    logger.debug(f"[ViewerRouter] list_paginated page={params.page} show_all={params.show_all}")
    try:
        return await service.list_paginated(params, store)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[ViewerRouter] list_paginated error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to list viewers")

@router.get(
    "/{viewer_id}",
    response_model=ViewerDetailDTO,
    summary="Get one viewer",
)
@inject
async def get_viewer(
    viewer_id: int = Path(..., ge=1),
    store: SqlStore = Depends(get_store),
    service: ViewerService = Depends(Provide[ApplicationContainer.api_container.viewer_service]),
):
    logger.debug(f"[ViewerRouter] get viewer_id={viewer_id}")
    try:
        return await service.get_detail(store, viewer_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[ViewerRouter] get error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load viewer")
