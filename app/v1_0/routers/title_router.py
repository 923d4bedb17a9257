from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Path, Query
from dependency_injector.wiring import inject, Provide

from app.storage.database import SqlStore, get_store
from app.app_containers import ApplicationContainer
from app.core.logger import logger

from app.v1_0.schemas import ListParams, TitleFilters, RecordStatus
from app.v1_0.entities import TitlePageDTO, TitleFilterOptionsDTO, TitleDetailDTO, TitleHistoryDTO
from app.v1_0.services import TitleService
from .list_params import get_list_params

router = APIRouter(prefix="/titles", tags=["Titles"])

@router.get(
    "/page",
    response_model=TitlePageDTO,
    summary="List titles paginated",
)
@inject
async def list_titles_paginated(
    params: ListParams = Depends(get_list_params),
    status: RecordStatus = Query("active"),
    type: Optional[str] = Query(None, max_length=50),
    origin: Optional[int] = Query(None, ge=1),
    genre: Optional[int] = Query(None, ge=1),
    store: SqlStore = Depends(get_store),
    service: TitleService = Depends(Provide[ApplicationContainer.api_container.title_service]),
):
    logger.debug(
        f"[TitleRouter] list_paginated page={params.page} status={status} "
        f"type={type} origin={origin} genre={genre}"
    )
    filters = TitleFilters(status=status, type=type, origin_id=origin, genre_id=genre)
    try:
        return await service.list_paginated(params, store, filters)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[TitleRouter] list_paginated error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to list titles")

@router.get(
    "/filters",
    response_model=TitleFilterOptionsDTO,
    summary="Filter choices for the titles list",
)
@inject
async def get_title_filters(
    store: SqlStore = Depends(get_store),
    service: TitleService = Depends(Provide[ApplicationContainer.api_container.title_service]),
):
    logger.debug("[TitleRouter] filters")
    try:
        return await service.filter_options(store)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[TitleRouter] filters error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load title filters")

@router.get(
    "/{title_id}",
    response_model=TitleDetailDTO,
    summary="Get one title with its genres, licenses and stats",
)
@inject
async def get_title(
    title_id: int = Path(..., ge=1),
    store: SqlStore = Depends(get_store),
    service: TitleService = Depends(Provide[ApplicationContainer.api_container.title_service]),
):
    logger.debug(f"[TitleRouter] get title_id={title_id}")
    try:
        return await service.get_detail(store, title_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[TitleRouter] get error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load title")

@router.get(
    "/{title_id}/history",
    response_model=TitleHistoryDTO,
    summary="Release and license timeline of a title",
)
@inject
async def get_title_history(
    title_id: int = Path(..., ge=1),
    store: SqlStore = Depends(get_store),
    service: TitleService = Depends(Provide[ApplicationContainer.api_container.title_service]),
):
    logger.debug(f"[TitleRouter] history title_id={title_id}")
    try:
        return await service.get_history(store, title_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[TitleRouter] history error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load title history")
