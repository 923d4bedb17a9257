from fastapi import APIRouter, HTTPException, Depends, Query
from dependency_injector.wiring import inject, Provide

from app.storage.database import SqlStore, get_store
from app.app_containers import ApplicationContainer
from app.core.logger import logger

from app.v1_0.entities import AnalyticsDTO
from app.v1_0.services import AnalyticsService

router = APIRouter(prefix="/analytics", tags=["Analytics"])

@router.get(
    "",
    response_model=AnalyticsDTO,
    summary="Views and interactions over time with top lists",
)
@inject
async def get_analytics(
    days: int = Query(30, ge=1, le=366),
    top_limit: int = Query(10, ge=1, le=100),
    store: SqlStore = Depends(get_store),
    service: AnalyticsService = Depends(Provide[ApplicationContainer.api_container.analytics_service]),
):
    logger.debug(f"[AnalyticsRouter] overview days={days} top_limit={top_limit}")
    try:
        return await service.overview(store, days, top_limit)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[AnalyticsRouter] overview error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load analytics")
