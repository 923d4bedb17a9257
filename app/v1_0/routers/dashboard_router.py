from fastapi import APIRouter, HTTPException, Depends, Query
from dependency_injector.wiring import inject, Provide

from app.storage.database import SqlStore, get_store
from app.app_containers import ApplicationContainer
from app.core.logger import logger

from app.v1_0.entities import DashboardStatsDTO, DashboardChartsDTO
from app.v1_0.services import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

@router.get(
    "/stats",
    response_model=DashboardStatsDTO,
    summary="Catalog counters for the dashboard",
)
@inject
async def get_dashboard_stats(
    store: SqlStore = Depends(get_store),
    service: DashboardService = Depends(Provide[ApplicationContainer.api_container.dashboard_service]),
):
    logger.debug("[DashboardRouter] stats")
    try:
        return await service.stats(store)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[DashboardRouter] stats error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load dashboard stats")

@router.get(
    "/charts",
    response_model=DashboardChartsDTO,
    summary="Dashboard chart series",
)
@inject
async def get_dashboard_charts(
    top_limit: int = Query(10, ge=1, le=100),
    store: SqlStore = Depends(get_store),
    service: DashboardService = Depends(Provide[ApplicationContainer.api_container.dashboard_service]),
):
    logger.debug(f"[DashboardRouter] charts top_limit={top_limit}")
    try:
        return await service.charts(store, top_limit)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[DashboardRouter] charts error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load dashboard charts")
