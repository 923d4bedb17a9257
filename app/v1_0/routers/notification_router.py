from typing import List

from fastapi import APIRouter, HTTPException, Depends
from dependency_injector.wiring import inject, Provide

from app.storage.database import SqlStore, get_store
from app.app_containers import ApplicationContainer
from app.core.logger import logger

from app.v1_0.entities import NotificationDTO
from app.v1_0.services import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])

@router.get(
    "",
    response_model=List[NotificationDTO],
    summary="Expiring licenses and newly added titles",
)
@inject
async def list_notifications(
    store: SqlStore = Depends(get_store),
    service: NotificationService = Depends(Provide[ApplicationContainer.api_container.notification_service]),
):
    try:
        return await service.list_notifications(store)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[NotificationRouter] list error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load notifications")
