from .title_router import router as title_router
from .license_router import router as license_router
from .provider_router import router as provider_router
from .genre_router import router as genre_router
from .origin_router import router as origin_router
from .admin_router import router as admin_router
from .viewer_router import router as viewer_router
from .dashboard_router import router as dashboard_router
from .analytics_router import router as analytics_router
from .notification_router import router as notification_router
defined_routers = [
    title_router,
    license_router,
    provider_router,
    genre_router,
    origin_router,
    admin_router,
    viewer_router,
    dashboard_router,
    analytics_router,
    notification_router,
    ]
