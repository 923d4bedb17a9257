from .listing_service import ListingService
from .title_service import TitleService
from .provider_service import ProviderService
from .viewer_service import ViewerService
from .dashboard_service import DashboardService
from .analytics_service import AnalyticsService
from .notification_service import NotificationService
__all__=[
    "ListingService",
    "TitleService",
    "ProviderService",
    "ViewerService",
    "DashboardService",
    "AnalyticsService",
    "NotificationService",
    ]
