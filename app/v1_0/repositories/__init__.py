from .base_repository import ListingRepository
from .concurrent import gather_or_cancel
from .paginated import paginated_query, window_clause
from .query_builder import ListQueryBuilder, bound_text, compile_statement
from .title_repository import TitleRepository
from .license_repository import LicenseRepository
from .provider_repository import ProviderRepository
from .genre_repository import GenreRepository
from .origin_repository import OriginRepository
from .admin_repository import AdminRepository
from .viewer_repository import ViewerRepository
from .stats_repository import StatsRepository
from .notification_repository import NotificationRepository
__all__ = [
    "ListingRepository",
    "gather_or_cancel",
    "paginated_query",
    "window_clause",
    "ListQueryBuilder",
    "bound_text",
    "compile_statement",
    "TitleRepository",
    "LicenseRepository",
    "ProviderRepository",
    "GenreRepository",
    "OriginRepository",
    "AdminRepository",
    "ViewerRepository",
    "StatsRepository",
    "NotificationRepository",
]
