from .page import PageDTO, QuerySpec
from .title_DTO import (
    TitleRowDTO,
    TitlePageDTO,
    TitleFilterOptionsDTO,
    OriginOptionDTO,
    GenreOptionDTO,
    TitleLicenseDTO,
    TitleViewStatDTO,
    TitleInteractionStatDTO,
    TitleDetailDTO,
    TitleHistoryEventDTO,
    TitleHistoryDTO,
)
from .license_DTO import LicenseRowDTO, LicensePageDTO
from .provider_DTO import ProviderRowDTO, ProviderPageDTO, ProviderLicenseDTO, ProviderDetailDTO
from .genre_DTO import GenreRowDTO, GenrePageDTO
from .origin_DTO import OriginRowDTO, OriginPageDTO
from .admin_DTO import AdminRowDTO, AdminPageDTO
from .viewer_DTO import ViewerRowDTO, ViewerPageDTO, ViewerDetailDTO
from .dashboard_DTO import (
    DashboardStatsDTO,
    ViewsByDateDTO,
    InteractionsByDateDTO,
    TitleViewsDTO,
    GenreViewsDTO,
    TypeViewsDTO,
    TypeCountDTO,
    DashboardChartsDTO,
    AnalyticsDTO,
)
from .notification_DTO import NotificationDTO, NotificationKind
