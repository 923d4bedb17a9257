from dependency_injector import containers, providers
from app.v1_0.repositories import (
    TitleRepository,
    LicenseRepository,
    ProviderRepository,
    GenreRepository,
    OriginRepository,
    AdminRepository,
    ViewerRepository,
    StatsRepository,
    NotificationRepository,
    )
from app.v1_0.entities import (
    LicenseRowDTO,
    GenreRowDTO,
    OriginRowDTO,
    AdminRowDTO,
    )
from app.v1_0.services import (
    ListingService,
    TitleService,
    ProviderService,
    ViewerService,
    DashboardService,
    AnalyticsService,
    NotificationService,
    )

class APIContainer(containers.DeclarativeContainer):
    title_repository = providers.Singleton(TitleRepository)
    license_repository = providers.Singleton(LicenseRepository)
    provider_repository = providers.Singleton(ProviderRepository)
    genre_repository = providers.Singleton(GenreRepository)
    origin_repository = providers.Singleton(OriginRepository)
    admin_repository = providers.Singleton(AdminRepository)
    viewer_repository = providers.Singleton(ViewerRepository)
    stats_repository = providers.Singleton(StatsRepository)
    notification_repository = providers.Singleton(NotificationRepository)

    title_service = providers.Singleton(
        TitleService,
        title_repository = title_repository
    )
    license_service = providers.Singleton(
        ListingService,
        repository = license_repository,
        resource = "licenses",
        row_type = LicenseRowDTO
    )
    provider_service = providers.Singleton(
        ProviderService,
        provider_repository = provider_repository
    )
    genre_service = providers.Singleton(
        ListingService,
        repository = genre_repository,
        resource = "genres",
        row_type = GenreRowDTO
    )
    origin_service = providers.Singleton(
        ListingService,
        repository = origin_repository,
        resource = "origins",
        row_type = OriginRowDTO
    )
    admin_service = providers.Singleton(
        ListingService,
        repository = admin_repository,
        resource = "admins",
        row_type = AdminRowDTO
    )
    viewer_service = providers.Singleton(
        ViewerService,
        viewer_repository = viewer_repository
    )
    dashboard_service = providers.Singleton(
        DashboardService,
        stats_repository = stats_repository
    )
    analytics_service = providers.Singleton(
        AnalyticsService,
        stats_repository = stats_repository
    )
    notification_service = providers.Singleton(
        NotificationService,
        notification_repository = notification_repository
    )
